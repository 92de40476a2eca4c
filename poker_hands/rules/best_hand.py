"""Best five-card hand search over any larger set of cards.

Used for games like Texas Hold'em where a player picks the best five of
seven cards. Every five-card combination is classified; the strongest one
wins, and among equally strong combinations the first one enumerated is
kept.
"""

import logging
from typing import List, Sequence, Tuple

from .cards import Card
from .errors import InvalidHandError
from .hands import HAND_SIZE, Hand, RankedHand, compare_ranked_hands, rank_hand

logger = logging.getLogger(__name__)


def all_hands(cards: Sequence[Card]) -> List[Hand]:
    """Return every five-card combination of the given cards.

    Combinations are produced in ascending index order (i < j < k < l < m),
    each exactly once.

    Raises:
        InvalidHandError: If fewer than five cards are given
    """
    n = len(cards)
    if n < HAND_SIZE:
        raise InvalidHandError(f"Need at least {HAND_SIZE} cards, got {n}")

    hands: List[Hand] = []
    for i in range(n):
        for j in range(i + 1, n):
            for k in range(j + 1, n):
                for l in range(k + 1, n):
                    for m in range(l + 1, n):
                        hands.append((cards[i], cards[j], cards[k], cards[l], cards[m]))
    return hands


def best_hand(cards: Sequence[Card]) -> Tuple[Hand, RankedHand]:
    """Find the best five-card hand among the given cards.

    Args:
        cards: Five or more Card objects (not modified)

    Returns:
        Tuple of (best five cards, their RankedHand)

    Raises:
        InvalidHandError: If fewer than five cards are given
    """
    hands = all_hands(cards)

    best = hands[0]
    best_ranked = rank_hand(best)
    for hand in hands[1:]:
        ranked = rank_hand(hand)
        # Strictly better only, so the first of several equal hands is kept
        if compare_ranked_hands(best_ranked, ranked) < 0:
            best = hand
            best_ranked = ranked

    logger.debug(
        "Searched %d combinations of %d cards, best is %s",
        len(hands),
        len(cards),
        best_ranked.category.name,
    )
    return best, best_ranked
