"""Deck construction, shuffling and dealing.

The only nondeterminism in the rules package lives here, behind an
injected random generator.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .cards import Card, RANKS, SUITS
from .errors import InvalidHandError

logger = logging.getLogger(__name__)

# Number of cards in a fresh deck
DECK_SIZE = len(SUITS) * len(RANKS)

RandomSource = Union[random.Random, np.random.Generator]

# Generator used by shuffle() when no rng is passed; reseeded by set_seed()
_default_rng = random.Random()


def seed_default_rng(seed: Optional[int] = None) -> None:
    """Reseed the generator shuffle() falls back on when given no rng."""
    _default_rng.seed(seed)


def fresh_deck() -> List[Card]:
    """Create a standard 52-card deck, ordered as if just opened.

    Returns:
        List of 52 Card objects, suit by suit, ranks ascending within a suit
    """
    deck = []
    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(suit=suit, rank=rank))
    return deck


def _draw_index(rng: RandomSource, upper: int) -> int:
    """Draw a uniform integer in [0, upper]."""
    if isinstance(rng, np.random.Generator):
        return int(rng.integers(0, upper + 1))
    return rng.randint(0, upper)


def shuffle(cards: Sequence[Card], rng: Optional[RandomSource] = None) -> List[Card]:
    """Return a shuffled copy of the given cards.

    Uses the Fisher-Yates (Knuth) shuffle: walk the index from the last
    position down to 1, swapping each card with a uniformly chosen card at or
    below it.

    Args:
        cards: Cards to shuffle (not modified)
        rng: ``random.Random`` or ``numpy.random.Generator``. The module's
             default generator (see :func:`seed_default_rng`) is used when
             omitted.

    Returns:
        New list holding the same cards in random order
    """
    if rng is None:
        rng = _default_rng

    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = _draw_index(rng, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    logger.debug("Shuffled %d cards with %s", len(shuffled), type(rng).__name__)
    return shuffled


def deal(deck: Sequence[Card], count: int) -> Tuple[List[Card], List[Card]]:
    """Deal cards off the top of a deck.

    The top of the deck is the front of the sequence.

    Args:
        deck: Cards to deal from (not modified)
        count: Number of cards to deal

    Returns:
        Tuple of (dealt cards, remaining deck)

    Raises:
        InvalidHandError: If count is negative or larger than the deck
    """
    if count < 0 or count > len(deck):
        raise InvalidHandError(f"Cannot deal {count} cards from a deck of {len(deck)}")
    return list(deck[:count]), list(deck[count:])
