"""Poker Hands - five-card poker hand evaluation.

A small, pure library for building and shuffling decks, classifying
five-card poker hands and picking the best hand out of a larger set
of cards.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import set_seed
from poker_hands.rules import (
    Card,
    Rank,
    Suit,
    HandCategory,
    RankedHand,
    InvalidHandError,
    RankedHandInvariantError,
    compare_ranks,
    compare_cards,
    order_cards,
    fresh_deck,
    shuffle,
    deal,
    rank_hand,
    compare_ranked_hands,
    ranked_hand_key,
    all_hands,
    best_hand,
)

__all__ = [
    "__version__",
    "set_seed",
    # Types
    "Card",
    "Rank",
    "Suit",
    "HandCategory",
    "RankedHand",
    # Errors
    "InvalidHandError",
    "RankedHandInvariantError",
    # Operations
    "compare_ranks",
    "compare_cards",
    "order_cards",
    "fresh_deck",
    "shuffle",
    "deal",
    "rank_hand",
    "compare_ranked_hands",
    "ranked_hand_key",
    "all_hands",
    "best_hand",
]
