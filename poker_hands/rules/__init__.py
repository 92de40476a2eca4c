"""Poker rules implementations.

This module provides:
- Card, rank and suit definitions and ordering (cards.py)
- Deck construction and shuffling (deck.py)
- Five-card hand classification and comparison (hands.py)
- Best five-card hand search (best_hand.py)
"""

from .errors import InvalidHandError, RankedHandInvariantError

from .cards import (
    Rank,
    Suit,
    Card,
    SUITS,
    RANKS,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    compare_ranks,
    compare_cards,
    order_cards,
    are_consecutive,
    get_rank_counts,
    make_cards_from_ranks,
    make_cards_from_string,
)

from .deck import (
    DECK_SIZE,
    fresh_deck,
    shuffle,
    deal,
    seed_default_rng,
)

from .hands import (
    HAND_SIZE,
    Hand,
    HandCategory,
    RANKED_HAND_TYPES,
    RankedHand,
    HighCard,
    Pair,
    TwoPair,
    ThreeOfAKind,
    Straight,
    Flush,
    FullHouse,
    FourOfAKind,
    StraightFlush,
    rank_hand,
    compare_ranked_hands,
    ranked_hand_key,
)

from .best_hand import (
    all_hands,
    best_hand,
)

__all__ = [
    # Errors
    "InvalidHandError",
    "RankedHandInvariantError",
    # Cards
    "Rank",
    "Suit",
    "Card",
    "SUITS",
    "RANKS",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "compare_ranks",
    "compare_cards",
    "order_cards",
    "are_consecutive",
    "get_rank_counts",
    "make_cards_from_ranks",
    "make_cards_from_string",
    # Deck
    "DECK_SIZE",
    "fresh_deck",
    "shuffle",
    "deal",
    "seed_default_rng",
    # Hands
    "HAND_SIZE",
    "Hand",
    "HandCategory",
    "RANKED_HAND_TYPES",
    "RankedHand",
    "HighCard",
    "Pair",
    "TwoPair",
    "ThreeOfAKind",
    "Straight",
    "Flush",
    "FullHouse",
    "FourOfAKind",
    "StraightFlush",
    "rank_hand",
    "compare_ranked_hands",
    "ranked_hand_key",
    # Best hand
    "all_hands",
    "best_hand",
]
