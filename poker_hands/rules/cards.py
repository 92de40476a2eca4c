"""Card, rank and suit definitions and ordering utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit constants
- Card representation
- Rank/card comparison and ordering
"""

from dataclasses import dataclass
from enum import IntEnum
from operator import attrgetter
from typing import Dict, Iterable, List, Optional, Sequence


class Rank(IntEnum):
    """Card ranks ordered by value (higher value = stronger rank).

    The integer value is the rank's position in the fixed order. Ace is
    always high; there is no low ace.
    """

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12  # Highest rank


class Suit(IntEnum):
    """Card suits. Values only fix deck order; suits never affect hand value."""

    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3


# All suits, in deck order
SUITS = tuple(Suit)

# All ranks, from least to most valuable
RANKS = tuple(Rank)

# Rank symbols used when parsing cards from text
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
}

SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"S": Suit.SPADES, "H": Suit.HEARTS, "C": Suit.CLUBS, "D": Suit.DIAMONDS})
SYMBOL_TO_SUIT.update({"s": Suit.SPADES, "h": Suit.HEARTS, "c": Suit.CLUBS, "d": Suit.DIAMONDS})


@dataclass(frozen=True)
class Card:
    """A playing card with suit and rank.

    Immutable and hashable. Two cards are equal iff suit and rank match.
    Cards deliberately define no ``<``; value ordering is rank-only and
    lives in :func:`compare_cards` / :func:`order_cards`.
    """

    suit: Suit
    rank: Rank

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'Q♠', '10H' or 'Td'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        suit_char = s[-1]
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit character: {suit_char}")
        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_str}")

        return cls(suit=SYMBOL_TO_SUIT[suit_char], rank=SYMBOL_TO_RANK[rank_str])


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return int(rank1) - int(rank2)


def compare_cards(card1: Card, card2: Card) -> int:
    """Compare two cards by rank only; suit is ignored."""
    return compare_ranks(card1.rank, card2.rank)


def order_cards(cards: Iterable[Card]) -> List[Card]:
    """Order cards from lowest to highest value.

    The sort is stable, so cards of equal rank keep their input order.

    Args:
        cards: Any iterable of Card objects

    Returns:
        New sorted list of cards (the input is not modified)
    """
    return sorted(cards, key=attrgetter("rank"))


def are_consecutive(ranks: Sequence[Rank]) -> bool:
    """Check if a sorted sequence of ranks are strictly consecutive.

    There is no wraparound: ACE is never followed by TWO.
    """
    for i in range(1, len(ranks)):
        if compare_ranks(ranks[i], ranks[i - 1]) != 1:
            return False
    return True


# Test helpers for building and inspecting cards; the rules code does not use them


def make_cards_from_ranks(ranks: Sequence[Rank], suits: Optional[Sequence[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits are not provided, cycles through suits so the result is never
    accidentally a flush.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [SUITS[i % len(SUITS)] for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(suit=s, rank=r) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "2S 2H 2D 5C 9S"."""
    return [Card.from_string(cs) for cs in s.split()]


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a collection of cards."""
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts
