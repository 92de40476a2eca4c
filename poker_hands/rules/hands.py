"""Five-card hand classification and comparison.

Hand categories (weakest to strongest):
- High card: nothing better; all five cards are kickers
- Pair: two cards of the same rank
- Two pair: two pairs of different ranks
- Three of a kind: three cards of the same rank
- Straight: five consecutive ranks (ace high only, no wheel)
- Flush: five cards of one suit
- Full house: three of a kind plus a pair
- Four of a kind: four cards of the same rank
- Straight flush: a straight that is also a flush

Comparison rules:
- Different categories: the stronger category wins
- Same category: compare the category's tie-break fields left to right,
  first difference wins (see the _compare_* functions)
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from functools import cmp_to_key
from typing import Callable, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from .cards import Card, Rank, are_consecutive, compare_cards, compare_ranks, order_cards
from .errors import InvalidHandError, RankedHandInvariantError

# Five cards make a poker hand
HAND_SIZE = 5

Hand = Tuple[Card, Card, Card, Card, Card]


class HandCategory(IntEnum):
    """Poker hand categories, ordered by strength."""

    HIGH_CARD = auto()
    PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()


# All categories, from least to most valuable
RANKED_HAND_TYPES = tuple(HandCategory)


@dataclass(frozen=True)
class HighCard:
    """No pattern. Kickers are all five cards, high to low."""

    category: ClassVar[HandCategory] = HandCategory.HIGH_CARD
    kickers: Tuple[Card, ...]


@dataclass(frozen=True)
class Pair:
    """One pair. Kickers are the other three cards, high to low."""

    category: ClassVar[HandCategory] = HandCategory.PAIR
    rank: Rank
    kickers: Tuple[Card, ...]


@dataclass(frozen=True)
class TwoPair:
    """Two pairs of different ranks plus one kicker."""

    category: ClassVar[HandCategory] = HandCategory.TWO_PAIR
    high_pair_rank: Rank
    low_pair_rank: Rank
    kicker: Card


@dataclass(frozen=True)
class ThreeOfAKind:
    """Trips. Kickers are the other two cards, high to low."""

    category: ClassVar[HandCategory] = HandCategory.THREE_OF_A_KIND
    rank: Rank
    kickers: Tuple[Card, ...]


@dataclass(frozen=True)
class Straight:
    """Five consecutive ranks, identified by the top card."""

    category: ClassVar[HandCategory] = HandCategory.STRAIGHT
    high_card: Card


@dataclass(frozen=True)
class Flush:
    """Five suited cards, stored high to low."""

    category: ClassVar[HandCategory] = HandCategory.FLUSH
    kickers: Tuple[Card, ...]


@dataclass(frozen=True)
class FullHouse:
    """Three of one rank and two of another."""

    category: ClassVar[HandCategory] = HandCategory.FULL_HOUSE
    three_of_a_kind_rank: Rank
    pair_rank: Rank


@dataclass(frozen=True)
class FourOfAKind:
    """Four of one rank plus one kicker."""

    category: ClassVar[HandCategory] = HandCategory.FOUR_OF_A_KIND
    rank: Rank
    kicker: Card


@dataclass(frozen=True)
class StraightFlush:
    """Five suited, consecutive ranks, identified by the top card."""

    category: ClassVar[HandCategory] = HandCategory.STRAIGHT_FLUSH
    high_card: Card


RankedHand = Union[
    HighCard,
    Pair,
    TwoPair,
    ThreeOfAKind,
    Straight,
    Flush,
    FullHouse,
    FourOfAKind,
    StraightFlush,
]

# Category -> variant class, one entry per category
RANKED_HAND_CLASSES: Dict[HandCategory, type] = {
    cls.category: cls
    for cls in (HighCard, Pair, TwoPair, ThreeOfAKind, Straight, Flush, FullHouse, FourOfAKind, StraightFlush)
}


# ---------------------------------------------------------------------------
# Detectors. Each takes the five cards sorted ascending by rank.
# ---------------------------------------------------------------------------


def _outside(sorted_cards: Sequence[Card], start: int, length: int) -> List[Card]:
    """Cards outside the window [start, start + length), still ascending."""
    return list(sorted_cards[:start]) + list(sorted_cards[start + length :])


def _descending(cards: Sequence[Card]) -> Tuple[Card, ...]:
    return tuple(reversed(cards))


def _same_rank(sorted_cards: Sequence[Card], start: int, length: int) -> bool:
    rank = sorted_cards[start].rank
    return all(sorted_cards[i].rank == rank for i in range(start + 1, start + length))


def find_straight_flush(sorted_cards: Sequence[Card]) -> Optional[StraightFlush]:
    """A straight flush is a straight and a flush."""
    straight = find_straight(sorted_cards)
    if straight is not None and find_flush(sorted_cards) is not None:
        return StraightFlush(high_card=straight.high_card)
    return None


def find_four_of_a_kind(sorted_cards: Sequence[Card]) -> Optional[FourOfAKind]:
    for i in range(2):
        if _same_rank(sorted_cards, i, 4):
            (kicker,) = _outside(sorted_cards, i, 4)
            return FourOfAKind(rank=sorted_cards[i].rank, kicker=kicker)
    return None


def find_full_house(sorted_cards: Sequence[Card]) -> Optional[FullHouse]:
    """A full house is a three of a kind whose two leftover cards pair up."""
    for i in range(3):
        if _same_rank(sorted_cards, i, 3):
            low, high = _outside(sorted_cards, i, 3)
            if low.rank == high.rank:
                return FullHouse(three_of_a_kind_rank=sorted_cards[i].rank, pair_rank=low.rank)
            return None
    return None


def find_flush(sorted_cards: Sequence[Card]) -> Optional[Flush]:
    for i in range(len(sorted_cards) - 1):
        if sorted_cards[i].suit != sorted_cards[i + 1].suit:
            return None
    return Flush(kickers=_descending(sorted_cards))


def find_straight(sorted_cards: Sequence[Card]) -> Optional[Straight]:
    if not are_consecutive([card.rank for card in sorted_cards]):
        return None
    return Straight(high_card=sorted_cards[-1])


def find_three_of_a_kind(sorted_cards: Sequence[Card]) -> Optional[ThreeOfAKind]:
    for i in range(3):
        if _same_rank(sorted_cards, i, 3):
            return ThreeOfAKind(
                rank=sorted_cards[i].rank,
                kickers=_descending(_outside(sorted_cards, i, 3)),
            )
    return None


def find_two_pair(sorted_cards: Sequence[Card]) -> Optional[TwoPair]:
    """Two disjoint adjacent pairs; the pairs may be split by the kicker."""
    pairs = [i for i in range(4) if _same_rank(sorted_cards, i, 2)]
    for low in pairs:
        for high in pairs:
            if high < low + 2:
                continue
            rest = [c for idx, c in enumerate(sorted_cards) if idx not in (low, low + 1, high, high + 1)]
            return TwoPair(
                high_pair_rank=sorted_cards[high].rank,
                low_pair_rank=sorted_cards[low].rank,
                kicker=rest[0],
            )
    return None


def find_pair(sorted_cards: Sequence[Card]) -> Optional[Pair]:
    for i in range(4):
        if _same_rank(sorted_cards, i, 2):
            return Pair(rank=sorted_cards[i].rank, kickers=_descending(_outside(sorted_cards, i, 2)))
    return None


def find_high_card(sorted_cards: Sequence[Card]) -> HighCard:
    return HighCard(kickers=_descending(sorted_cards))


# Strongest first; the first detector that matches decides the category
_DETECTORS: Tuple[Callable[[Sequence[Card]], Optional[RankedHand]], ...] = (
    find_straight_flush,
    find_four_of_a_kind,
    find_full_house,
    find_flush,
    find_straight,
    find_three_of_a_kind,
    find_two_pair,
    find_pair,
)


def rank_hand(cards: Sequence[Card]) -> RankedHand:
    """Classify exactly five cards.

    Args:
        cards: Five Card objects in any order (not modified)

    Returns:
        The RankedHand variant for the strongest category the cards form

    Raises:
        InvalidHandError: If not given exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandError(f"A hand has exactly {HAND_SIZE} cards, got {len(cards)}")

    sorted_cards = order_cards(cards)
    for detector in _DETECTORS:
        ranked = detector(sorted_cards)
        if ranked is not None:
            return ranked
    return find_high_card(sorted_cards)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def _compare_card_sequences(a: Sequence[Card], b: Sequence[Card]) -> int:
    for card_a, card_b in zip(a, b):
        cmp = compare_cards(card_a, card_b)
        if cmp != 0:
            return cmp
    return 0


def _compare_by_high_card(a: Union[Straight, StraightFlush], b: Union[Straight, StraightFlush]) -> int:
    return compare_cards(a.high_card, b.high_card)


def _compare_four_of_a_kinds(a: FourOfAKind, b: FourOfAKind) -> int:
    return compare_ranks(a.rank, b.rank) or compare_cards(a.kicker, b.kicker)


def _compare_full_houses(a: FullHouse, b: FullHouse) -> int:
    # The triple always outweighs the pair
    return compare_ranks(a.three_of_a_kind_rank, b.three_of_a_kind_rank) or compare_ranks(
        a.pair_rank, b.pair_rank
    )


def _compare_by_kickers(a: Union[Flush, HighCard], b: Union[Flush, HighCard]) -> int:
    return _compare_card_sequences(a.kickers, b.kickers)


def _compare_three_of_a_kinds(a: ThreeOfAKind, b: ThreeOfAKind) -> int:
    return compare_ranks(a.rank, b.rank) or _compare_card_sequences(a.kickers, b.kickers)


def _compare_two_pairs(a: TwoPair, b: TwoPair) -> int:
    return (
        compare_ranks(a.high_pair_rank, b.high_pair_rank)
        or compare_ranks(a.low_pair_rank, b.low_pair_rank)
        or compare_cards(a.kicker, b.kicker)
    )


def _compare_pairs(a: Pair, b: Pair) -> int:
    return compare_ranks(a.rank, b.rank) or _compare_card_sequences(a.kickers, b.kickers)


_TIE_BREAKERS: Dict[HandCategory, Callable[..., int]] = {
    HandCategory.STRAIGHT_FLUSH: _compare_by_high_card,
    HandCategory.FOUR_OF_A_KIND: _compare_four_of_a_kinds,
    HandCategory.FULL_HOUSE: _compare_full_houses,
    HandCategory.FLUSH: _compare_by_kickers,
    HandCategory.STRAIGHT: _compare_by_high_card,
    HandCategory.THREE_OF_A_KIND: _compare_three_of_a_kinds,
    HandCategory.TWO_PAIR: _compare_two_pairs,
    HandCategory.PAIR: _compare_pairs,
    HandCategory.HIGH_CARD: _compare_by_kickers,
}

_missing = set(HandCategory) - set(_TIE_BREAKERS) | set(HandCategory) - set(RANKED_HAND_CLASSES)
if _missing:
    raise RankedHandInvariantError(f"No comparison rule for categories: {sorted(_missing)}")


def _category_of(hand: RankedHand) -> HandCategory:
    category = getattr(hand, "category", None)
    if category not in RANKED_HAND_CLASSES or type(hand) is not RANKED_HAND_CLASSES[category]:
        raise RankedHandInvariantError(f"Unexpected ranked hand: {hand!r}")
    return category


def compare_ranked_hands(a: RankedHand, b: RankedHand) -> int:
    """Compare two ranked hands.

    Returns:
        Positive if a beats b, negative if b beats a, zero if they tie

    Raises:
        RankedHandInvariantError: If either value is not a RankedHand variant
    """
    category_a = _category_of(a)
    category_b = _category_of(b)

    if category_a != category_b:
        return int(category_a) - int(category_b)

    return _TIE_BREAKERS[category_a](a, b)


# Sort key for ranked hands, e.g. max(hands, key=ranked_hand_key)
ranked_hand_key = cmp_to_key(compare_ranked_hands)
