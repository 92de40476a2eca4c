"""Tests for the card model and ordering primitives.

Test coverage:
- Rank ordering: A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2
- Card creation, equality, hashing and parsing
- compare_ranks / compare_cards: sign convention, antisymmetry, transitivity
- order_cards: ascending, stable, non-mutating
"""

import itertools

import pytest
from poker_hands.rules import (
    Rank,
    Suit,
    Card,
    SUITS,
    RANKS,
    compare_ranks,
    compare_cards,
    order_cards,
    are_consecutive,
    get_rank_counts,
    make_cards_from_ranks,
    make_cards_from_string,
    fresh_deck,
)


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


class TestRankOrdering:
    """Test that rank ordering is two (lowest) through ace (highest)."""

    def test_ace_is_highest(self):
        assert RANKS[-1] == Rank.ACE
        for rank in RANKS[:-1]:
            assert compare_ranks(Rank.ACE, rank) > 0

    def test_two_is_lowest(self):
        assert RANKS[0] == Rank.TWO
        for rank in RANKS[1:]:
            assert compare_ranks(Rank.TWO, rank) < 0

    def test_thirteen_ranks_four_suits(self):
        assert len(RANKS) == 13
        assert len(SUITS) == 4

    def test_compare_ranks_function(self):
        assert compare_ranks(Rank.ACE, Rank.KING) > 0
        assert compare_ranks(Rank.THREE, Rank.FOUR) < 0
        assert compare_ranks(Rank.KING, Rank.KING) == 0
        assert compare_ranks(Rank.ACE, Rank.TWO) == 12

    def test_compare_ranks_antisymmetric(self):
        for r1, r2 in itertools.product(RANKS, RANKS):
            assert _sign(compare_ranks(r1, r2)) == -_sign(compare_ranks(r2, r1))

    def test_compare_ranks_transitive(self):
        for r1, r2, r3 in itertools.product(RANKS, RANKS, RANKS):
            if compare_ranks(r1, r2) < 0 and compare_ranks(r2, r3) < 0:
                assert compare_ranks(r1, r3) < 0

    def test_are_consecutive(self):
        assert are_consecutive([Rank.TWO, Rank.THREE, Rank.FOUR])
        assert are_consecutive([Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE])
        assert not are_consecutive([Rank.THREE, Rank.FIVE])
        assert not are_consecutive([Rank.FOUR, Rank.FOUR])
        assert not are_consecutive([Rank.KING, Rank.ACE, Rank.TWO])


class TestCardBasics:
    """Test Card creation and utilities."""

    def test_card_creation(self):
        card = Card(suit=Suit.HEARTS, rank=Rank.THREE)
        assert card.rank == Rank.THREE
        assert card.suit == Suit.HEARTS

    def test_card_is_immutable(self):
        card = Card(suit=Suit.HEARTS, rank=Rank.THREE)
        with pytest.raises(AttributeError):
            card.rank = Rank.FOUR

    def test_card_equality_and_hashing(self):
        c1 = Card(suit=Suit.HEARTS, rank=Rank.THREE)
        c2 = Card(suit=Suit.HEARTS, rank=Rank.THREE)
        c3 = Card(suit=Suit.SPADES, rank=Rank.THREE)

        assert c1 == c2
        assert c1 != c3
        assert hash(c1) == hash(c2)
        assert len({c1, c2, c3}) == 2

    def test_card_from_string(self):
        assert Card.from_string("3♥") == Card(suit=Suit.HEARTS, rank=Rank.THREE)
        assert Card.from_string("10S") == Card(suit=Suit.SPADES, rank=Rank.TEN)
        assert Card.from_string("Td") == Card(suit=Suit.DIAMONDS, rank=Rank.TEN)
        assert Card.from_string("AC") == Card(suit=Suit.CLUBS, rank=Rank.ACE)
        assert Card.from_string("qh") == Card(suit=Suit.HEARTS, rank=Rank.QUEEN)

    @pytest.mark.parametrize("text", ["", "A", "1S", "AX", "11H"])
    def test_card_from_string_invalid(self, text):
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_make_cards_from_string(self):
        cards = make_cards_from_string("2S 2H 2D 5C 9S")
        assert [c.rank for c in cards] == [Rank.TWO, Rank.TWO, Rank.TWO, Rank.FIVE, Rank.NINE]
        assert [c.suit for c in cards] == [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES]

    def test_make_cards_from_ranks_cycles_suits(self):
        cards = make_cards_from_ranks([Rank.TWO, Rank.FIVE, Rank.SEVEN, Rank.NINE, Rank.JACK])
        assert len({c.suit for c in cards}) == 4

    def test_make_cards_from_ranks_length_mismatch(self):
        with pytest.raises(ValueError):
            make_cards_from_ranks([Rank.TWO, Rank.THREE], [Suit.SPADES])

    def test_get_rank_counts(self):
        counts = get_rank_counts(make_cards_from_string("3S 3H 3D 7C 7S"))
        assert counts == {Rank.THREE: 3, Rank.SEVEN: 2}


class TestCompareCards:
    """compare_cards looks at rank only."""

    def test_equal_cards(self):
        ace = Card(suit=Suit.SPADES, rank=Rank.ACE)
        assert compare_cards(ace, ace) == 0

    def test_same_rank_any_suit_is_equal(self):
        for rank in RANKS:
            for s1, s2 in itertools.product(SUITS, SUITS):
                assert compare_cards(Card(suit=s1, rank=rank), Card(suit=s2, rank=rank)) == 0

    def test_lower_card_is_negative(self):
        assert compare_cards(Card.from_string("KS"), Card.from_string("AS")) < 0
        assert compare_cards(Card.from_string("5S"), Card.from_string("8H")) < 0

    def test_higher_card_is_positive(self):
        assert compare_cards(Card.from_string("AS"), Card.from_string("KS")) > 0
        assert compare_cards(Card.from_string("AH"), Card.from_string("2S")) > 0

    def test_antisymmetric_over_all_cards(self):
        cards = [Card(suit=s, rank=r) for s in SUITS for r in RANKS]
        for c1, c2 in itertools.product(cards, cards):
            assert _sign(compare_cards(c1, c2)) == -_sign(compare_cards(c2, c1))

    def test_transitive_over_all_cards(self):
        deck = fresh_deck()
        for c1, c2, c3 in itertools.product(deck, repeat=3):
            cmp12 = compare_cards(c1, c2)
            cmp23 = compare_cards(c2, c3)
            if cmp12 < 0 and cmp23 < 0:
                assert compare_cards(c1, c3) < 0
            elif cmp12 == 0 and cmp23 == 0:
                assert compare_cards(c1, c3) == 0


class TestOrderCards:
    """Test order_cards sorting."""

    def test_empty(self):
        assert order_cards([]) == []

    def test_single(self):
        ace = Card.from_string("AS")
        assert order_cards([ace]) == [ace]

    def test_descending_suit_becomes_ascending(self):
        descending = [Card(suit=Suit.SPADES, rank=r) for r in reversed(RANKS)]
        assert order_cards(descending) == [Card(suit=Suit.SPADES, rank=r) for r in RANKS]

    def test_does_not_mutate_input(self):
        cards = make_cards_from_string("AS 2H KD")
        snapshot = list(cards)
        result = order_cards(cards)
        assert cards == snapshot
        assert result is not cards

    def test_stable_for_equal_ranks(self):
        cards = make_cards_from_string("9D 2H 9S 9C")
        assert order_cards(cards) == make_cards_from_string("2H 9D 9S 9C")
