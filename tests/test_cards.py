"""Tests for card, hole-card and deck representation."""

import numpy as np
import pytest

from showdown.game.cards import (
    Card, Hand, Deck, Rank, Suit,
    new_deck, shuffle, cards_equal, parse_cards, ensure_distinct,
)
from showdown.game.errors import MalformedHandInput


class TestCard:
    def test_from_string(self):
        card = Card.from_string("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_from_string_ten(self):
        card = Card.from_string("Th")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.HEARTS

    def test_from_string_numeric_ten(self):
        assert Card.from_string("10d") == Card(Rank.TEN, Suit.DIAMONDS)

    def test_from_string_lowercase(self):
        card = Card.from_string("kd")
        assert card.rank == Rank.KING
        assert card.suit == Suit.DIAMONDS

    def test_str(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "As"

    def test_symbol(self):
        assert Card(Rank.ACE, Suit.SPADES).symbol == "♠A"
        assert Card(Rank.TEN, Suit.HEARTS).symbol == "♥T"

    def test_from_string_invalid_rank(self):
        with pytest.raises(ValueError):
            Card.from_string("Xs")

    def test_from_string_invalid_suit(self):
        with pytest.raises(ValueError):
            Card.from_string("Ax")

    def test_equality(self):
        card1 = Card.from_string("As")
        card2 = Card.from_string("As")
        assert card1 == card2
        assert cards_equal(card1, card2)

    def test_same_rank_different_suit(self):
        assert not cards_equal(Card.from_string("As"), Card.from_string("Ah"))

    def test_hashable(self):
        assert len({Card.from_string("As"), Card.from_string("As")}) == 1

    def test_to_treys(self):
        card = Card.from_string("As")
        treys_card = card.to_treys()
        assert isinstance(treys_card, int)


class TestParseCards:
    def test_compact(self):
        assert parse_cards("QsJsTs") == [
            Card(Rank.QUEEN, Suit.SPADES),
            Card(Rank.JACK, Suit.SPADES),
            Card(Rank.TEN, Suit.SPADES),
        ]

    def test_separators(self):
        assert parse_cards("Qs, Js 10s") == parse_cards("QsJsTs")

    def test_empty(self):
        assert parse_cards("") == []

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_cards("QsXx")


class TestHand:
    def test_from_string_specific(self):
        hand = Hand.from_string("AsKh")
        assert hand.card1.rank == Rank.ACE
        assert hand.card2.rank == Rank.KING

    def test_from_string_wrong_count(self):
        with pytest.raises(ValueError):
            Hand.from_string("AsKhQd")

    def test_canonical_pair(self):
        hand = Hand.from_string("AsAh")
        assert hand.canonical == "AA"
        assert hand.is_pair

    def test_canonical_suited(self):
        hand = Hand.from_string("AsKs")
        assert hand.canonical == "AKs"
        assert hand.is_suited

    def test_canonical_offsuit(self):
        hand = Hand.from_string("AsKh")
        assert hand.canonical == "AKo"

    def test_card_ordering(self):
        # Lower card first in string should still have higher rank first
        hand = Hand.from_string("KsAs")
        assert hand.card1.rank == Rank.ACE
        assert hand.card2.rank == Rank.KING

    def test_iterates_as_two_cards(self):
        hand = Hand.from_string("AsKh")
        assert list(hand) == [Card.from_string("As"), Card.from_string("Kh")]
        assert len(hand) == 2

    def test_str(self):
        hand = Hand.from_string("AsKh")
        assert str(hand) == "AsKh"


class TestNewDeck:
    def test_full_deck(self):
        deck = new_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_canonical_order(self):
        deck = new_deck()
        # Suit-major, rank ascending
        assert deck[0] == Card(Rank.TWO, Suit.SPADES)
        assert deck[12] == Card(Rank.ACE, Suit.SPADES)
        assert deck[13] == Card(Rank.TWO, Suit.HEARTS)
        assert deck[-1] == Card(Rank.ACE, Suit.CLUBS)

    def test_deterministic(self):
        assert new_deck() == new_deck()


class TestShuffle:
    def test_is_permutation(self, rng):
        deck = new_deck()
        shuffled = shuffle(deck, rng)
        assert len(shuffled) == 52
        assert len(set(shuffled)) == 52
        assert set(shuffled) == set(deck)

    def test_input_untouched(self, rng):
        deck = new_deck()
        shuffle(deck, rng)
        assert deck == new_deck()

    def test_changes_order(self, rng):
        # Could theoretically fail but probability is astronomically low
        assert shuffle(new_deck(), rng)[:10] != new_deck()[:10]

    def test_seeded_reproducible(self):
        a = shuffle(new_deck(), np.random.default_rng(7))
        b = shuffle(new_deck(), np.random.default_rng(7))
        assert a == b

    def test_default_rng(self):
        assert sorted(shuffle(new_deck()), key=str) == sorted(new_deck(), key=str)

    def test_positions_roughly_uniform(self, rng):
        # The ace of spades should land in each half about equally often
        ace = Card(Rank.ACE, Suit.SPADES)
        first_half = sum(
            shuffle(new_deck(), rng).index(ace) < 26 for _ in range(2000)
        )
        assert 850 < first_half < 1150


class TestEnsureDistinct:
    def test_distinct(self):
        ensure_distinct(parse_cards("AsKsQs"))

    def test_duplicate(self):
        with pytest.raises(MalformedHandInput, match="As"):
            ensure_distinct(parse_cards("AsKsAs"))


class TestDeck:
    def test_full_deck(self):
        deck = Deck()
        assert len(deck) == 52

    def test_deal(self):
        deck = Deck()
        cards = deck.deal(5)
        assert len(cards) == 5
        assert len(deck) == 47

    def test_deal_too_many(self):
        deck = Deck()
        with pytest.raises(ValueError):
            deck.deal(53)

    def test_remove(self):
        deck = Deck()
        card = Card.from_string("As")
        deck.remove([card])
        assert len(deck) == 51
        assert card not in deck.cards

    def test_shuffle(self, rng):
        deck = Deck()
        deck.shuffle(rng)
        assert len(deck) == 52
        assert set(deck.cards) == set(new_deck())
        assert deck.cards[:10] != new_deck()[:10]

    def test_reset(self):
        deck = Deck()
        deck.deal(20)
        assert len(deck) == 32

        deck.reset()
        assert len(deck) == 52
