"""Card, hole-card and deck representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Union
import re

import numpy as np
from treys import Card as TreysCard

from .errors import MalformedHandInput


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

SUIT_SYMBOL = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}

# Canonical deck order: suit-major, then rank ascending
DECK_SUITS = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)

_CARD_TOKEN = re.compile(r"(10|[2-9TJQKAtjqka])([cdhsCDHS])")


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def symbol(self) -> str:
        """Display form with the suit glyph first, e.g. '♠A'."""
        return f"{SUIT_SYMBOL[self.suit]}{RANK_STR[self.rank]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c' or '10d'."""
        if s[:2] == "10":
            s = "T" + s[2:]
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


@dataclass
class Hand:
    """A player's two hole cards."""
    card1: Card
    card2: Card

    def __post_init__(self):
        # Ensure card1 has higher or equal rank
        if self.card1.rank < self.card2.rank:
            self.card1, self.card2 = self.card2, self.card1

    @property
    def cards(self) -> tuple[Card, Card]:
        return (self.card1, self.card2)

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.card1.rank == self.card2.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.card1.suit == self.card2.suit

    @property
    def canonical(self) -> str:
        """
        Get canonical hand notation (e.g., 'AKs', 'QQ', '72o').

        This groups equivalent hands regardless of specific suits.
        """
        r1 = RANK_STR[self.card1.rank]
        r2 = RANK_STR[self.card2.rank]

        if self.is_pair:
            return f"{r1}{r2}"
        elif self.is_suited:
            return f"{r1}{r2}s"
        else:
            return f"{r1}{r2}o"

    def __iter__(self):
        return iter(self.cards)

    def __len__(self) -> int:
        return 2

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"Hand({self.card1}, {self.card2})"

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hole cards from a string like 'AsKh' or 'As Kh'."""
        cards = parse_cards(s)
        if len(cards) != 2:
            raise ValueError(f"Invalid hand string: {s}")
        return cls(cards[0], cards[1])

    def to_treys(self) -> list[int]:
        """Convert to treys library format."""
        return [self.card1.to_treys(), self.card2.to_treys()]


HoleCards = Union[Hand, Sequence[Card]]


def parse_cards(s: str) -> list[Card]:
    """
    Parse a run of card strings.

    Separators are optional: 'AsKs', 'As Ks', 'As,Ks' and '10sJs'
    are all accepted.
    """
    compact = re.sub(r"[\s,]+", "", s)
    cards = []
    pos = 0
    while pos < len(compact):
        match = _CARD_TOKEN.match(compact, pos)
        if match is None:
            raise ValueError(f"Invalid card string: {compact[pos:pos + 2]}")
        cards.append(Card.from_string(match.group(0)))
        pos = match.end()
    return cards


def new_deck() -> list[Card]:
    """Return the 52 cards in canonical order (suit-major, rank ascending)."""
    return [
        Card(rank, suit)
        for suit in DECK_SUITS
        for rank in Rank
    ]


def shuffle(
    deck: Sequence[Card],
    rng: Optional[np.random.Generator] = None,
) -> list[Card]:
    """
    Return a uniformly shuffled copy of deck.

    The input sequence is left untouched.

    Args:
        deck: Cards to shuffle
        rng: Random source; a fresh generator is used when omitted

    Returns:
        New list holding a random permutation of deck
    """
    rng = rng if rng is not None else np.random.default_rng()
    order = rng.permutation(len(deck))
    return [deck[i] for i in order]


def cards_equal(a: Card, b: Card) -> bool:
    """Check whether two cards share both rank and suit."""
    return a.rank == b.rank and a.suit == b.suit


def ensure_distinct(cards: Iterable[Card]) -> None:
    """Raise MalformedHandInput if any card appears more than once."""
    seen: set[Card] = set()
    for card in cards:
        if card in seen:
            raise MalformedHandInput(f"Duplicate card: {card}")
        seen.add(card)


class Deck:
    """A standard 52-card deck."""

    def __init__(self):
        self.cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self.cards = new_deck()

    def shuffle(self, rng: Optional[np.random.Generator] = None) -> None:
        """Shuffle the deck."""
        self.cards = shuffle(self.cards, rng)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the deck."""
        if n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self.cards)} remaining")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt

    def remove(self, cards: Iterable[Card]) -> None:
        """Remove specific cards from the deck."""
        for card in cards:
            if card in self.cards:
                self.cards.remove(card)

    def __len__(self) -> int:
        return len(self.cards)
