"""
Hold'em hand evaluation.

Finds the best five-card hand among the hole and board cards and
scores it as a single integer. The score encodes the category and
its tie-break ranks in base 15:

    strength = category * 15**5 + r0 * 15**4 + r1 * 15**3 + ...

Ranks never exceed 14, so comparing two strengths is the same as
comparing category first and then each tie-break rank high to low.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from itertools import combinations
from typing import Sequence

from .cards import Card, HoleCards, ensure_distinct
from .errors import MalformedHandInput

BASE = 15
CATEGORY_WEIGHT = BASE ** 5

WHEEL = (14, 5, 4, 3, 2)


class HandCategory(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


@total_ordering
@dataclass(frozen=True)
class EvaluatedHand:
    """Best hand found for one player.

    Hands order by ``strength`` alone.
    """
    category: HandCategory
    strength: int
    kickers: tuple[int, ...]
    best_five: tuple[Card, ...]

    def __eq__(self, other) -> bool:
        if not isinstance(other, EvaluatedHand):
            return NotImplemented
        return self.strength == other.strength

    def __lt__(self, other: "EvaluatedHand") -> bool:
        if not isinstance(other, EvaluatedHand):
            return NotImplemented
        return self.strength < other.strength

    def __hash__(self) -> int:
        return hash(self.strength)

    @property
    def is_complete(self) -> bool:
        """Whether five cards were available to form a hand."""
        return len(self.best_five) == 5


def _score(category: HandCategory, ranks: Sequence[int]) -> int:
    value = 0
    for rank in ranks:
        value = value * BASE + rank
    # Left-align shorter tie-break lists so every category spans 5 digits
    value *= BASE ** (5 - len(ranks))
    return category * CATEGORY_WEIGHT + value


def _straight_high(ranks: Sequence[int]) -> int:
    """High card of a five-card straight, 0 if the ranks are not one.

    ``ranks`` must be sorted descending.
    """
    if len(set(ranks)) != 5:
        return 0
    if tuple(ranks) == WHEEL:
        return 5
    if ranks[0] - ranks[4] == 4:
        return ranks[0]
    return 0


def evaluate_five(cards: Sequence[Card]) -> EvaluatedHand:
    """
    Score exactly five cards.

    Args:
        cards: Five distinct cards

    Returns:
        EvaluatedHand for these cards
    """
    ranks = sorted((c.rank for c in cards), reverse=True)
    is_flush = len({c.suit for c in cards}) == 1
    straight_high = _straight_high(ranks)

    # Group ranks by multiplicity, then rank: [(rank, count), ...]
    groups = sorted(Counter(ranks).items(), key=lambda rc: (rc[1], rc[0]), reverse=True)
    counts = [count for _, count in groups]
    grouped = [rank for rank, _ in groups]

    if is_flush and straight_high:
        if straight_high == 14:
            category = HandCategory.ROYAL_FLUSH
        else:
            category = HandCategory.STRAIGHT_FLUSH
        kickers = [straight_high]
    elif counts[0] == 4:
        category = HandCategory.FOUR_OF_A_KIND
        kickers = grouped
    elif counts[0] == 3 and counts[1] == 2:
        category = HandCategory.FULL_HOUSE
        kickers = grouped
    elif is_flush:
        category = HandCategory.FLUSH
        kickers = ranks
    elif straight_high:
        category = HandCategory.STRAIGHT
        kickers = [straight_high]
    elif counts[0] == 3:
        category = HandCategory.THREE_OF_A_KIND
        kickers = grouped
    elif counts[0] == 2 and counts[1] == 2:
        category = HandCategory.TWO_PAIR
        kickers = grouped
    elif counts[0] == 2:
        category = HandCategory.ONE_PAIR
        kickers = grouped
    else:
        category = HandCategory.HIGH_CARD
        kickers = ranks

    return EvaluatedHand(
        category=category,
        strength=_score(category, kickers),
        kickers=tuple(kickers),
        best_five=tuple(cards),
    )


def best_hand(cards: Sequence[Card]) -> EvaluatedHand:
    """
    Best hand among up to seven cards, without input validation.

    With fewer than five cards there is no complete hand yet: the
    result is a high-card placeholder with strength 0 that must not
    be used to rank players.
    """
    if len(cards) < 5:
        ordered = sorted(cards, key=lambda c: c.rank, reverse=True)
        return EvaluatedHand(
            category=HandCategory.HIGH_CARD,
            strength=0,
            kickers=tuple(c.rank for c in ordered),
            best_five=tuple(ordered),
        )

    best = None
    for combo in combinations(cards, 5):
        hand = evaluate_five(combo)
        if best is None or hand.strength > best.strength:
            best = hand
    return best


def evaluate(hole_cards: HoleCards, board_cards: Sequence[Card]) -> EvaluatedHand:
    """
    Evaluate a player's best hand.

    Args:
        hole_cards: The player's two hole cards
        board_cards: Zero to five board cards

    Returns:
        EvaluatedHand for the best five cards available

    Raises:
        MalformedHandInput: Wrong card counts or a repeated card
    """
    hole = list(hole_cards)
    board = list(board_cards)
    if len(hole) != 2:
        raise MalformedHandInput(f"Expected 2 hole cards, got {len(hole)}")
    if len(board) > 5:
        raise MalformedHandInput(f"Board must have at most 5 cards, got {len(board)}")
    ensure_distinct(hole + board)

    return best_hand(hole + board)
