"""Hand-strength core: cards, evaluation, ranking and equity."""

from .cards import (
    Card, Hand, Deck, Rank, Suit,
    new_deck, shuffle, cards_equal, parse_cards,
)
from .errors import MalformedHandInput, InvalidTrialBudget
from .evaluator import HandCategory, EvaluatedHand, evaluate, evaluate_five
from .ranking import rank_all, winners
from .equity import EquityResult, EquityConfig, EquityCalculator, estimate_equity

__all__ = [
    "Card",
    "Hand",
    "Deck",
    "Rank",
    "Suit",
    "new_deck",
    "shuffle",
    "cards_equal",
    "parse_cards",
    "MalformedHandInput",
    "InvalidTrialBudget",
    "HandCategory",
    "EvaluatedHand",
    "evaluate",
    "evaluate_five",
    "rank_all",
    "winners",
    "EquityResult",
    "EquityConfig",
    "EquityCalculator",
    "estimate_equity",
]
