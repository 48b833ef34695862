"""Showdown ranking of evaluated hands."""

from typing import Sequence

from .evaluator import EvaluatedHand


def rank_all(hands: Sequence[EvaluatedHand]) -> list[int]:
    """
    Assign competition ranks to hands.

    Equal strengths share a rank and the next distinct hand skips
    the shared places, so strengths [100, 100, 80] rank [1, 1, 3].

    Args:
        hands: Evaluated hands, one per player

    Returns:
        Rank per hand, in input order (1 is best)
    """
    order = sorted(range(len(hands)), key=lambda i: hands[i].strength, reverse=True)

    ranks = [0] * len(hands)
    for place, idx in enumerate(order):
        prev = order[place - 1] if place else None
        if prev is not None and hands[idx].strength == hands[prev].strength:
            ranks[idx] = ranks[prev]
        else:
            ranks[idx] = place + 1
    return ranks


def winners(hands: Sequence[EvaluatedHand]) -> list[int]:
    """Indices of every hand sharing the best rank."""
    if not hands:
        return []
    best = max(hand.strength for hand in hands)
    return [i for i, hand in enumerate(hands) if hand.strength == best]
