"""Equity calculation: exact at the river, Monte Carlo before it."""

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional, Sequence
import logging

import numpy as np

from .cards import Card, HoleCards, ensure_distinct, new_deck
from .errors import InvalidTrialBudget, MalformedHandInput
from .evaluator import best_hand
from .ranking import winners

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EquityResult:
    """
    Win/tie tally for one player.

    ``tie_share`` adds 1/k for every trial the player split with k-1
    others, so a two-way split is worth half a win and the credit
    handed out per trial always sums to one.
    """
    wins: int
    ties: int
    trials: int
    tie_share: float = 0.0

    @property
    def equity(self) -> float:
        """Equity as a percentage (0-100)."""
        return 100.0 * (self.wins + self.tie_share) / self.trials


@dataclass
class EquityConfig:
    """Configuration for equity estimation."""
    trials: int = 500              # Monte Carlo trials per call
    workers: int = 1               # Worker processes (1 = run in-process)
    seed: Optional[int] = None     # Seed for reproducible runs


def _validate(
    player_hole_cards: Sequence[HoleCards],
    board_cards: Sequence[Card],
    trials: int,
) -> tuple[list[list[Card]], list[Card]]:
    if isinstance(trials, bool) or not isinstance(trials, (int, np.integer)) or trials <= 0:
        raise InvalidTrialBudget(f"Trial count must be a positive integer, got {trials!r}")

    players = [list(hole) for hole in player_hole_cards]
    board = list(board_cards)

    if not players:
        raise MalformedHandInput("At least one player is required")
    for seat, hole in enumerate(players):
        if len(hole) != 2:
            raise MalformedHandInput(
                f"Player {seat + 1} must have 2 hole cards, got {len(hole)}"
            )
    if len(board) > 5:
        raise MalformedHandInput(f"Board must have at most 5 cards, got {len(board)}")

    ensure_distinct(board + [card for hole in players for card in hole])

    unseen = 52 - 2 * len(players) - len(board)
    if unseen < 5 - len(board):
        raise MalformedHandInput(
            f"Not enough cards left to complete the board for {len(players)} players"
        )
    return players, board


def _credit(
    players: list[list[Card]],
    board: list[Card],
    wins: list[int],
    ties: list[int],
    tie_share: list[float],
) -> None:
    hands = [best_hand(hole + board) for hole in players]
    top = winners(hands)
    if len(top) == 1:
        wins[top[0]] += 1
        return
    share = 1.0 / len(top)
    for seat in top:
        ties[seat] += 1
        tie_share[seat] += share


def _simulate(
    players: list[list[Card]],
    board: list[Card],
    pool: list[Card],
    trials: int,
    seed: np.random.SeedSequence,
) -> tuple[list[int], list[int], list[float]]:
    """Run a batch of runouts; returns per-player (wins, ties, tie_share)."""
    rng = np.random.default_rng(seed)
    needed = 5 - len(board)

    wins = [0] * len(players)
    ties = [0] * len(players)
    tie_share = [0.0] * len(players)

    for _ in range(trials):
        # Every trial draws from the full unseen pool
        runout = rng.choice(len(pool), size=needed, replace=False)
        full_board = board + [pool[i] for i in runout]
        _credit(players, full_board, wins, ties, tie_share)

    return wins, ties, tie_share


def split_trials(trials: int, workers: int) -> list[int]:
    """Split a trial budget as evenly as possible, dropping empty shares."""
    base, extra = divmod(trials, workers)
    chunks = [base + 1 if i < extra else base for i in range(workers)]
    return [chunk for chunk in chunks if chunk > 0]


def estimate_equity(
    player_hole_cards: Sequence[HoleCards],
    board_cards: Sequence[Card],
    trials: int,
    rng: Optional[np.random.Generator] = None,
    workers: int = 1,
) -> list[EquityResult]:
    """
    Estimate each player's share of the pot.

    With a complete board the result is exact; otherwise ``trials``
    random runouts of the missing board cards are simulated.

    Args:
        player_hole_cards: Two hole cards per player
        board_cards: Board cards (0-5)
        trials: Number of Monte Carlo trials (ignored at the river)
        rng: Random source; seeds the worker streams
        workers: Worker processes to spread the trials over

    Returns:
        One EquityResult per player, in input order

    Raises:
        InvalidTrialBudget: trials is not a positive integer
        MalformedHandInput: Bad card counts or repeated cards
    """
    players, board = _validate(player_hole_cards, board_cards, trials)
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    n = len(players)
    wins = [0] * n
    ties = [0] * n
    tie_share = [0.0] * n

    if len(board) == 5:
        logger.debug("Exact showdown for %d players on %s", n, board)
        _credit(players, board, wins, ties, tie_share)
        return [
            EquityResult(wins=wins[i], ties=ties[i], trials=1, tie_share=tie_share[i])
            for i in range(n)
        ]

    used = set(board).union(*players)
    pool = [card for card in new_deck() if card not in used]

    rng = rng if rng is not None else np.random.default_rng()
    chunks = split_trials(trials, workers)
    seeds = np.random.SeedSequence(rng.integers(0, 2**32, size=4).tolist()).spawn(len(chunks))
    logger.debug(
        "Simulating %d trials for %d players (%d board cards) across %d worker(s)",
        trials, n, len(board), len(chunks),
    )

    if len(chunks) == 1:
        partials = [_simulate(players, board, pool, chunks[0], seeds[0])]
    else:
        with ProcessPoolExecutor(max_workers=len(chunks)) as ex:
            partials = list(ex.map(
                _simulate,
                [players] * len(chunks),
                [board] * len(chunks),
                [pool] * len(chunks),
                chunks,
                seeds,
            ))

    for part_wins, part_ties, part_share in partials:
        for i in range(n):
            wins[i] += part_wins[i]
            ties[i] += part_ties[i]
            tie_share[i] += part_share[i]

    results = [
        EquityResult(wins=wins[i], ties=ties[i], trials=trials, tie_share=tie_share[i])
        for i in range(n)
    ]
    logger.debug("Equity: %s", ", ".join(f"{r.equity:.1f}%" for r in results))
    return results


class EquityCalculator:
    """
    Equity calculations with a fixed configuration.

    Holds its own random generator, so a seeded calculator
    reproduces the same sequence of estimates.
    """

    def __init__(self, config: Optional[EquityConfig] = None):
        self.config = config or EquityConfig()
        self.rng = np.random.default_rng(self.config.seed)

    def estimate(
        self,
        player_hole_cards: Sequence[HoleCards],
        board: Sequence[Card],
        trials: Optional[int] = None,
    ) -> list[EquityResult]:
        """Estimate equity for every player, using the configured budget by default."""
        return estimate_equity(
            player_hole_cards,
            board,
            self.config.trials if trials is None else trials,
            rng=self.rng,
            workers=self.config.workers,
        )

    def hand_vs_hand(
        self,
        hand1: HoleCards,
        hand2: HoleCards,
        board: Sequence[Card],
        trials: Optional[int] = None,
    ) -> tuple[float, float, float]:
        """
        Calculate equity of hand1 vs hand2 on a board.

        Returns:
            Tuple of (hand1_equity, hand2_equity, tie_frequency) as fractions
        """
        r1, r2 = self.estimate([hand1, hand2], board, trials)
        return (r1.equity / 100, r2.equity / 100, r1.ties / r1.trials)
