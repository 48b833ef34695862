#!/usr/bin/env python3
"""Deal a Hold'em hand street by street, tracking each player's equity."""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from rich.console import Console
from rich.logging import RichHandler

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from showdown.game.cards import Deck
from showdown.game.equity import estimate_equity
from showdown.game.evaluator import evaluate
from showdown.game.ranking import rank_all, winners
from showdown.viz import category_name, equity_table, format_cards

# (street name, cards revealed)
STREETS = [("Flop", 3), ("Turn", 1), ("River", 1)]


def main():
    parser = argparse.ArgumentParser(
        description="Deal one hand of Hold'em and show equity after every street"
    )
    parser.add_argument(
        "-p", "--players",
        type=int,
        default=2,
        help="Number of players, 2-10 (default: 2)",
    )
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=500,
        help="Monte Carlo trials per street (default: 500)",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Worker processes (default: 1)",
    )
    parser.add_argument(
        "-s", "--seed",
        type=int,
        help="Random seed for reproducible deals",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console)],
        )

    if not 2 <= args.players <= 10:
        console.print("[red]Players must be between 2 and 10[/]")
        return 1

    rng = np.random.default_rng(args.seed)
    deck = Deck()
    deck.shuffle(rng)

    players = [deck.deal(2) for _ in range(args.players)]
    board = []

    try:
        results = estimate_equity(players, board, args.trials, rng=rng, workers=args.workers)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1
    console.print(equity_table(players, results, title="Preflop"))

    for street, count in STREETS:
        board = board + deck.deal(count)
        console.print()
        console.print(f"[bold]{street}:[/] ", format_cards(board))

        hands = [evaluate(p, board) for p in players]
        results = estimate_equity(players, board, args.trials, rng=rng, workers=args.workers)
        ranks = rank_all(hands) if len(board) == 5 else None
        console.print(equity_table(players, results, hands=hands, ranks=ranks, title=street))

    best = winners(hands)
    names = ", ".join(f"Player {i + 1}" for i in best)
    verb = "split the pot" if len(best) > 1 else "wins"
    console.print(
        f"\n[bold green]{names} {verb}[/] with {category_name(hands[best[0]].category)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
