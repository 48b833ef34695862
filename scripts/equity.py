#!/usr/bin/env python3
"""Calculate showdown equity for a set of hole cards and a board."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from showdown.game.cards import Hand, parse_cards
from showdown.game.equity import EquityCalculator, EquityConfig
from showdown.game.evaluator import evaluate
from showdown.game.ranking import rank_all
from showdown.viz import equity_table, format_cards


def main():
    parser = argparse.ArgumentParser(
        description="Estimate each player's equity in a Hold'em hand"
    )
    parser.add_argument(
        "hands",
        nargs="+",
        help="Hole cards per player (e.g., 'AsKs' 'QhQd')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Board cards (e.g., 'QsJsTs' or 'Qs Js Ts')",
    )
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=10000,
        help="Monte Carlo trials (default: 10000)",
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
        help="Random seed for reproducible results",
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

    try:
        players = [Hand.from_string(h) for h in args.hands]
        board = parse_cards(args.board)

        calculator = EquityCalculator(EquityConfig(
            trials=args.trials,
            workers=args.workers,
            seed=args.seed,
        ))
        results = calculator.estimate(players, board)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1

    if board:
        console.print("[bold]Board:[/] ", format_cards(board))
    else:
        console.print("[bold]Board:[/] (preflop)")
    console.print()

    hands = None
    ranks = None
    if len(board) >= 3:
        hands = [evaluate(p, board) for p in players]
    if len(board) == 5:
        ranks = rank_all(hands)

    title = "Showdown" if ranks else f"Equity ({args.trials} trials)"
    console.print(equity_table(players, results, hands=hands, ranks=ranks, title=title))
    return 0


if __name__ == "__main__":
    sys.exit(main())
