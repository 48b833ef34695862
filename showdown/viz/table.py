"""Terminal display of hands, equity and showdown results."""

from typing import Optional, Sequence

from rich.table import Table
from rich.text import Text

from showdown.game.cards import Card, HoleCards
from showdown.game.equity import EquityResult
from showdown.game.evaluator import EvaluatedHand, HandCategory


CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

# Suit glyph colors (clubs, diamonds, hearts, spades)
SUIT_STYLE = {0: "green", 1: "blue", 2: "red", 3: "bold"}


def category_name(category: HandCategory) -> str:
    """English label for a hand category."""
    return CATEGORY_NAMES[HandCategory(category)]


def format_cards(cards: Sequence[Card]) -> Text:
    """Render cards as colored '♠A ♥K' text."""
    text = Text()
    for i, card in enumerate(cards):
        if i:
            text.append(" ")
        text.append(card.symbol, style=SUIT_STYLE[card.suit])
    return text


def _equity_style(equity: float, num_players: int) -> str:
    fair = 100.0 / num_players
    if equity >= 2 * fair or equity >= 99.95:
        return "bold green"
    if equity >= fair:
        return "green"
    if equity > 0:
        return "yellow"
    return "dim"


def equity_table(
    players: Sequence[HoleCards],
    results: Sequence[EquityResult],
    hands: Optional[Sequence[EvaluatedHand]] = None,
    ranks: Optional[Sequence[int]] = None,
    title: Optional[str] = None,
) -> Table:
    """
    Build a table with one row per player.

    Args:
        players: Hole cards per player
        results: Equity per player
        hands: Evaluated hands; adds a hand column when given
        ranks: Showdown ranks; adds a rank column when given
        title: Table title

    Returns:
        rich Table ready to print
    """
    table = Table(title=title)
    table.add_column("Player", style="cyan")
    table.add_column("Hole Cards")
    if hands is not None:
        table.add_column("Hand")
    table.add_column("Equity", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Ties", justify="right")
    if ranks is not None:
        table.add_column("Rank", justify="right")

    for i, (hole, result) in enumerate(zip(players, results)):
        row = [f"Player {i + 1}", format_cards(list(hole))]
        if hands is not None:
            hand = hands[i]
            row.append(category_name(hand.category) if hand.is_complete else "-")
        row.append(Text(
            f"{result.equity:.1f}%",
            style=_equity_style(result.equity, len(players)),
        ))
        row.append(str(result.wins))
        row.append(str(result.ties))
        if ranks is not None:
            row.append(str(ranks[i]))
        table.add_row(*row)

    return table
