"""Visualization module."""

from .table import CATEGORY_NAMES, category_name, format_cards, equity_table

__all__ = [
    "CATEGORY_NAMES",
    "category_name",
    "format_cards",
    "equity_table",
]
