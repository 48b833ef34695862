"""
Showdown: Texas Hold'em hand-strength engine

Evaluates each player's best five-card hand, ranks players at
showdown and estimates win equity, exactly on a complete board and
by Monte Carlo simulation of the unseen cards before the river.
"""

__version__ = "0.1.0"
