"""Input validation errors raised by the hand-strength core."""


class MalformedHandInput(ValueError):
    """Hole cards, board or deck violate the card invariants.

    Raised for a wrong hole-card count, more than five board cards,
    or the same card appearing twice in one call's input.
    """


class InvalidTrialBudget(ValueError):
    """Non-positive trial count requested from the equity simulator."""
