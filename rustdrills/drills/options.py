"""Option drill: ice cream left in the fridge."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces left at the given hour; None for hours past 24."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None