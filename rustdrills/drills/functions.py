"""Function drills: sale prices, parity and squares."""

from __future__ import annotations


def is_even(num: int) -> bool:
    """True when num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num