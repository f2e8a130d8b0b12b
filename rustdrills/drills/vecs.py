"""Vector drills: arrays versus lists, and doubling elements."""

from __future__ import annotations


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    growable = [10, 20, 30, 40]
    return fixed, growable


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    for i, value in enumerate(values):
        values[i] = value * 2
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]