"""Branching drills: picking the bigger number and mapping words."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """'foo' for 'fizz', 'bar' for 'fuzz', otherwise 'baz'."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"