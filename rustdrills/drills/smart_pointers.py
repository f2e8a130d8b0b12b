"""Shared, boxed and copy-on-write data: offset sums, cons lists, planets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

PLANET_NAMES = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
)


def offset_sums(numbers: Sequence[int], workers: int) -> list[int]:
    """Sum every workers-th number per offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")

    def sum_offset(offset: int) -> int:
        total = sum(n for n in numbers if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list; None ends the list."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a one-element cons list."""
    return Cons(1, None)


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Return values itself when nothing is negative, else a new absolute copy."""
    if all(v >= 0 for v in values):
        return values
    return [abs(v) for v in values]


class Sun:
    """The star every planet shares."""

    def __repr__(self) -> str:
        return "Sun"


@dataclass(frozen=True)
class Planet:
    """A planet revolving around a shared Sun."""

    name: str
    sun: Sun

    def __post_init__(self) -> None:
        if self.name not in PLANET_NAMES:
            raise ValueError(f"unknown planet: {self.name!r}")

    def __repr__(self) -> str:
        return f"{self.name}({self.sun!r})"

    def details(self) -> str:
        """Print and return a greeting from the planet."""
        line = f"Hi from {self!r}!"
        print(line)
        return line