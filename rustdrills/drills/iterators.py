"""Iterator drills: stepping through lists, capitalising, dividing, counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from enum import Enum

_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry")
_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def favourite_fruits() -> Iterator[str]:
    """Return an iterator over a fixed list of favourite fruits."""
    return iter(_FRUITS)


def capitalize_first(text: str) -> str:
    """Upper-case the first character: 'hello' -> 'Hello'."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them with nothing in between."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division could not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, NotDivisibleError)
            and (other.dividend, other.divisor) == (self.dividend, self.divisor)
        )

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZero(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZero)

    def __hash__(self) -> int:
        return hash(DivideByZero)


def divide(a: int, b: int) -> int:
    """Return a / b when b divides a evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZero()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def result_with_list() -> list[int]:
    """Divide the fixed numbers by 27; raise at the first failing division."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide the fixed numbers by 27, keeping each result or error."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! for a non-negative integer."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))


class Progress(Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)