"""Quiz drills: pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return apples if apples > 40 else apples * 2


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append 'bar' count times."""

    count: int


Command = Uppercase | Trim | Append


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a grade of any printable type."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        """Render the report card line."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )