"""Trait drills: appending 'Bar', shared licensing defaults and generic wrappers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@singledispatch
def append_bar(value: Any) -> Any:
    """Append 'Bar' to a string, or add 'Bar' as a new element of a list."""
    raise TypeError(f"cannot append 'Bar' to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_str(value: str) -> str:
    return f"{value}Bar"


@append_bar.register(list)
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        """Return the shared licensing text."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


def some_func(item: Any) -> bool:
    """True when both some_function() and other_function() of item are true."""
    return item.some_function() and item.other_function()


@dataclass
class Wrapper(Generic[T]):
    """Hold a value of any type."""

    value: T