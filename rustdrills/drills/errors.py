"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width with strict syntax."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_RE.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for the given quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot become a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.reason == self.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing text into a positive non-zero integer failed."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(err)

    @property
    def is_creation(self) -> bool:
        """True when the number parsed but was not positive."""
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(s, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parse_int(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc