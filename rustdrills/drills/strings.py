"""String drills: recognising, trimming, composing and replacing."""

from __future__ import annotations


def is_a_color_word(attempt: str) -> bool:
    """True for 'green', 'blue' or 'red'."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ' world!'."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every 'cars' with 'balloons'."""
    return text.replace("cars", "balloons")