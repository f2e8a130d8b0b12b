"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def emoji(fancy: str, plain: str) -> str:
    """Pick the fancy symbol unless emoji are switched off."""
    return plain if no_emoji() else fancy


def _emit(symbol: str, message: str, colour: str) -> str:
    line = f"{symbol} {message}"
    Console(highlight=False, soft_wrap=True).print(Text(line, style=colour))
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _emit(emoji("⚠️ ", "!"), message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _emit(emoji("✅", "✓"), message, "green")