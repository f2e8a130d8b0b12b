"""Enum drills: messages that change the state of a small program."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the screen."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to an RGB triple."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Print a line of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop the program."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and whether the program should stop."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit = True
            case Echo(text=text):
                print(text)
            case ChangeColor(color=color):
                self.color = color
            case Move(point=point):
                self.position = point
            case _:
                raise TypeError(f"unknown message: {message!r}")