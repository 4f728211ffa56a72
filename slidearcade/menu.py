"""Keyboard-driven selection menus for the terminal."""

from __future__ import annotations

from typing import Iterable, TextIO

_SINGLE_KEYS = {
    "w": "up",
    "s": "down",
    "\r": "enter",
    "\n": "enter",
}
_ESCAPE_ARROWS = {"A": "up", "B": "down"}
_PREFIXED_ARROWS = {"H": "up", "P": "down"}
_ARROW_PREFIXES = ("\x00", "\xe0")


def read_key(stream: TextIO) -> str:
    """Read one key press from ``stream``.

    Returns ``"up"``, ``"down"`` or ``"enter"`` for navigation keys and the
    raw character for anything else.  Raises EOFError when the stream is
    exhausted.
    """
    char = stream.read(1)
    if not char:
        raise EOFError("no more keys to read")
    if char == "\x1b":
        follower = stream.read(1)
        if follower != "[":
            return char
        code = stream.read(1)
        return _ESCAPE_ARROWS.get(code, code)
    if char in _ARROW_PREFIXES:
        code = stream.read(1)
        return _PREFIXED_ARROWS.get(code, code)
    return _SINGLE_KEYS.get(char, char)


class Menu:
    """A vertical list of options with one highlighted entry."""

    def __init__(self, title: str, options: Iterable[str]) -> None:
        self.title = title
        self.options = tuple(options)
        if not self.options:
            raise ValueError("a menu needs at least one option")
        self.selected = 0

    @property
    def choice(self) -> str:
        """The option currently highlighted."""
        return self.options[self.selected]

    def move_up(self) -> None:
        """Highlight the previous option, wrapping to the last."""
        self.selected = (self.selected - 1) % len(self.options)

    def move_down(self) -> None:
        """Highlight the next option, wrapping to the first."""
        self.selected = (self.selected + 1) % len(self.options)

    def render(self) -> str:
        """Return the menu as text, marking the highlighted option with '>'."""
        lines = [self.title, ""]
        for index, option in enumerate(self.options):
            marker = ">" if index == self.selected else ""
            lines.append(f" {marker}[{index + 1}]{option}")
        return "\n".join(lines) + "\n"