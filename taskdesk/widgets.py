"""Small geometry and text-entry helpers for the interface."""

from __future__ import annotations

from dataclasses import dataclass

MAX_INPUT_LEN = 256


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: float, y: float) -> bool:
        """Return whether the point lies strictly inside the rectangle."""
        return self.x < x < self.x + self.width and self.y < y < self.y + self.height


@dataclass
class TextField:
    """A single-line input that accepts printable ASCII up to a length limit."""

    placeholder: str = ""
    text: str = ""
    focused: bool = False
    max_length: int = MAX_INPUT_LEN

    @property
    def capacity(self) -> int:
        """Most characters the field will hold."""
        return self.max_length - 1

    def insert(self, char: str) -> bool:
        """Append *char* if it is printable ASCII and there is room; report success."""
        if len(char) != 1 or not 32 <= ord(char) <= 126:
            return False
        if len(self.text) >= self.capacity:
            return False
        self.text += char
        return True

    def backspace(self) -> bool:
        """Remove the last character, if any; report whether one was removed."""
        if not self.text:
            return False
        self.text = self.text[:-1]
        return True

    def clear(self) -> None:
        """Empty the field."""
        self.text = ""