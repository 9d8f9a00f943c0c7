"""Character source with line/column tracking and error collection."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from mikroc.tokens import Position


@dataclass(frozen=True)
class Location:
    """A line and column in the program text, both counted from 1."""

    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Diagnostic:
    """One reported error, with as much of its location as was asked for."""

    message: str
    location: Location
    position: Position = Position.COLUMN

    def __str__(self) -> str:
        if self.position is Position.COLUMN:
            return f"{self.location.line}.{self.location.column} {self.message}"
        if self.position is Position.LINE:
            return f"{self.location.line} {self.message}"
        return self.message


@dataclass
class SourceReader:
    """Reads program text character by character.

    The column tracks the start of the most recently marked token: marking a
    token first moves the column past the previous one and then remembers the
    new token's width.
    """

    text: str
    offset: int = 0
    line: int = 1
    column: int = 1
    diagnostics: list[Diagnostic] = field(default_factory=list)
    _width: int = 0

    def __init__(self, text: str) -> None:
        self.text = text
        self.offset = 0
        self.line = 1
        self.column = 1
        self._width = 0
        self.diagnostics = []

    @property
    def location(self) -> Location:
        """The current line and column."""
        return Location(self.line, self.column)

    @property
    def has_errors(self) -> bool:
        """Whether any error has been reported."""
        return bool(self.diagnostics)

    @property
    def at_end(self) -> bool:
        """Whether all text has been consumed."""
        return self.offset >= len(self.text)

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""
        if self.at_end:
            return None
        return self.text[self.offset]

    def read(self) -> str | None:
        """Consume and return the next character, or None at the end."""
        char = self.peek()
        if char is not None:
            self.offset += 1
        return char

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match ``pattern`` at the current offset without consuming anything."""
        return pattern.match(self.text, self.offset)

    def advance(self, count: int) -> str:
        """Consume up to ``count`` characters and return them."""
        if count < 0:
            raise ValueError("count must not be negative")
        chunk = self.text[self.offset : self.offset + count]
        self.offset += len(chunk)
        return chunk

    def mark_token(self, length: int) -> None:
        """Move the column past the previous token and record a new width."""
        self.column += self._width
        self._width = length

    def newline(self) -> None:
        """Start a new line: next line, first column, no pending width."""
        self.line += 1
        self.column = 1
        self._width = 0

    def report(self, message: str, position: Position = Position.COLUMN) -> Diagnostic:
        """Record an error at the current location and return it."""
        diagnostic = Diagnostic(message, self.location, position)
        self.diagnostics.append(diagnostic)
        return diagnostic