"""Source positions and ranges used to report where input was read."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass
class Position:
    """A line and column, optionally tied to a file name."""

    filename: str | None = None
    line: int = 1
    column: int = 1

    def lines(self, count: int = 1) -> None:
        """Advance by ``count`` lines and return to the first column."""
        self.column = 1
        self.line += count

    def columns(self, count: int = 1) -> None:
        """Advance by ``count`` columns, never going before column 1."""
        self.column = max(1, self.column + count)

    def __add__(self, width: int) -> Position:
        result = replace(self)
        result.columns(width)
        return result

    def __sub__(self, width: int) -> Position:
        return self + -width

    def __str__(self) -> str:
        prefix = f"{self.filename}:" if self.filename else ""
        return f"{prefix}{self.line}.{self.column}"


@dataclass
class Location:
    """A range from ``begin`` up to, but not including, ``end``."""

    begin: Position = field(default_factory=Position)
    end: Position | None = None

    def __post_init__(self) -> None:
        self.end = replace(self.begin) if self.end is None else replace(self.end)
        self.begin = replace(self.begin)

    def step(self) -> None:
        """Move the start of the range to its end."""
        self.begin = replace(self.end)

    def columns(self, count: int = 1) -> None:
        """Extend the end by ``count`` columns."""
        self.end.columns(count)

    def lines(self, count: int = 1) -> None:
        """Extend the end by ``count`` lines."""
        self.end.lines(count)

    def __add__(self, other: Location | int) -> Location:
        if isinstance(other, Location):
            return Location(self.begin, other.end)
        if isinstance(other, int):
            result = Location(self.begin, self.end)
            result.columns(other)
            return result
        return NotImplemented

    def __str__(self) -> str:
        last = self.end - 1
        text = str(self.begin)
        if last.filename and (not self.begin.filename or self.begin.filename != last.filename):
            text += f"-{last}"
        elif self.begin.line != last.line:
            text += f"-{last.line}.{last.column}"
        elif self.begin.column != last.column:
            text += f"-{last.column}"
        return text