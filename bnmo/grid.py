"""Points on the arena and the snake built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Point:
    """A cell of the arena: x is the column, y the row."""

    x: int
    y: int

    def is_origin(self) -> bool:
        return self.x == 0 and self.y == 0

    def moved(self, dx: int, dy: int) -> Point:
        """Return the point shifted by dx columns and dy rows."""
        return Point(self.x + dx, self.y + dy)

    def wrapped(self, size: int) -> Point:
        """Return the point folded back onto a size-by-size arena."""
        return Point(self.x % size, self.y % size)

    def __str__(self) -> str:
        return f"<{self.x},{self.y}>"


class Snake:
    """The snake's segments, head first."""

    def __init__(self, segments: Iterable[Point] = ()) -> None:
        self._segments = list(segments)

    def head(self) -> Point:
        if not self._segments:
            raise IndexError("snake is empty")
        return self._segments[0]

    def tail(self) -> Point:
        if not self._segments:
            raise IndexError("snake is empty")
        return self._segments[-1]

    def body(self) -> list[Point]:
        """Return every segment except the head."""
        return self._segments[1:]

    def append(self, point: Point) -> None:
        """Add a segment behind the tail."""
        self._segments.append(point)

    def remove(self, point: Point) -> bool:
        """Remove the first segment at a point; return whether one was there."""
        try:
            self._segments.remove(point)
        except ValueError:
            return False
        return True

    def advance(self, new_head: Point) -> None:
        """Put the head on a new point; each other segment takes the place of the one before."""
        if not self._segments:
            raise IndexError("snake is empty")
        self._segments = [new_head, *self._segments[:-1]]

    def __contains__(self, point: object) -> bool:
        return point in self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._segments)

    def __str__(self) -> str:
        return "[" + ",".join(str(point) for point in self._segments) + "]"