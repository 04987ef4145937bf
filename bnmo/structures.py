"""The game catalog, the play queue and the play history."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

DEFAULT_CAPACITY = 100


class QueueFullError(Exception):
    """Raised when a game is queued onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when the front of an empty queue is asked for."""


class GameCatalog:
    """The ordered list of game names known to the system."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = list(names)

    def add(self, name: str) -> None:
        """Append a game name."""
        self._names.append(name)

    def remove_at(self, index: int) -> str:
        """Remove and return the game at a zero-based index."""
        if not 0 <= index < len(self._names):
            raise IndexError(f"no game at index {index}")
        return self._names.pop(index)

    def index_of(self, name: str) -> int | None:
        """Return the index of an exactly matching name, or None."""
        try:
            return self._names.index(name)
        except ValueError:
            return None

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]


class GameQueue:
    """A bounded first-in first-out queue of games waiting to be played."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: deque[str] = deque()

    def enqueue(self, item: str) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full!")
        self._items.append(item)

    def dequeue(self) -> str:
        if not self._items:
            raise QueueEmptyError("Queue is empty!")
        return self._items.popleft()

    def head(self) -> str:
        if not self._items:
            raise QueueEmptyError("Queue is empty!")
        return self._items[0]

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


class History:
    """A bounded stack of played games; pushes onto a full stack are dropped."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[str] = []

    def push(self, item: str) -> None:
        if len(self._items) < self.capacity:
            self._items.append(item)

    def pop(self) -> str:
        if not self._items:
            raise IndexError("history is empty")
        return self._items.pop()

    def top(self) -> str:
        if not self._items:
            raise IndexError("history is empty")
        return self._items[-1]

    def recent(self, n: int) -> list[str]:
        """Return up to n games, most recent first."""
        if n <= 0:
            return []
        return self._items[::-1][:n]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the oldest game to the most recent."""
        return iter(self._items)