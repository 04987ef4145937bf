"""Per-game scoreboards mapping player names to scores."""

from __future__ import annotations

from typing import Iterator, NamedTuple

from bnmo.text import lower_ascii

MAX_ENTRIES = 10


class ScoreEntry(NamedTuple):
    """One player's score on a scoreboard."""

    name: str
    score: int


class ScoreboardFullError(Exception):
    """Raised when a new name is added to a full scoreboard."""


def same_name(first: str, second: str) -> bool:
    """Compare two names, ignoring the case of ASCII letters."""
    return lower_ascii(first) == lower_ascii(second)


class Scoreboard:
    """The scores of one game, keyed by player name without regard to case."""

    def __init__(self, capacity: int = MAX_ENTRIES) -> None:
        self.capacity = capacity
        self._entries: list[ScoreEntry] = []

    def insert(self, name: str, score: int) -> bool:
        """Add a name with its score; a name already present is left as it is.

        Returns True when the entry was added.
        """
        if name in self:
            return False
        if self.is_full():
            raise ScoreboardFullError(f"scoreboard holds at most {self.capacity} names")
        self._entries.append(ScoreEntry(name, score))
        return True

    def remove(self, name: str) -> None:
        """Remove the entry for a name, if there is one."""
        position = self.index(name)
        if position is not None:
            del self._entries[position]

    def get(self, name: str) -> int | None:
        """Return the score recorded for a name, or None."""
        position = self.index(name)
        return None if position is None else self._entries[position].score

    def index(self, name: str) -> int | None:
        """Return the position of a name, or None."""
        return next(
            (i for i, entry in enumerate(self._entries) if same_name(entry.name, name)),
            None,
        )

    def sort(self, ascending: bool = False) -> None:
        """Order the entries by score, keeping ties in their current order."""
        if ascending:
            self._entries.sort(key=lambda entry: entry.score)
        else:
            self._entries.sort(key=lambda entry: -entry.score)

    def clear(self) -> None:
        self._entries.clear()

    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.index(name) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(self._entries)


class ScoreboardSet:
    """One scoreboard for each game in the catalog, in catalog order."""

    def __init__(self, count: int = 0) -> None:
        self._boards = [Scoreboard() for _ in range(count)]

    def add(self) -> Scoreboard:
        """Append an empty scoreboard and return it."""
        board = Scoreboard()
        self._boards.append(board)
        return board

    def remove_last(self) -> Scoreboard:
        """Drop the last scoreboard and return it."""
        if not self._boards:
            raise IndexError("no scoreboards to remove")
        return self._boards.pop()

    def reset_all(self) -> None:
        """Empty every scoreboard."""
        for board in self._boards:
            board.clear()

    def __getitem__(self, index: int) -> Scoreboard:
        return self._boards[index]

    def __len__(self) -> int:
        return len(self._boards)

    def __iter__(self) -> Iterator[Scoreboard]:
        return iter(self._boards)