"""The Tower of Hanoi puzzle."""

from __future__ import annotations

from typing import Callable

from bnmo.scanner import InputReader
from bnmo.text import power

POLES = 3
MIN_DISKS = 1
MAX_DISKS = 10


class InvalidMoveError(Exception):
    """Raised when a disk cannot be taken from or placed on a pole."""


class Tower:
    """Three poles holding disks of odd widths, the widest at the bottom."""

    def __init__(self, disks: int) -> None:
        if not MIN_DISKS <= disks <= MAX_DISKS:
            raise ValueError(f"disk count must be between {MIN_DISKS} and {MAX_DISKS}")
        self.disks = disks
        self._full = [2 * i + 1 for i in reversed(range(disks))]
        self.poles: list[list[int]] = [list(self._full), [], []]

    def _pole(self, pole: int) -> list[int]:
        if not 1 <= pole <= POLES:
            raise InvalidMoveError(f"no pole {pole}")
        return self.poles[pole - 1]

    def take(self, pole: int) -> int:
        """Remove and return the top disk of a pole numbered from 1."""
        stack = self._pole(pole)
        if not stack:
            raise InvalidMoveError(f"pole {pole} is empty")
        return stack.pop()

    def place(self, disk: int, pole: int) -> None:
        """Put a disk on a pole numbered from 1, on top of a wider disk only."""
        stack = self._pole(pole)
        if stack and stack[-1] < disk:
            raise InvalidMoveError(f"disk {disk} is wider than the top of pole {pole}")
        stack.append(disk)

    def is_solved(self) -> bool:
        """True when every disk sits on the rightmost pole in order."""
        return self.poles[-1] == self._full

    def render(self) -> str:
        """Draw the poles with their disks, a base line and the pole numbers."""
        widest = 2 * self.disks - 1
        middle = widest // 2
        rod = "".join("|" if j == middle else " " for j in range(widest))
        lines = []
        for level in range(self.disks - 1, -1, -1):
            cells = []
            for stack in self.poles:
                if level < len(stack):
                    size = stack[level]
                    margin = (widest - size) // 2
                    cells.append((" " * margin + "*" * size).ljust(widest))
                else:
                    cells.append(rod)
            lines.append("".join(f"{cell}\t" for cell in cells))
        lines.append(("-" * widest + "\t") * POLES)
        labels = (
            "".join(str(number) if j == middle else " " for j in range(widest))
            for number in range(1, POLES + 1)
        )
        lines.append("".join(f"{label}\t" for label in labels))
        return "\n".join(lines) + "\n"


def final_score(disks: int, moves: int) -> int:
    """Score a solved puzzle: fewer moves beyond the minimum score higher."""
    points = disks * 20 - (moves - (power(2, disks) - 1))
    quotient = abs(points) // 10
    return quotient if points >= 0 else -quotient


def _ask_disks(reader: InputReader, write: Callable[[str], object]) -> int:
    while True:
        write("\nSilahkan input jumlah piringan (Min: 1, Max: 10): ")
        disks = reader.read_int()
        if disks is not None and MIN_DISKS <= disks <= MAX_DISKS:
            return disks
        write("\nJumlah piringan melewati batas minimum/maximum.\n")


def _take(tower: Tower, reader: InputReader, write: Callable[[str], object]) -> tuple[int, int]:
    while True:
        write("\nTIANG ASAL: ")
        pole = reader.read_int()
        write("\n")
        if pole is None or not 1 <= pole <= POLES:
            write("MASUKAN TIDAK VALID.\nCOBA LAGI!\n")
            continue
        try:
            return tower.take(pole), pole
        except InvalidMoveError:
            write("TIANG KOSONG, PROSES TIDAK BISA DILAKUKAN.\nCOBA LAGI!\n")


def _place(tower: Tower, disk: int, reader: InputReader, write: Callable[[str], object]) -> int:
    while True:
        write("TIANG TUJUAN: ")
        pole = reader.read_int()
        write("\n")
        if pole is None or not 1 <= pole <= POLES:
            write("MASUKAN TIDAK VALID.\nCOBA LAGI!\n")
            continue
        try:
            tower.place(disk, pole)
            return pole
        except InvalidMoveError:
            write("PROSES TIDAK BISA DILAKUKAN.\nCOBA LAGI!\n\n")


def play(reader: InputReader, write: Callable[[str], object]) -> int:
    """Play the puzzle until it is solved and return the score."""
    write("\n==================================== TOWER OF HANOI ====================================\n")
    write("Tujuan: Memindahkan seluruh piringan pada tiang paling kiri ke tiang paling kanan.\n")
    write("Rule: Tidak bisa memindahkan piringan yang lebih besar di atas piringan yang lebih kecil.")
    disks = _ask_disks(reader, write)
    write("\nSELAMAT BERMAIN!\n\n")
    tower = Tower(disks)
    write(tower.render())
    moves = 0
    while True:
        disk, source = _take(tower, reader, write)
        target = _place(tower, disk, reader, write)
        if target != source:
            moves += 1
        else:
            write("ANDA MEMINDAHKAN PIRING KE TIANG YANG SAMA,\n")
            write("PROSES TIDAK BISA DILAKUKAN.\n")
            write("COBA LAGI!\n\n")
        solved = tower.is_solved()
        write(tower.render())
        if solved:
            break
    score = final_score(disks, moves)
    write("\n")
    write("\n=============================== SELAMAT, KAMU BERHASIL ================================\n\n")
    write(f"Jumlah putaran: {moves}\n")
    write(f"Skor akhir: {score}\n")
    return score