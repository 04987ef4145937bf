"""The word guessing game."""

from __future__ import annotations

import enum
import random
from pathlib import Path
from typing import Callable, Iterable

from bnmo.scanner import InputReader, read_records
from bnmo.text import upper_ascii

CHANCES = 10
_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


class GuessResult(enum.Enum):
    HIT = "hit"
    MISS = "miss"
    ALREADY = "already"


def load_words(path: str | Path) -> list[str]:
    """Read the word list, one word per line, up to the '.' mark."""
    return read_records(path)


def save_words(path: str | Path, words: Iterable[str]) -> None:
    """Write the word list back in the form load_words reads."""
    with open(path, "w", encoding="utf-8") as handle:
        for word in words:
            handle.write(f"{word}\n")
        handle.write(".")


def category(index: int) -> str:
    """Return the category of the word at a position in the list."""
    if index < 10:
        return "Kota"
    if index < 20:
        return "Barang"
    if index < 30:
        return "Makanan"
    return "Kata buatan"


def spaced(text: str) -> str:
    """Return text with a blank after every character."""
    return "".join(f"{char} " for char in text)


class HangmanRound:
    """The guessing state for one word."""

    def __init__(self, word: str) -> None:
        self.word = word
        self.guessed: list[str] = []
        self._revealed = [False] * len(word)

    def guess(self, letter: str) -> GuessResult:
        """Guess one ASCII letter, given in either case."""
        if len(letter) != 1 or letter not in _LETTERS:
            raise ValueError(f"not a single letter: {letter!r}")
        letter = upper_ascii(letter)
        already = letter in self.guessed
        if not already:
            self.guessed.append(letter)
        hit = False
        for position, char in enumerate(self.word):
            if char == letter:
                self._revealed[position] = True
                hit = True
        if already:
            return GuessResult.ALREADY
        return GuessResult.HIT if hit else GuessResult.MISS

    def pattern(self) -> str:
        """Return the word with unguessed letters shown as '_'."""
        return "".join(
            char if shown else "_" for char, shown in zip(self.word, self._revealed)
        )

    def solved(self) -> bool:
        return all(self._revealed)

    def guessed_text(self) -> str:
        return "".join(self.guessed) if self.guessed else "-"


def _add_words(reader: InputReader, write: Callable[[str], object], words: list[str]) -> None:
    write("\nSilahkan menambahkan kata-kata ke dalam sistem.")
    while True:
        write("\nKetik SUDAH ketika selesai menambahkan kata.\n")
        write("Masukkan kata: ")
        entry = upper_ascii(reader.read_word())
        if entry == "SUDAH":
            return
        if not entry:
            continue
        if entry in words:
            write("\nKata sudah terdaftar dalam sistem. Silahkan masukkan kata lain.\n")
        else:
            words.append(entry)
            write(f"\nBerhasil menambahkan kata {entry} ke dalam sistem.\n")


def _show(write: Callable[[str], object], current: HangmanRound, chances: int) -> None:
    write("\nTebakan sebelumnya: ")
    write(spaced(current.guessed_text()) + "\n")
    write(spaced(current.pattern()) + "\n")
    write(f"Kesempatan = {chances}\n")


def play(
    reader: InputReader,
    write: Callable[[str], object],
    rng: random.Random,
    path: str | Path,
) -> int:
    """Play hangman until the chances run out and return the total score."""
    words = load_words(path)
    solved_words: list[str] = []
    total = 0

    write("\n==================================== HANGMAN ====================================\n")
    write("Hangman merupakan permainan menebak kata dengan menebak satu-satu huruf yang ada\n")
    write("pada kata. Pemain memiliki 10 kesempatan dalam bermain. Jika pemain berhasil\n")
    write("menebak kata, maka pemain akan mendapatkan poin sesuai panjang kata yang\n")
    write("berhasil ditebak, dan permainan akan berlanjut sampai kesempatan habis.\n\n")
    while True:
        write("Pilihan menu:\n")
        write("  1. Bermain langsung\n")
        write("  2. Menambahkan kata-kata ke dalam sistem\n")
        write("Masukkan pilihan menu: ")
        choice = reader.read_word()
        if choice in ("1", "2"):
            break
        write("\nMasukan tidak valid.\n\n")

    if choice == "2":
        _add_words(reader, write, words)

    write("\nSelamat bermain!\n\n")
    chances = CHANCES
    while chances > 0:
        remaining = [i for i, word in enumerate(words) if word not in solved_words]
        if not remaining:
            break
        index = rng.choice(remaining)
        current = HangmanRound(words[index])
        write(f"Kategori: {category(index)}\n")
        write("Tebakan sebelumnya: ")
        write(spaced(current.guessed_text()) + "\n")
        write(spaced(current.pattern()) + "\n")
        write(f"Kesempatan: {chances}\n")
        while chances > 0 and not current.solved():
            write("Masukkan tebakan: ")
            try:
                result = current.guess(reader.read_word())
            except ValueError:
                write("\nMasukan tidak valid.\n")
                _show(write, current, chances)
                continue
            if result is GuessResult.ALREADY:
                write("Huruf sudah ditebak sebelumnya\n")
            elif result is GuessResult.MISS:
                chances -= 1
            _show(write, current, chances)
            if current.solved():
                solved_words.append(current.word)
                score = len(current.word)
                total += score
                write("\nSelamat anda berhasil menebak kata ")
                write(f"{current.pattern()}\n")
                write(f"Kamu mendapatkan {score} poin\n\n")
    write(f"Skor akhir: {total}\n")
    save_words(path, words)
    return total