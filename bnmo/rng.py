"""The number guessing game."""

from __future__ import annotations

import random
from typing import Callable

from bnmo.scanner import InputReader
from bnmo.text import random_number

GIVE_UP_ATTEMPTS = 25
LOW = 1
HIGH = 100


def score_for(attempts: int, gave_up: bool) -> int:
    """Return the final score after a number of wrong guesses."""
    if gave_up:
        attempts = GIVE_UP_ATTEMPTS
    return (GIVE_UP_ATTEMPTS - attempts) * 4


def play(reader: InputReader, write: Callable[[str], object], rng: random.Random) -> int:
    """Play one round of guessing X and return the score."""
    target = random_number(rng, LOW, HIGH)
    attempts = 0
    gave_up = False
    guess: int | None = None

    write("\n========================================== RNG =========================================\n")
    write("RNG Telah dimulai. Uji keberuntungan Anda dengan menebak X.\n")
    write("X berada pada rentang angka 1 - 100\n")
    write("Masukkan '0' jika ingin menyerah.\n")
    while guess != target and not gave_up:
        write("Tebakan: ")
        guess = reader.read_int()
        if guess is None or guess < 0 or guess > HIGH:
            write("Masukan tidak valid.\n")
        elif guess == 0:
            gave_up = True
        elif guess > target:
            write("Lebih kecil\n")
            attempts += 1
        elif guess < target:
            write("Lebih besar\n")
            attempts += 1

    write("\n===================================== GAME BERAKHIR ====================================\n")
    if gave_up:
        write(f"\nAnda kurang beruntung, X adalah {target} \n")
    else:
        write(f"\nYa, X adalah {target} \n")
    score = score_for(attempts, gave_up)
    write(f"Skor akhir: {score}\n")
    return score