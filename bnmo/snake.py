"""The Snake on Meteor game on a 5x5 arena that wraps at its edges."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Callable

from bnmo.grid import Point, Snake
from bnmo.scanner import InputReader
from bnmo.text import lower_ascii, random_number

SIZE = 5
SEPARATOR = "-" * 21
DIRECTIONS = {"w": (0, -1), "a": (-1, 0), "s": (0, 1), "d": (1, 0)}
_GROWTH = ((-1, 0), (0, -1), (0, 1), (1, 0))


class Crash(enum.Enum):
    """Ways a move ends the game before a meteor falls."""

    NO_ROOM = "Snake tidak dapat menambah ekornya lagi!\n"
    OBSTACLE = "Snake menabrak obstacle!\n"
    SELF = "Snake menabrak komponennya sendiri!\n"


class MeteorHit(enum.Enum):
    MISS = "miss"
    BODY = "body"
    HEAD = "head"


class BlockedMoveError(ValueError):
    """Raised when the head would move onto the segment right behind it."""


class GameOverError(Exception):
    """Raised when a move is made after the game has ended."""


@dataclass
class MoveReport:
    """What happened during one move."""

    blocked: bool = False
    crash: Crash | None = None
    meteor_hit: MeteorHit | None = None
    landing: str = ""


def _delta(direction: str) -> tuple[int, int]:
    try:
        return DIRECTIONS[lower_ascii(direction)]
    except KeyError:
        raise ValueError(f"unknown direction: {direction!r}") from None


def _random_point(rng: random.Random) -> Point:
    x = random_number(rng, 0, SIZE - 1)
    y = random_number(rng, 0, SIZE - 1)
    return Point(x, y)


def make_snake(rng: random.Random) -> Snake:
    """Place a three-segment snake with its head on a random cell."""
    head = _random_point(rng)
    if head.x >= 2:
        body = [head.moved(-1, 0), head.moved(-2, 0)]
    elif head.x == 0:
        step = 1 if head.y <= 1 else -1
        body = [head.moved(0, step), head.moved(0, 2 * step)]
    elif head.y == 0:
        body = [Point(0, 0), Point(0, 1)]
    else:
        body = [head.moved(-1, 0), head.moved(-1, -1)]
    return Snake([head, *body])


def _cell(point: Point) -> int:
    return point.x + point.y * SIZE


def render_arena(snake: Snake, meteor: Point | None, obstacle: Point, food: Point) -> str:
    """Draw the arena: H head, numbered body, b obstacle, o food, m meteor."""
    marks: list[str | None] = [None] * (SIZE * SIZE)
    for number, segment in enumerate(snake):
        marks[_cell(segment)] = "H" if number == 0 else str(number)
    marks[_cell(obstacle)] = "b"
    marks[_cell(food)] = "o"
    if meteor is not None:
        marks[_cell(meteor)] = "m"
    lines = [SEPARATOR]
    for start in range(0, SIZE * SIZE, SIZE):
        row = marks[start:start + SIZE]
        lines.append("|" + "".join(f" {mark} |" if mark else "   |" for mark in row))
        lines.append(SEPARATOR)
    return "\n".join(lines)


class SnakeGame:
    """The state of one game: the snake, the obstacle, the food and the last meteor."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.snake = make_snake(rng)
        self.meteor: Point | None = None
        self.obstacle = _random_point(rng)
        self.food = _random_point(rng)
        while (
            self.obstacle in self.snake
            or self.food in self.snake
            or self.food == self.obstacle
        ):
            self.obstacle = _random_point(rng)
            self.food = _random_point(rng)
        self.turn = 1
        self.meteor_hot = False
        self.over = False

    def check_direction(self, direction: str) -> bool:
        """False when the direction leads onto the segment behind the head."""
        dx, dy = _delta(direction)
        body = self.snake.body()
        if not body:
            return True
        return self.snake.head().moved(dx, dy).wrapped(SIZE) != body[0]

    def _grow(self) -> bool:
        tail = self.snake.tail()
        for dx, dy in _GROWTH:
            spot = tail.moved(dx, dy).wrapped(SIZE)
            if spot in self.snake or spot == self.obstacle or spot == self.meteor:
                continue
            self.snake.append(spot)
            while self.food in self.snake or self.food == self.obstacle:
                self.food = _random_point(self.rng)
            return True
        return False

    def _drop_meteor(self, report: MoveReport) -> None:
        self.meteor = _random_point(self.rng)
        while self.meteor == self.food:
            self.meteor = _random_point(self.rng)
        report.landing = self.render()
        if self.meteor in self.snake:
            if self.snake.head() == self.meteor:
                self.over = True
                report.meteor_hit = MeteorHit.HEAD
            else:
                report.meteor_hit = MeteorHit.BODY
            self.snake.remove(self.meteor)
        else:
            report.meteor_hit = MeteorHit.MISS
        self.meteor_hot = True

    def move(self, direction: str) -> MoveReport:
        """Move the head one cell, then let a meteor fall unless the game ended."""
        if self.over:
            raise GameOverError("the game is over")
        if not self.check_direction(direction):
            raise BlockedMoveError("Anda tidak dapat bergerak ke tubuh anda sendiri!")
        dx, dy = _delta(direction)
        head = self.snake.head()
        if self.meteor_hot and head.moved(dx, dy) == self.meteor:
            return MoveReport(blocked=True)
        self.meteor_hot = False
        self.snake.advance(head.moved(dx, dy).wrapped(SIZE))
        report = MoveReport()
        new_head = self.snake.head()
        if new_head == self.food:
            if not self._grow():
                report.crash = Crash.NO_ROOM
        elif new_head == self.obstacle:
            report.crash = Crash.OBSTACLE
        elif new_head in self.snake.body():
            report.crash = Crash.SELF
        if report.crash is not None:
            self.over = True
        else:
            self._drop_meteor(report)
        self.turn += 1
        return report

    def render(self) -> str:
        return render_arena(self.snake, self.meteor, self.obstacle, self.food)

    def score(self) -> int:
        """Two points for each segment left."""
        return len(self.snake) * 2


def _read_direction(game: SnakeGame, reader: InputReader, write: Callable[[str], object]) -> str:
    while True:
        write(f"TURN {game.turn}\n")
        write("Silahkan masukkan command anda: ")
        direction = lower_ascii(reader.read_word())
        if direction not in DIRECTIONS:
            write("Command tidak valid! Silahkan input command menggunakan huruf w/a/s/d\n\n")
            continue
        if game.check_direction(direction):
            return direction
        write("Anda tidak dapat bergerak ke tubuh anda sendiri!\n")
        write("Silahkan input command yang lain!\n\n")


def play(reader: InputReader, write: Callable[[str], object], rng: random.Random) -> int:
    """Play Snake on Meteor until the snake dies and return the score."""
    game = SnakeGame(rng)
    write("\n==================================== SNAKE ON METEOR ====================================\n")
    write("Selamat datang di snake on meteor!\n\n")
    write("Mengenerate peta, snake, dan makanan . . .\n\n")
    write("Berhasil digenerate!\n\n")
    write("------------------------------------------\n\n")
    write("Berikut merupakan peta permainan\n")
    write(game.render())
    write("\n\n")
    while not game.over:
        report = game.move(_read_direction(game, reader, write))
        if report.blocked:
            write("Meteor masih panas! Anda belum dapat kembali ke titik tersebut.\n")
            write("Silahkan masukkan command lainnya\n\n")
            continue
        if report.crash is not None:
            write(report.crash.value)
        else:
            write("Berhasil bergerak!\n")
            write("Berikut merupakan peta permainan:\n")
            write(report.landing)
            write("\n")
            if report.meteor_hit is MeteorHit.HEAD:
                write("Kepala snake terkena meteor!\n")
            elif report.meteor_hit is MeteorHit.BODY:
                write("Anda terkena meteor!\n")
                write("Berikut merupakan peta permainan sekarang:\n")
                write(game.render())
                write("\n")
                write("Silahkan lanjutkan permainan!\n\n")
            else:
                write("Anda beruntung tidak terkena meteor! Silahkan lanjutkan permainan!\n\n")
        write("\n")
    write("==================================== GAME BERAKHIR ====================================\n")
    score = game.score()
    write(f"Skor akhir: {score}\n")
    return score