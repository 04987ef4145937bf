"""The console session: games, queue, history and scoreboards."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

from bnmo.scanner import InputReader, read_records
from bnmo.scoreboard import ScoreboardSet
from bnmo.structures import GameCatalog, GameQueue, History, QueueFullError
from bnmo.text import pad_right, parse_int, split_name_score, upper_ascii

PROTECTED_GAMES = 5
MAX_NAME = 11
CONFIG = "config"

_HELP_IDLE = (
    "DAFTAR COMMANDS:\n"
    "  1. START - Menjalankan file configurasi default\n"
    "  2. LOAD <filename tanpa .txt> - Menjalankan file dari input user\n"
    "  3. QUIT - Keluar dari program\n"
    "  4. HELP - Menampilkan daftar command yang dapat dijalankan\n"
)

_HELP_STARTED = (
    "DAFTAR COMMANDS:\n"
    "  1. SAVE <filename tanpa .txt> - Menyimpan state sistem ke dalam file dari input user\n"
    "  2. CREATE GAME - Membuat game baru dari input user\n"
    "  3. LIST GAME - Menampilkan daftar game yang dapat tersedia dalam sistem\n"
    "  4. DELETE GAME - Menghapus game yang tersedia dari sistem\n"
    "  5. QUEUE GAME - Menambahkan game ke dalam antrean game\n"
    "  6. PLAY GAME - Memainkan game yang berada di depan antrean\n"
    "  7. SKIP GAME <n> - Melewati game yang berada di dalam antrean sebanyak n kali\n"
    "  8. SCOREBOARD - Menampilkan scoreboard setiap game yang tersedia dari sistem\n"
    "  9. RESET SCOREBOARD - Menghapus isi scoreboard setiap game/suaatu game yang tersedia dari sistem\n"
    "  10. HISTORY - Menampilkan riwayat permainan user\n"
    "  11. RESET HISTORY - Menghapus riwayat permainan user\n"
    "  12. QUIT - Keluar dari program\n"
    "  13. HELP - Menampilkan daftar commands yang dapat dijalankan\n"
)


def help_text(started: bool) -> str:
    """Return the command list for before or after a file has been opened."""
    return _HELP_STARTED if started else _HELP_IDLE


def _next_record(records: Iterator[str]) -> str:
    try:
        return next(records)
    except StopIteration:
        raise ValueError("save file ends early") from None


def _next_count(records: Iterator[str]) -> int:
    record = _next_record(records)
    count = parse_int(record)
    if count is None:
        raise ValueError(f"invalid count in save file: {record!r}")
    return count


class Bnmo:
    """The state of one console session and the commands that act on it."""

    def __init__(
        self,
        reader: InputReader,
        write: Callable[[str], object],
        data_dir: str | Path = "data",
    ) -> None:
        self.reader = reader
        self.write = write
        self.data_dir = Path(data_dir)
        self.catalog = GameCatalog()
        self.queue = GameQueue()
        self.played = History()
        self.scoreboards = ScoreboardSet()
        self.saved = False

    def _path(self, name: str) -> Path:
        return self.data_dir / f"{name}.txt"

    def is_loaded(self) -> bool:
        return len(self.catalog) > 0

    def load(self, name: str, start: bool = False) -> bool:
        """Open a save file; with start, read only its game list."""
        path = self._path(name)
        if not path.is_file():
            self.write("File tidak dapat dibuka. Silahkan masukkan nama file lain.\n")
            return False
        records = iter(read_records(path))
        amount = _next_count(records)
        catalog = GameCatalog(_next_record(records) for _ in range(amount))
        history = History()
        boards = ScoreboardSet(amount)
        if not start:
            for _ in range(_next_count(records)):
                history.push(_next_record(records))
            for board in boards:
                for _ in range(_next_count(records)):
                    player, score = split_name_score(_next_record(records))
                    board.insert(player, score)
        self.catalog = catalog
        self.played = history
        self.scoreboards = boards
        if start:
            self.write("File konfigurasi sistem berhasil dibaca. BNMO berhasil dijalankan.\n")
        else:
            self.write(f"File {name} berhasil dibaca. BNMO berhasil dijalankan.\n")
        return True

    def start(self) -> bool:
        """Open the default configuration."""
        return self.load(CONFIG, True)

    def save(self, name: str) -> Path:
        """Write games, history and scoreboards to a save file."""
        path = self._path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [str(len(self.catalog)), *self.catalog]
        lines.append(str(len(self.played)))
        lines.extend(self.played)
        for board in self.scoreboards:
            lines.append(str(len(board)))
            lines.extend(f"{entry.name} {entry.score}" for entry in board)
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("".join(f"{line}\n" for line in lines))
            handle.write(".")
        self.saved = True
        self.write("Save file berhasil disimpan.\n")
        return path

    def list_games(self) -> None:
        self.write("Berikut adalah daftar game yang tersedia:\n")
        for number, game in enumerate(self.catalog, start=1):
            self.write(f"{number}. {game}\n")

    def create_game(self) -> bool:
        """Ask for a game name and add it, upper-cased, if it is new."""
        self.list_games()
        self.write("\nMasukkan nama game yang akan ditambahkan: ")
        name = upper_ascii(self.reader.read_line())
        if self.catalog.index_of(name) is not None:
            self.write("Game sudah terdaftar. Silahkan masukkan nama game lain.\n")
            return False
        self.catalog.add(name)
        self.scoreboards.add()
        self.write("Game berhasil ditambahkan.\n")
        self.saved = False
        return True

    def delete_game(self) -> bool:
        """Ask for a game number and delete it unless protected or queued."""
        self.list_games()
        self.write("\nMasukkan nomor game yang akan dihapus: ")
        number = self.reader.read_int()
        if number is None or number < 1:
            return False
        index = number - 1
        if number <= PROTECTED_GAMES or index >= len(self.catalog):
            self.write("Game gagal dihapus.\n")
            return False
        if self.catalog[index] in self.queue:
            self.write("Game gagal dihapus.\n")
            return False
        self.catalog.remove_at(index)
        self.scoreboards.remove_last()
        self.write("Game berhasil dihapus.\n")
        self.saved = False
        return True

    def queue_game(self) -> bool:
        """Show the queue and the games, then queue the chosen game."""
        self.write("Berikut adalah daftar antrean game-mu:\n")
        for number, game in enumerate(self.queue, start=1):
            self.write(f"{number}. {game}\n")
        self.write("\n")
        self.list_games()
        self.write("\n")
        self.write("Nomor game yang mau ditambahkan ke antrean: ")
        number = self.reader.read_int()
        if number is None or not 1 <= number <= len(self.catalog):
            self.write("Nomor permainan tidak valid, silahkan masukkan nomor game pada list.\n")
            return False
        try:
            self.queue.enqueue(self.catalog[number - 1])
        except QueueFullError as error:
            self.write(f"{error}\n")
            return False
        self.write("Game berhasil ditambahkan ke dalam daftar antrean.\n")
        return True

    def record_score(self, game: str, score: int) -> str:
        """Ask for a free player name and record the score on a game's board."""
        index = self.catalog.index_of(game)
        if index is None:
            raise ValueError(f"unknown game: {game!r}")
        board = self.scoreboards[index]
        while True:
            self.write("Nama (Max. 11 karakter): ")
            name = self.reader.read_word()
            while len(name) > MAX_NAME:
                self.write("\nNama melebihi batas maximum.\n")
                self.write("Nama (Max. 11 karakter): ")
                name = self.reader.read_word()
            if not name:
                continue
            if name not in board:
                board.insert(name, score)
                break
            self.write("\nNama sudah dipakai. Silahkan input nama lain.\n")
        board.sort(False)
        return name

    def scoreboard_text(self) -> str:
        """Return the scoreboard table of every game."""
        parts = []
        for game, board in zip(self.catalog, self.scoreboards):
            parts.append(f"**** SCOREBOARD GAME {game} ****\n")
            parts.append("| NAMA        | SKOR       |\n")
            if len(board) == 0:
                parts.append("---- SCOREBOARD KOSONG -----\n\n")
                continue
            parts.append("|--------------------------|\n")
            for entry in board:
                parts.append(f"| {pad_right(entry.name, 12)}| {pad_right(str(entry.score), 11)}|\n")
            parts.append("\n")
        return "".join(parts)

    def reset_scoreboard(self) -> bool:
        """Ask which scoreboard to empty (0 for all) and confirm."""
        while True:
            self.write("DAFTAR SCOREBOARD:\n")
            self.write("0. ALL\n")
            for number, game in enumerate(self.catalog, start=1):
                self.write(f"{number}. {game}\n")
            self.write("\n")
            self.write("SCOREBOARD YANG INGIN DIHAPUS: ")
            choice = self.reader.read_int()
            if choice is None or not 0 <= choice <= len(self.catalog):
                self.write("SCOREBOARD TIDAK TERDAFTAR. SILAHKAN INPUT SCOREBOARD LAIN.\n")
                return False
            self.write("\n")
            self.write("APAKAH ANDA YAKIN INGIN MELAKUKAN RESET\n")
            if choice > 0:
                self.write(f"SCOREBOARD {self.catalog[choice - 1]}? (YA/TIDAK) ")
            else:
                self.write("SCOREBOARD ALL? (YA/TIDAK) ")
            answer = upper_ascii(self.reader.read_word())
            if answer == "YA":
                if choice == 0:
                    self.scoreboards.reset_all()
                else:
                    self.scoreboards[choice - 1].clear()
                self.write("Scoreboard berhasil di-reset.\n")
                return True
            if answer == "TIDAK":
                self.write("Scoreboard tidak berhasil di-reset.\n")
                return False
            self.write("Command tidak dikenali. Silahkan masukkan command (YA/TIDAK).\n\n")

    def history(self, n: int) -> list[str]:
        """Show and return up to n played games, most recent first."""
        if len(self.played) == 0:
            self.write("Anda belum memiliki riwayat permainan.\n")
            return []
        shown = self.played.recent(n)
        self.write("Berikut adalah daftar Game yang telah dimainkan:\n")
        for number, game in enumerate(shown, start=1):
            self.write(f"{number}. {game}\n")
        return shown

    def reset_history(self) -> bool:
        """Ask for confirmation and empty the history."""
        while True:
            self.write("APAKAH KAMU YAKIN INGIN MELAKUKAN RESET HISTORY? (YA/TIDAK) ")
            answer = upper_ascii(self.reader.read_word())
            if answer == "YA":
                self.played.clear()
                return True
            if answer == "TIDAK":
                self.write(
                    "\nHistory tidak jadi di-reset. Berikut adalah daftar Game yang telah dimainkan:\n"
                )
                self.history(len(self.played))
                return False
            self.write("Command tidak dikenali. Silahkan masukkan command (YA/TIDAK).\n\n")

    def quit(self, saved: bool) -> None:
        """Leave the session, offering to save first when there are unsaved changes."""
        while not saved:
            self.write("Anda belum melakukan SAVE! Apakah anda tetap ingin keluar\n")
            self.write("dari game BNMO tanpa melakukan SAVE? (YA/TIDAK) ")
            answer = upper_ascii(self.reader.read_word())
            if answer == "YA":
                saved = True
            elif answer == "TIDAK":
                self.write("\nSilahkan input nama file untuk disimpan (tanpa .txt): ")
                self.save(self.reader.read_word())
                saved = True
            else:
                self.write("\nCommand tidak dikenali. Silahkan input command (YA/TIDAK).\n\n")
        self.catalog = GameCatalog()
        self.queue.clear()
        self.write("\nAnda keluar dari game BNMO.\nBye bye ...\n\n")