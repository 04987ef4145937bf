import io

import pytest

from bnmo.scanner import InputReader
from bnmo.session import Bnmo, help_text

CONFIG = "5\nRNG\nDINER DASH\nHANGMAN\nTOWER OF HANOI\nSNAKE ON METEOR\n."


def make_session(tmp_path, inputs=""):
    out = []
    session = Bnmo(InputReader(io.StringIO(inputs)), out.append, tmp_path)
    return session, out


def started(tmp_path, inputs=""):
    (tmp_path / "config.txt").write_text(CONFIG, encoding="utf-8")
    session, out = make_session(tmp_path, inputs)
    assert session.start()
    out.clear()
    return session, out


def test_help_text_differs_by_state():
    assert "START" in help_text(False)
    assert "CREATE GAME" in help_text(True)
    assert "CREATE GAME" not in help_text(False)


def test_load_missing_file(tmp_path):
    session, out = make_session(tmp_path)
    assert session.load("nothing") is False
    assert not session.is_loaded()
    assert "File tidak dapat dibuka." in "".join(out)


def test_start_reads_config(tmp_path):
    session, _ = started(tmp_path)
    assert session.is_loaded()
    assert list(session.catalog) == ["RNG", "DINER DASH", "HANGMAN", "TOWER OF HANOI", "SNAKE ON METEOR"]
    assert len(session.scoreboards) == 5
    assert len(session.played) == 0


def test_save_and_load_round_trip(tmp_path):
    session, _ = started(tmp_path, "alice\nbob\n")
    session.played.push("RNG")
    session.played.push("HANGMAN")
    session.record_score("RNG", 40)
    session.record_score("RNG", 80)
    path = session.save("slot")
    assert path.read_text(encoding="utf-8").endswith(".")
    assert session.saved

    other, out = make_session(tmp_path)
    assert other.load("slot")
    assert list(other.catalog) == list(session.catalog)
    assert list(other.played) == ["RNG", "HANGMAN"]
    assert [(e.name, e.score) for e in other.scoreboards[0]] == [("bob", 80), ("alice", 40)]
    assert "File slot berhasil dibaca." in "".join(out)


def test_create_game_upper_cases_and_rejects_duplicates(tmp_path):
    session, out = started(tmp_path, "my game\nMY GAME\n")
    assert session.create_game()
    assert session.catalog[5] == "MY GAME"
    assert len(session.scoreboards) == 6
    assert not session.create_game()
    assert "Game sudah terdaftar." in "".join(out)


def test_delete_protected_game_fails(tmp_path):
    session, out = started(tmp_path, "2\n")
    assert not session.delete_game()
    assert len(session.catalog) == 5
    assert "Game gagal dihapus." in "".join(out)


def test_delete_custom_game(tmp_path):
    session, _ = started(tmp_path, "extra\n6\n")
    session.create_game()
    assert session.delete_game()
    assert len(session.catalog) == 5
    assert len(session.scoreboards) == 5


def test_delete_queued_game_fails(tmp_path):
    session, _ = started(tmp_path, "extra\n6\n6\n")
    session.create_game()
    assert session.queue_game()
    assert not session.delete_game()
    assert len(session.catalog) == 6


def test_queue_game_valid_and_invalid(tmp_path):
    session, out = started(tmp_path, "3\n9\n")
    assert session.queue_game()
    assert list(session.queue) == ["HANGMAN"]
    assert not session.queue_game()
    assert "Nomor permainan tidak valid" in "".join(out)


def test_record_score_rejects_long_and_taken_names(tmp_path):
    session, out = started(tmp_path, "ann\nabcdefghijkl\nANN\nben\n")
    session.record_score("HANGMAN", 3)
    name = session.record_score("HANGMAN", 9)
    text = "".join(out)
    assert name == "ben"
    assert "Nama melebihi batas maximum." in text
    assert "Nama sudah dipakai." in text
    assert [e.score for e in session.scoreboards[2]] == [9, 3]


def test_record_score_unknown_game(tmp_path):
    session, _ = started(tmp_path)
    with pytest.raises(ValueError):
        session.record_score("PONG", 1)


def test_scoreboard_text(tmp_path):
    session, _ = started(tmp_path, "zed\n")
    session.record_score("RNG", 12)
    text = session.scoreboard_text()
    assert "**** SCOREBOARD GAME RNG ****\n" in text
    assert "| zed         | 12         |\n" in text
    assert text.count("---- SCOREBOARD KOSONG -----") == 4


def test_reset_single_scoreboard(tmp_path):
    session, _ = started(tmp_path, "a\nb\n1\nmaybe\n1\nya\n")
    session.record_score("RNG", 1)
    session.record_score("DINER DASH", 2)
    assert session.reset_scoreboard()
    assert len(session.scoreboards[0]) == 0
    assert len(session.scoreboards[1]) == 1


def test_reset_all_scoreboards_and_unknown_number(tmp_path):
    session, out = started(tmp_path, "a\n0\nYA\n7\n")
    session.record_score("RNG", 1)
    assert session.reset_scoreboard()
    assert all(len(board) == 0 for board in session.scoreboards)
    assert not session.reset_scoreboard()
    assert "SCOREBOARD TIDAK TERDAFTAR." in "".join(out)


def test_history_shows_most_recent_first(tmp_path):
    session, out = started(tmp_path)
    assert session.history(3) == []
    assert "Anda belum memiliki riwayat permainan." in "".join(out)
    for game in ["RNG", "HANGMAN", "DINER DASH"]:
        session.played.push(game)
    assert session.history(2) == ["DINER DASH", "HANGMAN"]
    assert session.history(10) == ["DINER DASH", "HANGMAN", "RNG"]


def test_reset_history(tmp_path):
    session, _ = started(tmp_path, "tidak\nhmm\nya\n")
    session.played.push("RNG")
    assert not session.reset_history()
    assert len(session.played) == 1
    assert session.reset_history()
    assert len(session.played) == 0


def test_quit_unsaved_then_save(tmp_path):
    session, out = started(tmp_path, "what\ntidak\nexit\n")
    session.queue.enqueue("RNG")
    session.quit(False)
    assert (tmp_path / "exit.txt").is_file()
    assert not session.is_loaded()
    assert len(session.queue) == 0
    assert "Bye bye ..." in "".join(out)


def test_quit_saved_does_not_ask(tmp_path):
    session, out = started(tmp_path)
    session.quit(True)
    text = "".join(out)
    assert "Anda belum melakukan SAVE!" not in text
    assert "Anda keluar dari game BNMO." in text