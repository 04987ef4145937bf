import io

import pytest

from bnmo.scanner import InputReader
from bnmo.towerofhanoi import InvalidMoveError, Tower, final_score, play


def _run(text):
    out = []
    score = play(InputReader(io.StringIO(text)), out.append)
    return score, "".join(out)


def test_initial_tower_holds_all_disks_on_first_pole():
    tower = Tower(3)
    assert tower.poles[0] == [5, 3, 1]
    assert tower.poles[1] == []
    assert tower.poles[2] == []
    assert not tower.is_solved()


@pytest.mark.parametrize("disks", [0, 11])
def test_disk_count_out_of_range(disks):
    with pytest.raises(ValueError):
        Tower(disks)


def test_take_from_empty_pole_raises():
    tower = Tower(2)
    with pytest.raises(InvalidMoveError):
        tower.take(2)


@pytest.mark.parametrize("pole", [0, 4])
def test_take_from_unknown_pole_raises(pole):
    with pytest.raises(InvalidMoveError):
        Tower(2).take(pole)


def test_wider_disk_cannot_go_on_narrower():
    tower = Tower(2)
    small = tower.take(1)
    tower.place(small, 2)
    wide = tower.take(1)
    with pytest.raises(InvalidMoveError):
        tower.place(wide, 2)


def test_solving_two_disks():
    tower = Tower(2)
    tower.place(tower.take(1), 2)
    tower.place(tower.take(1), 3)
    tower.place(tower.take(2), 3)
    assert tower.is_solved()
    assert tower.poles[2] == [3, 1]


def test_render_single_disk():
    assert Tower(1).render() == "*\t|\t|\t\n-\t-\t-\t\n1\t2\t3\t\n"


def test_render_has_line_per_level_plus_base_and_labels():
    tower = Tower(4)
    lines = tower.render().rstrip("\n").split("\n")
    assert len(lines) == 4 + 2
    assert lines[-2] == ("-" * 7 + "\t") * 3


@pytest.mark.parametrize("disks", [1, 2, 5, 10])
def test_minimum_moves_score(disks):
    assert final_score(disks, 2 ** disks - 1) == disks * 2


def test_extra_moves_lower_the_score():
    assert final_score(3, 17) < final_score(3, 7)


def test_play_one_disk():
    score, output = _run("1\n1\n3\n")
    assert score == final_score(1, 1)
    assert "Jumlah putaran: 1" in output


def test_play_retries_invalid_input():
    score, output = _run("0\n1\n2\n9\n1\n3\n")
    assert "Jumlah piringan melewati batas minimum/maximum." in output
    assert "TIANG KOSONG, PROSES TIDAK BISA DILAKUKAN." in output
    assert "MASUKAN TIDAK VALID." in output
    assert score == final_score(1, 1)


def test_play_same_pole_does_not_count_a_move():
    score, output = _run("1\n1\n1\n1\n3\n")
    assert "ANDA MEMINDAHKAN PIRING KE TIANG YANG SAMA," in output
    assert "Jumlah putaran: 1" in output
    assert score == final_score(1, 1)