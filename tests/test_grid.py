import pytest

from bnmo.grid import Point, Snake


def test_origin():
    assert Point(0, 0).is_origin()
    assert not Point(1, 1).is_origin()


def test_moved_shifts_both_axes():
    start = Point(1, 1)
    moved = start.moved(1, 2)
    assert moved.x == start.x + 1
    assert moved.y == start.y + 2
    assert start == Point(1, 1)


def test_wrapped_folds_negative_and_large():
    assert Point(-1, 6).wrapped(5) == Point(4, 1)
    assert Point(3, 2).wrapped(5) == Point(3, 2)


def test_point_text():
    assert str(Point(1, 1)) == "<1,1>"


def test_snake_appends_in_order():
    snake = Snake()
    for point in (Point(1, 2), Point(1, 3), Point(1, 4)):
        snake.append(point)
    assert str(snake) == "[<1,2>,<1,3>,<1,4>]"
    assert len(snake) == 3
    assert snake.head() == Point(1, 2)
    assert snake.tail() == Point(1, 4)
    assert snake.body() == [Point(1, 3), Point(1, 4)]


def test_empty_snake_text():
    assert str(Snake()) == "[]"
    assert len(Snake()) == 0


def test_remove_present_and_absent():
    snake = Snake([Point(1, 2), Point(1, 3), Point(1, 4)])
    assert snake.remove(Point(1, 2)) is True
    assert str(snake) == "[<1,3>,<1,4>]"
    assert snake.remove(Point(1, 5)) is False
    assert list(snake) == [Point(1, 3), Point(1, 4)]


def test_contains():
    snake = Snake([Point(1, 2), Point(1, 3)])
    assert Point(1, 3) in snake
    assert Point(1, 5) not in snake


def test_advance_keeps_length_and_follows():
    before = [Point(2, 2), Point(1, 2), Point(0, 2)]
    snake = Snake(before)
    snake.advance(Point(2, 1))
    assert len(snake) == len(before)
    assert snake.head() == Point(2, 1)
    assert snake.body() == before[:-1]


def test_single_segment_has_no_body():
    snake = Snake([Point(0, 0)])
    assert snake.body() == []
    assert snake.head() == snake.tail()


def test_empty_snake_errors():
    snake = Snake()
    with pytest.raises(IndexError):
        snake.head()
    with pytest.raises(IndexError):
        snake.tail()
    with pytest.raises(IndexError):
        snake.advance(Point(0, 0))