"""Tests for the SnakeBody module."""

import pytest

from reversal_snake.board import Board, Coordinate
from reversal_snake.snake import SnakeBody, SnakeSegment

BOARD = Board(10)


def seg(row: int, col: int) -> SnakeSegment:
    coord = Coordinate(row, col)
    return SnakeSegment(coord, BOARD.cell_id(coord))


def horizontal_body() -> SnakeBody:
    """Head (5, 5), tail (5, 3), facing right."""
    body = SnakeBody(seg(5, 3))
    body.advance_head(seg(5, 4))
    body.advance_head(seg(5, 5))
    return body


def coords(body: SnakeBody) -> list[tuple[int, int]]:
    return [tuple(s.coord) for s in body.segments()]


class TestSnakeInit:
    def test_single_segment(self):
        body = SnakeBody(seg(3, 3))
        assert len(body) == 1
        assert body.head == body.tail == seg(3, 3)
        assert body.cells == {34}
        assert body.tail_neighbor is None

    def test_initialize_resets(self):
        body = horizontal_body()
        body.reverse()
        body.initialize(seg(0, 0))
        assert len(body) == 1
        assert body.head == seg(0, 0)
        assert body.cells == {1}


class TestSnakeMutation:
    def test_advance_head(self):
        body = horizontal_body()
        assert coords(body) == [(5, 5), (5, 4), (5, 3)]
        assert body.tail_neighbor == seg(5, 4)

    def test_remove_tail(self):
        body = horizontal_body()
        removed = body.remove_tail()
        assert removed == seg(5, 3)
        assert body.tail == seg(5, 4)
        assert not body.occupies(seg(5, 3).cell)
        assert len(body.cells) == len(body) == 2

    def test_cannot_remove_last_segment(self):
        body = SnakeBody(seg(0, 0))
        with pytest.raises(ValueError, match="only remaining"):
            body.remove_tail()

    def test_grow_at_tail(self):
        body = horizontal_body()
        body.grow_at_tail(seg(5, 2))
        assert body.tail == seg(5, 2)
        assert len(body) == 4
        assert body.occupies(seg(5, 2).cell)

    def test_rejects_occupied_cell(self):
        body = horizontal_body()
        body.advance_head(seg(4, 5))
        body.advance_head(seg(4, 4))
        with pytest.raises(ValueError, match="already occupied"):
            body.advance_head(seg(5, 4))
        assert len(body) == 5
        assert len(body.cells) == 5

    def test_rejects_non_adjacent_segment(self):
        body = horizontal_body()
        with pytest.raises(ValueError, match="not adjacent"):
            body.advance_head(seg(7, 7))
        with pytest.raises(ValueError, match="not adjacent"):
            body.grow_at_tail(seg(0, 0))
        assert len(body) == 3


class TestSnakeReverse:
    def test_reverse_swaps_ends(self):
        body = horizontal_body()
        body.reverse()
        assert body.head == seg(5, 3)
        assert body.tail == seg(5, 5)
        assert body.tail_neighbor == seg(5, 4)
        assert coords(body) == [(5, 3), (5, 4), (5, 5)]

    def test_reverse_twice_restores(self):
        body = horizontal_body()
        before = coords(body)
        body.reverse()
        body.reverse()
        assert coords(body) == before
        assert body.head == seg(5, 5)
        assert body.tail == seg(5, 3)

    def test_mutations_after_reverse_follow_new_ends(self):
        body = horizontal_body()
        body.reverse()
        body.advance_head(seg(5, 2))
        removed = body.remove_tail()
        assert removed == seg(5, 5)
        assert coords(body) == [(5, 2), (5, 3), (5, 4)]
        body.grow_at_tail(seg(5, 5))
        assert coords(body) == [(5, 2), (5, 3), (5, 4), (5, 5)]

    def test_single_segment_reverse(self):
        body = SnakeBody(seg(1, 1))
        body.reverse()
        assert body.head == body.tail == seg(1, 1)


class TestSnakeSerialization:
    def test_segment_to_dict(self):
        assert seg(5, 5).to_dict() == {"row": 5, "col": 5, "cell": 56}
