import random

import pytest

from twenty48.components.board import Board
from twenty48.components.direction import Direction
from twenty48.components.score import Score
from twenty48.systems.board_ops import (
    compute_move,
    legal_directions,
    line_positions,
    merge_line,
    separate_board,
    separate_line,
    try_move,
)

LOCKED = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


def _row_board(row):
    return Board.from_rows([list(row), [0] * 4, [0] * 4, [0] * 4])


def _column_board(column):
    return Board.from_rows([[value, 0, 0, 0] for value in column])


def _random_board(rng: random.Random, size: int = 4) -> Board:
    values = [0, 0, 0, 2, 2, 4, 4, 8, 16]
    return Board.from_rows([[rng.choice(values) for _ in range(size)] for _ in range(size)])


def test_line_positions_start_at_target_edge():
    assert line_positions(3, Direction.RIGHT)[0] == [(0, 2), (0, 1), (0, 0)]
    assert line_positions(3, Direction.LEFT)[1] == [(1, 0), (1, 1), (1, 2)]
    assert line_positions(3, Direction.UP)[2] == [(0, 2), (1, 2), (2, 2)]
    assert line_positions(3, Direction.DOWN)[0] == [(2, 0), (1, 0), (0, 0)]


def test_line_positions_cover_every_cell_once():
    for direction in Direction:
        cells = [pos for line in line_positions(4, direction) for pos in line]
        assert sorted(cells) == [(r, c) for r in range(4) for c in range(4)]


def test_separate_line_is_stable_partition():
    assert separate_line([0, 4, 0, 2]) == [4, 2, 0, 0]
    assert separate_line([2, 0, 2, 8]) == [2, 2, 8, 0]
    assert separate_line([0, 0, 0, 0]) == [0, 0, 0, 0]


def test_merge_line_does_not_chain():
    line, delta, merged, top = merge_line([2, 2, 2, 0])
    assert line == [4, 0, 2, 0]
    assert (delta, merged, top) == (4, True, 4)


def test_merge_line_without_pairs():
    assert merge_line([2, 4, 8, 16]) == ([2, 4, 8, 16], 0, False, 0)


def test_move_right_adjacent_pair():
    board = _row_board([0, 0, 2, 2])
    outcome = compute_move(board, Direction.RIGHT)
    assert outcome.cells[0] == [0, 0, 0, 4]
    assert outcome.changed is True
    assert outcome.merged is True
    assert outcome.score_delta == 4


def test_move_right_needs_separation_before_merge():
    outcome = compute_move(_row_board([2, 0, 0, 2]), Direction.RIGHT)
    assert outcome.cells[0] == [0, 0, 0, 4]
    assert outcome.score_delta == 4


def test_move_right_four_equal_tiles_make_two_pairs():
    outcome = compute_move(_row_board([2, 2, 2, 2]), Direction.RIGHT)
    assert outcome.cells[0] == [0, 0, 4, 4]
    assert outcome.score_delta == 8


def test_three_equal_tiles_merge_once_nearest_the_edge():
    outcome = compute_move(_row_board([2, 2, 2, 0]), Direction.RIGHT)
    assert outcome.cells[0] == [0, 0, 2, 4]
    assert outcome.score_delta == 4

    outcome = compute_move(_row_board([2, 2, 2, 0]), Direction.LEFT)
    assert outcome.cells[0] == [4, 2, 0, 0]


def test_merged_tile_does_not_merge_again():
    outcome = compute_move(_row_board([4, 0, 2, 2]), Direction.RIGHT)
    assert outcome.cells[0] == [0, 0, 4, 4]
    assert outcome.score_delta == 4


@pytest.mark.parametrize(
    "line, direction, expected",
    [
        ([2, 0, 0, 2], Direction.LEFT, [4, 0, 0, 0]),
        ([2, 2, 2, 2], Direction.LEFT, [4, 4, 0, 0]),
        ([0, 2, 2, 2], Direction.LEFT, [4, 2, 0, 0]),
    ],
)
def test_row_moves_left(line, direction, expected):
    assert compute_move(_row_board(line), direction).cells[0] == expected


@pytest.mark.parametrize(
    "column, direction, expected",
    [
        ([0, 0, 2, 2], Direction.DOWN, [0, 0, 0, 4]),
        ([2, 0, 0, 2], Direction.DOWN, [0, 0, 0, 4]),
        ([2, 2, 2, 2], Direction.DOWN, [0, 0, 4, 4]),
        ([2, 0, 0, 2], Direction.UP, [4, 0, 0, 0]),
        ([2, 2, 2, 0], Direction.UP, [4, 2, 0, 0]),
    ],
)
def test_column_moves(column, direction, expected):
    outcome = compute_move(_column_board(column), direction)
    assert [row[0] for row in outcome.cells] == expected


def test_score_delta_is_sum_of_merged_pairs():
    board = Board.from_rows([
        [4, 4, 2, 2],
        [8, 8, 0, 0],
        [2, 4, 8, 16],
        [0, 0, 0, 0],
    ])
    score = Score(value=10, max_tile=16)
    outcome = try_move(board, score, Direction.LEFT)
    assert outcome.score_delta == 8 + 4 + 16
    assert score.value == 10 + 28
    assert board.snapshot()[0] == (8, 4, 0, 0)
    assert board.snapshot()[1] == (16, 0, 0, 0)


def test_try_move_updates_max_tile_from_merge():
    board = _row_board([0, 0, 32, 32])
    score = Score(max_tile=32)
    try_move(board, score, Direction.RIGHT)
    assert score.max_tile == 64


def test_max_tile_survives_when_tile_is_gone():
    board = _row_board([0, 0, 2, 2])
    score = Score(max_tile=128)
    try_move(board, score, Direction.RIGHT)
    assert score.max_tile == 128


def test_illegal_move_leaves_everything_untouched():
    board = _row_board([2, 4, 0, 0])
    before = board.snapshot()
    rows_before = [row for row in board.cells]
    score = Score(value=12, max_tile=4)

    outcome = try_move(board, score, Direction.LEFT)

    assert outcome.changed is False
    assert outcome.merged is False
    assert board.snapshot() == before
    assert all(a is b for a, b in zip(board.cells, rows_before))
    assert (score.value, score.max_tile) == (12, 4)


def test_locked_board_rejects_every_direction():
    board = Board.from_rows(LOCKED)
    score = Score(value=100, max_tile=4)
    for direction in Direction:
        outcome = try_move(board, score, direction)
        assert outcome.changed is False
    assert board.snapshot() == tuple(tuple(row) for row in LOCKED)
    assert score.value == 100
    assert legal_directions(board) == []


def test_legal_directions_for_corner_tile():
    board = Board(size=4)
    board.set(0, 0, 2)
    assert set(legal_directions(board)) == {Direction.RIGHT, Direction.DOWN}


def test_compute_move_does_not_mutate_input():
    board = _row_board([2, 2, 0, 0])
    before = board.snapshot()
    compute_move(board, Direction.RIGHT)
    assert board.snapshot() == before


def test_separation_is_idempotent_for_random_boards():
    rng = random.Random(2048)
    for _ in range(60):
        board = _random_board(rng)
        for direction in Direction:
            once = separate_board(board, direction)
            twice = separate_board(once, direction)
            assert once.snapshot() == twice.snapshot()


def test_changed_matches_snapshot_comparison_for_random_boards():
    rng = random.Random(7)
    for _ in range(60):
        board = _random_board(rng)
        for direction in Direction:
            outcome = compute_move(board, direction)
            after = tuple(tuple(row) for row in outcome.cells)
            assert outcome.changed == (after != board.snapshot())
            if not outcome.changed:
                assert outcome.score_delta == 0


def test_move_preserves_tile_total():
    rng = random.Random(99)
    for _ in range(40):
        board = _random_board(rng)
        total = sum(v for row in board.cells for v in row)
        for direction in Direction:
            outcome = compute_move(board, direction)
            assert sum(v for row in outcome.cells for v in row) == total
