"""Move validator & applier tests."""

from __future__ import annotations

import random

import pytest

from slidepuzzle.backend.engine.gamegenerator import GameGenerator
from slidepuzzle.backend.engine.gamerules import MoveRules
from slidepuzzle.backend.models.board import Board, Direction, Position


# -- helpers ------------------------------------------------------------------


def _changed_cells(before: Board, after: Board) -> set[Position]:
    return {
        Position(r, c)
        for r in range(before.size)
        for c in range(before.size)
        if before.get_tile(r, c) != after.get_tile(r, c)
    }


# -- can_move -----------------------------------------------------------------


def test_can_move_adjacent_tiles(goal_3x3: Board) -> None:
    assert MoveRules.can_move(goal_3x3, (1, 2))
    assert MoveRules.can_move(goal_3x3, (2, 1))


@pytest.mark.parametrize(
    "position",
    [(2, 2), (1, 1), (0, 2), (2, 0), (3, 2), (2, 3), (-1, 0), (0, -1)],
    ids=["blank", "diagonal", "same-col-far", "same-row-far",
         "off-bottom", "off-right", "off-top", "off-left"],
)
def test_can_move_rejects(goal_3x3: Board, position: tuple[int, int]) -> None:
    assert not MoveRules.can_move(goal_3x3, position)


def test_can_move_is_idempotent() -> None:
    board, _ = GameGenerator.generate(4, rng=random.Random(5))
    for r in range(-1, 5):
        for c in range(-1, 5):
            first = MoveRules.can_move(board, (r, c))
            assert MoveRules.can_move(board, (r, c)) == first


# -- apply_move ---------------------------------------------------------------


@pytest.mark.parametrize("size", [3, 4, 5])
def test_apply_move_swaps_exactly_two_cells(size: int) -> None:
    board, _ = GameGenerator.generate(size, rng=random.Random(size))
    for position in MoveRules.movable_positions(board):
        moved_tile = board.at(position)
        after = MoveRules.apply_move(board, position)

        assert after.blank_pos == position
        assert after.at(position) is None
        assert after.at(board.blank_pos) == moved_tile
        assert _changed_cells(board, after) == {position, board.blank_pos}


def test_apply_move_leaves_snapshot_alone(goal_3x3: Board) -> None:
    snapshot = goal_3x3.tile_ids()
    MoveRules.apply_move(goal_3x3, (1, 2))
    assert goal_3x3.tile_ids() == snapshot


# -- movable positions --------------------------------------------------------


@pytest.mark.parametrize(
    ("ids", "expected"),
    [
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], 2),
        ([1, 0, 2, 3, 4, 5, 6, 7, 8], 3),
        ([1, 2, 3, 4, 0, 5, 6, 7, 8], 4),
    ],
    ids=["corner", "edge", "centre"],
)
def test_movable_positions_count(make_board, ids: list[int], expected: int) -> None:
    board = make_board(3, ids)
    movable = MoveRules.movable_positions(board)
    assert len(movable) == expected
    assert all(MoveRules.can_move(board, pos) for pos in movable)


# -- direction targets --------------------------------------------------------


def test_target_for_directions(make_board) -> None:
    board = make_board(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert MoveRules.target_for(board, Direction.UP) == (2, 1)
    assert MoveRules.target_for(board, Direction.DOWN) == (0, 1)
    assert MoveRules.target_for(board, Direction.LEFT) == (1, 2)
    assert MoveRules.target_for(board, Direction.RIGHT) == (1, 0)


def test_target_for_edge_is_none(goal_3x3: Board) -> None:
    # Blank bottom-right: nothing below it, nothing to its right.
    assert MoveRules.target_for(goal_3x3, Direction.UP) is None
    assert MoveRules.target_for(goal_3x3, Direction.LEFT) is None
    assert MoveRules.target_for(goal_3x3, Direction.DOWN) == (1, 2)
    assert MoveRules.target_for(goal_3x3, Direction.RIGHT) == (2, 1)


# -- slide macro --------------------------------------------------------------


def test_slide_path_along_row(goal_3x3: Board) -> None:
    assert MoveRules.slide_path(goal_3x3, (2, 0)) == [(2, 1), (2, 0)]


def test_slide_path_along_column(goal_3x3: Board) -> None:
    assert MoveRules.slide_path(goal_3x3, (0, 2)) == [(1, 2), (0, 2)]


def test_slide_path_toward_higher_index(make_board) -> None:
    board = make_board(3, [0, 1, 2, 3, 4, 5, 6, 7, 8])
    assert MoveRules.slide_path(board, (0, 2)) == [(0, 1), (0, 2)]
    assert MoveRules.slide_path(board, (2, 0)) == [(1, 0), (2, 0)]


@pytest.mark.parametrize("position", [(2, 2), (0, 0), (1, 1), (5, 2)])
def test_slide_path_empty_when_not_aligned(goal_3x3: Board, position: tuple[int, int]) -> None:
    assert MoveRules.slide_path(goal_3x3, position) == []


def test_slide_path_steps_are_all_legal(goal_3x3: Board) -> None:
    board = goal_3x3
    for step in MoveRules.slide_path(board, (2, 0)):
        assert MoveRules.can_move(board, step)
        board = MoveRules.apply_move(board, step)
    assert board.tile_ids() == (1, 2, 3, 4, 5, 6, 0, 7, 8)
