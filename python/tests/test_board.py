"""Board model tests: construction invariants, adjacency and swaps."""

from __future__ import annotations

import dataclasses

import pytest

from slidepuzzle.backend.errors import ConfigurationError
from slidepuzzle.backend.models.board import Board, Category, Position, Tile


# -- construction -------------------------------------------------------------


def test_from_flat_tracks_blank(make_board, goal_3x3: Board) -> None:
    board = make_board(3, [1, 2, 3, 4, 0, 5, 6, 7, 8])
    assert board.blank_pos == Position(1, 1)
    assert board.get_tile(1, 1) is None
    assert board.get_tile(0, 0) == goal_3x3.get_tile(0, 0)


def test_from_flat_rejects_wrong_length(make_board) -> None:
    with pytest.raises(ConfigurationError, match="Expected 9 cells"):
        make_board(3, [1, 2, 3, 4, 5, 6, 7, 0])


def test_board_requires_exactly_one_blank() -> None:
    tile = Tile(id=1, category=Category.RED)
    with pytest.raises(ConfigurationError, match="exactly one blank"):
        Board.from_rows([[tile, None], [None, None]])
    with pytest.raises(ConfigurationError, match="exactly one blank"):
        Board.from_rows(
            [
                [Tile(1, Category.RED), Tile(2, Category.RED)],
                [Tile(3, Category.BLUE), Tile(4, Category.BLUE)],
            ]
        )


def test_board_rejects_duplicate_ids() -> None:
    tile = Tile(id=1, category=Category.RED)
    with pytest.raises(ConfigurationError, match="distinct"):
        Board.from_rows([[tile, tile], [Tile(2, Category.BLUE), None]])


def test_board_rejects_non_square_cells() -> None:
    with pytest.raises(ConfigurationError, match="grid"):
        Board(
            size=2,
            cells=((Tile(1, Category.RED), None, Tile(2, Category.RED)),),
            blank_pos=Position(0, 1),
        )


def test_board_rejects_stale_blank_pos(goal_3x3: Board) -> None:
    with pytest.raises(ConfigurationError, match="blank_pos"):
        Board(size=3, cells=goal_3x3.cells, blank_pos=Position(0, 0))


def test_board_is_immutable(goal_3x3: Board) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        goal_3x3.blank_pos = Position(0, 0)  # type: ignore[misc]


def test_plain_tuple_blank_pos_is_normalised(goal_3x3: Board) -> None:
    board = Board(size=3, cells=goal_3x3.cells, blank_pos=(2, 2))  # type: ignore[arg-type]
    assert isinstance(board.blank_pos, Position)
    assert board.blank_pos.row == 2


# -- queries ------------------------------------------------------------------


def test_get_tile_out_of_bounds_raises(goal_3x3: Board) -> None:
    with pytest.raises(IndexError):
        goal_3x3.get_tile(3, 0)
    with pytest.raises(IndexError):
        goal_3x3.at((0, -1))


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        ((0, 0), {(1, 0), (0, 1)}),
        ((0, 1), {(0, 0), (0, 2), (1, 1)}),
        ((1, 1), {(0, 1), (2, 1), (1, 0), (1, 2)}),
        ((2, 2), {(1, 2), (2, 1)}),
    ],
)
def test_neighbors_are_four_directional(
    goal_3x3: Board, position: tuple[int, int], expected: set[tuple[int, int]]
) -> None:
    assert set(goal_3x3.neighbors(position)) == expected


def test_is_adjacent_excludes_diagonals_and_self() -> None:
    assert Board.is_adjacent((1, 1), (1, 2))
    assert Board.is_adjacent((1, 1), (0, 1))
    assert not Board.is_adjacent((1, 1), (2, 2))
    assert not Board.is_adjacent((1, 1), (1, 1))
    assert not Board.is_adjacent((0, 0), (0, 2))


def test_tile_ids_use_zero_for_blank(goal_3x3: Board) -> None:
    assert goal_3x3.tile_ids() == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert [t.id for t in goal_3x3.tiles()] == list(range(1, 9))


def test_str_renders_rows(goal_3x3: Board) -> None:
    assert str(goal_3x3) == "1 2 3\n4 5 6\n7 8 ."


# -- transforms ---------------------------------------------------------------


def test_swap_returns_new_board(goal_3x3: Board) -> None:
    moved = goal_3x3.swap((2, 1))

    assert moved is not goal_3x3
    assert moved.blank_pos == (2, 1)
    assert moved.tile_ids() == (1, 2, 3, 4, 5, 6, 7, 0, 8)
    # The original snapshot is untouched.
    assert goal_3x3.tile_ids() == (1, 2, 3, 4, 5, 6, 7, 8, 0)
    assert goal_3x3.blank_pos == (2, 2)
