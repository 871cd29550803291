"""Shared fixtures for the engine tests."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

import pytest

from slidepuzzle.backend.engine.gamegenerator import GameGenerator
from slidepuzzle.backend.models.board import Board


def board_from_ids(size: int, ids: Sequence[int]) -> Board:
    """Build a board from row-major tile ids, 0 marking the blank."""
    by_id = {tile.id: tile for tile in GameGenerator.tiles(size)}
    return Board.from_flat(size, [None if i == 0 else by_id[i] for i in ids])


@pytest.fixture
def make_board() -> Callable[[int, Sequence[int]], Board]:
    return board_from_ids


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def goal_3x3() -> Board:
    return GameGenerator.solved(3)
