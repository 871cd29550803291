"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from slidepuzzle.backend.config import CATEGORY_COUNTS, EngineConfig, check_size
from slidepuzzle.backend.engine.gamecheck import SolvedEvaluator
from slidepuzzle.backend.errors import ConfigurationError
from slidepuzzle.backend.models.board import Board, Category, Position, Tile

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by walking away from the solved state.

    A uniformly random permutation is unsolvable about half the time, so
    boards are only ever produced by legal moves starting from the goal.
    """

    @staticmethod
    def tiles(size: int) -> list[Tile]:
        """Return the fresh, category-balanced tile set for a *size* board.

        Ids run 1..N²−1; each category owns one contiguous block of ids.
        """
        check_size(size)
        categories = list(Category)[: CATEGORY_COUNTS[size]]
        per_category = (size * size - 1) // len(categories)

        tiles: list[Tile] = []
        num = 1
        for category in categories:
            for _ in range(per_category):
                tiles.append(Tile(id=num, category=category))
                num += 1

        if len(tiles) != size * size - 1:
            raise ConfigurationError(
                f"Generated {len(tiles)} tiles for a {size}×{size} board, "
                f"expected {size * size - 1}."
            )
        return tiles

    @staticmethod
    def solved(size: int, tiles: list[Tile] | None = None) -> Board:
        """Return the goal board (tiles in id order, blank bottom-right)."""
        if tiles is None:
            tiles = GameGenerator.tiles(size)
        if len(tiles) != size * size - 1:
            raise ConfigurationError(
                f"A {size}×{size} board holds {size * size - 1} tiles, "
                f"got {len(tiles)}."
            )
        ordered = sorted(tiles, key=lambda t: t.id)
        return Board.from_flat(size, [*ordered, None])

    @staticmethod
    def scramble(
        board: Board,
        steps: int,
        rng: random.Random,
        avoid_backtrack: bool = True,
    ) -> Board:
        """Return *board* after *steps* random legal moves."""
        prev_pos: Position | None = None

        for _ in range(steps):
            neighbors = board.neighbors(board.blank_pos)
            if avoid_backtrack and prev_pos in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_pos)
            target = rng.choice(neighbors)
            prev_pos = board.blank_pos
            board = board.swap(target)

        return board

    @staticmethod
    def park_blank(board: Board) -> Board:
        """Slide the blank right, then down, until it reaches the corner."""
        last = board.size - 1
        while board.blank_pos.col < last:
            br, bc = board.blank_pos
            board = board.swap((br, bc + 1))
        while board.blank_pos.row < last:
            br, bc = board.blank_pos
            board = board.swap((br + 1, bc))
        return board

    @staticmethod
    def generate(
        size: int,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
    ) -> tuple[Board, Board]:
        """Return a scrambled board and the goal it is reachable from."""
        if rng is None:
            rng = random.Random()
        if config is None:
            config = EngineConfig()

        goal = GameGenerator.solved(size, GameGenerator.tiles(size))
        steps = config.walk_steps(size)

        board = goal
        walks = 0
        # A walk can wander back to the goal; keep walking, a little further
        # each time, until it doesn't.
        while SolvedEvaluator.is_solved(board, goal):
            if walks:
                logger.debug("Shuffle returned to the goal, extending walk (%d)", walks)
            board = GameGenerator.scramble(
                board, steps + walks, rng, config.avoid_backtrack
            )
            if config.park_blank:
                board = GameGenerator.park_blank(board)
            walks += 1

        logger.debug("Shuffled %d×%d board with %d walk(s) of %d steps", size, size, walks, steps)
        return board, goal
