"""Solved-state checks against the goal arrangement."""

from __future__ import annotations

from slidepuzzle.backend.models.board import Board


class SolvedEvaluator:
    """Stateless evaluator — all methods are static."""

    @staticmethod
    def is_solved(board: Board, goal: Board) -> bool:
        """True iff *board* matches *goal* cell for cell (blank included)."""
        if board.size != goal.size:
            return False
        return board.tile_ids() == goal.tile_ids()

    @staticmethod
    def is_tile_correct(board: Board, goal: Board, row: int, col: int) -> bool:
        """Check if the cell at (row, col) holds what the goal has there."""
        tile = board.get_tile(row, col)
        expected = goal.get_tile(row, col)
        if tile is None or expected is None:
            return tile is expected
        return tile.id == expected.id

    @staticmethod
    def correct_count(board: Board, goal: Board) -> int:
        """Number of tiles (blank excluded) already in their goal cell."""
        return sum(
            1
            for current, expected in zip(board.tile_ids(), goal.tile_ids())
            if current != 0 and current == expected
        )
