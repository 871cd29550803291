"""Snapshot of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, replace

from slidepuzzle.backend.models.board import Board, Position


@dataclass(frozen=True)
class SessionState:
    """Holds the current board, its goal, the solved flag and a move counter.

    Snapshots are never mutated; the session swaps in a new one after
    every accepted command.
    """

    board: Board
    goal: Board
    size: int
    solved: bool = False
    moves: int = 0

    @classmethod
    def start(cls, board: Board, goal: Board) -> SessionState:
        return cls(board=board, goal=goal, size=board.size)

    @property
    def blank_pos(self) -> Position:
        return self.board.blank_pos

    def advance(self, board: Board, solved: bool) -> SessionState:
        """Return the snapshot after one accepted move."""
        return replace(self, board=board, solved=solved, moves=self.moves + 1)
