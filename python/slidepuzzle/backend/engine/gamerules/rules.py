"""Move legality and move application."""

from __future__ import annotations

from slidepuzzle.backend.models.board import Board, Direction, Position

# Offset from the blank to the tile that slides in the given direction.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class MoveRules:
    """Stateless move rules — all methods are static.

    The only primitive is the single adjacent swap: a tile 4-adjacent to
    the blank slides into it.  Row/column slides are expressed as a list
    of such swaps by :meth:`slide_path`.
    """

    @staticmethod
    def can_move(board: Board, position: tuple[int, int]) -> bool:
        """Return True if the tile at *position* may slide into the blank."""
        if not board.in_bounds(position):
            return False
        if tuple(position) == board.blank_pos:
            return False
        return Board.is_adjacent(position, board.blank_pos)

    @staticmethod
    def apply_move(board: Board, position: tuple[int, int]) -> Board:
        """Return the board after sliding the tile at *position*.

        The caller must check :meth:`can_move` first; *board* itself is
        never modified.
        """
        return board.swap(position)

    @staticmethod
    def movable_positions(board: Board) -> list[Position]:
        return [
            pos for pos in board.neighbors(board.blank_pos)
            if MoveRules.can_move(board, pos)
        ]

    @staticmethod
    def target_for(board: Board, direction: Direction) -> Position | None:
        """Return the cell whose tile would travel in *direction*, if any."""
        br, bc = board.blank_pos
        dr, dc = _OFFSETS[direction]
        target = Position(br + dr, bc + dc)
        if not board.in_bounds(target):
            return None
        return target

    @staticmethod
    def slide_path(board: Board, position: tuple[int, int]) -> list[Position]:
        """Decompose a row/column slide into single adjacent swaps.

        When *position* shares a row or column with the blank, every tile
        between them shifts one cell toward the blank.  The returned
        positions are ordered nearest-the-blank first, so applying them in
        turn keeps every step legal.  Returns ``[]`` for cells that are
        off the board, the blank itself, or off the blank's row and column.
        """
        if not board.in_bounds(position):
            return []
        row, col = position
        br, bc = board.blank_pos
        if (row, col) == (br, bc):
            return []
        if row == br:
            step = 1 if col > bc else -1
            return [Position(row, c) for c in range(bc + step, col + step, step)]
        if col == bc:
            step = 1 if row > br else -1
            return [Position(r, col) for r in range(br + step, row + step, step)]
        return []
