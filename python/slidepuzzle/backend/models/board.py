"""Board model for the sliding puzzle game."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from slidepuzzle.backend.errors import ConfigurationError


class Direction(StrEnum):
    """Direction the *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Category(StrEnum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PINK = "pink"
    TEAL = "teal"


class Position(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Tile:
    id: int
    category: Category


Cells = tuple[tuple[Tile | None, ...], ...]


@dataclass(frozen=True)
class Board:
    """An immutable snapshot of the puzzle grid.

    ``cells`` is a tuple of rows; ``None`` marks the single blank cell,
    whose position is carried in ``blank_pos`` so that lookups never
    need to scan the grid.  Moves produce new boards via :meth:`swap`.
    """

    size: int
    cells: Cells
    blank_pos: Position

    def __post_init__(self) -> None:
        if len(self.cells) != self.size or any(
            len(row) != self.size for row in self.cells
        ):
            raise ConfigurationError(
                f"Board cells do not form a {self.size}×{self.size} grid."
            )
        blanks = [
            Position(r, c)
            for r, row in enumerate(self.cells)
            for c, tile in enumerate(row)
            if tile is None
        ]
        if len(blanks) != 1:
            raise ConfigurationError(
                f"A board needs exactly one blank cell, found {len(blanks)}."
            )
        if blanks[0] != self.blank_pos:
            raise ConfigurationError(
                f"blank_pos {tuple(self.blank_pos)} does not match the blank "
                f"cell at {tuple(blanks[0])}."
            )
        ids = [tile.id for tile in self.tiles()]
        if len(set(ids)) != len(ids):
            raise ConfigurationError("Tile ids on a board must be distinct.")
        object.__setattr__(self, "blank_pos", Position(*self.blank_pos))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile | None]]) -> Board:
        """Create a board from nested rows, locating the blank by scanning."""
        size = len(rows)
        cells = tuple(tuple(row) for row in rows)
        blank_pos = Position(0, 0)
        for r, row in enumerate(cells):
            for c, tile in enumerate(row):
                if tile is None:
                    blank_pos = Position(r, c)
        return cls(size=size, cells=cells, blank_pos=blank_pos)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[Tile | None]) -> Board:
        """Create a board from a flat row-major list of cells.

        Example::

            Board.from_flat(3, [*tiles[:7], None, tiles[7]])
        """
        if len(flat) != size * size:
            raise ConfigurationError(
                f"Expected {size * size} cells for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [flat[r * size : (r + 1) * size] for r in range(size)]
        )

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> Tile | None:
        if not self.in_bounds((row, col)):
            raise IndexError(f"({row}, {col}) is outside a {self.size}×{self.size} board.")
        return self.cells[row][col]

    def at(self, position: tuple[int, int]) -> Tile | None:
        return self.get_tile(*position)

    def in_bounds(self, position: tuple[int, int]) -> bool:
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbors(self, position: tuple[int, int]) -> list[Position]:
        """Return the in-bounds cells 4-adjacent to *position*."""
        row, col = position
        result: list[Position] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            candidate = Position(row + dr, col + dc)
            if self.in_bounds(candidate):
                result.append(candidate)
        return result

    @staticmethod
    def is_adjacent(a: tuple[int, int], b: tuple[int, int]) -> bool:
        return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1

    def tiles(self) -> list[Tile]:
        """Non-blank tiles in row-major order."""
        return [tile for row in self.cells for tile in row if tile is not None]

    def tile_ids(self) -> tuple[int, ...]:
        """Row-major tile ids, with 0 standing in for the blank."""
        return tuple(0 if tile is None else tile.id for row in self.cells for tile in row)

    # -- transforms -----------------------------------------------------------

    def swap(self, target: tuple[int, int]) -> Board:
        """Return a new board with the tile at *target* moved into the blank.

        No legality check is made here; see ``MoveRules.can_move``.
        """
        br, bc = self.blank_pos
        tr, tc = target
        grid = [list(row) for row in self.cells]
        grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]
        return Board(
            size=self.size,
            cells=tuple(tuple(row) for row in grid),
            blank_pos=Position(tr, tc),
        )

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(
                f"{'.':>{width}}" if tile is None else f"{tile.id:>{width}}"
                for tile in row
            )
            for row in self.cells
        )
