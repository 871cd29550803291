"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import logging
import random

from slidepuzzle.backend.config import DEFAULT_SIZE, EngineConfig, check_size
from slidepuzzle.backend.engine.gamecheck import SolvedEvaluator
from slidepuzzle.backend.engine.gamegenerator import GameGenerator
from slidepuzzle.backend.engine.gamerules import MoveRules
from slidepuzzle.backend.engine.gamestate import SessionState
from slidepuzzle.backend.errors import ConfigurationError
from slidepuzzle.backend.models.board import Board, Direction, Position

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    Every command returns the resulting :class:`SessionState`.  Illegal
    moves are not errors: the current snapshot is returned unchanged.
    """

    def __init__(
        self,
        size: int | None = DEFAULT_SIZE,
        *,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        if size is None:
            size = DEFAULT_SIZE
        self.config = config if config is not None else EngineConfig()
        self._rng = rng if rng is not None else random.Random()
        self.state: SessionState = self.new_game(size)

    @classmethod
    def from_boards(
        cls,
        board: Board,
        goal: Board,
        *,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
    ) -> GamePlay:
        """Create a session around an existing board and its goal."""
        if board.size != goal.size:
            raise ConfigurationError(
                f"Board is {board.size}×{board.size} but goal is "
                f"{goal.size}×{goal.size}."
            )
        last = goal.size - 1
        if goal.blank_pos != (last, last):
            raise ConfigurationError("The goal must keep its blank bottom-right.")
        if goal.tile_ids() != (*range(1, goal.size * goal.size), 0):
            raise ConfigurationError("The goal must hold its tiles in ascending id order.")
        # Same ids and the same category per id.
        if sorted(board.tiles(), key=lambda t: t.id) != goal.tiles():
            raise ConfigurationError("Board and goal hold different tile sets.")

        obj = object.__new__(cls)
        obj.config = config if config is not None else EngineConfig()
        obj._rng = rng if rng is not None else random.Random()
        obj.state = SessionState(
            board=board,
            goal=goal,
            size=board.size,
            solved=SolvedEvaluator.is_solved(board, goal),
        )
        return obj

    # -- lifecycle ------------------------------------------------------------

    def new_game(self, size: int | None = None) -> SessionState:
        """Discard the current game and shuffle a fresh one.

        *size* defaults to the current grid size.
        """
        if size is None:
            size = self.state.size
        check_size(size)
        board, goal = GameGenerator.generate(size, rng=self._rng, config=self.config)
        self.state = SessionState.start(board, goal)
        logger.info("New %d×%d game", size, size)
        return self.state

    def near_solved_shortcut(self) -> SessionState:
        """Put the board one move from solved.

        The goal with its last two cells swapped: the blank sits at
        (N−1, N−2) and the final tile at (N−1, N−1).
        """
        goal = self.state.goal
        last = goal.size - 1
        board = goal.swap((last, last - 1))
        self.state = SessionState.start(board, goal)
        logger.info("Board set one move from solved")
        return self.state

    # -- movement -------------------------------------------------------------

    def is_legal_move(self, position: tuple[int, int]) -> bool:
        return MoveRules.can_move(self.state.board, position)

    def movable_positions(self) -> list[Position]:
        return MoveRules.movable_positions(self.state.board)

    def attempt_move(self, position: tuple[int, int]) -> SessionState:
        """Slide the tile at *position* into the blank if it is adjacent."""
        state = self.state
        if not MoveRules.can_move(state.board, position):
            logger.debug("Ignoring illegal move at %s", tuple(position))
            return state

        board = MoveRules.apply_move(state.board, position)
        solved = SolvedEvaluator.is_solved(board, state.goal)
        self.state = state.advance(board, solved)
        if solved:
            logger.info("Solved in %d moves", self.state.moves)
        return self.state

    def attempt_slide(self, position: tuple[int, int]) -> SessionState:
        """Shift every tile between *position* and the blank toward the blank.

        Performed as a run of single adjacent moves; a no-op when
        *position* is off the blank's row and column.
        """
        for step in MoveRules.slide_path(self.state.board, position):
            self.attempt_move(step)
        return self.state

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        target = MoveRules.target_for(self.state.board, direction)
        if target is None:
            return False
        before = self.state
        return self.attempt_move(target) is not before

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def goal(self) -> Board:
        return self.state.goal

    @property
    def size(self) -> int:
        return self.state.size

    @property
    def is_won(self) -> bool:
        return self.state.solved
