"""Sliding tile puzzle engine with a Rich terminal frontend."""

from slidepuzzle.backend.engine.gameplay import GamePlay
from slidepuzzle.backend.engine.gamestate import SessionState
from slidepuzzle.backend.errors import ConfigurationError, PuzzleError
from slidepuzzle.backend.models.board import Board, Category, Direction, Position, Tile

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Category",
    "ConfigurationError",
    "Direction",
    "GamePlay",
    "Position",
    "PuzzleError",
    "SessionState",
    "Tile",
]
