from slidepuzzle.backend.models.board import Board, Category, Direction, Position, Tile

__all__ = ["Board", "Category", "Direction", "Position", "Tile"]
