from slidepuzzle.backend.engine.gamerules.rules import MoveRules

__all__ = ["MoveRules"]
