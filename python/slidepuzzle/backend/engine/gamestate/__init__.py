from slidepuzzle.backend.engine.gamestate.state import SessionState

__all__ = ["SessionState"]
