from slidepuzzle.backend.engine.gamecheck.evaluator import SolvedEvaluator

__all__ = ["SolvedEvaluator"]
