"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the engine raises."""


class ConfigurationError(PuzzleError, ValueError):
    """An unsupported grid size or a malformed board.

    Raised at construction time; the engine never hands out a board that
    breaks the one-blank / distinct-tiles invariant.
    """
