"""Engine-wide constants and shuffle tuning."""

from __future__ import annotations

from dataclasses import dataclass

from slidepuzzle.backend.errors import ConfigurationError

SUPPORTED_SIZES: tuple[int, ...] = (3, 4, 5)
DEFAULT_SIZE = 5

# Number of tile categories per grid size. N*N - 1 divides evenly for each.
CATEGORY_COUNTS: dict[int, int] = {3: 4, 4: 5, 5: 6}


def check_size(size: int) -> int:
    """Return *size* unchanged, or raise if the engine cannot build it."""
    if not isinstance(size, int) or isinstance(size, bool) or size not in SUPPORTED_SIZES:
        supported = ", ".join(str(s) for s in SUPPORTED_SIZES)
        raise ConfigurationError(
            f"Unsupported grid size {size!r} (expected one of {supported})."
        )
    return size


@dataclass(frozen=True)
class EngineConfig:
    """Knobs for the walk-based shuffle.

    ``walk_steps(size)`` is ``max(min_walk_steps, steps_per_cell * size**2)``,
    i.e. 150 / 160 / 250 random moves for 3×3 / 4×4 / 5×5 with the defaults.
    """

    min_walk_steps: int = 150
    steps_per_cell: int = 10
    avoid_backtrack: bool = True
    park_blank: bool = True

    def __post_init__(self) -> None:
        if self.min_walk_steps < 1:
            raise ConfigurationError(
                f"min_walk_steps must be positive, got {self.min_walk_steps}."
            )
        if self.steps_per_cell < 0:
            raise ConfigurationError(
                f"steps_per_cell must not be negative, got {self.steps_per_cell}."
            )

    def walk_steps(self, size: int) -> int:
        return max(self.min_walk_steps, self.steps_per_cell * size * size)
