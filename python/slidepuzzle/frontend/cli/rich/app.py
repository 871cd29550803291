"""Rich terminal frontend — coloured tiles, goal preview and panels.

Drives a :class:`GamePlay` session with discrete commands: randomize,
slide a tile, solve-all-but-last and grid-size changes.  Tiles next to the
blank are drawn bold, the rest of its row and column plain (Enter slides
them), and everything else dimmed.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidepuzzle.backend.config import SUPPORTED_SIZES, EngineConfig
from slidepuzzle.backend.engine.gamecheck import SolvedEvaluator
from slidepuzzle.backend.engine.gameplay import GamePlay
from slidepuzzle.backend.engine.gamerules import MoveRules
from slidepuzzle.backend.models.board import Board, Category, Direction, Position
from slidepuzzle.frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

console = Console()

CATEGORY_STYLES: dict[Category, str] = {
    Category.RED: "black on indian_red1",
    Category.BLUE: "black on sky_blue1",
    Category.GREEN: "black on sea_green2",
    Category.YELLOW: "black on light_goldenrod1",
    Category.PINK: "black on light_pink1",
    Category.TEAL: "black on dark_cyan",
}

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_CURSOR_STEPS = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}


# -- board rendering ----------------------------------------------------------


def _cell_text(
    board: Board,
    pos: Position,
    width: int,
    *,
    enabled: bool,
    cursor: bool,
    selectable: bool = False,
) -> Text:
    tile = board.at(pos)
    if tile is None:
        text = Text(f" {'·':>{width}} ", style="dim")
    else:
        style = CATEGORY_STYLES[tile.category]
        if enabled:
            style += " bold"
        elif not selectable:
            style += " dim"
        text = Text(f" {tile.id:>{width}} ", style=style)
    if cursor:
        text.stylize("reverse")
    return text


def _render_board(
    board: Board,
    movable: set[Position] | None = None,
    cursor: Position | None = None,
    selectable: set[Position] | None = None,
) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    movable = movable or set()
    selectable = selectable or set()
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.size):
        table.add_column(width=width + 2, justify="center")

    for r in range(board.size):
        cells: list[Text] = []
        for c in range(board.size):
            pos = Position(r, c)
            cells.append(
                _cell_text(
                    board,
                    pos,
                    width,
                    enabled=pos in movable,
                    cursor=pos == cursor,
                    selectable=pos in selectable,
                )
            )
        table.add_row(*cells)

    return table


def _selectable(board: Board) -> set[Position]:
    """Cells a cursor select would slide: the blank's row and column."""
    return {
        Position(r, c)
        for r in range(board.size)
        for c in range(board.size)
        if MoveRules.slide_path(board, (r, c))
    }


def _render_goal(goal: Board) -> Panel:
    """Small reference rendering of the goal arrangement."""
    grid = Table.grid(padding=(0, 0))
    for _ in range(goal.size):
        grid.add_column()
    for row in goal.cells:
        grid.add_row(
            *(
                Text("  ", style="on grey23") if tile is None
                else Text("  ", style=CATEGORY_STYLES[tile.category])
                for tile in row
            )
        )
    return Panel(grid, title="[dim]Goal[/dim]", border_style="dim", padding=(0, 1))


# -- screens ------------------------------------------------------------------


def _controls(solved: bool) -> Text:
    controls = Text()
    if not solved:
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("WASD", style="bold cyan")
        controls.append("  move   ", style="dim")
        controls.append("IJKL", style="bold cyan")
        controls.append(" + ", style="dim")
        controls.append("Enter", style="bold cyan")
        controls.append("  slide   ", style="dim")
        controls.append("B", style="bold cyan")
        controls.append("  solve all but last   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  start over   " if solved else "  randomize   ", style="dim")
    controls.append("3/4/5", style="bold cyan")
    controls.append("  size   ", style="dim")
    controls.append("G", style="bold cyan")
    controls.append("  goal   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw_game(game: GamePlay, cursor: Position, show_goal: bool, status: str = "") -> None:
    console.clear()

    size = game.size
    board = game.board
    solved = game.is_won
    movable = set() if solved else set(game.movable_positions())
    selectable = set() if solved else _selectable(board)
    board_table = _render_board(board, movable, None if solved else cursor, selectable)

    body = board_table if not show_goal else Columns(
        [board_table, _render_goal(game.goal)], padding=(0, 4), align="center"
    )

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    In place: ", style="dim")
    stats.append(
        f"{SolvedEvaluator.correct_count(board, game.goal)}/{size * size - 1}",
        style="bold yellow",
    )

    parts = [Align.center(body), Text(""), Align.center(stats)]
    if solved:
        banner = Text()
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("Congratulations! Puzzle Solved!", style="bold green")
        banner.append(" ★\n", style="bold yellow")
        parts.append(Align.center(banner))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Puzzle Board  {size}×{size}[/bold cyan]",
        border_style="bold green" if solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls(solved)))


def _draw_help() -> None:
    console.clear()
    table = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    table.add_row("↑↓←→ / WASD", "slide the tile next to the blank in that direction")
    table.add_row("I J K L", "move the cell cursor")
    table.add_row("Enter / Space", "slide the tiles between the cursor and the blank")
    table.add_row("", "[dim]bold tiles move with one key, plain ones with Enter[/dim]")
    table.add_row("R", "randomize (start over when solved)")
    table.add_row("B", "solve all but the last tile")
    table.add_row("3 / 4 / 5", "change grid size")
    table.add_row("G", "toggle the goal preview")
    table.add_row("Q / Esc", "quit")
    console.print()
    console.print(Align.center(Panel(table, title="[bold]HELP[/bold]", border_style="bright_blue")))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _move_cursor(cursor: Position, key: str, size: int) -> Position:
    dr, dc = _CURSOR_STEPS[key]
    return Position(
        min(size - 1, max(0, cursor.row + dr)),
        min(size - 1, max(0, cursor.col + dc)),
    )


def _play(game: GamePlay, show_goal: bool) -> None:
    cursor = game.board.blank_pos
    status = ""

    while True:
        _draw_game(game, cursor, show_goal, status)
        status = ""
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "randomize":
            game.new_game()
            cursor = game.board.blank_pos
            status = "[yellow]Randomized![/yellow]"
        elif key in {str(s) for s in SUPPORTED_SIZES}:
            game.new_game(int(key))
            cursor = game.board.blank_pos
            status = f"[yellow]New {key}×{key} game[/yellow]"
        elif key == "goal":
            show_goal = not show_goal
        elif key == "help":
            _draw_help()
        elif game.is_won:
            # Moves are not offered once the puzzle is solved.
            continue
        elif key in _DIRECTIONS:
            if not game.move(_DIRECTIONS[key]):
                status = "[dim]Nothing to slide that way.[/dim]"
        elif key in _CURSOR_STEPS:
            cursor = _move_cursor(cursor, key, game.size)
        elif key == "select":
            before = game.state
            game.attempt_slide(cursor)
            if game.state is before:
                status = "[dim]That tile cannot move.[/dim]"
        elif key == "shortcut":
            game.near_solved_shortcut()
            cursor = game.board.blank_pos
            status = "[cyan]One move to go.[/cyan]"


# -- public entry point -------------------------------------------------------


def run(
    size: int,
    *,
    rng: random.Random | None = None,
    config: EngineConfig | None = None,
    show_goal: bool = True,
) -> None:
    """Launch the Rich terminal frontend."""
    game = GamePlay(size, rng=rng, config=config)
    logger.debug("Starting Rich frontend with a %d×%d board", size, size)
    _play(game, show_goal)
