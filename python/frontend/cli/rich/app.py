"""Rich terminal frontend — coloured pads, panels, and a live status bar.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.  Includes a built-in
menu for play and the high score.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GameSession, SessionEvent
from backend.engine.gametimer import MonotonicScheduler
from backend.models.config import GameConfig
from backend.models.highscore import ScoreStore
from backend.models.phase import SessionPhase
from backend.models.tile import Tile
from frontend.cli.input_handler import get_key, get_key_timeout, tile_from_action

console = Console()

_POLL_SECONDS = 0.02

# (dim, lit) style per tile
_TILE_STYLES: dict[Tile, tuple[str, str]] = {
    Tile.PRIMARY: ("on #1e3a5f", "bold black on #5fafff"),
    Tile.SECONDARY: ("on #4a1e5f", "bold black on #d787ff"),
    Tile.EMERALD: ("on #1e4d2b", "bold black on #5fd787"),
    Tile.AMBER: ("on #5f4a1e", "bold black on #ffd75f"),
}

_PHASE_TEXT: dict[SessionPhase, tuple[str, str]] = {
    SessionPhase.IDLE: ("Ready.", "dim"),
    SessionPhase.PLAYBACK: ("Watch…", "bold yellow"),
    SessionPhase.AWAITING_INPUT: ("Your turn!", "bold green"),
    SessionPhase.ROUND_COMPLETE: ("Nice!", "bold green"),
    SessionPhase.GAME_OVER: ("Game over!", "bold red"),
}


# -- pad rendering ------------------------------------------------------------


def _render_pads(active: Tile | None) -> Table:
    """Return a Rich Table representing the 2×2 pad grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(1, 3),
    )
    table.add_column(justify="center")
    table.add_column(justify="center")

    for row in ((Tile.PRIMARY, Tile.SECONDARY), (Tile.EMERALD, Tile.AMBER)):
        cells: list[Text] = []
        for tile in row:
            dim, lit = _TILE_STYLES[tile]
            style = lit if tile == active else dim
            cells.append(Text(f"  {int(tile) + 1}  ", style=style))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(high_score: int) -> None:
    console.clear()

    best = Text()
    best.append("  High score: ", style="dim")
    best.append(str(high_score), style="bold yellow")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("H", style="dim bold")
    opts.append("  High Score    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(best),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]M I N D   M A T C H[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_game(session: GameSession) -> None:
    console.clear()

    stats = Text()
    stats.append("  Level: ", style="dim")
    stats.append(str(session.level), style="bold yellow")
    stats.append("    Score: ", style="dim")
    stats.append(str(session.score), style="bold yellow")
    stats.append("    Best: ", style="dim")
    stats.append(str(session.high_score), style="bold yellow")

    label, style = _PHASE_TEXT[session.phase]
    status = Text(label, style=style)

    controls = Text()
    if session.phase is SessionPhase.GAME_OVER:
        controls.append("  R", style="bold cyan")
        controls.append("  play again   ", style="dim")
    else:
        controls.append("  1-4", style="bold cyan")
        controls.append(" / ", style="dim")
        controls.append("FGVB", style="bold cyan")
        controls.append("  pads   ", style="dim")
        controls.append("R", style="bold cyan")
        controls.append("  restart   ", style="dim")
        controls.append("X", style="bold cyan")
        controls.append("  give up   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    border = "bold red" if session.phase is SessionPhase.GAME_OVER else "bright_blue"
    panel = Panel(
        Group(Align.center(_render_pads(session.active_tile)), Align.center(status)),
        title="[bold cyan]Mind Match[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    console.print(Align.center(controls))


def _draw_highscore(session: GameSession) -> None:
    """Full-screen high score view (used from the menu)."""
    console.clear()

    if session.high_score == 0:
        body = Text("  No high score yet.", style="dim")
    else:
        body = Text(str(session.high_score), style="bold yellow")

    panel = Panel(
        Align.center(body),
        title="[bold]HIGH  SCORE[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_game(session: GameSession, scheduler: MonotonicScheduler) -> None:
    """Run one or more games until the player backs out."""
    dirty = True

    def mark_dirty(_payload: object) -> None:
        nonlocal dirty
        dirty = True

    for event in SessionEvent:
        session.add_listener(event, mark_dirty)

    try:
        session.start_game()
        while True:
            if dirty:
                _draw_game(session)
                dirty = False

            key = get_key_timeout(_POLL_SECONDS)
            scheduler.poll()
            if key is None:
                continue

            dirty = True
            tile = tile_from_action(key)
            if tile is not None:
                session.on_tile_clicked(tile)
            elif key == "restart":
                session.start_game()
            elif key == "abandon":
                session.abandon()
            elif key == "quit":
                session.abandon()
                return
    finally:
        for event in SessionEvent:
            session.remove_listener(event, mark_dirty)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(store: ScoreStore, config: GameConfig) -> None:
    scheduler = MonotonicScheduler()
    session = GameSession(store, scheduler, config=config)

    while True:
        _draw_menu(session.high_score)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key == "enter":
            _play_game(session, scheduler)
        elif key == "scores":
            _draw_highscore(session)


# -- public entry point -------------------------------------------------------


def run(store: ScoreStore, config: GameConfig) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(store, config)
