"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for play and the high score.
"""

from __future__ import annotations

import sys

from backend.engine.gameplay import GameSession, SessionEvent
from backend.engine.gametimer import MonotonicScheduler
from backend.models.config import GameConfig
from backend.models.highscore import ScoreStore
from backend.models.phase import SessionPhase
from backend.models.tile import Tile
from frontend.cli.input_handler import get_key, get_key_timeout, tile_from_action


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

# (dim, lit) background per tile
_TILE_BG: dict[Tile, tuple[str, str]] = {
    Tile.PRIMARY: ("\033[44m", "\033[104m"),
    Tile.SECONDARY: ("\033[45m", "\033[105m"),
    Tile.EMERALD: ("\033[42m", "\033[102m"),
    Tile.AMBER: ("\033[43m", "\033[103m"),
}

_TILE_LABELS = {Tile.PRIMARY: "1", Tile.SECONDARY: "2", Tile.EMERALD: "3", Tile.AMBER: "4"}

_POLL_SECONDS = 0.02


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _status_line(session: GameSession) -> str:
    if session.phase is SessionPhase.PLAYBACK:
        return f"{_Y}Watch...{_R}"
    if session.phase is SessionPhase.AWAITING_INPUT:
        return f"{_G}Your turn!{_R}"
    if session.phase is SessionPhase.ROUND_COMPLETE:
        return f"{_G}Nice!{_R}"
    if session.phase is SessionPhase.GAME_OVER:
        return f"{_RED}Game over!{_R}"
    return f"{_DIM}Ready.{_R}"


# -- board rendering ----------------------------------------------------------


def _render_pads(active: Tile | None) -> str:
    """Return the 2×2 pad grid, with the active pad lit."""
    lines: list[str] = []
    for row in ((Tile.PRIMARY, Tile.SECONDARY), (Tile.EMERALD, Tile.AMBER)):
        for line in range(3):
            cells: list[str] = []
            for tile in row:
                dim, lit = _TILE_BG[tile]
                bg = lit if tile == active else dim
                label = _TILE_LABELS[tile] if line == 1 else " "
                cells.append(f"{bg}   {label}   {_R}")
            lines.append("    " + "  ".join(cells))
        lines.append("")
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_menu(high_score: int) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}         M I N D   M A T C H          {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    High score: {_Y}{high_score}{_R}")
    print()
    print(f"    {_C}Enter{_R}  Play")
    print(f"    {_DIM}H{_R}      High Score")
    print(f"    {_DIM}Q{_R}      Quit")
    print()


def _show_game(session: GameSession) -> None:
    _clear()
    print(f"  {_C}=== Mind Match ==={_R}")
    print()
    print(_render_pads(session.active_tile))
    print(
        f"  Level: {_Y}{session.level}{_R}  |  "
        f"Score: {_Y}{session.score}{_R}  |  "
        f"Best: {_Y}{session.high_score}{_R}"
    )
    print(f"  {_status_line(session)}")
    print()
    if session.phase is SessionPhase.GAME_OVER:
        print(f"  Press {_C}R{_R} to play again, {_C}Q{_R} to go back.")
    else:
        print(
            f"  {_C}1-4{_R}/{_C}F G V B{_R}: pads  |  "
            f"{_C}R{_R}: restart  |  "
            f"{_C}X{_R}: give up  |  "
            f"{_C}Q{_R}: back"
        )
    sys.stdout.flush()


def _show_highscore(session: GameSession) -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== HIGH SCORE ==={_R}")
    if session.high_score == 0:
        print(f"\n  {_DIM}No high score yet.{_R}")
    else:
        print(f"\n  {_Y}{session.high_score}{_R}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
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
                _show_game(session)
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
        _show_menu(session.high_score)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key == "enter":
            _play_game(session, scheduler)
        elif key == "scores":
            _show_highscore(session)


# -- public entry point -------------------------------------------------------


def run(store: ScoreStore, config: GameConfig) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(store, config)
