#!/usr/bin/env python3
"""Mind Match — a sequence-memory game.

Usage::

    python main.py                 # interactive menu
    python main.py -f rich         # Rich terminal
    python main.py --speed 1.5     # faster playback
    python main.py --score         # print the high score
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # mind-match/
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

if TYPE_CHECKING:
    from backend.models.config import GameConfig
    from backend.models.highscore import ScoreStore


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _build_store(data_dir: Path, no_save: bool) -> "ScoreStore":
    from backend.models.highscore import JsonFileBackend, MemoryBackend, ScoreStore

    if no_save:
        return ScoreStore(MemoryBackend())
    return ScoreStore(JsonFileBackend(data_dir / "highscore.json"))


def _menu_loop(store: "ScoreStore", config: "GameConfig") -> None:
    while True:
        print()
        print("  ====================================")
        print("          M I N D   M A T C H         ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  View High Score")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            mod = importlib.import_module(
                {"1": _RUNNERS[Frontend.vanilla], "2": _RUNNERS[Frontend.rich]}[choice]
            )
            mod.run(store=store, config=config)

        elif choice == "3":
            print(f"\n  High score: {store.load()}\n")

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    speed: float = typer.Option(
        1.0, "--speed",
        min=0.25, max=4.0,
        help="Playback speed multiplier (0.25-4).",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        file_okay=False,
        help="Directory holding highscore.json.",
    ),
    no_save: bool = typer.Option(
        False, "--no-save",
        help="Keep the high score in memory only.",
    ),
    score: bool = typer.Option(
        False, "--score",
        help="Show the high score and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log game events to stderr.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False,
        help="Also write a debug log to this file.",
    ),
) -> None:
    """Mind Match — repeat the growing pad sequence."""
    from backend.logging_setup import configure_logging
    from backend.models.config import GameConfig

    configure_logging(verbose=verbose, log_file=log_file)
    store = _build_store(data_dir, no_save)

    if score:
        typer.echo(f"High score: {store.load()}")
        return

    config = GameConfig().scaled(speed)

    if frontend is None:
        _menu_loop(store, config)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(store=store, config=config)


if __name__ == "__main__":
    app()
