"""Cross-platform single-keypress reader for CLI frontends.

Handles tile keys and special keys without requiring Enter.  Arrow-key
escape sequences are read in full and discarded.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.tile import Tile


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

# Pads form a 2×2 grid: 1/f top-left, 2/g top-right, 3/v bottom-left,
# 4/b bottom-right.
TILE_KEYS: dict[str, Tile] = {
    "1": Tile.PRIMARY,
    "2": Tile.SECONDARY,
    "3": Tile.EMERALD,
    "4": Tile.AMBER,
    "f": Tile.PRIMARY,
    "g": Tile.SECONDARY,
    "v": Tile.EMERALD,
    "b": Tile.AMBER,
}

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "x": "abandon",
    "X": "abandon",
    "h": "scores",
    "H": "scores",
    "\r": "enter",
    "\n": "enter",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if ch.lower() in TILE_KEYS:
        return f"tile:{int(TILE_KEYS[ch.lower()])}"
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def tile_from_action(action: str | None) -> Tile | None:
    """Return the tile named by a ``"tile:<n>"`` action, else ``None``."""
    if not action or not action.startswith("tile:"):
        return None
    return Tile.parse(int(action.removeprefix("tile:")))


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "tile:0" .. "tile:3"           — 1-4 or f / g / v / b
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "abandon"                      — x
        "scores"                       — h
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D) do nothing.
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            _getch()
            return ""
        return "quit"  # bare Escape

    return _resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the normalised action string (same as ``get_key``) or
    ``None`` if no key was pressed within *timeout* seconds.

    Uses ``os.read`` (unbuffered) so that ``select`` accurately
    reflects pending bytes — required for multi-byte escape sequences
    (arrow keys).
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        ch = os.read(fd, 1).decode("utf-8", errors="ignore")

        if ch == "\x1b":
            r2, _, _ = select.select([fd], [], [], 0.1)
            if r2:
                ch2 = os.read(fd, 1).decode("utf-8", errors="ignore")
                if ch2 == "[":
                    r3, _, _ = select.select([fd], [], [], 0.1)
                    if r3:
                        os.read(fd, 1)
                        return ""
                    return ""
                return "quit"
            return "quit"  # bare Escape

        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
