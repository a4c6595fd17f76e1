"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD and a handful of letter commands, read without Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


def _read_char() -> str:
    """Read one character from the console without waiting for Enter."""
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]

        return msvcrt.getwch()

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        return os.read(fd, 1).decode("utf-8", errors="ignore")
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)


# -- key mapping ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "reset",
    "n": "hint",
    "v": "solve",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (``""`` if unmapped)."""
    return _KEY_MAP.get(ch.lower() if ch.isalpha() else ch, ch if ch.isdigit() else "")


def get_key() -> str:
    """Block for one keypress and return its action.

    One of ``up``, ``down``, ``left``, ``right``, ``quit``, ``reset``,
    ``hint``, ``solve``, ``enter``, a digit, or ``""``.
    """
    ch = _read_char()

    # Unix arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        if _read_char() == "[":
            return _ARROW_MAP.get(_read_char(), "")
        return "quit"

    return resolve(ch)
