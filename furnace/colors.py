"""ANSI colour codes for terminal output."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """SGR codes understood by ANSI terminals."""

    RESET = 0
    BOLD = 1
    UNDERLINE = 4

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47


def _sequence(code: int) -> str:
    return f"\033[{int(code)}m"


def colorize(text: str, *args: Color) -> str:
    """Wrap ``text`` in the given codes, followed by a reset."""
    prefix = "".join(_sequence(code) for code in args)
    return f"{prefix}{text}{_sequence(Color.RESET)}"