"""ANSI color table.

Named colors are raw SGR escape strings wrapped in ``str`` enums, so a member can be
concatenated or formatted exactly like the escape it stands for. The 24-bit helpers
build ``38;2;R;G;B`` / ``48;2;R;G;B`` sequences from explicit components.
"""

from __future__ import annotations

from enum import Enum
import re

ESC = "\x1b"
RESET = f"{ESC}[0m"

_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class Foreground(str, Enum):
    """16-color foreground palette."""

    BLACK = f"{ESC}[30m"
    RED = f"{ESC}[31m"
    GREEN = f"{ESC}[32m"
    YELLOW = f"{ESC}[33m"
    BLUE = f"{ESC}[34m"
    MAGENTA = f"{ESC}[35m"
    CYAN = f"{ESC}[36m"
    WHITE = f"{ESC}[37m"
    BRIGHT_BLACK = f"{ESC}[90m"
    BRIGHT_RED = f"{ESC}[91m"
    BRIGHT_GREEN = f"{ESC}[92m"
    BRIGHT_YELLOW = f"{ESC}[93m"
    BRIGHT_BLUE = f"{ESC}[94m"
    BRIGHT_MAGENTA = f"{ESC}[95m"
    BRIGHT_CYAN = f"{ESC}[96m"
    BRIGHT_WHITE = f"{ESC}[97m"

    def __str__(self) -> str:
        return self.value


class Background(str, Enum):
    """16-color background palette."""

    BLACK = f"{ESC}[40m"
    RED = f"{ESC}[41m"
    GREEN = f"{ESC}[42m"
    YELLOW = f"{ESC}[43m"
    BLUE = f"{ESC}[44m"
    MAGENTA = f"{ESC}[45m"
    CYAN = f"{ESC}[46m"
    WHITE = f"{ESC}[47m"
    BRIGHT_BLACK = f"{ESC}[100m"
    BRIGHT_RED = f"{ESC}[101m"
    BRIGHT_GREEN = f"{ESC}[102m"
    BRIGHT_YELLOW = f"{ESC}[103m"
    BRIGHT_BLUE = f"{ESC}[104m"
    BRIGHT_MAGENTA = f"{ESC}[105m"
    BRIGHT_CYAN = f"{ESC}[106m"
    BRIGHT_WHITE = f"{ESC}[107m"

    def __str__(self) -> str:
        return self.value


def clamp_channel(value: int) -> int:
    """Clamp a color component into ``[0, 255]``.

    :param value: Raw component.
    :returns: The clamped component.
    """
    return max(0, min(255, int(value)))


def rgb_foreground(r: int, g: int, b: int) -> str:
    """Return a 24-bit foreground escape, ``ESC[38;2;R;G;Bm``.

    Components are written as given; no range check is applied.
    """
    return f"{ESC}[38;2;{r};{g};{b}m"


def rgb_colors(foreground: tuple[int, int, int], background: tuple[int, int, int]) -> str:
    """Return a combined 24-bit escape, foreground first then background.

    :param foreground: ``(r, g, b)`` for the text.
    :param background: ``(r, g, b)`` for the background.
    :returns: ``ESC[38;2;R;G;B;48;2;R;G;Bm``.
    """
    rf, gf, bf = foreground
    rb, gb, bb = background
    return f"{ESC}[38;2;{rf};{gf};{bf};48;2;{rb};{gb};{bb}m"


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from ``text``."""
    return _SGR_PATTERN.sub("", text)
