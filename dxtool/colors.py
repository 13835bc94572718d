"""Terminal colouring helpers and ANSI escape stripping."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

INFO_COLOR = "\033[1;32m{}\033[0m"
WARNING_COLOR = "\033[1;33m{}\033[0m"
STATUS_COLOR = "\033[1;34m{}\033[0m"
ERROR_COLOR = "\033[1;31m{}\033[0m"

_RESET = "\x1b[0m"

_COLOR_ATTRIBUTES: dict[str, int] = {
    # formatting
    "bold": 1,
    "faint": 2,
    "italic": 3,
    "underline": 4,
    "blinkslow": 5,
    "blinkrapid": 6,
    "reversevideo": 7,
    "concealed": 8,
    "crossedout": 9,
    # foreground text colours
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    # foreground high-intensity text colours
    "hiblack": 90,
    "hired": 91,
    "higreen": 92,
    "hiyellow": 93,
    "hiblue": 94,
    "himagenta": 95,
    "hicyan": 96,
    "hiwhite": 97,
    # background text colours
    "bgblack": 40,
    "bgred": 41,
    "bggreen": 42,
    "bgyellow": 43,
    "BgBlue": 44,
    "bgmagenta": 45,
    "bgcyan": 46,
    "bgwhite": 47,
    # background high-intensity text colours
    "bghiblack": 100,
    "bghired": 101,
    "bghigreen": 102,
    "bghiyellow": 103,
    "bghiblue": 104,
    "bghimagenta": 105,
    "bghicyan": 106,
    "bghiwhite": 107,
}

_ANSI_PATTERN = re.compile(
    "[\u001b\u009b][\\[\\]()#;?]*"
    "(?:(?:(?:[a-zA-Z0-9]*(?:;[a-zA-Z0-9]*)*)?\u0007)"
    "|(?:(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-PRZcf-ntqry=><~]))"
)


def _join_operands(args: tuple) -> str:
    """Join values the way a print-style formatter does: spaces only between non-strings."""
    parts: list[str] = []
    previous_is_str = True
    for index, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if index > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(arg))
        previous_is_str = is_str
    return "".join(parts)


@dataclass(frozen=True)
class Color:
    """A set of SGR attributes applied to printed text."""

    attributes: tuple[int, ...] = ()

    def sprint(self, *args) -> str:
        """Return the arguments joined and wrapped in this colour's escape codes."""
        text = _join_operands(args)
        sequence = ";".join(str(a) for a in self.attributes)
        return f"\x1b[{sequence}m{text}{_RESET}"


def get_color(option_name: str, color_names: Iterable[str]) -> Color:
    """Build a colour from attribute names; raise ValueError on an unknown name."""
    attributes = []
    for name in color_names:
        value = _COLOR_ATTRIBUTES.get(name)
        if value is None:
            raise ValueError(f"invalid color: {option_name}")
        attributes.append(value)
    return Color(tuple(attributes))


def color_info(text: str) -> str:
    """Return text coloured as information (green)."""
    return INFO_COLOR.format(text)


def color_answer(text: str) -> str:
    """Return text coloured as a status (blue)."""
    return STATUS_COLOR.format(text)


def color_warning(text: str) -> str:
    """Return text coloured as a warning (yellow)."""
    return WARNING_COLOR.format(text)


def color_error(text: str) -> str:
    """Return text coloured as an error (red)."""
    return ERROR_COLOR.format(text)


def strip(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_PATTERN.sub("", text)