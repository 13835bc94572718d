"""Padding of text to a display width, ignoring ANSI escape sequences."""

from __future__ import annotations

from enum import IntEnum

from dxtool.colors import strip


class Align(IntEnum):
    """Column alignment; RIGHT pads on the right, LEFT pads on the left."""

    RIGHT = 0
    CENTER = 1
    LEFT = 2


def _gap(text: str, width: int) -> int:
    return width - len(strip(text))


def pad(text: str, fill: str, width: int, align: int) -> str:
    """Pad text to width using the given alignment."""
    if align == Align.CENTER:
        return pad_center(text, fill, width)
    if align == Align.LEFT:
        return pad_left(text, fill, width)
    return pad_right(text, fill, width)


def pad_right(text: str, fill: str, width: int) -> str:
    """Append fill until the visible width is reached."""
    gap = _gap(text, width)
    return text + fill * gap if gap > 0 else text


def pad_left(text: str, fill: str, width: int) -> str:
    """Prepend fill until the visible width is reached."""
    gap = _gap(text, width)
    return fill * gap + text if gap > 0 else text


def pad_center(text: str, fill: str, width: int) -> str:
    """Surround text with fill, the extra one going to the right."""
    gap = _gap(text, width)
    if gap <= 0:
        return text
    left = gap // 2
    return fill * left + text + fill * (gap - left)