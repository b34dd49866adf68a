"""Parsing of ANSI SGR escape sequences into coloured text segments."""

from __future__ import annotations

import re
from dataclasses import dataclass

_ESCAPE = "\033"
_INT_PREFIX = re.compile(r"-?\d+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def brightened(self, factor: float = 1.2) -> Color:
        """The colour with each RGB component scaled and capped at 1."""
        return Color(
            min(self.r * factor, 1.0),
            min(self.g * factor, 1.0),
            min(self.b * factor, 1.0),
            self.a,
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class TextSegment:
    """A run of text drawn with one foreground and background colour."""

    text: str
    color: Color = WHITE
    background: Color = TRANSPARENT

    @property
    def has_background(self) -> bool:
        """Whether the background is visible at all."""
        return self.background.a > 0.0


_BACKGROUND_8 = (
    Color(0.0, 0.0, 0.0, 1.0),
    Color(0.5, 0.0, 0.0, 1.0),
    Color(0.0, 0.5, 0.0, 1.0),
    Color(0.5, 0.5, 0.0, 1.0),
    Color(0.0, 0.0, 0.5, 1.0),
    Color(0.5, 0.0, 0.5, 1.0),
    Color(0.0, 0.5, 0.5, 1.0),
    Color(0.75, 0.75, 0.75, 1.0),
)

_BRIGHT = (
    Color(0.5, 0.5, 0.5, 1.0),
    Color(1.0, 0.0, 0.0, 1.0),
    Color(0.0, 1.0, 0.0, 1.0),
    Color(1.0, 1.0, 0.0, 1.0),
    Color(0.0, 0.0, 1.0, 1.0),
    Color(1.0, 0.0, 1.0, 1.0),
    Color(0.0, 1.0, 1.0, 1.0),
    Color(1.0, 1.0, 1.0, 1.0),
)

_FOREGROUND_8 = (
    Color(0.0, 0.0, 0.0, 1.0),
    Color(0.9, 0.1, 0.1, 1.0),
    Color(0.0, 0.5, 0.0, 1.0),
    Color(0.9, 0.9, 0.1, 1.0),
    Color(0.0, 0.0, 0.5, 1.0),
    Color(0.5, 0.0, 0.5, 1.0),
    Color(0.0, 0.5, 0.5, 1.0),
    Color(0.75, 0.75, 0.75, 1.0),
)

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def background_8(index: int) -> Color:
    """Background colour for SGR 40-47 (index 0-7); transparent otherwise."""
    return _BACKGROUND_8[index] if 0 <= index < 8 else TRANSPARENT


def background_16(index: int) -> Color:
    """Background colour for SGR 100-107 (index 0-7); transparent otherwise."""
    return _BRIGHT[index] if 0 <= index < 8 else TRANSPARENT


def color_8(index: int) -> Color:
    """Foreground colour for palette entries 0-7; white otherwise."""
    return _FOREGROUND_8[index] if 0 <= index < 8 else WHITE


def color_16(index: int) -> Color:
    """Foreground colour for bright palette entries 8-15; white otherwise."""
    return _BRIGHT[index - 8] if 8 <= index < 16 else WHITE


def color_256(index: int) -> Color:
    """Colour from the 256-colour palette; the index is clamped to 0-255."""
    index = max(0, min(index, 255))
    if index < 16:
        return color_8(index) if index < 8 else color_16(index)
    if index < 232:
        cube = index - 16
        r, rest = divmod(cube, 36)
        g, b = divmod(rest, 6)
        return Color(
            _CUBE_LEVELS[r] / 255.0,
            _CUBE_LEVELS[g] / 255.0,
            _CUBE_LEVELS[b] / 255.0,
            1.0,
        )
    intensity = (8 + (index - 232) * 10) / 255.0
    return Color(intensity, intensity, intensity, 1.0)


def _parse_params(body: str) -> list[int]:
    params: list[int] = []
    for part in body.split(";"):
        match = _INT_PREFIX.match(part)
        if match is None:
            continue
        value = int(match.group())
        if _INT32_MIN <= value <= _INT32_MAX:
            params.append(value)
    return params


def _extended(params: list[int], i: int, current: Color) -> tuple[Color, int]:
    if i >= len(params):
        return current, i
    kind = params[i]
    i += 1
    if kind == 5 and i < len(params):
        return color_256(params[i]), i + 1
    if kind == 2 and i + 2 < len(params):
        r, g, b = params[i : i + 3]
        return Color(r / 255.0, g / 255.0, b / 255.0, 1.0), i + 3
    return current, i


def _apply(params: list[int], color: Color, background: Color) -> tuple[Color, Color]:
    i = 0
    while i < len(params):
        p = params[i]
        i += 1
        if p == 0:
            color, background = WHITE, TRANSPARENT
        elif p == 1:
            color = color.brightened()
        elif 30 <= p <= 37:
            color = color_8(p - 30)
        elif 90 <= p <= 97:
            color = color_16(p - 90 + 8)
        elif p == 38:
            color, i = _extended(params, i, color)
        elif 40 <= p <= 47:
            background = background_8(p - 40)
        elif 100 <= p <= 107:
            background = background_16(p - 100)
        elif p == 48:
            background, i = _extended(params, i, background)
        elif p == 49:
            background = TRANSPARENT
    return color, background


def parse_ansi(text: str) -> list[TextSegment]:
    """Split text at SGR escape sequences into coloured segments.

    Raises ValueError for an escape sequence that is never closed by ``m``.
    """
    segments: list[TextSegment] = []
    color, background = WHITE, TRANSPARENT
    pos = 0
    while pos < len(text):
        start = text.find(_ESCAPE, pos)
        if start == -1:
            segments.append(TextSegment(text[pos:], color, background))
            break
        if start > pos:
            segments.append(TextSegment(text[pos:start], color, background))
        end = text.find("m", start)
        if end == -1:
            raise ValueError(
                f"ANSI escape code is not closed [{text!r}] at pos [{start}]"
            )
        code = text[start:end]
        if len(code) > 2 and code[1] == "[":
            color, background = _apply(_parse_params(code[2:]), color, background)
        pos = end + 1
    return segments