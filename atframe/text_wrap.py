"""Width-limited text wrapping with a caller-supplied text measure."""

from __future__ import annotations

from typing import Callable

Measure = Callable[[str], float]

_DELIMITERS = frozenset(" _-/\\.")
_ELLIPSIS = "..."


def is_delim_char(char: str) -> bool:
    """Whether a line may be broken right after ``char``."""
    return char in _DELIMITERS


def wrap_text(
    text: str,
    wrap_width: float,
    measure: Measure = len,
    max_lines: int = -1,
) -> str:
    """Insert line breaks so each line fits ``wrap_width`` as judged by ``measure``.

    A line is broken after its last delimiter. Without one, the character that
    overflows is replaced by ``-`` and the line is broken there. When
    ``max_lines`` is positive and the last allowed line overflows, it is cut
    short and ended with ``...`` and the rest of the text is dropped.
    """
    out: list[str] = []
    line_start = 0
    last_delim: int | None = None
    line_count = 0

    for char in text:
        out.append(char)
        if is_delim_char(char):
            last_delim = len(out)

        if measure("".join(out[line_start:])) <= wrap_width:
            continue

        if max_lines > 0 and line_count + 1 == max_lines:
            end = len(out)
            ellipsis_width = measure(_ELLIPSIS)
            while end > line_start and measure("".join(out[line_start:end])) + ellipsis_width > wrap_width:
                end -= 1
            return "".join(out[:end]) + _ELLIPSIS

        if last_delim is not None and last_delim > line_start:
            out.insert(last_delim, "\n")
            line_start = last_delim + 1
        else:
            out[-1] = "-"
            out.append("\n")
            line_start = len(out)
        line_count += 1
        last_delim = None

    return "".join(out)


def wrap_text_at_underscore(text: str, wrap_width: float, measure: Measure = len) -> str:
    """Wrap text only at underscores, keeping the underscores in place."""
    segments = text.split("_")
    if text == "" or text.endswith("_"):
        segments.pop()

    wrapped = ""
    text_width = 0.0
    for segment in segments:
        if text_width + measure(segment) > wrap_width:
            wrapped += "\n"
            text_width = 0.0
        wrapped += segment + "_"
        text_width += measure(wrapped + "_")

    if wrapped.endswith("_"):
        wrapped = wrapped[:-1]
    return wrapped