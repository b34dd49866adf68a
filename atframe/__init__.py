"""Toolkit-independent UI helpers: markdown and ANSI parsing, text wrapping and mouse interaction."""

__version__ = "0.1.0"

__all__ = ["ansi", "interaction", "markdown", "text_wrap"]