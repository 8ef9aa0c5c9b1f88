"""Indentation helpers for the document format."""

from __future__ import annotations

INDENT = 2


def indent_level(line: str, width: int = INDENT) -> int:
    """Number of indentation levels before the first non-space character."""
    count = len(line) - len(line.lstrip(" "))
    return count // width


def trim_last_char(text: str) -> str:
    """Drop exactly one trailing character (the colon of a header line)."""
    if not text:
        raise ValueError("Cannot trim an empty string")
    return text[:-1]


def indented(text: str, level: int, width: int = INDENT) -> str:
    return " " * (level * width) + text
