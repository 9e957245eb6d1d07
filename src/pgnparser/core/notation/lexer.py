"""Whitespace classification and token scanning over PGN text."""

from __future__ import annotations

_SPACE_OR_EOL = frozenset(" \t\r\n")


def is_space_or_eol(ch: str) -> bool:
    """True for space, tab, carriage return and newline."""
    return ch in _SPACE_OR_EOL


def skip_space(text: str, pos: int) -> int:
    """Return the index of the first non-space character at or after *pos*."""
    total = len(text)
    while pos < total and text[pos] in _SPACE_OR_EOL:
        pos += 1
    return pos


def read_token(text: str, pos: int) -> tuple[str, int]:
    """Read the whitespace-delimited token starting at *pos*.

    Returns ``(token, end)``; the token is empty when *pos* is at a space or
    at the end of *text*.
    """
    end = pos
    total = len(text)
    while end < total and text[end] not in _SPACE_OR_EOL:
        end += 1
    return text[pos:end], end
