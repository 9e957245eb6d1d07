"""PGN game parsing and serialization.

The game grammar is a strictly forward state machine::

    START -> HEADERS -> MOVE_LIST -> RESULT -> DONE

Every stage consumes a prefix of the remaining text and hands its end offset
to the next; nothing is re-read. The first failure aborts the whole parse
with a :class:`~pgnparser.core.errors.PgnError` subclass.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from pgnparser.core.enums import GameResult, ParserState
from pgnparser.core.errors import (
    IncompleteInput,
    MalformedHeader,
    MalformedMove,
    MalformedResult,
)
from pgnparser.core.moves import GameRecord, HalfMove
from pgnparser.core.notation.lexer import read_token, skip_space
from pgnparser.core.notation.san import parse_half_move

_LOGGER = logging.getLogger(__name__)

_PGN_RESULT_TOKENS: dict[str, GameResult] = {
    "1-0": GameResult.WHITE_WON,
    "0-1": GameResult.BLACK_WON,
    "1/2-1/2": GameResult.DRAW,
    "*": GameResult.OTHER,
}
_RESULT_TOKEN_FOR: dict[GameResult, str] = {
    v: k for k, v in _PGN_RESULT_TOKENS.items()
}
_DIGITS = frozenset("0123456789")

_HEADER_KEY_RE = re.compile(r"[A-Za-z0-9_]+")
_HEADER_VALUE_RE = re.compile(r'((?:[^"\\]|\\.)*)"', re.DOTALL)
_HEADER_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_MOVE_NUMBER_RE = re.compile(r"[0-9]+")

PlyPair: TypeAlias = tuple[HalfMove, HalfMove | None]


# ── Result tokens ───────────────────────────────────────────────────────────


def pgn_result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to a PGN result token."""
    return _RESULT_TOKEN_FOR[result]


def game_result_from_pgn(token: str) -> GameResult:
    """Convert PGN result token to :class:`GameResult`."""
    return _PGN_RESULT_TOKENS.get(token, GameResult.OTHER)


def _result_at(text: str, pos: int) -> str | None:
    for token in _PGN_RESULT_TOKENS:
        if text.startswith(token, pos):
            return token
    return None


def _is_truncated_result(text: str, pos: int) -> bool:
    """True when the rest of *text* is a proper prefix of a result token."""
    token, end = read_token(text, pos)
    if not token or skip_space(text, end) < len(text):
        return False
    return any(
        candidate != token and candidate.startswith(token)
        for candidate in _PGN_RESULT_TOKENS
    )


# ── Header block ────────────────────────────────────────────────────────────


def _header_error(text: str, start: int, detail: str) -> MalformedHeader:
    line_end = text.find("\n", start)
    if line_end < 0:
        line_end = len(text)
    return MalformedHeader(
        ParserState.HEADERS,
        start,
        text[start:],
        token=text[start:line_end].rstrip("\r"),
        detail=detail,
    )


def _parse_header_pair(text: str, pos: int) -> tuple[str, str, int]:
    """Parse one ``[Key "Value"]`` entry starting at the ``[`` at *pos*."""
    start = pos
    pos = skip_space(text, pos + 1)

    key_match = _HEADER_KEY_RE.match(text, pos)
    if key_match is None:
        raise _header_error(text, start, "expected a tag name")
    key = key_match.group()
    pos = skip_space(text, key_match.end())

    if not text.startswith('"', pos):
        raise _header_error(text, start, "expected an opening quote")
    value_match = _HEADER_VALUE_RE.match(text, pos + 1)
    if value_match is None:
        raise _header_error(text, start, "unterminated tag value")
    value = _HEADER_ESCAPE_RE.sub(r"\1", value_match.group(1))
    pos = skip_space(text, value_match.end())

    if not text.startswith("]", pos):
        raise _header_error(text, start, "expected a closing bracket")
    return key, value, skip_space(text, pos + 1)


def parse_headers(text: str, pos: int = 0) -> tuple[dict[str, str], int]:
    """Parse zero or more tag pairs; returns ``(headers, end)``.

    Stops at the first non-space character that is not ``[``. A repeated
    key overwrites the earlier value.
    """
    headers: dict[str, str] = {}
    pos = skip_space(text, pos)
    while text.startswith("[", pos):
        start = pos
        key, value, pos = _parse_header_pair(text, pos)
        if key in headers:
            _LOGGER.warning(
                "Duplicate PGN header %r at offset %d; keeping last value", key, start
            )
        headers[key] = value
    return headers, pos


# ── Movetext ────────────────────────────────────────────────────────────────


def _ends_game(text: str, pos: int) -> bool:
    """True when *pos* is at the end of input or at a (possibly truncated) result."""
    return (
        pos >= len(text)
        or _result_at(text, pos) is not None
        or _is_truncated_result(text, pos)
    )


def parse_ply(text: str, pos: int) -> tuple[PlyPair, int]:
    """Parse ``N. white [black]`` at *pos*; returns ``((white, black), end)``.

    ``black`` is None only when the game ends on White's move, i.e. the
    input ends or the result token follows. The move number itself is
    checked for presence but not kept.
    """
    number = _MOVE_NUMBER_RE.match(text, pos)
    if number is None:
        token, _end = read_token(text, pos)
        if not token:
            raise IncompleteInput(
                ParserState.MOVE_LIST, pos, text[pos:], detail="expected a move number"
            )
        raise MalformedMove(
            ParserState.MOVE_LIST,
            pos,
            text[pos:],
            token=token,
            detail="expected a move number",
        )

    dot = number.end()
    if dot >= len(text):
        raise IncompleteInput(
            ParserState.MOVE_LIST,
            pos,
            text[pos:],
            token=number.group(),
            detail="expected '.' after move number",
        )
    if text[dot] != ".":
        raise MalformedMove(
            ParserState.MOVE_LIST,
            pos,
            text[pos:],
            token=read_token(text, pos)[0],
            detail="expected '.' after move number",
        )

    white, end = parse_half_move(text, skip_space(text, dot + 1))
    black: HalfMove | None = None
    following = skip_space(text, end)
    if not _ends_game(text, following):
        black, end = parse_half_move(text, following)
    return (white, black), end


def parse_moves(text: str, pos: int = 0) -> tuple[list[HalfMove], int]:
    """Parse consecutive plies into a flat, chronological half-move list."""
    moves: list[HalfMove] = []
    while True:
        start = skip_space(text, pos)
        if _ends_game(text, start) or text[start] not in _DIGITS:
            break
        (white, black), pos = parse_ply(text, start)
        moves.append(white)
        if black is not None:
            moves.append(black)
    return moves, pos


def parse_result(text: str, pos: int = 0) -> tuple[GameResult, int]:
    """Match the terminating result token; returns ``(result, end)``."""
    pos = skip_space(text, pos)
    token = _result_at(text, pos)
    if token is not None:
        return _PGN_RESULT_TOKENS[token], pos + len(token)

    found, _end = read_token(text, pos)
    if not found or _is_truncated_result(text, pos):
        raise IncompleteInput(
            ParserState.RESULT,
            pos,
            text[pos:],
            token=found or None,
            detail="expected a result token",
        )
    raise MalformedResult(ParserState.RESULT, pos, text[pos:], token=found)


# ── Game ────────────────────────────────────────────────────────────────────


class _GameParser:
    """Single-use driver for the game state machine over one buffer."""

    __slots__ = ("_text", "_pos", "_state")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._state = ParserState.START

    def _enter(self, state: ParserState) -> None:
        _LOGGER.debug(
            "PGN parser %s -> %s at offset %d", self._state.name, state.name, self._pos
        )
        self._state = state

    def run(self) -> GameRecord:
        self._enter(ParserState.HEADERS)
        headers, self._pos = parse_headers(self._text, self._pos)

        self._enter(ParserState.MOVE_LIST)
        moves, self._pos = parse_moves(self._text, self._pos)

        self._enter(ParserState.RESULT)
        result, self._pos = parse_result(self._text, self._pos)

        self._enter(ParserState.DONE)
        trailing = skip_space(self._text, self._pos)
        if trailing < len(self._text):
            _LOGGER.debug(
                "Ignoring %d characters after the result token",
                len(self._text) - trailing,
            )
        _LOGGER.debug(
            "Parsed PGN game: %d headers, %d half-moves, result %s",
            len(headers),
            len(moves),
            result.name,
        )
        return GameRecord(headers=headers, moves=tuple(moves), result=result)


def parse_game(pgn_text: str) -> GameRecord:
    """Parse a single PGN game into a :class:`GameRecord`.

    Raises:
        MalformedHeader: A tag pair is not well-formed.
        MalformedMove: A movetext token is not a valid half-move.
        MalformedResult: The movetext is not followed by a result token.
        IncompleteInput: The text ended in the middle of a construct.
    """
    return _GameParser(pgn_text).run()


# ── Serialization ───────────────────────────────────────────────────────────


def pgn_movetext_from_moves(moves: Sequence[HalfMove], result_token: str) -> str:
    """Build numbered PGN movetext from half-moves and a result token."""
    parts: list[str] = []
    for ply, move in enumerate(moves):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(move.san)
    parts.append(result_token)
    return " ".join(parts)


def build_pgn(
    headers: Mapping[str, str],
    moves: Sequence[HalfMove],
    result_token: str,
) -> str:
    """Build a single-game PGN document."""
    if result_token not in _PGN_RESULT_TOKENS:
        raise ValueError(f"Invalid PGN result token: {result_token!r}")

    lines: list[str] = []
    for key, value in headers.items():
        if not _HEADER_KEY_RE.fullmatch(key):
            raise ValueError(f"Invalid PGN header name: {key!r}")
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext_from_moves(moves, result_token))
    lines.append("")
    return "\n".join(lines)


def game_to_pgn(record: GameRecord) -> str:
    """Serialize a :class:`GameRecord` back to PGN text."""
    return build_pgn(record.headers, record.moves, pgn_result_token(record.result))
