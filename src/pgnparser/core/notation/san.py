"""SAN (Standard Algebraic Notation) half-move matching.

Each move shape is a :class:`ShapeMatcher`: a full-token pattern paired with
the constructor for the half-move it describes. :func:`parse_half_move`
tries them in :data:`HALF_MOVE_MATCHERS` order and commits to the first one
that accepts the token.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from pgnparser.core.enums import ParserState, Piece
from pgnparser.core.errors import IncompleteInput, MalformedMove
from pgnparser.core.moves import (
    HalfMove,
    KingsideCastling,
    QueensideCastling,
    RegularMove,
)
from pgnparser.core.notation.lexer import read_token

MatchResult: TypeAlias = tuple[HalfMove, int]

# Check / checkmate markers carry no payload and are dropped.
_CHECK = r"[+#]?"
_PROMOTION = r"(?:=(?P<promotion>[QBNR]))?"

_PAWN_MOVE_RE = re.compile(rf"(?P<square>[a-h][1-8]){_PROMOTION}{_CHECK}")
_PAWN_CAPTURE_RE = re.compile(
    rf"(?P<file>[a-h])x(?P<square>[a-h][1-8]){_PROMOTION}{_CHECK}"
)
_PIECE_MOVE_RE = re.compile(
    r"(?P<piece>[KQBNR])(?P<file>[a-h])?(?P<rank>[1-8])?(?P<capture>x)?"
    rf"(?P<square>[a-h][1-8]){_CHECK}"
)
_QUEENSIDE_RE = re.compile(rf"O-O-O{_CHECK}")
_KINGSIDE_RE = re.compile(rf"O-O{_CHECK}")


def _promotion(letter: str | None) -> Piece | None:
    return Piece.from_letter(letter) if letter else None


def _build_pawn_move(match: re.Match[str]) -> HalfMove:
    return RegularMove(
        piece=Piece.PAWN,
        target_square=match["square"],
        promotion=_promotion(match["promotion"]),
    )


def _build_pawn_capture(match: re.Match[str]) -> HalfMove:
    return RegularMove(
        piece=Piece.PAWN,
        target_square=match["square"],
        capture=True,
        file_from=match["file"],
        promotion=_promotion(match["promotion"]),
    )


def _build_piece_move(match: re.Match[str]) -> HalfMove:
    return RegularMove(
        piece=Piece.from_letter(match["piece"]),
        target_square=match["square"],
        capture=match["capture"] is not None,
        file_from=match["file"],
        rank_from=match["rank"],
    )


@dataclass(frozen=True, slots=True)
class ShapeMatcher:
    """Matches one whitespace-delimited token against a single move shape."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], HalfMove]

    def __call__(self, text: str, pos: int = 0) -> MatchResult | None:
        """Return ``(half_move, end)`` or None; never consumes on failure."""
        token, end = read_token(text, pos)
        if not token:
            return None
        match = self.pattern.fullmatch(token)
        if match is None:
            return None
        return self.build(match), end


pawn_move = ShapeMatcher("pawn move", _PAWN_MOVE_RE, _build_pawn_move)
pawn_capture = ShapeMatcher("pawn capture", _PAWN_CAPTURE_RE, _build_pawn_capture)
piece_move = ShapeMatcher("piece move", _PIECE_MOVE_RE, _build_piece_move)
queenside_castling = ShapeMatcher(
    "queenside castling", _QUEENSIDE_RE, lambda _match: QueensideCastling()
)
kingside_castling = ShapeMatcher(
    "kingside castling", _KINGSIDE_RE, lambda _match: KingsideCastling()
)

# Queenside goes before kingside: "O-O-O" starts with "O-O".
HALF_MOVE_MATCHERS: tuple[ShapeMatcher, ...] = (
    pawn_move,
    pawn_capture,
    piece_move,
    queenside_castling,
    kingside_castling,
)


def parse_half_move(text: str, pos: int = 0) -> MatchResult:
    """Parse the half-move token at *pos* into ``(half_move, end)``.

    Raises:
        MalformedMove: The token matches no move shape.
        IncompleteInput: There is no token left at *pos*.
    """
    for matcher in HALF_MOVE_MATCHERS:
        result = matcher(text, pos)
        if result is not None:
            return result

    token, _end = read_token(text, pos)
    if not token:
        raise IncompleteInput(
            ParserState.MOVE_LIST, pos, text[pos:], detail="expected a half-move"
        )
    raise MalformedMove(ParserState.MOVE_LIST, pos, text[pos:], token=token)
