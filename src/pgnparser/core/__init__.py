"""Core domain layer: notation enums, half-move values and parse errors."""

from pgnparser.core.enums import Color, GameResult, ParserState, Piece
from pgnparser.core.errors import (
    IncompleteInput,
    MalformedHeader,
    MalformedMove,
    MalformedResult,
    PgnError,
)
from pgnparser.core.moves import (
    GameRecord,
    HalfMove,
    KingsideCastling,
    QueensideCastling,
    RegularMove,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "ParserState",
    "Piece",
    # Values
    "GameRecord",
    "HalfMove",
    "KingsideCastling",
    "QueensideCastling",
    "RegularMove",
    # Errors
    "PgnError",
    "MalformedHeader",
    "MalformedMove",
    "MalformedResult",
    "IncompleteInput",
]
