"""Parse PGN chess-game transcripts into immutable game records.

Quick start::

    from pgnparser import parse_game

    game = parse_game('[Event "Casual"] 1. e4 e5 2. Nf3 Nc6 *')
    for move in game.moves:
        print(move.san)
"""

from pgnparser.core import (
    Color,
    GameRecord,
    GameResult,
    HalfMove,
    IncompleteInput,
    KingsideCastling,
    MalformedHeader,
    MalformedMove,
    MalformedResult,
    ParserState,
    PgnError,
    Piece,
    QueensideCastling,
    RegularMove,
)
from pgnparser.core.notation import build_pgn, game_to_pgn, parse_game

__version__ = "0.3.0"

__all__ = [
    "Color",
    "GameRecord",
    "GameResult",
    "HalfMove",
    "KingsideCastling",
    "ParserState",
    "Piece",
    "QueensideCastling",
    "RegularMove",
    "PgnError",
    "MalformedHeader",
    "MalformedMove",
    "MalformedResult",
    "IncompleteInput",
    "build_pgn",
    "game_to_pgn",
    "parse_game",
]
