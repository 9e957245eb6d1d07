"""Notation package: SAN half-move matching and PGN game parsing/serialization."""

from pgnparser.core.notation.lexer import is_space_or_eol, read_token, skip_space
from pgnparser.core.notation.pgn import (
    build_pgn,
    game_result_from_pgn,
    game_to_pgn,
    parse_game,
    parse_headers,
    parse_moves,
    parse_ply,
    parse_result,
    pgn_movetext_from_moves,
    pgn_result_token,
)
from pgnparser.core.notation.san import (
    HALF_MOVE_MATCHERS,
    ShapeMatcher,
    kingside_castling,
    parse_half_move,
    pawn_capture,
    pawn_move,
    piece_move,
    queenside_castling,
)

__all__ = [
    # Lexing
    "is_space_or_eol",
    "read_token",
    "skip_space",
    # SAN
    "HALF_MOVE_MATCHERS",
    "ShapeMatcher",
    "pawn_move",
    "pawn_capture",
    "piece_move",
    "queenside_castling",
    "kingside_castling",
    "parse_half_move",
    # PGN
    "parse_headers",
    "parse_ply",
    "parse_moves",
    "parse_result",
    "parse_game",
    "pgn_result_token",
    "game_result_from_pgn",
    "pgn_movetext_from_moves",
    "build_pgn",
    "game_to_pgn",
]
