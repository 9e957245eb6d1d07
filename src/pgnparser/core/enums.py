"""Core enumerations for the PGN domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class Piece(IntEnum):
    """Chess pieces as they appear in move notation."""

    KING = 1
    QUEEN = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    PAWN = 6

    @classmethod
    def from_letter(cls, letter: str) -> Piece:
        """Map a SAN piece letter, e.g. ``'N'`` → :attr:`KNIGHT`."""
        try:
            return _LETTER_PIECE[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None

    @property
    def letter(self) -> str:
        """SAN letter (empty for a pawn)."""
        return _PIECE_LETTER[self]

    def glyph(self, color: Color) -> str:
        """Unicode board glyph for *color*; pawns render as nothing."""
        return _GLYPHS[(color, self)]


_PIECE_LETTER: dict[Piece, str] = {
    Piece.KING: "K",
    Piece.QUEEN: "Q",
    Piece.BISHOP: "B",
    Piece.KNIGHT: "N",
    Piece.ROOK: "R",
    Piece.PAWN: "",
}
_LETTER_PIECE: dict[str, Piece] = {v: k for k, v in _PIECE_LETTER.items() if v}

_GLYPHS: dict[tuple[Color, Piece], str] = {
    (Color.WHITE, Piece.KING): "♔",
    (Color.WHITE, Piece.QUEEN): "♕",
    (Color.WHITE, Piece.BISHOP): "♗",
    (Color.WHITE, Piece.KNIGHT): "♘",
    (Color.WHITE, Piece.ROOK): "♖",
    (Color.WHITE, Piece.PAWN): "",
    (Color.BLACK, Piece.KING): "♚",
    (Color.BLACK, Piece.QUEEN): "♛",
    (Color.BLACK, Piece.BISHOP): "♝",
    (Color.BLACK, Piece.KNIGHT): "♞",
    (Color.BLACK, Piece.ROOK): "♜",
    (Color.BLACK, Piece.PAWN): "",
}


class GameResult(IntEnum):
    """Outcome declared by the result token."""

    WHITE_WON = 1
    BLACK_WON = 2
    DRAW = 3
    OTHER = 4  # "*": unknown or still in progress


# ── Parser FSM states ────────────────────────────────────────────────────────


class ParserState(IntEnum):
    """Finite-state-machine states of the game parser."""

    START = auto()
    HEADERS = auto()
    MOVE_LIST = auto()
    RESULT = auto()
    DONE = auto()
