"""Half-move and game record value objects."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from pgnparser.core.enums import GameResult, Piece


@dataclass(frozen=True, slots=True)
class RegularMove:
    """A non-castling half-move as written in SAN.

    ``file_from`` and ``rank_from`` are the optional disambiguators; either,
    both or neither may be present. ``promotion`` is only ever set for pawn
    moves and is never :attr:`Piece.PAWN`.
    """

    piece: Piece
    target_square: str
    capture: bool = False
    file_from: str | None = None
    rank_from: str | None = None
    promotion: Piece | None = None

    @property
    def san(self) -> str:
        """Minimal SAN text without check/mate suffix."""
        text = self.piece.letter
        text += self.file_from or ""
        text += self.rank_from or ""
        if self.capture:
            text += "x"
        text += self.target_square
        if self.promotion is not None:
            text += "=" + self.promotion.letter
        return text

    def __str__(self) -> str:
        return self.san


@dataclass(frozen=True, slots=True)
class KingsideCastling:
    """Short castling, ``O-O``."""

    @property
    def san(self) -> str:
        return "O-O"

    def __str__(self) -> str:
        return self.san


@dataclass(frozen=True, slots=True)
class QueensideCastling:
    """Long castling, ``O-O-O``."""

    @property
    def san(self) -> str:
        return "O-O-O"

    def __str__(self) -> str:
        return self.san


HalfMove: TypeAlias = RegularMove | KingsideCastling | QueensideCastling


def _freeze_headers(headers: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(headers))


@dataclass(frozen=True, slots=True, eq=False)
class GameRecord:
    """A fully parsed game: tag pairs, mainline half-moves and result.

    ``moves`` is in chronological order; index parity gives the side
    (even = White, odd = Black).
    """

    headers: Mapping[str, str] = field(default_factory=dict)
    moves: tuple[HalfMove, ...] = ()
    result: GameResult = GameResult.OTHER

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze_headers(self.headers))
        object.__setattr__(self, "moves", tuple(self.moves))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameRecord):
            return NotImplemented
        return (
            dict(self.headers) == dict(other.headers)
            and self.moves == other.moves
            and self.result == other.result
        )

    @classmethod
    def from_str(cls, pgn_text: str) -> GameRecord:
        """Parse a single PGN game; see :func:`pgnparser.core.notation.parse_game`."""
        from pgnparser.core.notation.pgn import parse_game

        return parse_game(pgn_text)

    def plies(self) -> Iterator[tuple[int, HalfMove, HalfMove | None]]:
        """Yield ``(move_number, white, black)``; ``black`` is None on a White finish."""
        for idx in range(0, len(self.moves), 2):
            black = self.moves[idx + 1] if idx + 1 < len(self.moves) else None
            yield idx // 2 + 1, self.moves[idx], black
