"""Plain-text rendering of parsed games with Unicode piece glyphs."""

from __future__ import annotations

from pgnparser.core.enums import Color
from pgnparser.core.moves import GameRecord, HalfMove, RegularMove


def format_half_move(move: HalfMove, color: Color) -> str:
    """SAN-like text with the moving and promoted pieces drawn as glyphs."""
    if not isinstance(move, RegularMove):
        return move.san

    text = move.piece.glyph(color)
    text += (move.file_from or "") + (move.rank_from or "")
    if move.capture:
        text += "x"
    text += move.target_square
    if move.promotion is not None:
        text += "=" + move.promotion.glyph(color)
    return text


def format_game(record: GameRecord) -> str:
    """Header lines followed by one ``N. white<TAB>black`` line per move."""
    lines = [f"{key}: {value}" for key, value in record.headers.items()]
    for number, white, black in record.plies():
        line = f"{number}. {format_half_move(white, Color.WHITE)}"
        if black is not None:
            line += "\t" + format_half_move(black, Color.BLACK)
        lines.append(line)
    return "\n".join(lines)
