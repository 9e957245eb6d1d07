"""Tests for notation enums."""

import pytest

from pgnparser.core.enums import Color, Piece


class TestPiece:
    def test_from_letter(self) -> None:
        assert Piece.from_letter("K") == Piece.KING
        assert Piece.from_letter("Q") == Piece.QUEEN
        assert Piece.from_letter("B") == Piece.BISHOP
        assert Piece.from_letter("N") == Piece.KNIGHT
        assert Piece.from_letter("R") == Piece.ROOK

    def test_pawn_has_no_letter(self) -> None:
        assert Piece.PAWN.letter == ""
        with pytest.raises(ValueError, match="Invalid piece letter"):
            Piece.from_letter("P")

    def test_lowercase_letter_rejected(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_letter("n")

    def test_white_glyphs(self) -> None:
        assert Piece.KING.glyph(Color.WHITE) == "♔"
        assert Piece.QUEEN.glyph(Color.WHITE) == "♕"
        assert Piece.BISHOP.glyph(Color.WHITE) == "♗"
        assert Piece.KNIGHT.glyph(Color.WHITE) == "♘"
        assert Piece.ROOK.glyph(Color.WHITE) == "♖"
        assert Piece.PAWN.glyph(Color.WHITE) == ""

    def test_black_glyphs(self) -> None:
        assert Piece.KING.glyph(Color.BLACK) == "♚"
        assert Piece.QUEEN.glyph(Color.BLACK) == "♛"
        assert Piece.BISHOP.glyph(Color.BLACK) == "♝"
        assert Piece.KNIGHT.glyph(Color.BLACK) == "♞"
        assert Piece.ROOK.glyph(Color.BLACK) == "♜"
        assert Piece.PAWN.glyph(Color.BLACK) == ""


class TestColor:
    def test_str(self) -> None:
        assert str(Color.BLACK) == "black"
