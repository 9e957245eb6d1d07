"""Tests for whitespace classification and token scanning."""

from pgnparser.core.notation.lexer import is_space_or_eol, read_token, skip_space


class TestLexer:
    def test_space_or_eol(self) -> None:
        for ch in " \t\r\n":
            assert is_space_or_eol(ch)
        for ch in "ax.[1":
            assert not is_space_or_eol(ch)

    def test_read_token_stops_at_whitespace(self) -> None:
        assert read_token("e4 e5", 0) == ("e4", 2)
        assert read_token("Nf3\ne5", 0) == ("Nf3", 3)
        assert read_token("e4 Nc6\t", 3) == ("Nc6", 6)

    def test_read_token_at_end_of_input(self) -> None:
        assert read_token("e4", 0) == ("e4", 2)
        assert read_token("e4", 2) == ("", 2)

    def test_read_token_on_space_is_empty(self) -> None:
        assert read_token("e4 e5", 2) == ("", 2)

    def test_skip_space(self) -> None:
        assert skip_space(" \t\r\n e4", 0) == 5
        assert skip_space("e4", 0) == 0
        assert skip_space("e4   ", 2) == 5
