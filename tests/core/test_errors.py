"""Tests for the parse error taxonomy."""

import pytest

from pgnparser.core.enums import ParserState
from pgnparser.core.errors import (
    IncompleteInput,
    MalformedHeader,
    MalformedMove,
    MalformedResult,
    PgnError,
)


class TestPgnError:
    @pytest.mark.parametrize(
        "error_type", [MalformedHeader, MalformedMove, MalformedResult, IncompleteInput]
    )
    def test_subclasses_are_value_errors(self, error_type: type[PgnError]) -> None:
        assert issubclass(error_type, PgnError)
        assert issubclass(error_type, ValueError)

    def test_attributes(self) -> None:
        err = MalformedMove(ParserState.MOVE_LIST, 9, "Z9 1-0", token="Z9")
        assert err.state == ParserState.MOVE_LIST
        assert err.offset == 9
        assert err.token == "Z9"
        assert err.remaining == "Z9 1-0"

    def test_message_names_token_and_offset(self) -> None:
        err = MalformedMove(ParserState.MOVE_LIST, 9, "Z9 1-0", token="Z9")
        assert str(err) == "Malformed move at offset 9 (move_list): 'Z9'"

    def test_message_previews_remaining_without_token(self) -> None:
        err = MalformedResult(
            ParserState.RESULT, 3, "x" * 40, detail="expected a result token"
        )
        message = str(err)
        assert message.startswith("Malformed result at offset 3 (result) near ")
        assert "x" * 20 in message
        assert "x" * 21 not in message
        assert message.endswith("(expected a result token)")
