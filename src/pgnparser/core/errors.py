"""Exceptions raised while parsing PGN text."""

from __future__ import annotations

from pgnparser.core.enums import ParserState

_REMAINING_PREVIEW = 20


class PgnError(ValueError):
    """Base class for every PGN parse failure.

    Attributes:
        state: Parser state that failed.
        offset: Character offset of the failure within the input.
        token: Offending token text, when one could be isolated.
        remaining: Unparsed input starting at ``offset``.
    """

    kind = "PGN parse error"

    def __init__(
        self,
        state: ParserState,
        offset: int,
        remaining: str,
        token: str | None = None,
        detail: str = "",
    ) -> None:
        self.state = state
        self.offset = offset
        self.remaining = remaining
        self.token = token
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        msg = f"{self.kind} at offset {self.offset} ({self.state.name.lower()})"
        if self.token is not None:
            msg += f": {self.token!r}"
        elif self.remaining:
            preview = self.remaining[:_REMAINING_PREVIEW]
            msg += f" near {preview!r}"
        if self.detail:
            msg += f" ({self.detail})"
        return msg


class MalformedHeader(PgnError):
    """A ``[Key "Value"]`` tag pair is not well-formed."""

    kind = "Malformed PGN header"


class MalformedMove(PgnError):
    """A movetext token matched no half-move shape."""

    kind = "Malformed move"


class MalformedResult(PgnError):
    """The movetext is not terminated by a result token."""

    kind = "Malformed result"


class IncompleteInput(PgnError):
    """The buffer ended before a construct was complete."""

    kind = "Incomplete PGN input"
