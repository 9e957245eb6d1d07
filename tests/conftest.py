"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

SAMPLE_MOVETEXT = "1. e4 e5 2. Bc4 Bc5 3. Qh5 Nf6 4. Qxf7 1-0"

SAMPLE_HEADERS = """[Event "F/S Return Match"]
[Site "?"]
[Date "????.??.??"]
[Round "?"]
[White "Calistri, Tristan"]
[Black "Bauduin, Etienne"]
[Result "1-0"]
"""


@pytest.fixture
def sample_movetext() -> str:
    """Scholar's mate, ending on White's fourth move."""
    return SAMPLE_MOVETEXT


@pytest.fixture
def sample_pgn() -> str:
    """Full single-game PGN document with a seven-tag roster."""
    return SAMPLE_HEADERS + "\n" + SAMPLE_MOVETEXT + "\n"
