"""Tests for the show-pgn command line entry point."""

from pathlib import Path

import pytest

from pgnparser.app import EXIT_OK, EXIT_PARSE_ERROR, EXIT_READ_ERROR, main


class TestShowPgn:
    def test_prints_game(
        self, tmp_path: Path, sample_pgn: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pgn_file = tmp_path / "game.pgn"
        pgn_file.write_text(sample_pgn, encoding="utf-8")

        assert main([str(pgn_file)]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Black: Bauduin, Etienne" in out
        assert "4. ♕xf7" in out

    def test_parse_error_exit_status(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        pgn_file = tmp_path / "broken.pgn"
        pgn_file.write_text("1. e4 Z9 1-0\n", encoding="utf-8")

        assert main([str(pgn_file)]) == EXIT_PARSE_ERROR
        assert "move_list failed at offset 6" in caplog.text

    def test_missing_file_exit_status(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        missing = tmp_path / "missing.pgn"

        assert main([str(missing)]) == EXIT_READ_ERROR
        assert "Cannot read" in caplog.text

    def test_verbose_flag(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        pgn_file = tmp_path / "game.pgn"
        pgn_file.write_text("1. d4 *", encoding="utf-8")

        assert main(["--verbose", str(pgn_file)]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "1. d4"
