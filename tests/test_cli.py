"""Tests for the command-line interface."""

from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from uciproto import __version__
from uciproto.cli import app

TRANSCRIPT = """\
uci
id name Vampirc
id author Matija
option name Hash type spin default 16 min 1 max 1024
uciok
isready
readyok
position startpos moves e2e4
go   wtime 1000 bt 900
bestmove e7e5 ponder g1f3
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def transcript(tmp_path: Path) -> Path:
    path = tmp_path / "session.log"
    path.write_text(TRANSCRIPT)
    return path


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI installs loguru sinks; drop them after each test."""
    yield
    logger.remove()


class TestCli:
    """Tests for uciproto commands."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_normalize(self, runner: CliRunner, transcript: Path) -> None:
        """Test canonical output, with the option line dropped."""
        result = runner.invoke(app, ["normalize", str(transcript)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "uci",
            "id name Vampirc",
            "id author Matija",
            "uciok",
            "isready",
            "readyok",
            "position startpos moves e2e4",
            "go wtime 1000 btime 900",
            "bestmove e7e5 ponder g1f3",
        ]

    def test_normalize_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["normalize"], input="joho debug on\n")
        assert result.exit_code == 0
        assert result.output.strip() == "debug on"

    def test_normalize_direction(self, runner: CliRunner, transcript: Path) -> None:
        """Test filtering to engine-bound messages."""
        result = runner.invoke(app, ["normalize", "--direction", "engine", str(transcript)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "uci",
            "isready",
            "position startpos moves e2e4",
            "go wtime 1000 btime 900",
        ]

    def test_normalize_bad_direction(self, runner: CliRunner, transcript: Path) -> None:
        result = runner.invoke(app, ["normalize", "--direction", "sideways", str(transcript)])
        assert result.exit_code != 0

    def test_legacy_override(self, runner: CliRunner) -> None:
        """Test that --set reaches the codec."""
        result = runner.invoke(
            app,
            ["--set", "codec.legacy_black_time_token=true", "normalize"],
            input="go btime 5\n",
        )
        assert result.exit_code == 0
        assert result.output.strip() == "go bt 5"

    def test_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config_file = tmp_path / "uci.yaml"
        config_file.write_text("codec:\n  legacy_black_time_token: true\n")
        result = runner.invoke(app, ["--config", str(config_file), "normalize"], input="go btime 5\n")
        assert result.exit_code == 0
        assert result.output.strip() == "go bt 5"

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "version"])
        assert result.exit_code != 0

    def test_decode(self, runner: CliRunner, transcript: Path) -> None:
        """Test the summary table counts."""
        result = runner.invoke(app, ["decode", str(transcript)])
        assert result.exit_code == 0
        assert "BestMove" in result.output
        assert "9 decoded, 1 ignored" in result.output

    def test_decode_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["decode", str(tmp_path / "nope.log")])
        assert result.exit_code != 0
