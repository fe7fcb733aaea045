"""Tests for core utilities."""

from pathlib import Path

import pytest
from loguru import logger

from uciproto.core.configs import (
    AppConfig,
    CodecConfig,
    LoggingConfig,
    config_from_dict,
    config_to_dict,
    load_app_config,
    load_config,
    save_config,
)
from uciproto.core.utils import setup_logging, split_square
from uciproto.uci import parse_line


class TestConfig:
    """Tests for configuration utilities."""

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        """Test loading a config file."""
        config_file = tmp_path / "test.yaml"
        config_file.write_text("codec:\n  legacy_black_time_token: true\nlogging:\n  level: DEBUG\n")

        config = load_config(config_file)

        assert config.codec.legacy_black_time_token is True
        assert config.logging.level == "DEBUG"

    def test_load_config_with_overrides(self, tmp_path: Path) -> None:
        """Test loading config with CLI overrides."""
        config_file = tmp_path / "test.yaml"
        config_file.write_text("logging:\n  level: INFO\n")

        config = load_config(config_file, overrides=["logging.level=WARNING"])

        assert config.logging.level == "WARNING"

    def test_load_config_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_save_config(self, tmp_path: Path) -> None:
        """Test saving a config file."""
        config = {"codec": {"legacy_black_time_token": False}}
        config_file = tmp_path / "output.yaml"

        save_config(config, config_file)

        assert config_file.exists()
        loaded = load_config(config_file)
        assert loaded.codec.legacy_black_time_token is False

    def test_save_app_config_round_trip(self, tmp_path: Path) -> None:
        """Test saving an AppConfig and loading it back."""
        config = AppConfig(codec=CodecConfig(legacy_black_time_token=True), logging=LoggingConfig(level="debug"))
        config_file = tmp_path / "nested" / "app.yaml"

        save_config(config, config_file)

        assert load_app_config(config_file) == config

    def test_load_app_config_defaults(self) -> None:
        """Test that no file and no overrides gives the defaults."""
        assert load_app_config() == AppConfig()

    def test_load_app_config_overrides_only(self) -> None:
        config = load_app_config(overrides=["codec.legacy_black_time_token=true"])
        assert config.codec.black_time_token == "bt"


class TestSchema:
    """Tests for the configuration dataclasses."""

    def test_black_time_token(self) -> None:
        assert CodecConfig().black_time_token == "btime"
        assert CodecConfig(legacy_black_time_token=True).black_time_token == "bt"

    def test_log_level_normalized(self) -> None:
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_log_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig(level="chatty")

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(TypeError):
            config_from_dict({"codec": {"no_such_option": 1}})

    def test_dict_round_trip(self) -> None:
        config = AppConfig(logging=LoggingConfig(log_file="logs/uci.log"))
        assert config_from_dict(config_to_dict(config)) == config


class TestLogging:
    """Tests for loguru setup."""

    def test_file_sink(self, tmp_path: Path) -> None:
        """Test that records reach the log file."""
        log_file = tmp_path / "logs" / "uci.log"
        setup_logging(LoggingConfig(level="DEBUG", log_file=str(log_file)))
        try:
            logger.debug("decoder says hello")
        finally:
            logger.remove()

        assert "decoder says hello" in log_file.read_text()

    def test_level_filters(self, tmp_path: Path) -> None:
        log_file = tmp_path / "uci.log"
        setup_logging(LoggingConfig(level="WARNING", log_file=str(log_file)))
        try:
            logger.info("not shown")
            logger.warning("shown")
        finally:
            logger.remove()

        content = log_file.read_text()
        assert "shown" in content
        assert "not shown" not in content

    def test_library_is_silent_until_enabled(self) -> None:
        """Test decoder records are dropped while the package is disabled."""
        records: list[str] = []
        logger.disable("uciproto")
        sink_id = logger.add(records.append, level="TRACE")
        try:
            parse_line("foo")
            assert records == []

            logger.enable("uciproto")
            parse_line("foo")
        finally:
            logger.remove(sink_id)

        assert any("Ignoring unknown UCI line" in record for record in records)

    def test_setup_logging_enables_package(self, tmp_path: Path) -> None:
        """Test setup_logging turns decoder records back on."""
        log_file = tmp_path / "uci.log"
        logger.disable("uciproto")
        setup_logging(LoggingConfig(level="DEBUG", log_file=str(log_file)))
        try:
            parse_line("go depth x")
        finally:
            logger.remove()

        assert "Dropping go depth" in log_file.read_text()


class TestSquares:
    """Tests for square helpers."""

    def test_split_square(self) -> None:
        assert split_square("e4") == ("e", 4)
        assert split_square("H8") == ("h", 8)

    def test_split_square_invalid(self) -> None:
        with pytest.raises(ValueError):
            split_square("j1")
