"""Unit tests for logging configuration."""

import json
from pathlib import Path

from loguru import logger

from legislator_lookup.core.logging import setup_logging


class TestLogging:
    """Tests for Loguru logging setup."""

    def test_setup_logging_does_not_raise(self) -> None:
        """setup_logging with valid log level does not raise."""
        setup_logging("DEBUG")
        setup_logging("INFO")
        setup_logging("WARNING")

    def test_setup_logging_case_insensitive(self) -> None:
        """setup_logging accepts case-insensitive log levels."""
        setup_logging("info")
        setup_logging("debug")

    def test_log_dir_creates_file_sink(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        setup_logging("INFO", log_dir=str(log_dir))
        logger.info("file sink check")
        logger.complete()
        assert (log_dir / "legislator-lookup.log").exists()
        setup_logging("INFO")

    def test_json_output_records_go_to_json_sink(self, capsys) -> None:
        setup_logging("DEBUG")
        try:
            logger.bind(json_output=True).debug("structured event")
            logger.info("plain event")
            err = capsys.readouterr().err
        finally:
            setup_logging("INFO")

        lines = [line for line in err.splitlines() if line.strip()]
        json_lines = [json.loads(line) for line in lines if line.startswith("{")]
        assert [entry["record"]["message"] for entry in json_lines] == ["structured event"]
        assert json_lines[0]["record"]["extra"]["json_output"] is True
        text_lines = [line for line in lines if not line.startswith("{")]
        assert any(line.endswith("| plain event") for line in text_lines)
        assert not any("structured event" in line for line in text_lines)
