"""
Tests for logging setup and fail-open log output.
"""

import logging
from pathlib import Path

from proxyopts.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
)


class TestParseLevel:
    def test_known_levels(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_unknown_falls_back_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING
        assert _parse_level(None) == logging.WARNING


class TestResolveLevel:
    def test_flags_take_precedence(self, monkeypatch):
        monkeypatch.setenv("PROXYOPTS_LOG_LEVEL", "ERROR")
        assert resolve_level(debug=True) == "DEBUG"
        assert resolve_level(verbose=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("PROXYOPTS_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"

    def test_default(self):
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_console_level(self):
        pkg = setup_logging("INFO")
        assert pkg.name == "proxyopts"
        assert pkg.level == logging.INFO
        assert len(pkg.handlers) == 1

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        pkg = setup_logging("DEBUG")
        assert len(pkg.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "proxyopts.log"
        pkg = setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        assert pkg.level == logging.DEBUG
        logging.getLogger("proxyopts.core.services.ca_bundle").debug("loaded bundle")
        for handler in pkg.handlers:
            handler.flush()
        assert "loaded bundle" in log_file.read_text()
