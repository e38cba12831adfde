"""
Tests for logging_setup.py and config.py.
"""

import logging

from job_portal.config import Settings
from job_portal.logging_setup import configure_logging


class TestConfigureLogging:
    """Test the package logger setup."""

    def test_sets_level(self):
        logger = configure_logging("debug")
        assert logger.level == logging.DEBUG
        configure_logging("INFO")

    def test_idempotent(self):
        configure_logging()
        configure_logging()
        logger = logging.getLogger("job_portal")
        named = [h for h in logger.handlers if h.get_name() == "job_portal.console"]
        assert len(named) == 1

    def test_unknown_level_falls_back_to_info(self):
        assert configure_logging("chatty").level == logging.INFO


class TestSettings:
    """Test configuration defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for key in ["DB_URL", "DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE"]:
            monkeypatch.delenv(key, raising=False)
        s = Settings(_env_file=None)
        assert s.DEFAULT_PAGE_SIZE == 12
        assert s.MAX_PAGE_SIZE is None
        assert s.DB_URL.startswith("sqlite")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAX_PAGE_SIZE", "100")
        monkeypatch.setenv("DEFAULT_PAGE_SIZE", "20")
        s = Settings(_env_file=None)
        assert s.MAX_PAGE_SIZE == 100
        assert s.DEFAULT_PAGE_SIZE == 20
