import logging

from mws_query.core.config import get_settings
from mws_query.core.logging import configure_logging


def test_settings_defaults(monkeypatch):
    for name in ("MWS_DEFAULT_REGION", "MWS_DEFAULT_VERSION", "MWS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.default_region == "US"
    assert s.default_version == "2009-01-01"
    assert s.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MWS_DEFAULT_REGION", "uk")
    monkeypatch.setenv("MWS_DEFAULT_VERSION", "2013-09-01")
    monkeypatch.setenv("MWS_LOG_LEVEL", "debug")
    s = get_settings()
    assert s.default_region == "UK"
    assert s.default_version == "2013-09-01"
    assert s.log_level == "DEBUG"


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    handlers = list(logger.handlers)
    assert configure_logging("WARNING") is logger
    assert logger.handlers == handlers
    assert logger.level == logging.WARNING
