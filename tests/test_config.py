import logging

import pytest
from pydantic import ValidationError

from common.config import Settings
from common.logger import JSONFormatter, configure_logging, get_logger, get_logger_from_env
from gateway.main import create_app

BASE = {"supabase_url": "https://example.supabase.co", "supabase_key": "test-key"}


@pytest.fixture
def restore_logging():
    yield
    configure_logging("INFO", False)


def test_unknown_timezone_fails_at_load():
    with pytest.raises(ValidationError, match="Asia/Tokio"):
        Settings(**BASE, timezone="Asia/Tokio")


def test_known_timezone_is_accepted():
    assert Settings(**BASE, timezone="Europe/Paris").timezone == "Europe/Paris"


def test_logging_options_read_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON_FORMAT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\nLOG_JSON_FORMAT=true\n", encoding="utf-8")

    settings = Settings(**BASE, _env_file=str(env_file))
    assert settings.log_level == "DEBUG"
    assert settings.log_json_format is True


def test_create_app_applies_logging_settings(settings, log_store, restore_logging):
    existing = get_logger("log_crud")
    settings.log_level = "DEBUG"
    settings.log_json_format = True

    create_app(settings, log_store=log_store)

    assert existing.level == logging.DEBUG
    assert all(isinstance(h.formatter, JSONFormatter) for h in existing.handlers)
    assert get_logger("created_after_configure").level == logging.DEBUG


def test_get_logger_from_env(monkeypatch, restore_logging):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_JSON_FORMAT", "true")

    logger = get_logger_from_env("env_driven_logger")
    assert logger.level == logging.WARNING
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)
