import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from contacts.config import Settings
from contacts.logging_config import setup_logging


def test_default_settings_keep_catalog_in_memory(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CATALOG_PATH", raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.catalog_path is None
    assert settings.has_persistence is False


def test_catalog_path_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CATALOG_PATH", "phonebook.json")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.catalog_path == Path("phonebook.json")
    assert settings.has_persistence is True


def test_negative_indent_is_rejected():
    with pytest.raises(ValidationError):
        Settings(json_indent=-1, _env_file=None)  # type: ignore[call-arg]


def test_setup_logging_installs_rich_handler():
    setup_logging("info")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert any(isinstance(h, RichHandler) for h in root_logger.handlers)
