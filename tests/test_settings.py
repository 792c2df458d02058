from pathlib import Path

import pytest
from pydantic import ValidationError

from safename.config.settings import Settings, get_settings, reset_settings


def test_settings_defaults():
    settings = Settings()
    assert settings.debug is False
    assert settings.max_filename_length == 255
    assert settings.disambiguation_limit == 32
    assert settings.placeholder == "untitled"
    assert settings.mime_table is None
    assert settings.use_system_mime_types is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SAFENAME_MAX_FILENAME_LENGTH", "100")
    monkeypatch.setenv("SAFENAME_DISAMBIGUATION_LIMIT", "99")
    monkeypatch.setenv("SAFENAME_MIME_TABLE", "/etc/safename/mime.yaml")
    monkeypatch.setenv("SAFENAME_DEBUG", "true")

    settings = Settings()
    assert settings.max_filename_length == 100
    assert settings.disambiguation_limit == 99
    assert settings.mime_table == Path("/etc/safename/mime.yaml")
    assert settings.debug is True


def test_settings_from_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SAFENAME_PLACEHOLDER=noname\n", encoding="utf-8")
    assert Settings().placeholder == "noname"


@pytest.mark.parametrize("length", ["10", "256"])
def test_settings_rejects_bad_lengths(monkeypatch, length):
    monkeypatch.setenv("SAFENAME_MAX_FILENAME_LENGTH", length)
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    first = get_settings()
    assert get_settings() is first

    reset_settings()
    assert get_settings() is not first
