import pytest
from pydantic import ValidationError

from sheetcsv import config
from sheetcsv.config import Settings


def test_defaults():
    settings = Settings()
    assert settings.PROGRESS_INTERVAL == 1000
    assert settings.OUTPUT_EXTENSION == ".csv"
    assert settings.OUTPUT_ENCODING == "utf-8"
    assert settings.LOG_LEVEL == "INFO"


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("SHEETCSV_PROGRESS_INTERVAL", "250")
    monkeypatch.setenv("sheetcsv_log_level", "debug")
    settings = Settings()
    assert settings.PROGRESS_INTERVAL == 250
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "field, value",
    [
        ("PROGRESS_INTERVAL", 0),
        ("PROGRESS_INTERVAL", -5),
        ("OUTPUT_EXTENSION", "csv"),
        ("OUTPUT_EXTENSION", "."),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setattr(config, "_settings_instance", None)
    first = config.get_settings()
    assert config.get_settings() is first
