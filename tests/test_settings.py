import pytest

from pokerstats.config import load_settings


def test_load_settings_defaults():
    settings = load_settings({})

    assert settings.sheet_id is None
    assert settings.sheet_name == "data"
    assert settings.api_key is None
    assert settings.timeout == 10.0


def test_load_settings_from_env():
    settings = load_settings(
        {
            "POKERSTATS_SHEET_ID": "abc123",
            "POKERSTATS_SHEET_NAME": "2025",
            "POKERSTATS_SHEETS_API_KEY": " key ",
            "POKERSTATS_TIMEOUT": "0.2",
        }
    )

    config = settings.sheet_config()
    assert config.sheet_id == "abc123"
    assert config.sheet_name == "2025"
    assert config.api_key == "key"
    assert config.timeout == 1.0


def test_invalid_timeout_falls_back(caplog):
    with caplog.at_level("WARNING"):
        settings = load_settings({"POKERSTATS_TIMEOUT": "soon"})

    assert settings.timeout == 10.0
    assert "POKERSTATS_TIMEOUT" in caplog.text


def test_sheet_config_requires_sheet_id():
    with pytest.raises(ValueError):
        load_settings({"POKERSTATS_SHEET_ID": "  "}).sheet_config()
