import pytest

from brandproxy.config import ProxySettings, get_settings, load_settings


def test_get_settings_before_startup_raises(clean_settings):
    with pytest.raises(RuntimeError):
        get_settings()


def test_load_settings_reads_environment(clean_settings, monkeypatch):
    monkeypatch.setenv("BRANDFETCH_API_KEY", "env-key")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.brandfetch_api_key == "env-key"
    assert settings.log_level == "DEBUG"
    assert get_settings() is settings


def test_load_settings_resolves_once(clean_settings, monkeypatch):
    monkeypatch.setenv("BRANDFETCH_API_KEY", "first")
    first = load_settings()
    monkeypatch.setenv("BRANDFETCH_API_KEY", "second")

    assert load_settings() is first
    assert get_settings().brandfetch_api_key == "first"


def test_blank_key_counts_as_missing(clean_settings, monkeypatch):
    monkeypatch.setenv("BRANDFETCH_API_KEY", "   ")
    assert load_settings().brandfetch_api_key is None


def test_settings_model_defaults():
    settings = ProxySettings()
    assert settings.brandfetch_api_key is None
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("raw", ["verbose", "", "  "])
def test_unknown_log_level_falls_back_to_info(raw):
    assert ProxySettings(log_level=raw).log_level == "INFO"


def test_unknown_log_level_from_environment(clean_settings, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert load_settings().log_level == "INFO"
