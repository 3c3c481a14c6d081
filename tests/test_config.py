from pathlib import Path

import pytest

from pingbot.config import Settings, load_settings
from pingbot.errors import ConfigError

_ENV_VARS = (
    "TOKEN",
    "WEBHOOK_URL",
    "TELEGRAM_API_BASE",
    "HOUR",
    "MINUTE",
    "RESET_HOUR",
    "NOPINGDAYS",
    "NAMES",
    "TIMEZONE",
    "TICK_INTERVAL_SECONDS",
    "REQUEST_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep any developer .env out of the way.
    monkeypatch.chdir(tmp_path)


def test_defaults(monkeypatch):
    monkeypatch.setenv("TOKEN", "123:abc")
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com")

    settings = load_settings()
    schedule = settings.schedule()

    assert (schedule.target_hour, schedule.target_minute, schedule.reset_hour) == (12, 45, 1)
    assert schedule.excluded_days == frozenset({"Saturday", "Sunday"})
    assert schedule.timezone.key == "Asia/Kolkata"
    assert settings.names_file == Path("names.yml")
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TOKEN", "123:abc")
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com")
    monkeypatch.setenv("HOUR", "13")
    monkeypatch.setenv("MINUTE", "5")
    monkeypatch.setenv("NOPINGDAYS", "Friday, Saturday,,Sunday")
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("NAMES", "/etc/pingbot/names.yml")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    schedule = settings.schedule()

    assert (schedule.target_hour, schedule.target_minute) == (13, 5)
    assert schedule.excluded_days == frozenset({"Friday", "Saturday", "Sunday"})
    assert schedule.timezone.key == "Europe/Berlin"
    assert settings.names_file == Path("/etc/pingbot/names.yml")
    assert settings.log_level == "DEBUG"


def test_empty_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("TOKEN", "123:abc")
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com")
    monkeypatch.setenv("HOUR", "")
    monkeypatch.setenv("NOPINGDAYS", "")

    settings = load_settings()

    assert settings.hour == 12
    assert settings.excluded_days() == frozenset({"Saturday", "Sunday"})


def test_missing_token_is_config_error(monkeypatch):
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com")

    with pytest.raises(ConfigError):
        load_settings()


def test_unknown_timezone_is_config_error(monkeypatch):
    monkeypatch.setenv("TOKEN", "123:abc")
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com")
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(ConfigError, match="timezone"):
        load_settings()


def test_out_of_range_hour_is_config_error(monkeypatch):
    monkeypatch.setenv("TOKEN", "123:abc")
    monkeypatch.setenv("WEBHOOK_URL", "https://hooks.example.com")
    monkeypatch.setenv("HOUR", "24")

    with pytest.raises(ConfigError):
        load_settings()


def test_settings_accept_keyword_aliases():
    settings = Settings(_env_file=None, TOKEN="t", WEBHOOK_URL="https://x.example", MINUTE=0)
    assert settings.minute == 0
