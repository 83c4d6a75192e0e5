import pytest

from altseason.config import COINGECKO_BASE, Settings


def test_defaults_from_empty_env():
    s = Settings.from_env({})
    assert s.port == 5000
    assert s.host == "0.0.0.0"
    assert s.frontend_url == "*"
    assert s.sendgrid_api_key is None
    assert s.alert_email_to is None
    assert s.alert_email_from is None
    assert s.coingecko_base_url == COINGECKO_BASE
    assert s.upstream_timeout_seconds is None


def test_overrides():
    s = Settings.from_env({
        "PORT": "8080",
        "FRONTEND_URL": "https://altseason.example",
        "SENDGRID_API_KEY": "SG.x",
        "ALERT_EMAIL_TO": "a@example.com",
        "ALERT_EMAIL_FROM": "b@example.com",
        "COINGECKO_BASE_URL": "https://proxy.example/api/v3/",
        "UPSTREAM_TIMEOUT_SECONDS": "7.5",
        "LOG_LEVEL": "debug",
    })
    assert s.port == 8080
    assert s.frontend_url == "https://altseason.example"
    assert s.sendgrid_api_key == "SG.x"
    assert s.alert_email_to == "a@example.com"
    assert s.alert_email_from == "b@example.com"
    assert s.coingecko_base_url == "https://proxy.example/api/v3"
    assert s.upstream_timeout_seconds == 7.5
    assert s.log_level == "DEBUG"


def test_blank_values_count_as_unset():
    s = Settings.from_env({"ALERT_EMAIL_TO": "  ", "FRONTEND_URL": "", "PORT": ""})
    assert s.alert_email_to is None
    assert s.frontend_url == "*"
    assert s.port == 5000


def test_bad_port_fails_fast():
    with pytest.raises(ValueError):
        Settings.from_env({"PORT": "abc"})


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        Settings().port = 1


def test_blank_port_falls_back_to_default():
    assert Settings.from_env({"PORT": "   "}).port == 5000
    assert Settings.from_env({"PORT": " 8080 "}).port == 8080
