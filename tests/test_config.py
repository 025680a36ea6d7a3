"""Settings, configuration loading, logging setup and the exception hierarchy."""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from wow_api_client import (
    APIConfig,
    APIError,
    ConfigLoader,
    ConfigurationError,
    Settings,
    ValidationError,
    WoWClient,
    WoWClientError,
    setup_logging,
)
from wow_api_client.core.config import get_settings

ENV_KEYS = (
    "BLIZZARD_CLIENT_ID",
    "BLIZZARD_CLIENT_SECRET",
    "BLIZZARD_REGION",
    "BLIZZARD_LOCALE",
    "BLIZZARD_TIMEOUT",
    "WOW_DEBUG",
    "WOW_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # delenv also registers removal of values a test (or load_dotenv) adds
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def credentials_env(monkeypatch):
    monkeypatch.setenv("BLIZZARD_CLIENT_ID", "env-id")
    monkeypatch.setenv("BLIZZARD_CLIENT_SECRET", "env-secret")


def test_api_config_defaults(credentials_env):
    config = APIConfig()

    assert config.client_id == "env-id"
    assert config.region == "us"
    assert config.locale == "en_US"
    assert config.api_host == "api.blizzard.com"
    assert config.oauth_host == "battle.net"


def test_region_is_lower_cased(credentials_env, monkeypatch):
    monkeypatch.setenv("BLIZZARD_REGION", "EU")
    assert APIConfig().region == "eu"


def test_unknown_region_is_rejected(credentials_env):
    with pytest.raises(PydanticValidationError):
        APIConfig(region="moon")


def test_settings_log_level(credentials_env, monkeypatch):
    monkeypatch.setenv("WOW_LOG_LEVEL", "warning")
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.get_log_level() == logging.WARNING


def test_debug_forces_debug_level(credentials_env, monkeypatch):
    monkeypatch.setenv("WOW_DEBUG", "true")
    assert Settings().get_log_level() == logging.DEBUG


def test_get_settings_before_load_raises():
    with pytest.raises(ConfigurationError):
        get_settings()


def test_load_config_without_credentials_raises():
    with pytest.raises(ConfigurationError):
        ConfigLoader.load_config()


def test_load_config_applies_overrides(credentials_env):
    settings = ConfigLoader.load_config(overrides={"region": "KR", "locale": "ko_KR"})

    assert settings.api.region == "kr"
    assert settings.api.locale == "ko_KR"
    assert get_settings() is settings
    assert ConfigLoader.validate_config()


def test_load_config_is_cached_until_reload(credentials_env):
    first = ConfigLoader.load_config()
    assert ConfigLoader.load_config(overrides={"region": "tw"}) is first

    reloaded = ConfigLoader.reload_config(overrides={"region": "tw"})
    assert reloaded is not first
    assert reloaded.api.region == "tw"


def test_load_config_reads_env_file(tmp_path):
    env_file = tmp_path / "wow.env"
    env_file.write_text("BLIZZARD_CLIENT_ID=file-id\nBLIZZARD_CLIENT_SECRET=file-secret\nBLIZZARD_REGION=eu\n")

    settings = ConfigLoader.load_config(env_file=str(env_file))

    assert settings.api.client_id == "file-id"
    assert settings.api.region == "eu"


def test_validate_config_rejects_blank_secret(credentials_env):
    ConfigLoader.load_config(overrides={"client_secret": "   "})
    assert not ConfigLoader.validate_config()


def test_client_from_settings(credentials_env):
    settings = ConfigLoader.load_config(overrides={"region": "eu", "locale": "de_DE"})

    client = WoWClient.from_settings(settings)

    assert client.base_url == "https://eu.api.blizzard.com"
    assert client.locale == "de_DE"
    assert client.oauth_service.oauth_url == "https://eu.battle.net/oauth/token"


def test_setup_logging_keeps_httpx_quiet():
    setup_logging(logging.DEBUG)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_exception_hierarchy_and_to_dict():
    error = APIError("boom", status_code=503, endpoint="/wow/item/1")

    assert isinstance(error, WoWClientError)
    assert error.to_dict() == {
        "error": "APIError",
        "message": "boom",
        "details": {"status_code": 503, "endpoint": "/wow/item/1"},
    }
    assert issubclass(ValidationError, WoWClientError)
