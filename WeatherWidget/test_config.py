"""Tests for environment configuration."""
import os
import pytest
from unittest.mock import patch
import config
from config import load_config, ConfigError, CURRENT, FORECAST, WidgetConfig

ENV_VARS = [
    "WEATHER_LAT", "WEATHER_LON", "WEATHER_PLACE_NAME", "WEATHER_USE_CURRENT_LOCATION",
    "WEATHER_LANG", "WEATHER_UNITS", "WEATHER_DAYS", "WEATHER_CACHE_TTL",
    "WEATHER_CACHE_DIR", "WEATHER_CREDENTIALS_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch.object(config, "load_dotenv"):
        yield monkeypatch


def test_current_defaults(clean_env):
    clean_env.setenv("WEATHER_LAT", "50.0647")
    clean_env.setenv("WEATHER_LON", "19.945")

    cfg = load_config(CURRENT)

    assert cfg.latitude == 50.0647
    assert cfg.longitude == 19.945
    assert cfg.language == "en"
    assert cfg.units_system == "METRIC"
    assert cfg.cache_ttl_minutes == 5
    assert cfg.timeout == 12
    assert cfg.cache_path.endswith("google_weather_cache.json")
    assert cfg.defaults.refresh_minutes == 10


def test_forecast_defaults(clean_env):
    clean_env.setenv("WEATHER_LAT", "1")
    clean_env.setenv("WEATHER_LON", "2")

    cfg = load_config(FORECAST)

    assert cfg.cache_ttl_minutes == 20
    assert cfg.days == 6
    assert cfg.cache_path.endswith("google_weather_forecast_cache.json")
    assert cfg.defaults.refresh_minutes == 30
    assert cfg.defaults.error_title == "Forecast error"


def test_overrides_from_env(clean_env, tmp_path):
    clean_env.setenv("WEATHER_LAT", "1")
    clean_env.setenv("WEATHER_LON", "2")
    clean_env.setenv("WEATHER_LANG", "pl")
    clean_env.setenv("WEATHER_UNITS", "imperial")
    clean_env.setenv("WEATHER_DAYS", "3")
    clean_env.setenv("WEATHER_CACHE_TTL", "7.5")
    clean_env.setenv("WEATHER_CACHE_DIR", str(tmp_path))
    clean_env.setenv("WEATHER_PLACE_NAME", "Home")

    cfg = load_config(FORECAST)

    assert cfg.language == "pl"
    assert cfg.units_system == "IMPERIAL"
    assert cfg.days == 3
    assert cfg.cache_ttl_minutes == 7.5
    assert cfg.place_name == "Home"
    assert cfg.cache_path == os.path.join(str(tmp_path), "google_weather_forecast_cache.json")
    assert cfg.credentials_path == os.path.join(str(tmp_path), ".credentials")


def test_missing_coordinates():
    with pytest.raises(ConfigError, match="WEATHER_LAT"):
        load_config(CURRENT)


def test_current_location_without_coordinates(clean_env):
    clean_env.setenv("WEATHER_USE_CURRENT_LOCATION", "true")

    cfg = load_config(CURRENT)

    assert cfg.use_current_location is True
    assert cfg.latitude is None


@pytest.mark.parametrize("name, value", [
    ("WEATHER_LAT", "north"),
    ("WEATHER_UNITS", "KELVIN"),
    ("WEATHER_DAYS", "zero"),
    ("WEATHER_DAYS", "0"),
    ("WEATHER_CACHE_TTL", "soon"),
])
def test_invalid_values(clean_env, name, value):
    clean_env.setenv("WEATHER_LAT", "1")
    clean_env.setenv("WEATHER_LON", "2")
    clean_env.setenv(name, value)

    with pytest.raises(ConfigError):
        load_config(CURRENT)


def test_unknown_variant():
    with pytest.raises(ConfigError):
        load_config("hourly")


def test_explicit_credentials_file():
    cfg = WidgetConfig(variant=CURRENT, latitude=1, longitude=2,
                       cache_dir="/tmp/x", credentials_file="/etc/key.env")
    assert cfg.credentials_path == "/etc/key.env"
