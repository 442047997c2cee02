"""Widget configuration loaded from the environment (.env supported)."""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_CACHE_DIR = os.path.join(os.path.expanduser("~"), "Documents", "weather-widget")

CURRENT = "current"
FORECAST = "forecast"


@dataclass(frozen=True)
class VariantDefaults:
    cache_file: str
    cache_ttl_minutes: float
    refresh_minutes: int
    error_refresh_minutes: int
    error_title: str


VARIANTS = {
    CURRENT: VariantDefaults(
        cache_file="google_weather_cache.json",
        cache_ttl_minutes=5,
        refresh_minutes=10,
        error_refresh_minutes=15,
        error_title="Weather error",
    ),
    FORECAST: VariantDefaults(
        cache_file="google_weather_forecast_cache.json",
        cache_ttl_minutes=20,
        refresh_minutes=30,
        error_refresh_minutes=30,
        error_title="Forecast error",
    ),
}


class ConfigError(Exception):
    """Invalid or incomplete configuration."""
    pass


@dataclass
class WidgetConfig:
    """Everything a single widget invocation needs to know."""
    variant: str
    latitude: Optional[float]
    longitude: Optional[float]
    place_name: Optional[str] = None
    use_current_location: bool = False
    language: str = "en"
    units_system: str = "METRIC"
    days: int = 6
    cache_ttl_minutes: float = 5
    cache_dir: str = DEFAULT_CACHE_DIR
    credentials_file: Optional[str] = None
    timeout: float = 12

    @property
    def defaults(self) -> VariantDefaults:
        return VARIANTS[self.variant]

    @property
    def cache_path(self) -> str:
        return os.path.join(self.cache_dir, self.defaults.cache_file)

    @property
    def credentials_path(self) -> str:
        return self.credentials_file or os.path.join(self.cache_dir, ".credentials")


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: {value!r}") from exc


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid {name}: {value!r}") from exc


def load_config(variant: str = CURRENT) -> WidgetConfig:
    """
    Build a WidgetConfig from WEATHER_* environment variables.

    Args:
        variant: "current" or "forecast"

    Returns:
        WidgetConfig with per-variant defaults applied

    Raises:
        ConfigError: On unknown variant, missing coordinates or bad values
    """
    if variant not in VARIANTS:
        raise ConfigError(f"Unknown variant: {variant!r}")
    load_dotenv()

    use_current_location = _parse_bool(os.getenv("WEATHER_USE_CURRENT_LOCATION"))
    lat = os.getenv("WEATHER_LAT")
    lon = os.getenv("WEATHER_LON")
    if lat and lon:
        lat_val: Optional[float] = _parse_float("WEATHER_LAT", lat)
        lon_val: Optional[float] = _parse_float("WEATHER_LON", lon)
    elif use_current_location:
        lat_val = lon_val = None
    else:
        raise ConfigError("Missing WEATHER_LAT/WEATHER_LON in environment")

    units = os.getenv("WEATHER_UNITS", "METRIC").upper()
    if units not in ("METRIC", "IMPERIAL"):
        raise ConfigError(f"Invalid WEATHER_UNITS: {units!r}")

    ttl = os.getenv("WEATHER_CACHE_TTL")
    days = _parse_int("WEATHER_DAYS", os.getenv("WEATHER_DAYS", "6"))
    if days < 1:
        raise ConfigError(f"WEATHER_DAYS must be positive, got {days}")

    config = WidgetConfig(
        variant=variant,
        latitude=lat_val,
        longitude=lon_val,
        place_name=os.getenv("WEATHER_PLACE_NAME") or None,
        use_current_location=use_current_location,
        language=os.getenv("WEATHER_LANG", "en"),
        units_system=units,
        days=days,
        cache_ttl_minutes=(
            _parse_float("WEATHER_CACHE_TTL", ttl) if ttl else VARIANTS[variant].cache_ttl_minutes
        ),
        cache_dir=os.getenv("WEATHER_CACHE_DIR", DEFAULT_CACHE_DIR),
        credentials_file=os.getenv("WEATHER_CREDENTIALS_FILE") or None,
    )
    logging.info(
        "Configuration loaded: variant=%s lat=%s lon=%s units=%s lang=%s",
        variant, lat_val, lon_val, units, config.language,
    )
    return config
