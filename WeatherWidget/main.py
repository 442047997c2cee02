"""Google Weather widget: fetch, cache, present, and render a preview PNG."""
import argparse
import locale
import logging
import os
import sys
from dataclasses import replace
from typing import Callable, Optional, Union

from config import CURRENT, FORECAST, VARIANTS, ConfigError, WidgetConfig, load_config
from credentials import CredentialError, DotenvCredentialStore, get_api_key, prompt_api_key
from google_weather_provider import ForecastDaysProvider, GoogleWeatherProvider
from layout import render_display
from location import LocationProvider, build_location_provider, place_label
from presenter import build_current_model, build_error_display, build_forecast_model
from weather_cache import CacheGate
from weather_data import DisplayModel, StatusDisplay
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_service import WeatherService
from widget_canvas import PILCanvas

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LOG_FILE = os.path.join(BASE_DIR, "weather-widget.log")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Google Weather widget")
    parser.add_argument("--variant", choices=[CURRENT, FORECAST], default=CURRENT)
    parser.add_argument("--output", default="weather-widget.png", help="PNG preview path")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE)
    parser.add_argument("--units", choices=["METRIC", "IMPERIAL"], default=None)
    parser.add_argument("--lang", default=None)
    parser.add_argument("--days", type=int, default=None, help="Forecast days (forecast variant)")
    parser.add_argument("--cache-ttl", type=float, default=None, help="Cache lifetime in minutes")
    parser.add_argument("--timeout", type=float, default=12, help="HTTP timeout in seconds")
    parser.add_argument("--width", type=int, default=329)
    parser.add_argument("--height", type=int, default=155)
    parser.add_argument("--scale", type=int, default=2)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: str, verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file)
        ]
    )


def use_system_locale() -> bool:
    """Apply the user's LC_TIME so weekday names come out localized."""
    try:
        current = locale.setlocale(locale.LC_TIME, "")
    except locale.Error as err:
        logging.warning("Could not apply system locale, weekday names stay in C locale: %s", err)
        return False
    logging.debug("Weekday names use locale %s", current)
    return True


def apply_overrides(config: WidgetConfig, args: argparse.Namespace) -> WidgetConfig:
    overrides = {"timeout": args.timeout}
    if args.units:
        overrides["units_system"] = args.units
    if args.lang:
        overrides["language"] = args.lang
    if args.days is not None:
        if args.days < 1:
            raise ConfigError(f"--days must be positive, got {args.days}")
        overrides["days"] = args.days
    if args.cache_ttl is not None:
        overrides["cache_ttl_minutes"] = args.cache_ttl
    return replace(config, **overrides)


def build_provider(config: WidgetConfig) -> WeatherProviderBase:
    if config.variant == FORECAST:
        return ForecastDaysProvider(
            language=config.language,
            units_system=config.units_system,
            timeout=config.timeout,
            days=config.days,
        )
    return GoogleWeatherProvider(
        language=config.language,
        units_system=config.units_system,
        timeout=config.timeout,
    )


def build_weather_service(config: WidgetConfig, provider: Optional[WeatherProviderBase] = None) -> WeatherService:
    cache = CacheGate(config.cache_path, config.cache_ttl_minutes)
    service = WeatherService(provider or build_provider(config), cache)
    logging.info("Weather service ready (cache=%s ttl=%smin)", config.cache_path, config.cache_ttl_minutes)
    return service


def run_widget(
    config: WidgetConfig,
    provider: Optional[WeatherProviderBase] = None,
    current_location: Optional[LocationProvider] = None,
    prompt: Callable[[], str] = prompt_api_key
) -> Union[DisplayModel, StatusDisplay]:
    """
    One widget invocation: credential, location, data, display model.

    Terminal failures come back as a StatusDisplay instead of raising.
    """
    defaults = config.defaults
    try:
        api_key = get_api_key(DotenvCredentialStore(config.credentials_path), prompt)
        location = build_location_provider(config, current_location).get_location()
        data = build_weather_service(config, provider).get_latest(api_key, location)

        label = place_label(location)
        if config.variant == FORECAST:
            return build_forecast_model(data, label, config.days, defaults.refresh_minutes)
        return build_current_model(data, label, defaults.refresh_minutes)
    except (CredentialError, ConfigError, WeatherProviderError) as err:
        logging.error("%s: %s", defaults.error_title, err)
        return build_error_display(defaults.error_title, err, defaults.error_refresh_minutes)
    except Exception as exc:
        logging.exception("Unexpected error: %s", exc)
        return build_error_display(defaults.error_title, exc, defaults.error_refresh_minutes)


def describe(model: Union[DisplayModel, StatusDisplay]) -> str:
    """Plain-text rendition of a model for the terminal."""
    refresh = model.refresh_after.strftime("%H:%M")
    if isinstance(model, StatusDisplay):
        lines = [model.title]
        if model.message:
            lines.append(model.message)
        lines.append(f"Retry after {refresh}")
        return "\n".join(lines)

    lines = [
        f"{model.location_label}  {model.updated_label}",
        f"[{model.icon}] {model.temperature}  {model.condition}",
        f"Feels {model.feels_like}  Hum {model.humidity}  Wind {model.wind}",
    ]
    if model.days:
        lines.append("  ".join(f"{day.label} {day.temperatures}" for day in model.days))
    lines.append(f"Refresh after {refresh}")
    return "\n".join(lines)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    use_system_locale()

    try:
        config = apply_overrides(load_config(args.variant), args)
        model = run_widget(config)
    except ConfigError as err:
        logging.error("Configuration error: %s", err)
        defaults = VARIANTS[args.variant]
        model = build_error_display(defaults.error_title, err, defaults.error_refresh_minutes)

    canvas = PILCanvas(args.width, args.height, scale=args.scale)
    render_display(canvas, model)
    canvas.save(args.output)
    logging.info("Preview written to %s", args.output)

    print(describe(model))
    return 1 if isinstance(model, StatusDisplay) else 0


if __name__ == "__main__":
    sys.exit(main())
