"""Turn raw Google Weather payloads into display models."""
import logging
from datetime import datetime, timedelta
from typing import Any, Optional, Union
from conditions import safe_get, normalize_condition_text, pick_symbol
from formatting import (
    PLACEHOLDER,
    color_scheme_for,
    day_label,
    format_humidity,
    format_temperature,
    format_temperature_compact,
    format_wind,
    to_celsius,
)
from weather_data import DaySummary, DisplayModel, StatusDisplay


def _time_label(now: datetime) -> str:
    return now.strftime("%H:%M")


def build_current_model(
    data: Any,
    place_name: Optional[str],
    refresh_minutes: int = 10,
    now: Optional[datetime] = None
) -> DisplayModel:
    """
    Build the display model for a currentConditions:lookup payload.

    Args:
        data: Raw API payload
        place_name: Location label; a generic label is used when empty
        refresh_minutes: Suggested delay before the next refresh
        now: Render time (defaults to the local clock)

    Returns:
        DisplayModel
    """
    now = now or datetime.now()
    condition = safe_get(data, "weatherCondition")
    condition_text = normalize_condition_text(condition)
    is_day = bool(safe_get(data, "isDaytime"))
    temperature = safe_get(data, "temperature")

    model = DisplayModel(
        location_label=place_name or "Current location",
        updated_label=_time_label(now),
        temperature=format_temperature(temperature),
        condition=str(condition_text) if condition_text else PLACEHOLDER,
        feels_like=format_temperature(safe_get(data, "feelsLikeTemperature")),
        humidity=format_humidity(safe_get(data, "relativeHumidity")),
        wind=format_wind(safe_get(data, "wind")),
        icon=pick_symbol(condition, is_day),
        color_scheme=color_scheme_for(to_celsius(temperature), is_day),
        refresh_after=now + timedelta(minutes=refresh_minutes),
    )
    logging.debug(f"Current model: {model.temperature} {model.condition} icon={model.icon}")
    return model


def build_forecast_model(
    data: Any,
    place_name: Optional[str],
    days: int = 6,
    refresh_minutes: int = 30,
    now: Optional[datetime] = None
) -> Union[DisplayModel, StatusDisplay]:
    """
    Build the display model for a forecast/days:lookup payload.

    Today's maximum stands in for the current temperature. Humidity and wind
    come from today's daytime part. The background follows today's maximum
    with no night override.
    """
    now = now or datetime.now()
    forecast_days = safe_get(data, "forecastDays", [])
    if not isinstance(forecast_days, list) or not forecast_days:
        logging.warning("Forecast payload has no forecastDays")
        return StatusDisplay(
            title="No forecast data",
            message="",
            refresh_after=now + timedelta(minutes=refresh_minutes),
        )

    today = forecast_days[0]
    max_temperature = safe_get(today, "maxTemperature")
    day_part = safe_get(today, "daytimeForecast")
    night_part = safe_get(today, "nighttimeForecast")
    condition = safe_get(day_part, "weatherCondition") or safe_get(night_part, "weatherCondition")
    condition_text = normalize_condition_text(condition)

    feels_max = format_temperature(safe_get(today, "feelsLikeMaxTemperature"))
    feels_min = format_temperature(safe_get(today, "feelsLikeMinTemperature"))

    summaries = []
    for index, day in enumerate(forecast_days[:days]):
        day_condition = (
            safe_get(day, "daytimeForecast.weatherCondition")
            or safe_get(day, "nighttimeForecast.weatherCondition")
        )
        summaries.append(DaySummary(
            label=day_label(index, safe_get(day, "displayDate")),
            icon=pick_symbol(day_condition, True, typed=True),
            temperatures=(
                f"{format_temperature_compact(safe_get(day, 'maxTemperature'))} / "
                f"{format_temperature_compact(safe_get(day, 'minTemperature'))}"
            ),
        ))

    model = DisplayModel(
        location_label=place_name or "Location",
        updated_label=_time_label(now),
        temperature=format_temperature(max_temperature),
        condition=str(condition_text) if condition_text else PLACEHOLDER,
        feels_like=f"{feels_max}/{feels_min}",
        humidity=format_humidity(safe_get(day_part, "relativeHumidity")),
        wind=format_wind(safe_get(day_part, "wind")),
        icon=pick_symbol(condition, True, typed=True),
        color_scheme=color_scheme_for(to_celsius(max_temperature)),
        refresh_after=now + timedelta(minutes=refresh_minutes),
        days=summaries,
    )
    logging.debug(f"Forecast model: {model.temperature} icon={model.icon} days={len(summaries)}")
    return model


def build_error_display(
    title: str,
    error: Exception,
    refresh_minutes: int,
    now: Optional[datetime] = None
) -> StatusDisplay:
    """Minimal display for a terminal failure, with a short refresh hint."""
    now = now or datetime.now()
    return StatusDisplay(
        title=title,
        message=str(error),
        refresh_after=now + timedelta(minutes=refresh_minutes),
    )
