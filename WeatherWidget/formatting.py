"""Unit formatting and color selection for display values."""
import math
from datetime import date
from typing import Any, Optional
from conditions import safe_get
from weather_data import ColorScheme

PLACEHOLDER = "—"  # em-dash

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

WIND_UNIT_SYMBOLS = {
    "MILE_PER_HOUR": "mph",
    "METER_PER_SECOND": "m/s",
}

COLOR_SCHEMES = {
    "cold": ColorScheme("cold", ("#1e3c72", "#2a5298")),
    "mild": ColorScheme("mild", ("#396afc", "#2948ff")),
    "hot": ColorScheme("hot", ("#ff512f", "#dd2476")),
    "night": ColorScheme("night", ("#0f2027", "#203a43")),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def format_temperature(temperature: Any) -> str:
    """
    Format a {degrees, unit} measurement, e.g. "14°C" or "57°F".

    Missing degrees render as an em-dash.
    """
    degrees = _number(safe_get(temperature, "degrees"))
    if degrees is None:
        return PLACEHOLDER
    symbol = "°F" if safe_get(temperature, "unit") == "FAHRENHEIT" else "°C"
    return f"{round_half_up(degrees)}{symbol}"


def format_temperature_compact(temperature: Any) -> str:
    """Like format_temperature but without the unit letter: "14°"."""
    degrees = _number(safe_get(temperature, "degrees"))
    if degrees is None:
        return PLACEHOLDER
    return f"{round_half_up(degrees)}°"


def to_celsius(temperature: Any) -> Optional[int]:
    """Whole degrees Celsius for color selection, or None if degrees are missing."""
    degrees = _number(safe_get(temperature, "degrees"))
    if degrees is None:
        return None
    if safe_get(temperature, "unit") == "FAHRENHEIT":
        return round_half_up((degrees - 32) * 5 / 9)
    return round_half_up(degrees)


def degrees_to_compass(degrees: Any) -> str:
    """16-point compass label for a bearing, or "" if the bearing is unusable."""
    bearing = _number(degrees)
    if bearing is None:
        return ""
    return COMPASS_POINTS[round_half_up((bearing % 360) / 22.5) % 16]


def format_wind(wind: Any) -> str:
    """
    Format a wind record, e.g. "8 km/h NNW".

    Args:
        wind: {"speed": {"value", "unit"}, "direction": {"degrees"}}

    Returns:
        Speed with unit and optional direction, or an em-dash without speed
    """
    speed = _number(safe_get(wind, "speed.value"))
    if speed is None:
        return PLACEHOLDER
    symbol = WIND_UNIT_SYMBOLS.get(safe_get(wind, "speed.unit"), "km/h")
    direction = degrees_to_compass(safe_get(wind, "direction.degrees"))
    text = f"{round_half_up(speed)} {symbol}"
    if direction:
        text += f" {direction}"
    return text


def format_humidity(humidity: Any) -> str:
    value = _number(humidity)
    if value is None:
        return PLACEHOLDER
    return f"{round_half_up(value)}%"


def color_scheme_for(temp_c: Optional[float], is_daytime: bool = True) -> ColorScheme:
    """
    Pick the background gradient.

    Below 10°C is cold, 10-23 mild, 24 and above hot; unknown temperature is
    cold. Night overrides all of them.
    """
    if not is_daytime:
        return COLOR_SCHEMES["night"]
    if temp_c is None:
        return COLOR_SCHEMES["cold"]
    if temp_c >= 24:
        return COLOR_SCHEMES["hot"]
    if temp_c >= 10:
        return COLOR_SCHEMES["mild"]
    return COLOR_SCHEMES["cold"]


def day_label(index: int, display_date: Any) -> str:
    """
    Short weekday name for a forecast day.

    Falls back to "Today" for the first day and "+N" for later days when the
    {year, month, day} display date is missing or invalid.
    """
    year = safe_get(display_date, "year")
    month = safe_get(display_date, "month")
    day = safe_get(display_date, "day")
    if year and month and day:
        try:
            return date(int(year), int(month), int(day)).strftime("%a")
        except (TypeError, ValueError, OverflowError):
            pass
    return "Today" if index == 0 else f"+{index}"
