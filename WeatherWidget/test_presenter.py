"""Tests for display model construction."""
from datetime import datetime, timedelta
import pytest
from presenter import build_current_model, build_forecast_model, build_error_display
from weather_data import DisplayModel, StatusDisplay
from weather_provider import NetworkError

NOW = datetime(2025, 1, 6, 14, 5)


@pytest.fixture
def current_payload():
    """Sample currentConditions:lookup payload."""
    return {
        "isDaytime": True,
        "weatherCondition": {
            "description": {"text": "Light rain", "languageCode": "en"},
            "type": "LIGHT_RAIN"
        },
        "temperature": {"degrees": 13.7, "unit": "CELSIUS"},
        "feelsLikeTemperature": {"degrees": 12.2, "unit": "CELSIUS"},
        "relativeHumidity": 81,
        "wind": {
            "direction": {"degrees": 335},
            "speed": {"value": 8.4, "unit": "KILOMETERS_PER_HOUR"}
        }
    }


def _day(year, month, day, max_c, min_c, cond_type, humidity=60):
    return {
        "displayDate": {"year": year, "month": month, "day": day},
        "maxTemperature": {"degrees": max_c, "unit": "CELSIUS"},
        "minTemperature": {"degrees": min_c, "unit": "CELSIUS"},
        "feelsLikeMaxTemperature": {"degrees": max_c - 1, "unit": "CELSIUS"},
        "feelsLikeMinTemperature": {"degrees": min_c - 2, "unit": "CELSIUS"},
        "daytimeForecast": {
            "weatherCondition": {"description": {"text": cond_type.title()}, "type": cond_type},
            "relativeHumidity": humidity,
            "wind": {"speed": {"value": 12, "unit": "KILOMETERS_PER_HOUR"}, "direction": {"degrees": 90}},
        },
        "nighttimeForecast": {
            "weatherCondition": {"type": "CLEAR"},
            "relativeHumidity": 90,
        },
    }


@pytest.fixture
def forecast_payload():
    """Sample forecast/days:lookup payload with seven days."""
    return {
        "forecastDays": [
            _day(2025, 1, 6, 25.4, 14.6, "THUNDERSTORM"),
            _day(2025, 1, 7, 19, 9, "RAIN"),
            _day(2025, 1, 8, 12, 3, "SNOW"),
            _day(2025, 1, 9, 15, 7, "PARTLY_CLOUDY"),
            _day(2025, 1, 10, 17, 8, "CLEAR"),
            _day(2025, 1, 11, 16, 6, "FOG"),
            _day(2025, 1, 12, 18, 9, "CLEAR"),
        ]
    }


class TestCurrentModel:

    def test_fields(self, current_payload):
        model = build_current_model(current_payload, "Kraków", refresh_minutes=10, now=NOW)

        assert isinstance(model, DisplayModel)
        assert model.location_label == "Kraków"
        assert model.updated_label == "14:05"
        assert model.temperature == "14°C"
        assert model.condition == "Light rain"
        assert model.feels_like == "12°C"
        assert model.humidity == "81%"
        assert model.wind == "8 km/h NNW"
        assert model.icon == "rain"
        assert model.color_scheme.name == "mild"
        assert model.refresh_after == NOW + timedelta(minutes=10)
        assert model.days == []

    def test_night_scheme(self, current_payload):
        current_payload["isDaytime"] = False
        current_payload["weatherCondition"] = "Clear"

        model = build_current_model(current_payload, "Kraków", now=NOW)

        assert model.color_scheme.name == "night"
        assert model.icon == "clear-night"

    def test_empty_payload(self):
        model = build_current_model({}, None, now=NOW)

        assert model.location_label == "Current location"
        assert model.temperature == "—"
        assert model.condition == "—"
        assert model.humidity == "—"
        assert model.wind == "—"
        assert model.icon == "clear-night"
        assert model.color_scheme.name == "night"

    def test_fahrenheit_drives_scheme(self):
        data = {"isDaytime": True, "temperature": {"degrees": 80, "unit": "FAHRENHEIT"}}

        model = build_current_model(data, "X", now=NOW)

        assert model.temperature == "80°F"
        assert model.color_scheme.name == "hot"


class TestForecastModel:

    def test_today_overview(self, forecast_payload):
        model = build_forecast_model(forecast_payload, "Kraków", days=6, refresh_minutes=30, now=NOW)

        assert isinstance(model, DisplayModel)
        assert model.location_label == "Kraków"
        assert model.temperature == "25°C"
        assert model.condition == "Thunderstorm"
        assert model.feels_like == "24°C/13°C"
        assert model.humidity == "60%"
        assert model.wind == "12 km/h E"
        assert model.icon == "storm"
        assert model.color_scheme.name == "hot"
        assert model.refresh_after == NOW + timedelta(minutes=30)

    def test_day_summaries(self, forecast_payload):
        model = build_forecast_model(forecast_payload, "Kraków", days=6, now=NOW)

        assert [d.label for d in model.days] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert [d.icon for d in model.days] == [
            "storm", "rain", "snow", "cloud-day", "clear-day", "fog",
        ]
        assert model.days[0].temperatures == "25° / 15°"

    def test_fewer_days_than_requested(self, forecast_payload):
        forecast_payload["forecastDays"] = forecast_payload["forecastDays"][:2]

        model = build_forecast_model(forecast_payload, None, days=6, now=NOW)

        assert len(model.days) == 2
        assert model.location_label == "Location"

    def test_nighttime_condition_fallback(self, forecast_payload):
        today = forecast_payload["forecastDays"][0]
        del today["daytimeForecast"]["weatherCondition"]

        model = build_forecast_model(forecast_payload, "X", now=NOW)

        assert model.icon == "clear-day"
        assert model.days[0].icon == "clear-day"

    def test_missing_display_date(self, forecast_payload):
        for day in forecast_payload["forecastDays"]:
            del day["displayDate"]

        model = build_forecast_model(forecast_payload, "X", days=3, now=NOW)

        assert [d.label for d in model.days] == ["Today", "+1", "+2"]

    def test_no_night_override(self, forecast_payload):
        forecast_payload["forecastDays"][0]["maxTemperature"] = {"degrees": 2, "unit": "CELSIUS"}

        model = build_forecast_model(forecast_payload, "X", now=NOW)

        assert model.color_scheme.name == "cold"

    @pytest.mark.parametrize("payload", [{}, {"forecastDays": []}, {"forecastDays": None}, None])
    def test_no_forecast_data(self, payload):
        model = build_forecast_model(payload, "X", now=NOW)

        assert isinstance(model, StatusDisplay)
        assert model.title == "No forecast data"


def test_error_display():
    display = build_error_display("Weather error", NetworkError("HTTP 403"), 15, now=NOW)

    assert display.title == "Weather error"
    assert display.message == "HTTP 403"
    assert display.refresh_after == NOW + timedelta(minutes=15)
