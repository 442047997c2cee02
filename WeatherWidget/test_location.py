"""Tests for location providers."""
import pytest
from config import ConfigError, CURRENT, WidgetConfig
from location import FixedLocationProvider, LocationProvider, build_location_provider, place_label
from weather_data import Location


class StubDeviceLocation(LocationProvider):
    def get_location(self):
        return Location(latitude=52.23, longitude=21.01, name="Warszawa")


def _config(**kwargs):
    values = dict(variant=CURRENT, latitude=50.0647, longitude=19.945)
    values.update(kwargs)
    return WidgetConfig(**values)


def test_fixed_provider():
    provider = build_location_provider(_config(place_name="Kraków"))

    assert isinstance(provider, FixedLocationProvider)
    assert provider.get_location() == Location(50.0647, 19.945, "Kraków")


def test_current_location_provider_used():
    provider = build_location_provider(_config(use_current_location=True), StubDeviceLocation())

    assert provider.get_location().name == "Warszawa"


def test_current_location_without_provider():
    with pytest.raises(ConfigError):
        build_location_provider(_config(use_current_location=True))


def test_fixed_without_coordinates():
    with pytest.raises(ConfigError):
        build_location_provider(_config(latitude=None, longitude=None))


def test_place_label():
    assert place_label(Location(50.0647, 19.945, "Kraków")) == "Kraków"
    assert place_label(Location(50.0647, 19.9481)) == "Lat 50.06, Lon 19.95"
