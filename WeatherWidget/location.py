"""Location providers - fixed coordinates, or a device provider injected by the host."""
from abc import ABC, abstractmethod
from typing import Optional
from config import ConfigError, WidgetConfig
from weather_data import Location


class LocationProvider(ABC):
    """Supplies the coordinates to fetch weather for."""

    @abstractmethod
    def get_location(self) -> Location:
        pass


class FixedLocationProvider(LocationProvider):
    """Statically configured coordinates."""

    def __init__(self, latitude: float, longitude: float, name: Optional[str] = None):
        self._location = Location(latitude=latitude, longitude=longitude, name=name)

    def get_location(self) -> Location:
        return self._location


def build_location_provider(
    config: WidgetConfig,
    current_provider: Optional[LocationProvider] = None
) -> LocationProvider:
    """
    Pick the provider the configuration asks for.

    Raises:
        ConfigError: If current location is requested but no provider is
            available, or fixed coordinates are missing
    """
    if config.use_current_location:
        if current_provider is None:
            raise ConfigError("Current location requested but no location provider is available")
        return current_provider
    if config.latitude is None or config.longitude is None:
        raise ConfigError("Fixed coordinates are not configured")
    return FixedLocationProvider(config.latitude, config.longitude, config.place_name)


def place_label(location: Location) -> str:
    """Place name if known, else rounded coordinates."""
    if location.name:
        return location.name
    return f"Lat {location.latitude:.2f}, Lon {location.longitude:.2f}"
