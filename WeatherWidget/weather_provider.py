"""Weather provider abstraction - lets tests swap the HTTP fetcher for a fake."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def fetch(self, api_key: str, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Fetch a raw weather payload for the given coordinates.

        Args:
            api_key: API credential
            latitude: Latitude in degrees
            longitude: Longitude in degrees

        Returns:
            dict: Parsed JSON body, unmodified

        Raises:
            NetworkError: If the request fails or the API reports an error
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class NetworkError(WeatherProviderError):
    """Transport failure, timeout, or an HTTP status >= 400."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
