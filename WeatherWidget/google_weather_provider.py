"""Google Weather API provider implementation."""
import logging
import requests
from typing import Any, Dict
from weather_provider import WeatherProviderBase, NetworkError


class GoogleWeatherProvider(WeatherProviderBase):
    """
    Weather provider using the Google Weather current conditions endpoint.

    Docs: https://developers.google.com/maps/documentation/weather
    The response body is returned as-is; all interpretation happens in the
    presenter.
    """

    BASE_URL = "https://weather.googleapis.com/v1/currentConditions:lookup"

    def __init__(
        self,
        language: str = "en",
        units_system: str = "METRIC",
        timeout: float = 12
    ):
        """
        Initialize Google Weather provider.

        Args:
            language: Language code for condition descriptions (e.g., "en", "pl")
            units_system: "METRIC" or "IMPERIAL"
            timeout: HTTP request timeout in seconds
        """
        self.language = language
        self.units_system = units_system
        self.timeout = timeout

    def build_params(self, api_key: str, latitude: float, longitude: float) -> Dict[str, Any]:
        return {
            "key": api_key,
            "location.latitude": latitude,
            "location.longitude": longitude,
            "languageCode": self.language,
            "unitsSystem": self.units_system,
        }

    def fetch(self, api_key: str, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Fetch a payload from the Google Weather API.

        Returns:
            dict: Parsed JSON body

        Raises:
            NetworkError: On transport failure, timeout, HTTP status >= 400
                or a body that is not JSON
        """
        params = self.build_params(api_key, latitude, longitude)
        headers = {"Accept": "application/json"}

        try:
            logging.info(f"Making Google Weather API request: {self.BASE_URL}")
            logging.debug(
                f"Request parameters: lat={latitude}, lon={longitude}, "
                f"lang={self.language}, units={self.units_system}"
            )

            response = requests.get(
                self.BASE_URL, params=params, headers=headers, timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logging.error(f"Request timed out after {self.timeout}s: {e}")
            raise NetworkError(f"Request timed out after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise NetworkError(f"Network error: {str(e)}")

        logging.info(f"API response status: {response.status_code}")

        if response.status_code >= 400:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response)

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Failed to parse API response: {e}")
            raise NetworkError(
                f"Invalid JSON in response: {str(e)}", status_code=response.status_code
            )

        if isinstance(data, dict):
            logging.debug(f"API response data keys: {list(data.keys())}")
        return data

    def _handle_error_response(self, response: requests.Response) -> None:
        """Raise a NetworkError built from a Google API error response."""
        status = response.status_code
        try:
            error_data = response.json()
        except ValueError:
            logging.error(f"Non-JSON error response: HTTP {status}, body: {response.text[:500]}")
            raise NetworkError(f"HTTP {status}", status_code=status)

        logging.error(f"Google Weather API error response: {error_data}")
        message = None
        if isinstance(error_data, dict) and isinstance(error_data.get("error"), dict):
            message = error_data["error"].get("message")

        if message:
            raise NetworkError(f"HTTP {status}: {message}", status_code=status)
        raise NetworkError(f"HTTP {status}", status_code=status)


class ForecastDaysProvider(GoogleWeatherProvider):
    """Daily forecast variant: same request shape plus a day count."""

    BASE_URL = "https://weather.googleapis.com/v1/forecast/days:lookup"

    def __init__(
        self,
        language: str = "en",
        units_system: str = "METRIC",
        timeout: float = 12,
        days: int = 6
    ):
        super().__init__(language=language, units_system=units_system, timeout=timeout)
        self.days = days

    def build_params(self, api_key: str, latitude: float, longitude: float) -> Dict[str, Any]:
        params = super().build_params(api_key, latitude, longitude)
        params["days"] = self.days
        return params
