"""Weather service: fresh data when the API answers, cached data when it doesn't."""
import logging
from typing import Any
from weather_provider import WeatherProviderBase, NetworkError
from weather_cache import CacheGate
from weather_data import Location


class WeatherService:
    """
    Service that wraps a weather provider with a persisted fallback cache.

    A successful fetch always wins over the cache and replaces it. The cache
    only answers when the fetch fails.
    """

    def __init__(self, provider: WeatherProviderBase, cache: CacheGate):
        """
        Initialize weather service.

        Args:
            provider: Weather provider to use
            cache: Cache gate for this widget variant
        """
        self.provider = provider
        self.cache = cache

    def get_latest(self, api_key: str, location: Location) -> Any:
        """
        Get the latest weather payload.

        Returns:
            The fresh payload, or the cached one if the fetch failed

        Raises:
            NetworkError: If the fetch fails and no usable cache exists
        """
        cached = self.cache.read_cache()
        if cached is not None:
            logging.debug("Usable cache available as fallback")

        logging.info("Fetching weather data from provider...")
        try:
            fresh = self.provider.fetch(api_key, location.latitude, location.longitude)
        except NetworkError as e:
            if cached is None:
                logging.error(f"Weather fetch failed and no cache available: {e}")
                raise
            logging.warning(f"Weather fetch failed, using cached data: {e}")
            return cached

        logging.info("Weather fetch successful")
        self.cache.write_cache(fresh)
        return fresh
