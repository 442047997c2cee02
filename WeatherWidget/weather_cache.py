"""File-backed cache gate: one {timestamp, data} record per widget variant."""
import json
import logging
import os
import time
from typing import Any, Callable, Dict, Optional


class CacheCorruptionError(Exception):
    """Cache file is unparsable or incomplete."""
    pass


class CachePersistError(Exception):
    """Cache file could not be written."""
    pass


class CacheGate:
    """
    Persists the last successful API payload and hands it back while fresh.

    Reading never raises and never deletes a stale record; writing replaces
    the record wholesale and never raises either.
    """

    def __init__(
        self,
        path: str,
        ttl_minutes: float,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize cache gate.

        Args:
            path: Location of the JSON cache file
            ttl_minutes: Maximum record age still considered usable
            clock: Returns the current time in seconds since the epoch
        """
        self.path = path
        self.ttl_minutes = ttl_minutes
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _load_record(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                record = json.load(f)
        except (OSError, ValueError) as e:
            raise CacheCorruptionError(f"Unreadable cache file {self.path}: {e}") from e

        if not isinstance(record, dict) or not record.get("timestamp"):
            raise CacheCorruptionError(f"Cache file {self.path} has no timestamp")
        if not isinstance(record["timestamp"], (int, float)):
            raise CacheCorruptionError(f"Cache file {self.path} has a non-numeric timestamp")
        return record

    def read_cache(self) -> Optional[Any]:
        """
        Return the cached payload if the record is younger than the TTL.

        Returns:
            The stored data, or None if the file is missing, corrupt or expired
        """
        if not os.path.exists(self.path):
            logging.debug(f"No cache file at {self.path}")
            return None

        try:
            record = self._load_record()
        except CacheCorruptionError as e:
            logging.warning(f"Ignoring cache: {e}")
            return None

        age_minutes = (self._now_ms() - record["timestamp"]) / 60000
        if age_minutes > self.ttl_minutes:
            logging.info(f"Cache expired (age: {age_minutes:.1f}min > TTL: {self.ttl_minutes}min)")
            return None

        logging.debug(f"Cache hit (age: {age_minutes:.1f}min, TTL: {self.ttl_minutes}min)")
        return record.get("data")

    def _persist(self, data: Any) -> None:
        payload = {"timestamp": self._now_ms(), "data": data}
        try:
            serialized = json.dumps(payload)
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(serialized)
        except (OSError, TypeError, ValueError) as e:
            raise CachePersistError(f"Could not write cache file {self.path}: {e}") from e

    def write_cache(self, data: Any) -> None:
        """Overwrite the record with {timestamp: now, data}. Failures are logged only."""
        try:
            self._persist(data)
        except CachePersistError as e:
            logging.warning(str(e))
            return
        logging.debug(f"Cache written to {self.path}")
