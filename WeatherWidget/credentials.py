"""API key lookup: environment, then a dotenv-format credential file, then a prompt."""
import getpass
import logging
import os
from typing import Callable, Optional

from dotenv import get_key, set_key

API_KEY_NAME = "GOOGLE_WEATHER_API_KEY"


class CredentialError(Exception):
    """Missing, cancelled or empty credential input."""
    pass


class DotenvCredentialStore:
    """Key/value credential store kept in a private dotenv-format file."""

    def __init__(self, path: str):
        self.path = path

    def get(self, name: str) -> Optional[str]:
        if not os.path.exists(self.path):
            return None
        return get_key(self.path, name) or None

    def set(self, name: str, value: str) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not os.path.exists(self.path):
            # Create with owner-only permissions before the secret is written
            os.close(os.open(self.path, os.O_CREAT | os.O_WRONLY, 0o600))
        set_key(self.path, name, value)


def prompt_api_key() -> str:
    return getpass.getpass("Google Weather API key (stored locally): ")


def get_api_key(
    store: DotenvCredentialStore,
    prompt: Callable[[], str] = prompt_api_key
) -> str:
    """
    Return the API key, asking for it once if it isn't stored yet.

    Args:
        store: Credential store to read from and save to
        prompt: Interactive input; EOFError/KeyboardInterrupt mean cancel

    Returns:
        Non-empty API key

    Raises:
        CredentialError: If input is cancelled or empty
    """
    key = os.getenv(API_KEY_NAME) or store.get(API_KEY_NAME)
    if key:
        return key

    logging.info("No stored API key, prompting")
    try:
        entered = prompt()
    except (EOFError, KeyboardInterrupt) as exc:
        raise CredentialError("API key input cancelled.") from exc

    key = (entered or "").strip()
    if not key:
        raise CredentialError("Empty API key.")

    store.set(API_KEY_NAME, key)
    logging.info(f"API key saved to {store.path}")
    return key
