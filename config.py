import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "https://deckofcardsapi.com/api/"


@dataclass
class ApiConfig:
    """
    Connection settings for the deck of cards service.

    Attributes:
        base_url (str): Service root every endpoint is appended to
        timeout (Optional[float]): Request timeout in seconds, None waits forever
        max_attempts (int): Attempts per request, 1 disables retrying
        retry_wait (float): Base wait in seconds between attempts

    Raises:
        ValueError: If base_url is empty or a numeric setting is out of range
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    max_attempts: int = 1
    retry_wait: float = 1.0

    def __post_init__(self):
        """Validate configuration parameters."""
        if not self.base_url:
            raise ValueError("Base URL cannot be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("Timeout must be positive")
        if self.max_attempts < 1:
            raise ValueError("Max attempts must be at least 1")
        if self.retry_wait < 0:
            raise ValueError("Retry wait cannot be negative")

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Build settings from DECK_API_* environment variables (and .env)."""
        load_dotenv(find_dotenv(usecwd=True))

        timeout = os.getenv("DECK_API_TIMEOUT")
        return cls(
            base_url=os.getenv("DECK_API_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout else None,
            max_attempts=int(os.getenv("DECK_API_MAX_ATTEMPTS", "1")),
            retry_wait=float(os.getenv("DECK_API_RETRY_WAIT", "1.0")),
        )
