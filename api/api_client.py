import asyncio
import time
from typing import Any, Optional

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from exceptions import DeckServiceError
from loggers.api_logger import ApiLogger


class APIClient:
    """Generic JSON-over-HTTP client bound to one base URL.

    Knows about REST and nothing about decks of cards. Requests are blocking
    `requests` calls pushed onto the default executor so the event loop keeps
    running while they are in flight.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        max_attempts: int = 1,
        retry_wait: float = 1.0,
    ):
        """Initialize the client.

        Args:
            base_url: Prefix every endpoint is appended to
            session: Optional pre-configured session for testing
            timeout: Per-request timeout in seconds, None for no timeout
            max_attempts: Attempts per request, 1 disables retrying
            retry_wait: Base delay between attempts in seconds
        """
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait

    def assemble_url(self, endpoint: str) -> str:
        """Append endpoint to the base URL. Nothing is escaped."""
        return f"{self.base_url}{endpoint}"

    async def fetch_as_json(self, endpoint: str) -> Any:
        """GET endpoint and return the decoded JSON body.

        Raises:
            DeckServiceError: On transport failure, HTTP error status or a
                body that is not JSON
        """
        url = self.assemble_url(endpoint)
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._get_json_with_retry, url)

    def _get_json_with_retry(self, url: str) -> Any:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.retry_wait, max=10),
            retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
            before_sleep=lambda state: self._log_retry(url, state),
            reraise=True,
        )
        try:
            return retrying(self._get_json, url)
        except requests.RequestException as e:
            ApiLogger.log_request_error(url, e)
            raise DeckServiceError(f"Request to {url} failed: {str(e)}") from e

    def _get_json(self, url: str) -> Any:
        start_time = time.time()
        ApiLogger.log_request(url)

        response = self.session.get(url, timeout=self.timeout)
        ApiLogger.log_response(url, response.status_code, time.time() - start_time)

        response.raise_for_status()
        # requests.JSONDecodeError is both a ValueError and a RequestException
        try:
            return response.json()
        except ValueError as e:
            ApiLogger.log_request_error(url, e)
            raise DeckServiceError(f"Response from {url} is not JSON: {str(e)}") from e

    def _log_retry(self, url: str, state: RetryCallState) -> None:
        ApiLogger.log_retry_attempt(url, state.attempt_number, self.max_attempts)

    def close(self) -> None:
        self.session.close()
