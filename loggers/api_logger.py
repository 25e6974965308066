import logging
from typing import Union

logger = logging.getLogger("loggers.api_logger")


class ApiLogger:
    """Handles all logging operations for deck service HTTP traffic."""

    @staticmethod
    def log_request(url: str) -> None:
        """Log an outgoing GET request."""
        logger.debug(f"GET {url}")

    @staticmethod
    def log_response(url: str, status_code: int, duration: float) -> None:
        """Log a completed request."""
        logger.debug(f"GET {url} -> {status_code} in {duration:.2f}s")

    @staticmethod
    def log_request_error(url: str, error: Exception) -> None:
        """Log a failed request."""
        logger.error(f"Request to {url} failed: {str(error)}")

    @staticmethod
    def log_retry_attempt(url: str, attempt: int, max_attempts: int) -> None:
        """Log retry attempts."""
        logger.warning(f"Retry attempt {attempt}/{max_attempts} for {url}")

    @staticmethod
    def log_input_validation_error(param: str, value: Union[str, int]) -> None:
        """Log input validation errors."""
        logger.error(f"Invalid input parameter {param}: {value}")

    @staticmethod
    def log_parse_error(endpoint: str, error: Exception) -> None:
        """Log a response that lacks the expected fields."""
        logger.error(f"Unexpected response shape from {endpoint}: {str(error)}")
