import pytest

from api.deck_client import DeckOfCardsClient
from tests.mocks.mock_deck_api import MockDeckApi


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    import logging

    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_deck_api_env(monkeypatch):
    """Keep DECK_API_* settings from the developer's shell out of tests."""
    for name in (
        "DECK_API_BASE_URL",
        "DECK_API_TIMEOUT",
        "DECK_API_MAX_ATTEMPTS",
        "DECK_API_RETRY_WAIT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_api():
    """In-memory deck service."""
    return MockDeckApi()


@pytest.fixture
def deck_client(mock_api):
    """Deck client talking to the in-memory deck service."""
    return DeckOfCardsClient(mock_api)
