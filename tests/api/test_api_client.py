from unittest.mock import Mock

import pytest
import requests

from api.api_client import APIClient
from exceptions import DeckServiceError


def make_response(payload=None, status_code=200, json_error=None):
    response = Mock(status_code=status_code)
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    session = Mock()
    session.get.return_value = make_response({"deck_id": "abc"})
    return session


@pytest.fixture
def api_client(mock_session):
    return APIClient("https://deckofcardsapi.com/api/", session=mock_session)


def test_initialization(api_client):
    assert api_client.base_url == "https://deckofcardsapi.com/api/"
    assert api_client.timeout is None
    assert api_client.max_attempts == 1


def test_assemble_url_concatenates(api_client):
    assert (
        api_client.assemble_url("deck/new/shuffle/?deck_count=1")
        == "https://deckofcardsapi.com/api/deck/new/shuffle/?deck_count=1"
    )


def test_assemble_url_does_not_escape(api_client):
    assert api_client.assemble_url("a b/?x=1,2") == "https://deckofcardsapi.com/api/a b/?x=1,2"


@pytest.mark.asyncio
async def test_fetch_as_json(api_client, mock_session):
    data = await api_client.fetch_as_json("deck/new/shuffle/?deck_count=1")

    assert data == {"deck_id": "abc"}
    mock_session.get.assert_called_once_with(
        "https://deckofcardsapi.com/api/deck/new/shuffle/?deck_count=1", timeout=None
    )


@pytest.mark.asyncio
async def test_timeout_is_passed(mock_session):
    client = APIClient("http://x/", session=mock_session, timeout=2.5)
    await client.fetch_as_json("ping")

    assert mock_session.get.call_args[1]["timeout"] == 2.5


@pytest.mark.asyncio
async def test_connection_error_not_retried_by_default(api_client, mock_session):
    mock_session.get.side_effect = requests.ConnectionError("down")

    with pytest.raises(DeckServiceError):
        await api_client.fetch_as_json("ping")

    assert mock_session.get.call_count == 1


@pytest.mark.asyncio
async def test_http_error_status(api_client, mock_session):
    mock_session.get.return_value = make_response({"success": False}, status_code=404)

    with pytest.raises(DeckServiceError):
        await api_client.fetch_as_json("deck/missing/draw/?count=1")


@pytest.mark.asyncio
async def test_non_json_body(api_client, mock_session):
    mock_session.get.return_value = make_response(json_error=ValueError("no json"))

    with pytest.raises(DeckServiceError) as exc_info:
        await api_client.fetch_as_json("ping")

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert "is not JSON" in str(exc_info.value)


@pytest.mark.asyncio
async def test_requests_json_decode_error_reported_as_not_json(api_client, mock_session):
    """requests raises its own JSONDecodeError, which is also a RequestException."""
    decode_error = requests.JSONDecodeError("Expecting value", "<html>", 0)
    mock_session.get.return_value = make_response(json_error=decode_error)

    with pytest.raises(DeckServiceError) as exc_info:
        await api_client.fetch_as_json("ping")

    assert "is not JSON" in str(exc_info.value)
    assert "failed" not in str(exc_info.value)
    assert exc_info.value.__cause__ is decode_error


@pytest.mark.asyncio
async def test_retries_connection_errors_when_configured(mock_session):
    mock_session.get.side_effect = [
        requests.ConnectionError("down"),
        make_response({"deck_id": "abc"}),
    ]
    client = APIClient("http://x/", session=mock_session, max_attempts=3, retry_wait=0)

    data = await client.fetch_as_json("ping")

    assert data == {"deck_id": "abc"}
    assert mock_session.get.call_count == 2


@pytest.mark.asyncio
async def test_all_retries_fail(mock_session):
    mock_session.get.side_effect = requests.Timeout("slow")
    client = APIClient("http://x/", session=mock_session, max_attempts=3, retry_wait=0)

    with pytest.raises(DeckServiceError):
        await client.fetch_as_json("ping")

    assert mock_session.get.call_count == 3


def test_close(api_client, mock_session):
    api_client.close()
    mock_session.close.assert_called_once()
