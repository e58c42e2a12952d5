r"""Unit tests for the httpx helper."""

from __future__ import annotations

import json
from datetime import timedelta
from unittest.mock import Mock

import httpx
import pytest

from aretry.backoff import constant
from aretry.exceptions import get_suppressed
from aretry.http import default_strategy, request_async
from aretry.retry import MaxRetries, dont, to_max_retries

TEST_URL = "https://api.example.com/data"


def make_client(*statuses: int) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
    """Return a client answering with ``statuses`` in order and the list
    recording the requests it receives."""
    requests: list[httpx.Request] = []
    remaining = list(statuses)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(remaining.pop(0), json={"attempt": len(requests)})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler)), requests


######################################
#     Tests for default_strategy     #
######################################


def test_default_strategy() -> None:
    strategy = default_strategy()
    assert isinstance(strategy, MaxRetries)
    assert strategy.max_retries == 3


###################################
#     Tests for request_async     #
###################################


@pytest.mark.asyncio
async def test_request_async_success_on_first_attempt(mock_asleep: Mock) -> None:
    client, requests = make_client(200)
    async with client:
        response = await request_async(TEST_URL, client=client)
    assert response.status_code == 200
    assert response.json() == {"attempt": 1}
    assert len(requests) == 1
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_request_async_success_after_retries(mock_asleep: Mock) -> None:
    client, requests = make_client(503, 500, 200)
    async with client:
        response = await request_async(
            TEST_URL,
            method="POST",
            strategy=to_max_retries(constant(timedelta(milliseconds=10)), 3),
            client=client,
            json={"key": "value"},
        )
    assert response.status_code == 200
    assert len(requests) == 3
    assert all(request.method == "POST" for request in requests)
    assert all(json.loads(request.content) == {"key": "value"} for request in requests)
    assert mock_asleep.await_count == 2


@pytest.mark.asyncio
async def test_request_async_exhausted(mock_asleep: Mock) -> None:  # noqa: ARG001
    client, requests = make_client(503, 502, 500)
    async with client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await request_async(
                TEST_URL,
                strategy=to_max_retries(constant(timedelta(milliseconds=10)), 2),
                client=client,
            )
    assert exc_info.value.response.status_code == 503
    assert [exc.response.status_code for exc in get_suppressed(exc_info.value)] == [502, 500]
    assert len(requests) == 3


@pytest.mark.asyncio
async def test_request_async_transport_error_is_retried(mock_asleep: Mock) -> None:  # noqa: ARG001
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            msg = "connection refused"
            raise httpx.ConnectError(msg, request=request)
        return httpx.Response(200)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        response = await request_async(
            TEST_URL, strategy=to_max_retries(constant(timedelta(milliseconds=1)), 1), client=client
        )
    assert response.status_code == 200
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_request_async_dont_retry(mock_asleep: Mock) -> None:
    client, requests = make_client(404)
    async with client:
        with pytest.raises(httpx.HTTPStatusError):
            await request_async(TEST_URL, strategy=dont(), client=client)
    assert len(requests) == 1
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_request_async_non_retryable_status_is_not_retried(mock_asleep: Mock) -> None:
    """Test that a 404 fails after a single request with the default
    strategy."""
    client, requests = make_client(404, 200)
    async with client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await request_async(TEST_URL, client=client)
    assert exc_info.value.response.status_code == 404
    assert get_suppressed(exc_info.value) == ()
    assert len(requests) == 1
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_request_async_retries_too_many_requests(mock_asleep: Mock) -> None:
    client, requests = make_client(429, 504, 200)
    async with client:
        response = await request_async(TEST_URL, client=client)
    assert response.status_code == 200
    assert len(requests) == 3
    assert mock_asleep.await_count == 2


@pytest.mark.asyncio
async def test_request_async_custom_status_forcelist(mock_asleep: Mock) -> None:
    client, requests = make_client(404, 200)
    async with client:
        response = await request_async(TEST_URL, client=client, status_forcelist=(404,))
    assert response.status_code == 200
    assert len(requests) == 2
    mock_asleep.assert_awaited_once()


@pytest.mark.asyncio
async def test_request_async_empty_status_forcelist(mock_asleep: Mock) -> None:
    client, requests = make_client(503, 200)
    async with client:
        with pytest.raises(httpx.HTTPStatusError, match=r"503"):
            await request_async(TEST_URL, client=client, status_forcelist=())
    assert len(requests) == 1
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_request_async_forwards_kwargs_to_build_request(
    mock_asleep: Mock,  # noqa: ARG001
) -> None:
    client, requests = make_client(200)
    async with client:
        await request_async(
            TEST_URL, client=client, params={"page": "2"}, headers={"X-Token": "abc"}
        )
    assert requests[0].url.params["page"] == "2"
    assert requests[0].headers["X-Token"] == "abc"


@pytest.mark.asyncio
async def test_request_async_closes_temporary_client(
    monkeypatch: pytest.MonkeyPatch, mock_asleep: Mock  # noqa: ARG001
) -> None:
    """Test that a client created by the helper is closed afterwards."""
    client, _ = make_client(200)
    monkeypatch.setattr(httpx, "AsyncClient", Mock(return_value=client))
    response = await request_async(TEST_URL)
    assert response.status_code == 200
    assert client.is_closed


@pytest.mark.asyncio
async def test_request_async_does_not_close_provided_client(mock_asleep: Mock) -> None:  # noqa: ARG001
    client, _ = make_client(200)
    async with client:
        await request_async(TEST_URL, client=client)
        assert not client.is_closed
