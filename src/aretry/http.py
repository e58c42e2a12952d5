r"""Contains a helper to send asynchronous HTTP requests through a retry
strategy."""

from __future__ import annotations

__all__ = ["default_strategy", "request_async"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.backoff import exponential, jitter
from aretry.config import (
    DEFAULT_FIRST_WAIT,
    DEFAULT_MAX_JITTER_MILLIS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    RETRY_STATUS_CODES,
)
from aretry.retry import to_max_retries

if TYPE_CHECKING:
    from aretry.retry import RetryStrategy

logger: logging.Logger = logging.getLogger(__name__)


def _should_retry_status(status_code: int, status_forcelist: tuple[int, ...]) -> bool:
    """Check if a status code should trigger a retry.

    Args:
        status_code: The HTTP status code to check.
        status_forcelist: Tuple of HTTP status codes that should trigger a retry.

    Returns:
        True if the status code is in the retry list, False otherwise.
    """
    return status_code in status_forcelist


def default_strategy() -> RetryStrategy:
    """Return the strategy used when none is provided.

    Retries up to ``DEFAULT_MAX_RETRIES`` times with exponential waits
    starting at ``DEFAULT_FIRST_WAIT``, plus jitter.
    """
    return to_max_retries(
        jitter(exponential(DEFAULT_FIRST_WAIT), DEFAULT_MAX_JITTER_MILLIS),
        DEFAULT_MAX_RETRIES,
    )


async def request_async(
    url: str,
    method: str = "GET",
    *,
    strategy: RetryStrategy | None = None,
    client: httpx.AsyncClient | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
    **kwargs: Any,
) -> httpx.Response:
    """Send an async HTTP request, retrying it according to a strategy.

    Transport errors (``httpx.TransportError``) and responses whose
    status code is in ``status_forcelist`` count as failures and are
    retried. Any other response ends the run: it is returned if it is
    successful, otherwise ``raise_for_status`` raises
    ``httpx.HTTPStatusError`` after that single attempt.

    Args:
        url: The URL to send the request to.
        method: The HTTP method name (e.g., "GET", "POST").
        strategy: The retry strategy. Defaults to ``default_strategy()``.
        client: An optional ``httpx.AsyncClient``. If not provided, a
            temporary client is created and closed after the request.
        timeout: Timeout used when creating the temporary client.
        status_forcelist: Tuple of HTTP status codes that should trigger
            a retry.
        **kwargs: Additional keyword arguments passed to
            ``httpx.AsyncClient.build_request`` (e.g. ``params``,
            ``headers``, ``json``). The request is built once and resent
            as is on every attempt.

    Returns:
        The first successful response.

    Raises:
        httpx.HTTPError: The failure of the initial attempt, with the
            failures of every retry suppressed on it, or the
            ``httpx.HTTPStatusError`` of a non-retryable response.

    Example:
        ```pycon
        >>> import asyncio
        >>> from datetime import timedelta
        >>> from aretry.backoff import linear
        >>> from aretry.http import request_async
        >>> from aretry.retry import to_max_wait
        >>> strategy = to_max_wait(linear(timedelta(seconds=1)), timedelta(seconds=5))
        >>> response = asyncio.run(
        ...     request_async("https://api.example.com/data", strategy=strategy)
        ... )  # doctest: +SKIP

        ```
    """
    strategy = strategy if strategy is not None else default_strategy()
    owns_client = client is None
    client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def submit(request: httpx.Request) -> httpx.Response:
        logger.debug(f"Sending {request.method} request to {request.url}")
        response = await client.send(request)
        if _should_retry_status(response.status_code, status_forcelist):
            logger.debug(f"Retryable status {response.status_code} from {request.url}")
            raise httpx.HTTPStatusError(
                f"{request.method} {request.url} failed with status {response.status_code}",
                request=request,
                response=response,
            )
        return response

    try:
        response = await strategy.retry_if_necessary(
            client.build_request(method, url, **kwargs), submit
        )
        response.raise_for_status()
        return response
    finally:
        if owns_client:
            await client.aclose()
