"""HTTP utilities for talking to JSON APIs."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from aidocs.config import AIDOCS_FETCH_TIMEOUT_S, AIDOCS_USER_AGENT
from aidocs.exceptions import FetchError


async def fetch_json(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    headers: Mapping[str, str] | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> Any:
    """GET a URL once and decode its JSON body.

    There is no retry: the first failure is raised to the caller.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        headers: Extra request headers.
        on_404: Custom exception class to raise on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses. If None,
            a generic message is used.

    Returns:
        The decoded JSON document.

    Raises:
        FetchError (or custom on_404 exception): If the request fails, returns
            a non-success status, or the body is not JSON.
    """
    request_headers = {"User-Agent": AIDOCS_USER_AGENT, **(headers or {})}
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> Any:
        try:
            response = await http_client.get(url, headers=request_headers)
        except httpx.RequestError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc

        if response.status_code == 404:
            raise not_found_exc_class(on_404_message or f"Resource not found at {url}")

        if response.is_error:
            raise FetchError(
                f"Request to {url} failed: {response.status_code} {response.reason_phrase}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(f"Invalid JSON received from {url}") from exc

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(AIDOCS_FETCH_TIMEOUT_S),
        follow_redirects=True,
    ) as new_client:
        return await do_fetch(new_client)
