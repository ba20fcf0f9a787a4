"""Node fetcher - requests the raw nodes payload from the monitor endpoint."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from nodeboard.constants.timeouts import (
    NODES_REQUEST_TIMEOUT,
    NODES_RETRY_REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)

RequestJsonFunc = Callable[[str, float], Awaitable[Any]]


class NodeFetchError(Exception):
    """Raised when the nodes payload cannot be obtained."""


async def request_json(url: str, timeout: float) -> Any:
    """GET ``url`` and decode the JSON body."""
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.get(url, headers={"Accept": "application/json"}) as response:
            response.raise_for_status()
            return await response.json(content_type=None)


class NodeFetcher:
    """Fetches the raw nodes payload over HTTP."""

    def __init__(
        self,
        endpoint_url: str,
        request_json_func: RequestJsonFunc | None = None,
        *,
        request_timeout: float = NODES_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with the endpoint and a JSON request function.

        Args:
            endpoint_url: URL serving ``{"nodes": [...]}``.
            request_json_func: Async ``(url, timeout) -> decoded JSON``;
                defaults to an aiohttp GET.
            request_timeout: Timeout of the first attempt in seconds.
        """
        self._endpoint_url = endpoint_url
        self._request_json = request_json_func or request_json
        self._request_timeout = request_timeout

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def _timeout_plan(self) -> list[float]:
        plan: list[float] = []
        for timeout in (self._request_timeout, NODES_RETRY_REQUEST_TIMEOUT):
            if timeout not in plan:
                plan.append(timeout)
        return plan

    async def fetch_raw(self) -> Any:
        """Return the decoded payload.

        A timed out request is retried once with a longer timeout; any other
        failure is raised immediately.

        Raises:
            NodeFetchError: If the request fails or the body is not JSON.
        """
        timeout_plan = self._timeout_plan()
        for attempt, timeout in enumerate(timeout_plan, start=1):
            try:
                return await self._request_json(self._endpoint_url, timeout)
            except TimeoutError as exc:
                if attempt < len(timeout_plan):
                    logger.warning(
                        "Nodes request timed out (attempt %s/%s with %ss), retrying",
                        attempt,
                        len(timeout_plan),
                        timeout,
                    )
                    continue
                raise NodeFetchError(
                    f"Request to {self._endpoint_url} timed out after {timeout}s"
                ) from exc
            except aiohttp.ClientResponseError as exc:
                raise NodeFetchError(
                    f"{self._endpoint_url} returned HTTP {exc.status}"
                ) from exc
            except aiohttp.ClientError as exc:
                raise NodeFetchError(f"Connection to {self._endpoint_url} failed: {exc}") from exc
            except ValueError as exc:
                raise NodeFetchError(f"Invalid JSON from {self._endpoint_url}") from exc
        raise NodeFetchError(f"No request attempted for {self._endpoint_url}")
