"""Tests for node fetcher."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from nodeboard.constants.timeouts import (
    NODES_REQUEST_TIMEOUT,
    NODES_RETRY_REQUEST_TIMEOUT,
)
from nodeboard.controllers.nodes.fetchers.node_fetcher import (
    NodeFetcher,
    NodeFetchError,
)

URL = "https://monitor.example/nodes"


class TestNodeFetcher:
    """Tests for NodeFetcher class."""

    @pytest.fixture
    def mock_request_json(self) -> AsyncMock:
        """Create mock request_json function."""
        return AsyncMock()

    def test_fetcher_init(self, mock_request_json: AsyncMock) -> None:
        """Test NodeFetcher initialization with request_json_func."""
        fetcher = NodeFetcher(URL, mock_request_json)
        assert fetcher._request_json is mock_request_json
        assert fetcher.endpoint_url == URL

    def test_timeout_plan(self, mock_request_json: AsyncMock) -> None:
        fetcher = NodeFetcher(URL, mock_request_json)
        assert fetcher._timeout_plan() == [NODES_REQUEST_TIMEOUT, NODES_RETRY_REQUEST_TIMEOUT]

    def test_timeout_plan_deduplicated(self, mock_request_json: AsyncMock) -> None:
        fetcher = NodeFetcher(
            URL, mock_request_json, request_timeout=NODES_RETRY_REQUEST_TIMEOUT
        )
        assert fetcher._timeout_plan() == [NODES_RETRY_REQUEST_TIMEOUT]

    @pytest.mark.asyncio
    async def test_fetch_raw_returns_payload(self, mock_request_json: AsyncMock) -> None:
        mock_request_json.return_value = {"nodes": []}
        fetcher = NodeFetcher(URL, mock_request_json)

        payload = await fetcher.fetch_raw()

        assert payload == {"nodes": []}
        mock_request_json.assert_awaited_once_with(URL, NODES_REQUEST_TIMEOUT)

    @pytest.mark.asyncio
    async def test_fetch_raw_retries_timeout_with_longer_timeout(
        self,
        mock_request_json: AsyncMock,
    ) -> None:
        """A timed out first attempt should be retried once."""
        mock_request_json.side_effect = [TimeoutError(), {"nodes": []}]
        fetcher = NodeFetcher(URL, mock_request_json)

        payload = await fetcher.fetch_raw()

        assert payload == {"nodes": []}
        timeouts = [call.args[1] for call in mock_request_json.await_args_list]
        assert timeouts == [NODES_REQUEST_TIMEOUT, NODES_RETRY_REQUEST_TIMEOUT]

    @pytest.mark.asyncio
    async def test_fetch_raw_gives_up_after_retry(self, mock_request_json: AsyncMock) -> None:
        mock_request_json.side_effect = TimeoutError()
        fetcher = NodeFetcher(URL, mock_request_json)

        with pytest.raises(NodeFetchError, match="timed out"):
            await fetcher.fetch_raw()
        assert mock_request_json.await_count == 2

    @pytest.mark.asyncio
    async def test_http_error_not_retried(self, mock_request_json: AsyncMock) -> None:
        mock_request_json.side_effect = aiohttp.ClientResponseError(
            MagicMock(), (), status=503, message="Service Unavailable"
        )
        fetcher = NodeFetcher(URL, mock_request_json)

        with pytest.raises(NodeFetchError, match="HTTP 503"):
            await fetcher.fetch_raw()
        assert mock_request_json.await_count == 1

    @pytest.mark.asyncio
    async def test_connection_error(self, mock_request_json: AsyncMock) -> None:
        mock_request_json.side_effect = aiohttp.ClientConnectionError("Connection refused")
        fetcher = NodeFetcher(URL, mock_request_json)

        with pytest.raises(NodeFetchError, match="Connection to"):
            await fetcher.fetch_raw()

    @pytest.mark.asyncio
    async def test_invalid_json(self, mock_request_json: AsyncMock) -> None:
        mock_request_json.side_effect = ValueError("Expecting value")
        fetcher = NodeFetcher(URL, mock_request_json)

        with pytest.raises(NodeFetchError, match="Invalid JSON"):
            await fetcher.fetch_raw()
