"""Nodes controller - fetches and parses the participant list."""

from __future__ import annotations

import logging
import time

from nodeboard.constants.defaults import ENDPOINT_URL_DEFAULT
from nodeboard.constants.timeouts import NODES_REQUEST_TIMEOUT
from nodeboard.controllers.base import WorkerResult
from nodeboard.controllers.nodes.fetchers import NodeFetcher, NodeFetchError
from nodeboard.controllers.nodes.parsers import NodeParser, NodePayloadError
from nodeboard.models.core.node_record import NodeRecord

logger = logging.getLogger(__name__)


class NodesController:
    """Data source for the node dashboard.

    The list is fetched once per session; nothing here polls or caches.
    """

    def __init__(
        self,
        endpoint_url: str = ENDPOINT_URL_DEFAULT,
        *,
        request_timeout: float = NODES_REQUEST_TIMEOUT,
        fetcher: NodeFetcher | None = None,
        parser: NodeParser | None = None,
    ) -> None:
        self._fetcher = fetcher or NodeFetcher(endpoint_url, request_timeout=request_timeout)
        self._parser = parser or NodeParser()

    @property
    def endpoint_url(self) -> str:
        return self._fetcher.endpoint_url

    async def fetch_nodes(self) -> list[NodeRecord]:
        """Fetch and parse the node list.

        Raises:
            NodeFetchError: If the request fails.
            NodePayloadError: If the response holds no node list.
        """
        payload = await self._fetcher.fetch_raw()
        records = self._parser.parse_payload(payload)
        logger.info("Fetched %d nodes from %s", len(records), self.endpoint_url)
        return records

    async def load(self) -> WorkerResult:
        """Fetch the nodes, reporting failure in the result instead of raising."""
        start = time.monotonic()
        try:
            records = await self.fetch_nodes()
        except (NodeFetchError, NodePayloadError) as exc:
            logger.error("Failed to load nodes: %s", exc)
            return WorkerResult(
                success=False,
                error=str(exc),
                duration_ms=(time.monotonic() - start) * 1000,
            )
        return WorkerResult(
            success=True,
            data=records,
            duration_ms=(time.monotonic() - start) * 1000,
        )
