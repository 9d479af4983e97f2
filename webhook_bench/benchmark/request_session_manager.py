"""Manages HTTP clients used for benchmarking."""
import logging
from typing import Optional

import httpx

from .constants import BenchmarkConstants


# Configure logging
logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Creates httpx clients for benchmark runs.

    Clients never retry and send cache-busting headers on every request.
    """

    @staticmethod
    def create_client(
        base_url: str = "",
        timeout: float = BenchmarkConstants.DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> httpx.AsyncClient:
        """Create an async client; relative endpoint URLs resolve against base_url."""
        logger.debug(f"Creating benchmark client (base_url={base_url!r}, timeout={timeout}s)")
        return httpx.AsyncClient(
            base_url=base_url,
            headers=BenchmarkConstants.NO_CACHE_HEADERS,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
