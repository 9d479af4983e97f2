"""Handles individual request execution and timing."""
import logging
import math
import time

import httpx

from webhook_bench.const import SUCCESS_MODE_OPAQUE, SUCCESS_MODE_STATUS
from .models import SampleResult


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Sends one GET request and records its latency and outcome."""

    def __init__(self, success_mode: str = SUCCESS_MODE_STATUS):
        if success_mode not in (SUCCESS_MODE_STATUS, SUCCESS_MODE_OPAQUE):
            raise ValueError(f"Unsupported success mode: {success_mode}")
        self.success_mode = success_mode

    def is_successful(self, url: str, response: httpx.Response) -> bool:
        """
        Decide whether a response counts as successful.

        In opaque mode responses from other origins are unreadable, so only
        relative (same-origin) URLs can report success.
        """
        if self.success_mode == SUCCESS_MODE_OPAQUE and not url.startswith("/"):
            return False
        return response.is_success

    async def send_request(self, client: httpx.AsyncClient, url: str) -> SampleResult:
        """
        Send a single request and measure latency.

        Args:
            client: Async HTTP client.
            url: Absolute URL, or a path relative to the client's base_url.

        Returns:
            SampleResult with latency in milliseconds. Transport errors yield a
            NaN latency and success=False instead of raising; any error other than
            cancellation is treated as a failed sample.
        """
        start_time = time.perf_counter()
        try:
            response = await client.get(url)
        except Exception as e:
            logger.debug(f"Request to {url} failed: {e!r}")
            return SampleResult(latency_ms=math.nan, success=False)

        latency_ms = (time.perf_counter() - start_time) * 1000
        return SampleResult(latency_ms=latency_ms, success=self.is_successful(url, response))
