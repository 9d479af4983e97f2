"""Throughput sampler: sequential requests inside a wall-clock window."""
import logging
import time
from typing import Callable

import httpx

from .constants import BenchmarkConstants
from .models import Measurement
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class ThroughputSampler:
    """Counts how many requests complete back to back within a time window.

    Each request is awaited before the next one starts, so the result is
    bounded by the endpoint's round-trip latency rather than by concurrent load.
    """

    def __init__(self, request_executor: RequestExecutor, clock: Callable[[], float] = time.perf_counter):
        self.request_executor = request_executor
        self.clock = clock

    async def measure(
        self,
        client: httpx.AsyncClient,
        url: str,
        duration_ms: int = BenchmarkConstants.DEFAULT_THROUGHPUT_DURATION_MS,
    ) -> Measurement:
        """
        Issue requests until the window elapses.

        The deadline is checked between requests only; a request still in
        flight when the window closes is allowed to finish and is counted.

        Returns:
            Measurement with requests per second, total operations and successes.
        """
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")

        start = self.clock()
        operations = 0
        successful = 0
        while (self.clock() - start) * 1000 < duration_ms:
            result = await self.request_executor.send_request(client, url)
            if result.success:
                successful += 1
            operations += 1

        throughput = operations / (duration_ms / 1000)
        logger.debug(f"Throughput for {url}: {operations} operations in {duration_ms}ms ({throughput:.2f} req/s)")
        return Measurement(value=throughput, total_requests=operations, successful_responses=successful)
