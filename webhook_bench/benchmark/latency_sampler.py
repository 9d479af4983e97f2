"""Latency sampler: concurrent fan-out of timed requests."""
import asyncio
import logging

import httpx

from .constants import BenchmarkConstants
from .latency_analyzer import LatencyAnalyzer
from .models import Measurement
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class LatencySampler:
    """Measures the mean latency of an endpoint over concurrent samples."""

    def __init__(self, request_executor: RequestExecutor, ignore_failed_samples: bool = False):
        self.request_executor = request_executor
        self.ignore_failed_samples = ignore_failed_samples

    async def measure(
        self,
        client: httpx.AsyncClient,
        url: str,
        samples: int = BenchmarkConstants.DEFAULT_LATENCY_SAMPLES,
    ) -> Measurement:
        """
        Fire all samples at once and wait for every one of them to settle.

        Args:
            client: Async HTTP client.
            url: Endpoint URL.
            samples: Number of requests to issue.

        Returns:
            Measurement with the mean latency in ms, the number of requests
            attempted (always equal to samples) and the number that succeeded.
        """
        if samples < 1:
            raise ValueError(f"samples must be at least 1, got {samples}")

        results = await asyncio.gather(
            *(self.request_executor.send_request(client, url) for _ in range(samples))
        )
        successful = LatencyAnalyzer.count_successes(results)
        mean = LatencyAnalyzer.mean_latency(results, ignore_failed=self.ignore_failed_samples)
        if successful < len(results):
            logger.warning(f"{len(results) - successful}/{len(results)} latency samples were unsuccessful for {url}")

        return Measurement(value=mean, total_requests=len(results), successful_responses=successful)
