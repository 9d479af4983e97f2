"""Runs benchmark groups and keeps the latest result of each one."""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from webhook_bench.shared.config import Config
from .constants import BenchmarkConstants
from .endpoints import default_groups
from .exceptions import BenchmarkBusyError, BenchmarkExecutionError, UnknownBenchmarkGroupError
from .latency_analyzer import LatencyAnalyzer
from .latency_sampler import LatencySampler
from .models import BenchmarkData, BenchmarkGroup, Endpoint, GroupDefinition, Measurement
from .request_executor import RequestExecutor
from .request_session_manager import RequestSessionManager
from .throughput_sampler import ThroughputSampler


# Configure logging
logger = logging.getLogger(__name__)


class DashboardBenchmark:
    """Dashboard state: one result set per benchmark group.

    A run replaces the data of its own group in a single assignment once every
    endpoint has been measured; the other groups are never touched.
    """

    def __init__(
        self,
        config: Config,
        groups: Optional[Sequence[GroupDefinition]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        if groups is None:
            groups = default_groups(config.latency_samples, config.throughput_duration_ms)
        self.definitions: Dict[str, GroupDefinition] = {g.name: g for g in groups}
        self.transport = transport
        self.request_session_manager = RequestSessionManager()
        self.request_executor = RequestExecutor(config.success_mode)
        self.latency_sampler = LatencySampler(self.request_executor, config.ignore_failed_samples)
        self.throughput_sampler = ThroughputSampler(self.request_executor)
        self._groups: Dict[str, BenchmarkGroup] = {
            g.name: BenchmarkGroup(name=g.name, unit=g.unit) for g in groups
        }
        self.error: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def is_loading(self) -> bool:
        return self._lock.locked()

    @property
    def groups(self) -> List[BenchmarkGroup]:
        return list(self._groups.values())

    def get_group(self, name: str) -> BenchmarkGroup:
        if name not in self._groups:
            raise UnknownBenchmarkGroupError(name)
        return self._groups[name]

    def snapshot(self) -> Dict[str, Any]:
        """Serializable view of the whole dashboard."""
        return {
            "groups": [group.to_dict() for group in self.groups],
            "error": self.error,
            "isLoading": self.is_loading,
        }

    async def _measure(self, client: httpx.AsyncClient, definition: GroupDefinition, endpoint: Endpoint) -> Measurement:
        if definition.kind == BenchmarkConstants.KIND_LATENCY:
            samples = definition.samples or BenchmarkConstants.DEFAULT_LATENCY_SAMPLES
            return await self.latency_sampler.measure(client, endpoint.url, samples)
        if definition.kind == BenchmarkConstants.KIND_THROUGHPUT:
            duration_ms = definition.duration_ms or BenchmarkConstants.DEFAULT_THROUGHPUT_DURATION_MS
            return await self.throughput_sampler.measure(client, endpoint.url, duration_ms)
        raise ValueError(f"Unsupported benchmark kind: {definition.kind}")

    async def _measure_endpoint(self, client: httpx.AsyncClient, definition: GroupDefinition, endpoint: Endpoint) -> BenchmarkData:
        measurement = await self._measure(client, definition, endpoint)
        logger.info(
            f"[{definition.name}] {endpoint.name}: {measurement.value:.2f} {definition.unit} "
            f"({measurement.successful_responses}/{measurement.total_requests} successful)"
        )
        return BenchmarkData(
            name=endpoint.name,
            value=LatencyAnalyzer.round_value(measurement.value),
            total_requests=measurement.total_requests,
            successful_responses=measurement.successful_responses,
        )

    async def run_group(self, name: str) -> BenchmarkGroup:
        """
        Measure every endpoint of a group and replace its results.

        Args:
            name: Benchmark group name.

        Returns:
            The group with its new results.

        Raises:
            UnknownBenchmarkGroupError: If the group is not defined.
            BenchmarkBusyError: If another run is in progress.
            BenchmarkExecutionError: If the run fails; prior results are kept.
        """
        definition = self.definitions.get(name)
        if definition is None:
            raise UnknownBenchmarkGroupError(name)
        if self._lock.locked():
            raise BenchmarkBusyError(f"A benchmark is already running, cannot start {name}")

        async with self._lock:
            self.error = None
            logger.info(f"Running benchmark group: {name} ({len(definition.endpoints)} endpoints)")
            try:
                client = self.request_session_manager.create_client(
                    base_url=self.config.local_base_url,
                    timeout=self.config.request_timeout,
                    transport=self.transport,
                )
                # Every endpoint settles before the client closes and the lock is released
                async with client:
                    results = await asyncio.gather(
                        *(self._measure_endpoint(client, definition, endpoint) for endpoint in definition.endpoints),
                        return_exceptions=True,
                    )
                failures = [r for r in results if isinstance(r, BaseException)]
                if failures:
                    raise failures[0]
            except Exception as e:
                self.error = BenchmarkConstants.GROUP_ERROR_TEMPLATE.format(name=name)
                logger.error(f"Benchmark group {name} failed: {e}", exc_info=True)
                raise BenchmarkExecutionError(self.error, group_name=name) from e

            previous = self._groups[name]
            self._groups[name] = BenchmarkGroup(name=previous.name, unit=previous.unit, data=list(results))
            logger.info(f"Benchmark group {name} completed")
            return self._groups[name]
