"""Benchmark runner to orchestrate benchmark runs from the command line."""
import asyncio
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from webhook_bench.shared.config import Config
from .dashboard_benchmark import DashboardBenchmark
from .exceptions import BenchmarkExecutionError
from .models import BenchmarkGroup
from .result_exporter import ResultExporter


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Orchestrates the execution of benchmark groups and manages output."""

    def __init__(
        self,
        config: Config,
        group_names: Optional[Sequence[str]] = None,
        output_dir: Optional[Path] = None,
        benchmark: Optional[DashboardBenchmark] = None,
    ):
        self.config = config
        self.benchmark = benchmark or DashboardBenchmark(config)
        self.group_names = list(group_names) if group_names else list(self.benchmark.definitions)
        self.output_dir = output_dir
        self.result_exporter = ResultExporter()

    async def run_async(self) -> Dict[str, BenchmarkGroup]:
        """Run the selected groups one after another.

        A failed group is logged and skipped; the remaining groups still run.
        """
        completed: Dict[str, BenchmarkGroup] = {}
        for name in self.group_names:
            try:
                group = await self.benchmark.run_group(name)
            except BenchmarkExecutionError as e:
                logger.error(e.message)
                continue
            completed[name] = group
            for line in self.result_exporter.format_table(group):
                logger.info(line)

        if self.output_dir is not None and completed:
            self.result_exporter.save_groups(list(completed.values()), self.output_dir)
        return completed

    def run(self) -> Dict[str, BenchmarkGroup]:
        """Run the complete benchmarking process."""
        try:
            results = asyncio.run(self.run_async())
        except Exception as e:
            logger.error(f"Benchmark failed: {e}", stack_info=True)
            raise
        logger.info(f"Benchmark completed: {len(results)}/{len(self.group_names)} groups succeeded")
        return results

    def list_groups(self) -> List[str]:
        return list(self.benchmark.definitions)
