from fastapi import APIRouter, HTTPException
from typing import Dict, Any

from webhook_bench.benchmark import (
    BenchmarkBusyError,
    BenchmarkExecutionError,
    DashboardBenchmark,
    UnknownBenchmarkGroupError,
)
from webhook_bench.const import HTTP_BAD_GATEWAY, HTTP_CONFLICT, HTTP_NOT_FOUND
from webhook_bench.shared.logging import LoggingManager


class BenchmarkRouter:
    """Router exposing benchmark groups and triggering runs."""

    def __init__(self, dashboard: DashboardBenchmark):
        self.dashboard = dashboard
        self.router = APIRouter(prefix="/benchmarks", tags=["benchmarks"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("", response_model=Dict[str, Any])(self.list_groups)
        self.router.get("/{group_name}", response_model=Dict[str, Any])(self.get_group)
        self.router.post("/{group_name}/run", response_model=Dict[str, Any])(self.run_group)

    @classmethod
    def get_router(cls, dashboard: DashboardBenchmark) -> APIRouter:
        """Get the router instance."""
        return cls(dashboard).router

    async def list_groups(self) -> Dict[str, Any]:
        """Current results of every benchmark group."""
        return self.dashboard.snapshot()

    async def get_group(self, group_name: str) -> Dict[str, Any]:
        try:
            return self.dashboard.get_group(group_name).to_dict()
        except UnknownBenchmarkGroupError as e:
            raise HTTPException(status_code=HTTP_NOT_FOUND, detail=str(e))

    async def run_group(self, group_name: str) -> Dict[str, Any]:
        """Run a benchmark group and return its fresh results."""
        try:
            group = await self.dashboard.run_group(group_name)
        except UnknownBenchmarkGroupError as e:
            raise HTTPException(status_code=HTTP_NOT_FOUND, detail=str(e))
        except BenchmarkBusyError as e:
            self.logger.warning(str(e))
            raise HTTPException(status_code=HTTP_CONFLICT, detail=str(e))
        except BenchmarkExecutionError as e:
            raise HTTPException(status_code=HTTP_BAD_GATEWAY, detail=e.message)
        return group.to_dict()
