import asyncio
from fastapi import APIRouter
from typing import Dict, Any

from webhook_bench.const import (
    HEALTH_STATUS_ERROR,
    HEALTH_STATUS_HEALTHY,
    HEALTH_STATUS_OK,
    HEALTH_STATUS_UNHEALTHY,
)
from webhook_bench.shared.logging import LoggingManager


class HealthRouter:
    """Router for health endpoints."""

    def __init__(self, document_store):
        self.document_store = document_store
        self.router = APIRouter(prefix="/health", tags=["health"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get("", response_model=Dict[str, Any])(self.health_check)

    @classmethod
    def get_router(cls, document_store) -> APIRouter:
        """Get the router instance."""
        return cls(document_store).router

    async def health_check(self) -> Dict[str, Any]:
        """Check health of the service and its document store."""
        service_status = HEALTH_STATUS_OK
        database_status = HEALTH_STATUS_OK

        try:
            self.logger.debug("Checking document store health")
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self.document_store.ping)
            self.logger.debug("Document store health check passed")
        except Exception as e:
            database_status = HEALTH_STATUS_ERROR
            self.logger.warning(f"Document store health check failed: {str(e)}")

        status = HEALTH_STATUS_HEALTHY if database_status == HEALTH_STATUS_OK else HEALTH_STATUS_UNHEALTHY
        self.logger.info(f"Health check result: {status} (service: {service_status}, database: {database_status})")

        return {
            "status": status,
            "service": service_status,
            "database": database_status
        }
