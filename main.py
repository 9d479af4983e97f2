"""Main entry point for the Webhook Bench service."""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from webhook_bench.benchmark import DashboardBenchmark
from webhook_bench.const import APP_DESCRIPTION, APP_TITLE, APP_VERSION
from webhook_bench.shared.config import Config
from webhook_bench.shared.document_store import DocumentStore
from webhook_bench.shared.logging import LoggingManager
from webhook_bench.slices.benchmark.benchmark_router import BenchmarkRouter
from webhook_bench.slices.documents.read_db_router import ReadDBRouter
from webhook_bench.slices.health.health_router import HealthRouter
from webhook_bench.slices.hello.hello_router import HelloRouter


class WebhookBenchApp:
    """Main application class for Webhook Bench."""

    def __init__(
        self,
        config: Optional[Config] = None,
        document_store: Optional[DocumentStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or Config()

        # Setup logging
        LoggingManager.setup_logging(self.config.log_level, self.config)
        self.logger = LoggingManager.get_logger(__name__)

        # The store is opened and closed by the application lifespan
        self.document_store = document_store or DocumentStore(
            self.config.database_url.get_secret_value(),
            pool_size=self.config.database_pool_size,
            max_overflow=self.config.database_max_overflow,
        )

        self.dashboard = DashboardBenchmark(self.config, transport=transport)

        # Initialize routers
        self.hello_router = HelloRouter.get_router()
        self.read_db_router = ReadDBRouter.get_router(self.document_store, self.config)
        self.health_router = HealthRouter.get_router(self.document_store)
        self.benchmark_router = BenchmarkRouter.get_router(self.dashboard)

        # Create FastAPI app
        self.app = FastAPI(
            title=APP_TITLE,
            description=APP_DESCRIPTION,
            version=APP_VERSION,
            lifespan=self.lifespan,
        )

        # Mount slices
        self.app.include_router(self.hello_router)
        self.app.include_router(self.read_db_router)
        self.app.include_router(self.health_router)
        self.app.include_router(self.benchmark_router)

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        """Open the pooled document store at startup and release it on shutdown."""
        self.document_store.open()
        self.logger.info(f"{APP_TITLE} started")
        try:
            yield
        finally:
            self.document_store.close()
            self.logger.info(f"{APP_TITLE} stopped")


# Create application instance
app_instance = WebhookBenchApp()
app = app_instance.app


if __name__ == "__main__":
    import uvicorn

    server_config = app_instance.config
    uvicorn.run(app, host=server_config.server_host, port=server_config.server_port)
