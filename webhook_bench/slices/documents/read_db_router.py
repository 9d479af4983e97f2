import asyncio
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from webhook_bench.const import HTTP_ERROR, READ_DB_ROUTE
from webhook_bench.shared.config import Config
from webhook_bench.shared.document_store import DocumentStore, DocumentStoreError
from webhook_bench.shared.logging import LoggingManager


class ReadDBRouter:
    """Router serving a single document looked up by primary key."""

    def __init__(self, document_store: DocumentStore, config: Config):
        self.document_store = document_store
        self.config = config
        self.router = APIRouter(tags=["documents"])
        self.logger = LoggingManager.get_logger(__name__)
        self.router.get(READ_DB_ROUTE)(self.read_document)

    @classmethod
    def get_router(cls, document_store: DocumentStore, config: Config) -> APIRouter:
        """Get the router instance."""
        return cls(document_store, config).router

    async def read_document(self) -> JSONResponse:
        """Return the configured document as JSON, or null when it does not exist."""
        collection = self.config.document_collection
        document_id = self.config.document_id
        try:
            loop = asyncio.get_running_loop()
            document = await loop.run_in_executor(
                None, self.document_store.find_one, collection, document_id
            )
        except DocumentStoreError as e:
            self.logger.error(f"Error reading document {document_id} from {collection}: {e.message}")
            raise HTTPException(status_code=HTTP_ERROR, detail=f"Failed to read document from {collection}")

        self.logger.debug(f"Read document {document_id} from {collection}: {document}")
        return JSONResponse(content=document)
