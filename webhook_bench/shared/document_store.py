"""Pooled document store backed by SQLAlchemy.

The store owns one engine (and therefore one connection pool) for the whole
process. ``open()`` is called once at application startup and ``close()`` at
shutdown; request handlers only borrow connections from the pool.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import create_engine, select, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from webhook_bench.const import DOCUMENT_ID_FIELD
from .database import Base, DocumentModel


logger = logging.getLogger(__name__)


class DocumentStoreError(Exception):
    """Raised when the document store cannot be reached or queried."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class DocumentStore:
    """Process-wide document store with an explicit open/close lifecycle."""

    def __init__(self, database_url: str, pool_size: int = 5, max_overflow: int = 10):
        """Initialize the store without connecting.

        Args:
            database_url: SQLAlchemy connection URL (sqlite:///..., postgresql://...)
            pool_size: Number of connections to keep in the pool (non-SQLite only)
            max_overflow: Additional connections allowed beyond pool_size (non-SQLite only)
        """
        self._url = make_url(database_url)
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self._engine: Optional[Engine] = None

    @property
    def masked_url(self) -> str:
        """Connection URL with the password hidden, safe for logs."""
        return self._url.render_as_string(hide_password=True)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def _engine_kwargs(self) -> Dict[str, Any]:
        if self._url.get_backend_name() == "sqlite":
            kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            if self._url.database in (None, "", ":memory:"):
                # A single shared connection keeps the in-memory database alive
                kwargs["poolclass"] = StaticPool
            return kwargs
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": True,
        }

    def open(self) -> None:
        """Create the pooled engine and ensure the schema exists."""
        if self._engine is not None:
            return
        logger.info(f"Opening document store: {self.masked_url}")
        try:
            engine = create_engine(self._url, **self._engine_kwargs())
            Base.metadata.create_all(engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to open document store {self.masked_url}: {e}")
            raise DocumentStoreError("Unable to open document store", cause=e) from e
        self._engine = engine

    def close(self) -> None:
        """Dispose of the connection pool. Safe to call more than once."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Document store closed")

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise DocumentStoreError("Document store is not open")
        return self._engine

    def find_one(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a single document by primary key.

        Args:
            collection: Collection name.
            document_id: Primary key of the document.

        Returns:
            The document including its ``_id`` field, or None when it does not exist.

        Raises:
            DocumentStoreError: If the store is closed or the query fails.
        """
        engine = self._require_engine()
        try:
            with Session(engine) as session:
                stmt = select(DocumentModel).where(
                    DocumentModel.collection == collection,
                    DocumentModel.document_id == document_id,
                )
                document = session.scalars(stmt).first()
                if document is None:
                    logger.debug(f"Document {document_id} not found in collection {collection}")
                    return None
                return {DOCUMENT_ID_FIELD: document.document_id, **document.body}
        except SQLAlchemyError as e:
            logger.error(f"Failed to read document {document_id} from {collection}: {e}")
            raise DocumentStoreError(f"Failed to read from collection {collection}", cause=e) from e

    def insert_one(self, collection: str, document_id: str, document: Dict[str, Any]) -> None:
        """Insert or replace a document."""
        engine = self._require_engine()
        body = {k: v for k, v in document.items() if k != DOCUMENT_ID_FIELD}
        try:
            with Session(engine) as session:
                session.merge(DocumentModel(collection=collection, document_id=document_id, body=body))
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to write document {document_id} to {collection}: {e}")
            raise DocumentStoreError(f"Failed to write to collection {collection}", cause=e) from e

    def ping(self) -> bool:
        """Check that a connection can be borrowed from the pool."""
        engine = self._require_engine()
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            raise DocumentStoreError("Document store ping failed", cause=e) from e
