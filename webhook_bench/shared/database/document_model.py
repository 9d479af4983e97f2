"""SQLAlchemy model storing JSON documents keyed by collection and id."""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import JSON, String, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class DocumentModel(Base):
    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(String(255), primary_key=True)
    document_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    body: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(TIMESTAMP, server_default=func.now())

    __table_args__ = ({"extend_existing": True},)
