"""Database models for the document store."""

from .base import Base
from .document_model import DocumentModel

__all__ = ["Base", "DocumentModel"]
