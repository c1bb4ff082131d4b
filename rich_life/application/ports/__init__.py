"""Application ports package."""

from .database import DatabaseEnginePort
from .document_storage import DocumentStoragePort

__all__ = ["DatabaseEnginePort", "DocumentStoragePort"]
