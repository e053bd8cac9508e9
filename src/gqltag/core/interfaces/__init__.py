"""Interfaces (protocols) for gqltag."""

from gqltag.core.interfaces.document_store import IDocumentStore
from gqltag.core.interfaces.parser import IDocumentParser

__all__ = [
    "IDocumentParser",
    "IDocumentStore",
]
