"""Core domain layer for gqltag."""

from gqltag.core.entities import GqlConfig, PreviousDocument, RawText
from gqltag.core.exceptions import (
    DocumentCycleError,
    FragmentConflictWarning,
    GqlTagError,
    ParseError,
)
from gqltag.core.interfaces import IDocumentParser, IDocumentStore
from gqltag.core.services import DocumentCache, FragmentRegistry

__all__ = [
    # Entities
    "GqlConfig",
    "PreviousDocument",
    "RawText",
    # Errors
    "GqlTagError",
    "ParseError",
    "DocumentCycleError",
    "FragmentConflictWarning",
    # Interfaces
    "IDocumentParser",
    "IDocumentStore",
    # Services
    "DocumentCache",
    "FragmentRegistry",
]
