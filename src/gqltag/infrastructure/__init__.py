"""Infrastructure layer implementations for gqltag."""

from gqltag.infrastructure.parsers import GraphQLCoreParser
from gqltag.infrastructure.stores import InMemoryDocumentStore

__all__ = [
    "GraphQLCoreParser",
    "InMemoryDocumentStore",
]
