"""Document store implementations."""

from gqltag.infrastructure.stores.memory import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
