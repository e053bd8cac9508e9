"""In-memory document store implementation."""

from collections.abc import MutableMapping

from cachetools import LRUCache  # type: ignore[import-untyped]
from graphql.language import DocumentNode


class InMemoryDocumentStore:
    """In-memory document store, unbounded or LRU-bounded.

    Without a maxsize, documents live until clear() is called. With a
    maxsize, cachetools evicts the least recently used document; an
    evicted source is simply parsed again on its next use.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        """Initialize the in-memory document store.

        Args:
            maxsize: Maximum number of documents, or None for no limit.
        """
        self._maxsize = maxsize
        self._documents: MutableMapping[str, DocumentNode]
        if maxsize is None:
            self._documents = {}
        else:
            self._documents = LRUCache(maxsize=maxsize)

    @property
    def maxsize(self) -> int | None:
        return self._maxsize

    def get(self, key: str) -> DocumentNode | None:
        """Retrieve a document by key.

        Args:
            key: The normalized source key.

        Returns:
            The cached document, or None if not present.
        """
        return self._documents.get(key)

    def set(self, key: str, document: DocumentNode) -> None:
        """Store a document.

        Args:
            key: The normalized source key.
            document: The processed document.
        """
        self._documents[key] = document

    def clear(self) -> None:
        """Remove all documents."""
        self._documents.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._documents

    def __len__(self) -> int:
        return len(self._documents)
