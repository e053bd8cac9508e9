"""Document store interface."""

from typing import Protocol

from graphql.language import DocumentNode


class IDocumentStore(Protocol):
    """Contract for storage of parsed documents.

    Stores map a normalized source key to the sanitized document parsed
    from it. Entries are inserted once and never updated.
    """

    def get(self, key: str) -> DocumentNode | None:
        """Retrieve a document by key.

        Args:
            key: The normalized source key.

        Returns:
            The cached document, or None if not present.
        """
        ...

    def set(self, key: str, document: DocumentNode) -> None:
        """Store a document.

        Args:
            key: The normalized source key.
            document: The processed document.
        """
        ...

    def clear(self) -> None:
        """Remove all documents."""
        ...

    def __contains__(self, key: object) -> bool: ...

    def __len__(self) -> int: ...
