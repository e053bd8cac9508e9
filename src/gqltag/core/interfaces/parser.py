"""Document parser interface."""

from typing import Protocol

from graphql.language import DocumentNode


class IDocumentParser(Protocol):
    """Contract for turning GraphQL source text into a document.

    The cache treats the parser as a black box: any exception it raises,
    or any result that is not a DocumentNode, fails the call.
    """

    def parse(
        self,
        source: str,
        allow_legacy_fragment_variables: bool = False,
    ) -> DocumentNode:
        """Parse source text.

        Args:
            source: The full GraphQL source text.
            allow_legacy_fragment_variables: Whether fragment definitions
                may declare variables.

        Returns:
            The parsed document, with location info attached.
        """
        ...
