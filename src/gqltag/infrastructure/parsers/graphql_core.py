"""graphql-core parser implementation."""

from graphql import parse
from graphql.language import DocumentNode


class GraphQLCoreParser:
    """Parser backed by ``graphql.parse``.

    Location info is always kept: fragment fingerprints and document
    composition both read the source back from it.
    """

    def parse(
        self,
        source: str,
        allow_legacy_fragment_variables: bool = False,
    ) -> DocumentNode:
        """Parse source text with graphql-core.

        Args:
            source: The full GraphQL source text.
            allow_legacy_fragment_variables: Whether fragment definitions
                may declare variables.

        Returns:
            The parsed document.

        Raises:
            GraphQLSyntaxError: If the source is not valid GraphQL.
        """
        return parse(
            source,
            no_location=False,
            allow_legacy_fragment_variables=allow_legacy_fragment_variables,
        )
