"""Module-level ``gql`` entry point and process-wide toggles.

These functions operate on a default DocumentCache shared by the whole
process. Applications needing isolated caches can construct their own
DocumentCache, or swap the default one with configure().
"""

from collections.abc import Sequence
from typing import Any

from graphql.language import DocumentNode

from gqltag.core.services.document_cache import DocumentCache

# Module-level document cache reference
_document_cache = DocumentCache()


def configure(document_cache: DocumentCache) -> None:
    """Replace the default document cache used by module-level calls.

    Args:
        document_cache: The document cache instance to use.
    """
    global _document_cache
    _document_cache = document_cache


def get_document_cache() -> DocumentCache:
    """Get the default document cache.

    Returns:
        The document cache used by gql() and the toggles.
    """
    return _document_cache


def gql(literals: str | Sequence[str], *args: Any) -> DocumentNode:
    """Create a GraphQL document from source text.

    Accepts a single string, or literal segments with values
    interleaved between them. Values that are documents returned by an
    earlier gql() call are spliced in as their original source.

    Args:
        literals: A single source string, or the literal segments.
        *args: Values interleaved between the segments.

    Returns:
        The parsed, cached document.

    Raises:
        ParseError: If the assembled source is not a valid document.

    Example:
        from graphql import build_ast_schema

        type_defs = gql('''
            type Query {
                hello: String
            }
        ''')
        schema = build_ast_schema(type_defs)

        user_fields = gql("fragment UserFields on User { id name }")
        query = gql(["query { me { ...UserFields } }\n", ""], user_fields)
    """
    return _document_cache.gql(literals, *args)


def reset_caches() -> None:
    """Clear cached documents and the fragment registry.

    Intended for test isolation; not safe to interleave with parses that
    rely on the registry's history.
    """
    _document_cache.reset()


def disable_fragment_warnings() -> None:
    """Stop warning about fragment names registered with new bodies."""
    _document_cache.config.fragment_warnings = False


def enable_fragment_warnings() -> None:
    """Warn again about fragment names registered with new bodies."""
    _document_cache.config.fragment_warnings = True


def enable_experimental_fragment_variables() -> None:
    """Parse future sources with legacy fragment variables allowed."""
    _document_cache.config.allow_legacy_fragment_variables = True


def disable_experimental_fragment_variables() -> None:
    """Parse future sources without legacy fragment variables."""
    _document_cache.config.allow_legacy_fragment_variables = False
