"""gqltag - parse-once GraphQL documents with fragment consistency checks.

Turns GraphQL source text into graphql-core documents, parsing each
distinct source (ignoring whitespace and commas) only once per process.
Fragment definitions are tracked by name across every parsed document,
and a warning is issued when one name is given two different bodies.

Example:
    from graphql import build_ast_schema
    from gqltag import gql

    type_defs = gql('''
        type Query {
            user(id: ID!): User
        }

        type User {
            id: ID!
            name: String!
        }
    ''')
    schema = build_ast_schema(type_defs)

Composing documents from fragments:
    user_fields = gql('''
        fragment UserFields on User {
            id
            name
        }
    ''')

    query = gql(
        ["query GetUser($id: ID!) { user(id: $id) { ...UserFields } }\\n", ""],
        user_fields,
    )

Isolated caches:
    from gqltag import DocumentCache, GqlConfig

    cache = DocumentCache(config=GqlConfig(fragment_warnings=False))
    document = cache.gql("{ hello }")
"""

from gqltag.core.entities import (
    GqlConfig,
    PreviousDocument,
    RawText,
    SourceValue,
    classify,
)
from gqltag.core.exceptions import (
    DocumentCycleError,
    FragmentConflictWarning,
    GqlTagError,
    ParseError,
)
from gqltag.core.interfaces import IDocumentParser, IDocumentStore
from gqltag.core.services import (
    DocumentCache,
    FragmentRegistry,
    assemble,
    strip_locations,
)
from gqltag.infrastructure import GraphQLCoreParser, InMemoryDocumentStore
from gqltag.tag import (
    configure,
    disable_experimental_fragment_variables,
    disable_fragment_warnings,
    enable_experimental_fragment_variables,
    enable_fragment_warnings,
    get_document_cache,
    gql,
    reset_caches,
)
from gqltag.utils.normalize import fingerprint, normalize

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entry point
    "gql",
    # Administration
    "reset_caches",
    "disable_fragment_warnings",
    "enable_fragment_warnings",
    "enable_experimental_fragment_variables",
    "disable_experimental_fragment_variables",
    "configure",
    "get_document_cache",
    # Core entities
    "GqlConfig",
    "PreviousDocument",
    "RawText",
    "SourceValue",
    "classify",
    # Errors
    "GqlTagError",
    "ParseError",
    "DocumentCycleError",
    "FragmentConflictWarning",
    # Core interfaces
    "IDocumentParser",
    "IDocumentStore",
    # Core services
    "DocumentCache",
    "FragmentRegistry",
    "assemble",
    "strip_locations",
    # Infrastructure implementations
    "GraphQLCoreParser",
    "InMemoryDocumentStore",
    # Normalization
    "normalize",
    "fingerprint",
]
