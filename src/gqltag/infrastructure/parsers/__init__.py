"""Parser implementations."""

from gqltag.infrastructure.parsers.graphql_core import GraphQLCoreParser

__all__ = ["GraphQLCoreParser"]
