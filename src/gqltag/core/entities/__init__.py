"""Domain entities for gqltag."""

from gqltag.core.entities.gql_config import GqlConfig
from gqltag.core.entities.source_value import (
    PreviousDocument,
    RawText,
    SourceValue,
    classify,
)

__all__ = [
    "GqlConfig",
    "PreviousDocument",
    "RawText",
    "SourceValue",
    "classify",
]
