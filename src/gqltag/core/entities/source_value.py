"""Interpolated values spliced into assembled GraphQL source."""

from dataclasses import dataclass
from typing import Any

from graphql import print_ast
from graphql.language import DocumentNode


@dataclass(frozen=True)
class RawText:
    """A plain value spliced in by its text form."""

    text: str

    def to_source(self) -> str:
        return self.text


@dataclass(frozen=True)
class PreviousDocument:
    """A previously parsed document spliced in by its original source."""

    document: DocumentNode

    def to_source(self) -> str:
        """Recover the source text the document was parsed from.

        Documents produced by gqltag keep their source on ``loc``.
        Documents built without location info are printed instead.

        Returns:
            The GraphQL source text of the document.
        """
        location = self.document.loc
        if location is None or location.source is None:
            return print_ast(self.document)
        return location.source.body


SourceValue = RawText | PreviousDocument


def classify(value: Any) -> SourceValue:
    """Wrap an interpolated value in its source variant.

    Args:
        value: Any value passed alongside template segments.

    Returns:
        PreviousDocument for a DocumentNode, RawText otherwise.
    """
    if isinstance(value, (RawText, PreviousDocument)):
        return value
    if isinstance(value, DocumentNode):
        return PreviousDocument(value)
    return RawText(str(value))
