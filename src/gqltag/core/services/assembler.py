"""Assembly of GraphQL source from segments and interpolated values."""

from collections.abc import Sequence
from typing import Any

from gqltag.core.entities.source_value import classify


def assemble(literals: str | Sequence[str], *args: Any) -> str:
    """Join literal segments with interpolated values into one source.

    Previously parsed documents are spliced in as their original source
    text; any other value is spliced in as ``str(value)``.

    Args:
        literals: A single source string, or the literal segments
            surrounding the values.
        *args: The interpolated values, one fewer than the segments.

    Returns:
        The assembled source text.

    Raises:
        TypeError: If the number of values does not fit the segments.

    Example:
        user_fields = gql("fragment UserFields on User { id name }")
        assemble(["query { me { ...UserFields } } ", ""], user_fields)
    """
    if isinstance(literals, str):
        literals = [literals]

    if len(args) != len(literals) - 1:
        raise TypeError(
            f"Expected {len(literals) - 1} interpolated values for "
            f"{len(literals)} segments, got {len(args)}"
        )

    parts = [literals[0]]
    for value, literal in zip(args, literals[1:]):
        parts.append(classify(value).to_source())
        parts.append(literal)

    return "".join(parts)
