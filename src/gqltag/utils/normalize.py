"""Source normalization for cache keys and fragment fingerprints."""

import re

from graphql.language import Location

# Commas are insignificant in GraphQL, same as whitespace
_INSIGNIFICANT = re.compile(r"[\s,]+")


def normalize(source: str) -> str:
    """Normalize GraphQL source text into a cache key.

    Collapses every run of whitespace and commas to a single space and
    strips the result, so texts differing only in insignificant
    formatting share one key.

    Args:
        source: The GraphQL source text.

    Returns:
        The normalized text.
    """
    return _INSIGNIFICANT.sub(" ", source).strip()


def fingerprint(location: Location) -> str:
    """Build the normalized body of the node spanning ``location``.

    Args:
        location: A parser-assigned location, still attached to its source.

    Returns:
        The normalized source substring covered by the location.
    """
    return normalize(location.source.body[location.start : location.end])
