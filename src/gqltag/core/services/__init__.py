"""Domain services for gqltag."""

from gqltag.core.services.assembler import assemble
from gqltag.core.services.document_cache import DocumentCache
from gqltag.core.services.fragment_registry import FragmentRegistry
from gqltag.core.services.location_stripper import strip_locations

__all__ = [
    "DocumentCache",
    "FragmentRegistry",
    "assemble",
    "strip_locations",
]
