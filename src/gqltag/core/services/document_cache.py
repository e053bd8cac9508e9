"""Document cache - parses each distinct GraphQL source once."""

import logging
import os
import sys
import threading
import warnings
from collections.abc import Sequence
from typing import Any

from graphql import GraphQLError
from graphql.language import DefinitionNode, DocumentNode, FragmentDefinitionNode

from gqltag.core.entities.gql_config import GqlConfig
from gqltag.core.exceptions import FragmentConflictWarning, ParseError
from gqltag.core.interfaces.document_store import IDocumentStore
from gqltag.core.interfaces.parser import IDocumentParser
from gqltag.core.services.assembler import assemble
from gqltag.core.services.fragment_registry import FragmentRegistry
from gqltag.core.services.location_stripper import strip_locations
from gqltag.infrastructure.parsers.graphql_core import GraphQLCoreParser
from gqltag.infrastructure.stores.memory import InMemoryDocumentStore
from gqltag.utils.normalize import fingerprint, normalize

logger = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
) + os.sep


class DocumentCache:
    """Domain service that parses, checks and memoizes GraphQL documents.

    Composes a parser, a document store and a fragment registry. A
    source is parsed on its first use only; later calls with the same
    text (up to whitespace and commas) return the very same document
    object without touching the parser or the registry.
    """

    def __init__(
        self,
        config: GqlConfig | None = None,
        parser: IDocumentParser | None = None,
        store: IDocumentStore | None = None,
        registry: FragmentRegistry | None = None,
    ) -> None:
        """Initialize the document cache.

        Args:
            config: Optional configuration. Uses defaults if not provided.
            parser: The parser used on cache misses. Defaults to
                graphql-core.
            store: The document store. Defaults to an in-memory store
                sized by ``config.max_size``.
            registry: The fragment registry. Defaults to an empty one.
        """
        self._config = config if config is not None else GqlConfig()
        self._parser = parser if parser is not None else GraphQLCoreParser()
        self._store = (
            store
            if store is not None
            else InMemoryDocumentStore(maxsize=self._config.max_size)
        )
        self._registry = registry if registry is not None else FragmentRegistry()

        # Guards the check-parse-insert sequence, the registry and reset
        self._lock = threading.RLock()

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> GqlConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def registry(self) -> FragmentRegistry:
        """Get the fragment registry."""
        return self._registry

    @property
    def store(self) -> IDocumentStore:
        """Get the document store."""
        return self._store

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, total lookups and cached
            document count.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
            "documents": len(self._store),
        }

    def gql(self, literals: str | Sequence[str], *args: Any) -> DocumentNode:
        """Assemble source from segments and values, then parse it.

        Args:
            literals: A single source string, or the literal segments.
            *args: Values interleaved between the segments.

        Returns:
            The cached document for the assembled source.
        """
        return self.parse_document(assemble(literals, *args))

    def parse_document(self, source: str) -> DocumentNode:
        """Get the document for a GraphQL source, parsing it on first use.

        Args:
            source: The GraphQL source text.

        Returns:
            The location-stripped, fragment-deduplicated document.

        Raises:
            ParseError: If the source is not a valid GraphQL document.
        """
        key = normalize(source)

        with self._lock:
            document = self._store.get(key)
            if document is not None:
                self._hits += 1
                return document

            self._misses += 1
            logger.debug("Document cache miss, parsing %d characters", len(source))

            parsed = self._parse(source)
            document, fragments = self._dedupe_fragments(parsed)
            strip_locations(document)

            # Only documents that made it through stripping touch the registry
            self._register_fragments(fragments)
            self._store.set(key, document)

        return document

    def process_fragments(self, document: DocumentNode) -> DocumentNode:
        """Register fragment bodies and drop duplicate fragment definitions.

        Each fragment body is registered under its name; a name seen
        before with another body is a conflict and, if enabled, issues
        a FragmentConflictWarning. Within this document, fragment
        definitions whose normalized text was already seen are dropped.

        Must run before location stripping, since fingerprints are read
        from the fragments' source spans.

        Args:
            document: A freshly parsed document with location info.

        Returns:
            A new document holding the kept definitions in order.

        Raises:
            ParseError: If a fragment has no location info. Nothing is
                registered in that case.
        """
        processed, fragments = self._dedupe_fragments(document)
        self._register_fragments(fragments)
        return processed

    def _dedupe_fragments(
        self, document: DocumentNode
    ) -> tuple[DocumentNode, list[tuple[str, str]]]:
        seen: set[str] = set()
        definitions: list[DefinitionNode] = []
        fragments: list[tuple[str, str]] = []

        for definition in document.definitions:
            if not isinstance(definition, FragmentDefinitionNode):
                definitions.append(definition)
                continue

            name = definition.name.value
            if definition.loc is None:
                raise ParseError(
                    f"Fragment {name} has no location info to fingerprint."
                )
            body = fingerprint(definition.loc)
            fragments.append((name, body))

            if body not in seen:
                seen.add(body)
                definitions.append(definition)

        processed = DocumentNode(definitions=tuple(definitions), loc=document.loc)
        return processed, fragments

    def _register_fragments(self, fragments: list[tuple[str, str]]) -> None:
        with self._lock:
            for name, body in fragments:
                if not self._registry.register(name, body):
                    continue

                logger.debug("Fragment %s registered with a new body", name)
                if self._config.fragment_warnings:
                    warnings.warn(
                        FragmentConflictWarning(name),
                        stacklevel=_caller_stacklevel(),
                    )

    def reset(self) -> None:
        """Clear cached documents, registered fragments and statistics."""
        with self._lock:
            self._store.clear()
            self._registry.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Document cache and fragment registry cleared")

    def _parse(self, source: str) -> DocumentNode:
        try:
            parsed = self._parser.parse(
                source,
                allow_legacy_fragment_variables=(
                    self._config.allow_legacy_fragment_variables
                ),
            )
        except GraphQLError as exc:
            logger.debug("Failed to parse GraphQL source: %s", exc.message)
            raise ParseError(
                f"Not a valid GraphQL document: {exc.message}", source
            ) from exc

        if not isinstance(parsed, DocumentNode):
            raise ParseError("Not a valid GraphQL document.", source)

        return parsed


def _caller_stacklevel() -> int:
    """Get the stacklevel of the first frame outside gqltag.

    Counted from the function calling warnings.warn, so conflict warnings
    point at the application line that asked for the document.
    """
    frame = sys._getframe(1)
    level = 1
    while frame is not None and frame.f_code.co_filename.startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level
