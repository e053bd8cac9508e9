"""Tests for domain entities."""

import pytest
from graphql import parse

from gqltag.core.entities import GqlConfig, PreviousDocument, RawText, classify


class TestGqlConfig:
    """Tests for GqlConfig."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = GqlConfig()

        assert config.fragment_warnings is True
        assert config.allow_legacy_fragment_variables is False
        assert config.max_size is None

    def test_custom_values(self) -> None:
        """Test setting custom configuration values."""
        config = GqlConfig(
            fragment_warnings=False,
            allow_legacy_fragment_variables=True,
            max_size=10,
        )

        assert config.fragment_warnings is False
        assert config.allow_legacy_fragment_variables is True
        assert config.max_size == 10

    @pytest.mark.parametrize("max_size", [0, -1])
    def test_invalid_max_size(self, max_size: int) -> None:
        """Test that non-positive sizes are rejected."""
        with pytest.raises(ValueError, match="max_size"):
            GqlConfig(max_size=max_size)


class TestClassify:
    """Tests for classify() and the source variants."""

    def test_document_becomes_previous_document(self) -> None:
        """Test documents are recognized by type."""
        document = parse("{ a }")

        value = classify(document)

        assert isinstance(value, PreviousDocument)
        assert value.document is document

    def test_other_values_become_raw_text(self) -> None:
        """Test non-documents are turned into text."""
        assert classify("id") == RawText("id")
        assert classify(42) == RawText("42")
        assert classify(None) == RawText("None")

    def test_dict_with_kind_is_not_a_document(self) -> None:
        """Test that shape alone does not make a document."""
        value = classify({"kind": "Document"})

        assert isinstance(value, RawText)

    def test_variants_pass_through(self) -> None:
        """Test already classified values are returned unchanged."""
        raw = RawText("{ a }")

        assert classify(raw) is raw

    def test_previous_document_uses_source_body(self) -> None:
        """Test the original text is recovered, formatting included."""
        source = "fragment F on User {\n  id\n}\n"

        assert PreviousDocument(parse(source)).to_source() == source

    def test_previous_document_without_location_is_printed(self) -> None:
        """Test documents parsed without locations fall back to printing."""
        document = parse("query Empty { a }", no_location=True)

        assert PreviousDocument(document).to_source() == "query Empty {\n  a\n}"
