"""Pytest configuration for gqltag tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_default_cache():
    """Give each test a clean default document cache."""
    import gqltag.tag

    # Store original values
    original_cache = gqltag.tag._document_cache
    original_warnings = original_cache.config.fragment_warnings
    original_legacy = original_cache.config.allow_legacy_fragment_variables
    original_cache.reset()

    yield

    # Restore original values after test
    gqltag.tag._document_cache = original_cache
    original_cache.config.fragment_warnings = original_warnings
    original_cache.config.allow_legacy_fragment_variables = original_legacy
    original_cache.reset()
