"""Utilities for gqltag."""
