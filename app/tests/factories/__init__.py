"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_i18n,
    make_language,
    make_memory_source,
    make_store,
)

__all__ = [
    "make_catalog",
    "make_i18n",
    "make_language",
    "make_memory_source",
    "make_store",
]
