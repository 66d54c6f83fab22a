"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_catalog,
    make_collection_document,
    make_localizer,
    write_source,
)

__all__ = [
    "make_catalog",
    "make_collection_document",
    "make_localizer",
    "write_source",
]
