"""Localization - dead simple message translation with JSON files.

Loads single-language (<lang>.json) and multi-language (<name>.coll.json)
files into one catalog and translates messages with positional %N
placeholders, falling back to the message itself when untranslated.

Main components:
- models: Catalog, SourceKind
- loader: CatalogLoader for files and in-memory structures
- translator: Localizer (loc / loc_for) and BoundLocalizer
- factory: create_localizer() from settings
- errors: LocalizationError and its subclasses
"""

from localization.errors import (
    DecodeError,
    InvalidInputError,
    InvalidPathError,
    LocalizationError,
    LocalizationIOError,
)
from localization.factory import create_localizer
from localization.loader import CatalogLoader
from localization.models import Catalog, SourceKind
from localization.translator import BoundLocalizer, Localizer

__all__ = [
    "Catalog",
    "SourceKind",
    "CatalogLoader",
    "Localizer",
    "BoundLocalizer",
    "create_localizer",
    "LocalizationError",
    "InvalidPathError",
    "LocalizationIOError",
    "DecodeError",
    "InvalidInputError",
]
