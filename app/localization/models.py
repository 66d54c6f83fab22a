"""Localization models.

Defines the in-memory catalog and the classification of source files.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Set

COLLECTION_SUFFIX = ".coll.json"
JSON_SUFFIX = ".json"


class SourceKind(str, Enum):
    """Kind of localization source document, decided by its file name."""

    SINGLE_LANGUAGE = "single_language"
    COLLECTION = "collection"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_filename(cls, filename: str) -> "SourceKind":
        """Classify a file name by suffix.

        ".coll.json" is checked before ".json" since every collection
        file name also ends with ".json".

        Args:
            filename: Base name of the file (e.g., "he.json", "main.coll.json").

        Returns:
            Matching SourceKind.
        """
        if filename.endswith(COLLECTION_SUFFIX):
            return cls.COLLECTION
        if filename.endswith(JSON_SUFFIX):
            return cls.SINGLE_LANGUAGE
        return cls.UNRECOGNIZED


def language_from_filename(filename: str) -> str:
    """Get the implicit language of a single-language file ("he.json" -> "he")."""
    return filename[: -len(JSON_SUFFIX)]


@dataclass
class Catalog:
    """Merged translations of every loaded source.

    Attributes:
        translations: Nested dict structure {message_key: {language: text}}.
    """

    translations: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.translations

    def __len__(self) -> int:
        return len(self.translations)

    def keys(self) -> Iterator[str]:
        """Iterate over every known message key."""
        return iter(self.translations)

    def get(self, key: str, language: str) -> Optional[str]:
        """Retrieve the translation of a key in one language.

        Args:
            key: Message key.
            language: Language code (e.g., "he").

        Returns:
            Translated text, or None if the key or language is unknown.
        """
        if not isinstance(key, Hashable):
            return None
        return self.translations.get(key, {}).get(language)

    def translation_set(self, key: str) -> Dict[str, Any]:
        """Get all translations of a key, keyed by language."""
        return dict(self.translations.get(key, {}))

    def languages(self) -> Set[str]:
        """Get every language code present in the catalog."""
        found: Set[str] = set()
        for translation_set in self.translations.values():
            found.update(translation_set)
        return found

    def register(self, key: str) -> None:
        """Make a key known without adding any translation."""
        self.translations.setdefault(key, {})

    def set_translation(self, key: str, language: str, text: Any) -> None:
        """Set one (key, language) pair, overwriting any previous value."""
        self.translations.setdefault(key, {})[language] = text

    def merge_collection(self, document: Mapping[str, Mapping[str, Any]]) -> None:
        """Merge a {key: {language: text}} document.

        Pairs missing from the document are left untouched.
        """
        for key, translation_set in document.items():
            self.register(key)
            for language, text in translation_set.items():
                self.set_translation(key, language, text)

    def merge_single_language(
        self, document: Mapping[str, Any], language: str
    ) -> None:
        """Merge a {key: text} document, attributing every text to one language."""
        for key, text in document.items():
            self.set_translation(key, language, text)
