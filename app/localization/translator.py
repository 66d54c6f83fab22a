"""Lookup engine for translating messages with positional placeholders.

Placeholders are written as a percent sign followed by a positive integer,
counted from 1 (%1, %2, ...). They are replaced by the extra arguments
passed to loc(). An argument that is a list or tuple is itself translated
first: its first element is the key, the rest are its own arguments.

Example:
    localizer = Localizer("./i18n")
    localizer.loc("I'm using %1", "he", ["Linux"])
    # same as
    localizer.loc("I'm using %1", "he", localizer.loc("Linux", "he"))
"""

import re
from collections.abc import Mapping, Set
from typing import Any, Optional

from core.logging import get_module_logger
from localization.loader import CatalogLoader, PathLike
from localization.models import Catalog

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"%(\d+)")


class Localizer:
    """Service for translating messages with placeholder substitution.

    Owns one Catalog, filled by load_path() / load_structure() and read
    by loc(). Loading is not synchronized: finish it before sharing the
    instance between threads.

    Attributes:
        loader: CatalogLoader merging sources into the catalog.
    """

    def __init__(self, path: Optional[PathLike] = None, utf8: bool = True):
        """Initialize Localizer.

        Args:
            path: Optional directory of JSON localization files, or a single
                file, loaded immediately.
            utf8: Decode files as UTF-8 (default: True).
        """
        self.loader = CatalogLoader(utf8=utf8)
        if path:
            self.load_path(path)
        logger.info(
            "initialized_localizer",
            path=str(path) if path else None,
            utf8=utf8,
            key_count=len(self.catalog),
        )

    @property
    def catalog(self) -> Catalog:
        return self.loader.catalog

    def load_path(self, path: PathLike) -> None:
        """Load and merge localization files; see CatalogLoader.load_path()."""
        self.loader.load_path(path)

    def load_structure(self, structure: Any, language: Optional[str] = None) -> None:
        """Merge an in-memory structure; see CatalogLoader.load_structure()."""
        self.loader.load_structure(structure, language)

    def loc(self, key: Optional[str], language: Optional[str], *args: Any) -> Optional[str]:
        """Translate a message and substitute its placeholders.

        Args:
            key: Message key, usually the text in the base language.
            language: Language code to translate to.
            *args: Placeholder values. Lists and tuples are translated
                recursively in the same language.

        Returns:
            The translated text, or the key itself when no translation
            exists, with placeholders replaced. None if key is None. The key
            unchanged (no substitution) if language is empty.

        Raises:
            TypeError: If a placeholder refers to a mapping or set argument,
                or a nested argument starts with a non-string key.
        """
        if key is None:
            return None
        if not language:
            return key

        resolved = [self._resolve_argument(arg, language) for arg in args]

        translated = self.catalog.get(key, language)
        if translated is None:
            logger.debug("translation_fallback_to_key", key=key, language=language)
            translated = key

        return self._substitute(translated, resolved)

    def loc_for(self, language: str) -> "BoundLocalizer":
        """Get a loc() callable with the language bound.

        Args:
            language: Language code every call translates to.

        Returns:
            BoundLocalizer such that bound(key, *args) == loc(key, language, *args).
        """
        return BoundLocalizer(self, language)

    def has_translation(self, key: str, language: str) -> bool:
        """Check if key has a stored translation in language."""
        return self.catalog.get(key, language) is not None

    def languages(self) -> set:
        """Get every language present in the catalog."""
        return self.catalog.languages()

    def _resolve_argument(self, arg: Any, language: str) -> Any:
        if isinstance(arg, (list, tuple)):
            if not arg:
                return ""
            if isinstance(arg[0], (list, tuple, Mapping, Set)):
                raise TypeError(
                    f"Nested message key must be a string, got {type(arg[0]).__name__}"
                )
            return self.loc(arg[0], language, *arg[1:])
        return arg

    def _substitute(self, message: str, args: list) -> str:
        """Replace every %N in message with args[N-1].

        Indexes beyond the arguments (and None arguments) become the empty
        string. %0 is not a placeholder and is kept as is.

        Raises:
            TypeError: If a referenced argument is a mapping or a set.
        """

        def replace(match: "re.Match[str]") -> str:
            index = int(match.group(1))
            if index == 0:
                return match.group(0)
            if index > len(args):
                return ""
            value = args[index - 1]
            if value is None:
                return ""
            if isinstance(value, (Mapping, Set)):
                raise TypeError(
                    f"Placeholder %{index} argument must be a scalar or a list, "
                    f"got {type(value).__name__}"
                )
            return str(value)

        return PLACEHOLDER_PATTERN.sub(replace, str(message))


class BoundLocalizer:
    """loc() with the language curried away.

    Example:
        french = localizer.loc_for("fr")
        french("Welcome!")  # localizer.loc("Welcome!", "fr")
    """

    def __init__(self, localizer: Localizer, language: str):
        self.localizer = localizer
        self.language = language

    def __call__(self, key: Optional[str], *args: Any) -> Optional[str]:
        return self.localizer.loc(key, self.language, *args)

    def __repr__(self) -> str:
        return f"BoundLocalizer(language={self.language!r})"
