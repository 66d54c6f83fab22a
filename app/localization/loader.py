"""Catalog loading from JSON files and in-memory structures.

Two kinds of JSON source files are understood:

- ``<lang>.json``: single-language file, ``{"<key>": "<text>", ...}``
- ``<name>.coll.json``: collection file, ``{"<key>": {"<lang>": "<text>"}, ...}``

Files are decoded as relaxed JSON (trailing commas and ``//`` comments are
accepted) and merged into one Catalog, later sources overriding earlier
ones per (key, language) pair.
"""

import os
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import json5

from core.logging import get_module_logger
from localization.errors import (
    DecodeError,
    InvalidInputError,
    InvalidPathError,
    LocalizationIOError,
)
from localization.models import Catalog, SourceKind, language_from_filename

logger = get_module_logger()

PathLike = Union[str, "os.PathLike[str]"]


class CatalogLoader:
    """Loads localization sources into a Catalog.

    Attributes:
        catalog: Catalog every load is merged into.
        utf8: Decode files as UTF-8. When False, bytes are mapped to
            characters one-to-one (Latin-1) so legacy files pass through
            unchanged.
    """

    def __init__(self, catalog: Optional[Catalog] = None, utf8: bool = True):
        self.catalog = catalog if catalog is not None else Catalog()
        self.utf8 = utf8

    def load_path(self, path: PathLike) -> None:
        """Load and merge a directory of localization files, or one file.

        In a directory, only immediate *.json files not starting with a dot
        are loaded, in alphabetical order.

        Args:
            path: Directory of JSON files, or a single JSON file.

        Raises:
            InvalidPathError: If path is empty or neither a directory nor a file.
            LocalizationIOError: If a directory or file cannot be read.
            DecodeError: If a file is not valid relaxed JSON.
        """
        if not path:
            raise InvalidPathError("You must provide a path to localization directory.")

        path = Path(path)
        if path.is_dir():
            files = self._list_directory(path)
        elif path.exists():
            files = [path]
        else:
            raise InvalidPathError(f"Path must be to a directory or a JSON file: {path}")

        for source_file in files:
            self._load_file(source_file)

        logger.info(
            "loaded_catalog_path",
            path=str(path),
            file_count=len(files),
            key_count=len(self.catalog),
        )

    def load_structure(
        self,
        structure: Any,
        language: Optional[str] = None,
    ) -> None:
        """Merge an in-memory structure into the catalog.

        Args:
            structure: {key: text} when language is given, otherwise
                {key: {language: text}}.
            language: Language every text of a flat structure belongs to.

        Raises:
            InvalidInputError: If structure (or one of its translation sets)
                is not a mapping.
        """
        if not isinstance(structure, Mapping):
            raise InvalidInputError("The structure to load must be a mapping")

        if language:
            self.catalog.merge_single_language(structure, language)
        else:
            for key, translation_set in structure.items():
                if not isinstance(translation_set, Mapping):
                    raise InvalidInputError(
                        f"Translations of {key!r} must be a mapping of language to text"
                    )
            self.catalog.merge_collection(structure)

        logger.debug(
            "loaded_catalog_structure",
            language=language,
            entry_count=len(structure),
        )

    def _list_directory(self, directory: Path) -> List[Path]:
        """List the localization files of a directory, sorted by name."""
        try:
            names = os.listdir(directory)
        except OSError as e:
            raise LocalizationIOError(
                f"Can't open localization directory {directory}: {e}"
            ) from e

        return [
            directory / name
            for name in sorted(names)
            if not name.startswith(".")
            and name.endswith(".json")
            and (directory / name).is_file()
        ]

    def _load_file(self, source_file: Path) -> None:
        kind = SourceKind.from_filename(source_file.name)
        if kind is SourceKind.UNRECOGNIZED:
            logger.info("skipped_unrecognized_source", file=str(source_file))
            return

        document = self._decode(self._read(source_file), source_file)

        if kind is SourceKind.COLLECTION:
            for key, translation_set in document.items():
                if not isinstance(translation_set, Mapping):
                    raise DecodeError(
                        f"Collection entry {key!r} in {source_file} must be an object",
                        source=str(source_file),
                    )
            self.catalog.merge_collection(document)
        else:
            self.catalog.merge_single_language(
                document, language_from_filename(source_file.name)
            )

        logger.debug(
            "loaded_localization_file",
            file=str(source_file),
            kind=kind.value,
            key_count=len(document),
        )

    def _read(self, source_file: Path) -> bytes:
        try:
            handle = open(source_file, "rb")
        except OSError as e:
            raise LocalizationIOError(
                f"Can't open localization file {source_file.name}: {e}"
            ) from e

        try:
            return handle.read()
        except OSError as e:
            raise LocalizationIOError(
                f"Can't read localization file {source_file.name}: {e}"
            ) from e
        finally:
            try:
                handle.close()
            except OSError as e:
                logger.warning(
                    "localization_file_close_failed",
                    file=str(source_file),
                    error=str(e),
                )

    def _decode(self, raw: bytes, source_file: Path) -> Mapping[str, Any]:
        try:
            text = raw.decode("utf-8") if self.utf8 else raw.decode("latin-1")
            document = json5.loads(text)
        except ValueError as e:
            # UnicodeDecodeError is a ValueError too
            logger.error(
                "localization_decode_failed",
                file=str(source_file),
                error=str(e),
            )
            raise DecodeError(
                f"Failed to parse {source_file}: {e}", source=str(source_file)
            ) from e

        if not isinstance(document, Mapping):
            raise DecodeError(
                f"Localization file {source_file} must contain a JSON object",
                source=str(source_file),
            )
        return document
