"""Exceptions raised while loading localization sources.

Every error derives from LocalizationError, and also from the builtin
exception matching its nature, so callers can catch either.

Example:
    try:
        localizer.load_path("./i18n")
    except LocalizationError as e:
        logger.error("localization_load_failed", error=str(e))
"""


class LocalizationError(Exception):
    """Base exception for all localization errors."""

    pass


class InvalidPathError(LocalizationError, ValueError):
    """Raised when a path is neither an existing directory nor a file.

    Example:
        >>> localizer.load_path("/nonexistent")
        Traceback (most recent call last):
        ...
        InvalidPathError: Path must be to a directory or a JSON file: /nonexistent
    """

    pass


class LocalizationIOError(LocalizationError, OSError):
    """Raised when a localization directory or file cannot be opened or read."""

    pass


class DecodeError(LocalizationError, ValueError):
    """Raised when a localization file is not valid (relaxed) JSON.

    Also raised when the decoded document does not have the shape its
    file name promises (a mapping, or a mapping of mappings for collections).

    Attributes:
        source: File the malformed content came from.
    """

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class InvalidInputError(LocalizationError, TypeError):
    """Raised when load_structure() is given something other than a mapping."""

    pass
