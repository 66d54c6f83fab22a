"""Factory functions for creating localization components.

Provides a convenience function for initializing a Localizer from the
library settings.
"""

from typing import Optional

from core.config import LocalizationSettings, settings as default_settings
from core.logging import get_module_logger
from localization.loader import PathLike
from localization.translator import Localizer

logger = get_module_logger()


def create_localizer(
    path: Optional[PathLike] = None,
    utf8: Optional[bool] = None,
    settings: Optional[LocalizationSettings] = None,
) -> Localizer:
    """Create and configure a Localizer instance.

    Arguments left out are taken from LocalizationSettings (LOCALES_DIR,
    LOCALES_UTF8). Without any configured path the localizer starts empty.

    Args:
        path: Directory or file to load (default: settings.LOCALES_DIR)
        utf8: Decode files as UTF-8 (default: settings.LOCALES_UTF8)
        settings: LocalizationSettings to read defaults from
            (default: the global settings.localization)

    Returns:
        Localizer: Configured localizer instance

    Raises:
        InvalidPathError: If the path does not exist

    Usage:
        # Use LOCALES_DIR from the environment / .env
        localizer = create_localizer()

        # Explicit directory
        localizer = create_localizer(path=Path("./i18n"))
    """
    config = settings if settings is not None else default_settings.localization

    if path is None:
        path = config.LOCALES_DIR
    if utf8 is None:
        utf8 = config.LOCALES_UTF8

    localizer = Localizer(path=path, utf8=utf8)

    if path:
        logger.info(
            "localizer_created",
            path=str(path),
            key_count=len(localizer.catalog),
            language_count=len(localizer.languages()),
        )
    else:
        logger.info("localizer_created_empty")

    return localizer
