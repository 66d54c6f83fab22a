"""Feature-level fixtures for localization tests.

Provides on-disk localization directories and loaded localizers.
"""

import pytest

from localization import Localizer
from tests.factories.localization import make_localizer, write_source


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample JSON localization files.

    Returns a directory structure like:
    - es_and_nl.coll.json  (relaxed JSON: comments, trailing commas)
    - he.json
    - .backup.json         (dotfile, ignored)
    - notes.txt            (not JSON, ignored)
    """
    write_source(
        tmp_path,
        "es_and_nl.coll.json",
        """{
    "Welcome!": {
        "es": "Bienvenido!",
        "nl": "Welkom!",
    },
    "I'm using %1": {
        "es": "Estoy usando %1",
        "nl": "Ik gebruik %1",
    },
    "Linux": {} // this line can also be missing entirely
}
""",
        raw=True,
    )
    write_source(
        tmp_path,
        "he.json",
        {
            "Welcome!": "ברוכים הבאים!",
            "I'm using %1": "אני משתמש ב%1",
            "Linux": "לינוקס",
        },
    )
    write_source(tmp_path, ".backup.json", {"Welcome!": "stale"})
    write_source(tmp_path, "notes.txt", "not a localization file", raw=True)
    return tmp_path


@pytest.fixture
def localizer(temp_locales_dir):
    """Create Localizer loaded from the temporary locales directory."""
    return Localizer(temp_locales_dir)


@pytest.fixture
def scenario_localizer():
    """Create Localizer loaded with the hey man / generic / what's up document."""
    return make_localizer()
