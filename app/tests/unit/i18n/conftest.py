"""Feature-level fixtures for string resolver tests."""

import pytest

from tests.factories.i18n import make_strings


@pytest.fixture
def diamond_data():
    """Languages with diamond and cyclic inheritance.

    a inherits b and c, both of which inherit d.
    x and y inherit each other.
    """
    return {
        "a": {".inherits": ["b", "c"], "ui": {"only_a": "A"}},
        "b": {".inherits": "d", "ui": {"shared": "B"}},
        "c": {".inherits": "d", "ui": {"shared": "C", "only_c": "C"}},
        "d": {"ui": {"only_d": "D"}},
        "x": {".inherits": "y", "ui": {"loop": "X"}},
        "y": {".inherits": "x", "ui": {"loop": "Y", "only_y": "Y"}},
        "en": {"ui": {"only_en": "EN"}},
    }


@pytest.fixture
def accept_preferences():
    """Locale preferences in descending order."""
    return {"de": 1.0, "fr": 0.8, "xx": 0.5}


@pytest.fixture
def accept_strings(translation_data, accept_preferences):
    """Strings resolver using locale preferences."""
    return make_strings(
        translation_data,
        accept=True,
        accept_languages=lambda: accept_preferences,
    )
