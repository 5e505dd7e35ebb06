"""Shared pytest fixtures."""

import pytest

from tests.factories.i18n import make_strings, make_translation_data


@pytest.fixture
def translation_data():
    """Raw translation data shared by the i18n tests."""
    return make_translation_data()


@pytest.fixture
def strings(translation_data):
    """Strings resolver searching the ui and errors namespaces."""
    return make_strings(translation_data)
