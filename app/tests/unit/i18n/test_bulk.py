"""Tests for Strings bulk helpers: find_keys, str_array and str_struct."""

import re

import pytest

from tests.factories.i18n import make_strings


@pytest.mark.unit
class TestFindKeys:
    """Tests for Strings.find_keys()."""

    def test_matching_keys(self, strings):
        """find_keys() returns keys matching the pattern."""
        assert strings.find_keys(r"^menu\.") == ["menu.open", "menu.close"]

    def test_strip(self, strings):
        """strip removes the matched part of each key."""
        assert strings.find_keys(r"^menu\.", strip=True) == ["open", "close"]

    def test_compiled_pattern(self, strings):
        """A compiled pattern is accepted."""
        assert strings.find_keys(re.compile("found$")) == ["not_found"]

    def test_no_duplicates_across_languages(self, translation_data):
        """Keys present in several languages are returned once."""
        strings = make_strings(translation_data, default="fr")
        assert strings.find_keys(r"^menu\.") == ["menu.open", "menu.close"]

    def test_namespace_options(self, strings):
        """find_keys() searches the namespaces of the given options."""
        assert strings.find_keys("^app") == []
        assert strings.find_keys("^app", add_namespaces="items") == ["apple"]

    def test_no_match(self, strings):
        """find_keys() returns an empty list when nothing matches."""
        assert strings.find_keys("^zzz") == []


@pytest.mark.unit
class TestStrArray:
    """Tests for Strings.str_array()."""

    def test_list_of_ids(self, strings):
        """Unresolved ids fall back to themselves."""
        assert strings.str_array(["hello", "missing"]) == {
            "hello": "Hello",
            "missing": "missing",
        }

    def test_mapping_of_defaults(self, strings):
        """Unresolved ids fall back to their given default."""
        assert strings.str_array({"hello": "Hi", "missing": "Default"}) == {
            "hello": "Hello",
            "missing": "Default",
        }

    def test_prefix(self, strings):
        """The prefix is added for lookup and left out of the result."""
        assert strings.str_array(["open", "quit"], prefix="menu.") == {
            "open": "Open",
            "quit": "quit",
        }

    def test_empty_ids_with_prefix(self, strings):
        """An empty id list with a prefix uses every prefixed key."""
        assert strings.str_array([], prefix="menu.") == {
            "open": "Open",
            "close": "Close",
        }

    def test_prefix_is_literal(self, strings):
        """Prefix characters are not treated as a pattern."""
        assert strings.str_array([], prefix="menu_") == {}

    def test_empty_ids_without_prefix(self, strings):
        """An empty id list without a prefix resolves nothing."""
        assert strings.str_array([]) == {}
        assert strings.str_array([], prefix="  ") == {}

    def test_options(self, strings):
        """Options are passed through to each lookup."""
        assert strings.str_array(["open", "close"], prefix="menu.", lang="fr") == {
            "open": "Ouvrir",
            "close": "Close",
        }


@pytest.mark.unit
class TestStrStruct:
    """Tests for Strings.str_struct()."""

    def test_list_definition(self, strings):
        """Ids are looked up as prefix + sep + id."""
        assert strings.str_struct({"menu": ["open", "close", "quit"]}) == {
            "menu": {"open": "Open", "close": "Close", "quit": "quit"},
        }

    def test_mapping_definition(self, strings):
        """Mapping definitions give a default per id."""
        assert strings.str_struct({"menu": {"open": "O", "quit": "Quit"}}) == {
            "menu": {"open": "Open", "quit": "Quit"},
        }

    def test_nested_definition(self, strings):
        """Nested containers recurse with the same prefix."""
        result = strings.str_struct({"menu": ["open", {"close": "C", "quit": "Quit"}]})
        assert result == {"menu": {"open": "Open", 1: {"close": "Close", "quit": "Quit"}}}

    def test_namespace_and_separator(self, strings):
        """ns and sep shape the looked up ids."""
        result = strings.str_struct({"menu": ["open"]}, sep=".", ns="ui:", lang="fr")
        assert result == {"menu": {"open": "Ouvrir"}}

    def test_unresolved_with_namespace(self, strings):
        """Unresolved ids fall back to their default."""
        assert strings.str_struct({"menu": ["open"]}, sep="/") == {"menu": {"open": "open"}}
