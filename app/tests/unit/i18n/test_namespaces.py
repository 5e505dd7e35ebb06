"""Tests for uistrings.i18n.namespaces module."""

import pytest

from uistrings.i18n import LookupOptions, NamespaceResolver, split_namespace_prefix


@pytest.mark.unit
class TestNamespaceResolver:
    """Tests for NamespaceResolver."""

    @pytest.fixture
    def resolver(self):
        return NamespaceResolver(["ui", "errors"])

    def test_defaults(self, resolver):
        """Without options the default namespaces are searched."""
        assert resolver.resolve(LookupOptions()) == ["ui", "errors"]

    def test_resolve_returns_a_copy(self, resolver):
        """Changing the returned list does not change the defaults."""
        resolver.resolve(LookupOptions()).append("items")
        assert resolver.default_ns == ["ui", "errors"]

    def test_add_namespaces(self, resolver):
        """Added namespaces are appended in order."""
        options = LookupOptions(add_namespaces=["items", "extra"])
        assert resolver.resolve(options) == ["ui", "errors", "items", "extra"]

    def test_insert_namespaces(self, resolver):
        """Each inserted namespace is placed at the front in turn."""
        options = LookupOptions(insert_namespaces=["first", "second"])
        assert resolver.resolve(options) == ["second", "first", "ui", "errors"]

    def test_add_and_insert(self, resolver):
        """Add and insert combine around the defaults."""
        options = LookupOptions(add_namespaces="items", insert_namespaces="top")
        assert resolver.resolve(options) == ["top", "ui", "errors", "items"]

    def test_set_namespaces_replaces_everything(self, resolver):
        """set_namespaces ignores defaults, additions and insertions."""
        options = LookupOptions(
            set_namespaces="items", add_namespaces="x", insert_namespaces="y"
        )
        assert resolver.resolve(options) == ["items"]

    def test_no_defaults(self):
        """A resolver without defaults searches nothing by default."""
        assert NamespaceResolver().resolve(LookupOptions()) == []


@pytest.mark.unit
class TestSplitNamespacePrefix:
    """Tests for split_namespace_prefix()."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("errors:hello", ("errors", "hello")),
            ("hello", (None, "hello")),
            ("ns:key:more", ("ns", "key:more")),
            (":hello", (None, ":hello")),
            ("two words:hello", (None, "two words:hello")),
            ("ns_1:a:ns_1:b", ("ns_1", "a:ns_1:b")),
            ("\u00e9:x", (None, "\u00e9:x")),
            ("ns\u00e9:x", (None, "ns\u00e9:x")),
        ],
    )
    def test_split(self, key, expected):
        """Only a leading word followed by a colon is a prefix."""
        assert split_namespace_prefix(key) == expected
