"""Tests for the in-memory caches and registries held by the storage handle."""

import pytest

from linkstore.entity.dto import PluginPage


class TestOptions:

    def test_round_trip(self, handle):
        handle.set_option("foo", 42)
        assert handle.has_option("foo")
        assert handle.get_option("foo") == 42

        handle.delete_option("foo")
        assert not handle.has_option("foo")

    def test_get_missing_raises_key_error(self, handle):
        with pytest.raises(KeyError):
            handle.get_option("nope")

    def test_delete_missing_is_noop(self, handle):
        handle.delete_option("nope")
        assert not handle.has_option("nope")

    def test_none_value_counts_as_present(self, handle):
        handle.set_option("empty", None)
        assert handle.has_option("empty")
        assert handle.get_option("empty") is None


class TestKeywordInfos:

    def test_round_trip(self, handle):
        infos = {"url": "https://example.com", "title": "Example", "clicks": 3}
        handle.set_infos("abc", infos)
        assert handle.has_infos("abc")
        assert handle.get_infos("abc") == infos

        handle.delete_infos("abc")
        assert not handle.has_infos("abc")

    def test_independent_of_options(self, handle):
        handle.set_option("shared", "option")
        handle.set_infos("shared", {"url": "https://example.com"})

        assert handle.get_option("shared") == "option"
        assert handle.get_infos("shared") == {"url": "https://example.com"}

        handle.delete_infos("shared")
        assert handle.has_option("shared")

    def test_get_missing_raises_key_error(self, handle):
        with pytest.raises(KeyError):
            handle.get_infos("missing")


class TestPlugins:

    def test_empty_by_default(self, handle):
        assert handle.get_plugins() == []

    def test_add_keeps_load_order(self, handle):
        handle.add_plugin("a/plugin.py")
        handle.add_plugin("b/plugin.py")
        assert handle.get_plugins() == ["a/plugin.py", "b/plugin.py"]

    def test_duplicates_allowed(self, handle):
        handle.add_plugin("a/plugin.py")
        handle.add_plugin("a/plugin.py")
        assert handle.get_plugins() == ["a/plugin.py", "a/plugin.py"]

    def test_set_replaces(self, handle):
        handle.add_plugin("old.py")
        handle.set_plugins(["x.py", "y.py"])
        assert handle.get_plugins() == ["x.py", "y.py"]

    def test_remove_leaves_gap(self, handle):
        handle.set_plugins(["a.py", "b.py", "c.py"])
        handle.remove_plugin("b.py")

        assert handle.get_plugins() == ["a.py", "c.py"]
        assert handle.get_plugin_positions() == {0: "a.py", 2: "c.py"}

    def test_add_after_remove_does_not_reuse_position(self, handle):
        handle.set_plugins(["a.py", "b.py"])
        handle.remove_plugin("b.py")
        handle.add_plugin("d.py")
        assert handle.get_plugin_positions() == {0: "a.py", 2: "d.py"}

    def test_remove_unknown_is_noop(self, handle):
        handle.set_plugins(["a.py"])
        handle.remove_plugin("zzz.py")
        assert handle.get_plugins() == ["a.py"]


class TestPluginPages:

    def test_empty_by_default(self, handle):
        assert handle.get_plugin_pages() == {}

    def test_add_and_remove(self, handle):
        def render():
            return "<p>hi</p>"

        handle.add_plugin_page("x", "Title", render)
        pages = handle.get_plugin_pages()

        assert pages["x"] == PluginPage(slug="x", title="Title", function=render)
        assert pages["x"].function is render

        handle.remove_plugin_page("x")
        assert "x" not in handle.get_plugin_pages()

    def test_set_replaces(self, handle):
        page = PluginPage(slug="stats", title="Stats", function=print)
        handle.add_plugin_page("x", "Title", print)
        handle.set_plugin_pages({"stats": page})
        assert handle.get_plugin_pages() == {"stats": page}

    def test_non_mapping_state_reads_as_empty(self, handle):
        handle.set_plugin_pages(None)
        assert handle.get_plugin_pages() == {}

    def test_returned_mapping_is_a_copy(self, handle):
        handle.add_plugin_page("x", "Title", print)
        handle.get_plugin_pages().clear()
        assert "x" in handle.get_plugin_pages()

    def test_add_and_remove_after_non_mapping_state(self, handle):
        handle.set_plugin_pages(None)
        handle.add_plugin_page("x", "Title", print)
        assert list(handle.get_plugin_pages()) == ["x"]

        handle.set_plugin_pages("garbage")
        handle.remove_plugin_page("x")
        assert handle.get_plugin_pages() == {}

    def test_set_does_not_share_caller_mapping(self, handle):
        pages = {}
        handle.set_plugin_pages(pages)
        handle.add_plugin_page("x", "Title", print)
        assert pages == {}


class TestStateFlags:

    def test_not_installed_by_default(self, handle):
        assert handle.is_installed() is False

    def test_set_installed(self, handle):
        handle.set_installed(True)
        assert handle.is_installed() is True
        handle.set_installed(False)
        assert handle.is_installed() is False

    def test_html_context(self, handle):
        assert handle.get_html_context() == ""
        handle.set_html_context("plugins")
        assert handle.get_html_context() == "plugins"
