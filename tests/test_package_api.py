"""Tests for the package-level API backed by the default registry.

Python 3.13+.
"""

from __future__ import annotations

from datetime import date

import pytest

import g11n
from g11n import Globalization


class TestDefaultRegistry:
    """get_default / set_default."""

    def test_lazily_created_with_bundled_data(self) -> None:
        previous = g11n.set_default(None)
        try:
            registry = g11n.get_default()
            assert isinstance(registry, Globalization)
            assert registry is g11n.get_default()
            assert registry.translate("formats.date.default") == "yyyy-MM-dd"
        finally:
            g11n.set_default(previous)

    def test_set_default_returns_previous(self, default_registry: Globalization) -> None:
        replacement = Globalization()
        assert g11n.set_default(replacement) is default_registry
        assert g11n.get_default() is replacement
        g11n.set_default(default_registry)


class TestModuleFunctions:
    """Module functions delegate to the default registry."""

    def test_missing_key_marker(self, default_registry: Globalization) -> None:
        assert g11n.translate("nope.nope") == "missing translation: globalization.en.nope.nope"

    def test_translate_with_options(self, default_registry: Globalization) -> None:
        g11n.register_translations(
            "app", "en", {"inbox": {"one": "1 message", "other": "%(count)s messages"}}
        )
        assert g11n.translate("inbox", {"namespace": "app"}, count=4) == "4 messages"
        assert default_registry.translate("inbox", namespace="app", count=1) == "1 message"

    def test_localize(self, default_registry: Globalization) -> None:
        assert g11n.localize(date(2025, 10, 27), type="date", format="long") == "October 27, 2025"

    def test_locale_roundtrip_and_listeners(self, default_registry: Globalization) -> None:
        calls: list[tuple[str, str]] = []

        def listener(new: str, old: str) -> None:
            calls.append((new, old))

        g11n.on_locale_change(listener)
        assert g11n.set_locale("fr") == "en"
        assert g11n.get_locale() == "fr"
        g11n.off_locale_change(listener)
        g11n.set_locale("de")

        assert calls == [("fr", "en")]
        assert default_registry.get_locale() == "de"

    def test_with_locale(self, default_registry: Globalization) -> None:
        assert g11n.with_locale("fr", g11n.get_locale) == "fr"
        assert g11n.get_locale() == "en"

    def test_with_namespace(self, default_registry: Globalization) -> None:
        g11n.register_translations("app", "en", {"hi": "Hi %(name)s"})
        assert g11n.with_namespace("app", g11n.translate, "hi", name="Ada") == "Hi Ada"
        assert g11n.get_namespace() == "globalization"

    def test_scopes(self, default_registry: Globalization) -> None:
        with g11n.locale_scope("fr"), g11n.namespace_scope("app"):
            assert (g11n.get_locale(), g11n.get_namespace()) == ("fr", "app")
        assert (g11n.get_locale(), g11n.get_namespace()) == ("en", "globalization")

    def test_scope_restored_on_error(self, default_registry: Globalization) -> None:
        with pytest.raises(RuntimeError), g11n.locale_scope("fr"):
            raise RuntimeError
        assert g11n.get_locale() == "en"

    def test_invalid_key(self, default_registry: Globalization) -> None:
        with pytest.raises(g11n.InvalidArgumentError):
            g11n.translate("")

    def test_version(self) -> None:
        assert isinstance(g11n.__version__, str)

    @pytest.mark.parametrize("name", g11n.__all__)
    def test_all_exports_exist(self, name: str) -> None:
        assert hasattr(g11n, name)

    @pytest.mark.parametrize(
        "name", [name for name in g11n.__all__ if callable(getattr(g11n, name))]
    )
    def test_public_callables_documented(self, name: str) -> None:
        assert getattr(g11n, name).__doc__
