"""Tests for locale_utils.py: BCP-47 conversion and Babel locale lookup.

Python 3.13+.
"""

from __future__ import annotations

import logging

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from g11n.locale_utils import get_babel_locale, normalize_locale, resolve_babel_locale


class TestNormalizeLocale:
    """normalize_locale converts separators only."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_posix_unchanged(self) -> None:
        assert normalize_locale("fr_CA") == "fr_CA"

    def test_multiple_subtags(self) -> None:
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"

    @given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz-_", max_size=20))
    def test_never_contains_hyphen(self, code: str) -> None:
        event(f"has_hyphen={'-' in code}")
        result = normalize_locale(code)
        assert "-" not in result
        assert len(result) == len(code)


class TestGetBabelLocale:
    """Cached Babel lookup."""

    def test_known_locale(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_cached_instance(self) -> None:
        assert get_babel_locale("de") is get_babel_locale("de")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("zz")


class TestResolveBabelLocale:
    """Lookup with English fallback."""

    def test_known_locale(self) -> None:
        assert resolve_babel_locale("fr").language == "fr"

    @pytest.mark.parametrize("code", ["zz", "not a locale", ""])
    def test_fallback_to_english(self, code: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="g11n.locale_utils"):
            locale = resolve_babel_locale(code)
        assert locale.language == "en"
        assert "Falling back to en" in caplog.text
