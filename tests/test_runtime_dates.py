"""Tests for g11n.runtime.dates - CLDR patterns with translated names.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time

import pytest
from hypothesis import given
from hypothesis import strategies as st

from g11n.diagnostics import DiagnosticCode, FormattingError
from g11n.locales import en
from g11n.runtime.dates import format_datetime

VALUE = datetime(2025, 10, 27, 14, 30, 5)  # Monday

UPPER_MONTHS = {
    "months": {
        "wide": [f"MONTH{i}" for i in range(1, 13)],
        "abbreviated": [f"M{i}" for i in range(1, 13)],
    },
}


# ============================================================================
# NUMERIC FIELDS
# ============================================================================


class TestNumericFields:
    """Numeric fields are formatted by Babel regardless of the names bundle."""

    def test_iso_pattern(self) -> None:
        assert format_datetime(VALUE, "yyyy-MM-dd HH:mm:ss", {}, "en") == "2025-10-27 14:30:05"

    def test_names_do_not_affect_numeric_month(self) -> None:
        assert format_datetime(VALUE, "MM", UPPER_MONTHS, "en") == "10"

    def test_quoted_literal(self) -> None:
        assert format_datetime(VALUE, "d MMM 'at' HH:mm", {}, "en") == "27 Oct at 14:30"

    def test_time_value(self) -> None:
        assert format_datetime(time(7, 8, 9), "HH:mm:ss", {}, "en") == "07:08:09"

    @given(st.dates())
    def test_iso_date_pattern_matches_isoformat(self, value: date) -> None:
        assert format_datetime(value, "yyyy-MM-dd", {}, "en") == value.isoformat()


# ============================================================================
# TRANSLATED NAMES
# ============================================================================


class TestNamesBundle:
    """Textual fields prefer the names bundle."""

    def test_wide_month(self) -> None:
        assert format_datetime(VALUE, "MMMM", UPPER_MONTHS, "en") == "MONTH10"

    def test_abbreviated_month(self) -> None:
        assert format_datetime(VALUE, "MMM", UPPER_MONTHS, "en") == "M10"

    def test_standalone_month(self) -> None:
        assert format_datetime(VALUE, "LLLL", UPPER_MONTHS, "en") == "MONTH10"

    def test_weekday_widths(self) -> None:
        names = {"days": {"wide": ["Lundi"] + ["x"] * 6, "abbreviated": ["Lun"] + ["x"] * 6}}
        assert format_datetime(VALUE, "EEEE", names, "en") == "Lundi"
        assert format_datetime(VALUE, "EEE", names, "en") == "Lun"
        assert format_datetime(VALUE, "E", names, "en") == "Lun"

    def test_days_are_monday_first(self) -> None:
        sunday = datetime(2025, 10, 26)
        assert format_datetime(sunday, "EEEE", en.DATA["names"], "en") == "Sunday"

    def test_periods(self) -> None:
        names = {"periods": {"am": "vorm.", "pm": "nachm."}}
        assert format_datetime(VALUE, "h a", names, "en") == "2 nachm."
        assert format_datetime(time(9), "h a", names, "en") == "9 vorm."

    def test_missing_width_uses_cldr(self) -> None:
        names = {"months": {"wide": [f"MONTH{i}" for i in range(1, 13)]}}
        assert format_datetime(VALUE, "MMMMM", names, "en") == "O"

    def test_short_table_uses_cldr(self) -> None:
        names = {"months": {"wide": ["only one"]}}
        assert format_datetime(VALUE, "MMMM", names, "en") == "October"

    def test_malformed_group_uses_cldr(self) -> None:
        assert format_datetime(VALUE, "MMMM", {"months": "oops"}, "en") == "October"

    @pytest.mark.parametrize("names", [None, "missing translation: globalization.xx.names", 42])
    def test_non_mapping_bundle_ignored(self, names: object) -> None:
        assert format_datetime(VALUE, "EEEE, MMMM d", names, "en") == "Monday, October 27"

    def test_cldr_names_for_locale(self) -> None:
        assert format_datetime(VALUE, "MMMM", {}, "de") == "Oktober"

    def test_bcp47_locale_code(self) -> None:
        assert format_datetime(VALUE, "MMMM", {}, "pt-BR") == "outubro"


# ============================================================================
# FAILURES
# ============================================================================


class TestFailures:
    """Unformattable values and unknown locales."""

    def test_hour_on_plain_date(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            format_datetime(date(2025, 10, 27), "HH:mm", {}, "en")
        assert exc_info.value.fallback_value == "2025-10-27"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DATE_FORMATTING_FAILED

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="g11n.locale_utils"):
            result = format_datetime(VALUE, "MMMM", {}, "zz")
        assert result == "October"
        assert "zz" in caplog.text
