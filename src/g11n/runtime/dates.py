"""Date/time formatting against a translated names bundle.

Format templates are CLDR date patterns (``"EEEE, MMMM d, yyyy"``) parsed and
applied by Babel. Textual fields come from the names bundle registered
alongside the template, so a locale's month and weekday names live in the
same translation table as the rest of its strings:

    names:
        months:  {wide: [12 names], abbreviated: [...], narrow: [...]}
        days:    {wide: [7 names, Monday first], abbreviated: [...], narrow: [...]}
        periods: {am: "AM", pm: "PM"}

Any name the bundle does not provide is taken from Babel's CLDR data for the
locale. Numeric fields, eras, time zones and quoting are handled entirely by
Babel.

Python 3.13+. Uses Babel for CLDR pattern parsing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime, time
from typing import Any

from babel import Locale
from babel import dates as babel_dates

from g11n.diagnostics import Diagnostic, DiagnosticCode, FormattingError
from g11n.locale_utils import resolve_babel_locale

__all__ = ["NamesDateTimeFormat", "format_datetime"]

logger = logging.getLogger(__name__)

type DateValue = date | datetime | time

_WIDTHS: dict[int, str] = {3: "abbreviated", 4: "wide", 5: "narrow"}


class NamesDateTimeFormat(babel_dates.DateTimeFormat):
    """Babel field formatter that prefers names from a translation bundle."""

    def __init__(self, value: DateValue, locale: Locale, names: Mapping[str, Any]) -> None:
        super().__init__(value, locale)
        self.names = names

    def __getitem__(self, name: str) -> str:
        char = name[0]
        num = len(name)
        text: str | None = None
        if char in ("M", "L") and num >= 3:
            text = self._lookup("months", num, self.value.month - 1)
        elif char == "E" or (char in ("e", "c") and num >= 3):
            text = self._lookup("days", max(num, 3), self.value.weekday())
        elif char == "a":
            text = self._period()
        if text is None:
            return super().__getitem__(name)
        return text

    def _lookup(self, group: str, num: int, index: int) -> str | None:
        table = self.names.get(group)
        width = _WIDTHS.get(num)
        if not isinstance(table, Mapping) or width is None:
            return None
        names = table.get(width)
        if isinstance(names, Sequence) and not isinstance(names, str) and index < len(names):
            return str(names[index])
        return None

    def _period(self) -> str | None:
        periods = self.names.get("periods")
        if not isinstance(periods, Mapping):
            return None
        text = periods.get("pm" if self.value.hour >= 12 else "am")
        return None if text is None else str(text)


def format_datetime(
    value: DateValue,
    pattern: str,
    names: Mapping[str, Any] | object,
    locale: str,
) -> str:
    """Format ``value`` with a CLDR ``pattern`` and a translated names bundle.

    Args:
        value: date, datetime or time to format
        pattern: CLDR date/time pattern (e.g. ``"yyyy-MM-dd HH:mm"``)
        names: Names bundle; anything other than a mapping is ignored and
            CLDR names are used
        locale: Registry locale code; unknown codes fall back to English

    Returns:
        Formatted string

    Raises:
        FormattingError: If the pattern cannot be applied to ``value``
            (e.g. hour fields on a plain date). ``fallback_value`` is the
            ISO 8601 representation of ``value``.

    Examples:
        >>> from datetime import datetime
        >>> format_datetime(datetime(2025, 10, 27, 14, 30), "yyyy-MM-dd", {}, "en")
        '2025-10-27'
        >>> names = {"months": {"wide": ["Jan"] + ["X"] * 11}}
        >>> format_datetime(datetime(2025, 1, 5), "d MMMM", names, "en")
        '5 Jan'
    """
    babel_locale = resolve_babel_locale(locale)
    bundle = names if isinstance(names, Mapping) else {}
    try:
        fields = NamesDateTimeFormat(value, babel_locale, bundle)
        return str(babel_dates.parse_pattern(pattern) % fields)
    except (ValueError, TypeError, AttributeError, KeyError, IndexError) as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.DATE_FORMATTING_FAILED,
            message=f"DateTime formatting failed for '{value}' with pattern {pattern!r}: {e}",
        )
        raise FormattingError(diagnostic, fallback_value=value.isoformat()) from e
