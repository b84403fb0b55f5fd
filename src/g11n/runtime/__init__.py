"""g11n runtime package.

Provides key normalization, the translation table, entry variants,
pluralization, interpolation, date formatting and the Globalization
registry that ties them together.

Python 3.13+.
"""

from .dates import NamesDateTimeFormat, format_datetime
from .entries import Entry, Leaf, Namespace, PluralForms, Scalar, classify
from .globalization import DateFormatter, Globalization
from .interpolation import interpolate
from .keys import KeyNormalizer
from .listeners import LocaleChangeNotifier
from .plural_rules import pluralize, select_plural_category
from .store import TranslationStore, deep_merge

__all__ = [
    "DateFormatter",
    "Entry",
    "Globalization",
    "KeyNormalizer",
    "Leaf",
    "LocaleChangeNotifier",
    "NamesDateTimeFormat",
    "Namespace",
    "PluralForms",
    "Scalar",
    "TranslationStore",
    "classify",
    "deep_merge",
    "format_datetime",
    "interpolate",
    "pluralize",
    "select_plural_category",
]
