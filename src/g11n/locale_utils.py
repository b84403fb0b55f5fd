"""Locale utilities for BCP-47 to POSIX conversion and Babel lookup.

Registry locales are free-form strings ("en", "pt-BR", "fr_CA"). Babel needs
POSIX identifiers, so conversion happens here, at the boundary to Babel.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging

from babel import Locale, UnknownLocaleError

from g11n.constants import FALLBACK_BABEL_LOCALE

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "resolve_babel_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def resolve_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale, falling back to English for unknown codes.

    Registry locales need not be CLDR identifiers (tests and applications
    register data under arbitrary names), so formatting never fails on an
    unknown locale. A warning is logged instead.
    """
    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_BABEL_LOCALE
        )
    except (ValueError, TypeError) as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            FALLBACK_BABEL_LOCALE,
        )
    return get_babel_locale(FALLBACK_BABEL_LOCALE)
