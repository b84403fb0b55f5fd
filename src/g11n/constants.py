"""Shared constants for g11n.

Centralized defaults used by the registry, the resolver and the date
localizer. Placing them here avoids circular imports between the runtime
modules and the package facade.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Registry defaults
    "DEFAULT_LOCALE",
    "DEFAULT_NAMESPACE",
    "BUNDLED_NAMESPACE",
    # Key paths
    "KEY_SEPARATOR",
    # Pluralization
    "PLURAL_ZERO",
    "PLURAL_ONE",
    "PLURAL_OTHER",
    "PLURAL_CATEGORIES",
    # Date localization
    "DEFAULT_DATE_TYPE",
    "DEFAULT_DATE_FORMAT",
    "FORMATS_KEY",
    "NAMES_KEY",
    "FALLBACK_BABEL_LOCALE",
    # Fallback strings
    "MISSING_TRANSLATION_PREFIX",
]

# ============================================================================
# REGISTRY DEFAULTS
# ============================================================================

# Namespace holding the bundled date/time formats and names.
BUNDLED_NAMESPACE: str = "globalization"

DEFAULT_LOCALE: str = "en"

# Current namespace of a freshly created registry.
DEFAULT_NAMESPACE: str = BUNDLED_NAMESPACE

# ============================================================================
# KEY PATHS
# ============================================================================

KEY_SEPARATOR: str = "."

# ============================================================================
# PLURALIZATION
# ============================================================================

PLURAL_ZERO: str = "zero"
PLURAL_ONE: str = "one"
PLURAL_OTHER: str = "other"

PLURAL_CATEGORIES: frozenset[str] = frozenset({PLURAL_ZERO, PLURAL_ONE, PLURAL_OTHER})

# ============================================================================
# DATE LOCALIZATION
# ============================================================================

DEFAULT_DATE_TYPE: str = "datetime"
DEFAULT_DATE_FORMAT: str = "default"

# Translation keys consulted by Globalization.localize().
FORMATS_KEY: str = "formats"
NAMES_KEY: str = "names"

# Babel locale used when a registry locale is unknown to CLDR.
FALLBACK_BABEL_LOCALE: str = "en"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Followed by the dot-joined lookup path, e.g. "missing translation: globalization.en.nope"
MISSING_TRANSLATION_PREFIX: str = "missing translation: "
