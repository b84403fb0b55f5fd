"""Configuration for Globalization registries.

Provides a single frozen dataclass that encapsulates the construction
parameters of a registry: initial locale and namespace, error strictness,
and whether the bundled locale data is pre-registered.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from g11n.constants import DEFAULT_LOCALE, DEFAULT_NAMESPACE

__all__ = ["GlobalizationConfig"]


@dataclass(frozen=True, slots=True)
class GlobalizationConfig:
    """Immutable configuration for a Globalization registry.

    All fields have sensible defaults; ``GlobalizationConfig()`` reproduces
    the process-wide default registry.

    Attributes:
        locale: Initial current locale (default: "en").
        namespace: Initial current namespace (default: "globalization").
            ``None`` means lookups start directly at the locale level.
        strict: If True, interpolation and date formatting failures raise
            FormattingError instead of degrading to a fallback value
            (default: False).
        load_bundled: Register the bundled ``globalization``/``en`` data at
            construction (default: True).

    Example:
        >>> from g11n import Globalization, GlobalizationConfig
        >>> g = Globalization(GlobalizationConfig(locale="fr", strict=True))
        >>> g.get_locale()
        'fr'
    """

    locale: str = DEFAULT_LOCALE
    namespace: str | None = DEFAULT_NAMESPACE
    strict: bool = False
    load_bundled: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If locale is empty, or locale/namespace contain
                leading or trailing whitespace.
        """
        if not self.locale:
            msg = "locale must be a non-empty string"
            raise ValueError(msg)
        if self.locale.strip() != self.locale:
            msg = f"locale contains leading/trailing whitespace: {self.locale!r}"
            raise ValueError(msg)
        if self.namespace is not None and self.namespace.strip() != self.namespace:
            msg = f"namespace contains leading/trailing whitespace: {self.namespace!r}"
            raise ValueError(msg)
