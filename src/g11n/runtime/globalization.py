"""Translation registry: locale/namespace context and lookup pipeline.

A Globalization instance owns everything a lookup needs:

    - current locale and current namespace (dynamically scoped overrides)
    - the translation table (deep-merge registration)
    - the key normalization cache
    - the locale change listeners

Pipeline for translate():

    key -> KeyNormalizer (namespace ++ locale ++ key)
        -> TranslationStore.resolve
        -> fallback / missing marker
        -> pluralize(count)
        -> interpolate(remaining options)

Context Semantics:
    The current locale and namespace belong to the instance, not to a
    thread or task. Code running inside locale_scope()/with_locale() sees
    the override, and so does any other code using the same instance while
    the scope is open. Scoped overrides never fire locale change listeners;
    only set_locale() does.

Python 3.13+.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Generator, Mapping
from contextlib import contextmanager
from datetime import date, time
from typing import Any

from g11n.config import GlobalizationConfig
from g11n.constants import (
    BUNDLED_NAMESPACE,
    DEFAULT_DATE_FORMAT,
    DEFAULT_DATE_TYPE,
    FORMATS_KEY,
    MISSING_TRANSLATION_PREFIX,
    NAMES_KEY,
)
from g11n.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    FormattingError,
    InvalidArgumentError,
)
from g11n.locales import BUNDLED
from g11n.runtime.dates import DateValue, format_datetime
from g11n.runtime.entries import Leaf, classify
from g11n.runtime.interpolation import interpolate
from g11n.runtime.keys import KeyNormalizer, RawKey
from g11n.runtime.listeners import LocaleChangeListener, LocaleChangeNotifier
from g11n.runtime.plural_rules import pluralize
from g11n.runtime.store import TranslationStore

__all__ = ["DateFormatter", "Globalization"]

logger = logging.getLogger(__name__)

type DateFormatter = Callable[[DateValue, str, Any, str], str]
"""Low-level formatter: (value, format template, names bundle, locale) -> str."""


class Globalization:
    """Translation registry with scoped locale and namespace context.

    Example:
        >>> g = Globalization()
        >>> g.register_translations("app", "en", {
        ...     "inbox": {"zero": "No messages", "one": "1 message",
        ...               "other": "%(count)s messages"},
        ... })
        >>> with g.namespace_scope("app"):
        ...     g.translate("inbox", count=3)
        '3 messages'
        >>> g.translate("inbox", namespace="app", locale="fr")
        'missing translation: app.fr.inbox'

    Isolation:
        Every instance has its own table, cache and listeners. The package
        level functions (g11n.translate, ...) use one shared default instance;
        tests should construct their own.
    """

    __slots__ = (
        "_config",
        "_date_formatter",
        "_keys",
        "_listeners",
        "_locale",
        "_namespace",
        "_store",
    )

    def __init__(
        self,
        config: GlobalizationConfig | None = None,
        *,
        date_formatter: DateFormatter | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            config: Initial locale/namespace, strictness and bundled data
                switch. Defaults to ``GlobalizationConfig()``.
            date_formatter: Replacement for the Babel-backed formatter used
                by localize(). Called as
                ``date_formatter(value, template, names, locale)``.
        """
        self._config = config if config is not None else GlobalizationConfig()
        self._date_formatter = date_formatter
        self._locale: str = self._config.locale
        self._namespace: str | None = self._config.namespace
        self._keys = KeyNormalizer()
        self._store = TranslationStore()
        self._listeners = LocaleChangeNotifier()

        if self._config.load_bundled:
            for locale, data in BUNDLED.items():
                self.register_translations(BUNDLED_NAMESPACE, locale, data)

    def __repr__(self) -> str:
        return (
            f"Globalization(locale={self._locale!r}, namespace={self._namespace!r}, "
            f"namespaces={self._store.namespaces()!r})"
        )

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    @property
    def config(self) -> GlobalizationConfig:
        return self._config

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @property
    def strict(self) -> bool:
        return self._config.strict

    def get_locale(self) -> str:
        """Get the current locale."""
        return self._locale

    def get_namespace(self) -> str | None:
        """Get the current namespace."""
        return self._namespace

    def set_locale(self, value: str) -> str:
        """Set the current locale and notify listeners if it changed.

        Listeners run synchronously, in registration order, with
        ``(value, previous)`` after the new locale is stored. Setting the
        same locale again notifies nobody.

        Args:
            value: New current locale

        Returns:
            The previous locale, whether or not it changed
        """
        previous = self._locale
        if previous != value:
            self._locale = value
            logger.debug("Locale changed from '%s' to '%s'", previous, value)
            self._listeners.notify(value, previous)
        return previous

    def on_locale_change(self, listener: LocaleChangeListener) -> None:
        """Register ``listener(new_locale, previous_locale)``.

        Raises:
            InvalidArgumentError: If listener is not callable.
        """
        self._listeners.subscribe(listener)

    def off_locale_change(self, listener: LocaleChangeListener) -> None:
        """Unregister a listener added with on_locale_change()."""
        self._listeners.unsubscribe(listener)

    @contextmanager
    def locale_scope(self, locale: str) -> Generator[str]:
        """Temporarily override the current locale.

        The prior locale is restored when the block exits, including on
        exceptions. Listeners are not notified in either direction.

        Example:
            >>> g = Globalization()
            >>> with g.locale_scope("fr"):
            ...     g.get_locale()
            'fr'
            >>> g.get_locale()
            'en'
        """
        previous = self._locale
        self._locale = locale
        try:
            yield locale
        finally:
            self._locale = previous

    @contextmanager
    def namespace_scope(self, namespace: str | None) -> Generator[str | None]:
        """Temporarily override the current namespace (restored on exit)."""
        previous = self._namespace
        self._namespace = namespace
        try:
            yield namespace
        finally:
            self._namespace = previous

    def with_locale[T](
        self, locale: str, callback: Callable[..., T], /, *args: Any, **kwargs: Any
    ) -> T:
        """Call ``callback(*args, **kwargs)`` with ``locale`` as current locale.

        Returns:
            The callback's result. The prior locale is restored even if the
            callback raises.
        """
        with self.locale_scope(locale):
            return callback(*args, **kwargs)

    def with_namespace[T](
        self, namespace: str | None, callback: Callable[..., T], /, *args: Any, **kwargs: Any
    ) -> T:
        """Call ``callback(*args, **kwargs)`` with ``namespace`` as current namespace."""
        with self.namespace_scope(namespace):
            return callback(*args, **kwargs)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_translations(self, namespace: RawKey, locale: RawKey, data: object) -> None:
        """Deep-merge ``data`` into the table under ``namespace``/``locale``.

        Nested mappings merge with what is already registered; other values
        (lists included) replace it. Registering the same data twice is a
        no-op the second time.

        Raises:
            ValueError: If namespace and locale both normalize to nothing.
        """
        self._store.register(self._keys.normalize(namespace), self._keys.normalize(locale), data)

    @property
    def translations(self) -> dict[str, Any]:
        """Deep copy of the registered table, ``{namespace: {locale: ...}}``."""
        return self._store.as_dict()

    def normalize_key(self, key: RawKey) -> list[str]:
        """Normalize a raw key with this registry's cache."""
        return self._keys.normalize(key)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def translate(
        self, key: RawKey, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> Any:
        """Resolve, pluralize and interpolate a translation.

        Options may be passed as a mapping, as keyword arguments, or both
        (keywords win). Recognized options:

            namespace - lookup namespace (default: current namespace)
            locale    - lookup locale (default: current locale)
            count     - selects the zero/one/other branch of plural entries
            fallback  - returned instead of the missing-translation marker

        Every option except namespace and locale is also available to the
        template as an interpolation value, ``count`` and ``fallback``
        included.

        Args:
            key: Dotted string or non-empty list of (dotted) strings

        Returns:
            The interpolated string. Non-string entries (numbers, mappings,
            lists) are returned as deep copies of the registered value; a
            missing plural branch gives None.

        Raises:
            InvalidArgumentError: If key is empty or not a str/list/tuple,
                or options is not a mapping.
            FormattingError: In strict mode, if interpolation fails.

        Examples:
            >>> g = Globalization()
            >>> g.translate("nope.nope")
            'missing translation: globalization.en.nope.nope'
            >>> g.translate("nope", fallback="X")
            'X'
        """
        values = self._merge_options(options, kwargs)
        namespace = values.pop("namespace", None) or self._namespace
        locale = values.pop("locale", None) or self._locale

        if not isinstance(key, (str, list, tuple)) or not key:
            diagnostic = Diagnostic(
                code=DiagnosticCode.INVALID_KEY,
                message="invalid argument: key",
                hint="Pass a non-empty string or a non-empty list of strings",
                received_type=type(key).__name__,
            )
            raise InvalidArgumentError(diagnostic)

        path = self._keys.normalize_path(namespace, locale, key)
        entry = self._store.resolve(path)

        if entry is None:
            fallback = values.get("fallback")
            if fallback is not None:
                entry = classify(fallback)
            else:
                logger.debug("Missing translation: %s", ".".join(path))
                entry = Leaf(MISSING_TRANSLATION_PREFIX + ".".join(path))

        entry = pluralize(entry, values.get("count"))
        try:
            entry = interpolate(entry, values)
        except FormattingError as e:
            if self._config.strict:
                raise
            logger.warning("Interpolation failed for %s: %s", ".".join(path), e)
            return e.fallback_value

        match entry:
            case None:
                return None
            case Leaf(text):
                return text
            case _:
                # Mappings and lists are copies; the table is never handed out.
                return copy.deepcopy(entry.value)

    def localize(
        self, value: DateValue, options: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> str:
        """Format a date/time with a translated format template and names.

        Recognized options:

            namespace - default "globalization", the bundled namespace
            locale    - default: current locale
            type      - format group, default "datetime"
            format    - format name within the group, default "default"

        The template is ``formats.<type>.<format>`` and the names bundle is
        ``names``, both looked up with translate().

        Returns:
            Formatted string. If the template is not registered, the
            missing-translation marker for it is returned unformatted.

        Raises:
            InvalidArgumentError: If value is not a date, datetime or time.
            FormattingError: In strict mode, if the template is missing or
                cannot be applied to value.

        Example:
            >>> from datetime import date
            >>> Globalization().localize(date(2025, 10, 27), type="date", format="long")
            'October 27, 2025'
        """
        opts = self._merge_options(options, kwargs)
        namespace = opts.pop("namespace", None) or BUNDLED_NAMESPACE
        locale = opts.pop("locale", None) or self._locale
        group = opts.pop("type", None) or DEFAULT_DATE_TYPE
        name = opts.pop("format", None) or DEFAULT_DATE_FORMAT

        if not isinstance(value, (date, time)):
            diagnostic = Diagnostic(
                code=DiagnosticCode.INVALID_DATE,
                message="invalid argument: value must be a date",
                hint="Pass a datetime.date, datetime.datetime or datetime.time",
                received_type=type(value).__name__,
            )
            raise InvalidArgumentError(diagnostic)

        template = self.translate([FORMATS_KEY, group, name], namespace=namespace, locale=locale)
        if not isinstance(template, str) or template.startswith(MISSING_TRANSLATION_PREFIX):
            fallback = template if isinstance(template, str) else value.isoformat()
            error = FormattingError(
                Diagnostic(
                    code=DiagnosticCode.DATE_FORMAT_MISSING,
                    message=f"No date format registered at {FORMATS_KEY}.{group}.{name}",
                    key_path=tuple(
                        self._keys.normalize_path(namespace, locale, [FORMATS_KEY, group, name])
                    ),
                ),
                fallback_value=fallback,
            )
            return self._degrade(error)

        names = self.translate(NAMES_KEY, namespace=namespace, locale=locale)
        formatter = self._date_formatter or format_datetime
        try:
            return formatter(value, template, names, locale)
        except FormattingError as e:
            return self._degrade(e)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _degrade(self, error: FormattingError) -> str:
        if self._config.strict:
            raise error
        logger.warning("%s", error)
        return str(error.fallback_value)

    @staticmethod
    def _merge_options(
        options: Mapping[str, Any] | None, kwargs: dict[str, Any]
    ) -> dict[str, Any]:
        if options is None:
            return kwargs
        if not isinstance(options, Mapping):
            diagnostic = Diagnostic(  # type: ignore[unreachable]
                code=DiagnosticCode.INVALID_OPTIONS,
                message="invalid argument: options",
                hint="Pass options as a mapping or as keyword arguments",
                received_type=type(options).__name__,
            )
            raise InvalidArgumentError(diagnostic)
        return {**options, **kwargs}
