"""g11n - runtime translation lookup and locale-aware date formatting.

Resolves dotted key paths against a nested translation table registered per
namespace and locale, selects zero/one/other plural branches, interpolates
``%(name)s`` placeholders, and formats dates with translated CLDR patterns.

Public API:
    translate - Resolve, pluralize and interpolate a key
    localize - Format a date/time with a translated template
    register_translations - Deep-merge data under a namespace and locale
    get_locale / set_locale - Current locale (set_locale notifies listeners)
    get_namespace - Current namespace
    with_locale / with_namespace - Call a function under a scoped override
    locale_scope / namespace_scope - Context manager forms of the above
    on_locale_change / off_locale_change - Locale change listeners
    Globalization - Registry class; construct one per test or per tenant

The module-level functions operate on a process-wide default registry
(locale "en", namespace "globalization", bundled English data registered),
created on first use. Use get_default()/set_default() to access or replace it.

Exceptions:
    G11nError - Base exception class
    InvalidArgumentError - Bad key or non-date value
    FormattingError - Interpolation or date formatting failure (strict mode)
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Mapping
from contextlib import contextmanager
from threading import Lock
from typing import Any

from .config import GlobalizationConfig
from .diagnostics import FormattingError, G11nError, InvalidArgumentError
from .runtime import Globalization
from .runtime.dates import DateValue
from .runtime.keys import RawKey
from .runtime.listeners import LocaleChangeListener

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("g11n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormattingError",
    "G11nError",
    "Globalization",
    "GlobalizationConfig",
    "InvalidArgumentError",
    "__version__",
    "get_default",
    "get_locale",
    "get_namespace",
    "localize",
    "locale_scope",
    "namespace_scope",
    "off_locale_change",
    "on_locale_change",
    "register_translations",
    "set_default",
    "set_locale",
    "translate",
    "with_locale",
    "with_namespace",
]

_default: Globalization | None = None
_default_lock = Lock()


def get_default() -> Globalization:
    """Get the process-wide registry, creating it on first use."""
    global _default  # noqa: PLW0603
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Globalization()
    return _default


def set_default(registry: Globalization | None) -> Globalization | None:
    """Replace the process-wide registry; return the previous one (if created).

    Passing None discards the current registry; the next call creates a new one.
    """
    global _default  # noqa: PLW0603
    with _default_lock:
        previous, _default = _default, registry
    return previous


def get_locale() -> str:
    """Get the default registry's current locale."""
    return get_default().get_locale()


def set_locale(value: str) -> str:
    """Set the default registry's locale; return the previous one."""
    return get_default().set_locale(value)


def get_namespace() -> str | None:
    """Get the default registry's current namespace."""
    return get_default().get_namespace()


def translate(key: RawKey, options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
    """Resolve, pluralize and interpolate ``key`` (see Globalization.translate)."""
    return get_default().translate(key, options, **kwargs)


def localize(value: DateValue, options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
    """Format a date/time with a translated template (see Globalization.localize)."""
    return get_default().localize(value, options, **kwargs)


def register_translations(namespace: RawKey, locale: RawKey, data: object) -> None:
    """Deep-merge ``data`` under ``namespace``/``locale`` in the default registry."""
    get_default().register_translations(namespace, locale, data)


def on_locale_change(listener: LocaleChangeListener) -> None:
    """Register ``listener(new_locale, previous_locale)`` on the default registry."""
    get_default().on_locale_change(listener)


def off_locale_change(listener: LocaleChangeListener) -> None:
    """Unregister a listener added with on_locale_change()."""
    get_default().off_locale_change(listener)


def with_locale[T](locale: str, callback: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
    """Call ``callback(*args, **kwargs)`` with ``locale`` as current locale."""
    return get_default().with_locale(locale, callback, *args, **kwargs)


def with_namespace[T](
    namespace: str | None, callback: Callable[..., T], /, *args: Any, **kwargs: Any
) -> T:
    """Call ``callback(*args, **kwargs)`` with ``namespace`` as current namespace."""
    return get_default().with_namespace(namespace, callback, *args, **kwargs)


@contextmanager
def locale_scope(locale: str) -> Generator[str]:
    """Temporarily override the default registry's locale."""
    with get_default().locale_scope(locale) as value:
        yield value


@contextmanager
def namespace_scope(namespace: str | None) -> Generator[str | None]:
    """Temporarily override the default registry's namespace."""
    with get_default().namespace_scope(namespace) as value:
        yield value
