"""Observer list for locale change notifications.

A single event: the registry's current locale changed. Listeners are called
synchronously, in registration order, with ``(new_locale, previous_locale)``.

Python 3.13+.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable
from threading import RLock

from g11n.diagnostics import Diagnostic, DiagnosticCode, InvalidArgumentError

__all__ = ["LocaleChangeListener", "LocaleChangeNotifier"]

type LocaleChangeListener = Callable[[str, str], object]


class LocaleChangeNotifier:
    """Ordered list of locale change listeners.

    The same listener may be subscribed more than once and is then called
    once per subscription. unsubscribe() removes the earliest subscription.
    Listener exceptions propagate to the notifier's caller and stop delivery
    to later listeners.
    """

    __slots__ = ("_listeners", "_lock")

    def __init__(self) -> None:
        self._listeners: list[LocaleChangeListener] = []
        self._lock = RLock()

    def subscribe(self, listener: LocaleChangeListener) -> None:
        if not callable(listener):
            diagnostic = Diagnostic(
                code=DiagnosticCode.INVALID_LISTENER,
                message="invalid argument: listener must be callable",
                hint="Pass a function taking (new_locale, previous_locale)",
                received_type=type(listener).__name__,
            )
            raise InvalidArgumentError(diagnostic)
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: LocaleChangeListener) -> None:
        """Remove one subscription of ``listener``; unknown listeners are ignored."""
        with self._lock:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

    def notify(self, new_locale: str, previous_locale: str) -> None:
        # Snapshot: listeners may (un)subscribe while being notified.
        with self._lock:
            listeners = tuple(self._listeners)
        for listener in listeners:
            listener(new_locale, previous_locale)

    def __len__(self) -> int:
        return len(self._listeners)
