"""Key path normalization with per-registry memoization.

Turns the raw keys accepted by the public API (dotted strings, lists of
dotted strings, None) into flat lists of non-empty segments.

Architecture:
    - One KeyNormalizer per Globalization registry (no process-global cache)
    - Cache keyed by a hashable form of the raw key; never evicted
    - Callers receive a fresh list; cached segments are stored as tuples

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Hashable
from threading import RLock

from g11n.constants import KEY_SEPARATOR

__all__ = ["KeyNormalizer", "RawKey"]

type RawKey = str | list["RawKey"] | tuple["RawKey", ...] | None
"""Key accepted by normalize(): dotted string, (nested) sequence, or None."""


def _cache_key(key: object) -> Hashable:
    # Sequences are tagged so ("a",) and "a" stay distinct entries.
    if isinstance(key, (list, tuple)):
        return ("seq", tuple(_cache_key(k) for k in key))
    if key is None or isinstance(key, str):
        return key
    return ("obj", type(key).__name__, str(key))


class KeyNormalizer:
    """Split raw keys into segment lists, memoizing each unique raw key.

    Examples:
        >>> keys = KeyNormalizer()
        >>> keys.normalize("a..b.")
        ['a', 'b']
        >>> keys.normalize(["a.b", "c"])
        ['a', 'b', 'c']
        >>> keys.normalize(None)
        []

    Thread Safety:
        Cache writes are protected by RLock. Cached values are immutable
        tuples, so concurrent readers never observe partial state.
    """

    __slots__ = ("_cache", "_lock")

    def __init__(self) -> None:
        self._cache: dict[Hashable, tuple[str, ...]] = {}
        self._lock = RLock()

    def normalize(self, key: RawKey | object) -> list[str]:
        """Normalize a raw key into an ordered list of non-empty segments.

        Args:
            key: Dotted string, list/tuple of strings or dotted strings
                (flattened), or None. Any other object is treated as
                string-like via str().

        Returns:
            New list of segments, safe for the caller to mutate.
        """
        return list(self._segments(key))

    def normalize_path(
        self, namespace: RawKey | object, locale: RawKey | object, key: RawKey | object
    ) -> list[str]:
        """Build the full lookup path ``namespace ++ locale ++ key``."""
        return [*self._segments(namespace), *self._segments(locale), *self._segments(key)]

    def cache_size(self) -> int:
        """Get number of memoized raw keys."""
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        """Drop every memoized result."""
        with self._lock:
            self._cache.clear()

    def _segments(self, key: object) -> tuple[str, ...]:
        cache_key = _cache_key(key)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        segments = self._split(key)
        with self._lock:
            return self._cache.setdefault(cache_key, segments)

    def _split(self, key: object) -> tuple[str, ...]:
        match key:
            case None:
                return ()
            case list() | tuple():
                result: list[str] = []
                for item in key:
                    result.extend(self._segments(item))
                return tuple(result)
            case str():
                return tuple(part for part in key.split(KEY_SEPARATOR) if part)
            case _:
                return self._split(str(key))
