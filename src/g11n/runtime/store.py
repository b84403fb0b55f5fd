"""Nested translation table with deep-merge registration.

Shape invariant: ``{namespace: {locale: {...key segments...: value}}}``.
Repeated registration for the same namespace/locale merges new keys into
existing ones without discarding siblings at any nesting level.

Python 3.13+.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from threading import RLock
from typing import Any

from g11n.runtime.entries import Entry, classify

__all__ = ["TranslationStore", "deep_merge"]

logger = logging.getLogger(__name__)


def deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target`` in place and return ``target``.

    Mappings merge recursively. Every other value (lists included) replaces
    whatever was at that key and is deep-copied, so later mutation of the
    caller's data never reaches the table.

    Example:
        >>> deep_merge({"x": {"y": 1}}, {"x": {"z": 2}})
        {'x': {'y': 1, 'z': 2}}
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping):
            if not isinstance(existing, dict):
                existing = target[key] = {}
            deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def _child(node: object, segment: str) -> Any:
    match node:
        case Mapping():
            return node.get(segment)
        case Sequence() if not isinstance(node, (str, bytes)):
            if segment.isascii() and segment.isdigit() and str(int(segment)) == segment:
                index = int(segment)
                return node[index] if index < len(node) else None
    return None


class TranslationStore:
    """Registered translation data for every namespace and locale.

    Thread Safety:
        register() is serialized by RLock. resolve() reads without locking;
        the table only grows, and values are replaced atomically per key.
    """

    __slots__ = ("_lock", "_translations")

    def __init__(self) -> None:
        self._translations: dict[str, Any] = {}
        self._lock = RLock()

    def register(
        self, namespace: Iterable[str], locale: Iterable[str], data: object
    ) -> None:
        """Deep-merge ``data`` under ``[*namespace, *locale]``.

        Args:
            namespace: Normalized namespace segments
            locale: Normalized locale segments
            data: Translation data. Mappings merge; anything else replaces
                the value stored for the locale.
        """
        path = [*namespace, *locale]
        if not path:
            msg = "namespace and locale must not both be empty"
            raise ValueError(msg)

        *parents, last = path
        with self._lock:
            node = self._translations
            for segment in parents:
                child = node.get(segment)
                if not isinstance(child, dict):
                    child = node[segment] = {}
                node = child
            deep_merge(node, {last: data})

        logger.debug("Registered translations under %s", ".".join(path))

    def lookup(self, path: Iterable[str]) -> Any:
        """Walk the table along ``path``; return the raw value or None.

        Mappings are entered by key and lists by decimal index (``"0"``,
        ``"11"``; no sign, no leading zeros). The walk stops at the first
        segment that is missing or whose parent is neither.

        Example:
            >>> store = TranslationStore()
            >>> store.register(["app"], ["en"], {"days": ["Mon", "Tue"]})
            >>> store.lookup(["app", "en", "days", "1"])
            'Tue'
        """
        node: Any = self._translations
        for segment in path:
            node = _child(node, segment)
            if node is None:
                return None
        return node

    def resolve(self, path: Iterable[str]) -> Entry | None:
        """Look up ``path`` and classify the result into an entry variant."""
        return classify(self.lookup(path))

    def namespaces(self) -> tuple[str, ...]:
        """Get registered namespace names in registration order."""
        return tuple(self._translations)

    def locales(self, namespace: str) -> tuple[str, ...]:
        """Get locales registered under ``namespace`` (empty if unknown)."""
        node = self._translations.get(namespace)
        return tuple(node) if isinstance(node, dict) else ()

    def as_dict(self) -> dict[str, Any]:
        """Return a deep copy of the whole table."""
        with self._lock:
            return copy.deepcopy(self._translations)
