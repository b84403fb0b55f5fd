"""Translation entry variants.

A resolved translation entry is one of a closed set of shapes. Classifying
raw registered data once, at lookup time, lets the pluralizer and the
interpolator dispatch with ``match`` instead of ad hoc isinstance chains.

Variants:
    Leaf        - interpolatable string
    PluralForms - mapping keyed only by zero/one/other
    Namespace   - any other mapping (intermediate path node)
    Scalar      - any other registered non-null value

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from g11n.constants import PLURAL_CATEGORIES

__all__ = [
    "Entry",
    "Leaf",
    "Namespace",
    "PluralForms",
    "Scalar",
    "classify",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    """String entry, directly interpolatable."""

    text: str

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class PluralForms:
    """Count-sensitive entry with zero/one/other branches."""

    forms: Mapping[str, Any]

    @property
    def value(self) -> Mapping[str, Any]:
        return self.forms


@dataclass(frozen=True, slots=True)
class Namespace:
    """Intermediate mapping node of the translation table."""

    children: Mapping[str, Any]

    @property
    def value(self) -> Mapping[str, Any]:
        return self.children


@dataclass(frozen=True, slots=True)
class Scalar:
    """Non-string, non-mapping registered data (numbers, lists, ...)."""

    data: Any

    @property
    def value(self) -> Any:
        return self.data


type Entry = Leaf | PluralForms | Namespace | Scalar


def classify(value: object) -> Entry | None:
    """Wrap raw registered data in its entry variant.

    Args:
        value: Raw value found at the end of a lookup path

    Returns:
        Entry variant, or None for an absent value

    Examples:
        >>> classify("Hello")
        Leaf(text='Hello')
        >>> classify({"one": "1 item", "other": "%(count)s items"})
        PluralForms(forms={'one': '1 item', 'other': '%(count)s items'})
        >>> classify({"greeting": "Hi"})
        Namespace(children={'greeting': 'Hi'})
        >>> classify(None) is None
        True
    """
    match value:
        case None:
            return None
        case str():
            return Leaf(value)
        case Mapping() if value and PLURAL_CATEGORIES.issuperset(value.keys()):
            return PluralForms(value)
        case Mapping():
            return Namespace(value)
        case _:
            return Scalar(value)
