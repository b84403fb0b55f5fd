"""Plural branch selection for zero/one/other entries.

Only the three forms zero, one and other are supported. CLDR plural rule
tables for other categories are not consulted.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from g11n.constants import PLURAL_ONE, PLURAL_OTHER, PLURAL_ZERO
from g11n.runtime.entries import Entry, Namespace, PluralForms, classify

__all__ = ["is_count", "pluralize", "select_plural_category"]


def is_count(value: object) -> bool:
    """Return True for real numbers usable as a plural count (bools excluded)."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def select_plural_category(count: int | float | Decimal, *, has_zero: bool = False) -> str:
    """Select the plural branch name for ``count``.

    Examples:
        >>> select_plural_category(0, has_zero=True)
        'zero'
        >>> select_plural_category(0)
        'other'
        >>> select_plural_category(1)
        'one'
        >>> select_plural_category(5)
        'other'
    """
    if count == 0 and has_zero:
        return PLURAL_ZERO
    return PLURAL_ONE if count == 1 else PLURAL_OTHER


def pluralize(entry: Entry | None, count: object) -> Entry | None:
    """Select one branch of a mapping entry based on ``count``.

    Returns the entry unchanged unless it is a mapping (plural forms or a
    plain namespace node) and ``count`` is a number. A missing branch
    yields None; branch existence is not validated.

    Args:
        entry: Resolved entry variant
        count: Value of the ``count`` option

    Returns:
        Selected branch as an entry variant, or the untouched entry
    """
    match entry:
        case PluralForms(forms) | Namespace(forms) if is_count(count):
            category = select_plural_category(count, has_zero=PLURAL_ZERO in forms)  # type: ignore[arg-type]
            return classify(forms.get(category))
        case _:
            return entry
