"""Hypothesis strategies for g11n property-based testing.

Usage:
    from tests.strategies import dotted_keys, raw_keys, translation_trees
"""

from .keys import dotted_keys, key_segments, raw_keys
from .translations import plural_entries, translation_trees

__all__ = [
    "dotted_keys",
    "key_segments",
    "plural_entries",
    "raw_keys",
    "translation_trees",
]
