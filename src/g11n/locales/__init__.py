"""Locale data bundled with g11n.

BUNDLED maps locale codes to the data pre-registered under the
``globalization`` namespace of every registry created with
``load_bundled=True``.
"""

from typing import Any

from . import en

__all__ = ["BUNDLED"]

BUNDLED: dict[str, dict[str, Any]] = {
    "en": en.DATA,
}
