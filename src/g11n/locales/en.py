"""Bundled English data for the ``globalization`` namespace.

Formats are CLDR date patterns; names follow the bundle layout read by
g11n.runtime.dates (weekdays start on Monday).
"""

from typing import Any

__all__ = ["DATA"]

DATA: dict[str, Any] = {
    "formats": {
        "datetime": {
            "default": "EEE, d MMM yyyy HH:mm:ss",
            "short": "d MMM HH:mm",
            "long": "MMMM d, yyyy h:mm a",
        },
        "date": {
            "default": "yyyy-MM-dd",
            "short": "MMM d",
            "long": "MMMM d, yyyy",
        },
        "time": {
            "default": "HH:mm:ss",
            "short": "HH:mm",
            "long": "h:mm:ss a",
        },
    },
    "names": {
        "months": {
            "wide": [
                "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December",
            ],
            "abbreviated": [
                "Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
            ],
            "narrow": ["J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"],
        },
        "days": {
            "wide": [
                "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
            ],
            "abbreviated": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
            "narrow": ["M", "T", "W", "T", "F", "S", "S"],
        },
        "periods": {
            "am": "AM",
            "pm": "PM",
        },
    },
}
