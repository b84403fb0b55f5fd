"""Named placeholder substitution for resolved strings.

Templates use printf-style mapping placeholders, the same syntax as
Python's ``%`` operator with a mapping::

    "Hello, %(name)s! You have %(count)d new messages."

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import Any

from g11n.diagnostics import Diagnostic, DiagnosticCode, FormattingError
from g11n.runtime.entries import Entry, Leaf

__all__ = ["interpolate"]


def interpolate(entry: Entry | None, values: Mapping[str, Any]) -> Entry | None:
    """Substitute ``values`` into a string entry.

    No-op unless ``entry`` is a Leaf and ``values`` is non-empty.

    Args:
        entry: Resolved (and possibly pluralized) entry
        values: Placeholder values keyed by placeholder name

    Returns:
        New Leaf with placeholders replaced, or the untouched entry

    Raises:
        FormattingError: If the template references a name missing from
            ``values`` or is otherwise malformed. ``fallback_value`` holds the
            raw template.

    Examples:
        >>> interpolate(Leaf("%(count)s items"), {"count": 5})
        Leaf(text='5 items')
        >>> interpolate(Leaf("100%"), {})
        Leaf(text='100%')
    """
    match entry:
        case Leaf(text) if values:
            try:
                return Leaf(text % values)
            except KeyError as e:
                diagnostic = Diagnostic(
                    code=DiagnosticCode.INTERPOLATION_FAILED,
                    message=f"No value provided for placeholder {e} in {text!r}",
                    hint="Pass the placeholder as a keyword argument to translate()",
                )
                raise FormattingError(diagnostic, fallback_value=text) from e
            except (ValueError, TypeError) as e:
                diagnostic = Diagnostic(
                    code=DiagnosticCode.INTERPOLATION_FAILED,
                    message=f"Malformed template {text!r}: {e}",
                    hint="Escape literal percent signs as %%",
                )
                raise FormattingError(diagnostic, fallback_value=text) from e
        case _:
            return entry
