"""Quickstart example for g11n.

Demonstrates translation lookup, plural selection, interpolation, scoped
locales and date formatting with a dedicated registry.

Note: Examples use their own Globalization instance. The module-level
functions (g11n.translate, ...) work the same way against the shared
default registry.
"""

from datetime import date, datetime

from g11n import FormattingError, Globalization, GlobalizationConfig

g = Globalization()

# Example 1: Registering and translating
print("=" * 50)
print("Example 1: Simple Translation")
print("=" * 50)

g.register_translations("app", "en", {
    "greeting": "Hello, %(name)s!",
    "inbox": {
        "zero": "No new messages",
        "one": "1 new message",
        "other": "%(count)s new messages",
    },
})
g.register_translations("app", "fr", {
    "greeting": "Bonjour, %(name)s !",
    "inbox": {"one": "1 nouveau message", "other": "%(count)s nouveaux messages"},
})

print(g.translate("greeting", namespace="app", name="Alice"))
# Output: Hello, Alice!

# Example 2: Plurals
print("\n" + "=" * 50)
print("Example 2: Plural Selection")
print("=" * 50)

with g.namespace_scope("app"):
    for count in (0, 1, 5):
        print(g.translate("inbox", count=count))
# Output:
# No new messages
# 1 new message
# 5 new messages

# Example 3: Scoped locale
print("\n" + "=" * 50)
print("Example 3: Scoped Locale")
print("=" * 50)

with g.locale_scope("fr"), g.namespace_scope("app"):
    print(g.translate("inbox", count=0))
# Output: 0 nouveaux messages  (no "zero" branch in French)

print(g.translate("missing.key"))
# Output: missing translation: globalization.en.missing.key

# Example 4: Locale change listeners
print("\n" + "=" * 50)
print("Example 4: Locale Change Listeners")
print("=" * 50)

g.on_locale_change(lambda new, old: print(f"locale changed: {old} -> {new}"))
g.set_locale("fr")
g.set_locale("fr")  # unchanged, no notification
g.set_locale("en")

# Example 5: Dates
print("\n" + "=" * 50)
print("Example 5: Date Formatting")
print("=" * 50)

print(g.localize(datetime(2025, 10, 27, 14, 30, 5)))
# Output: Mon, 27 Oct 2025 14:30:05
print(g.localize(date(2025, 10, 27), type="date", format="long"))
# Output: October 27, 2025

# Example 6: Strict mode
print("\n" + "=" * 50)
print("Example 6: Strict Mode")
print("=" * 50)

strict = Globalization(GlobalizationConfig(strict=True))
strict.register_translations("app", "en", {"greeting": "Hello, %(name)s!"})
try:
    strict.translate("greeting", namespace="app", user="Bob")
except FormattingError as e:
    print(f"{type(e).__name__}: {e}")
# Output: FormattingError: No value provided for placeholder 'name' in 'Hello, %(name)s!'
