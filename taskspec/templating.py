"""
Placeholder substitution for template strings.

Supports:
  - ${key} — replaced with replacements[key], where key is any run of
             characters other than whitespace and braces
             (e.g. ``inputs.params.url``, ``inputs.params.a:b``)

Unknown keys and malformed tokens (``${ key }``, ``${}``, ``${key``) are
left in the output exactly as written.
"""

import re
from collections.abc import Mapping

VARIABLE_PATTERN = re.compile(r"\$\{([^{}\s]+)\}")


def apply_replacements(text: str, replacements: Mapping[str, str]) -> str:
    """
    Substitute every ``${key}`` in text whose key is in replacements.

    The text is scanned once, so a value that itself looks like a
    placeholder is emitted literally.

    Args:
        text: The template string.
        replacements: Fully-qualified key → value.

    Returns:
        The substituted string.
    """
    if not text or "${" not in text:
        return text

    def _replace_key(match: re.Match) -> str:
        key = match.group(1)
        if key in replacements:
            return replacements[key]
        return match.group(0)

    return VARIABLE_PATTERN.sub(_replace_key, text)


def find_variables(text: str) -> list[str]:
    """Return the keys referenced in text, in order, without duplicates."""
    if not text:
        return []
    seen: dict[str, None] = {}
    for match in VARIABLE_PATTERN.finditer(text):
        seen.setdefault(match.group(1), None)
    return list(seen)
