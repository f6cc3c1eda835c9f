"""
Case-style normalisation for generated keys.

Labels are split into words on separators and case boundaries, then
rejoined in the requested style. Results never start with a digit.
"""

from __future__ import annotations

import re

from chuk_mcp_tokens.constants import StringCase

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_UPPER_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def split_words(label: str) -> list[str]:
    """Split a label into words on separators and case boundaries."""
    spaced = _UPPER_WORD.sub(r"\1 \2", _LOWER_UPPER.sub(r"\1 \2", label))
    return [word for word in _SEPARATORS.split(spaced) if word]


def _capitalize(word: str, index: int) -> str:
    # Digit-led words get an underscore so they stay visually separate
    if index > 0 and word[0].isdigit():
        return f"_{word.lower()}"
    return word[0].upper() + word[1:].lower()


def change_case(label: str, style: StringCase) -> str:
    """
    Rejoin a label's words in a case style.

    Args:
        label: Raw label
        style: Target case style

    Returns:
        The restyled label (may start with a digit)
    """
    words = split_words(label)
    if not words:
        return ""

    if style == StringCase.CAMEL:
        return words[0].lower() + "".join(_capitalize(w, i) for i, w in enumerate(words) if i > 0)
    if style == StringCase.PASCAL:
        return "".join(_capitalize(w, i) for i, w in enumerate(words))
    if style == StringCase.KEBAB:
        return "-".join(w.lower() for w in words)
    if style == StringCase.SNAKE:
        return "_".join(w.lower() for w in words)
    return "_".join(w.upper() for w in words)


def code_safe_variable_name(label: str, style: StringCase) -> str:
    """
    Convert a label into an identifier-safe key.

    A leading underscore is added when the styled name would start with
    a digit, e.g. "50" becomes "_50".

    Args:
        label: Raw label (token name, group name, collection name)
        style: Target case style

    Returns:
        Code-safe key, empty if the label has no alphanumeric characters
    """
    name = change_case(label, style)
    if name and name[0].isdigit():
        return f"_{name}"
    return name


def strip_leading_underscore(name: str) -> str:
    """Remove a single leading underscore."""
    return name[1:] if name.startswith("_") else name
