"""
Text cleaning helpers for numeric input (pre-parse only).

The parser never sees raw user text: `clean_number_text` squishes whitespace,
drops a single leading '+' and completes a bare trailing '.' with a zero.
Validation against the grammar happens afterwards in `NumberValue.from_string`.
"""

from __future__ import annotations

import re

# Unicode whitespace plus the invisible fillers that plain \s does not cover.
_BLANK_RUN = re.compile(r"[\s\u1160\u3164\ufeff\u200b]+")


def squish(text: str) -> str:
    """Collapse every whitespace run into one space and trim both ends.

      '  1   000 '  -> '1 000'
      '\\ufeff12\\n' -> '12'
    """
    return _BLANK_RUN.sub(" ", text).strip(" ")


def strip_prefix(text: str, prefix: str) -> str:
    """Remove one occurrence of `prefix` from the start of `text`, if present."""
    if prefix and text.startswith(prefix):
        return text[len(prefix):]
    return text


def finish(text: str, cap: str) -> str:
    """Append `cap` unless `text` already ends with it."""
    if text.endswith(cap):
        return text
    return text + cap


def clean_number_text(raw: str) -> str:
    """Canonical pre-parse form of a numeric string.

    Steps, in order: squish, strip one leading '+', turn a trailing '.' into '.0'.
    """
    text = strip_prefix(squish(raw), "+")
    if text.endswith("."):
        text = finish(text, "0")
    return text


__all__ = [
    "squish",
    "strip_prefix",
    "finish",
    "clean_number_text",
]
