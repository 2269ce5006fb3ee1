"""Input case normalization."""

from __future__ import annotations

from collections.abc import Collection


def fix_string_case(text: str, case_sensitive: Collection[str]) -> str:
    """Lowercase text except characters the grammar marks as case-sensitive.

    A character is kept as typed when it, or its lowercase form, belongs to
    ``case_sensitive``; ``"O"`` survives when ``"o"`` is listed.
    """
    if not text:
        return ""
    return "".join(
        char if char in case_sensitive or char.lower() in case_sensitive else char.lower()
        for char in text
    )
