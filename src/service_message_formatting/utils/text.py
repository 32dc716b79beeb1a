"""Text helpers for service message arguments."""

from __future__ import annotations

from collections.abc import Iterable

import regex

PINNED_TEXT_LIMIT = 14
ELLIPSIS = "..."

_GRAPHEME = regex.compile(r"\X")


def collapse_newlines(text: str) -> str:
    """Replace every newline with a single space."""
    return text.replace("\n", " ")


def clip_text(text: str, limit: int = PINNED_TEXT_LIMIT, ellipsis: str = ELLIPSIS) -> str:
    """Collapse newlines, then keep the first limit characters plus ellipsis if longer.

    Characters are user-perceived (grapheme clusters), so an emoji sequence or a
    letter with combining marks counts once and is never split.
    Text of limit characters or fewer is returned without an ellipsis.
    """
    collapsed = collapse_newlines(text)
    graphemes = _GRAPHEME.findall(collapsed)
    if len(graphemes) > limit:
        return f"{''.join(graphemes[:limit])}{ellipsis}"
    return collapsed


def join_names(names: Iterable[str], separator: str = ", ") -> str:
    """Join display names into one plain string."""
    return separator.join(names)
