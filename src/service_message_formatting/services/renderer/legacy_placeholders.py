# -*- coding: utf-8 -*-
"""Legacy literal-placeholder substitution ("{name}", "{game}", "{amount}", "{title}").

Used only by game-score and invoice-payment templates, whose text carries literal
tokens instead of positional arguments. Token positions are found by searching the
provider's output, so this path breaks if a provider-filled argument contains a
token. Keep it separate from the range-tracking path.
"""

from __future__ import annotations

from collections.abc import Sequence

from service_message_formatting.models.result import StyledRange, StyleRole, TextRange

Replacement = tuple[str, str, StyleRole | None]
"""(token, value, role); role None leaves the value as body text."""


def substitute_placeholders(
    text: str,
    replacements: Sequence[Replacement],
) -> tuple[str, tuple[StyledRange, ...]]:
    """Replace the first occurrence of each token, in source order, and style the values.

    Tokens missing from text are skipped. A token that starts inside an earlier
    token's span is skipped.
    """
    located: list[tuple[int, str, str, StyleRole | None]] = []
    for token, value, role in replacements:
        position = text.find(token)
        if position >= 0:
            located.append((position, token, value, role))
    located.sort(key=lambda item: item[0])

    parts: list[str] = []
    styled: list[StyledRange] = []
    cursor = 0
    length = 0
    for position, token, value, role in located:
        if position < cursor:
            continue
        literal = text[cursor:position]
        parts.append(literal)
        length += len(literal)
        if role is not None and value:
            styled.append(StyledRange(TextRange(length, len(value)), role))
        parts.append(value)
        length += len(value)
        cursor = position + len(token)
    parts.append(text[cursor:])
    return "".join(parts), tuple(styled)
