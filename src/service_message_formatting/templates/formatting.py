# -*- coding: utf-8 -*-
"""printf-style template filling that reports where each argument landed.

Supported specifiers: ``%@``/``%d``/``%s`` (next argument), ``%N$@``/``%N$d``/``%N$s``
(argument N, 1-based) and ``%%``. Ranges are in str indices of the output.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from service_message_formatting.exceptions import TemplateFormatError
from service_message_formatting.models.result import TextRange

_SPECIFIER = re.compile(
    r"%(?:(?P<percent>%)|(?:(?P<position>\d+)\$)?(?P<conversion>[@ds]))"
)


def format_with_argument_ranges(
    template: str,
    args: Sequence[str],
    *,
    key: str = "",
) -> tuple[str, tuple[tuple[int, TextRange], ...]]:
    """Fill template with args; return (text, ((arg_index, range), ...)) in output order.

    Arguments the template does not reference get no range. An argument referenced
    twice gets two ranges.

    Raises:
        TemplateFormatError: a specifier refers to an argument that was not supplied.
    """
    parts: list[str] = []
    ranges: list[tuple[int, TextRange]] = []
    cursor = 0
    length = 0
    next_index = 0
    for match in _SPECIFIER.finditer(template):
        literal = template[cursor : match.start()]
        parts.append(literal)
        length += len(literal)
        cursor = match.end()

        if match.group("percent"):
            parts.append("%")
            length += 1
            continue

        position = match.group("position")
        if position is not None:
            index = int(position) - 1
        else:
            index = next_index
            next_index += 1
        if index < 0 or index >= len(args):
            raise TemplateFormatError(
                key, f"argument {index + 1} requested but {len(args)} supplied"
            )

        value = args[index]
        ranges.append((index, TextRange(length, len(value))))
        parts.append(value)
        length += len(value)

    parts.append(template[cursor:])
    return "".join(parts), tuple(ranges)
