# -*- coding: utf-8 -*-
"""Range checks between the renderer and its template provider.

Bad ranges mean the provider broke its contract; they are fatal, never clipped.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from service_message_formatting.exceptions import InvalidArgumentRangeError
from service_message_formatting.models.result import StyledRange, TextRange


def _check_bounds(text: str, rng: TextRange, *, key: str | None) -> None:
    if rng.location < 0 or rng.length < 0 or rng.end > len(text):
        raise InvalidArgumentRangeError(
            f"range {rng.location}+{rng.length} outside text of length {len(text)}",
            key=key,
            ranges=rng,
        )


def _check_disjoint(ranges: Iterable[TextRange], *, key: str | None) -> None:
    previous: TextRange | None = None
    for rng in sorted((r for r in ranges if r.length > 0), key=lambda r: r.location):
        if previous is not None and rng.overlaps(previous):
            raise InvalidArgumentRangeError(
                f"ranges {previous.location}+{previous.length} and {rng.location}+{rng.length} overlap",
                key=key,
                ranges=(previous, rng),
            )
        previous = rng


def validate_argument_ranges(
    text: str,
    ranges: Sequence[tuple[int, TextRange]],
    *,
    argument_count: int,
    key: str | None = None,
) -> None:
    """Check provider ranges: known argument index, inside text, pairwise disjoint.

    Raises:
        InvalidArgumentRangeError: on the first violation found.
    """
    for index, rng in ranges:
        if index < 0 or index >= argument_count:
            raise InvalidArgumentRangeError(
                f"range for argument {index} but {argument_count} arguments supplied",
                key=key,
                ranges=ranges,
            )
        _check_bounds(text, rng, key=key)
    _check_disjoint((rng for _, rng in ranges), key=key)


def sorted_styled_ranges(
    text: str,
    styled: Iterable[StyledRange],
    *,
    key: str | None = None,
) -> tuple[StyledRange, ...]:
    """Return styled ranges sorted by start after checking bounds and overlap.

    Raises:
        InvalidArgumentRangeError: a range is out of bounds or overlaps another.
    """
    ordered = sorted(styled, key=lambda s: (s.range.location, s.range.length))
    for item in ordered:
        _check_bounds(text, item.range, key=key)
    _check_disjoint((item.range for item in ordered), key=key)
    return tuple(ordered)
