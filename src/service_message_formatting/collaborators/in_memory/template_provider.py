# -*- coding: utf-8 -*-
"""In-memory template provider backed by a key -> template mapping."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum

from service_message_formatting.collaborators.interfaces.template_provider import (
    ITemplateProvider,
    TemplateLookup,
)
from service_message_formatting.exceptions import TemplateFormatError, TemplateNotFoundError
from service_message_formatting.templates.formatting import format_with_argument_ranges
from service_message_formatting.templates.strings_en import ENGLISH_STRINGS


def _key(key: str) -> str:
    """Normalize enum members and plain strings to the same lookup key."""
    return key.value if isinstance(key, Enum) else str(key)


def plural_category(count: int) -> str:
    """Return the English CLDR plural category for count."""
    return "one" if count == 1 else "other"


class InMemoryTemplateProvider(ITemplateProvider):
    """In-memory implementation of ITemplateProvider."""

    def __init__(self, strings: Mapping[str, str | Mapping[str, str]]) -> None:
        """Initialize from a mapping of key to template (or plural table)."""
        self._strings: dict[str, str | Mapping[str, str]] = {
            _key(k): v for k, v in strings.items()
        }

    @classmethod
    def english(cls) -> InMemoryTemplateProvider:
        """Return a provider over the built-in English table."""
        return cls(ENGLISH_STRINGS)

    def with_overrides(
        self, overrides: Mapping[str, str | Mapping[str, str]]
    ) -> InMemoryTemplateProvider:
        """Return a new provider with some templates replaced."""
        merged: dict[str, str | Mapping[str, str]] = dict(self._strings)
        merged.update({_key(k): v for k, v in overrides.items()})
        return InMemoryTemplateProvider(merged)

    def lookup(
        self,
        key: str,
        args: Sequence[str],
        *,
        plural: int | None = None,
    ) -> TemplateLookup:
        """Fill the template for key; plural picks the form when the entry is a table."""
        normalized = _key(key)
        entry = self._strings.get(normalized)
        if entry is None:
            raise TemplateNotFoundError(normalized)
        template = self._select_form(normalized, entry, plural)
        text, ranges = format_with_argument_ranges(template, args, key=normalized)
        return TemplateLookup(text=text, ranges=ranges)

    @staticmethod
    def _select_form(key: str, entry: str | Mapping[str, str], plural: int | None) -> str:
        if isinstance(entry, str):
            return entry
        category = plural_category(plural) if plural is not None else "other"
        form = entry.get(category) or entry.get("other")
        if form is None:
            raise TemplateFormatError(key, f"no plural form for category {category!r}")
        return form
