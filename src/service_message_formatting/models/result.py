# -*- coding: utf-8 -*-
"""Render output: text plus semantic style roles over character ranges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from service_message_formatting.models.entity import EntityId


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open character span [location, location + length)."""

    location: int
    length: int

    @property
    def end(self) -> int:
        return self.location + self.length

    def overlaps(self, other: TextRange) -> bool:
        return self.location < other.end and other.location < self.end

    def shifted(self, delta: int) -> TextRange:
        return TextRange(self.location + delta, self.length)


class StyleRoleKind(str, Enum):
    BODY = "body"
    BOLD = "bold"
    MENTION = "mention"
    LINK = "link"


@dataclass(frozen=True, slots=True)
class StyleRole:
    """Semantic style; the caller's style resolver turns it into visuals."""

    kind: StyleRoleKind
    entity_id: EntityId | None = None
    url: str | None = None

    @classmethod
    def body(cls) -> StyleRole:
        return cls(StyleRoleKind.BODY)

    @classmethod
    def bold(cls) -> StyleRole:
        return cls(StyleRoleKind.BOLD)

    @classmethod
    def mention(cls, entity_id: EntityId) -> StyleRole:
        return cls(StyleRoleKind.MENTION, entity_id=entity_id)

    @classmethod
    def link(cls, url: str | None = None) -> StyleRole:
        return cls(StyleRoleKind.LINK, url=url)


@dataclass(frozen=True, slots=True)
class StyledRange:
    range: TextRange
    role: StyleRole


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Final text with non-body styled ranges, sorted and non-overlapping.

    Characters not covered by a styled range use the body role.
    """

    text: str
    styled_ranges: tuple[StyledRange, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.text

    def role_at(self, offset: int) -> StyleRole:
        """Return the role covering the character at offset (body if none)."""
        for styled in self.styled_ranges:
            if styled.range.location <= offset < styled.range.end:
                return styled.role
        return StyleRole.body()

    def substring(self, styled: StyledRange) -> str:
        return self.text[styled.range.location : styled.range.end]
