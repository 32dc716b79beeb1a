"""Styling types: visual attributes and the protocols callers implement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from service_message_formatting.models.entity import EntityId
from service_message_formatting.models.result import RenderResult, StyleRole


@dataclass(frozen=True)
class TextAttributes:
    """Visual attributes for one run of text."""

    font_size: float
    bold: bool = False
    color: str = "#000000"
    mention_entity_id: EntityId | None = None
    url: str | None = None


class StyleResolver(Protocol):
    """Map a semantic role to visual attributes."""

    def attributes(self, role: StyleRole) -> TextAttributes:
        ...


class ServiceMessageStyler(Protocol):
    """Render a RenderResult into a formatted string for delivery."""

    def render(self, result: RenderResult) -> str:
        ...
