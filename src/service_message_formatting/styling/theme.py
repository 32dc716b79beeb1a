# -*- coding: utf-8 -*-
"""Theme-based style resolver: regular body text, bold for everything styled."""

from __future__ import annotations

from service_message_formatting.models.result import RenderResult, StyleRole, StyleRoleKind
from service_message_formatting.styling.types import StyleResolver, TextAttributes


class ThemeStyleResolver(StyleResolver):
    """Resolve roles against one font size and a text/link colour pair."""

    def __init__(
        self,
        *,
        font_size: float = 13.0,
        text_color: str = "#000000",
        link_color: str | None = None,
    ) -> None:
        self._font_size = font_size
        self._text_color = text_color
        self._link_color = link_color or text_color

    def attributes(self, role: StyleRole) -> TextAttributes:
        """Return attributes for role; unknown roles fall back to body."""
        if role.kind is StyleRoleKind.BOLD:
            return TextAttributes(self._font_size, bold=True, color=self._text_color)
        if role.kind is StyleRoleKind.MENTION:
            return TextAttributes(
                self._font_size,
                bold=True,
                color=self._text_color,
                mention_entity_id=role.entity_id,
            )
        if role.kind is StyleRoleKind.LINK:
            return TextAttributes(self._font_size, bold=True, color=self._link_color, url=role.url)
        return TextAttributes(self._font_size, color=self._text_color)

    def runs(self, result: RenderResult) -> list[tuple[str, TextAttributes]]:
        """Split result into consecutive (text, attributes) runs covering the whole text."""
        runs: list[tuple[str, TextAttributes]] = []
        body = self.attributes(StyleRole.body())
        cursor = 0
        for styled in result.styled_ranges:
            if styled.range.location > cursor:
                runs.append((result.text[cursor : styled.range.location], body))
            runs.append((result.substring(styled), self.attributes(styled.role)))
            cursor = styled.range.end
        if cursor < len(result.text):
            runs.append((result.text[cursor:], body))
        return runs
