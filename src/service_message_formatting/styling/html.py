# -*- coding: utf-8 -*-
"""HTML styler (Telegram-style markup): bold, mention and link tags over escaped text."""

from __future__ import annotations

from html import escape

from service_message_formatting.models.result import RenderResult, StyleRole, StyleRoleKind
from service_message_formatting.styling.types import ServiceMessageStyler


class HtmlServiceMessageStyler(ServiceMessageStyler):
    """Render a RenderResult as HTML; body text is escaped and left untagged."""

    def render(self, result: RenderResult) -> str:
        parts: list[str] = []
        cursor = 0
        for styled in result.styled_ranges:
            if styled.range.location > cursor:
                parts.append(escape(result.text[cursor : styled.range.location], quote=False))
            parts.append(self._wrap(escape(result.substring(styled), quote=False), styled.role))
            cursor = styled.range.end
        if cursor < len(result.text):
            parts.append(escape(result.text[cursor:], quote=False))
        return "".join(parts)

    @staticmethod
    def _wrap(text: str, role: StyleRole) -> str:
        if role.kind is StyleRoleKind.BOLD:
            return f"<b>{text}</b>"
        if role.kind is StyleRoleKind.MENTION:
            return f'<a href="tg://user?id={role.entity_id}"><b>{text}</b></a>'
        if role.kind is StyleRoleKind.LINK:
            if not role.url:
                return text
            return f'<a href="{escape(role.url)}">{text}</a>'
        return text
