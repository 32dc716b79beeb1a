"""Caller-side styling of render results."""

from service_message_formatting.styling.html import HtmlServiceMessageStyler
from service_message_formatting.styling.theme import ThemeStyleResolver
from service_message_formatting.styling.types import (
    ServiceMessageStyler,
    StyleResolver,
    TextAttributes,
)

__all__ = [
    "HtmlServiceMessageStyler",
    "ServiceMessageStyler",
    "StyleResolver",
    "TextAttributes",
    "ThemeStyleResolver",
]
