# -*- coding: utf-8 -*-
"""Unit tests for the theme resolver and HTML styler."""

from __future__ import annotations

from service_message_formatting.models.result import RenderResult, StyledRange, StyleRole, TextRange
from service_message_formatting.styling import (
    HtmlServiceMessageStyler,
    TextAttributes,
    ThemeStyleResolver,
)


def _result() -> RenderResult:
    return RenderResult(
        text="Alice invited <Bob> via site",
        styled_ranges=(
            StyledRange(TextRange(0, 5), StyleRole.mention(2)),
            StyledRange(TextRange(14, 5), StyleRole.bold()),
            StyledRange(TextRange(24, 4), StyleRole.link("https://a.example/?x=1&y=2")),
        ),
    )


def test_theme_resolver_roles() -> None:
    resolver = ThemeStyleResolver(font_size=15.0, text_color="#111111", link_color="#0000ff")

    assert resolver.attributes(StyleRole.body()) == TextAttributes(15.0, bold=False, color="#111111")
    assert resolver.attributes(StyleRole.bold()) == TextAttributes(15.0, bold=True, color="#111111")
    assert resolver.attributes(StyleRole.mention(7)) == TextAttributes(
        15.0, bold=True, color="#111111", mention_entity_id=7
    )
    assert resolver.attributes(StyleRole.link("u")).color == "#0000ff"


def test_link_color_defaults_to_text_color() -> None:
    resolver = ThemeStyleResolver(text_color="#222222")

    assert resolver.attributes(StyleRole.link()).color == "#222222"


def test_runs_cover_whole_text() -> None:
    runs = ThemeStyleResolver().runs(_result())

    assert "".join(text for text, _ in runs) == _result().text
    assert [attrs.bold for _, attrs in runs] == [True, False, True, False, True]


def test_html_styler_escapes_and_wraps() -> None:
    html = HtmlServiceMessageStyler().render(_result())

    assert html == (
        '<a href="tg://user?id=2"><b>Alice</b></a> invited <b>&lt;Bob&gt;</b> via '
        '<a href="https://a.example/?x=1&amp;y=2">site</a>'
    )


def test_html_styler_plain_body() -> None:
    assert HtmlServiceMessageStyler().render(RenderResult("a & b")) == "a &amp; b"
