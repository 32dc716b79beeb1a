# -*- coding: utf-8 -*-
"""Unit tests for the dependency injection container."""

from __future__ import annotations

from collections.abc import Callable

from conftest import BOB_ID
from service_message_formatting.collaborators.in_memory import InMemoryEntityDirectory
from service_message_formatting.config import Settings
from service_message_formatting.DI import Container
from service_message_formatting.models import MembersAdded, RenderContext
from service_message_formatting.models.result import StyleRole
from service_message_formatting.services.formatter import ServiceMessageFormatter
from service_message_formatting.styling import HtmlServiceMessageStyler


def _container(settings: Settings) -> Container:
    container = Container()
    container.config.override(settings)
    return container


def test_container_builds_working_formatter(
    context_factory: Callable[..., RenderContext],
    directory: InMemoryEntityDirectory,
) -> None:
    container = _container(Settings.from_env(_env_file=None))

    formatter = container.formatter()
    result = formatter.format(MembersAdded((BOB_ID,)), context_factory(), directory)

    assert isinstance(formatter, ServiceMessageFormatter)
    assert container.formatter() is formatter
    assert result is not None
    html = container.html_styler().render(result)
    assert isinstance(container.html_styler(), HtmlServiceMessageStyler)
    assert html == '<a href="tg://user?id=2"><b>Alice Smith</b></a> invited <a href="tg://user?id=3"><b>Bob Jones</b></a>'


def test_container_applies_formatting_settings(
    context_factory: Callable[..., RenderContext],
    directory: InMemoryEntityDirectory,
) -> None:
    settings = Settings.from_env(
        _env_file=None,
        formatting={"entity_list_separator": " + "},
    )
    container = _container(settings)

    text = container.formatter().plain_text(MembersAdded((BOB_ID, 4)), context_factory(), directory)

    assert text == "Alice Smith invited Bob Jones + Carol"


def test_style_resolver_uses_style_settings() -> None:
    container = _container(Settings.from_env(_env_file=None, style={"font_size": 17.0}))

    attributes = container.style_resolver().attributes(StyleRole.body())

    assert attributes.font_size == 17.0
