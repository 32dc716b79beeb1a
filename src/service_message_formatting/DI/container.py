# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from service_message_formatting.collaborators.in_memory import (
    DefaultHumanizer,
    InMemoryTemplateProvider,
)
from service_message_formatting.config import Settings, get_settings
from service_message_formatting.services.classifier import EventClassifier
from service_message_formatting.services.formatter import ServiceMessageFormatter
from service_message_formatting.services.renderer import TemplateRenderer
from service_message_formatting.styling import HtmlServiceMessageStyler, ThemeStyleResolver


def _build_humanizer(settings: Settings) -> DefaultHumanizer:
    return DefaultHumanizer(
        tz=settings.formatting.tzinfo,
        use_24_hour_time=settings.formatting.use_24_hour_time,
    )


def _build_classifier(settings: Settings) -> EventClassifier:
    return EventClassifier(
        pinned_text_limit=settings.formatting.pinned_text_limit,
        ellipsis=settings.formatting.ellipsis,
    )


def _build_style_resolver(settings: Settings) -> ThemeStyleResolver:
    return ThemeStyleResolver(
        font_size=settings.style.font_size,
        text_color=settings.style.text_color,
        link_color=settings.style.link_color,
    )


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, collaborators, classifier, renderer and stylers."""

    config = providers.Callable(get_settings)

    humanizer = providers.Singleton(_build_humanizer, config)

    template_provider = providers.Singleton(InMemoryTemplateProvider.english)

    classifier = providers.Singleton(_build_classifier, config)

    renderer = providers.Singleton(
        TemplateRenderer,
        template_provider=template_provider,
        humanizer=humanizer,
        list_separator=config.provided.formatting.entity_list_separator,
    )

    formatter = providers.Singleton(
        ServiceMessageFormatter,
        classifier=classifier,
        renderer=renderer,
    )

    style_resolver = providers.Singleton(_build_style_resolver, config)

    html_styler = providers.Singleton(HtmlServiceMessageStyler)
