# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from service_message_formatting.collaborators.in_memory import (
    DefaultHumanizer,
    Entity,
    InMemoryEntityDirectory,
    InMemoryTemplateProvider,
)
from service_message_formatting.models import (
    ContainerKind,
    EntityKind,
    RenderContext,
)
from service_message_formatting.services.classifier import EventClassifier
from service_message_formatting.services.formatter import ServiceMessageFormatter
from service_message_formatting.services.renderer import TemplateRenderer

VIEWER_ID = 1
ALICE_ID = 2
BOB_ID = 3
CAROL_ID = 4
GROUP_ID = 100
CHANNEL_ID = 200
SUPERGROUP_ID = 300
SHOP_ID = 400


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def directory() -> InMemoryEntityDirectory:
    """Users and chats known to every test."""
    return InMemoryEntityDirectory(
        [
            Entity.user(VIEWER_ID, "Vera", "Viewer"),
            Entity.user(ALICE_ID, "Alice", "Smith"),
            Entity.user(BOB_ID, "Bob", "Jones"),
            Entity.user(CAROL_ID, "Carol"),
            Entity.user(SHOP_ID, "ShopBot"),
            Entity.chat(GROUP_ID, "Chess Club"),
            Entity.chat(CHANNEL_ID, "Daily News", EntityKind.BROADCAST_CHANNEL),
            Entity.chat(SUPERGROUP_ID, "Open Forum", EntityKind.PLAIN_CHANNEL),
        ]
    )


@pytest.fixture
def context_factory(now_utc: datetime) -> Callable[..., RenderContext]:
    """Build RenderContext for Alice acting in a basic group, with easy overrides."""

    def _build(**overrides: Any) -> RenderContext:
        actor_id = overrides.pop("actor_id", ALICE_ID)
        default_actor_kind = EntityKind.USER if actor_id is not None else None
        return RenderContext(
            viewer_id=overrides.pop("viewer_id", VIEWER_ID),
            container_id=overrides.pop("container_id", GROUP_ID),
            container_kind=overrides.pop("container_kind", ContainerKind.GROUP),
            actor_id=actor_id,
            actor_kind=overrides.pop("actor_kind", default_actor_kind),
            for_chat_list=overrides.pop("for_chat_list", False),
            is_incoming=overrides.pop("is_incoming", False),
            now=overrides.pop("now", now_utc),
            **overrides,
        )

    return _build


@pytest.fixture
def template_provider() -> InMemoryTemplateProvider:
    return InMemoryTemplateProvider.english()


@pytest.fixture
def humanizer(now_utc: datetime) -> DefaultHumanizer:
    """UTC humanizer whose clock is pinned to now_utc."""
    return DefaultHumanizer(clock=lambda: now_utc)


@pytest.fixture
def classifier() -> EventClassifier:
    return EventClassifier()


@pytest.fixture
def renderer(
    template_provider: InMemoryTemplateProvider,
    humanizer: DefaultHumanizer,
) -> TemplateRenderer:
    return TemplateRenderer(template_provider=template_provider, humanizer=humanizer)


@pytest.fixture
def formatter(classifier: EventClassifier, renderer: TemplateRenderer) -> ServiceMessageFormatter:
    return ServiceMessageFormatter(classifier, renderer)
