# -*- coding: utf-8 -*-
"""Unit tests for InMemoryEntityDirectory."""

from __future__ import annotations

from service_message_formatting.collaborators.in_memory import Entity, InMemoryEntityDirectory
from service_message_formatting.models import EntityKind, NameOrder


def test_user_names_follow_name_order() -> None:
    directory = InMemoryEntityDirectory([Entity.user(1, "Alice", "Smith")])

    assert directory.display_name(1) == "Alice Smith"
    assert directory.display_name(1, NameOrder.LAST_FIRST) == "Smith Alice"
    assert directory.compact_name(1) == "Alice"


def test_user_without_last_name() -> None:
    directory = InMemoryEntityDirectory([Entity.user(1, "Carol")])

    assert directory.display_name(1, NameOrder.LAST_FIRST) == "Carol"


def test_chats_use_title_for_every_form() -> None:
    directory = InMemoryEntityDirectory([Entity.chat(9, "Daily News", EntityKind.BROADCAST_CHANNEL)])

    assert directory.display_name(9) == "Daily News"
    assert directory.compact_name(9) == "Daily News"
    assert directory.kind(9) is EntityKind.BROADCAST_CHANNEL


def test_unknown_entity_resolves_to_empty_name_and_no_kind() -> None:
    directory = InMemoryEntityDirectory()

    assert directory.display_name(42) == ""
    assert directory.compact_name(42) == ""
    assert directory.kind(42) is None
    assert directory.get(42) is None


def test_add_replaces_existing_entity() -> None:
    directory = InMemoryEntityDirectory([Entity.user(1, "Old")])

    directory.add(Entity.user(1, "New"))

    assert directory.display_name(1) == "New"
