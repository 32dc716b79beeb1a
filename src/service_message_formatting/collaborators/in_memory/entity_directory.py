# -*- coding: utf-8 -*-
"""In-memory entity directory (keyed by entity id)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from service_message_formatting.collaborators.interfaces.entity_directory import IEntityDirectory
from service_message_formatting.models.entity import EntityId, EntityKind, NameOrder


@dataclass(frozen=True, slots=True)
class Entity:
    """A user, group or channel known to the message snapshot."""

    entity_id: EntityId
    kind: EntityKind
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    """Group/channel title; unused for users."""

    @classmethod
    def user(cls, entity_id: EntityId, first_name: str, last_name: str = "") -> Entity:
        return cls(entity_id=entity_id, kind=EntityKind.USER, first_name=first_name, last_name=last_name)

    @classmethod
    def chat(cls, entity_id: EntityId, title: str, kind: EntityKind = EntityKind.GROUP) -> Entity:
        return cls(entity_id=entity_id, kind=kind, title=title)


class InMemoryEntityDirectory(IEntityDirectory):
    """In-memory implementation of IEntityDirectory."""

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        """Initialize the store with optional entities."""
        self._store: dict[EntityId, Entity] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: Entity) -> None:
        """Add or replace an entity."""
        self._store[entity.entity_id] = entity

    def get(self, entity_id: EntityId) -> Entity | None:
        return self._store.get(entity_id)

    def display_name(self, entity_id: EntityId, order: NameOrder = NameOrder.FIRST_LAST) -> str:
        entity = self._store.get(entity_id)
        if entity is None:
            return ""
        if entity.kind is not EntityKind.USER:
            return entity.title
        if order is NameOrder.LAST_FIRST:
            parts = (entity.last_name, entity.first_name)
        else:
            parts = (entity.first_name, entity.last_name)
        return " ".join(part for part in parts if part)

    def compact_name(self, entity_id: EntityId) -> str:
        entity = self._store.get(entity_id)
        if entity is None:
            return ""
        if entity.kind is not EntityKind.USER:
            return entity.title
        return entity.first_name or entity.last_name

    def kind(self, entity_id: EntityId) -> EntityKind | None:
        entity = self._store.get(entity_id)
        return entity.kind if entity is not None else None
