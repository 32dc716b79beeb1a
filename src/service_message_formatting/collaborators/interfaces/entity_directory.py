"""Abstract interface for resolving entity names and kinds."""

from __future__ import annotations

from abc import ABC, abstractmethod

from service_message_formatting.models.entity import EntityId, EntityKind, NameOrder


class IEntityDirectory(ABC):
    """Interface for the peers a message snapshot knows about."""

    @abstractmethod
    def display_name(self, entity_id: EntityId, order: NameOrder = NameOrder.FIRST_LAST) -> str:
        """Return the full display name, or "" when the entity is unknown."""
        ...

    @abstractmethod
    def kind(self, entity_id: EntityId) -> EntityKind | None:
        """Return the entity kind, or None when the entity is unknown."""
        ...

    def compact_name(self, entity_id: EntityId) -> str:
        """Return the short name (first name for users). Default: full display name."""
        return self.display_name(entity_id)
