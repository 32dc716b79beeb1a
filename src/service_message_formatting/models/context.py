# -*- coding: utf-8 -*-
"""RenderContext: ambient facts shared by every event variant during one render."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from service_message_formatting.models.entity import (
    CHANNEL_ENTITY_KINDS,
    ContainerKind,
    EntityId,
    EntityKind,
    NameOrder,
)

if TYPE_CHECKING:
    from service_message_formatting.collaborators.interfaces import IEntityDirectory


_CONTAINER_KIND_BY_ENTITY_KIND: dict[EntityKind, ContainerKind] = {
    EntityKind.USER: ContainerKind.USER,
    EntityKind.GROUP: ContainerKind.GROUP,
    EntityKind.BROADCAST_CHANNEL: ContainerKind.BROADCAST_CHANNEL,
    EntityKind.PLAIN_CHANNEL: ContainerKind.CHANNEL_GROUP,
}


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Read-only facts about the message being rendered and who is looking at it."""

    viewer_id: EntityId
    """Account viewing the message ("you")."""
    container_id: EntityId
    """Chat the message lives in."""
    container_kind: ContainerKind
    actor_id: EntityId | None = None
    """Author of the service message; None when anonymous."""
    actor_kind: EntityKind | None = None
    name_order: NameOrder = NameOrder.FIRST_LAST
    for_chat_list: bool = False
    """Condensed rendering for the chat list."""
    is_incoming: bool = False
    """Message direction flag (incoming to the viewer)."""
    now: datetime | None = None
    """Reference time for relative dates; None lets the humanizer use its clock."""

    @property
    def actor_is_viewer(self) -> bool:
        return self.actor_id is not None and self.actor_id == self.viewer_id

    @property
    def is_broadcast(self) -> bool:
        return self.container_kind is ContainerKind.BROADCAST_CHANNEL

    @property
    def actor_is_channel(self) -> bool:
        """True when the message is authored by a channel rather than a person."""
        return self.actor_kind in CHANNEL_ENTITY_KINDS

    @classmethod
    def resolve(
        cls,
        directory: "IEntityDirectory",
        *,
        viewer_id: EntityId,
        container_id: EntityId,
        actor_id: EntityId | None = None,
        is_secret_chat: bool = False,
        name_order: NameOrder = NameOrder.FIRST_LAST,
        for_chat_list: bool = False,
        is_incoming: bool = False,
        now: datetime | None = None,
    ) -> RenderContext:
        """Build a context, deriving container and actor kinds from the directory.

        Unknown containers default to USER, unknown actors to no kind.
        """
        if is_secret_chat:
            container_kind = ContainerKind.SECRET_CHAT
        else:
            entity_kind = directory.kind(container_id)
            container_kind = (
                _CONTAINER_KIND_BY_ENTITY_KIND[entity_kind]
                if entity_kind is not None
                else ContainerKind.USER
            )
        actor_kind = directory.kind(actor_id) if actor_id is not None else None
        return cls(
            viewer_id=viewer_id,
            container_id=container_id,
            container_kind=container_kind,
            actor_id=actor_id,
            actor_kind=actor_kind,
            name_order=name_order,
            for_chat_list=for_chat_list,
            is_incoming=is_incoming,
            now=now,
        )
