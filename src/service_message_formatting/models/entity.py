# -*- coding: utf-8 -*-
"""Entity identity and kinds shared by events, contexts and the entity directory."""

from __future__ import annotations

from enum import Enum

EntityId = int
"""Opaque entity id (user, group, channel or secret chat)."""


class EntityKind(str, Enum):
    """Kind of an entity as reported by the entity directory."""

    USER = "user"
    GROUP = "group"
    BROADCAST_CHANNEL = "broadcast_channel"
    PLAIN_CHANNEL = "plain_channel"


CHANNEL_ENTITY_KINDS = frozenset({EntityKind.BROADCAST_CHANNEL, EntityKind.PLAIN_CHANNEL})


class ContainerKind(str, Enum):
    """Kind of the chat a service message lives in."""

    USER = "user"
    GROUP = "group"
    BROADCAST_CHANNEL = "broadcast_channel"
    CHANNEL_GROUP = "channel_group"
    """Channel-backed group (supergroup)."""
    SECRET_CHAT = "secret_chat"


class NameOrder(str, Enum):
    """Display order of a person's first and last name."""

    FIRST_LAST = "first_last"
    LAST_FIRST = "last_first"
