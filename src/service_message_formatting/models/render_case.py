# -*- coding: utf-8 -*-
"""RenderCase: the classifier's fully resolved description of one sentence shape.

Arguments are typed values the renderer turns into strings (entity names through the
entity directory, durations/dates/amounts through the humanizer). Slots bind argument
positions to mention or bold styling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from service_message_formatting.models.entity import EntityId
from service_message_formatting.models.events import TextEntity


class CaseKind(str, Enum):
    """Closed set of sentence shapes the renderer knows how to produce."""

    NOTHING = "nothing"
    EMPTY = "empty"

    CHANNEL_CREATED = "channel_created"
    GROUP_CREATED = "group_created"
    GROUP_CREATED_WITH_TITLE = "group_created_with_title"

    JOINED_CHANNEL = "joined_channel"
    JOINED_GROUP = "joined_group"
    INVITED_MEMBER = "invited_member"
    INVITED_MEMBERS = "invited_members"
    LEFT_CHANNEL = "left_channel"
    LEFT_GROUP = "left_group"
    REMOVED_MEMBER = "removed_member"
    REMOVED_MEMBERS = "removed_members"

    CHANNEL_VIDEO_UPDATED = "channel_video_updated"
    CHANNEL_PHOTO_UPDATED = "channel_photo_updated"
    CHANNEL_PHOTO_REMOVED = "channel_photo_removed"
    GROUP_VIDEO_UPDATED = "group_video_updated"
    GROUP_PHOTO_UPDATED = "group_photo_updated"
    GROUP_PHOTO_REMOVED = "group_photo_removed"
    ACTOR_VIDEO_UPDATED = "actor_video_updated"
    ACTOR_PHOTO_UPDATED = "actor_photo_updated"
    ACTOR_PHOTO_REMOVED = "actor_photo_removed"

    CHANNEL_TITLE_UPDATED = "channel_title_updated"
    ACTOR_TITLE_UPDATED = "actor_title_updated"

    PINNED_TEXT = "pinned_text"
    PINNED_GENERIC = "pinned_generic"
    PINNED_GAME = "pinned_game"
    PINNED_PHOTO = "pinned_photo"
    PINNED_VIDEO = "pinned_video"
    PINNED_ROUND_VIDEO = "pinned_round_video"
    PINNED_VOICE = "pinned_voice"
    PINNED_FILE = "pinned_file"
    PINNED_GIF = "pinned_gif"
    PINNED_STICKER = "pinned_sticker"
    PINNED_LOCATION = "pinned_location"
    PINNED_CONTACT = "pinned_contact"
    PINNED_POLL = "pinned_poll"
    PINNED_QUIZ = "pinned_quiz"

    JOINED_BY_LINK = "joined_by_link"

    TIMER_SET_USER_SELF = "timer_set_user_self"
    TIMER_SET_USER = "timer_set_user"
    TIMER_SET_GROUP = "timer_set_group"
    TIMER_SET_CHANNEL = "timer_set_channel"
    TIMER_SET_GENERIC_SELF = "timer_set_generic_self"
    TIMER_SET_GENERIC = "timer_set_generic"
    TIMER_REMOVED_USER_SELF = "timer_removed_user_self"
    TIMER_REMOVED_USER = "timer_removed_user"
    TIMER_REMOVED_GROUP = "timer_removed_group"
    TIMER_REMOVED_CHANNEL = "timer_removed_channel"
    TIMER_REMOVED_GENERIC_SELF = "timer_removed_generic_self"
    TIMER_REMOVED_GENERIC = "timer_removed_generic"

    SCREENSHOT = "screenshot"
    SCREENSHOT_SELF = "screenshot_self"

    GAME_SCORE = "game_score"
    GAME_SCORE_EXTENDED = "game_score_extended"
    GAME_SCORE_SELF = "game_score_self"
    GAME_SCORE_SELF_EXTENDED = "game_score_self_extended"

    PAYMENT_SENT = "payment_sent"
    PAYMENT_SENT_INVOICE = "payment_sent_invoice"

    CALL_INCOMING = "call_incoming"
    CALL_OUTGOING = "call_outgoing"
    CALL_CANCELED = "call_canceled"
    CALL_MISSED = "call_missed"

    GROUP_CALL_SCHEDULED = "group_call_scheduled"
    GROUP_CALL_SCHEDULED_CHANNEL = "group_call_scheduled_channel"
    GROUP_CALL_ENDED = "group_call_ended"
    GROUP_CALL_ENDED_CHANNEL = "group_call_ended_channel"
    GROUP_CALL_STARTED = "group_call_started"
    GROUP_CALL_STARTED_CHANNEL = "group_call_started_channel"

    CUSTOM_TEXT = "custom_text"
    BOT_DOMAIN_GRANTED = "bot_domain_granted"
    BOT_SENT_SECURE_VALUES = "bot_sent_secure_values"
    PEER_JOINED = "peer_joined"

    PROXIMITY_YOU_REACHED = "proximity_you_reached"
    PROXIMITY_REACHED_YOU = "proximity_reached_you"
    PROXIMITY_REACHED = "proximity_reached"

    CALL_INVITATION_FOR_YOU = "call_invitation_for_you"
    CALL_INVITATION = "call_invitation"
    CALL_INVITATION_MULTIPLE = "call_invitation_multiple"

    IMAGE_EXPIRED = "image_expired"
    VIDEO_EXPIRED = "video_expired"


class DurationStyle(str, Enum):
    TIMER = "timer"
    """Largest whole unit ("1 day", "2 weeks")."""
    CALL = "call"
    """Call length ("45 sec", "3 min")."""


class TimestampStyle(str, Enum):
    RELATIVE = "relative"
    """"today at 14:00", "yesterday at 9:30", "Mar 3 at 14:00"."""
    TIME = "time"
    DATE_TIME = "date_time"


class SecureValueLabel(str, Enum):
    """Grouped document categories shown to the user."""

    PERSONAL_DETAILS = "personal_details"
    PROOF_OF_IDENTITY = "proof_of_identity"
    ADDRESS = "address"
    PROOF_OF_ADDRESS = "proof_of_address"
    PHONE = "phone"
    EMAIL = "email"


@dataclass(frozen=True, slots=True)
class TextArg:
    text: str


@dataclass(frozen=True, slots=True)
class EntityNameArg:
    """Display name of one entity; compact uses the short form (first name, title)."""

    entity_id: EntityId | None
    compact: bool = False


@dataclass(frozen=True, slots=True)
class EntityNamesArg:
    """Display names of several entities joined into one plain string."""

    entity_ids: tuple[EntityId, ...]


@dataclass(frozen=True, slots=True)
class DurationArg:
    seconds: int
    style: DurationStyle = DurationStyle.TIMER


@dataclass(frozen=True, slots=True)
class TimestampArg:
    timestamp: int
    style: TimestampStyle = TimestampStyle.RELATIVE


@dataclass(frozen=True, slots=True)
class DistanceArg:
    meters: int


@dataclass(frozen=True, slots=True)
class AmountArg:
    amount: int
    """Minor units."""
    currency: str


@dataclass(frozen=True, slots=True)
class CountArg:
    value: int


@dataclass(frozen=True, slots=True)
class SecureValuesArg:
    labels: tuple[SecureValueLabel, ...]


ArgumentValue = Union[
    TextArg,
    EntityNameArg,
    EntityNamesArg,
    DurationArg,
    TimestampArg,
    DistanceArg,
    AmountArg,
    CountArg,
    SecureValuesArg,
]


@dataclass(frozen=True, slots=True)
class ArgumentSlot:
    """Styling for one template argument position.

    entity_id makes the argument a mention of that entity; bold without an entity
    makes it bold plain text. Indices are unique within one RenderCase.
    """

    index: int
    entity_id: EntityId | None = None
    bold: bool = False

    @property
    def is_mention(self) -> bool:
        return self.entity_id is not None


@dataclass(frozen=True, slots=True)
class PlaceholderSlot:
    """Literal token (e.g. "{name}") substituted by the legacy placeholder path."""

    token: str
    value: ArgumentValue
    entity_id: EntityId | None = None
    bold: bool = False


@dataclass(frozen=True, slots=True)
class RenderCase:
    """What to say for one event, before any localization."""

    kind: CaseKind
    arguments: tuple[ArgumentValue, ...] = ()
    slots: tuple[ArgumentSlot, ...] = ()
    placeholders: tuple[PlaceholderSlot, ...] = ()
    """Non-empty only for the legacy placeholder cases (game score, invoice payment)."""
    entities: tuple[TextEntity, ...] = ()
    """Custom-text formatting entities."""
    plural: int | None = None
    """Count selecting the template's plural form."""

    def __post_init__(self) -> None:
        indices = [slot.index for slot in self.slots]
        if len(indices) != len(set(indices)):
            raise ValueError(f"duplicate argument slot indices: {indices}")

    @property
    def renders_nothing(self) -> bool:
        return self.kind is CaseKind.NOTHING

    @property
    def mention_slots(self) -> tuple[ArgumentSlot, ...]:
        return tuple(slot for slot in self.slots if slot.is_mention)

    def slot_for(self, index: int) -> ArgumentSlot | None:
        for slot in self.slots:
            if slot.index == index:
                return slot
        return None

    @classmethod
    def nothing(cls) -> RenderCase:
        return cls(kind=CaseKind.NOTHING)
