# -*- coding: utf-8 -*-
"""Service events: one immutable variant per system-notice kind.

Each variant carries only the payload needed to render it. The caller builds one
from its message snapshot per render call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from service_message_formatting.models.attachments import PhotoAttachment
from service_message_formatting.models.entity import EntityId


class CallDiscardReason(str, Enum):
    """Why a 1:1 call ended."""

    MISSED = "missed"
    DISCONNECT = "disconnect"
    HANGUP = "hangup"
    BUSY = "busy"


class ExpiredMediaKind(str, Enum):
    IMAGE = "image"
    FILE = "file"


class SecureValueType(str, Enum):
    """Identity document types a bot can receive."""

    PERSONAL_DETAILS = "personal_details"
    PASSPORT = "passport"
    DRIVERS_LICENSE = "drivers_license"
    ID_CARD = "id_card"
    INTERNAL_PASSPORT = "internal_passport"
    ADDRESS = "address"
    UTILITY_BILL = "utility_bill"
    BANK_STATEMENT = "bank_statement"
    RENTAL_AGREEMENT = "rental_agreement"
    PASSPORT_REGISTRATION = "passport_registration"
    TEMPORARY_REGISTRATION = "temporary_registration"
    PHONE = "phone"
    EMAIL = "email"


class TextEntityKind(str, Enum):
    """Formatting entity kinds that may appear in custom service text."""

    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"
    CODE = "code"
    PRE = "pre"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"
    URL = "url"
    TEXT_URL = "text_url"
    EMAIL = "email"
    PHONE = "phone"
    MENTION = "mention"
    TEXT_MENTION = "text_mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"


@dataclass(frozen=True, slots=True)
class TextEntity:
    """Formatted span of custom text (offset/length in characters)."""

    offset: int
    length: int
    kind: TextEntityKind
    entity_id: EntityId | None = None
    """Target of a TEXT_MENTION."""
    url: str | None = None
    """Target of a TEXT_URL."""


@dataclass(frozen=True, slots=True)
class GroupCreated:
    title: str


@dataclass(frozen=True, slots=True)
class MembersAdded:
    entity_ids: tuple[EntityId, ...]


@dataclass(frozen=True, slots=True)
class MembersRemoved:
    entity_ids: tuple[EntityId, ...]


@dataclass(frozen=True, slots=True)
class PhotoUpdated:
    """New chat photo, or None when the photo was removed."""

    photo: PhotoAttachment | None = None


@dataclass(frozen=True, slots=True)
class TitleUpdated:
    title: str


@dataclass(frozen=True, slots=True)
class MessagePinned:
    """The pinned message itself arrives as the referenced message."""


@dataclass(frozen=True, slots=True)
class JoinedByLink:
    inviter_id: EntityId | None = None


@dataclass(frozen=True, slots=True)
class Migrated:
    """Group upgraded to (or channel created from) a channel-backed group."""


@dataclass(frozen=True, slots=True)
class AutoDeleteTimerChanged:
    timeout: int
    """Seconds; 0 disables the timer."""


@dataclass(frozen=True, slots=True)
class HistoryCleared:
    pass


@dataclass(frozen=True, slots=True)
class HistoryScreenshotTaken:
    pass


@dataclass(frozen=True, slots=True)
class GameScore:
    score: int
    game_id: int = 0


@dataclass(frozen=True, slots=True)
class PaymentSent:
    currency: str
    total_amount: int
    """Amount in the currency's minor units (e.g. cents)."""


@dataclass(frozen=True, slots=True)
class PhoneCall:
    discard_reason: CallDiscardReason | None = None
    duration: int | None = None


@dataclass(frozen=True, slots=True)
class GroupCall:
    scheduled_for: int | None = None
    """Unix timestamp of a future start."""
    duration: int | None = None
    """Seconds; set once the call has ended."""


@dataclass(frozen=True, slots=True)
class CustomText:
    text: str
    entities: tuple[TextEntity, ...] = ()


@dataclass(frozen=True, slots=True)
class BotDomainGranted:
    domain: str


@dataclass(frozen=True, slots=True)
class BotSentSecureValues:
    types: tuple[SecureValueType, ...]


@dataclass(frozen=True, slots=True)
class PeerJoined:
    pass


@dataclass(frozen=True, slots=True)
class PhoneNumberRequested:
    pass


@dataclass(frozen=True, slots=True)
class ProximityReached:
    from_id: EntityId
    to_id: EntityId
    distance: int
    """Meters."""


@dataclass(frozen=True, slots=True)
class InviteToCall:
    entity_ids: tuple[EntityId, ...]


@dataclass(frozen=True, slots=True)
class Unknown:
    pass


@dataclass(frozen=True, slots=True)
class ExpiredMedia:
    kind: ExpiredMediaKind


Event = Union[
    GroupCreated,
    MembersAdded,
    MembersRemoved,
    PhotoUpdated,
    TitleUpdated,
    MessagePinned,
    JoinedByLink,
    Migrated,
    AutoDeleteTimerChanged,
    HistoryCleared,
    HistoryScreenshotTaken,
    GameScore,
    PaymentSent,
    PhoneCall,
    GroupCall,
    CustomText,
    BotDomainGranted,
    BotSentSecureValues,
    PeerJoined,
    PhoneNumberRequested,
    ProximityReached,
    InviteToCall,
    Unknown,
    ExpiredMedia,
]
