# -*- coding: utf-8 -*-
"""Domain models."""

from service_message_formatting.models.attachments import (
    AnimatedAttribute,
    Attachment,
    AudioAttribute,
    ContactAttachment,
    FileAttachment,
    FileAttribute,
    FilenameAttribute,
    GameAttachment,
    InvoiceAttachment,
    LocationAttachment,
    PhotoAttachment,
    PollAttachment,
    PollKind,
    ReferencedMessage,
    StickerAttribute,
    VideoAttribute,
)
from service_message_formatting.models.context import RenderContext
from service_message_formatting.models.entity import (
    ContainerKind,
    EntityId,
    EntityKind,
    NameOrder,
)
from service_message_formatting.models.events import (
    AutoDeleteTimerChanged,
    BotDomainGranted,
    BotSentSecureValues,
    CallDiscardReason,
    CustomText,
    Event,
    ExpiredMedia,
    ExpiredMediaKind,
    GameScore,
    GroupCall,
    GroupCreated,
    HistoryCleared,
    HistoryScreenshotTaken,
    InviteToCall,
    JoinedByLink,
    MembersAdded,
    MembersRemoved,
    MessagePinned,
    Migrated,
    PaymentSent,
    PeerJoined,
    PhoneCall,
    PhoneNumberRequested,
    PhotoUpdated,
    ProximityReached,
    SecureValueType,
    TextEntity,
    TextEntityKind,
    TitleUpdated,
    Unknown,
)
from service_message_formatting.models.render_case import (
    AmountArg,
    ArgumentSlot,
    ArgumentValue,
    CaseKind,
    CountArg,
    DistanceArg,
    DurationArg,
    DurationStyle,
    EntityNameArg,
    EntityNamesArg,
    PlaceholderSlot,
    RenderCase,
    SecureValueLabel,
    SecureValuesArg,
    TextArg,
    TimestampArg,
    TimestampStyle,
)
from service_message_formatting.models.result import (
    RenderResult,
    StyledRange,
    StyleRole,
    StyleRoleKind,
    TextRange,
)

__all__ = [
    "AmountArg",
    "AnimatedAttribute",
    "ArgumentSlot",
    "ArgumentValue",
    "Attachment",
    "AudioAttribute",
    "AutoDeleteTimerChanged",
    "BotDomainGranted",
    "BotSentSecureValues",
    "CallDiscardReason",
    "CaseKind",
    "ContactAttachment",
    "ContainerKind",
    "CountArg",
    "CustomText",
    "DistanceArg",
    "DurationArg",
    "DurationStyle",
    "EntityId",
    "EntityKind",
    "EntityNameArg",
    "EntityNamesArg",
    "Event",
    "ExpiredMedia",
    "ExpiredMediaKind",
    "FileAttachment",
    "FileAttribute",
    "FilenameAttribute",
    "GameAttachment",
    "GameScore",
    "GroupCall",
    "GroupCreated",
    "HistoryCleared",
    "HistoryScreenshotTaken",
    "InviteToCall",
    "InvoiceAttachment",
    "JoinedByLink",
    "LocationAttachment",
    "MembersAdded",
    "MembersRemoved",
    "MessagePinned",
    "Migrated",
    "NameOrder",
    "PaymentSent",
    "PeerJoined",
    "PhoneCall",
    "PhoneNumberRequested",
    "PhotoAttachment",
    "PhotoUpdated",
    "PlaceholderSlot",
    "PollAttachment",
    "PollKind",
    "ProximityReached",
    "ReferencedMessage",
    "RenderCase",
    "RenderContext",
    "RenderResult",
    "SecureValueLabel",
    "SecureValueType",
    "SecureValuesArg",
    "StickerAttribute",
    "StyleRole",
    "StyleRoleKind",
    "StyledRange",
    "TextArg",
    "TextEntity",
    "TextEntityKind",
    "TextRange",
    "TimestampArg",
    "TimestampStyle",
    "TitleUpdated",
    "Unknown",
    "VideoAttribute",
]
