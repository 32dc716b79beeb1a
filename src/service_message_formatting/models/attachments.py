# -*- coding: utf-8 -*-
"""Referenced-message content: a closed set of attachment kinds.

A referenced message is the message a service event points at (the pinned message,
the game being scored, the invoice being paid). Its content is materialized once by
the caller into these value types so classification is a single ordered match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class PollKind(str, Enum):
    """Poll flavour."""

    POLL = "poll"
    QUIZ = "quiz"


@dataclass(frozen=True, slots=True)
class VideoAttribute:
    """File is a video; round videos are instant video messages."""

    is_round: bool = False


@dataclass(frozen=True, slots=True)
class AudioAttribute:
    """File is audio; voice notes set is_voice."""

    is_voice: bool = False


@dataclass(frozen=True, slots=True)
class StickerAttribute:
    """File is a sticker."""


@dataclass(frozen=True, slots=True)
class AnimatedAttribute:
    """File carries an animation marker (does not decide the kind by itself)."""


@dataclass(frozen=True, slots=True)
class FilenameAttribute:
    """Original file name."""

    name: str


FileAttribute = Union[
    VideoAttribute,
    AudioAttribute,
    StickerAttribute,
    AnimatedAttribute,
    FilenameAttribute,
]


@dataclass(frozen=True, slots=True)
class GameAttachment:
    title: str


@dataclass(frozen=True, slots=True)
class PhotoAttachment:
    """Still image, optionally with an animated (video) representation."""

    has_video: bool = False


@dataclass(frozen=True, slots=True)
class FileAttachment:
    """Generic document; attributes disambiguate gif/video/round/voice/sticker."""

    is_animated: bool = False
    attributes: tuple[FileAttribute, ...] = ()


@dataclass(frozen=True, slots=True)
class LocationAttachment:
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True, slots=True)
class ContactAttachment:
    phone_number: str = ""


@dataclass(frozen=True, slots=True)
class PollAttachment:
    kind: PollKind = PollKind.POLL


@dataclass(frozen=True, slots=True)
class InvoiceAttachment:
    title: str


Attachment = Union[
    GameAttachment,
    PhotoAttachment,
    FileAttachment,
    LocationAttachment,
    ContactAttachment,
    PollAttachment,
    InvoiceAttachment,
]


@dataclass(frozen=True, slots=True)
class ReferencedMessage:
    """Snapshot of the message a service event refers to."""

    text: str = ""
    attachments: tuple[Attachment, ...] = ()

    def game_title(self) -> str | None:
        """Return the title of the first game attachment, if any."""
        for attachment in self.attachments:
            if isinstance(attachment, GameAttachment):
                return attachment.title
        return None

    def invoice_title(self) -> str | None:
        """Return the title of the last invoice attachment, if any."""
        title: str | None = None
        for attachment in self.attachments:
            if isinstance(attachment, InvoiceAttachment):
                title = attachment.title
        return title
