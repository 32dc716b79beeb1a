# -*- coding: utf-8 -*-
"""Pinned-content classification: what kind of message was pinned.

Pure function over the referenced message. Priority:
1. No referenced message -> DELETED.
2. A game anywhere in the attachments -> GAME.
3. First attachment that classifies wins (files are refined by their attributes).
4. Otherwise TEXT, clipped for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from service_message_formatting.models.attachments import (
    Attachment,
    AudioAttribute,
    ContactAttachment,
    FileAttachment,
    GameAttachment,
    LocationAttachment,
    PhotoAttachment,
    PollAttachment,
    PollKind,
    ReferencedMessage,
    StickerAttribute,
    VideoAttribute,
)
from service_message_formatting.utils.text import ELLIPSIS, PINNED_TEXT_LIMIT, clip_text


class PinnedContentKind(str, Enum):
    GAME = "game"
    PHOTO = "photo"
    FILE = "file"
    GIF = "gif"
    ROUND_VIDEO = "round_video"
    VIDEO = "video"
    VOICE = "voice"
    STICKER = "sticker"
    LOCATION = "location"
    CONTACT = "contact"
    POLL = "poll"
    QUIZ = "quiz"
    TEXT = "text"
    DELETED = "deleted"


@dataclass(frozen=True)
class PinnedContent:
    """Classification result; text is the clipped preview for TEXT."""

    kind: PinnedContentKind
    text: str = ""


def classify_pinned_content(
    message: ReferencedMessage | None,
    *,
    text_limit: int = PINNED_TEXT_LIMIT,
    ellipsis: str = ELLIPSIS,
) -> PinnedContent:
    """Reduce the pinned message to exactly one content kind."""
    if message is None:
        return PinnedContent(PinnedContentKind.DELETED)

    if any(isinstance(attachment, GameAttachment) for attachment in message.attachments):
        return PinnedContent(PinnedContentKind.GAME)

    for attachment in message.attachments:
        kind = _attachment_kind(attachment)
        if kind is not None:
            return PinnedContent(kind)

    return PinnedContent(
        PinnedContentKind.TEXT,
        clip_text(message.text, text_limit, ellipsis),
    )


def _attachment_kind(attachment: Attachment) -> PinnedContentKind | None:
    if isinstance(attachment, PhotoAttachment):
        return PinnedContentKind.PHOTO
    if isinstance(attachment, FileAttachment):
        return _file_kind(attachment)
    if isinstance(attachment, LocationAttachment):
        return PinnedContentKind.LOCATION
    if isinstance(attachment, ContactAttachment):
        return PinnedContentKind.CONTACT
    if isinstance(attachment, PollAttachment):
        return PinnedContentKind.QUIZ if attachment.kind is PollKind.QUIZ else PinnedContentKind.POLL
    # invoices and games do not describe the pin
    return None


def _file_kind(file: FileAttachment) -> PinnedContentKind:
    """Refine a file by its flags; unrecognized attribute sets stay FILE."""
    if file.is_animated:
        return PinnedContentKind.GIF
    for attribute in file.attributes:
        if isinstance(attribute, VideoAttribute):
            return PinnedContentKind.ROUND_VIDEO if attribute.is_round else PinnedContentKind.VIDEO
        if isinstance(attribute, AudioAttribute):
            # regular audio is shown as a file
            return PinnedContentKind.VOICE if attribute.is_voice else PinnedContentKind.FILE
        if isinstance(attribute, StickerAttribute):
            return PinnedContentKind.STICKER
    return PinnedContentKind.FILE
