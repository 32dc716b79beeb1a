# -*- coding: utf-8 -*-
"""Default English string table.

Values are printf-style templates (see templates.formatting) or plural tables
keyed by CLDR category ("one", "other").
"""

from __future__ import annotations

from service_message_formatting.templates.keys import TemplateKey

PluralTemplates = dict[str, str]

ENGLISH_STRINGS: dict[TemplateKey, str | PluralTemplates] = {
    TemplateKey.CREATED_CHANNEL: "Channel created",
    TemplateKey.CREATED_GROUP: "Group created",
    TemplateKey.CREATED_CHAT_WITH_TITLE: '%1$@ created the group "%2$@"',
    TemplateKey.JOINED_CHANNEL: "%@ joined the channel",
    TemplateKey.JOINED_CHAT: "%@ joined the group",
    TemplateKey.INVITED: "%1$@ invited %2$@",
    TemplateKey.INVITED_MULTIPLE: "%1$@ invited %2$@",
    TemplateKey.LEFT_CHANNEL: "%@ left the channel",
    TemplateKey.LEFT_CHAT: "%@ left the group",
    TemplateKey.KICKED: "%1$@ removed %2$@",
    TemplateKey.CHANNEL_VIDEO_UPDATED: "Channel video updated",
    TemplateKey.CHANNEL_PHOTO_UPDATED: "Channel photo updated",
    TemplateKey.CHANNEL_PHOTO_REMOVED: "Channel photo removed",
    TemplateKey.GROUP_VIDEO_UPDATED: "Group video updated",
    TemplateKey.GROUP_PHOTO_UPDATED: "Group photo updated",
    TemplateKey.GROUP_PHOTO_REMOVED: "Group photo removed",
    TemplateKey.CHANGED_GROUP_VIDEO: "%@ changed group video",
    TemplateKey.CHANGED_GROUP_PHOTO: "%@ updated group photo",
    TemplateKey.REMOVED_GROUP_PHOTO: "%@ removed group photo",
    TemplateKey.CHANNEL_TITLE_UPDATED: 'Channel renamed to "%@"',
    TemplateKey.CHANGED_GROUP_NAME: '%1$@ changed group name to "%2$@"',
    TemplateKey.PINNED_TEXT: '%1$@ pinned "%2$@"',
    TemplateKey.PINNED_GENERIC: "%@ pinned a message",
    TemplateKey.PINNED_GAME: "%@ pinned a game",
    TemplateKey.PINNED_PHOTO: "%@ pinned a photo",
    TemplateKey.PINNED_VIDEO: "%@ pinned a video",
    TemplateKey.PINNED_ROUND: "%@ pinned a video message",
    TemplateKey.PINNED_AUDIO: "%@ pinned a voice message",
    TemplateKey.PINNED_DOCUMENT: "%@ pinned a file",
    TemplateKey.PINNED_ANIMATION: "%@ pinned a GIF",
    TemplateKey.PINNED_STICKER: "%@ pinned a sticker",
    TemplateKey.PINNED_LOCATION: "%@ pinned a map",
    TemplateKey.PINNED_CONTACT: "%@ pinned a contact",
    TemplateKey.PINNED_POLL: "%@ pinned a poll",
    TemplateKey.PINNED_QUIZ: "%@ pinned a quiz",
    TemplateKey.JOINED_GROUP_BY_LINK: "%@ joined the group via invite link",
    TemplateKey.TIMER_SET_USER_YOU: "You set messages to automatically delete after %1$@.",
    TemplateKey.TIMER_SET_USER: "%1$@ set messages to automatically delete after %2$@.",
    TemplateKey.TIMER_SET_GROUP: "Messages will automatically delete after %1$@.",
    TemplateKey.TIMER_SET_CHANNEL: "Messages in this channel will automatically delete after %1$@.",
    TemplateKey.LIFETIME_CHANGED_OUTGOING: "You set the self-destruct timer to %@",
    TemplateKey.LIFETIME_CHANGED: "%1$@ set the self-destruct timer to %2$@",
    TemplateKey.TIMER_REMOVED_USER_YOU: "You disabled the auto-delete timer",
    TemplateKey.TIMER_REMOVED_USER: "%1$@ disabled the auto-delete timer",
    TemplateKey.TIMER_REMOVED_GROUP: "Auto-delete timer was disabled",
    TemplateKey.TIMER_REMOVED_CHANNEL: "Auto-delete timer was disabled in this channel",
    TemplateKey.LIFETIME_REMOVED_OUTGOING: "You disabled the self-destruct timer",
    TemplateKey.LIFETIME_REMOVED: "%@ disabled the self-destruct timer",
    TemplateKey.SCREENSHOT: "%@ took a screenshot!",
    TemplateKey.SCREENSHOT_SELF: "You took a screenshot!",
    TemplateKey.GAME_SCORE_SIMPLE: {
        "one": "{name} scored %@ point",
        "other": "{name} scored %@ points",
    },
    TemplateKey.GAME_SCORE_EXTENDED: {
        "one": "{name} scored %@ point in {game}",
        "other": "{name} scored %@ points in {game}",
    },
    TemplateKey.GAME_SCORE_SELF_SIMPLE: {
        "one": "You scored %@ point",
        "other": "You scored %@ points",
    },
    TemplateKey.GAME_SCORE_SELF_EXTENDED: {
        "one": "You scored %@ point in {game}",
        "other": "You scored %@ points in {game}",
    },
    TemplateKey.PAYMENT_SENT_INVOICE: "You have just successfully transferred {amount} to {name} for {title}",
    TemplateKey.PAYMENT_SENT: "Payment: %@",
    TemplateKey.CALL_INCOMING: "Incoming Call",
    TemplateKey.CALL_OUTGOING: "Outgoing Call",
    TemplateKey.CALL_CANCELED: "Cancelled Call",
    TemplateKey.CALL_MISSED: "Missed Call",
    TemplateKey.VOICE_CHAT_SCHEDULED: "%1$@ scheduled a voice chat for %2$@",
    TemplateKey.VOICE_CHAT_SCHEDULED_CHANNEL: "Live stream scheduled for %@",
    TemplateKey.VOICE_CHAT_SCHEDULED_TODAY_CHANNEL: "Live stream scheduled for today at %@",
    TemplateKey.VOICE_CHAT_SCHEDULED_TOMORROW_CHANNEL: "Live stream scheduled for tomorrow at %@",
    TemplateKey.VOICE_CHAT_ENDED: "Voice chat ended (%@)",
    TemplateKey.VOICE_CHAT_ENDED_CHANNEL: "Live stream ended (%@)",
    TemplateKey.VOICE_CHAT_STARTED: "%@ started a voice chat",
    TemplateKey.VOICE_CHAT_STARTED_CHANNEL: "Live stream started",
    TemplateKey.BOT_DOMAIN_GRANTED: "You allowed this bot to message you when you logged in on %@.",
    TemplateKey.PASSPORT_VALUES_SENT: "%1$@ received the following documents: %2$@",
    TemplateKey.PASSPORT_PERSONAL_DETAILS: "personal details",
    TemplateKey.PASSPORT_PROOF_OF_IDENTITY: "proof of identity",
    TemplateKey.PASSPORT_ADDRESS: "address",
    TemplateKey.PASSPORT_PROOF_OF_ADDRESS: "proof of address",
    TemplateKey.PASSPORT_PHONE: "phone number",
    TemplateKey.PASSPORT_EMAIL: "email address",
    TemplateKey.PEER_JOINED: "%@ joined Telegram",
    TemplateKey.PROXIMITY_YOU_REACHED: "You are now within %1$@ from %2$@",
    TemplateKey.PROXIMITY_REACHED_YOU: "%1$@ is now within %2$@ from you",
    TemplateKey.PROXIMITY_REACHED: "%1$@ is now within %2$@ from %3$@",
    TemplateKey.VOICE_CHAT_INVITATION_FOR_YOU: "%1$@ invited you to the voice chat",
    TemplateKey.VOICE_CHAT_INVITATION: "%1$@ invited %2$@ to the voice chat",
    TemplateKey.IMAGE_EXPIRED: "Photo has expired",
    TemplateKey.VIDEO_EXPIRED: "Video has expired",
}
