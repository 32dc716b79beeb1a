# -*- coding: utf-8 -*-
"""Closed set of template keys the renderer can request from a template provider."""

from __future__ import annotations

from enum import Enum


class TemplateKey(str, Enum):
    """Localization keys; a template provider must be total over these."""

    CREATED_CHANNEL = "Notification.CreatedChannel"
    CREATED_GROUP = "Notification.CreatedGroup"
    CREATED_CHAT_WITH_TITLE = "Notification.CreatedChatWithTitle"

    JOINED_CHANNEL = "Notification.JoinedChannel"
    JOINED_CHAT = "Notification.JoinedChat"
    INVITED = "Notification.Invited"
    INVITED_MULTIPLE = "Notification.InvitedMultiple"
    LEFT_CHANNEL = "Notification.LeftChannel"
    LEFT_CHAT = "Notification.LeftChat"
    KICKED = "Notification.Kicked"

    CHANNEL_VIDEO_UPDATED = "Channel.MessageVideoUpdated"
    CHANNEL_PHOTO_UPDATED = "Channel.MessagePhotoUpdated"
    CHANNEL_PHOTO_REMOVED = "Channel.MessagePhotoRemoved"
    GROUP_VIDEO_UPDATED = "Group.MessageVideoUpdated"
    GROUP_PHOTO_UPDATED = "Group.MessagePhotoUpdated"
    GROUP_PHOTO_REMOVED = "Group.MessagePhotoRemoved"
    CHANGED_GROUP_VIDEO = "Notification.ChangedGroupVideo"
    CHANGED_GROUP_PHOTO = "Notification.ChangedGroupPhoto"
    REMOVED_GROUP_PHOTO = "Notification.RemovedGroupPhoto"

    CHANNEL_TITLE_UPDATED = "Channel.MessageTitleUpdated"
    CHANGED_GROUP_NAME = "Notification.ChangedGroupName"

    PINNED_TEXT = "Notification.PinnedTextMessage"
    PINNED_GENERIC = "Message.PinnedGenericMessage"
    PINNED_GAME = "Message.AuthorPinnedGame"
    PINNED_PHOTO = "Notification.PinnedPhotoMessage"
    PINNED_VIDEO = "Notification.PinnedVideoMessage"
    PINNED_ROUND = "Notification.PinnedRoundMessage"
    PINNED_AUDIO = "Notification.PinnedAudioMessage"
    PINNED_DOCUMENT = "Notification.PinnedDocumentMessage"
    PINNED_ANIMATION = "Notification.PinnedAnimationMessage"
    PINNED_STICKER = "Notification.PinnedStickerMessage"
    PINNED_LOCATION = "Notification.PinnedLocationMessage"
    PINNED_CONTACT = "Notification.PinnedContactMessage"
    PINNED_POLL = "Notification.PinnedPollMessage"
    PINNED_QUIZ = "Notification.PinnedQuizMessage"

    JOINED_GROUP_BY_LINK = "Notification.JoinedGroupByLink"

    TIMER_SET_USER_YOU = "Conversation.AutoremoveTimerSetUserYou"
    TIMER_SET_USER = "Conversation.AutoremoveTimerSetUser"
    TIMER_SET_GROUP = "Conversation.AutoremoveTimerSetGroup"
    TIMER_SET_CHANNEL = "Conversation.AutoremoveTimerSetChannel"
    LIFETIME_CHANGED_OUTGOING = "Notification.MessageLifetimeChangedOutgoing"
    LIFETIME_CHANGED = "Notification.MessageLifetimeChanged"
    TIMER_REMOVED_USER_YOU = "Conversation.AutoremoveTimerRemovedUserYou"
    TIMER_REMOVED_USER = "Conversation.AutoremoveTimerRemovedUser"
    TIMER_REMOVED_GROUP = "Conversation.AutoremoveTimerRemovedGroup"
    TIMER_REMOVED_CHANNEL = "Conversation.AutoremoveTimerRemovedChannel"
    LIFETIME_REMOVED_OUTGOING = "Notification.MessageLifetimeRemovedOutgoing"
    LIFETIME_REMOVED = "Notification.MessageLifetimeRemoved"

    SCREENSHOT = "Notification.SecretChatMessageScreenshot"
    SCREENSHOT_SELF = "Notification.SecretChatMessageScreenshotSelf"

    GAME_SCORE_SIMPLE = "ServiceMessage.GameScoreSimple"
    GAME_SCORE_EXTENDED = "ServiceMessage.GameScoreExtended"
    GAME_SCORE_SELF_SIMPLE = "ServiceMessage.GameScoreSelfSimple"
    GAME_SCORE_SELF_EXTENDED = "ServiceMessage.GameScoreSelfExtended"

    PAYMENT_SENT_INVOICE = "Notification.PaymentSent"
    PAYMENT_SENT = "Message.PaymentSent"

    CALL_INCOMING = "Notification.CallIncoming"
    CALL_OUTGOING = "Notification.CallOutgoing"
    CALL_CANCELED = "Notification.CallCanceled"
    CALL_MISSED = "Notification.CallMissed"

    VOICE_CHAT_SCHEDULED = "Notification.VoiceChatScheduled"
    VOICE_CHAT_SCHEDULED_CHANNEL = "Notification.VoiceChatScheduledChannel"
    VOICE_CHAT_SCHEDULED_TODAY_CHANNEL = "Notification.VoiceChatScheduledTodayChannel"
    VOICE_CHAT_SCHEDULED_TOMORROW_CHANNEL = "Notification.VoiceChatScheduledTomorrowChannel"
    VOICE_CHAT_ENDED = "Notification.VoiceChatEnded"
    VOICE_CHAT_ENDED_CHANNEL = "Notification.VoiceChatEndedChannel"
    VOICE_CHAT_STARTED = "Notification.VoiceChatStarted"
    VOICE_CHAT_STARTED_CHANNEL = "Notification.VoiceChatStartedChannel"

    BOT_DOMAIN_GRANTED = "AuthSessions.Message"
    PASSPORT_VALUES_SENT = "Notification.PassportValuesSentMessage"
    PASSPORT_PERSONAL_DETAILS = "Notification.PassportValuePersonalDetails"
    PASSPORT_PROOF_OF_IDENTITY = "Notification.PassportValueProofOfIdentity"
    PASSPORT_ADDRESS = "Notification.PassportValueAddress"
    PASSPORT_PROOF_OF_ADDRESS = "Notification.PassportValueProofOfAddress"
    PASSPORT_PHONE = "Notification.PassportValuePhone"
    PASSPORT_EMAIL = "Notification.PassportValueEmail"

    PEER_JOINED = "Notification.Joined"

    PROXIMITY_YOU_REACHED = "Notification.ProximityYouReached"
    PROXIMITY_REACHED_YOU = "Notification.ProximityReachedYou"
    PROXIMITY_REACHED = "Notification.ProximityReached"

    VOICE_CHAT_INVITATION_FOR_YOU = "Notification.VoiceChatInvitationForYou"
    VOICE_CHAT_INVITATION = "Notification.VoiceChatInvitation"

    IMAGE_EXPIRED = "Message.ImageExpired"
    VIDEO_EXPIRED = "Message.VideoExpired"
