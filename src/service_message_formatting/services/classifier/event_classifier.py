# -*- coding: utf-8 -*-
"""EventClassifier: pure reduction of a service event to a RenderCase.

No I/O. Receives the event, the render context and the optional referenced message
from the caller. Every event maps to exactly one RenderCase (NOTHING for events that
render no text); classification never raises.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from service_message_formatting.models.attachments import ReferencedMessage
from service_message_formatting.models.context import RenderContext
from service_message_formatting.models.entity import ContainerKind, EntityId
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
from service_message_formatting.services.classifier.pinned_content import (
    PinnedContentKind,
    classify_pinned_content,
)
from service_message_formatting.utils.text import ELLIPSIS, PINNED_TEXT_LIMIT

Handler = Callable[[Any, RenderContext, ReferencedMessage | None], RenderCase]

_PINNED_CASES: dict[PinnedContentKind, CaseKind] = {
    PinnedContentKind.GAME: CaseKind.PINNED_GAME,
    PinnedContentKind.PHOTO: CaseKind.PINNED_PHOTO,
    PinnedContentKind.FILE: CaseKind.PINNED_FILE,
    PinnedContentKind.GIF: CaseKind.PINNED_GIF,
    PinnedContentKind.ROUND_VIDEO: CaseKind.PINNED_ROUND_VIDEO,
    PinnedContentKind.VIDEO: CaseKind.PINNED_VIDEO,
    PinnedContentKind.VOICE: CaseKind.PINNED_VOICE,
    PinnedContentKind.STICKER: CaseKind.PINNED_STICKER,
    PinnedContentKind.LOCATION: CaseKind.PINNED_LOCATION,
    PinnedContentKind.CONTACT: CaseKind.PINNED_CONTACT,
    PinnedContentKind.POLL: CaseKind.PINNED_POLL,
    PinnedContentKind.QUIZ: CaseKind.PINNED_QUIZ,
    PinnedContentKind.DELETED: CaseKind.PINNED_GENERIC,
}

_TIMER_SET_CASES: dict[str, CaseKind] = {
    "user_self": CaseKind.TIMER_SET_USER_SELF,
    "user": CaseKind.TIMER_SET_USER,
    "group": CaseKind.TIMER_SET_GROUP,
    "channel": CaseKind.TIMER_SET_CHANNEL,
    "generic_self": CaseKind.TIMER_SET_GENERIC_SELF,
    "generic": CaseKind.TIMER_SET_GENERIC,
}

_TIMER_REMOVED_CASES: dict[str, CaseKind] = {
    "user_self": CaseKind.TIMER_REMOVED_USER_SELF,
    "user": CaseKind.TIMER_REMOVED_USER,
    "group": CaseKind.TIMER_REMOVED_GROUP,
    "channel": CaseKind.TIMER_REMOVED_CHANNEL,
    "generic_self": CaseKind.TIMER_REMOVED_GENERIC_SELF,
    "generic": CaseKind.TIMER_REMOVED_GENERIC,
}

# Third-person timer phrasings name the actor
_NAMED_TIMER_SCOPES = frozenset({"user", "generic"})

_SECURE_VALUE_LABELS: dict[SecureValueType, SecureValueLabel] = {
    SecureValueType.PERSONAL_DETAILS: SecureValueLabel.PERSONAL_DETAILS,
    SecureValueType.PASSPORT: SecureValueLabel.PROOF_OF_IDENTITY,
    SecureValueType.INTERNAL_PASSPORT: SecureValueLabel.PROOF_OF_IDENTITY,
    SecureValueType.DRIVERS_LICENSE: SecureValueLabel.PROOF_OF_IDENTITY,
    SecureValueType.ID_CARD: SecureValueLabel.PROOF_OF_IDENTITY,
    SecureValueType.ADDRESS: SecureValueLabel.ADDRESS,
    SecureValueType.BANK_STATEMENT: SecureValueLabel.PROOF_OF_ADDRESS,
    SecureValueType.UTILITY_BILL: SecureValueLabel.PROOF_OF_ADDRESS,
    SecureValueType.RENTAL_AGREEMENT: SecureValueLabel.PROOF_OF_ADDRESS,
    SecureValueType.PASSPORT_REGISTRATION: SecureValueLabel.PROOF_OF_ADDRESS,
    SecureValueType.TEMPORARY_REGISTRATION: SecureValueLabel.PROOF_OF_ADDRESS,
    SecureValueType.PHONE: SecureValueLabel.PHONE,
    SecureValueType.EMAIL: SecureValueLabel.EMAIL,
}

_ONCE_ONLY_LABELS = frozenset({SecureValueLabel.PROOF_OF_IDENTITY, SecureValueLabel.PROOF_OF_ADDRESS})


class EventClassifier:
    """Pure classifier: decides which sentence shape describes an event.

    No I/O; the caller supplies the event snapshot, context and referenced message.
    """

    def __init__(
        self,
        *,
        pinned_text_limit: int = PINNED_TEXT_LIMIT,
        ellipsis: str = ELLIPSIS,
    ) -> None:
        """Initialize the classifier.

        Args:
            pinned_text_limit: Characters of pinned text kept before the ellipsis.
            ellipsis: Suffix appended to clipped pinned text.
        """
        self._pinned_text_limit = pinned_text_limit
        self._ellipsis = ellipsis
        self._handlers: dict[type, Handler] = {
            GroupCreated: self._group_created,
            MembersAdded: self._members_added,
            MembersRemoved: self._members_removed,
            PhotoUpdated: self._photo_updated,
            TitleUpdated: self._title_updated,
            MessagePinned: self._message_pinned,
            JoinedByLink: self._actor_only(CaseKind.JOINED_BY_LINK),
            Migrated: self._fixed(CaseKind.EMPTY),
            AutoDeleteTimerChanged: self._auto_delete_timer,
            HistoryCleared: self._fixed(CaseKind.NOTHING),
            HistoryScreenshotTaken: self._screenshot,
            GameScore: self._game_score,
            PaymentSent: self._payment_sent,
            PhoneCall: self._phone_call,
            GroupCall: self._group_call,
            CustomText: self._custom_text,
            BotDomainGranted: self._bot_domain_granted,
            BotSentSecureValues: self._bot_sent_secure_values,
            PeerJoined: self._actor_only(CaseKind.PEER_JOINED),
            PhoneNumberRequested: self._fixed(CaseKind.NOTHING),
            ProximityReached: self._proximity_reached,
            InviteToCall: self._invite_to_call,
            Unknown: self._fixed(CaseKind.NOTHING),
            ExpiredMedia: self._expired_media,
        }

    def classify(
        self,
        event: Event,
        context: RenderContext,
        referenced: ReferencedMessage | None = None,
    ) -> RenderCase:
        """Return the RenderCase for event.

        Args:
            event: Service event snapshot.
            context: Ambient facts (actor, viewer, container kind, flags).
            referenced: Message the event refers to (pinned message, game, invoice), if loaded.

        Returns:
            RenderCase; kind NOTHING for events without text.
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            return RenderCase.nothing()
        return handler(event, context, referenced)

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _actor(context: RenderContext) -> EntityNameArg:
        return EntityNameArg(context.actor_id)

    @staticmethod
    def _actor_slots(context: RenderContext) -> tuple[ArgumentSlot, ...]:
        if context.actor_id is None:
            return ()
        return (ArgumentSlot(0, context.actor_id),)

    def _with_actor(self, kind: CaseKind, context: RenderContext, *rest: ArgumentValue) -> RenderCase:
        return RenderCase(
            kind=kind,
            arguments=(self._actor(context), *rest),
            slots=self._actor_slots(context),
        )

    def _actor_only(self, kind: CaseKind) -> Handler:
        return lambda _event, context, _referenced: self._with_actor(kind, context)

    @staticmethod
    def _fixed(kind: CaseKind) -> Handler:
        return lambda _event, _context, _referenced: RenderCase(kind=kind)

    def _directed(
        self,
        context: RenderContext,
        entity_ids: tuple[EntityId, ...],
        *,
        single: CaseKind,
        multiple: CaseKind,
    ) -> RenderCase:
        """Actor acting on others: one target is a mention, several are a plain list."""
        if len(entity_ids) == 1:
            target = entity_ids[0]
            return RenderCase(
                kind=single,
                arguments=(self._actor(context), EntityNameArg(target)),
                slots=(*self._actor_slots(context), ArgumentSlot(1, target)),
            )
        return RenderCase(
            kind=multiple,
            arguments=(self._actor(context), EntityNamesArg(entity_ids)),
            slots=self._actor_slots(context),
        )

    # -- membership --------------------------------------------------------

    def _group_created(self, event: GroupCreated, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        if context.is_broadcast:
            return RenderCase(kind=CaseKind.CHANNEL_CREATED)
        if context.for_chat_list:
            return RenderCase(kind=CaseKind.GROUP_CREATED)
        return self._with_actor(CaseKind.GROUP_CREATED_WITH_TITLE, context, TextArg(event.title))

    def _members_added(self, event: MembersAdded, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        first = event.entity_ids[0] if event.entity_ids else None
        if first is not None and first == context.actor_id:
            kind = CaseKind.JOINED_CHANNEL if context.is_broadcast else CaseKind.JOINED_GROUP
            return RenderCase(
                kind=kind,
                arguments=(EntityNameArg(first),),
                slots=(ArgumentSlot(0, first),),
            )
        return self._directed(
            context,
            event.entity_ids,
            single=CaseKind.INVITED_MEMBER,
            multiple=CaseKind.INVITED_MEMBERS,
        )

    def _members_removed(self, event: MembersRemoved, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        first = event.entity_ids[0] if event.entity_ids else None
        if first is not None and first == context.actor_id:
            kind = CaseKind.LEFT_CHANNEL if context.is_broadcast else CaseKind.LEFT_GROUP
            return self._with_actor(kind, context)
        return self._directed(
            context,
            event.entity_ids,
            single=CaseKind.REMOVED_MEMBER,
            multiple=CaseKind.REMOVED_MEMBERS,
        )

    # -- chat appearance ---------------------------------------------------

    def _photo_updated(self, event: PhotoUpdated, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        photo = event.photo
        if context.actor_id is None or context.is_broadcast:
            if context.is_broadcast:
                removed, video, updated = (
                    CaseKind.CHANNEL_PHOTO_REMOVED,
                    CaseKind.CHANNEL_VIDEO_UPDATED,
                    CaseKind.CHANNEL_PHOTO_UPDATED,
                )
            else:
                removed, video, updated = (
                    CaseKind.GROUP_PHOTO_REMOVED,
                    CaseKind.GROUP_VIDEO_UPDATED,
                    CaseKind.GROUP_PHOTO_UPDATED,
                )
            if photo is None:
                return RenderCase(kind=removed)
            return RenderCase(kind=video if photo.has_video else updated)

        if photo is None:
            return self._with_actor(CaseKind.ACTOR_PHOTO_REMOVED, context)
        if photo.has_video:
            return self._with_actor(CaseKind.ACTOR_VIDEO_UPDATED, context)
        return self._with_actor(CaseKind.ACTOR_PHOTO_UPDATED, context)

    def _title_updated(self, event: TitleUpdated, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        if context.actor_id is None or context.is_broadcast:
            return RenderCase(kind=CaseKind.CHANNEL_TITLE_UPDATED, arguments=(TextArg(event.title),))
        return self._with_actor(CaseKind.ACTOR_TITLE_UPDATED, context, TextArg(event.title))

    def _message_pinned(
        self, _event: MessagePinned, context: RenderContext, referenced: ReferencedMessage | None
    ) -> RenderCase:
        content = classify_pinned_content(
            referenced,
            text_limit=self._pinned_text_limit,
            ellipsis=self._ellipsis,
        )
        if content.kind is PinnedContentKind.TEXT:
            if not content.text:
                return self._with_actor(CaseKind.PINNED_GENERIC, context)
            return self._with_actor(CaseKind.PINNED_TEXT, context, TextArg(content.text))
        return self._with_actor(_PINNED_CASES[content.kind], context)

    # -- timers, history ---------------------------------------------------

    @staticmethod
    def _timer_scope(context: RenderContext) -> str:
        kind = context.container_kind
        if kind is ContainerKind.USER:
            return "user_self" if context.actor_is_viewer else "user"
        if kind in (ContainerKind.GROUP, ContainerKind.CHANNEL_GROUP):
            return "group"
        if kind is ContainerKind.BROADCAST_CHANNEL:
            return "channel"
        return "generic_self" if context.actor_is_viewer else "generic"

    def _auto_delete_timer(
        self, event: AutoDeleteTimerChanged, context: RenderContext, _: ReferencedMessage | None
    ) -> RenderCase:
        scope = self._timer_scope(context)
        removed = event.timeout <= 0
        kind = _TIMER_REMOVED_CASES[scope] if removed else _TIMER_SET_CASES[scope]

        arguments: list[ArgumentValue] = []
        if scope in _NAMED_TIMER_SCOPES:
            arguments.append(EntityNameArg(context.actor_id, compact=True))
        if not removed:
            arguments.append(DurationArg(event.timeout, DurationStyle.TIMER))
        return RenderCase(kind=kind, arguments=tuple(arguments))

    @staticmethod
    def _screenshot(
        _event: HistoryScreenshotTaken, context: RenderContext, _: ReferencedMessage | None
    ) -> RenderCase:
        if context.is_incoming:
            return RenderCase(
                kind=CaseKind.SCREENSHOT,
                arguments=(EntityNameArg(context.actor_id, compact=True),),
            )
        return RenderCase(kind=CaseKind.SCREENSHOT_SELF)

    # -- games and payments (legacy placeholder templates) -----------------

    @staticmethod
    def _game_score(event: GameScore, context: RenderContext, referenced: ReferencedMessage | None) -> RenderCase:
        game_title = referenced.game_title() if referenced is not None else None
        if context.actor_is_viewer:
            kind = CaseKind.GAME_SCORE_SELF_EXTENDED if game_title is not None else CaseKind.GAME_SCORE_SELF
        else:
            kind = CaseKind.GAME_SCORE_EXTENDED if game_title is not None else CaseKind.GAME_SCORE
        return RenderCase(
            kind=kind,
            arguments=(CountArg(event.score),),
            placeholders=(
                PlaceholderSlot("{name}", EntityNameArg(context.actor_id), entity_id=context.actor_id),
                PlaceholderSlot("{game}", TextArg(game_title or ""), bold=True),
            ),
            plural=event.score,
        )

    @staticmethod
    def _payment_sent(event: PaymentSent, context: RenderContext, referenced: ReferencedMessage | None) -> RenderCase:
        amount = AmountArg(event.total_amount, event.currency)
        invoice_title = referenced.invoice_title() if referenced is not None else None
        if invoice_title is None:
            return RenderCase(kind=CaseKind.PAYMENT_SENT, arguments=(amount,))
        return RenderCase(
            kind=CaseKind.PAYMENT_SENT_INVOICE,
            placeholders=(
                PlaceholderSlot("{amount}", amount, bold=True),
                PlaceholderSlot("{name}", EntityNameArg(context.container_id, compact=True), bold=True),
                PlaceholderSlot("{title}", TextArg(invoice_title)),
            ),
        )

    # -- calls -------------------------------------------------------------

    @staticmethod
    def _phone_call(event: PhoneCall, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        incoming = context.is_incoming
        kind = CaseKind.CALL_INCOMING if incoming else CaseKind.CALL_OUTGOING
        reason = event.discard_reason
        if reason is CallDiscardReason.DISCONNECT:
            kind = CaseKind.CALL_CANCELED
        elif reason in (CallDiscardReason.MISSED, CallDiscardReason.BUSY):
            kind = CaseKind.CALL_MISSED if incoming else CaseKind.CALL_CANCELED
        # HANGUP keeps the direction phrasing
        return RenderCase(kind=kind)

    def _group_call(self, event: GroupCall, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        impersonal = context.is_broadcast or context.actor_is_channel
        if event.scheduled_for is not None:
            if impersonal:
                return RenderCase(
                    kind=CaseKind.GROUP_CALL_SCHEDULED_CHANNEL,
                    arguments=(TimestampArg(event.scheduled_for, TimestampStyle.DATE_TIME),),
                )
            return self._with_actor(
                CaseKind.GROUP_CALL_SCHEDULED,
                context,
                TimestampArg(event.scheduled_for, TimestampStyle.RELATIVE),
            )
        if event.duration is not None:
            kind = CaseKind.GROUP_CALL_ENDED_CHANNEL if impersonal else CaseKind.GROUP_CALL_ENDED
            return RenderCase(kind=kind, arguments=(DurationArg(event.duration, DurationStyle.CALL),))
        if impersonal:
            return RenderCase(kind=CaseKind.GROUP_CALL_STARTED_CHANNEL)
        return self._with_actor(CaseKind.GROUP_CALL_STARTED, context)

    def _invite_to_call(self, event: InviteToCall, context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        if len(event.entity_ids) == 1 and event.entity_ids[0] == context.viewer_id:
            return self._with_actor(CaseKind.CALL_INVITATION_FOR_YOU, context)
        return self._directed(
            context,
            event.entity_ids,
            single=CaseKind.CALL_INVITATION,
            multiple=CaseKind.CALL_INVITATION_MULTIPLE,
        )

    @staticmethod
    def _proximity_reached(
        event: ProximityReached, context: RenderContext, _: ReferencedMessage | None
    ) -> RenderCase:
        distance = DistanceArg(event.distance)
        if event.from_id == context.viewer_id:
            return RenderCase(
                kind=CaseKind.PROXIMITY_YOU_REACHED,
                arguments=(distance, EntityNameArg(event.to_id)),
                slots=(ArgumentSlot(1, event.to_id),),
            )
        if event.to_id == context.viewer_id:
            return RenderCase(
                kind=CaseKind.PROXIMITY_REACHED_YOU,
                arguments=(EntityNameArg(event.from_id), distance),
                slots=(ArgumentSlot(0, event.from_id),),
            )
        return RenderCase(
            kind=CaseKind.PROXIMITY_REACHED,
            arguments=(EntityNameArg(event.from_id), distance, EntityNameArg(event.to_id)),
            slots=(ArgumentSlot(0, event.from_id), ArgumentSlot(2, event.to_id)),
        )

    # -- misc --------------------------------------------------------------

    @staticmethod
    def _custom_text(event: CustomText, _context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        return RenderCase(
            kind=CaseKind.CUSTOM_TEXT,
            arguments=(TextArg(event.text),),
            entities=event.entities,
        )

    @staticmethod
    def _bot_domain_granted(
        event: BotDomainGranted, _context: RenderContext, _: ReferencedMessage | None
    ) -> RenderCase:
        return RenderCase(kind=CaseKind.BOT_DOMAIN_GRANTED, arguments=(TextArg(event.domain),))

    @staticmethod
    def _bot_sent_secure_values(
        event: BotSentSecureValues, context: RenderContext, _: ReferencedMessage | None
    ) -> RenderCase:
        labels: list[SecureValueLabel] = []
        for value_type in event.types:
            label = _SECURE_VALUE_LABELS[value_type]
            if label in _ONCE_ONLY_LABELS and label in labels:
                continue
            labels.append(label)
        return RenderCase(
            kind=CaseKind.BOT_SENT_SECURE_VALUES,
            arguments=(
                EntityNameArg(context.container_id, compact=True),
                SecureValuesArg(tuple(labels)),
            ),
        )

    @staticmethod
    def _expired_media(event: ExpiredMedia, _context: RenderContext, _: ReferencedMessage | None) -> RenderCase:
        if event.kind is ExpiredMediaKind.IMAGE:
            return RenderCase(kind=CaseKind.IMAGE_EXPIRED)
        return RenderCase(kind=CaseKind.VIDEO_EXPIRED)
