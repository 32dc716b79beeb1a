# -*- coding: utf-8 -*-
"""Unit tests for EventClassifier."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from conftest import ALICE_ID, BOB_ID, CAROL_ID, GROUP_ID, VIEWER_ID
from service_message_formatting.models import (
    AmountArg,
    ArgumentSlot,
    AutoDeleteTimerChanged,
    BotDomainGranted,
    BotSentSecureValues,
    CallDiscardReason,
    CaseKind,
    ContainerKind,
    CountArg,
    CustomText,
    DistanceArg,
    DurationArg,
    DurationStyle,
    EntityKind,
    EntityNameArg,
    EntityNamesArg,
    ExpiredMedia,
    ExpiredMediaKind,
    GameAttachment,
    GameScore,
    GroupCall,
    GroupCreated,
    HistoryCleared,
    HistoryScreenshotTaken,
    InviteToCall,
    InvoiceAttachment,
    JoinedByLink,
    MembersAdded,
    MembersRemoved,
    MessagePinned,
    Migrated,
    PaymentSent,
    PeerJoined,
    PhoneCall,
    PhoneNumberRequested,
    PhotoAttachment,
    PhotoUpdated,
    ProximityReached,
    ReferencedMessage,
    RenderContext,
    SecureValueLabel,
    SecureValuesArg,
    SecureValueType,
    TextArg,
    TextEntity,
    TextEntityKind,
    TimestampArg,
    TimestampStyle,
    TitleUpdated,
    Unknown,
)
from service_message_formatting.services.classifier import EventClassifier

ContextFactory = Callable[..., RenderContext]


# -- membership ----------------------------------------------------------------


def test_group_created_names_actor_and_title(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(GroupCreated("Chess Club"), context_factory())

    assert case.kind is CaseKind.GROUP_CREATED_WITH_TITLE
    assert case.arguments == (EntityNameArg(ALICE_ID), TextArg("Chess Club"))
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


def test_group_created_in_broadcast_is_channel_created(
    classifier: EventClassifier, context_factory: ContextFactory
) -> None:
    case = classifier.classify(GroupCreated("News"), context_factory(container_kind=ContainerKind.BROADCAST_CHANNEL))

    assert case.kind is CaseKind.CHANNEL_CREATED
    assert case.slots == ()


def test_group_created_for_chat_list_is_short(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(GroupCreated("Chess Club"), context_factory(for_chat_list=True))

    assert case.kind is CaseKind.GROUP_CREATED


@pytest.mark.parametrize(
    "container_kind, expected",
    [(ContainerKind.GROUP, CaseKind.JOINED_GROUP), (ContainerKind.BROADCAST_CHANNEL, CaseKind.JOINED_CHANNEL)],
)
def test_member_adding_themselves_joined(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    container_kind: ContainerKind,
    expected: CaseKind,
) -> None:
    case = classifier.classify(MembersAdded((ALICE_ID,)), context_factory(container_kind=container_kind))

    assert case.kind is expected
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


def test_single_invite_mentions_both_parties(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(MembersAdded((BOB_ID,)), context_factory())

    assert case.kind is CaseKind.INVITED_MEMBER
    assert case.arguments == (EntityNameArg(ALICE_ID), EntityNameArg(BOB_ID))
    assert case.slots == (ArgumentSlot(0, ALICE_ID), ArgumentSlot(1, BOB_ID))


def test_multi_invite_is_plain_list(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(MembersAdded((BOB_ID, CAROL_ID)), context_factory())

    assert case.kind is CaseKind.INVITED_MEMBERS
    assert case.arguments[1] == EntityNamesArg((BOB_ID, CAROL_ID))
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


def test_member_removing_themselves_left(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(MembersRemoved((ALICE_ID,)), context_factory())

    assert case.kind is CaseKind.LEFT_GROUP


@pytest.mark.parametrize(
    "removed, expected",
    [((BOB_ID,), CaseKind.REMOVED_MEMBER), ((BOB_ID, CAROL_ID), CaseKind.REMOVED_MEMBERS)],
)
def test_removal_of_others(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    removed: tuple[int, ...],
    expected: CaseKind,
) -> None:
    assert classifier.classify(MembersRemoved(removed), context_factory()).kind is expected


def test_joined_by_link_mentions_actor(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(JoinedByLink(inviter_id=BOB_ID), context_factory())

    assert case.kind is CaseKind.JOINED_BY_LINK
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


# -- chat appearance -------------------------------------------------------------


@pytest.mark.parametrize(
    "photo, actor_id, container_kind, expected",
    [
        (None, ALICE_ID, ContainerKind.GROUP, CaseKind.ACTOR_PHOTO_REMOVED),
        (PhotoAttachment(), ALICE_ID, ContainerKind.GROUP, CaseKind.ACTOR_PHOTO_UPDATED),
        (PhotoAttachment(has_video=True), ALICE_ID, ContainerKind.GROUP, CaseKind.ACTOR_VIDEO_UPDATED),
        (None, None, ContainerKind.GROUP, CaseKind.GROUP_PHOTO_REMOVED),
        (PhotoAttachment(), None, ContainerKind.GROUP, CaseKind.GROUP_PHOTO_UPDATED),
        (PhotoAttachment(has_video=True), None, ContainerKind.GROUP, CaseKind.GROUP_VIDEO_UPDATED),
        (None, ALICE_ID, ContainerKind.BROADCAST_CHANNEL, CaseKind.CHANNEL_PHOTO_REMOVED),
        (PhotoAttachment(), None, ContainerKind.BROADCAST_CHANNEL, CaseKind.CHANNEL_PHOTO_UPDATED),
        (PhotoAttachment(has_video=True), ALICE_ID, ContainerKind.BROADCAST_CHANNEL, CaseKind.CHANNEL_VIDEO_UPDATED),
    ],
)
def test_photo_updated_decision_table(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    photo: PhotoAttachment | None,
    actor_id: int | None,
    container_kind: ContainerKind,
    expected: CaseKind,
) -> None:
    context = context_factory(actor_id=actor_id, container_kind=container_kind)

    assert classifier.classify(PhotoUpdated(photo), context).kind is expected


def test_title_updated_by_actor(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(TitleUpdated("New Name"), context_factory())

    assert case.kind is CaseKind.ACTOR_TITLE_UPDATED
    assert case.arguments == (EntityNameArg(ALICE_ID), TextArg("New Name"))


def test_title_updated_without_actor_is_channel_renamed(
    classifier: EventClassifier, context_factory: ContextFactory
) -> None:
    case = classifier.classify(TitleUpdated("New Name"), context_factory(actor_id=None))

    assert case.kind is CaseKind.CHANNEL_TITLE_UPDATED
    assert case.arguments == (TextArg("New Name"),)
    assert case.slots == ()


# -- pinned ----------------------------------------------------------------------


def test_pinned_text_is_clipped(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    referenced = ReferencedMessage(text="Hello world, this is long")

    case = classifier.classify(MessagePinned(), context_factory(), referenced)

    assert case.kind is CaseKind.PINNED_TEXT
    assert case.arguments == (EntityNameArg(ALICE_ID), TextArg("Hello world, t..."))
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


def test_pinned_without_message_is_generic(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    assert classifier.classify(MessagePinned(), context_factory()).kind is CaseKind.PINNED_GENERIC


def test_pinned_empty_text_is_generic(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(MessagePinned(), context_factory(), ReferencedMessage(text=""))

    assert case.kind is CaseKind.PINNED_GENERIC


def test_pinned_game_wins(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    referenced = ReferencedMessage(attachments=(PhotoAttachment(), GameAttachment("Chess")))

    assert classifier.classify(MessagePinned(), context_factory(), referenced).kind is CaseKind.PINNED_GAME


def test_pinned_text_limit_is_configurable(context_factory: ContextFactory) -> None:
    classifier = EventClassifier(pinned_text_limit=5, ellipsis="…")

    case = classifier.classify(MessagePinned(), context_factory(), ReferencedMessage(text="abcdefgh"))

    assert case.arguments[1] == TextArg("abcde…")


# -- timers ----------------------------------------------------------------------


@pytest.mark.parametrize(
    "container_kind, actor_id, timeout, expected, arguments",
    [
        (ContainerKind.USER, VIEWER_ID, 86400, CaseKind.TIMER_SET_USER_SELF, (DurationArg(86400),)),
        (
            ContainerKind.USER,
            ALICE_ID,
            86400,
            CaseKind.TIMER_SET_USER,
            (EntityNameArg(ALICE_ID, compact=True), DurationArg(86400)),
        ),
        (ContainerKind.GROUP, ALICE_ID, 86400, CaseKind.TIMER_SET_GROUP, (DurationArg(86400),)),
        (ContainerKind.CHANNEL_GROUP, ALICE_ID, 86400, CaseKind.TIMER_SET_GROUP, (DurationArg(86400),)),
        (ContainerKind.BROADCAST_CHANNEL, ALICE_ID, 86400, CaseKind.TIMER_SET_CHANNEL, (DurationArg(86400),)),
        (ContainerKind.SECRET_CHAT, VIEWER_ID, 5, CaseKind.TIMER_SET_GENERIC_SELF, (DurationArg(5),)),
        (
            ContainerKind.SECRET_CHAT,
            ALICE_ID,
            5,
            CaseKind.TIMER_SET_GENERIC,
            (EntityNameArg(ALICE_ID, compact=True), DurationArg(5)),
        ),
        (ContainerKind.USER, VIEWER_ID, 0, CaseKind.TIMER_REMOVED_USER_SELF, ()),
        (ContainerKind.USER, ALICE_ID, 0, CaseKind.TIMER_REMOVED_USER, (EntityNameArg(ALICE_ID, compact=True),)),
        (ContainerKind.GROUP, ALICE_ID, 0, CaseKind.TIMER_REMOVED_GROUP, ()),
        (ContainerKind.BROADCAST_CHANNEL, ALICE_ID, 0, CaseKind.TIMER_REMOVED_CHANNEL, ()),
        (ContainerKind.SECRET_CHAT, VIEWER_ID, 0, CaseKind.TIMER_REMOVED_GENERIC_SELF, ()),
        (ContainerKind.SECRET_CHAT, ALICE_ID, -1, CaseKind.TIMER_REMOVED_GENERIC, (EntityNameArg(ALICE_ID, compact=True),)),
    ],
)
def test_auto_delete_timer_decision_table(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    container_kind: ContainerKind,
    actor_id: int,
    timeout: int,
    expected: CaseKind,
    arguments: tuple[object, ...],
) -> None:
    context = context_factory(container_kind=container_kind, actor_id=actor_id)

    case = classifier.classify(AutoDeleteTimerChanged(timeout), context)

    assert case.kind is expected
    assert case.arguments == arguments
    assert case.slots == ()


def test_timer_duration_uses_timer_style(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(AutoDeleteTimerChanged(60), context_factory())

    assert case.arguments == (DurationArg(60, DurationStyle.TIMER),)


# -- screenshots, games, payments ------------------------------------------------


def test_incoming_screenshot_names_actor(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(HistoryScreenshotTaken(), context_factory(is_incoming=True))

    assert case.kind is CaseKind.SCREENSHOT
    assert case.arguments == (EntityNameArg(ALICE_ID, compact=True),)


def test_outgoing_screenshot_is_self(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    assert classifier.classify(HistoryScreenshotTaken(), context_factory()).kind is CaseKind.SCREENSHOT_SELF


@pytest.mark.parametrize(
    "actor_id, referenced, expected",
    [
        (ALICE_ID, None, CaseKind.GAME_SCORE),
        (ALICE_ID, ReferencedMessage(attachments=(GameAttachment("Chess"),)), CaseKind.GAME_SCORE_EXTENDED),
        (VIEWER_ID, None, CaseKind.GAME_SCORE_SELF),
        (VIEWER_ID, ReferencedMessage(attachments=(GameAttachment("Chess"),)), CaseKind.GAME_SCORE_SELF_EXTENDED),
    ],
)
def test_game_score_variants(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    actor_id: int,
    referenced: ReferencedMessage | None,
    expected: CaseKind,
) -> None:
    case = classifier.classify(GameScore(score=42), context_factory(actor_id=actor_id), referenced)

    assert case.kind is expected
    assert case.arguments == (CountArg(42),)
    assert case.plural == 42
    assert [p.token for p in case.placeholders] == ["{name}", "{game}"]
    assert case.placeholders[0].entity_id == actor_id
    assert case.placeholders[1].bold


def test_payment_without_invoice_is_plain(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(PaymentSent("USD", 1250), context_factory())

    assert case.kind is CaseKind.PAYMENT_SENT
    assert case.arguments == (AmountArg(1250, "USD"),)
    assert case.placeholders == ()


def test_payment_with_invoice_uses_placeholders(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    referenced = ReferencedMessage(attachments=(InvoiceAttachment("Old"), InvoiceAttachment("Shoes")))

    case = classifier.classify(PaymentSent("USD", 1250), context_factory(), referenced)

    assert case.kind is CaseKind.PAYMENT_SENT_INVOICE
    amount, name, title = case.placeholders
    assert (amount.token, amount.bold) == ("{amount}", True)
    assert name.value == EntityNameArg(GROUP_ID, compact=True)
    assert name.bold
    assert title.value == TextArg("Shoes")
    assert not title.bold


# -- calls -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "reason, incoming, expected",
    [
        (None, True, CaseKind.CALL_INCOMING),
        (None, False, CaseKind.CALL_OUTGOING),
        (CallDiscardReason.HANGUP, True, CaseKind.CALL_INCOMING),
        (CallDiscardReason.HANGUP, False, CaseKind.CALL_OUTGOING),
        (CallDiscardReason.DISCONNECT, True, CaseKind.CALL_CANCELED),
        (CallDiscardReason.DISCONNECT, False, CaseKind.CALL_CANCELED),
        (CallDiscardReason.MISSED, True, CaseKind.CALL_MISSED),
        (CallDiscardReason.MISSED, False, CaseKind.CALL_CANCELED),
        (CallDiscardReason.BUSY, True, CaseKind.CALL_MISSED),
        (CallDiscardReason.BUSY, False, CaseKind.CALL_CANCELED),
    ],
)
def test_phone_call_decision_table(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    reason: CallDiscardReason | None,
    incoming: bool,
    expected: CaseKind,
) -> None:
    case = classifier.classify(PhoneCall(discard_reason=reason, duration=30), context_factory(is_incoming=incoming))

    assert case.kind is expected


def test_group_call_scheduled_by_person(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(GroupCall(scheduled_for=1_800_000_000), context_factory())

    assert case.kind is CaseKind.GROUP_CALL_SCHEDULED
    assert case.arguments[1] == TimestampArg(1_800_000_000, TimestampStyle.RELATIVE)
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


def test_group_call_scheduled_by_channel_actor(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    context = context_factory(actor_kind=EntityKind.BROADCAST_CHANNEL)

    case = classifier.classify(GroupCall(scheduled_for=1_800_000_000), context)

    assert case.kind is CaseKind.GROUP_CALL_SCHEDULED_CHANNEL
    assert case.slots == ()


@pytest.mark.parametrize(
    "container_kind, expected",
    [(ContainerKind.GROUP, CaseKind.GROUP_CALL_ENDED), (ContainerKind.BROADCAST_CHANNEL, CaseKind.GROUP_CALL_ENDED_CHANNEL)],
)
def test_group_call_ended(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    container_kind: ContainerKind,
    expected: CaseKind,
) -> None:
    case = classifier.classify(GroupCall(duration=125), context_factory(container_kind=container_kind))

    assert case.kind is expected
    assert case.arguments == (DurationArg(125, DurationStyle.CALL),)


@pytest.mark.parametrize(
    "container_kind, expected",
    [(ContainerKind.GROUP, CaseKind.GROUP_CALL_STARTED), (ContainerKind.BROADCAST_CHANNEL, CaseKind.GROUP_CALL_STARTED_CHANNEL)],
)
def test_group_call_started(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    container_kind: ContainerKind,
    expected: CaseKind,
) -> None:
    assert classifier.classify(GroupCall(), context_factory(container_kind=container_kind)).kind is expected


def test_invite_to_call_for_viewer(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(InviteToCall((VIEWER_ID,)), context_factory())

    assert case.kind is CaseKind.CALL_INVITATION_FOR_YOU
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


def test_invite_to_call_single_other(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(InviteToCall((BOB_ID,)), context_factory())

    assert case.kind is CaseKind.CALL_INVITATION
    assert case.slots == (ArgumentSlot(0, ALICE_ID), ArgumentSlot(1, BOB_ID))


def test_invite_to_call_many(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(InviteToCall((VIEWER_ID, BOB_ID)), context_factory())

    assert case.kind is CaseKind.CALL_INVITATION_MULTIPLE
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


# -- proximity -------------------------------------------------------------------


def test_proximity_viewer_reached_other(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(ProximityReached(VIEWER_ID, BOB_ID, 50), context_factory())

    assert case.kind is CaseKind.PROXIMITY_YOU_REACHED
    assert case.arguments == (DistanceArg(50), EntityNameArg(BOB_ID))
    assert case.slots == (ArgumentSlot(1, BOB_ID),)


def test_proximity_other_reached_viewer(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(ProximityReached(BOB_ID, VIEWER_ID, 50), context_factory())

    assert case.kind is CaseKind.PROXIMITY_REACHED_YOU
    assert case.slots == (ArgumentSlot(0, BOB_ID),)


def test_proximity_between_others(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(ProximityReached(BOB_ID, CAROL_ID, 1500), context_factory())

    assert case.kind is CaseKind.PROXIMITY_REACHED
    assert case.slots == (ArgumentSlot(0, BOB_ID), ArgumentSlot(2, CAROL_ID))


# -- misc ------------------------------------------------------------------------


def test_custom_text_passes_entities(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    entities = (TextEntity(0, 4, TextEntityKind.BOLD),)

    case = classifier.classify(CustomText("Done here", entities), context_factory())

    assert case.kind is CaseKind.CUSTOM_TEXT
    assert case.arguments == (TextArg("Done here"),)
    assert case.entities == entities


def test_bot_domain_granted(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(BotDomainGranted("example.com"), context_factory())

    assert case.kind is CaseKind.BOT_DOMAIN_GRANTED
    assert case.arguments == (TextArg("example.com"),)


def test_secure_values_dedupe_proofs_in_order(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    event = BotSentSecureValues(
        (
            SecureValueType.PASSPORT,
            SecureValueType.EMAIL,
            SecureValueType.ID_CARD,
            SecureValueType.UTILITY_BILL,
            SecureValueType.BANK_STATEMENT,
            SecureValueType.PERSONAL_DETAILS,
        )
    )

    case = classifier.classify(event, context_factory())

    assert case.kind is CaseKind.BOT_SENT_SECURE_VALUES
    assert case.arguments == (
        EntityNameArg(GROUP_ID, compact=True),
        SecureValuesArg(
            (
                SecureValueLabel.PROOF_OF_IDENTITY,
                SecureValueLabel.EMAIL,
                SecureValueLabel.PROOF_OF_ADDRESS,
                SecureValueLabel.PERSONAL_DETAILS,
            )
        ),
    )
    assert case.slots == ()


@pytest.mark.parametrize(
    "kind, expected",
    [(ExpiredMediaKind.IMAGE, CaseKind.IMAGE_EXPIRED), (ExpiredMediaKind.FILE, CaseKind.VIDEO_EXPIRED)],
)
def test_expired_media(
    classifier: EventClassifier,
    context_factory: ContextFactory,
    kind: ExpiredMediaKind,
    expected: CaseKind,
) -> None:
    assert classifier.classify(ExpiredMedia(kind), context_factory()).kind is expected


def test_peer_joined_mentions_actor(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(PeerJoined(), context_factory())

    assert case.kind is CaseKind.PEER_JOINED
    assert case.slots == (ArgumentSlot(0, ALICE_ID),)


@pytest.mark.parametrize("event", [HistoryCleared(), PhoneNumberRequested(), Unknown()])
def test_silent_events_render_nothing(
    classifier: EventClassifier, context_factory: ContextFactory, event: object
) -> None:
    assert classifier.classify(event, context_factory()).renders_nothing  # type: ignore[arg-type]


def test_migrated_is_empty(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    assert classifier.classify(Migrated(), context_factory()).kind is CaseKind.EMPTY


def test_unrecognized_type_renders_nothing(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    assert classifier.classify(object(), context_factory()).renders_nothing  # type: ignore[arg-type]


def test_anonymous_actor_gets_no_mention_slot(classifier: EventClassifier, context_factory: ContextFactory) -> None:
    case = classifier.classify(JoinedByLink(), context_factory(actor_id=None))

    assert case.arguments == (EntityNameArg(None),)
    assert case.slots == ()
