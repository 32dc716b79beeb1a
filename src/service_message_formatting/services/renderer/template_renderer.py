# -*- coding: utf-8 -*-
"""TemplateRenderer: turns a RenderCase into text plus styled ranges.

Steps:
1. Map the case to a template key and resolve its arguments to strings.
2. Look the template up once; the provider reports where each argument landed.
3. Give each reported range the role of its slot (mention, bold, or body).
4. Sort and check the styled ranges.

Game-score and invoice-payment cases go through legacy_placeholders instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from service_message_formatting.collaborators.interfaces import (
    DayRelation,
    IEntityDirectory,
    IHumanizer,
    ITemplateProvider,
)
from service_message_formatting.exceptions import TemplateNotFoundError
from service_message_formatting.models.context import RenderContext
from service_message_formatting.models.events import TextEntity, TextEntityKind
from service_message_formatting.models.render_case import (
    AmountArg,
    ArgumentSlot,
    ArgumentValue,
    CaseKind,
    CountArg,
    DistanceArg,
    DurationArg,
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
from service_message_formatting.models.result import RenderResult, StyledRange, StyleRole, TextRange
from service_message_formatting.services.renderer.legacy_placeholders import substitute_placeholders
from service_message_formatting.services.renderer.ranges import (
    sorted_styled_ranges,
    validate_argument_ranges,
)
from service_message_formatting.templates.keys import TemplateKey
from service_message_formatting.utils.text import join_names

_TEMPLATE_KEYS: dict[CaseKind, TemplateKey] = {
    CaseKind.CHANNEL_CREATED: TemplateKey.CREATED_CHANNEL,
    CaseKind.GROUP_CREATED: TemplateKey.CREATED_GROUP,
    CaseKind.GROUP_CREATED_WITH_TITLE: TemplateKey.CREATED_CHAT_WITH_TITLE,
    CaseKind.JOINED_CHANNEL: TemplateKey.JOINED_CHANNEL,
    CaseKind.JOINED_GROUP: TemplateKey.JOINED_CHAT,
    CaseKind.INVITED_MEMBER: TemplateKey.INVITED,
    CaseKind.INVITED_MEMBERS: TemplateKey.INVITED_MULTIPLE,
    CaseKind.LEFT_CHANNEL: TemplateKey.LEFT_CHANNEL,
    CaseKind.LEFT_GROUP: TemplateKey.LEFT_CHAT,
    CaseKind.REMOVED_MEMBER: TemplateKey.KICKED,
    CaseKind.REMOVED_MEMBERS: TemplateKey.KICKED,
    CaseKind.CHANNEL_VIDEO_UPDATED: TemplateKey.CHANNEL_VIDEO_UPDATED,
    CaseKind.CHANNEL_PHOTO_UPDATED: TemplateKey.CHANNEL_PHOTO_UPDATED,
    CaseKind.CHANNEL_PHOTO_REMOVED: TemplateKey.CHANNEL_PHOTO_REMOVED,
    CaseKind.GROUP_VIDEO_UPDATED: TemplateKey.GROUP_VIDEO_UPDATED,
    CaseKind.GROUP_PHOTO_UPDATED: TemplateKey.GROUP_PHOTO_UPDATED,
    CaseKind.GROUP_PHOTO_REMOVED: TemplateKey.GROUP_PHOTO_REMOVED,
    CaseKind.ACTOR_VIDEO_UPDATED: TemplateKey.CHANGED_GROUP_VIDEO,
    CaseKind.ACTOR_PHOTO_UPDATED: TemplateKey.CHANGED_GROUP_PHOTO,
    CaseKind.ACTOR_PHOTO_REMOVED: TemplateKey.REMOVED_GROUP_PHOTO,
    CaseKind.CHANNEL_TITLE_UPDATED: TemplateKey.CHANNEL_TITLE_UPDATED,
    CaseKind.ACTOR_TITLE_UPDATED: TemplateKey.CHANGED_GROUP_NAME,
    CaseKind.PINNED_TEXT: TemplateKey.PINNED_TEXT,
    CaseKind.PINNED_GENERIC: TemplateKey.PINNED_GENERIC,
    CaseKind.PINNED_GAME: TemplateKey.PINNED_GAME,
    CaseKind.PINNED_PHOTO: TemplateKey.PINNED_PHOTO,
    CaseKind.PINNED_VIDEO: TemplateKey.PINNED_VIDEO,
    CaseKind.PINNED_ROUND_VIDEO: TemplateKey.PINNED_ROUND,
    CaseKind.PINNED_VOICE: TemplateKey.PINNED_AUDIO,
    CaseKind.PINNED_FILE: TemplateKey.PINNED_DOCUMENT,
    CaseKind.PINNED_GIF: TemplateKey.PINNED_ANIMATION,
    CaseKind.PINNED_STICKER: TemplateKey.PINNED_STICKER,
    CaseKind.PINNED_LOCATION: TemplateKey.PINNED_LOCATION,
    CaseKind.PINNED_CONTACT: TemplateKey.PINNED_CONTACT,
    CaseKind.PINNED_POLL: TemplateKey.PINNED_POLL,
    CaseKind.PINNED_QUIZ: TemplateKey.PINNED_QUIZ,
    CaseKind.JOINED_BY_LINK: TemplateKey.JOINED_GROUP_BY_LINK,
    CaseKind.TIMER_SET_USER_SELF: TemplateKey.TIMER_SET_USER_YOU,
    CaseKind.TIMER_SET_USER: TemplateKey.TIMER_SET_USER,
    CaseKind.TIMER_SET_GROUP: TemplateKey.TIMER_SET_GROUP,
    CaseKind.TIMER_SET_CHANNEL: TemplateKey.TIMER_SET_CHANNEL,
    CaseKind.TIMER_SET_GENERIC_SELF: TemplateKey.LIFETIME_CHANGED_OUTGOING,
    CaseKind.TIMER_SET_GENERIC: TemplateKey.LIFETIME_CHANGED,
    CaseKind.TIMER_REMOVED_USER_SELF: TemplateKey.TIMER_REMOVED_USER_YOU,
    CaseKind.TIMER_REMOVED_USER: TemplateKey.TIMER_REMOVED_USER,
    CaseKind.TIMER_REMOVED_GROUP: TemplateKey.TIMER_REMOVED_GROUP,
    CaseKind.TIMER_REMOVED_CHANNEL: TemplateKey.TIMER_REMOVED_CHANNEL,
    CaseKind.TIMER_REMOVED_GENERIC_SELF: TemplateKey.LIFETIME_REMOVED_OUTGOING,
    CaseKind.TIMER_REMOVED_GENERIC: TemplateKey.LIFETIME_REMOVED,
    CaseKind.SCREENSHOT: TemplateKey.SCREENSHOT,
    CaseKind.SCREENSHOT_SELF: TemplateKey.SCREENSHOT_SELF,
    CaseKind.GAME_SCORE: TemplateKey.GAME_SCORE_SIMPLE,
    CaseKind.GAME_SCORE_EXTENDED: TemplateKey.GAME_SCORE_EXTENDED,
    CaseKind.GAME_SCORE_SELF: TemplateKey.GAME_SCORE_SELF_SIMPLE,
    CaseKind.GAME_SCORE_SELF_EXTENDED: TemplateKey.GAME_SCORE_SELF_EXTENDED,
    CaseKind.PAYMENT_SENT: TemplateKey.PAYMENT_SENT,
    CaseKind.PAYMENT_SENT_INVOICE: TemplateKey.PAYMENT_SENT_INVOICE,
    CaseKind.CALL_INCOMING: TemplateKey.CALL_INCOMING,
    CaseKind.CALL_OUTGOING: TemplateKey.CALL_OUTGOING,
    CaseKind.CALL_CANCELED: TemplateKey.CALL_CANCELED,
    CaseKind.CALL_MISSED: TemplateKey.CALL_MISSED,
    CaseKind.GROUP_CALL_SCHEDULED: TemplateKey.VOICE_CHAT_SCHEDULED,
    CaseKind.GROUP_CALL_SCHEDULED_CHANNEL: TemplateKey.VOICE_CHAT_SCHEDULED_CHANNEL,
    CaseKind.GROUP_CALL_ENDED: TemplateKey.VOICE_CHAT_ENDED,
    CaseKind.GROUP_CALL_ENDED_CHANNEL: TemplateKey.VOICE_CHAT_ENDED_CHANNEL,
    CaseKind.GROUP_CALL_STARTED: TemplateKey.VOICE_CHAT_STARTED,
    CaseKind.GROUP_CALL_STARTED_CHANNEL: TemplateKey.VOICE_CHAT_STARTED_CHANNEL,
    CaseKind.BOT_DOMAIN_GRANTED: TemplateKey.BOT_DOMAIN_GRANTED,
    CaseKind.BOT_SENT_SECURE_VALUES: TemplateKey.PASSPORT_VALUES_SENT,
    CaseKind.PEER_JOINED: TemplateKey.PEER_JOINED,
    CaseKind.PROXIMITY_YOU_REACHED: TemplateKey.PROXIMITY_YOU_REACHED,
    CaseKind.PROXIMITY_REACHED_YOU: TemplateKey.PROXIMITY_REACHED_YOU,
    CaseKind.PROXIMITY_REACHED: TemplateKey.PROXIMITY_REACHED,
    CaseKind.CALL_INVITATION_FOR_YOU: TemplateKey.VOICE_CHAT_INVITATION_FOR_YOU,
    CaseKind.CALL_INVITATION: TemplateKey.VOICE_CHAT_INVITATION,
    CaseKind.CALL_INVITATION_MULTIPLE: TemplateKey.VOICE_CHAT_INVITATION,
    CaseKind.IMAGE_EXPIRED: TemplateKey.IMAGE_EXPIRED,
    CaseKind.VIDEO_EXPIRED: TemplateKey.VIDEO_EXPIRED,
}

_SCHEDULED_CHANNEL_KEYS: dict[DayRelation, TemplateKey] = {
    DayRelation.TODAY: TemplateKey.VOICE_CHAT_SCHEDULED_TODAY_CHANNEL,
    DayRelation.TOMORROW: TemplateKey.VOICE_CHAT_SCHEDULED_TOMORROW_CHANNEL,
}

_SECURE_VALUE_KEYS: dict[SecureValueLabel, TemplateKey] = {
    SecureValueLabel.PERSONAL_DETAILS: TemplateKey.PASSPORT_PERSONAL_DETAILS,
    SecureValueLabel.PROOF_OF_IDENTITY: TemplateKey.PASSPORT_PROOF_OF_IDENTITY,
    SecureValueLabel.ADDRESS: TemplateKey.PASSPORT_ADDRESS,
    SecureValueLabel.PROOF_OF_ADDRESS: TemplateKey.PASSPORT_PROOF_OF_ADDRESS,
    SecureValueLabel.PHONE: TemplateKey.PASSPORT_PHONE,
    SecureValueLabel.EMAIL: TemplateKey.PASSPORT_EMAIL,
}

_BOLD_ENTITY_KINDS = frozenset({TextEntityKind.BOLD, TextEntityKind.BOLD_ITALIC})
_LINK_ENTITY_KINDS = frozenset(
    {
        TextEntityKind.URL,
        TextEntityKind.TEXT_URL,
        TextEntityKind.EMAIL,
        TextEntityKind.PHONE,
        TextEntityKind.MENTION,
        TextEntityKind.HASHTAG,
        TextEntityKind.CASHTAG,
        TextEntityKind.BOT_COMMAND,
    }
)


def _slot_role(slot: ArgumentSlot | None) -> StyleRole | None:
    """Role for a slot; None means body."""
    if slot is None:
        return None
    if slot.entity_id is not None:
        return StyleRole.mention(slot.entity_id)
    if slot.bold:
        return StyleRole.bold()
    return None


def _placeholder_role(placeholder: PlaceholderSlot) -> StyleRole | None:
    if placeholder.entity_id is not None:
        return StyleRole.mention(placeholder.entity_id)
    if placeholder.bold:
        return StyleRole.bold()
    return None


def _entity_role(entity: TextEntity, covered: str) -> StyleRole | None:
    if entity.kind in _BOLD_ENTITY_KINDS:
        return StyleRole.bold()
    if entity.kind is TextEntityKind.TEXT_MENTION:
        return StyleRole.mention(entity.entity_id) if entity.entity_id is not None else None
    if entity.kind is TextEntityKind.URL:
        return StyleRole.link(covered)
    if entity.kind in _LINK_ENTITY_KINDS:
        return StyleRole.link(entity.url)
    return None


class TemplateRenderer:
    """Renders RenderCases through a template provider, an entity directory and a humanizer."""

    def __init__(
        self,
        *,
        template_provider: ITemplateProvider,
        humanizer: IHumanizer,
        list_separator: str = ", ",
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            template_provider: Localized template lookup (must know every TemplateKey).
            humanizer: Formats durations, dates, distances and amounts.
            list_separator: Joins names in multi-entity lists.
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._provider = template_provider
        self._humanizer = humanizer
        self._list_separator = list_separator
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def render(
        self,
        case: RenderCase,
        context: RenderContext,
        directory: IEntityDirectory,
    ) -> RenderResult | None:
        """Render case; None when the case renders nothing.

        Raises:
            TemplateNotFoundError: no template for the case (provider or key table).
            TemplateFormatError: the template needs arguments the case does not supply.
            InvalidArgumentRangeError: the provider reported bad ranges.
        """
        if case.kind is CaseKind.NOTHING:
            return None
        if case.kind is CaseKind.EMPTY:
            return RenderResult(text="")
        if case.kind is CaseKind.CUSTOM_TEXT:
            return self._render_custom_text(case)
        if case.placeholders:
            return self._render_placeholders(case, context, directory)
        return self._render_template(case, context, directory)

    def template_key(self, case: RenderCase, context: RenderContext) -> TemplateKey:
        """Return the template key the case renders with."""
        key, _ = self._select(case, context)
        return key

    def _select(
        self, case: RenderCase, context: RenderContext
    ) -> tuple[TemplateKey, tuple[ArgumentValue, ...]]:
        if case.kind is CaseKind.GROUP_CALL_SCHEDULED_CHANNEL:
            return self._select_scheduled_channel(case, context)
        key = _TEMPLATE_KEYS.get(case.kind)
        if key is None:
            raise TemplateNotFoundError(case.kind.value)
        return key, case.arguments

    def _select_scheduled_channel(
        self, case: RenderCase, context: RenderContext
    ) -> tuple[TemplateKey, tuple[ArgumentValue, ...]]:
        """Pick the today/tomorrow/date phrasing for a scheduled channel stream."""
        stamp = case.arguments[0]
        if not isinstance(stamp, TimestampArg):
            raise TypeError(f"scheduled stream needs a TimestampArg, got {stamp!r}")
        relation = self._humanizer.day_relation(stamp.timestamp, now=context.now)
        key = _SCHEDULED_CHANNEL_KEYS.get(relation)
        if key is not None:
            return key, (TimestampArg(stamp.timestamp, TimestampStyle.TIME),)
        return TemplateKey.VOICE_CHAT_SCHEDULED_CHANNEL, (
            TimestampArg(stamp.timestamp, TimestampStyle.DATE_TIME),
        )

    def _render_template(
        self,
        case: RenderCase,
        context: RenderContext,
        directory: IEntityDirectory,
    ) -> RenderResult:
        key, arguments = self._select(case, context)
        values = [self._resolve(argument, context, directory) for argument in arguments]
        lookup = self._provider.lookup(key, values, plural=case.plural)
        validate_argument_ranges(
            lookup.text,
            lookup.ranges,
            argument_count=len(values),
            key=key.value,
        )

        styled: list[StyledRange] = []
        for index, rng in lookup.ranges:
            role = _slot_role(case.slot_for(index))
            if role is None or rng.length == 0:
                continue
            styled.append(StyledRange(rng, role))
        return RenderResult(
            text=lookup.text,
            styled_ranges=sorted_styled_ranges(lookup.text, styled, key=key.value),
        )

    def _render_placeholders(
        self,
        case: RenderCase,
        context: RenderContext,
        directory: IEntityDirectory,
    ) -> RenderResult:
        """Legacy path: fill positional args, then splice literal tokens."""
        key, arguments = self._select(case, context)
        values = [self._resolve(argument, context, directory) for argument in arguments]
        base = self._provider.lookup(key, values, plural=case.plural).text
        replacements = [
            (
                placeholder.token,
                self._resolve(placeholder.value, context, directory),
                _placeholder_role(placeholder),
            )
            for placeholder in case.placeholders
        ]
        text, styled = substitute_placeholders(base, replacements)
        return RenderResult(
            text=text,
            styled_ranges=sorted_styled_ranges(text, styled, key=key.value),
        )

    def _render_custom_text(self, case: RenderCase) -> RenderResult:
        """Pass custom text through; entities become roles, bad entities are skipped."""
        argument = case.arguments[0] if case.arguments else TextArg("")
        text = argument.text if isinstance(argument, TextArg) else ""
        styled: list[StyledRange] = []
        last_end = 0
        for entity in sorted(case.entities, key=lambda e: (e.offset, e.length)):
            rng = TextRange(entity.offset, entity.length)
            role = _entity_role(entity, text[max(rng.location, 0) : max(rng.end, 0)])
            if role is None:
                continue
            if rng.location < 0 or rng.length <= 0 or rng.end > len(text) or rng.location < last_end:
                self._logger.warning(
                    "custom_text_entity_skipped",
                    entity_kind=entity.kind.value,
                    entity_offset=entity.offset,
                    entity_length=entity.length,
                    text_length=len(text),
                )
                continue
            styled.append(StyledRange(rng, role))
            last_end = rng.end
        return RenderResult(text=text, styled_ranges=tuple(styled))

    def _resolve(
        self,
        argument: ArgumentValue,
        context: RenderContext,
        directory: IEntityDirectory,
    ) -> str:
        """Turn a typed argument into its display string; unknown entities give ""."""
        if isinstance(argument, TextArg):
            return argument.text
        if isinstance(argument, EntityNameArg):
            if argument.entity_id is None:
                return ""
            if argument.compact:
                return directory.compact_name(argument.entity_id)
            return directory.display_name(argument.entity_id, context.name_order)
        if isinstance(argument, EntityNamesArg):
            return join_names(
                (directory.display_name(entity_id, context.name_order) for entity_id in argument.entity_ids),
                self._list_separator,
            )
        if isinstance(argument, DurationArg):
            return self._humanizer.format_duration(argument.seconds, argument.style)
        if isinstance(argument, TimestampArg):
            return self._humanizer.format_timestamp(argument.timestamp, argument.style, now=context.now)
        if isinstance(argument, DistanceArg):
            return self._humanizer.format_distance(argument.meters)
        if isinstance(argument, AmountArg):
            return self._humanizer.format_currency(argument.amount, argument.currency)
        if isinstance(argument, CountArg):
            return str(argument.value)
        if isinstance(argument, SecureValuesArg):
            return join_names(
                (self._provider.text(_SECURE_VALUE_KEYS[label]) for label in argument.labels),
                self._list_separator,
            )
        raise TypeError(f"Unsupported argument {argument!r}")
