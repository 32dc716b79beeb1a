# -*- coding: utf-8 -*-
"""ServiceMessageFormatter: classify an event, then render the chosen case."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from service_message_formatting.collaborators.interfaces import IEntityDirectory
from service_message_formatting.exceptions import ServiceMessageError
from service_message_formatting.models.attachments import ReferencedMessage
from service_message_formatting.models.context import RenderContext
from service_message_formatting.models.events import Event
from service_message_formatting.models.result import RenderResult
from service_message_formatting.services.classifier import EventClassifier
from service_message_formatting.services.renderer import TemplateRenderer


class ServiceMessageFormatter:
    """Facade over EventClassifier and TemplateRenderer.

    Same inputs always give the same output; collaborators are read, never mutated.
    """

    def __init__(
        self,
        classifier: EventClassifier,
        renderer: TemplateRenderer,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._classifier = classifier
        self._renderer = renderer
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def format(
        self,
        event: Event,
        context: RenderContext,
        directory: IEntityDirectory,
        referenced: ReferencedMessage | None = None,
    ) -> RenderResult | None:
        """Return text with styled ranges for event, or None when it has no text.

        Raises:
            ServiceMessageError: template lookup or range validation failed (logged first).
        """
        case = self._classifier.classify(event, context, referenced)
        try:
            result = self._renderer.render(case, context, directory)
        except ServiceMessageError as e:
            self._logger.error(
                "service_message_render_failed",
                event_type=type(event).__name__,
                case_kind=case.kind.value,
                error=str(e),
            )
            raise
        self._logger.debug(
            "service_message_rendered",
            event_type=type(event).__name__,
            case_kind=case.kind.value,
            text_length=len(result.text) if result is not None else None,
            styled_range_count=len(result.styled_ranges) if result is not None else 0,
        )
        return result

    def plain_text(
        self,
        event: Event,
        context: RenderContext,
        directory: IEntityDirectory,
        referenced: ReferencedMessage | None = None,
    ) -> str | None:
        """Return only the rendered text."""
        result = self.format(event, context, directory, referenced)
        return result.text if result is not None else None
