# -*- coding: utf-8 -*-
"""Application services."""

from service_message_formatting.services.classifier import EventClassifier, classify_pinned_content
from service_message_formatting.services.formatter import ServiceMessageFormatter
from service_message_formatting.services.renderer import TemplateRenderer

__all__ = [
    "EventClassifier",
    "ServiceMessageFormatter",
    "TemplateRenderer",
    "classify_pinned_content",
]
