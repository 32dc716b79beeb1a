"""Event classification: EventClassifier and the pinned-content sub-classifier (pure logic, no I/O)."""

from service_message_formatting.services.classifier.event_classifier import EventClassifier
from service_message_formatting.services.classifier.pinned_content import (
    PinnedContent,
    PinnedContentKind,
    classify_pinned_content,
)

__all__ = [
    "EventClassifier",
    "PinnedContent",
    "PinnedContentKind",
    "classify_pinned_content",
]
