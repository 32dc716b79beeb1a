"""Service message formatting: classify chat service events and render styled text."""

from service_message_formatting.config import get_settings
from service_message_formatting.DI import Container
from service_message_formatting.models import RenderContext, RenderResult
from service_message_formatting.services import (
    EventClassifier,
    ServiceMessageFormatter,
    TemplateRenderer,
)

__version__ = "0.1.0"
__all__ = [
    "Container",
    "EventClassifier",
    "RenderContext",
    "RenderResult",
    "ServiceMessageFormatter",
    "TemplateRenderer",
    "get_settings",
]
