"""Template rendering: TemplateRenderer, range checks and the legacy placeholder path."""

from service_message_formatting.services.renderer.legacy_placeholders import substitute_placeholders
from service_message_formatting.services.renderer.ranges import (
    sorted_styled_ranges,
    validate_argument_ranges,
)
from service_message_formatting.services.renderer.template_renderer import TemplateRenderer

__all__ = [
    "TemplateRenderer",
    "sorted_styled_ranges",
    "substitute_placeholders",
    "validate_argument_ranges",
]
