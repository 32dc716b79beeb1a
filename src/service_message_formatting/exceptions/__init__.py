"""Exceptions subpackage."""

from service_message_formatting.exceptions.exceptions import (
    InvalidArgumentRangeError,
    ServiceMessageError,
    TemplateFormatError,
    TemplateNotFoundError,
)

__all__ = [
    "InvalidArgumentRangeError",
    "ServiceMessageError",
    "TemplateFormatError",
    "TemplateNotFoundError",
]
