"""Custom exceptions for template lookup and rendering."""

from __future__ import annotations

from typing import Any


class ServiceMessageError(Exception):
    """Base exception for service message rendering errors."""

    pass


class TemplateNotFoundError(ServiceMessageError):
    """Raised when the template provider has no template for a key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No template for key {key!r}")
        self.key = key


class TemplateFormatError(ServiceMessageError):
    """Raised when a template cannot be filled with the supplied arguments."""

    def __init__(self, key: str, detail: str) -> None:
        super().__init__(f"Cannot format template {key!r}: {detail}")
        self.key = key
        self.detail = detail


class InvalidArgumentRangeError(ServiceMessageError):
    """Raised when argument ranges are out of bounds, overlapping or unmatched."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        ranges: Any = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.ranges = ranges
