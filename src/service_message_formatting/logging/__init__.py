"""Logging subpackage."""

from service_message_formatting.logging.config import configure_logging

__all__ = ["configure_logging"]
