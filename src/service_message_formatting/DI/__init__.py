"""Dependency injection subpackage."""

from service_message_formatting.DI.container import Container

__all__ = ["Container"]
