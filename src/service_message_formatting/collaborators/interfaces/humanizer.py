"""Abstract interface for presentation formatting of durations, dates, distances and money."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum

from service_message_formatting.models.render_case import DurationStyle, TimestampStyle


class DayRelation(str, Enum):
    """Calendar day of a timestamp relative to a reference day."""

    YESTERDAY = "yesterday"
    TODAY = "today"
    TOMORROW = "tomorrow"
    OTHER = "other"


class IHumanizer(ABC):
    """Pure formatting functions; outputs are opaque strings to the renderer."""

    @abstractmethod
    def format_duration(self, seconds: int, style: DurationStyle) -> str: ...

    @abstractmethod
    def format_timestamp(
        self,
        timestamp: int,
        style: TimestampStyle,
        *,
        now: datetime | None = None,
    ) -> str: ...

    @abstractmethod
    def day_relation(self, timestamp: int, *, now: datetime | None = None) -> DayRelation: ...

    @abstractmethod
    def format_distance(self, meters: int) -> str: ...

    @abstractmethod
    def format_currency(self, amount: int, currency: str) -> str:
        """Format an amount given in the currency's minor units."""
        ...
