# -*- coding: utf-8 -*-
"""Default English humanizer for durations, timestamps, distances and currency."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from decimal import Decimal

from service_message_formatting.collaborators.interfaces.humanizer import DayRelation, IHumanizer
from service_message_formatting.models.render_case import DurationStyle, TimestampStyle

_TIMER_UNITS: tuple[tuple[int, str], ...] = (
    (365 * 86400, "year"),
    (30 * 86400, "month"),
    (7 * 86400, "week"),
    (86400, "day"),
    (3600, "hour"),
    (60, "minute"),
    (1, "second"),
)

# Minor-unit exponents for currencies that do not use 2 decimals
_CURRENCY_EXPONENTS: dict[str, int] = {
    "BHD": 3,
    "CLP": 0,
    "IQD": 3,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KRW": 0,
    "KWD": 3,
    "OMR": 3,
    "TND": 3,
    "VND": 0,
}

_CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "RUB": "₽",
    "USD": "$",
}


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


class DefaultHumanizer(IHumanizer):
    """English formatting in a fixed time zone."""

    def __init__(
        self,
        *,
        tz: tzinfo = timezone.utc,
        use_24_hour_time: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the humanizer.

        Args:
            tz: Time zone used for dates and times.
            use_24_hour_time: 14:05 when True, 2:05 PM when False.
            clock: Current-time source when a render has no reference time.
        """
        self._tz = tz
        self._use_24_hour_time = use_24_hour_time
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def format_duration(self, seconds: int, style: DurationStyle) -> str:
        seconds = max(0, int(seconds))
        if style is DurationStyle.CALL:
            if seconds < 60:
                return f"{seconds} sec"
            if seconds < 3600:
                return f"{seconds // 60} min"
            hours, remainder = divmod(seconds, 3600)
            minutes = remainder // 60
            return f"{hours} h {minutes} min" if minutes else f"{hours} h"
        for unit_seconds, unit in _TIMER_UNITS:
            if seconds >= unit_seconds:
                return _plural(seconds // unit_seconds, unit)
        return _plural(0, "second")

    def format_timestamp(
        self,
        timestamp: int,
        style: TimestampStyle,
        *,
        now: datetime | None = None,
    ) -> str:
        moment = self._localize(timestamp)
        time_text = self._format_time(moment)
        if style is TimestampStyle.TIME:
            return time_text
        if style is TimestampStyle.RELATIVE:
            relation = self.day_relation(timestamp, now=now)
            if relation is not DayRelation.OTHER:
                return f"{relation.value} at {time_text}"
        return f"{self._format_date(moment, now=now)} at {time_text}"

    def day_relation(self, timestamp: int, *, now: datetime | None = None) -> DayRelation:
        today = self._reference(now).date()
        delta = (self._localize(timestamp).date() - today).days
        if delta == 0:
            return DayRelation.TODAY
        if delta == 1:
            return DayRelation.TOMORROW
        if delta == -1:
            return DayRelation.YESTERDAY
        return DayRelation.OTHER

    def format_distance(self, meters: int) -> str:
        if meters < 1000:
            return f"{meters} m"
        kilometers = f"{meters / 1000:.1f}"
        if kilometers.endswith(".0"):
            kilometers = kilometers[:-2]
        return f"{kilometers} km"

    def format_currency(self, amount: int, currency: str) -> str:
        code = currency.upper()
        exponent = _CURRENCY_EXPONENTS.get(code, 2)
        value = Decimal(amount).scaleb(-exponent)
        number = f"{value:,.{exponent}f}"
        symbol = _CURRENCY_SYMBOLS.get(code)
        if symbol is None:
            return f"{number} {code}"
        if number.startswith("-"):
            return f"-{symbol}{number[1:]}"
        return f"{symbol}{number}"

    def _reference(self, now: datetime | None) -> datetime:
        return (now or self._clock()).astimezone(self._tz)

    def _localize(self, timestamp: int) -> datetime:
        return datetime.fromtimestamp(timestamp, tz=self._tz)

    def _format_time(self, moment: datetime) -> str:
        if self._use_24_hour_time:
            return f"{moment.hour:02d}:{moment.minute:02d}"
        hour = moment.hour % 12 or 12
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{hour}:{moment.minute:02d} {suffix}"

    def _format_date(self, moment: datetime, *, now: datetime | None) -> str:
        text = f"{moment.strftime('%b')} {moment.day}"
        if moment.year != self._reference(now).year:
            text = f"{text}, {moment.year}"
        return text
