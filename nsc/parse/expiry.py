"""
Expiration expression parsing.

Accepts an absolute date (``YYYY-MM-DD``, midnight UTC) or a relative interval
(``<count><unit>``) and returns Unix seconds, with ``0`` meaning "never expires".
"""

import calendar
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..types.errors import InvalidExpirySyntax, UnknownIntervalUnit

logger = logging.getLogger(__name__)

NO_EXPIRATION = 0

_DATE_PATTERN = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})')
_INTERVAL_PATTERN = re.compile(r'(?P<count>[0-9]+)(?P<unit>[A-Za-z])')

# fixed-length units; calendar units are handled by _add_calendar
_FIXED_UNITS = {
    'm': timedelta(minutes=1),
    'h': timedelta(hours=1),
}

_CALENDAR_UNITS = ('d', 'w', 'M', 'y')


def parse_expiry(spec: str, now: Optional[datetime] = None) -> int:
    """
    Parse an expiration expression into Unix seconds.

    Supported forms:
        ``""`` or ``"0"``   no expiration, returns 0
        ``YYYY-MM-DD``      midnight UTC of that day
        ``<n>m`` ``<n>h``   now plus n minutes/hours
        ``<n>d`` ``<n>w``   now plus n days/weeks
        ``<n>M`` ``<n>y``   now plus n calendar months/years

    Month and year arithmetic clamp to the last day of the target month, so
    Jan 31 plus one month is the last day of February.

    ``now`` may be passed to make the result deterministic. Naive datetimes
    are taken as UTC.
    """
    text = spec.strip()
    if text == "" or text == "0":
        return NO_EXPIRATION

    m = _DATE_PATTERN.fullmatch(text)
    if m:
        return _parse_date(spec, m)

    m = _INTERVAL_PATTERN.fullmatch(text)
    if m is None:
        logger.warning("Rejected expiry %r", spec)
        raise InvalidExpirySyntax(spec)

    count = int(m.group('count'))
    unit = m.group('unit')
    if unit not in _FIXED_UNITS and unit not in _CALENDAR_UNITS:
        logger.warning("Unknown interval %r in expiry %r", unit, spec)
        raise UnknownIntervalUnit(spec, unit)

    if count == 0:
        return NO_EXPIRATION

    base = _utc(now)
    try:
        if unit in _FIXED_UNITS:
            expires = base + count * _FIXED_UNITS[unit]
        else:
            expires = _add_calendar(base, count, unit)
        result = int(expires.timestamp())
    except (OverflowError, ValueError) as e:
        logger.warning("Expiry %r is out of range: %s", spec, e)
        raise InvalidExpirySyntax(spec, cause=e) from e

    logger.debug("Expiry %r resolved to %s", spec, expires.isoformat())
    return result


def _parse_date(spec: str, m: 're.Match[str]') -> int:
    year, month, day = (int(g) for g in m.groups())
    try:
        day_start = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError as e:
        logger.warning("Rejected expiry date %r: %s", spec, e)
        raise InvalidExpirySyntax(spec, cause=e) from e
    return int(day_start.timestamp())


def _utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _add_calendar(base: datetime, count: int, unit: str) -> datetime:
    """Add days, weeks, months or years, keeping the time of day."""
    if unit == 'd':
        return base + timedelta(days=count)
    if unit == 'w':
        return base + timedelta(days=7 * count)
    if unit == 'M':
        return add_months(base, count)
    return add_months(base, 12 * count)


def add_months(base: datetime, months: int) -> datetime:
    """Shift ``base`` by whole calendar months, clamping the day to the month's end."""
    index = base.month - 1 + months
    year = base.year + index // 12
    month = index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return base.replace(year=year, month=month, day=min(base.day, last_day))
