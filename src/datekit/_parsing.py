from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo

from dateutil import parser as _parser

from ._exceptions import InvalidDateFormat

logger = logging.getLogger(__name__)

DAY_MONTH_YEAR: str = "%d-%m-%Y"

# Missing fields in a free-form string are filled from here, never from "now".
_PARSE_DEFAULT = datetime(1970, 1, 1)


def parse_instant(value: str, *, default_tz: tzinfo = timezone.utc) -> datetime:
    """
    Parse a free-form or ISO-8601 date/time string into an aware datetime.

    Accepts anything ``dateutil.parser`` understands, e.g.
    ``'04 Dec 1995 00:12:00 UTC'``, ``'2024-02-01T15:00:00.000Z'`` or
    ``'2024-02-01'``. Strings without an offset are interpreted in
    `default_tz`.
    """
    if not isinstance(value, str):
        raise InvalidDateFormat(value)
    try:
        parsed = _parser.parse(value, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError) as exc:
        logger.debug("Rejected date string %r: %s", value, exc)
        raise InvalidDateFormat(value) from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=default_tz)
    return parsed


def parse_day_month_year(value: str) -> date:
    """Parse a strict ``DD-MM-YYYY`` string."""
    try:
        return datetime.strptime(value, DAY_MONTH_YEAR).date()
    except (TypeError, ValueError) as exc:
        logger.debug("Rejected DD-MM-YYYY string %r: %s", value, exc)
        raise InvalidDateFormat(value, "DD-MM-YYYY") from exc


def format_day_month_year(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"
