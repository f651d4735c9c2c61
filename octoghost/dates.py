"""Permissive date handling for front matter values.

Octopress posts carry dates in several shapes: YAML timestamps (which PyYAML
already turns into ``date``/``datetime`` objects), free-form strings such as
``2013-05-01 10:00`` or ``2013-05-01 10:00:00 +0200``, or nothing at all, in
which case the file name prefix is used. Values that cannot be parsed are not
an error; they become ``None`` and end up as ``null`` in the export.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Mapping, Optional

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

UTC = timezone.utc

# Fields missing from a date string are filled from here, never from "today".
_PARSE_DEFAULT = datetime(1970, 1, 1)
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    raw = str(value).strip()
    if not raw:
        return None
    try:
        return dateutil_parser.parse(raw, default=_PARSE_DEFAULT)
    except (TypeError, ValueError, OverflowError):
        return None


def to_epoch_ms(value: Any, tz: tzinfo = UTC) -> Optional[int]:
    """Convert a date-like value to epoch milliseconds, or ``None``.

    Naive values are interpreted in ``tz``.
    """

    if value is None:
        return None
    dt = _to_datetime(value)
    if dt is None:
        logger.debug("Unparseable date value %r", value)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    try:
        return (dt - _EPOCH) // timedelta(milliseconds=1)
    except OverflowError:
        return None


def resolve_created(front_matter: Mapping[str, Any], file_name: str) -> Any:
    """Return the raw creation date: ``date``, ``created``, or the file name prefix."""

    return front_matter.get("date") or front_matter.get("created") or file_name[:10]


def resolve_updated(front_matter: Mapping[str, Any], created: Any) -> Any:
    return front_matter.get("changed") or created


__all__ = ["UTC", "resolve_created", "resolve_updated", "to_epoch_ms"]
