"""Time zone helpers built on pytz.

Engine timestamps are naive wall-clock readings; these helpers attach a zone
to such a reading and re-read the same instant in another zone.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Union

import pytz

from ..domain import ValidationError

ZoneLike = Union[str, tzinfo]


def resolve_zone(zone: ZoneLike) -> tzinfo:
    """Return the pytz zone for an IANA name, or ``zone`` itself if already a tzinfo."""

    if isinstance(zone, tzinfo):
        return zone
    name = (zone or "").strip()
    if not name:
        raise ValidationError("Time zone is required")
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as exc:
        raise ValidationError(f"Unsupported timezone: {name}") from exc


def localize(dt: datetime, zone: ZoneLike) -> datetime:
    """Attach ``zone`` to a naive wall-clock reading; aware values are converted instead."""

    tz = resolve_zone(zone)
    if dt.tzinfo is not None:
        return dt.astimezone(tz)
    if hasattr(tz, "localize"):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def convert(dt: datetime, source: ZoneLike, target: ZoneLike) -> datetime:
    """Same instant as ``dt`` (read in ``source``), expressed as an aware datetime in ``target``."""

    target_zone = resolve_zone(target)
    converted = localize(dt, source).astimezone(target_zone)
    if hasattr(target_zone, "normalize"):
        converted = target_zone.normalize(converted)
    return converted


def to_zone_local(dt: datetime, source: ZoneLike, target: ZoneLike) -> datetime:
    """Naive wall-clock reading in ``target`` of the instant ``dt`` in ``source``."""

    return convert(dt, source, target).replace(tzinfo=None)


def zone_name(zone: tzinfo) -> str:
    return getattr(zone, "zone", None) or str(zone)


__all__ = ["ZoneLike", "convert", "localize", "resolve_zone", "to_zone_local", "zone_name"]
