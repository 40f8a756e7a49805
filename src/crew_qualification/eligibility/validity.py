from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Iterable, List, Union

from crew_qualification.domain.qualification import Qualification

Instant = Union[date, datetime]


def _comparable_expiry(expiry: Instant, now: Instant) -> Instant:
    # A plain expiry date is the start of that day in now's timezone.
    if isinstance(now, datetime):
        if isinstance(expiry, datetime):
            # A naive value takes the aware side's zone; a naive now is read as UTC.
            if expiry.tzinfo is None and now.tzinfo is not None:
                return expiry.replace(tzinfo=now.tzinfo)
            if expiry.tzinfo is not None and now.tzinfo is None:
                return expiry.astimezone(timezone.utc).replace(tzinfo=None)
            return expiry
        return datetime.combine(expiry, time.min, tzinfo=now.tzinfo)
    if isinstance(expiry, datetime):
        return expiry.date()
    return expiry


def is_expired(q: Qualification, now: Instant) -> bool:
    """
    True if the qualification's expiry date lies strictly before `now`.
    A qualification without an expiry date never expires.
    """
    if not q.expiry_date:
        return False
    return _comparable_expiry(q.expiry_date, now) < now


def is_effectively_valid(q: Qualification, now: Instant) -> bool:
    return bool(q.valid) and not is_expired(q, now)


def effectively_valid(qualifications: Iterable[Qualification], now: Instant) -> List[Qualification]:
    return [q for q in qualifications if is_effectively_valid(q, now)]


def expired_but_flagged_valid(qualifications: Iterable[Qualification], now: Instant) -> List[Qualification]:
    """Qualifications the authority still flags valid but whose date has passed."""
    return [q for q in qualifications if q.valid and is_expired(q, now)]
