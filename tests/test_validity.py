"""
Unit tests for qualification expiry and effective validity.

Run:
    pytest tests/test_validity.py -v
"""

from datetime import date, datetime, timedelta, timezone

from crew_qualification.eligibility.pipeline import process_crew
from crew_qualification.eligibility.validity import (
    effectively_valid,
    expired_but_flagged_valid,
    is_effectively_valid,
    is_expired,
)


# ============================================================
# TEST: EXPIRY
# ============================================================

def test_no_expiry_date_never_expires(make_qual):
    q = make_qual(expiry_date=None)
    assert is_expired(q, datetime(1970, 1, 1)) is False
    assert is_expired(q, datetime(2999, 12, 31)) is False


def test_expiry_in_the_past_is_expired(make_qual, now):
    q = make_qual(expiry_date=now.date() - timedelta(days=1))
    assert is_expired(q, now) is True


def test_expiry_in_the_future_is_not_expired(make_qual, now):
    q = make_qual(expiry_date=now.date() + timedelta(days=1))
    assert is_expired(q, now) is False


def test_expiring_exactly_now_is_not_yet_expired(make_qual):
    instant = datetime(2026, 10, 18, 9, 30)
    q = make_qual(expiry_date=instant)
    assert is_expired(q, instant) is False
    assert is_expired(q, instant + timedelta(seconds=1)) is True


def test_date_expiry_against_date_now(make_qual):
    q = make_qual(expiry_date=date(2026, 10, 18))
    assert is_expired(q, date(2026, 10, 18)) is False
    assert is_expired(q, date(2026, 10, 19)) is True


def test_date_expiry_is_start_of_day_in_now_timezone(make_qual):
    q = make_qual(expiry_date=date(2026, 10, 18))
    aware_now = datetime(2026, 10, 18, 0, 0, 1, tzinfo=timezone.utc)
    assert is_expired(q, aware_now) is True
    assert is_expired(q, datetime(2026, 10, 17, 23, 59, tzinfo=timezone.utc)) is False


# ============================================================
# TEST: EFFECTIVE VALIDITY
# ============================================================

def test_invalid_flag_is_never_effectively_valid(make_qual, now):
    assert is_effectively_valid(make_qual(valid=False, expiry_date=None), now) is False
    assert is_effectively_valid(make_qual(valid=False, expiry_date=date(2099, 1, 1)), now) is False
    assert is_effectively_valid(make_qual(valid=False, expiry_date=date(2000, 1, 1)), now) is False


def test_valid_and_unexpired_is_effectively_valid(make_qual, now):
    assert is_effectively_valid(make_qual(), now) is True
    assert is_effectively_valid(make_qual(expiry_date=None), now) is True


def test_partitions(make_qual, now):
    good = make_qual()
    expired = make_qual(expiry_date=date(2025, 1, 1))
    revoked = make_qual(valid=False)
    revoked_and_expired = make_qual(valid=False, expiry_date=date(2025, 1, 1))
    quals = [good, expired, revoked, revoked_and_expired]

    assert effectively_valid(quals, now) == [good]
    assert expired_but_flagged_valid(quals, now) == [expired]


def test_aware_expiry_against_naive_now(make_qual):
    q = make_qual(expiry_date=datetime(2027, 1, 1, tzinfo=timezone.utc))
    assert is_expired(q, datetime(2026, 10, 18, 12)) is False
    assert is_expired(q, datetime(2027, 1, 1, 0, 0, 1)) is True


def test_naive_expiry_against_aware_now(make_qual):
    q = make_qual(expiry_date=datetime(2026, 10, 18, 9, 30))
    assert is_expired(q, datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)) is False
    assert is_expired(q, datetime(2026, 10, 18, 10, 0, tzinfo=timezone.utc)) is True


def test_mixed_timezones_do_not_break_processing(make_crew, make_qual, phenom):
    quals = [
        make_qual(aircraft_type="Phenom 300", expiry_date=datetime(2027, 1, 1, tzinfo=timezone.utc)),
        make_qual(kind="LICENSE", expiry_date=datetime(2027, 1, 1)),
    ]
    [member] = process_crew(phenom, [make_crew()], quals, datetime(2026, 10, 18, 12, tzinfo=timezone.utc))
    assert member.qualified is True
    [member] = process_crew(phenom, [make_crew()], quals, datetime(2026, 10, 18, 12))
    assert member.qualified is True
