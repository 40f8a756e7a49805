"""
Unit tests for missing-document detection and status derivation.

Run:
    pytest tests/test_documents_and_status.py -v
"""

from datetime import date

import pytest

from crew_qualification.domain.processed import BadgeColor, StatusBadge
from crew_qualification.eligibility.documents import missing_documents
from crew_qualification.eligibility.status import derive_status


# ============================================================
# TEST: MISSING DOCUMENTS
# ============================================================

def test_complete_pilot_has_no_gaps(make_crew, make_qual, now):
    quals = [make_qual(aircraft_type="Phenom 300"), make_qual(kind="LICENSE", level="ATPL")]
    assert missing_documents(make_crew(), quals, now) == []


def test_profile_gaps_in_fixed_order(make_crew, make_qual, now):
    crew = make_crew(phone=None, address="", employee_code="   ")
    quals = [make_qual(kind="LICENSE")]
    assert missing_documents(crew, quals, now) == ["Phone", "Address", "Employee code"]


def test_expired_qualifications_are_summarized_once(make_crew, make_qual, now):
    quals = [
        make_qual(kind="LICENSE"),
        make_qual(aircraft_type="Phenom 300", expiry_date=date(2025, 1, 1)),
        make_qual(kind="TRAINING", code="CRM", expiry_date=date(2026, 3, 1)),
        make_qual(kind="COMPETENCY", valid=False, expiry_date=date(2020, 1, 1)),
    ]
    assert missing_documents(make_crew(), quals, now) == ["2 expired qualification(s)"]


def test_pilot_without_valid_license(make_crew, make_qual, now):
    quals = [make_qual(kind="LICENSE", valid=False)]
    assert missing_documents(make_crew(), quals, now) == ["Valid License"]


def test_pilot_with_expired_license(make_crew, make_qual, now):
    quals = [make_qual(kind="LICENSE", expiry_date=date(2026, 1, 1))]
    assert missing_documents(make_crew(), quals, now) == ["1 expired qualification(s)", "Valid License"]


def test_cabin_crew_needs_no_license(make_crew, now):
    crew = make_crew(crew_id="fa-1", position="Flight Attendant")
    assert missing_documents(crew, [], now) == []


def test_everything_missing(make_crew, make_qual, now):
    crew = make_crew(phone=None, address=None, employee_code=None)
    quals = [make_qual(expiry_date=date(2025, 5, 5))]
    assert missing_documents(crew, quals, now) == [
        "Phone",
        "Address",
        "Employee code",
        "1 expired qualification(s)",
        "Valid License",
    ]


def test_other_members_qualifications_ignored(make_crew, make_qual, now):
    quals = [make_qual(crew_id="x", kind="LICENSE"), make_qual(crew_id="x", expiry_date=date(2020, 1, 1))]
    assert missing_documents(make_crew(), quals, now) == ["Valid License"]


# ============================================================
# TEST: STATUS DERIVATION
# ============================================================

@pytest.mark.parametrize("status", ["inactive", "suspended", "unknown"])
def test_non_active_dominates(status, make_crew):
    badge = derive_status(make_crew(status=status), True, [])
    assert badge == StatusBadge("Inactive", BadgeColor.GRAY)
    assert derive_status(make_crew(status=status), False, ["Phone"]) == badge


def test_ineligible_dominates_missing_documents(make_crew):
    badge = derive_status(make_crew(), False, ["Phone", "Address"])
    assert badge == StatusBadge("Missing qualifications", BadgeColor.RED)


def test_missing_documents_count(make_crew):
    badge = derive_status(make_crew(), True, ["Phone", "Address", "Employee code"])
    assert badge.text == "3 docs missing"
    assert badge.color is BadgeColor.YELLOW


def test_available(make_crew):
    assert derive_status(make_crew(), True, []) == StatusBadge("Available", BadgeColor.GREEN)


def test_status_is_total_and_stable(make_crew):
    allowed = {
        ("Inactive", BadgeColor.GRAY),
        ("Missing qualifications", BadgeColor.RED),
        ("1 docs missing", BadgeColor.YELLOW),
        ("Available", BadgeColor.GREEN),
    }
    for status in ("active", "inactive"):
        for eligible in (True, False):
            for missing in ([], ["Phone"]):
                crew = make_crew(status=status)
                first = derive_status(crew, eligible, missing)
                assert derive_status(crew, eligible, missing) == first
                assert (first.text, first.color) in allowed
