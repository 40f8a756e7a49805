import shutil
from datetime import date, datetime
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from crew_qualification.domain.aircraft import Aircraft
from crew_qualification.domain.crew import CrewMember
from crew_qualification.domain.qualification import Qualification

DEMO_DIR = Path(__file__).resolve().parents[1] / "data" / "demo"


@pytest.fixture
def now():
    return datetime(2026, 10, 18, 12, 0, 0)


@pytest.fixture
def phenom():
    return Aircraft(aircraft_id="ac-1", registration="F-HCTC", type="Phenom 300")


@pytest.fixture
def make_crew():
    def _make(crew_id="cap-1", position="Captain", **overrides):
        fields = dict(
            crew_id=crew_id,
            name="Pierre Dubois",
            position=position,
            status="active",
            role="internal",
            email="captain@crewtech.fr",
            phone="+33 6 23 45 67 89",
            address="12 rue de la Paix, Paris",
            employee_code="CAP001",
        )
        fields.update(overrides)
        return CrewMember(**fields)

    return _make


@pytest.fixture
def make_qual():
    counter = {"n": 0}

    def _make(crew_id="cap-1", kind="TYPE_RATING", **overrides):
        counter["n"] += 1
        fields = dict(
            qualification_id=str(counter["n"]),
            crew_id=crew_id,
            kind=kind,
            valid=True,
            expiry_date=date(2027, 12, 31),
        )
        fields.update(overrides)
        return Qualification(**fields)

    return _make


@pytest.fixture
def demo_instance(tmp_path):
    """Writable copy of the demo instance."""
    dst = tmp_path / "demo"
    shutil.copytree(DEMO_DIR, dst)
    return dst
