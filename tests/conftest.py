# /tests/conftest.py

import itertools
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from boltpath.main import app
from boltpath.services.mock_data import DEMO_TEACHER_ID, build_seeded_store
from boltpath.services.roster_store import RosterStore

TODAY = date(2026, 3, 2)


class FakeClock:
    """A settable stand-in for date.today()."""

    def __init__(self, today: date = TODAY):
        self.today = today

    def __call__(self) -> date:
        return self.today

    def advance(self, days: int = 1):
        self.today += timedelta(days=days)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """An empty store with predictable ids (`stu_1`, `pbl_2`, ...) and a fake clock."""
    counter = itertools.count(1)
    return RosterStore(id_factory=lambda prefix: f"{prefix}_{next(counter)}", clock=clock)


@pytest.fixture
def seeded_store():
    """A fresh copy of the demo classroom."""
    return build_seeded_store()


@pytest.fixture
def teacher_id():
    return DEMO_TEACHER_ID


@pytest.fixture
def student_record(teacher_id):
    """Store-level data for a student, as the student service hands it over."""
    return {
        "fullName": "Carmen Diaz",
        "grade": "9th",
        "phoneNumber": "(555) 222-3333",
        "teacherId": teacher_id,
        "learningProfile": {
            "learningStyle": "auditory",
            "strengths": ["Communication"],
            "challenges": ["Organization"],
            "accommodations": ["Audio support"],
            "preferredAssessmentMethods": ["Oral presentation"],
            "notes": "Prefers discussion-based tasks.",
        },
        "emergencyContact": {"name": "Luis Diaz", "relationship": "Father", "phone": "(555) 222-4444"},
    }


@pytest.fixture
def assignment_record(teacher_id):
    """Store-level data for an assignment with a two-phase timeline."""
    return {
        "title": "Design a School Garden",
        "problemStatement": "How can we grow enough vegetables to supply one cafeteria lunch per week?",
        "realWorldContext": "The cafeteria wants locally grown produce.",
        "learningObjectives": ["Measure plot areas", "Plan a planting calendar"],
        "assessmentCriteria": [{"criterion": "Feasibility", "weight": 60, "rubric": "Realistic plan"}],
        "resources": ["Seed catalog"],
        "timeline": [
            {"phase": "Survey", "duration": "1 week", "activities": ["Measure beds", "Test soil"]},
            {"phase": "Plan", "duration": "1 week", "activities": ["Draft calendar"]},
        ],
        "dueDate": TODAY + timedelta(days=30),
        "studentIds": [],
        "teacherId": teacher_id,
        "collaborationType": "pairs",
        "skillsFocus": ["Data analysis"],
    }


@pytest.fixture
def future_due_date():
    return (date.today() + timedelta(days=14)).isoformat()


@pytest.fixture
def client():
    """A TestClient whose lifespan seeds a fresh demo store for every test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(teacher_id):
    return {"X-Teacher-Id": teacher_id}
