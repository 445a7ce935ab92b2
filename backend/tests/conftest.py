"""Shared test fixtures."""

import pytest

from models.schemas.candidate_profile import CandidateProfile
from services import salary_engine
from services.salary_engine import SalaryEngine


@pytest.fixture(autouse=True)
def _reset_shared_engine():
    salary_engine.clear()
    yield
    salary_engine.clear()


@pytest.fixture
def engine():
    return SalaryEngine()


@pytest.fixture
def make_profile():
    def _make(**overrides):
        defaults = dict(
            age=25,
            experience_years=2,
            job_field="Data Science",
            job_title="ML Engineer",
        )
        defaults.update(overrides)
        return CandidateProfile(**defaults)

    return _make
