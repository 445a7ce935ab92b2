"""Input validation for salary prediction requests.

Turns a raw PredictionRequest into a CandidateProfile or raises a
CandidateValidationError subclass. Checks run in a fixed order:
missing fields, then age, then experience.
"""

import logging
import re

from config import settings
from models.requests import PredictionRequest, RawValue
from models.schemas.candidate_profile import CandidateProfile
from services.exceptions import InvalidAgeError, InvalidExperienceError, MissingFieldError

logger = logging.getLogger(__name__)

_WHOLE_NUMBER = re.compile(r"^[+-]?[0-9]+$")

# Wire names in form order, paired with request attributes
_FIELDS = [
    ("age", "age"),
    ("experienceYears", "experience_years"),
    ("jobField", "job_field"),
    ("jobTitle", "job_title"),
]


def parse_whole_number(value: RawValue) -> int | None:
    """Strictly parse a form value as an integer.

    Returns None for anything that is not a whole number: empty strings,
    text, fractional values, NaN/inf and booleans. Never coerces to zero.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not _WHOLE_NUMBER.match(text):
        return None
    try:
        return int(text)
    except ValueError:
        # beyond the interpreter's int-from-string digit limit
        return None


def _clean_text(value: str | None) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_candidate(
    request: PredictionRequest,
    min_age: int | None = None,
    max_age: int | None = None,
) -> CandidateProfile:
    """Validate a raw request, returning the parsed candidate profile.

    Experience is bounded by age, so every accepted profile keeps the
    salary arithmetic finite.
    """
    if min_age is None:
        min_age = settings.min_candidate_age
    if max_age is None:
        max_age = settings.max_candidate_age

    age = parse_whole_number(request.age)
    experience_years = parse_whole_number(request.experience_years)
    job_field = _clean_text(request.job_field)
    job_title = _clean_text(request.job_title)

    parsed = {
        "age": age,
        "experience_years": experience_years,
        "job_field": job_field or None,
        "job_title": job_title or None,
    }
    missing = [wire for wire, attr in _FIELDS if parsed[attr] is None]
    if missing:
        logger.debug("Rejected prediction request, missing fields: %s", missing)
        raise MissingFieldError(missing)

    if age < min_age:
        logger.debug("Rejected prediction request, age %d below %d", age, min_age)
        raise InvalidAgeError(age, min_age)

    if age > max_age:
        logger.debug("Rejected prediction request, age above %d", max_age)
        raise InvalidAgeError(age, min_age, max_age)

    if experience_years < 0:
        logger.debug("Rejected prediction request, negative experience %d", experience_years)
        raise InvalidExperienceError(experience_years)

    if experience_years > age:
        logger.debug("Rejected prediction request, experience exceeds age %d", age)
        raise InvalidExperienceError(experience_years, age)

    return CandidateProfile(
        age=age,
        experience_years=experience_years,
        job_field=job_field,
        job_title=job_title,
    )
