"""Tests for candidate input validation."""

import pytest

from models.requests import PredictionRequest
from models.schemas.candidate_profile import CandidateProfile
from services.exceptions import (
    CandidateValidationError,
    InvalidAgeError,
    InvalidExperienceError,
    MissingFieldError,
)
from services.validator import parse_whole_number, validate_candidate


def _request(**overrides):
    defaults = dict(age="25", experienceYears="2", jobField="Data Science", jobTitle="ML Engineer")
    defaults.update(overrides)
    return PredictionRequest.model_validate(defaults)


class TestParseWholeNumber:
    @pytest.mark.parametrize("value,expected", [
        ("25", 25),
        (" 7 ", 7),
        ("+3", 3),
        ("-2", -2),
        (0, 0),
        (42, 42),
        (30.0, 30),
    ])
    def test_parses_whole_numbers(self, value, expected):
        assert parse_whole_number(value) == expected

    @pytest.mark.parametrize("value", [
        None, "", "   ", "abc", "25abc", "2.5", 2.5, float("nan"), float("inf"), True, "1e3",
    ])
    def test_rejects_everything_else(self, value):
        assert parse_whole_number(value) is None


class TestValidateCandidate:
    def test_valid_request(self):
        profile = validate_candidate(_request())
        assert profile == CandidateProfile(
            age=25, experience_years=2, job_field="Data Science", job_title="ML Engineer"
        )

    def test_strips_text_fields(self):
        profile = validate_candidate(_request(jobField="  Healthcare ", jobTitle=" Nurse  "))
        assert profile.job_field == "Healthcare"
        assert profile.job_title == "Nurse"

    def test_accepts_integers(self):
        profile = validate_candidate(_request(age=40, experienceYears=0))
        assert profile.age == 40
        assert profile.experience_years == 0

    def test_missing_job_field(self):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(_request(jobField=""))
        assert exc_info.value.kind == "MissingField"
        assert exc_info.value.fields == ["jobField"]

    def test_reports_all_missing_fields_in_form_order(self):
        request = PredictionRequest()
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(request)
        assert exc_info.value.fields == ["age", "experienceYears", "jobField", "jobTitle"]

    def test_blank_title_is_missing(self):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(_request(jobTitle="   "))
        assert exc_info.value.fields == ["jobTitle"]

    def test_non_numeric_age_is_not_coerced(self):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(_request(age="twenty"))
        assert exc_info.value.fields == ["age"]

    def test_non_numeric_experience_is_not_coerced(self):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(_request(experienceYears="a few"))
        assert exc_info.value.fields == ["experienceYears"]

    def test_age_17_rejected(self):
        with pytest.raises(InvalidAgeError) as exc_info:
            validate_candidate(_request(age="17"))
        err = exc_info.value
        assert err.kind == "InvalidAge"
        assert err.fields == ["age"]
        assert err.age == 17
        assert err.message == "Age must be 18 or above."

    def test_age_18_accepted(self):
        assert validate_candidate(_request(age="18")).age == 18

    def test_custom_minimum_age(self):
        with pytest.raises(InvalidAgeError):
            validate_candidate(_request(age="20"), min_age=21)

    def test_missing_takes_precedence_over_age(self):
        with pytest.raises(MissingFieldError):
            validate_candidate(_request(age="16", jobTitle=""))

    def test_negative_experience_rejected(self):
        with pytest.raises(InvalidExperienceError) as exc_info:
            validate_candidate(_request(experienceYears="-1"))
        assert exc_info.value.fields == ["experienceYears"]

    def test_age_above_maximum_rejected(self):
        with pytest.raises(InvalidAgeError) as exc_info:
            validate_candidate(_request(age="101"))
        assert exc_info.value.maximum == 100
        assert exc_info.value.message == "Age must be 100 or below."

    def test_age_at_maximum_accepted(self):
        assert validate_candidate(_request(age="100", experienceYears="60")).age == 100

    def test_oversized_age_digits_are_missing(self):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(_request(age="9" * 5000))
        assert exc_info.value.fields == ["age"]

    @pytest.mark.parametrize("years", ["1" + "0" * 400, "1" + "0" * 305, 10**305, 1e300])
    def test_huge_experience_rejected(self, years):
        with pytest.raises(InvalidExperienceError) as exc_info:
            validate_candidate(_request(experienceYears=years))
        assert exc_info.value.message == "Experience cannot exceed age."

    def test_experience_equal_to_age_accepted(self):
        assert validate_candidate(_request(age="30", experienceYears="30")).experience_years == 30

    def test_boolean_experience_is_missing(self):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_candidate(_request(experienceYears=True))
        assert exc_info.value.fields == ["experienceYears"]

    @pytest.mark.parametrize("age", ["\uff12\uff15", "\u0663\u0660"])
    def test_non_ascii_digits_are_missing(self, age):
        with pytest.raises(MissingFieldError):
            validate_candidate(_request(age=age))

    def test_errors_share_base_class(self):
        for cls in (MissingFieldError, InvalidAgeError, InvalidExperienceError):
            assert issubclass(cls, CandidateValidationError)
            assert issubclass(cls, ValueError)
