"""Validated candidate input, ready for the salary engine."""

from pydantic import BaseModel, ConfigDict, Field


class CandidateProfile(BaseModel):
    """A candidate that passed validation.

    Only ``age``, ``experience_years`` and ``job_field`` drive the estimate;
    ``job_title`` is carried through for the caller.
    """
    model_config = ConfigDict(frozen=True)

    age: int = Field(ge=0)
    experience_years: int = Field(ge=0)
    job_field: str = Field(min_length=1)
    job_title: str = Field(min_length=1)
