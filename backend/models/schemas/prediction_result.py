"""Salary engine output: salary range plus market indicators."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class MarketDemand(str, Enum):
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"


class SalaryFactors(BaseModel):
    """Intermediate values of the formula, for interpretability."""
    model_config = ConfigDict(frozen=True)

    base_rate: float
    experience_multiplier: float
    age_multiplier: float
    avg_units: float
    variance: float
    known_field: bool = True  # False when the default base rate was used


class PredictionResult(BaseModel):
    """Structured output of the salary engine.

    Amounts are whole currency units with min <= avg <= max.
    """
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    min_salary: int = Field(ge=0)
    max_salary: int = Field(ge=0)
    avg_salary: int = Field(ge=0)
    market_demand: MarketDemand
    experience_bonus_percent: float = Field(ge=0)

    @model_validator(mode="after")
    def check_ordering(self) -> "PredictionResult":
        if not self.min_salary <= self.avg_salary <= self.max_salary:
            raise ValueError("expected min_salary <= avg_salary <= max_salary")
        return self
