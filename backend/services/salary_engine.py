"""Salary engine: fixed-formula salary range from a validated candidate.

    avg_units = base_rate(job_field)
                * (1 + experience_years * 0.15)
                * (1.1 if age > 30 else 1.0)

min/avg/max are avg_units -/+ spread, scaled to currency and rounded half
up. Market demand and experience bonus depend on experience only.
Deterministic and side-effect free.
"""

import logging
import math

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.prediction_result import MarketDemand, PredictionResult, SalaryFactors
from services.base_rates import BaseRateCatalog

logger = logging.getLogger(__name__)

EXPERIENCE_STEP = 0.15  # multiplier gain per year of experience
SENIOR_AGE = 30  # strictly older candidates get the age multiplier
SENIOR_AGE_MULTIPLIER = 1.1
HIGH_DEMAND_ABOVE_YEARS = 3
MODERATE_DEMAND_ABOVE_YEARS = 1

DEFAULT_SALARY_SCALE = 100_000
DEFAULT_SALARY_SPREAD = 0.25


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def classify_market_demand(experience_years: int) -> MarketDemand:
    if experience_years > HIGH_DEMAND_ABOVE_YEARS:
        return MarketDemand.HIGH
    if experience_years > MODERATE_DEMAND_ABOVE_YEARS:
        return MarketDemand.MODERATE
    return MarketDemand.LOW


def experience_bonus_percent(experience_years: int) -> float:
    # years * 15, kept exact instead of years * 0.15 * 100
    return float(experience_years * round(EXPERIENCE_STEP * 100))


class SalaryEngine:
    def __init__(
        self,
        catalog: BaseRateCatalog | None = None,
        scale: int = DEFAULT_SALARY_SCALE,
        spread: float = DEFAULT_SALARY_SPREAD,
    ) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive (got {scale!r})")
        if spread < 0:
            raise ValueError(f"spread must be non-negative (got {spread!r})")
        self._catalog = catalog or BaseRateCatalog()
        self._scale = scale
        self._spread = spread

    @property
    def catalog(self) -> BaseRateCatalog:
        return self._catalog

    def explain(self, profile: CandidateProfile) -> SalaryFactors:
        """Intermediate formula values for a candidate."""
        base_rate = self._catalog.rate_for(profile.job_field)
        experience_multiplier = 1 + profile.experience_years * EXPERIENCE_STEP
        age_multiplier = SENIOR_AGE_MULTIPLIER if profile.age > SENIOR_AGE else 1.0
        avg_units = base_rate * experience_multiplier * age_multiplier

        return SalaryFactors(
            base_rate=base_rate,
            experience_multiplier=experience_multiplier,
            age_multiplier=age_multiplier,
            avg_units=avg_units,
            variance=avg_units * self._spread,
            known_field=self._catalog.is_known(profile.job_field),
        )

    def predict(self, profile: CandidateProfile) -> PredictionResult:
        factors = self.explain(profile)
        low = factors.avg_units - factors.variance
        high = factors.avg_units + factors.variance

        avg_salary = max(0, _round_half_up(factors.avg_units * self._scale))
        min_salary = min(avg_salary, max(0, _round_half_up(low * self._scale)))
        max_salary = max(avg_salary, _round_half_up(high * self._scale))

        return PredictionResult(
            min_salary=min_salary,
            max_salary=max_salary,
            avg_salary=avg_salary,
            market_demand=classify_market_demand(profile.experience_years),
            experience_bonus_percent=experience_bonus_percent(profile.experience_years),
        )


_engine: SalaryEngine | None = None


def get_engine() -> SalaryEngine:
    """Shared engine built from settings on first use."""
    global _engine
    if _engine is None:
        from config import settings

        _engine = SalaryEngine(
            catalog=BaseRateCatalog(default_rate=settings.default_base_rate),
            scale=settings.salary_scale,
            spread=settings.salary_spread,
        )
        logger.info("Salary engine ready: %r", _engine.catalog)
    return _engine


def clear() -> None:
    """Drop the shared engine. Useful for testing."""
    global _engine
    _engine = None
