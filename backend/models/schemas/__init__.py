"""Pydantic contracts passed between validator and salary engine."""

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.prediction_result import MarketDemand, PredictionResult, SalaryFactors

__all__ = [
    "CandidateProfile",
    "MarketDemand",
    "PredictionResult",
    "SalaryFactors",
]
