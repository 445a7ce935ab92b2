"""Salary prediction entry point.

Flow:
    raw payload
      ├─ PredictionRequest.model_validate()   → PredictionRequest
      ├─ validator.validate_candidate()       → CandidateProfile
      └─ SalaryEngine.predict()               → PredictionResult
                  ↓
      PredictionResponse (result, or a ValidationFailure naming the fields)
"""

import logging
from collections.abc import Mapping
from typing import Any

from models.requests import PredictionRequest
from models.responses import PredictionResponse, ValidationFailure
from services.exceptions import CandidateValidationError
from services.salary_engine import SalaryEngine, get_engine
from services.validator import validate_candidate

logger = logging.getLogger(__name__)


def predict_salary(
    payload: PredictionRequest | Mapping[str, Any],
    engine: SalaryEngine | None = None,
) -> PredictionResponse:
    """Validate a request and estimate the salary range.

    Rejected input comes back as a failure response, never as an exception.
    """
    if engine is None:
        engine = get_engine()
    request = payload if isinstance(payload, PredictionRequest) else PredictionRequest.model_validate(payload)

    try:
        profile = validate_candidate(request)
    except CandidateValidationError as e:
        logger.debug("Prediction rejected (%s): %s", e.kind, e.fields)
        return PredictionResponse(ok=False, error=_to_failure(e))

    result = engine.predict(profile)
    logger.debug("Predicted %s for %s: avg=%d", profile.job_field, profile.job_title, result.avg_salary)
    return PredictionResponse(ok=True, result=result)


def to_wire(response: PredictionResponse) -> dict:
    """camelCase payload: the result fields on success, the failure otherwise."""
    if response.ok and response.result is not None:
        return response.result.model_dump(mode="json", by_alias=True)
    if response.error is None:
        raise ValueError("Failed response without an error")
    return response.error.model_dump(mode="json")


def _to_failure(error: CandidateValidationError) -> ValidationFailure:
    return ValidationFailure(
        kind=error.kind,
        fields=error.fields,
        title=error.title,
        message=error.message,
    )
