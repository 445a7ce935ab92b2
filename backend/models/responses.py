from pydantic import BaseModel

from models.schemas.prediction_result import PredictionResult


class ValidationFailure(BaseModel):
    kind: str  # MissingField | InvalidAge | InvalidExperience
    fields: list[str] = []
    title: str = ""
    message: str = ""


class PredictionResponse(BaseModel):
    ok: bool = False
    result: PredictionResult | None = None
    error: ValidationFailure | None = None
