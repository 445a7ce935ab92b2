from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Raw form values: numbers may still arrive as the text typed into an input.
# bool is listed so it reaches validation as-is instead of becoming 0 or 1.
RawValue = str | bool | int | float | None


class PredictionRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    age: RawValue = Field(None, description="Age in years")
    experience_years: RawValue = Field(None, description="Years of work experience")
    job_field: str | None = Field(None, description="Job field from the catalog")
    job_title: str | None = Field(None, description="Free-text job title")
