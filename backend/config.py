from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    min_candidate_age: int = Field(18, ge=0)
    max_candidate_age: int = Field(100, gt=0)  # also bounds years of experience
    default_base_rate: float = Field(5.0, gt=0)  # used for job fields outside the catalog
    salary_scale: int = Field(100_000, gt=0)  # base-rate units -> currency units
    salary_spread: float = Field(0.25, ge=0)  # +/- share of the average for min/max

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "SALARY_"}


settings = Settings()
