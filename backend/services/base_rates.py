"""Job field catalog: relative earning potential per field.

Rates are in base-rate units; the salary engine scales them to currency.
Unknown fields resolve to a default rate instead of failing.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

DEFAULT_BASE_RATE = 5.0

# Ordered as presented in the field selector
JOB_FIELD_BASE_RATES: Mapping[str, float] = MappingProxyType({
    "Information Technology": 8.5,
    "Mechanical Engineering": 6.5,
    "Finance & Banking": 7.2,
    "Healthcare": 7.8,
    "Marketing & Sales": 5.5,
    "Human Resources": 5.8,
    "Data Science": 9.2,
    "Cybersecurity": 8.8,
})


class BaseRateCatalog:
    """Immutable job field -> base rate lookup with a default for unknown fields."""

    def __init__(
        self,
        rates: Mapping[str, float] | None = None,
        default_rate: float = DEFAULT_BASE_RATE,
    ) -> None:
        rates = dict(JOB_FIELD_BASE_RATES if rates is None else rates)
        for field, rate in rates.items():
            if rate <= 0:
                raise ValueError(f"Base rate for {field!r} must be positive (got {rate!r})")
        if default_rate <= 0:
            raise ValueError(f"Default base rate must be positive (got {default_rate!r})")
        self._rates = MappingProxyType(rates)
        self._default_rate = float(default_rate)

    @property
    def default_rate(self) -> float:
        return self._default_rate

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._rates)

    def is_known(self, job_field: str) -> bool:
        return job_field in self._rates

    def rate_for(self, job_field: str) -> float:
        rate = self._rates.get(job_field)
        if rate is None:
            logger.debug("Unrecognized job field %r, using default rate %.2f",
                         job_field, self._default_rate)
            return self._default_rate
        return rate

    def __contains__(self, job_field: object) -> bool:
        return job_field in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"BaseRateCatalog({len(self)} fields, default={self._default_rate})"


def job_fields() -> list[str]:
    """Catalog field names in selector order."""
    return list(JOB_FIELD_BASE_RATES)
