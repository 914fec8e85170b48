"""Estimate plus error bound, with an optional failure attached."""
from dataclasses import dataclass
from typing import Optional

from ..errors import IntegrationError


@dataclass(frozen=True)
class NumericalResult:
    """
    Outcome of a numerical routine.

    - estimate_value / error_bound: best value found and its uncertainty.
    - failure: set when the routine did not converge; the numbers are then
      non-authoritative.
    Reading through estimate() or delta() raises the failure, so callers have
    to handle it. The *_unchecked accessors skip that check and exist for the
    best-effort integrator only.
    """

    estimate_value: float
    error_bound: float
    failure: Optional[IntegrationError] = None

    @property
    def has_failure(self):
        return self.failure is not None

    def estimate(self):
        if self.failure is not None:
            raise self.failure
        return self.estimate_value

    def delta(self):
        if self.failure is not None:
            raise self.failure
        return self.error_bound

    def estimate_unchecked(self):
        return self.estimate_value

    def delta_unchecked(self):
        return self.error_bound
