"""
Tolerance and integrator settings for alpha-stable distributions.

- ToleranceConfig decides when alpha, beta and the normalized x are treated as
  sitting exactly on a special value (alpha = 1 or 2, beta = 0, x = zeta).
- IntegratorConfig carries the knobs handed to the bisection pre-step and to
  scipy's quad, plus the error policy.
"""
from dataclasses import dataclass
from enum import Enum


class ErrorPolicy(str, Enum):
    """
    What the integrator does when bisection or quadrature fails.

    - STRICT: raise the failure, never return a partial result.
    - BEST_EFFORT: sum whatever estimates were produced and warn.
    """

    STRICT = "strict"
    BEST_EFFORT = "best_effort"


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Closeness thresholds for alpha, beta and zeta (x = zeta special case).

    The alpha != 1 integral loses accuracy as alpha approaches 1: within about
    1e-3 of 1 it can be off by orders of magnitude for skewed laws. Widen
    `alpha` to route such values to the alpha = 1 formula.
    """

    alpha: float = 1e-6
    beta: float = 1e-6
    zeta: float = 1e-6


@dataclass(frozen=True)
class IntegratorConfig:
    """
    Settings for the peak-split adaptive integration.

    - quad_tolerance: relative tolerance passed to quad as epsrel.
    - bisect_tolerance: absolute half-width at which bisection stops.
    - bisect_max_iterations: hard cap on bisection steps.
    - error_policy: STRICT (default) or BEST_EFFORT.
    - quad_limit: max number of subintervals quad may use per half.
    """

    quad_tolerance: float = 1e-10
    bisect_tolerance: float = 1e-10
    bisect_max_iterations: int = 50
    error_policy: ErrorPolicy = ErrorPolicy.STRICT
    quad_limit: int = 100

    def __post_init__(self):
        # accept the plain string values too
        object.__setattr__(self, "error_policy", ErrorPolicy(self.error_policy))

    @classmethod
    def best_effort(cls, **kwargs):
        """Build a config that swallows integration failures instead of raising."""
        return cls(error_policy=ErrorPolicy.BEST_EFFORT, **kwargs)

    @property
    def suppress_errors(self):
        return self.error_policy is ErrorPolicy.BEST_EFFORT


def close(value, target, tol):
    """True when value is within |tol| of target."""
    return abs(value - target) <= abs(tol)
