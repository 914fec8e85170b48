"""
Peak-split adaptive integration of the Zolotarev integrands.

The integrands exp(ln V - V * gamma) are sharply peaked where V * gamma = 1.
The peak is located by bisection on V * gamma - 1 and quad is run separately
on each side of it, which keeps QUADPACK from missing a narrow spike.
"""
import logging
import warnings

from scipy.integrate import quad

from ..config import IntegratorConfig
from ..errors import BestEffortWarning, QuadratureError
from .bisect import bisect
from .numerical_result import NumericalResult

logger = logging.getLogger(__name__)


def quad_result(integrand, a, b, config):
    """
    Run scipy's quad on [a, b] and wrap the outcome in a NumericalResult.

    quad with full_output=1 appends a message (and an explanation) to its
    return tuple only when QUADPACK reports a problem.
    """
    out = quad(integrand, a, b, epsabs=0.0, epsrel=config.quad_tolerance,
               limit=config.quad_limit, full_output=1)
    value, abserr = out[0], out[1]
    if len(out) > 3:
        return NumericalResult(value, abserr, QuadratureError(out[3], (a, b)))
    return NumericalResult(value, abserr)


def integrate(derivative, integrand, a, b, config=None):
    """
    Integrate `integrand` over [a, b], splitting at the root of `derivative`.

    - derivative(theta) = V(theta) * gamma - 1, whose zero is the integrand peak.
    - STRICT policy: any bisection or quad failure is raised.
    - BEST_EFFORT policy: failures are reported through BestEffortWarning and
      the unchecked estimates are summed anyway.
    """
    if config is None:
        config = IntegratorConfig()

    peak = bisect(derivative, a, b, config.bisect_tolerance, config.bisect_max_iterations)

    if config.suppress_errors:
        _announce(peak)
        m = peak.estimate_unchecked()
        left = quad_result(integrand, a, m, config)
        right = quad_result(integrand, m, b, config)
        logger.debug("split at %r: left=%r right=%r", m, left.estimate_value, right.estimate_value)
        _announce(left)
        _announce(right)
        return left.estimate_unchecked() + right.estimate_unchecked()

    m = peak.estimate()
    left = quad_result(integrand, a, m, config)
    right = quad_result(integrand, m, b, config)
    logger.debug("split at %r: left=%r right=%r", m, left.estimate_value, right.estimate_value)
    return left.estimate() + right.estimate()


def _announce(result):
    if not result.has_failure:
        return
    logger.warning("best-effort integration ignoring failure: %s", result.failure)
    warnings.warn(
        f"integration failure suppressed, result is not converged: {result.failure}",
        BestEffortWarning,
        stacklevel=4,
    )
