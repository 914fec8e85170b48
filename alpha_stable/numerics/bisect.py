"""Bisection root finder used to locate the peak of the density integrand."""
import logging

import numpy as np

from ..errors import BisectionRangeError, IterationLimitError
from .numerical_result import NumericalResult

logger = logging.getLogger(__name__)


def bisect(f, a, b, eps, max_iterations):
    """
    Find a sign change of f inside [a, b].

    - a == b is a degenerate bracket and fails immediately.
    - Endpoints given in reverse order are swapped.
    - f(a) and f(b) must differ in sign, otherwise the bracket fails.
    - Stops when f(midpoint) == 0 or the half-width drops below eps.
    - Running out of iterations returns the last midpoint together with an
      IterationLimitError; failed brackets report their midpoint.
    """
    if a == b:
        return NumericalResult(a, 0.0, BisectionRangeError(a, b))

    if a > b:
        a, b = b, a

    fa = f(a)
    fb = f(b)
    if np.sign(fa) == np.sign(fb):
        return NumericalResult(0.5 * (a + b), 0.5 * (b - a), BisectionRangeError(a, b))

    x = 0.5 * (a + b)
    for _ in range(max_iterations):
        x = 0.5 * (a + b)
        fx = f(x)

        if fx == 0.0 or 0.5 * (b - a) < eps:
            logger.debug("bisection converged at %r (half-width %.3g)", x, 0.5 * (b - a))
            return NumericalResult(x, 0.5 * (b - a))

        if np.sign(fx) == np.sign(fa):
            a = x
            fa = fx
        else:
            b = x

    return NumericalResult(x, 0.5 * (b - a), IterationLimitError(max_iterations))
