"""
Alpha-stable distribution in standard or Nolan S0 form.

- Standard form S(alpha, beta, sigma, mu): the "first parameterization",
  characteristic function exponent -|sigma t|^alpha (1 - i beta sign(t) tan(pi alpha / 2)) + i mu t.
- Nolan S0 form S0(alpha, beta, sigma, mu_0): same shape and scale, location
  shifted so the density is continuous in alpha.
Both locations are always available; whichever was not given is derived at
construction time. The density is evaluated in S0 coordinates, sampling in
standard coordinates.
"""
import copy
import dataclasses

import numpy as np

from .alpha_stable_pdf import alpha_stable_pdf
from .config import IntegratorConfig, ToleranceConfig, close
from .errors import InvalidAlphaError, InvalidBetaError
from .sampler import cms_variate, draw_deviates


def _validate(alpha, beta):
    if alpha <= 0 or alpha > 2:
        raise InvalidAlphaError(alpha)
    if beta < -1 or beta > 1:
        raise InvalidBetaError(beta)


def location_shift(alpha, beta, sigma, tol=None):
    """
    mu_0 - mu for the given shape and scale.
    - alpha ~ 1: beta sigma 2 ln(sigma) / pi
    - otherwise: beta sigma tan(pi alpha / 2)
    """
    if tol is None:
        tol = ToleranceConfig()
    if close(alpha, 1.0, tol.alpha):
        return float(beta * sigma * 2 * np.log(sigma) / np.pi)
    return float(beta * sigma * np.tan(0.5 * np.pi * alpha))


def _random_source(rng):
    """Anything with random() and standard_exponential() is used as is."""
    if hasattr(rng, "random") and hasattr(rng, "standard_exponential"):
        return rng
    return np.random.default_rng(rng)


@dataclasses.dataclass(frozen=True)
class AlphaStable:
    """
    Alpha-stable distribution.

    Parameters
    ----------
    alpha : float
        Stability index in (0, 2].
    beta : float
        Skewness in [-1, 1].
    sigma : float
        Scale, > 0.
    mu : float
        Location in the standard form.

    Use ``AlphaStable.from_s0`` to build from the S0 location instead. The
    instance is immutable; ``with_tolerance`` and ``with_integrator`` return
    copies carrying the new settings.
    """

    alpha: float
    beta: float
    sigma: float
    mu: float
    mu_0: float = dataclasses.field(init=False)
    tolerance: ToleranceConfig = dataclasses.field(default_factory=ToleranceConfig)
    integrator: IntegratorConfig = dataclasses.field(default_factory=IntegratorConfig)

    def __post_init__(self):
        _validate(self.alpha, self.beta)
        object.__setattr__(self, "mu_0", self.mu + location_shift(self.alpha, self.beta, self.sigma))

    @classmethod
    def from_s0(cls, alpha, beta, sigma, mu_0):
        """Build from Nolan's S0 location mu_0."""
        _validate(alpha, beta)
        mu = mu_0 - location_shift(alpha, beta, sigma)
        obj = cls(alpha, beta, sigma, mu)
        object.__setattr__(obj, "mu_0", mu_0)
        return obj

    @classmethod
    def default(cls):
        """Standard Gaussian-limit law, alpha=2, beta=0, sigma=1, mu=0."""
        return cls(2.0, 0.0, 1.0, 0.0)

    def with_tolerance(self, tolerance):
        """Copy with new closeness thresholds; locations are not re-derived."""
        return self._evolve(tolerance=tolerance)

    def with_integrator(self, integrator):
        """Copy with new integration settings."""
        return self._evolve(integrator=integrator)

    def _evolve(self, **changes):
        obj = copy.copy(self)
        for name, value in changes.items():
            object.__setattr__(obj, name, value)
        return obj

    def params(self):
        """(alpha, beta, sigma, mu, mu_0)"""
        return self.alpha, self.beta, self.sigma, self.mu, self.mu_0

    def sample(self, rng=None, size=None):
        """
        Draw variates with the Chambers-Mallows-Stuck transform.

        Each variate consumes one ``rng.random()`` and then standard
        exponential draws until one is positive, whatever branch the transform
        takes, so a seeded generator gives the same stream for every
        parameter set.

        Parameters
        ----------
        rng : numpy.random.Generator, int or None
            Random source providing ``random()`` and
            ``standard_exponential()``, or a seed for
            ``numpy.random.default_rng``.
        size : int, tuple or None
            None returns a single float.
        """
        rng = _random_source(rng)
        if size is None:
            return self._variate(rng)
        out = np.empty(size, dtype=np.float64)
        for idx in np.ndindex(out.shape):
            out[idx] = self._variate(rng)
        return out

    def _variate(self, rng):
        u, w = draw_deviates(rng)
        return cms_variate(self.alpha, self.beta, self.sigma, self.mu, u, w, self.tolerance)

    def pdf(self, x):
        """
        Probability density at x (scalar or array-like).

        Raises
        ------
        IntegrationError
            If the peak search or the quadrature fails and the integrator is
            not configured with ``ErrorPolicy.BEST_EFFORT``.
        """
        return alpha_stable_pdf(x, self.alpha, self.beta, self.sigma, self.mu_0,
                                self.tolerance, self.integrator)
