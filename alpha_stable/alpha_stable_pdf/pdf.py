import logging

import numpy as np

from ..config import IntegratorConfig, ToleranceConfig, close
from ..numerics.integrator import integrate
from .zolotarev import (
    calculate_V,
    integrand,
    pdf_at_zeta,
    peak_function,
    theta0_stable,
    zeta_stable,
)

logger = logging.getLogger(__name__)


def normalize_inputs(X, sigma, mu_0):
    """
    Map x to the unit-scale S0 coordinate, Z = (X - mu_0) / sigma.
    The density in x is the density in Z divided by sigma.
    """
    return (X - mu_0) / sigma


def pdf_scaled(x, alpha, beta, tol=None, integrator=None, reflected=False):
    """
    Density of the standard S0 law S(alpha, beta; 0) at x.
    Cases, in order:
    - alpha ~ 2: Gaussian with variance 2.
    - alpha ~ 1, beta !~ 0: alpha = 1 Zolotarev integral over (-pi/2, pi/2).
    - alpha ~ 1, beta ~ 0: Cauchy.
    - alpha !~ 1:
      • x ~ zeta: Gamma-function closed form
      • x > zeta: Zolotarev integral over (-theta0, pi/2), or 0 past the
        support end when alpha < 1 and beta ~ -1
      • x < zeta: reflect to (-x, -beta), which always lands in one of the
        two branches above
    A NaN x falls through every comparison and gives 0.
    """
    if tol is None:
        tol = ToleranceConfig()
    if integrator is None:
        integrator = IntegratorConfig()

    if close(alpha, 2.0, tol.alpha):
        logger.debug("alpha=%r: gaussian shortcut", alpha)
        return float(np.exp(-0.25 * x * x) / np.sqrt(4 * np.pi))

    if close(alpha, 1.0, tol.alpha):
        if close(beta, 0.0, tol.beta):
            logger.debug("alpha=%r beta=%r: cauchy shortcut", alpha, beta)
            return float(1 / (np.pi * (1 + x * x)))

        with np.errstate(over="ignore"):
            g = np.exp(-np.pi * x / (2 * beta))
        if not np.isfinite(g):
            # light tail, below the smallest double
            return 0.0
        V = calculate_V(1, beta, np.pi / 2)
        val = integrate(peak_function(V, g), integrand(V, g), -np.pi / 2, np.pi / 2, integrator)
        return float(val * g / (2 * abs(beta)))

    zeta = zeta_stable(alpha, beta)

    if close(x, zeta, tol.zeta):
        logger.debug("x=%r at zeta=%r: closed form", x, zeta)
        return float(pdf_at_zeta(alpha, beta))

    if x > zeta:
        if alpha < 1 and close(beta, -1.0, tol.beta):
            # support of a totally skewed alpha < 1 law ends at zeta
            logger.debug("x=%r beyond support end zeta=%r", x, zeta)
            return 0.0
        theta0 = theta0_stable(alpha, beta)
        g = (x - zeta) ** (alpha / (alpha - 1))
        V = calculate_V(alpha, beta, theta0)
        val = integrate(peak_function(V, g), integrand(V, g), -theta0, np.pi / 2, integrator)
        j = alpha * (x - zeta) ** (1 / (alpha - 1)) / (np.pi * abs(alpha - 1))
        return float(val * j)

    if x < zeta:
        if reflected:
            raise RuntimeError(f"reflection of x={x} beta={beta} did not reach x >= zeta")
        return pdf_scaled(-x, alpha, -beta, tol, integrator, reflected=True)

    return 0.0


def alpha_stable_pdf(X, alpha, beta, sigma, mu_0, tol=None, integrator=None):
    """
    Density of S0(alpha, beta, sigma, mu_0) at X.
    - Scalar X returns a float.
    - Array-like X is evaluated point by point and keeps its shape.
    """
    Z = normalize_inputs(np.asarray(X, dtype=np.float64), sigma, mu_0)
    if Z.ndim == 0:
        return pdf_scaled(float(Z), alpha, beta, tol, integrator) / sigma
    pdf = np.array([pdf_scaled(z, alpha, beta, tol, integrator) for z in Z.ravel()])
    return pdf.reshape(Z.shape) / sigma
