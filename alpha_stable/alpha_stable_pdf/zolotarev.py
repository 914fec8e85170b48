"""
Zolotarev integral representation of the stable density (Nolan, 1997).

Kernels, integrands and the x = zeta closed form used by pdf.py.
"""
import numpy as np
from scipy.special import gamma


def zeta_stable(alpha, beta):
    """
    Shift between the S0 and S1 coordinates, zeta = -beta tan(pi alpha / 2).
    The alpha != 1 integral is taken over x - zeta.
    """
    return -beta * np.tan(np.pi * alpha / 2)


def theta0_stable(alpha, beta):
    """
    Zolotarev pivot theta0 = arctan(beta tan(pi alpha / 2)) / alpha for alpha != 1.
    The alpha != 1 integral runs over theta in (-theta0, pi/2).
    """
    return np.arctan(-zeta_stable(alpha, beta)) / alpha


def calculate_V(alpha, beta, theta0):
    """
    Build the V(theta) kernel of the Zolotarev integral.
    - alpha != 1:
      V(theta) = cos(alpha theta0)^{1/(alpha-1)} *
                 (cos theta / sin(alpha (theta + theta0)))^{alpha/(alpha-1)} *
                 cos(alpha theta0 + (alpha-1) theta) / cos theta
    - alpha = 1:
      V(theta) = (1 + 2 beta theta / pi) exp((pi / (2 beta) + theta) tan theta) / cos theta
    At the ends of the interval V may be 0, inf or NaN; numpy reports these
    as values, so evaluation never raises.
    """
    if alpha != 1:
        scale = np.cos(alpha * theta0) ** (1 / (alpha - 1))

        def V(theta):
            with np.errstate(all="ignore"):
                ratio = (np.cos(theta) / np.sin(alpha * (theta + theta0))) ** (alpha / (alpha - 1))
                return scale * ratio * np.cos(alpha * theta0 + (alpha - 1) * theta) / np.cos(theta)
    else:
        def V(theta):
            with np.errstate(all="ignore"):
                return ((1 + 2 * beta * theta / np.pi) *
                        np.exp((np.pi / (2 * beta) + theta) * np.tan(theta)) / np.cos(theta))
    return V


def peak_function(V, g):
    """V(theta) * g - 1; its zero is where the integrand V exp(-g V) peaks."""
    def f(theta):
        with np.errstate(all="ignore"):
            return V(theta) * g - 1
    return f


def integrand(V, g):
    """
    exp(ln V - g V), computed in log space.
    Points where V is NaN, infinite or non-positive lie outside the range of
    the substitution and contribute 0.
    """
    def h(theta):
        val = V(theta)
        if not np.isfinite(val) or val <= 0:
            return 0.0
        with np.errstate(all="ignore"):
            return float(np.exp(np.log(val) - val * g))
    return h


def pdf_at_zeta(alpha, beta):
    """
    Closed form at x = zeta for alpha != 1:
    Gamma(1 + 1/alpha) cos(theta0) / (pi (1 + zeta^2)^{1/(2 alpha)})
    """
    zeta = zeta_stable(alpha, beta)
    theta0 = theta0_stable(alpha, beta)
    return gamma(1 + 1 / alpha) * np.cos(theta0) / (np.pi * (1 + zeta ** 2) ** (1 / (2 * alpha)))
