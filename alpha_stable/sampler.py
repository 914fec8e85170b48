"""
Chambers-Mallows-Stuck sampling of alpha-stable variates.

cms_variate is a pure function of one uniform deviate u in [0, 1) and one
strictly positive standard exponential deviate w; draw_deviates pulls both
from a numpy Generator.
"""
import numpy as np

from .config import ToleranceConfig, close


def draw_deviates(rng):
    """
    One uniform then one standard exponential draw.
    The exponential is redrawn until positive, since w = 0 breaks the log and
    power terms of the transform.
    """
    u = rng.random()
    w = 0.0
    while w == 0.0:
        w = rng.standard_exponential()
    return u, w


def cms_variate(alpha, beta, sigma, mu, u, w, tol=None):
    """
    Transform (u, w) into a draw from S(alpha, beta, sigma, mu), v = pi (u - 1/2).
    - beta ~ 0:
      • alpha ~ 1: sigma tan(v) + mu (w unused)
      • alpha ~ 2: 2 sin(v) sqrt(w) sigma + mu
      • otherwise the symmetric CMS formula
    - beta !~ 0:
      • alpha ~ 1: the alpha = 1 skewed formula with the sigma ln(sigma) shift
      • otherwise the general CMS formula
    """
    if tol is None:
        tol = ToleranceConfig()
    v = np.pi * (u - 0.5)

    if close(beta, 0.0, tol.beta):
        if close(alpha, 1.0, tol.alpha):
            return float(sigma * np.tan(v) + mu)
        if close(alpha, 2.0, tol.alpha):
            return float(2 * np.sin(v) * np.sqrt(w) * sigma + mu)
        t = np.sin(alpha * v) / np.cos(v) ** (1 / alpha)
        s = (np.cos((1 - alpha) * v) / w) ** ((1 - alpha) / alpha)
        return float(sigma * t * s + mu)

    half_pi = 0.5 * np.pi
    if close(alpha, 1.0, tol.alpha):
        x = ((half_pi + beta * v) * np.tan(v) -
             beta * np.log((half_pi * w * np.cos(v)) / (half_pi + beta * v))) / half_pi
        return float(sigma * x + beta * sigma * np.log(sigma) / half_pi + mu)

    t = beta * np.tan(half_pi * alpha)
    s = (1 + t * t) ** (1 / (2 * alpha))
    b = np.arctan(t) / alpha
    x = (s * np.sin(alpha * (v + b)) *
         (np.cos(v - alpha * (v + b)) / w) ** ((1 - alpha) / alpha) /
         np.cos(v) ** (1 / alpha))
    return float(sigma * x + mu)
