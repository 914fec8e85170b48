"""
Sampling and density evaluation for alpha-stable distributions.

Densities follow the Zolotarev integral representation as given by Nolan
(1997), split at the integrand peak and integrated with scipy's quad.
Variates use the Chambers-Mallows-Stuck transform.
"""
from .config import ErrorPolicy, IntegratorConfig, ToleranceConfig
from .distribution import AlphaStable
from .errors import (
    AlphaStableError,
    BestEffortWarning,
    BisectionRangeError,
    IntegrationError,
    InvalidAlphaError,
    InvalidBetaError,
    IterationLimitError,
    ParameterError,
    QuadratureError,
)

__all__ = [
    "AlphaStable",
    "ToleranceConfig",
    "IntegratorConfig",
    "ErrorPolicy",
    "AlphaStableError",
    "ParameterError",
    "InvalidAlphaError",
    "InvalidBetaError",
    "IntegrationError",
    "BisectionRangeError",
    "IterationLimitError",
    "QuadratureError",
    "BestEffortWarning",
]
