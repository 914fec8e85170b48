"""Exception types raised by the alpha-stable engine."""


class AlphaStableError(Exception):
    """Base exception for all alpha-stable errors."""


class ParameterError(AlphaStableError, ValueError):
    """Raised when a distribution is constructed with invalid parameters."""


class InvalidAlphaError(ParameterError):
    """Raised when alpha lies outside (0, 2]."""

    def __init__(self, alpha):
        self.alpha = alpha
        super().__init__(f"alpha ({alpha}) outside allowed range (0, 2]")


class InvalidBetaError(ParameterError):
    """Raised when beta lies outside [-1, 1]."""

    def __init__(self, beta):
        self.beta = beta
        super().__init__(f"beta ({beta}) outside allowed range [-1, 1]")


class IntegrationError(AlphaStableError, ArithmeticError):
    """Raised when the density integral cannot be evaluated reliably."""


class BisectionRangeError(IntegrationError):
    """Raised when a bisection bracket is degenerate or holds no sign change."""

    def __init__(self, a, b):
        self.a = a
        self.b = b
        super().__init__(f"bisection range ({a}, {b}) does not bracket a root")


class IterationLimitError(IntegrationError):
    """Raised when bisection does not converge within its iteration cap."""

    def __init__(self, max_iterations):
        self.max_iterations = max_iterations
        super().__init__(f"root not found, exceeded iteration limit of {max_iterations}")


class QuadratureError(IntegrationError):
    """Raised when scipy's quadrature does not reach the requested tolerance."""

    def __init__(self, message, interval=None):
        self.message = message
        self.interval = interval
        where = f" on [{interval[0]}, {interval[1]}]" if interval is not None else ""
        super().__init__(f"quadrature did not converge{where}: {message}")


class BestEffortWarning(RuntimeWarning):
    """Emitted whenever a best-effort integrator swallows a failure."""
