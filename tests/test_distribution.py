import dataclasses

import numpy as np
import pytest

from alpha_stable import (
    AlphaStable,
    IntegratorConfig,
    InvalidAlphaError,
    InvalidBetaError,
    ParameterError,
    ToleranceConfig,
)


@pytest.mark.parametrize("alpha", [0.0, -0.5, 2.0000001, 3.0])
def test_invalid_alpha(alpha):
    with pytest.raises(InvalidAlphaError) as excinfo:
        AlphaStable(alpha, 0.0, 1.0, 0.0)
    assert excinfo.value.alpha == alpha
    with pytest.raises(InvalidAlphaError):
        AlphaStable.from_s0(alpha, 0.0, 1.0, 0.0)


@pytest.mark.parametrize("beta", [-1.0001, 1.5])
def test_invalid_beta(beta):
    with pytest.raises(InvalidBetaError) as excinfo:
        AlphaStable(1.5, beta, 1.0, 0.0)
    assert excinfo.value.beta == beta
    with pytest.raises(ValueError):
        AlphaStable.from_s0(1.5, beta, 1.0, 0.0)


def test_parameter_errors_share_a_base():
    assert issubclass(InvalidAlphaError, ParameterError)
    assert issubclass(InvalidBetaError, ParameterError)


@pytest.mark.parametrize("alpha, beta", [(2.0, 0.0), (1.0, 1.0), (0.5, -1.0), (1e-3, 0.2)])
def test_boundary_parameters_accepted(alpha, beta):
    dist = AlphaStable(alpha, beta, 1.0, 0.0)
    assert dist.alpha == alpha
    assert dist.beta == beta


def test_mu_0_away_from_alpha_one():
    dist = AlphaStable(1.5, 0.5, 2.0, 1.0)
    assert dist.mu_0 == pytest.approx(1.0 + 0.5 * 2.0 * np.tan(0.75 * np.pi))


def test_mu_0_at_alpha_one():
    dist = AlphaStable(1.0, 0.5, 2.0, 1.0)
    assert dist.mu_0 == pytest.approx(1.0 + 0.5 * 2.0 * 2.0 * np.log(2.0) / np.pi)


def test_alpha_within_tolerance_uses_log_branch():
    near = AlphaStable(1.0 + 1e-7, 0.5, 2.0, 1.0)
    exact = AlphaStable(1.0, 0.5, 2.0, 1.0)
    assert near.mu_0 == pytest.approx(exact.mu_0)


@pytest.mark.parametrize(
    "alpha, beta, sigma, mu",
    [
        (1.5, 0.5, 2.0, 1.0),
        (0.7, -0.9, 0.3, -4.0),
        (1.0, 0.8, 3.0, 2.0),
        (1.0 + 5e-7, -0.4, 0.5, 0.1),
        (2.0, 0.0, 1.0, 0.0),
    ],
)
def test_parameterizations_round_trip(alpha, beta, sigma, mu):
    dist = AlphaStable(alpha, beta, sigma, mu)
    back = AlphaStable.from_s0(alpha, beta, sigma, dist.mu_0)
    assert back.mu == pytest.approx(mu, abs=1e-12)
    assert back.mu_0 == dist.mu_0


def test_from_s0_keeps_mu_0_exact():
    dist = AlphaStable.from_s0(1.2, 0.3, 0.7, 0.123456789)
    assert dist.mu_0 == 0.123456789
    assert dist.params() == (1.2, 0.3, 0.7, dist.mu, 0.123456789)


def test_params():
    dist = AlphaStable(1.5, 0.0, 2.0, -1.0)
    alpha, beta, sigma, mu, mu_0 = dist.params()
    assert (alpha, beta, sigma, mu) == (1.5, 0.0, 2.0, -1.0)
    assert mu_0 == pytest.approx(-1.0)


def test_default():
    assert AlphaStable.default().params() == (2.0, 0.0, 1.0, 0.0, 0.0)


def test_shape_parameters_are_read_only():
    dist = AlphaStable(1.5, 0.5, 1.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        dist.alpha = 1.2
    with pytest.raises(dataclasses.FrozenInstanceError):
        dist.mu_0 = 3.0


def test_with_tolerance_returns_copy():
    dist = AlphaStable.from_s0(1.5, 0.5, 1.0, 0.25)
    tol = ToleranceConfig(alpha=0.1, beta=0.0, zeta=1e-3)
    updated = dist.with_tolerance(tol)
    assert updated is not dist
    assert updated.tolerance == tol
    assert dist.tolerance == ToleranceConfig()
    assert updated.params() == dist.params()


def test_with_integrator_returns_copy():
    dist = AlphaStable(0.8, -0.2, 1.0, 0.0)
    config = IntegratorConfig.best_effort(quad_tolerance=1e-8)
    updated = dist.with_integrator(config)
    assert updated.integrator is config
    assert not dist.integrator.suppress_errors
    assert updated.params() == dist.params()
