import math

import pytest

from loss import LOSSES, Hinge, LeastSquares, Logistic, make_loss


def test_hinge_is_zero_beyond_margin():
    hinge = Hinge()
    assert hinge.gradient_scale(1.5, 1.0) == 0.0
    assert hinge.gradient_scale(-1.5, -1.0) == 0.0
    assert hinge.loss(1.5, 1.0) == 0.0


def test_hinge_scale_points_towards_target():
    hinge = Hinge()
    assert hinge.gradient_scale(0.0, 1.0) == 1.0
    assert hinge.gradient_scale(0.0, -1.0) == -1.0
    assert hinge.loss(0.0, 1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("name", sorted(LOSSES))
def test_gradient_scale_matches_numeric_derivative(name):
    loss = make_loss(name)
    eps = 1e-6
    for target in (1.0, -1.0):
        for margin in (-2.3, -0.4, 0.3, 0.75, 2.1):
            numeric = (loss.loss(margin + eps, target) - loss.loss(margin - eps, target)) / (2 * eps)
            assert loss.gradient_scale(margin, target) == pytest.approx(-numeric, abs=1e-4)


def test_logistic_is_stable_for_large_margins():
    logistic = Logistic()
    assert logistic.loss(-1000.0, 1.0) == pytest.approx(1000.0)
    assert logistic.loss(1000.0, 1.0) == pytest.approx(0.0, abs=1e-12)
    assert math.isfinite(logistic.gradient_scale(-1000.0, 1.0))


def test_least_squares_always_updates_off_target():
    assert LeastSquares().gradient_scale(0.5, 1.0) == pytest.approx(0.5)


def test_unknown_loss_rejected():
    with pytest.raises(ValueError, match="unknown loss"):
        make_loss("exponential")


def test_least_squares_loss_overflows_to_inf():
    assert LeastSquares().loss(1e200, 1.0) == math.inf
