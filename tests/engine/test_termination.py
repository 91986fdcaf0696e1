import pytest

from rsearch.engine.algorithm.components.termination import TargetTracker, parse_termination
from rsearch.foundation.exceptions import ConfigurationError, InvalidTerminationError


def test_none_uses_configured_cap():
    assert parse_termination(None, 25) == (25, None)


@pytest.mark.parametrize("kind", ["n_iter", "n_eval"])
def test_iteration_cap(kind):
    assert parse_termination((kind, 40), 25) == (40, None)


def test_target_dict():
    assert parse_termination(("target", {"value": 0.5, "max_iterations": 80}), 25) == (80, 0.5)


def test_target_dict_without_cap_falls_back():
    assert parse_termination(("target", {"value": 0.5}), 25) == (25, 0.5)


def test_bare_target_value():
    assert parse_termination(("target", 1e-3), 25) == (25, 1e-3)


def test_target_dict_requires_value():
    with pytest.raises(ConfigurationError):
        parse_termination(("target", {"max_iterations": 10}), 25)


@pytest.mark.parametrize("bad", [("hv", 0.9), ("n_iter",), "n_iter", 5])
def test_unsupported_criteria(bad):
    with pytest.raises(InvalidTerminationError):
        parse_termination(bad, 25)


@pytest.mark.parametrize("cap", [0, -3])
def test_non_positive_cap(cap):
    with pytest.raises(ConfigurationError):
        parse_termination(("n_iter", cap), 25)


def test_nan_target_rejected():
    with pytest.raises(ConfigurationError):
        parse_termination(("target", float("nan")), 25)


def test_target_tracker():
    disabled = TargetTracker(None)
    assert not disabled.enabled
    assert not disabled.reached(-1e9)

    tracker = TargetTracker(0.5)
    assert not tracker.reached(0.6)
    assert tracker.reached(0.5)
    assert tracker.reached(-3.0)
