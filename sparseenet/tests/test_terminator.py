# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import pytest

from sparseenet import (
    ConvergenceTerminator,
    InvalidConfigurationError,
    MaxIterTerminator,
)


def test_convergence_terminator_stops_on_stable_values():
    terminator = ConvergenceTerminator(tol=1e-3, max_iter=100,
                                       n_iter_no_change=3)
    for value in [10.0, 5.0, 4.0]:
        terminator.add(value)
        assert not terminator.should_terminate()
    for value in [4.0, 3.9999, 4.0]:
        terminator.add(value)
    assert terminator.converged
    assert terminator.should_terminate()
    assert terminator.n_iter == 6


def test_convergence_terminator_improvement_resets_count():
    terminator = ConvergenceTerminator(tol=1e-3, max_iter=100,
                                       n_iter_no_change=2)
    for value in [1.0, 1.0, 0.5, 0.5]:
        terminator.add(value)
    assert not terminator.converged
    terminator.add(0.5)
    assert terminator.converged


def test_convergence_terminator_max_iter():
    terminator = ConvergenceTerminator(tol=0.0, max_iter=3)
    for value in [3.0, 2.0, 1.0]:
        assert not terminator.should_terminate()
        terminator.add(value)
    assert terminator.should_terminate()
    assert not terminator.converged


def test_max_iter_terminator_ignores_values():
    terminator = MaxIterTerminator(max_iter=4)
    for _ in range(3):
        terminator.add(1.0)
        assert not terminator.should_terminate()
    terminator.add(1.0)
    assert terminator.should_terminate()
    assert terminator.history == [1.0] * 4


def test_finish_max_iter():
    terminator = ConvergenceTerminator(max_iter=17)
    capped = terminator.finish_max_iter()
    assert isinstance(capped, MaxIterTerminator)
    assert capped.max_iter == 17
    assert capped.finish_max_iter() is capped


def test_reset():
    terminator = ConvergenceTerminator(max_iter=2)
    terminator.add(1.0)
    terminator.add(1.0)
    assert terminator.should_terminate()
    terminator.reset()
    assert terminator.n_iter == 0
    assert not terminator.should_terminate()


@pytest.mark.parametrize("kwargs", [
    {"tol": -1.0}, {"max_iter": 0}, {"max_iter": 2.5},
    {"n_iter_no_change": 0},
])
def test_invalid_settings(kwargs):
    with pytest.raises(InvalidConfigurationError):
        ConvergenceTerminator(**kwargs)


def test_invalid_max_iter():
    with pytest.raises(InvalidConfigurationError):
        MaxIterTerminator(max_iter=-3)
