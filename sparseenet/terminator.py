# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT
"""Stopping rules for the coordinate-descent driver.

Both terminators accumulate one scalar signal per iteration through
``add`` and answer ``should_terminate``. The driver never looks at what the
signal means, so either one can be installed.
"""

import numpy as np

from .exceptions import InvalidConfigurationError


def _check_max_iter(max_iter):
    if not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
        raise InvalidConfigurationError(
            f"max_iter must be a positive integer, got {max_iter!r}."
        )


class ConvergenceTerminator(object):
    """Stop when the signal (a loss) stops decreasing.

    A value that does not improve on the best value seen so far by more
    than ``tol * max(1, |best|)`` is a stable iteration. After
    ``n_iter_no_change`` consecutive stable iterations the run is
    converged. ``max_iter`` signals always stop the run.

    Parameters
    ----------
    tol : float, default: 1e-6
        Relative tolerance on the improvement of the signal.

    max_iter : int, default: 1000
        Maximum number of signals.

    n_iter_no_change : int, default: 5
        Number of consecutive stable iterations before stopping.
    """

    def __init__(self, tol=1e-6, max_iter=1000, n_iter_no_change=5):
        if not tol >= 0:
            raise InvalidConfigurationError(
                f"tol must be non-negative, got {tol!r}."
            )
        _check_max_iter(max_iter)
        if n_iter_no_change < 1:
            raise InvalidConfigurationError(
                f"n_iter_no_change must be >= 1, got {n_iter_no_change!r}."
            )
        self.tol = tol
        self.max_iter = max_iter
        self.n_iter_no_change = n_iter_no_change
        self.reset()

    def reset(self):
        self.history = []
        self.best_value = np.inf
        self.no_improvement_count = 0
        self.converged = False

    @property
    def n_iter(self):
        return len(self.history)

    def add(self, value):
        value = float(value)
        if self.history:
            threshold = self.tol * max(1.0, abs(self.best_value))
            if value > self.best_value - threshold:
                self.no_improvement_count += 1
            else:
                self.no_improvement_count = 0
        self.best_value = min(self.best_value, value)
        self.history.append(value)
        if self.no_improvement_count >= self.n_iter_no_change:
            self.converged = True

    def should_terminate(self):
        return self.converged or self.n_iter >= self.max_iter

    def finish_max_iter(self):
        """Same budget, but stop only on the iteration count."""
        return MaxIterTerminator(max_iter=self.max_iter)


class MaxIterTerminator(object):
    """Stop after exactly ``max_iter`` signals, whatever their values.

    Parameters
    ----------
    max_iter : int, default: 1000
        Number of signals after which to stop.
    """

    def __init__(self, max_iter=1000):
        _check_max_iter(max_iter)
        self.max_iter = max_iter
        self.reset()

    def reset(self):
        self.history = []

    @property
    def n_iter(self):
        return len(self.history)

    @property
    def converged(self):
        # the fixed budget is the whole criterion
        return self.n_iter >= self.max_iter

    def add(self, value):
        self.history.append(float(value))

    def should_terminate(self):
        return self.n_iter >= self.max_iter

    def finish_max_iter(self):
        return self
