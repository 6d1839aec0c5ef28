# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT
# Coordinate descent follows Friedman, Hastie and Tibshirani,
# "Regularization paths for generalized linear models via coordinate
# descent", Journal of Statistical Software 33(1), 2010.

import warnings

import numpy as np
from sklearn.exceptions import ConvergenceWarning

from .active_set import active_set_unchanged, compute_active_set
from .cd_linear import _cd_linear_epoch, _init_scores
from .dataset import FeatureStore, get_feature_store
from .exceptions import InvalidConfigurationError, NumericalInstabilityError
from .loss import objective
from .penalty import ElasticNetPenalty
from .terminator import ConvergenceTerminator

# active-set-only sweeps between two full sweeps
MAX_ACTIVE_SET_ITER = 5


class ElasticNetOptimizer(object):
    """Coordinate descent for weighted elastic-net linear regression.

    Minimizes

        sum_i w_i (y_i - s_i)² / (2 * sum_i w_i)
            + lam * ((1 - r) / 2 * ||coef||_2^2 + r * ||coef||_1)

    where ``s_i = bias + <coef, x_i>``. The bias is not penalized. The
    supplied weights are updated in place.

    Parameters
    ----------
    weights : Weights
        Model to fit. Its current values are the starting point.

    X : {array-like, sparse matrix, FeatureStore}, shape = [n_samples, n_features]
        Features.

    y : array-like, shape = [n_samples], optional
        Labels. Can be omitted if X is a FeatureStore that carries labels.

    sample_weight : array-like, shape = [n_samples], optional
        Instance weights, 1 for every point if omitted. Zeros are allowed.

    sum_weights : float, optional
        Precomputed sum of ``sample_weight``.

    regularization : float >= 0, default: 0
        Penalty strength ``lam``.

    l1_ratio : float in [0, 1], default: 0
        Mixing ratio ``r`` between the l1 and the l2 penalty.

    active_set : boolean, default: False
        Whether to restrict most sweeps to the nonzero coefficients.
        In this mode a sweep-counting copy of the terminator is run
        (see ``finish_max_iter``); the given terminator is not replaced.

    terminator : ConvergenceTerminator or MaxIterTerminator, optional
        Stopping rule. ``ConvergenceTerminator()`` if omitted.
        The stopping rule of the last run is ``run_terminator``.

    verbose : boolean, default: False
        Whether to print progress information.
    """

    def __init__(self, weights, X, y=None, sample_weight=None,
                 sum_weights=None, regularization=0.0, l1_ratio=0.0,
                 active_set=False, terminator=None, verbose=False):
        if isinstance(X, FeatureStore):
            store = X
        else:
            store = get_feature_store(X)
        if y is None:
            y = store.labels
        if y is None:
            raise InvalidConfigurationError(
                "Labels are required when the features do not carry them."
            )
        n_samples = store.n_samples
        y = np.ascontiguousarray(y, dtype=np.float64).ravel()
        if y.shape[0] != n_samples:
            raise InvalidConfigurationError(
                f"Got {y.shape[0]} labels for {n_samples} data points."
            )
        if sample_weight is None:
            sample_weight = np.ones(n_samples, dtype=np.float64)
        else:
            sample_weight = np.ascontiguousarray(sample_weight,
                                                 dtype=np.float64).ravel()
            if sample_weight.shape[0] != n_samples:
                raise InvalidConfigurationError(
                    f"Got {sample_weight.shape[0]} instance weights for "
                    f"{n_samples} data points."
                )
        if not np.all(np.isfinite(y)):
            raise NumericalInstabilityError("Labels must be finite.")
        if not np.all(np.isfinite(sample_weight)):
            raise NumericalInstabilityError("Instance weights must be finite.")
        if weights.n_features != store.n_features:
            raise InvalidConfigurationError(
                f"Model has {weights.n_features} coefficients but the data "
                f"has {store.n_features} features."
            )
        if sum_weights is None:
            sum_weights = np.sum(sample_weight)

        self.weights = weights
        self.store = store
        self.y = y
        self.sample_weight = sample_weight
        self.sum_weights = float(sum_weights)
        self.regularization = regularization
        self.l1_ratio = l1_ratio
        self.active_set = active_set
        if terminator is None:
            terminator = ConvergenceTerminator()
        self.terminator = terminator
        self.verbose = verbose
        self.scores = None
        self.loss_history = []
        self.run_terminator = None

    @property
    def regularization(self):
        return self._regularization

    @regularization.setter
    def regularization(self, regularization):
        if not regularization >= 0:
            raise InvalidConfigurationError(
                f"regularization must be non-negative, got {regularization!r}."
            )
        self._regularization = float(regularization)

    @property
    def l1_ratio(self):
        return self._l1_ratio

    @l1_ratio.setter
    def l1_ratio(self, l1_ratio):
        if not 0 <= l1_ratio <= 1:
            raise InvalidConfigurationError(
                f"l1_ratio must be in [0, 1], got {l1_ratio!r}."
            )
        self._l1_ratio = float(l1_ratio)

    def _get_penalty(self):
        return ElasticNetPenalty(self.regularization, self.l1_ratio)

    def _compute_scores(self):
        scores = np.empty(self.store.n_samples, dtype=np.float64)
        _init_scores(self.store.rows, self.weights.get_weights_without_bias(),
                     self.weights.get_bias(), scores)
        return scores

    def _check_finite(self):
        if not np.isfinite(self.weights.get_bias()):
            raise NumericalInstabilityError(
                f"Bias became {self.weights.get_bias()}."
            )
        if not np.all(np.isfinite(self.scores)):
            n_bad = np.sum(~np.isfinite(self.scores))
            raise NumericalInstabilityError(
                f"{n_bad} scores are not finite."
            )

    def _loss(self, penalty):
        return objective(self.weights.get_weights_without_bias(), self.y,
                         self.scores, self.sample_weight, self.sum_weights,
                         penalty)

    def loss(self):
        """Objective value at the current weights."""
        if self.scores is None:
            self.scores = self._compute_scores()
        return self._loss(self._get_penalty())

    def _iterate(self, penalty, indices_feature):
        intercept, _ = _cd_linear_epoch(
            self.weights.get_weights_without_bias(),
            self.weights.get_bias(),
            self.store.columns,
            self.y,
            self.scores,
            self.sample_weight,
            self.sum_weights,
            penalty,
            indices_feature,
        )
        self.weights.set_bias(intercept)
        self._check_finite()

    def optimize(self):
        """Run coordinate descent until the stopping rule fires.

        The weights are updated in place. ``run_terminator`` holds the
        stopping rule that drove this run.
        """
        penalty = self._get_penalty()
        self.scores = self._compute_scores()
        self._check_finite()
        self.loss_history = []
        if self.active_set:
            # counts sweeps only; self.terminator itself is left as given
            self.run_terminator = self.terminator.finish_max_iter()
            self.run_terminator.reset()
            converged = self._active_set_optimize(penalty,
                                                  self.run_terminator)
        else:
            self.run_terminator = self.terminator
            self.run_terminator.reset()
            converged = self._normal_optimize(penalty, self.run_terminator)

        if not converged:
            warnings.warn("Objective did not converge. Increase max_iter.",
                          ConvergenceWarning)

    def _normal_optimize(self, penalty, terminator):
        indices_feature = np.arange(self.store.n_features, dtype=np.int32)
        if self.verbose:
            print(f"Initial loss {self._loss(penalty)}")

        while True:
            self._iterate(penalty, indices_feature)
            loss = self._loss(penalty)
            self.loss_history.append(loss)
            terminator.add(loss)
            if self.verbose:
                print(f"Iteration {terminator.n_iter} loss {loss}")
            if terminator.should_terminate():
                break

        if self.verbose:
            print(f"Final loss {loss}")
            if terminator.converged:
                print(f"Converged at iteration {terminator.n_iter}")
        return terminator.converged

    def _active_set_optimize(self, penalty, terminator):
        indices_feature = np.arange(self.store.n_features, dtype=np.int32)
        coef = self.weights.get_weights_without_bias()

        self._iterate(penalty, indices_feature)
        self.loss_history.append(self._loss(penalty))
        terminator.add(1.0)
        active_set = compute_active_set(coef)
        while True:
            for _ in range(MAX_ACTIVE_SET_ITER):
                self._iterate(penalty, active_set)
                terminator.add(1.0)
                if terminator.should_terminate():
                    break

            # full sweep, lets inactive features re-enter
            self._iterate(penalty, indices_feature)
            loss = self._loss(penalty)
            self.loss_history.append(loss)
            terminator.add(1.0)
            if self.verbose:
                print(f"Iteration {terminator.n_iter} loss {loss} "
                      f"active features {np.count_nonzero(coef)}")
            if terminator.should_terminate():
                return False

            latest_active_set = compute_active_set(coef)
            if active_set_unchanged(active_set, latest_active_set):
                if self.verbose:
                    print(f"Converged at iteration {terminator.n_iter}")
                return True
            active_set = latest_active_set
