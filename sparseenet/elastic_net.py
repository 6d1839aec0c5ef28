# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
from sklearn.utils.extmath import safe_sparse_dot

from .base import BaseSparseLinear, SparseLinearRegressorMixin
from .optimizer import ElasticNetOptimizer
from .terminator import ConvergenceTerminator
from .weights import Weights


class ElasticNetRegressor(SparseLinearRegressorMixin, BaseSparseLinear):
    """Weighted linear regression with an elastic-net penalty.

    Minimizes, by cyclic coordinate descent,

        sum_i w_i (y_i - <coef, x_i> - intercept)² / (2 * sum_i w_i)
            + regularization * ((1 - l1_ratio) / 2 * ||coef||_2^2
                                + l1_ratio * ||coef||_1)

    Parameters
    ----------

    regularization : float >= 0, default: 0
        Penalty strength. The intercept is never penalized.

    l1_ratio : float in [0, 1], default: 0
        Mixing between the l2 (``l1_ratio=0``) and the l1 (``l1_ratio=1``)
        penalty.

    active_set : boolean, default: False
        Whether to use active-set sweeps: most sweeps only visit the
        nonzero coefficients, with a full sweep every few iterations.
        Optimization stops when a full sweep leaves the set of nonzero
        coefficients unchanged or after ``max_iter`` sweeps.

    tol : float, default: 1e-6
        Relative tolerance on the decrease of the objective.
        Unused if ``active_set=True``.

    max_iter : int, default: 1000
        Maximum number of sweeps.

    n_iter_no_change : int, default: 5
        Number of sweeps without sufficient decrease of the objective
        before stopping. Unused if ``active_set=True``.

    warm_start : boolean, optional, default: False
        Whether to use the existing solution, if available. Useful when
        refitting on slowly changing targets.

    verbose : boolean, optional, default: False
        Whether to print debugging information.

    Attributes
    ----------

    coef_ : array, shape [n_features]
        Fitted coefficients.

    intercept_ : float
        Fitted bias.

    n_iter_ : int
        Number of sweeps run.

    loss_history_ : array
        Objective value after each full sweep.

    References
    ----------
    Regularization Paths for Generalized Linear Models via Coordinate
    Descent.
    Jerome Friedman, Trevor Hastie and Rob Tibshirani.
    Journal of Statistical Software 33(1), 2010.
    """

    def __init__(
        self,
        regularization=0.0,
        l1_ratio=0.0,
        active_set=False,
        tol=1e-6,
        max_iter=1000,
        n_iter_no_change=5,
        warm_start=False,
        verbose=False,
    ):
        self.regularization = regularization
        self.l1_ratio = l1_ratio
        self.active_set = active_set
        self.tol = tol
        self.max_iter = max_iter
        self.n_iter_no_change = n_iter_no_change
        self.warm_start = warm_start
        self.verbose = verbose

    def fit(self, X, y, sample_weight=None):
        """Fit the model to training data.

        Parameters
        ----------
        X : {array-like, sparse matrix}, shape = [n_samples, n_features]
            Training vectors, where n_samples is the number of samples
            and n_features is the number of features.

        y : array-like, shape = [n_samples]
            Target values.

        sample_weight : array-like, shape = [n_samples], optional
            Instance weights. Zeros are allowed.

        Returns
        -------
        self : Estimator
            Returns self.
        """
        X, y = self._check_X_y(X, y)
        n_samples, n_features = X.shape
        sample_weight = self._check_sample_weight(sample_weight, n_samples)

        if not (self.warm_start and hasattr(self, "coef_")):
            self.coef_ = np.zeros(n_features, dtype=np.double)
            self.intercept_ = 0.0
        weights = Weights(n_features, coef=self.coef_,
                          intercept=self.intercept_)

        terminator = ConvergenceTerminator(
            tol=self.tol,
            max_iter=self.max_iter,
            n_iter_no_change=self.n_iter_no_change,
        )
        optimizer = ElasticNetOptimizer(
            weights,
            X,
            y,
            sample_weight=sample_weight,
            regularization=self.regularization,
            l1_ratio=self.l1_ratio,
            active_set=self.active_set,
            terminator=terminator,
            verbose=self.verbose,
        )
        optimizer.optimize()

        self.coef_ = weights.get_weights_without_bias()
        self.intercept_ = weights.get_bias()
        self.n_iter_ = optimizer.run_terminator.n_iter
        self.loss_history_ = np.array(optimizer.loss_history)
        return self

    def _predict(self, X):
        return safe_sparse_dot(X, self.coef_) + self.intercept_
