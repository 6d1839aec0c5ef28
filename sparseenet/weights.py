# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
from sklearn.utils.extmath import safe_sparse_dot

from .exceptions import InvalidConfigurationError


class Weights(object):
    """Bias and per-feature coefficients of a linear model.

    The coefficient array is handed to the compiled kernels as is and
    updated in place, so ``get_weights_without_bias`` returns the array
    itself, not a copy.

    Parameters
    ----------
    n_features : int
        Number of coefficients.

    coef : array-like, shape = [n_features], optional
        Initial coefficients (warm start). Zeros if omitted.

    intercept : float, default: 0
        Initial bias.
    """

    def __init__(self, n_features, coef=None, intercept=0.0):
        if coef is None:
            coef = np.zeros(n_features, dtype=np.float64)
        else:
            coef = np.array(coef, dtype=np.float64).ravel()
            if coef.shape[0] != n_features:
                raise InvalidConfigurationError(
                    f"Got {coef.shape[0]} coefficients for {n_features} "
                    "features."
                )
        self.coef = coef
        self.intercept = float(intercept)

    @property
    def n_features(self):
        return self.coef.shape[0]

    def get_bias(self):
        return self.intercept

    def set_bias(self, bias):
        self.intercept = float(bias)

    def get_weight(self, j):
        return self.coef[j]

    def set_weight(self, j, value):
        self.coef[j] = value

    def get_weights_without_bias(self):
        return self.coef

    def nonzeros(self):
        """Indices of the nonzero coefficients, in increasing order."""
        return np.flatnonzero(self.coef)

    def predict(self, X):
        return safe_sparse_dot(X, self.coef) + self.intercept
