# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT
# This code is based on polylearn.base and scikit-learn.

from abc import ABCMeta

import numpy as np
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.utils.validation import NotFittedError, check_array, check_X_y


class BaseSparseLinear(BaseEstimator, metaclass=ABCMeta):
    def _check_sample_weight(self, sample_weight, n_samples):
        if sample_weight is None:
            return np.ones(n_samples, dtype=np.double)
        sample_weight = check_array(sample_weight, ensure_2d=False,
                                    dtype=np.double)
        if sample_weight.ndim != 1 or sample_weight.shape[0] != n_samples:
            raise ValueError(
                f"sample_weight.shape == {sample_weight.shape}, "
                f"expected ({n_samples},)."
            )
        return sample_weight


class SparseLinearRegressorMixin(RegressorMixin):
    def _check_X_y(self, X, y):
        X, y = check_X_y(
            X,
            y,
            accept_sparse="csc",
            multi_output=False,
            dtype=np.double,
            y_numeric=True,
        )
        y = y.astype(np.double).ravel()
        return X, y

    def predict(self, X):
        """Predict regression output for the samples in X.

        Parameters
        ----------
        X : {array-like, sparse matrix}, shape = [n_samples, n_features]
            Samples.

        Returns
        -------
        y_pred : array, shape = [n_samples]
            Returns predicted values.
        """
        if not hasattr(self, "coef_"):
            raise NotFittedError("Estimator not fitted.")
        X = check_array(X, accept_sparse="csr", dtype=np.double)
        return self._predict(X)
