# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import warnings

import numpy as np
import pytest
import scipy.sparse as sp
from numpy.testing import assert_almost_equal, assert_array_almost_equal
from sklearn.exceptions import NotFittedError

from sparseenet import ElasticNetRegressor, InvalidConfigurationError

rng = np.random.RandomState(0)
n_samples = 100
n_features = 10
X = rng.randn(n_samples, n_features)
coef_true = np.zeros(n_features)
coef_true[[1, 4]] = [1.0, -2.0]
y = np.dot(X, coef_true) + 0.5 + 0.01 * rng.randn(n_samples)


def test_unpenalized_fit_matches_lstsq():
    reg = ElasticNetRegressor(tol=1e-12, max_iter=5000)
    reg.fit(X, y)
    X_aug = np.hstack([X, np.ones((n_samples, 1))])
    solution = np.linalg.lstsq(X_aug, y, rcond=None)[0]
    assert_array_almost_equal(reg.coef_, solution[:-1], decimal=5)
    assert_almost_equal(reg.intercept_, solution[-1], decimal=5)
    assert reg.score(X, y) > 0.99


def test_ridge_closed_form():
    regularization = 0.3
    sample_weight = rng.rand(n_samples)
    reg = ElasticNetRegressor(regularization=regularization, l1_ratio=0.0,
                              tol=1e-12, max_iter=5000)
    reg.fit(X, y, sample_weight=sample_weight)

    # normal equations of the weighted, centered ridge problem
    sum_weights = np.sum(sample_weight)
    X_mean = np.average(X, axis=0, weights=sample_weight)
    y_mean = np.average(y, weights=sample_weight)
    Xc = X - X_mean
    yc = y - y_mean
    A = np.dot(Xc.T * sample_weight, Xc) / sum_weights
    A += regularization * np.eye(n_features)
    b = np.dot(Xc.T * sample_weight, yc) / sum_weights
    coef = np.linalg.solve(A, b)
    assert_array_almost_equal(reg.coef_, coef, decimal=5)
    assert_almost_equal(reg.intercept_, y_mean - np.dot(X_mean, coef),
                        decimal=5)


@pytest.mark.parametrize("active_set", [False, True])
def test_lasso_recovers_support(active_set):
    reg = ElasticNetRegressor(regularization=0.1, l1_ratio=1.0,
                              active_set=active_set)
    reg.fit(X, y)
    assert_array_almost_equal(np.flatnonzero(reg.coef_), [1, 4])
    assert len(reg.loss_history_) >= 1


def test_sparse_same_as_dense():
    reg_dense = ElasticNetRegressor(regularization=0.05, l1_ratio=0.5)
    reg_dense.fit(X, y)
    reg_sparse = ElasticNetRegressor(regularization=0.05, l1_ratio=0.5)
    reg_sparse.fit(sp.csr_matrix(X), y)
    assert_array_almost_equal(reg_dense.coef_, reg_sparse.coef_)
    assert_array_almost_equal(reg_dense.predict(X),
                              reg_sparse.predict(sp.csr_matrix(X)))


def test_warm_start():
    reg = ElasticNetRegressor(regularization=0.05, l1_ratio=0.5,
                              warm_start=True)
    reg.fit(X, y)
    n_iter_cold = reg.n_iter_
    coef = np.array(reg.coef_)
    reg.fit(X, y)
    assert reg.n_iter_ <= n_iter_cold
    assert_array_almost_equal(reg.coef_, coef, decimal=4)


def test_not_fitted():
    with pytest.raises(NotFittedError):
        ElasticNetRegressor().predict(X)


def test_invalid_l1_ratio():
    with pytest.raises(InvalidConfigurationError):
        ElasticNetRegressor(l1_ratio=1.5).fit(X, y)


def test_bad_sample_weight():
    with pytest.raises(ValueError):
        ElasticNetRegressor().fit(X, y, sample_weight=np.ones(3))


def test_max_iter_warning():
    reg = ElasticNetRegressor(regularization=0.01, tol=0.0, max_iter=2)
    with warnings.catch_warnings(record=True) as record:
        warnings.simplefilter("always")
        reg.fit(X, y)
    assert any("did not converge" in str(w.message) for w in record)
    assert reg.n_iter_ == 2
