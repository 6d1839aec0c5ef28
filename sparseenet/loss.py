# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from numba import njit


@njit
def weighted_squared_error(y, scores, sample_weight, sum_weights):
    """Weighted squared error: sum_i w_i (y_i - s_i)² / (2 * sum_i w_i)

    With no weight at all there is nothing to fit and the error is 0.
    """
    if sum_weights == 0:
        return 0.0
    sse = 0.0
    for i in range(len(y)):
        residual = y[i] - scores[i]
        sse += sample_weight[i] * residual * residual
    return sse / (2 * sum_weights)


@njit
def objective(coef, y, scores, sample_weight, sum_weights, penalty):
    data_term = weighted_squared_error(y, scores, sample_weight, sum_weights)
    return data_term + penalty.eval(coef)
