# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from numba import njit


@njit
def _init_scores(rows, coef, intercept, scores):
    # the only place where scores are computed from scratch
    for i in range(rows.get_n_samples()):
        n_nz, indices, data = rows.get_row(i)
        score = intercept
        for ii in range(n_nz):
            score += coef[indices[ii]] * data[ii]
        scores[i] = score


@njit
def _update_bias(intercept, y, scores, sample_weight, sum_weights):
    fit = 0.0
    for i in range(len(y)):
        fit += sample_weight[i] * (y[i] - scores[i] + intercept)
    new_intercept = fit / sum_weights

    # update predictions
    difference = new_intercept - intercept
    if difference != 0:
        for i in range(len(scores)):
            scores[i] += difference
    return new_intercept


@njit
def _update_feature(coef, j, X, y, scores, sample_weight, sum_weights,
                    penalty):
    n_nz, indices, data = X.get_column(j)
    coef_old = coef[j]
    fit = 0.0
    denominator = 0.0
    # residual with the contribution of w_j removed
    for ii in range(n_nz):
        i = indices[ii]
        val = data[ii]
        partial_residual = y[i] - scores[i] + val * coef_old
        tmp = sample_weight[i] * val
        fit += tmp * partial_residual
        denominator += val * tmp
    fit /= sum_weights
    numerator = penalty.prox_cd(fit)
    denominator = denominator / sum_weights + penalty.l2_strength
    # an empty column (or one with no weight) cannot explain anything
    coef_new = 0.0
    if denominator != 0:
        coef_new = numerator / denominator
    coef[j] = coef_new

    # update predictions
    difference = coef_new - coef_old
    if difference != 0:
        for ii in range(n_nz):
            scores[indices[ii]] += difference * data[ii]
    return difference


@njit
def _zero_coef(coef, X, scores):
    sum_viol = 0.0
    for j in range(len(coef)):
        if coef[j] != 0:
            n_nz, indices, data = X.get_column(j)
            for ii in range(n_nz):
                scores[indices[ii]] -= coef[j] * data[ii]
            sum_viol += abs(coef[j])
            coef[j] = 0.0
    return sum_viol


@njit
def _cd_linear_epoch(coef, intercept, X, y, scores, sample_weight,
                     sum_weights, penalty, indices_feature):
    """One sweep: bias update, then features in ``indices_feature`` order.

    Returns the new intercept and the sum of absolute coefficient changes.
    """
    sum_viol = 0.0
    if sum_weights == 0:
        # no data, only the penalty is left to minimize
        if penalty.regularization > 0:
            sum_viol = _zero_coef(coef, X, scores)
        return intercept, sum_viol

    intercept = _update_bias(intercept, y, scores, sample_weight, sum_weights)
    for j in indices_feature:
        difference = _update_feature(coef, j, X, y, scores, sample_weight,
                                     sum_weights, penalty)
        sum_viol += abs(difference)
    return intercept, sum_viol
