# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np


def objective_slow(X, y, coef, intercept, sample_weight, regularization,
                   l1_ratio):
    y_pred = np.dot(X, coef) + intercept
    mse = np.dot(sample_weight, (y - y_pred) ** 2) / (2 * np.sum(sample_weight))
    penalty = (1 - l1_ratio) * 0.5 * np.linalg.norm(coef, 2) ** 2
    penalty += l1_ratio * np.linalg.norm(coef, 1)
    return mse + regularization * penalty
