# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

from numba import float64, njit
from numba.experimental import jitclass


@njit
def soft_thresholding(z, gamma):
    """Closed-form minimizer of 0.5 * (b - z)² + gamma * |b|."""
    if z > 0 and gamma < abs(z):
        return z - gamma
    if z < 0 and gamma < abs(z):
        return z + gamma
    return 0.0


spec = [
    ("regularization", float64),
    ("l1_ratio", float64),
    ("l1_strength", float64),
    ("l2_strength", float64),
]


@jitclass(spec)
class ElasticNetPenalty(object):
    """Elastic-net penalty: lam * ((1 - r) / 2 * ||w||_2^2 + r * ||w||_1)

    ``l1_strength`` and ``l2_strength`` are the per-coordinate terms
    ``lam * r`` and ``lam * (1 - r)``, computed once here instead of in
    every coordinate update.
    """

    def __init__(self, regularization, l1_ratio):
        self.regularization = regularization
        self.l1_ratio = l1_ratio
        self.l1_strength = regularization * l1_ratio
        self.l2_strength = regularization * (1 - l1_ratio)

    def eval(self, coef):
        sq_norm = 0.0
        abs_norm = 0.0
        for j in range(len(coef)):
            sq_norm += coef[j] * coef[j]
            abs_norm += abs(coef[j])
        combination = (1 - self.l1_ratio) * 0.5 * sq_norm
        combination += self.l1_ratio * abs_norm
        return self.regularization * combination

    def prox_cd(self, fit):
        return soft_thresholding(fit, self.l1_strength)
