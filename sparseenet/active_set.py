# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np


def compute_active_set(coef):
    """Indices of the nonzero coefficients, rebuilt from scratch."""
    return np.flatnonzero(coef).astype(np.int32)


def active_set_unchanged(active_set, latest_active_set):
    """Whether two active sets hold exactly the same features.

    Equal sizes are necessary but not sufficient: one feature may have
    left while another entered.
    """
    if len(active_set) != len(latest_active_set):
        return False
    return np.array_equal(np.sort(active_set), np.sort(latest_active_set))
