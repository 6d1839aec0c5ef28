# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT

import numpy as np
import scipy.sparse as sp
from numba import int32, float64
from numba.experimental import jitclass

from .exceptions import InvalidConfigurationError


spec_dense = [
    ("n_samples", int32),
    ("n_features", int32),
    ("X", float64[:, :]),
    ("indices", int32[:])
]


@jitclass(spec_dense)
class ContiguousDataset(object):
    """Row view of a dense C-ordered matrix."""

    def __init__(self, X):
        self.n_samples = X.shape[0]
        self.n_features = X.shape[1]
        self.X = X
        self.indices = np.arange(self.n_features, dtype=np.int32)

    def get_n_samples(self):
        return self.n_samples

    def get_n_features(self):
        return self.n_features

    def get_row(self, i):
        return self.n_features, self.indices, self.X[i]


@jitclass(spec_dense)
class FortranDataset(object):
    """Column view of a dense Fortran-ordered matrix."""

    def __init__(self, X):
        self.n_samples = X.shape[0]
        self.n_features = X.shape[1]
        self.X = X
        self.indices = np.arange(self.n_samples, dtype=np.int32)

    def get_n_samples(self):
        return self.n_samples

    def get_n_features(self):
        return self.n_features

    def get_column(self, j):
        return self.n_samples, self.indices, self.X[:, j]


spec_sparse = [
    ("n_samples", int32),
    ("n_features", int32),
    ("data", float64[:]),
    ("indices", int32[:]),
    ("indptr", int32[:])
]


@jitclass(spec_sparse)
class CSRDataset(object):
    """Row view of a CSR matrix: only stored entries are visited."""

    def __init__(self, n_samples, n_features, data, indices, indptr):
        self.n_samples = n_samples
        self.n_features = n_features
        self.data = data
        self.indices = indices
        self.indptr = indptr

    def get_n_samples(self):
        return self.n_samples

    def get_n_features(self):
        return self.n_features

    def get_row(self, i):
        start = self.indptr[i]
        end = self.indptr[i+1]
        n_nz = end - start
        return n_nz, self.indices[start:end], self.data[start:end]


@jitclass(spec_sparse)
class CSCDataset(object):
    """Column view of a CSC matrix: only stored entries are visited."""

    def __init__(self, n_samples, n_features, data, indices, indptr):
        self.n_samples = n_samples
        self.n_features = n_features
        self.data = data
        self.indices = indices
        self.indptr = indptr

    def get_n_samples(self):
        return self.n_samples

    def get_n_features(self):
        return self.n_features

    def get_column(self, j):
        start = self.indptr[j]
        end = self.indptr[j+1]
        n_nz = end - start
        return n_nz, self.indices[start:end], self.data[start:end]


def _to_sparse_arrays(X):
    X.sum_duplicates()
    data = np.ascontiguousarray(X.data, dtype=np.float64)
    indices = np.ascontiguousarray(X.indices, dtype=np.int32)
    indptr = np.ascontiguousarray(X.indptr, dtype=np.int32)
    return data, indices, indptr


def get_dataset(X, order="c"):
    """Wrap X into a jitclass dataset.

    ``order="c"`` gives a row view (``get_row``), ``order="fortran"`` a
    column view (``get_column``).
    """
    if sp.issparse(X):
        if order == "fortran":
            X = sp.csc_matrix(X, dtype=np.float64)
            ds = CSCDataset(X.shape[0], X.shape[1], *_to_sparse_arrays(X))
        else:
            X = sp.csr_matrix(X, dtype=np.float64)
            ds = CSRDataset(X.shape[0], X.shape[1], *_to_sparse_arrays(X))
    else:
        if order == "fortran":
            X = np.asfortranarray(X, dtype=np.float64)
            ds = FortranDataset(X)
        else:
            X = np.ascontiguousarray(X, dtype=np.float64)
            ds = ContiguousDataset(X)
    return ds


class FeatureStore(object):
    """Read-only access to a fixed design matrix by row and by column.

    Parameters
    ----------
    rows : ContiguousDataset or CSRDataset
        Per-data-point view, used to compute scores from scratch.

    columns : FortranDataset or CSCDataset
        Per-feature view, used by the coordinate updates.

    labels : array, shape = [n_samples] or None
        Regression targets carried along with the features, if any.
    """

    def __init__(self, rows, columns, labels=None):
        if rows.get_n_samples() != columns.get_n_samples() or \
                rows.get_n_features() != columns.get_n_features():
            raise InvalidConfigurationError(
                "Row and column views must describe the same matrix."
            )
        self.rows = rows
        self.columns = columns
        self.labels = labels

    @property
    def n_samples(self):
        return self.rows.get_n_samples()

    @property
    def n_features(self):
        return self.rows.get_n_features()

    def iter_row(self, i):
        n_nz, indices, data = self.rows.get_row(i)
        for ii in range(n_nz):
            yield int(indices[ii]), float(data[ii])

    def iter_column(self, j):
        n_nz, indices, data = self.columns.get_column(j)
        for ii in range(n_nz):
            yield int(indices[ii]), float(data[ii])


def get_feature_store(X, labels=None):
    if not sp.issparse(X):
        X = np.asarray(X, dtype=np.float64)
    X_shape = X.shape
    if len(X_shape) != 2:
        raise InvalidConfigurationError(
            f"Expected a 2d feature matrix, got shape {X_shape}."
        )
    if labels is not None:
        labels = np.ascontiguousarray(labels, dtype=np.float64).ravel()
        if len(labels) != X_shape[0]:
            raise InvalidConfigurationError(
                f"Got {len(labels)} labels for {X_shape[0]} data points."
            )
    return FeatureStore(get_dataset(X, order="c"),
                        get_dataset(X, order="fortran"),
                        labels=labels)
