# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
import numpy as np
import pytest
from sklearn.datasets import make_blobs, make_classification
from sklearn.model_selection import train_test_split

from hostml.internals.base import Base


def unit_param(*args, **kwargs):
    return pytest.param(*args, **kwargs, marks=pytest.mark.unit)


def quality_param(*args, **kwargs):
    return pytest.param(*args, **kwargs, marks=pytest.mark.quality)


def stress_param(*args, **kwargs):
    return pytest.param(*args, **kwargs, marks=pytest.mark.stress)


def make_classification_dataset(
    datatype, nrows, ncols, n_info, num_classes, random_state=0
):
    X, y = make_classification(
        n_samples=nrows,
        n_features=ncols,
        n_informative=n_info,
        n_redundant=0,
        n_classes=num_classes,
        n_clusters_per_class=1,
        class_sep=2.0,
        random_state=random_state,
    )
    X = X.astype(datatype)
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, train_size=0.8, random_state=random_state
    )
    return X_train, X_test, y_train, y_test


def make_blobs_dataset(n_samples=300, centers=3, random_state=0, labels=None):
    """Well separated blobs, optionally relabelled with `labels`."""
    X, y = make_blobs(
        n_samples=n_samples,
        centers=centers,
        cluster_std=1.0,
        random_state=random_state,
    )
    if labels is not None:
        y = np.asarray(labels).take(y)
    return X, y


class PositiveCountClassifier(Base):
    """Binary stand-in whose decision value is the number of positive
    samples it was trained on. Records the target it was fitted with."""

    def fit(self, X, y):
        self.seen_y_ = np.array(y, copy=True)
        self.n_positive_ = int(np.sum(self.seen_y_ == 1))
        self._set_n_features_in(X)
        return self

    def decision_function(self, X):
        self._check_is_fitted()
        return np.full(len(X), float(self.n_positive_))


class FeatureEchoClassifier(Base):
    """Binary stand-in scoring every sample by ``X[:, column]``, where
    `column` is the index of the feature that is largest on average over the
    positive samples."""

    def fit(self, X, y):
        X = np.asarray(X, dtype=np.float64)
        positive = np.asarray(y) == 1
        self.column_ = int(np.argmax(X[positive].mean(axis=0)))
        self._set_n_features_in(X)
        return self

    def decision_function(self, X):
        return np.asarray(X, dtype=np.float64)[:, self.column_]
