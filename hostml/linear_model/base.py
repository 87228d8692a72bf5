#
# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import numpy as np

from hostml.common.classification import preprocess_labels
from hostml.common.doc_utils import generate_docstring
from hostml.common.exceptions import IncompatibleStateError
from hostml.common.serialization import check_state_keys
from hostml.internals.input_utils import input_to_host_array


def prepare_binary_problem(X, y):
    """Validate the inputs of a binary linear classifier.

    Returns
    -------
    X : np.ndarray of float64, shape (n_samples, n_features)
    y_signed : np.ndarray of float64, shape (n_samples,)
        ``-1`` for ``classes[0]`` and ``+1`` for ``classes[1]``.
    classes : np.ndarray, shape (2,)
    """
    X = input_to_host_array(X, convert_to_dtype=np.float64).array
    classes, y_ind = preprocess_labels(
        y, n_samples=X.shape[0], min_classes=2, max_classes=2
    )
    y_signed = 2.0 * y_ind - 1.0
    return X, y_signed, classes


def add_bias_column(X, fit_bias, bias_scale):
    if not fit_bias:
        return X
    bias = np.full((X.shape[0], 1), bias_scale, dtype=X.dtype)
    return np.hstack([X, bias])


def split_weights(weights, fit_bias, bias_scale):
    """Split an expanded weight vector into ``(coef, intercept)``."""
    if not fit_bias:
        return weights, 0.0
    return weights[:-1].copy(), float(bias_scale * weights[-1])


def minibatches(n_samples, batch_size, max_iter, rng):
    """Yield ``(t, sample_ids)`` for ``max_iter`` steps, drawing mini-batches
    without replacement from successive random permutations."""
    pool = np.empty(0, dtype=np.intp)
    for t in range(max_iter):
        if len(pool) < batch_size:
            pool = np.concatenate([pool, rng.permutation(n_samples)])
        ids, pool = pool[:batch_size], pool[batch_size:]
        yield t, ids


class LinearClassifierMixin:
    """Decision function, prediction and persisted state of a binary linear
    classifier with ``coef_``, ``intercept_`` and two ``classes_``."""

    @generate_docstring(
        return_values={
            "name": "scores",
            "type": "dense",
            "description": "Confidence scores. Positive values favor "
            "``classes_[1]``.",
            "shape": "(n_samples,)",
        }
    )
    def decision_function(self, X):
        """Predict confidence scores for samples."""
        self._check_is_fitted()
        X = input_to_host_array(
            X, convert_to_dtype=np.float64, check_cols=self.n_features_in_
        ).array
        return X @ self.coef_ + self.intercept_

    @generate_docstring(
        return_values={
            "name": "y_pred",
            "type": "dense",
            "description": "Predicted class labels.",
            "shape": "(n_samples,)",
        }
    )
    def predict(self, X):
        """Predict class labels for samples in X."""
        scores = self.decision_function(X)
        return self.classes_.take((scores >= 0).astype(np.intp))

    def _get_state(self):
        return {
            "coef": self.coef_,
            "intercept": self.intercept_,
            "classes": self.classes_,
            "n_features_in": self.n_features_in_,
        }

    def _set_state(self, state):
        name = type(self).__name__
        check_state_keys(
            state, ["coef", "intercept", "classes", "n_features_in"], name
        )
        coef = np.asarray(state["coef"], dtype=np.float64)
        classes = np.asarray(state["classes"])
        n_features = state["n_features_in"]
        if coef.shape != (n_features,):
            raise IncompatibleStateError(
                f"{name} expects coef of shape ({n_features},), got "
                f"{coef.shape}"
            )
        if classes.shape != (2,):
            raise IncompatibleStateError(
                f"{name} expects 2 classes, got {classes.shape[0]}"
            )
        self.coef_ = coef
        self.intercept_ = float(state["intercept"])
        self.classes_ = classes
        self.n_features_in_ = n_features
