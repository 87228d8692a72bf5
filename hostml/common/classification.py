# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
import numpy as np

from hostml.common.exceptions import InvalidLabelSet
from hostml.internals.input_utils import input_to_host_array


def check_classification_targets(y):
    """Check if `y` is composed of valid class labels"""
    if y.dtype.kind == "f" and not np.all(np.isfinite(y)):
        raise InvalidLabelSet("Input y contains NaN or infinity.")
    if y.dtype.kind == "f" and not np.all(np.floor(y) == y):
        raise InvalidLabelSet(
            "Unknown label type: continuous. Maybe you are trying to fit a "
            "classifier, which expects discrete classes on a regression target "
            "with continuous values."
        )


def preprocess_labels(y, n_samples=None, min_classes=2, max_classes=None):
    """Preprocess the `y` input to a classifier.

    Parameters
    ----------
    y : array-like
        The labels for fitting. Numeric or string labels are supported.
    n_samples : int, optional
        If provided, will raise an error if the number of samples in `y`
        doesn't match.
    min_classes : int, optional
        Minimum number of distinct labels required.
    max_classes : int, optional
        Maximum number of distinct labels allowed.

    Returns
    -------
    classes : np.ndarray
        The sorted distinct labels. This is the canonical index to label
        mapping of the classifier.
    y_encoded : np.ndarray
        The labels, encoded as integers in [0, n_classes - 1].
    """
    if n_samples is None:
        n_samples = False
    y = input_to_host_array(y, order="K", check_rows=n_samples, ndim=1).array
    check_classification_targets(y)

    classes, y_encoded = np.unique(y, return_inverse=True)
    n_classes = len(classes)

    if n_classes < min_classes:
        raise InvalidLabelSet(
            f"Expected at least {min_classes} distinct classes in y, got "
            f"{n_classes}: {classes.tolist()}"
        )
    if max_classes is not None and n_classes > max_classes:
        raise InvalidLabelSet(
            f"Expected at most {max_classes} distinct classes in y, got "
            f"{n_classes}: {classes.tolist()}"
        )
    return classes, y_encoded.ravel()


def binarize_labels(y, label):
    """Derive the one-vs-rest target for `label`.

    Returns an int array parallel to `y` holding ``+1`` where
    ``y == label`` and ``-1`` elsewhere.
    """
    return np.where(np.asarray(y) == label, 1, -1)


def decode_labels(y_encoded, classes):
    """Convert encoded labels back into their original classes."""
    return np.asarray(classes).take(y_encoded)
