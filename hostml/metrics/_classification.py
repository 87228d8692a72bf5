#
# SPDX-FileCopyrightText: Copyright (c) 2021-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import numpy as np

from hostml.internals.input_utils import input_to_host_array


def accuracy_score(y_true, y_pred, *, sample_weight=None, normalize=True):
    """
    Accuracy classification score.

    Parameters
    ----------
    y_true : array-like of shape (n_samples,)
        Ground truth (correct) labels.
    y_pred : array-like of shape (n_samples,)
        Predicted labels.
    sample_weight : array-like of shape (n_samples,)
        Sample weights.
    normalize : bool
        If ``False``, return the number of correctly classified samples.
        Otherwise, return the fraction of correctly classified samples.

    Returns
    -------
    score : float
        The fraction of correctly classified samples, or the number of correctly
        classified samples if ``normalize == False``.

    Raises
    ------
    DimensionMismatch
        If the inputs do not hold the same number of samples.
    """
    y_true = input_to_host_array(y_true, order="K", ndim=1).array
    y_pred = input_to_host_array(
        y_pred, order="K", check_rows=len(y_true), ndim=1
    ).array

    if sample_weight is not None:
        sample_weight = input_to_host_array(
            sample_weight,
            order="K",
            check_dtype=[np.float32, np.float64, np.int32, np.int64],
            check_rows=len(y_true),
            ndim=1,
        ).array

    correct = y_true == y_pred

    if normalize:
        return float(np.average(correct, weights=sample_weight))
    elif sample_weight is not None:
        return float(np.dot(correct, sample_weight))
    else:
        return float(np.count_nonzero(correct))
