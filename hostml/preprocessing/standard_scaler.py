#
# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import numpy as np

from hostml.common.doc_utils import generate_docstring
from hostml.common.exceptions import IncompatibleStateError
from hostml.common.serialization import (
    check_state_keys,
    register_serializable,
)
from hostml.internals.base import Base
from hostml.internals.input_utils import input_to_host_array
from hostml.internals.mixins import TransformerMixin


@register_serializable("standard_scaler")
class StandardScaler(Base, TransformerMixin):
    """Standardize features by removing the mean and scaling to unit
    variance.

    The standard deviation is the population one (``ddof=0``). Features with
    zero variance are left unscaled.

    Parameters
    ----------
    verbose : int or boolean, default=False
        Sets logging level. It must be one of `hostml.internals.logger.level_*`.

    Attributes
    ----------
    mean_ : array, shape (n_features,)
        The mean value for each feature in the training set.
    scale_ : array, shape (n_features,)
        Per feature scaling, the standard deviation or 1.0 for constant
        features.

    Examples
    --------
    >>> from hostml.preprocessing import StandardScaler
    >>> scaler = StandardScaler()
    >>> scaler.fit_transform([[0.0, 1.0], [2.0, 1.0]])
    array([[-1.,  0.],
           [ 1.,  0.]])
    """

    @generate_docstring(y=None)
    def fit(self, X, y=None) -> "StandardScaler":
        """Compute the mean and std to be used for later scaling."""
        X = input_to_host_array(X, convert_to_dtype=np.float64).array
        self.mean_ = X.mean(axis=0)
        scale = X.std(axis=0)
        scale[scale == 0.0] = 1.0
        self.scale_ = scale
        self._set_n_features_in(X)
        return self

    @generate_docstring(
        return_values={
            "name": "X_new",
            "type": "dense",
            "description": "Standardized samples.",
            "shape": "(n_samples, n_features)",
        }
    )
    def transform(self, X):
        """Perform standardization by centering and scaling."""
        self._check_is_fitted()
        X = input_to_host_array(
            X, convert_to_dtype=np.float64, check_cols=self.n_features_in_
        ).array
        return (X - self.mean_) / self.scale_

    def inverse_transform(self, X):
        """Scale back the data to the original representation."""
        self._check_is_fitted()
        X = input_to_host_array(
            X, convert_to_dtype=np.float64, check_cols=self.n_features_in_
        ).array
        return X * self.scale_ + self.mean_

    def _get_state(self):
        return {
            "mean": self.mean_,
            "scale": self.scale_,
            "n_features_in": self.n_features_in_,
        }

    def _set_state(self, state):
        check_state_keys(
            state, ["mean", "scale", "n_features_in"], "StandardScaler"
        )
        n_features = state["n_features_in"]
        mean = np.asarray(state["mean"], dtype=np.float64)
        scale = np.asarray(state["scale"], dtype=np.float64)
        if mean.shape != (n_features,) or scale.shape != (n_features,):
            raise IncompatibleStateError(
                f"StandardScaler expects mean and scale of shape "
                f"({n_features},), got {mean.shape} and {scale.shape}"
            )
        self.mean_ = mean
        self.scale_ = scale
        self.n_features_in_ = n_features
