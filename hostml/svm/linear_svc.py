# SPDX-FileCopyrightText: Copyright (c) 2021-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import numpy as np
from sklearn.utils import check_random_state

import hostml.internals.logger as logger
from hostml.common.doc_utils import generate_docstring
from hostml.common.serialization import register_serializable
from hostml.internals.base import Base
from hostml.internals.mixins import BinaryOnlyTagMixin, ClassifierMixin
from hostml.linear_model.base import (
    LinearClassifierMixin,
    add_bias_column,
    minibatches,
    prepare_binary_problem,
    split_weights,
)

__all__ = ("LinearSVC",)


@register_serializable("linear_svc")
class LinearSVC(
    LinearClassifierMixin, Base, ClassifierMixin, BinaryOnlyTagMixin
):
    """
    Binary linear Support Vector Classification.

    The hinge-loss primal problem is solved with the Pegasos mini-batch
    stochastic sub-gradient method (Shalev-Shwartz et al., 2011). Combine with
    :class:`OneVsRestClassifier<hostml.multiclass.OneVsRestClassifier>` for
    multiclass problems.

    Parameters
    ----------
    reg_param : float, default=1.0
        The regularization strength ``lambda``. Must be strictly positive.
    fit_bias : bool, default=False
        Whether to fit a bias term, as an extra constant feature.
    bias_scale : float, default=1.0
        Value of the constant feature used when ``fit_bias=True``.
    max_iter : int, default=100
        Number of sub-gradient steps.
    batch_size : int, default=50
        Number of samples drawn at each step.
    random_state : int, RandomState instance or None, default=None
        Seed of the mini-batch sampling.
    verbose : int or boolean, default=False
        Sets logging level. It must be one of `hostml.internals.logger.level_*`.

    Attributes
    ----------
    coef_ : array, shape (n_features,)
        Weights assigned to the features.
    intercept_ : float
        The constant term of the decision function, 0.0 when
        ``fit_bias=False``.
    classes_ : array, shape (2,)
        The two class labels. ``classes_[1]`` is the positive class.

    Examples
    --------
    >>> import numpy as np
    >>> from hostml.svm import LinearSVC
    >>> X = np.array([[1, 1], [2, 1], [1, 2], [-2, -2], [-1, -3], [-2, -1]],
    ...              dtype=np.float64)
    >>> y = np.array([1, 1, 1, -1, -1, -1])
    >>> clf = LinearSVC(random_state=1).fit(X, y)
    >>> clf.predict(X)
    array([ 1,  1,  1, -1, -1, -1])
    """

    @classmethod
    def _get_param_names(cls):
        return [
            *super()._get_param_names(),
            "reg_param",
            "fit_bias",
            "bias_scale",
            "max_iter",
            "batch_size",
            "random_state",
        ]

    def __init__(
        self,
        *,
        reg_param=1.0,
        fit_bias=False,
        bias_scale=1.0,
        max_iter=100,
        batch_size=50,
        random_state=None,
        verbose=False,
    ):
        super().__init__(verbose=verbose)

        self.reg_param = reg_param
        self.fit_bias = fit_bias
        self.bias_scale = bias_scale
        self.max_iter = max_iter
        self.batch_size = batch_size
        self.random_state = random_state

    def _more_tags(self):
        return {"non_deterministic": self.random_state is None}

    @generate_docstring()
    def fit(self, X, y) -> "LinearSVC":
        """Fit the model according to the given training data."""
        if self.reg_param <= 0:
            raise ValueError(
                f"Expected reg_param > 0, got {self.reg_param}"
            )
        X, y, classes = prepare_binary_problem(X, y)
        n_samples, n_features = X.shape
        samples = add_bias_column(X, self.fit_bias, self.bias_scale)
        rng = check_random_state(self.random_state)
        batch_size = min(self.batch_size, n_samples)

        weights = np.zeros(samples.shape[1])
        radius = 1.0 / np.sqrt(self.reg_param)
        with self._logging_scope():
            for t, ids in minibatches(n_samples, batch_size, self.max_iter, rng):
                data, values = samples[ids], y[ids]
                violated = values * (data @ weights) < 1.0
                eta = 1.0 / (self.reg_param * (t + 1))
                weights *= 1.0 - eta * self.reg_param
                if violated.any():
                    subgrad = values[violated] @ data[violated]
                    weights += (eta / batch_size) * subgrad
                # project onto the ball of radius 1 / sqrt(reg_param)
                norm = np.linalg.norm(weights)
                if norm > radius:
                    weights *= radius / norm
                logger.trace(
                    "LinearSVC step %d: %d margin violations",
                    t,
                    int(violated.sum()),
                )
            logger.debug(
                "LinearSVC fitted on %d samples, %d features in %d steps",
                n_samples,
                n_features,
                self.max_iter,
            )

        self.coef_, self.intercept_ = split_weights(
            weights, self.fit_bias, self.bias_scale
        )
        self.classes_ = classes
        self._set_n_features_in(X)
        return self
