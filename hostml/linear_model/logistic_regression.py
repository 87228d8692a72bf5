#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import numpy as np
from scipy.special import expit
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

__all__ = ("LogisticRegression",)


@register_serializable("logistic_regression")
class LogisticRegression(
    LinearClassifierMixin, Base, ClassifierMixin, BinaryOnlyTagMixin
):
    """
    Binary logistic regression with L2 regularization, trained with
    mini-batch stochastic gradient descent and a ``1 / (reg_param * t)``
    learning rate schedule.

    Parameters
    ----------
    reg_param : float, default=1.0
        The regularization strength. Must be strictly positive.
    fit_bias : bool, default=False
        Whether to fit a bias term, as an extra constant feature.
    bias_scale : float, default=1.0
        Value of the constant feature used when ``fit_bias=True``.
    max_iter : int, default=100
        Number of gradient steps.
    batch_size : int, default=50
        Number of samples drawn at each step.
    random_state : int, RandomState instance or None, default=None
        Seed of the mini-batch sampling.
    verbose : int or boolean, default=False
        Sets logging level. It must be one of `hostml.internals.logger.level_*`.

    Attributes
    ----------
    coef_ : array, shape (n_features,)
    intercept_ : float
    classes_ : array, shape (2,)
        ``classes_[1]`` is the class whose probability ``predict_proba``
        reports in its second column.
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
    def fit(self, X, y) -> "LogisticRegression":
        """
        Fit the model with X and y.
        """
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
        with self._logging_scope():
            for t, ids in minibatches(n_samples, batch_size, self.max_iter, rng):
                data, values = samples[ids], y[ids]
                # d/dw log(1 + exp(-y w.x)) = -y x sigmoid(-y w.x)
                coefs = values * expit(-values * (data @ weights))
                grad = self.reg_param * weights - coefs @ data / len(ids)
                weights -= grad / (self.reg_param * (t + 1))
            logger.debug(
                "LogisticRegression fitted on %d samples, %d features in "
                "%d steps",
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

    @generate_docstring(
        return_values={
            "name": "probs",
            "type": "dense",
            "description": "Probabilities of ``classes_[0]`` and "
            "``classes_[1]`` for each sample.",
            "shape": "(n_samples, 2)",
        }
    )
    def predict_proba(self, X):
        """Compute probabilities of possible outcomes for samples in X."""
        positive = expit(self.decision_function(X))
        return np.column_stack([1.0 - positive, positive])
