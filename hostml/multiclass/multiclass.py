# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
from collections import namedtuple

import numpy as np
from joblib import Parallel, delayed
from sklearn.base import clone

import hostml.internals.logger as logger
from hostml.common.classification import binarize_labels, preprocess_labels
from hostml.common.doc_utils import generate_docstring
from hostml.common.exceptions import (
    DimensionMismatch,
    IncompatibleStateError,
    NotFittedError,
)
from hostml.common.serialization import (
    check_state_keys,
    register_serializable,
)
from hostml.internals.base import Base
from hostml.internals.global_settings import GlobalSettings
from hostml.internals.input_utils import input_to_host_array
from hostml.internals.mixins import ClassifierMixin

# Everything learned by `fit`, published with a single assignment so that
# readers never see classes and estimators from different fits.
_FittedOvR = namedtuple("_FittedOvR", "classes estimators n_features")


def _fit_binary(estimator, X, y):
    """Fit a fresh clone of `estimator` on a +1/-1 target."""
    estimator = clone(estimator)
    estimator.fit(X, y)
    return estimator


def _decision_column(estimator, X, index):
    scores = np.asarray(estimator.decision_function(X), dtype=np.float64)
    if scores.size != X.shape[0]:
        raise DimensionMismatch(
            f"Sub-estimator for class index {index} returned {scores.size} "
            f"scores for {X.shape[0]} samples"
        )
    return scores.reshape(-1)


@register_serializable("ovr")
class OneVsRestClassifier(Base, ClassifierMixin):
    """
    One-vs-Rest (OvR) multiclass strategy.

    One binary classifier is fitted per class, discriminating that class
    (labelled ``+1``) against all the others (labelled ``-1``). At prediction
    time, each sample is assigned the class whose classifier reports the
    highest decision value.

    Any estimator can be used as ``estimator`` provided it implements:

    - ``fit(X, y)`` for ``y`` made of ``+1`` / ``-1`` values;
    - ``decision_function(X)`` returning one real score per sample, larger
      meaning more confidence in the ``+1`` class;
    - ``get_params(deep=False)`` returning the constructor arguments, so
      that a fresh copy can be built for every class;
    - to support ``dump`` / ``load``, the serialization contract of
      :mod:`hostml.common.serialization`.

    The ``estimator`` itself is never fitted.

    Parameters
    ----------
    estimator : estimator object
        The binary classifier used as a prototype for every class.
    n_jobs : int or None, default=None
        Number of joblib workers fitting the per-class classifiers. ``None``
        falls back to ``hostml.global_settings.n_jobs``, which trains
        sequentially unless configured otherwise.
    verbose : int or boolean, default=False
        Sets logging level. It must be one of `hostml.internals.logger.level_*`.

    Attributes
    ----------
    classes_ : array, shape (`n_classes_`,)
        Sorted class labels seen during fit.
    estimators_ : list of `n_classes_` estimators
        Fitted binary classifiers, ``estimators_[k]`` being the one for
        ``classes_[k]``.
    n_classes_ : int
        Number of classes.
    n_features_in_ : int
        Number of features seen during fit.

    Notes
    -----
    When several classes share the highest decision value, the one that
    comes first in ``classes_`` is predicted.

    Examples
    --------
    >>> from sklearn.datasets import make_blobs
    >>> from hostml.multiclass import OneVsRestClassifier
    >>> from hostml.svm import LinearSVC

    >>> X, y = make_blobs(n_samples=60, centers=3, random_state=0)
    >>> cls = OneVsRestClassifier(LinearSVC(fit_bias=True, random_state=0))
    >>> cls = cls.fit(X, y)
    >>> cls.classes_
    array([0, 1, 2])
    """

    def __init__(self, estimator, *, n_jobs=None, verbose=False):
        super().__init__(verbose=verbose)
        self.estimator = estimator
        self.n_jobs = n_jobs

    @classmethod
    def _get_param_names(cls):
        return [*super()._get_param_names(), "estimator", "n_jobs"]

    def _fitted_model(self):
        model = self.__dict__.get("_model")
        if model is None:
            raise NotFittedError(
                "This OneVsRestClassifier instance is not fitted yet. Call "
                "'fit' with appropriate arguments before using this "
                "estimator."
            )
        return model

    @property
    def classes_(self):
        return self._fitted_model().classes

    @property
    def estimators_(self):
        return list(self._fitted_model().estimators)

    @property
    def n_classes_(self):
        return len(self._fitted_model().classes)

    @property
    def n_features_in_(self):
        return self._fitted_model().n_features

    @generate_docstring()
    def fit(self, X, y) -> "OneVsRestClassifier":
        """
        Fit one binary classifier per class.
        """
        X = input_to_host_array(X, order="K").array
        classes, y_ind = preprocess_labels(y, n_samples=X.shape[0])

        n_jobs = self.n_jobs
        if n_jobs is None:
            n_jobs = GlobalSettings().n_jobs

        with self._logging_scope():
            logger.debug(
                "Fitting %d one-vs-rest classifiers on %d samples "
                "(n_jobs=%s)",
                len(classes),
                X.shape[0],
                n_jobs,
            )
            estimators = Parallel(n_jobs=n_jobs)(
                delayed(_fit_binary)(
                    self.estimator, X, binarize_labels(y_ind, index)
                )
                for index in range(len(classes))
            )

        self._model = _FittedOvR(
            classes=classes,
            estimators=tuple(estimators),
            n_features=X.shape[1],
        )
        return self

    def _decision_matrix(self, model, X):
        X = input_to_host_array(
            X, order="K", check_cols=model.n_features
        ).array
        columns = [
            _decision_column(estimator, X, index)
            for index, estimator in enumerate(model.estimators)
        ]
        return np.column_stack(columns)

    @generate_docstring(
        return_values={
            "name": "results",
            "type": "dense",
            "description": "Decision function values, column ``k`` coming "
            "from the classifier of ``classes_[k]``.",
            "shape": "(n_samples, n_classes)",
        }
    )
    def decision_function(self, X):
        """
        Calculate the decision function of every per-class classifier.
        """
        return self._decision_matrix(self._fitted_model(), X)

    @generate_docstring(
        return_values={
            "name": "preds",
            "type": "dense",
            "description": "Predicted class labels",
            "shape": "(n_samples,)",
        }
    )
    def predict(self, X):
        """
        Predict the class with the highest decision value for each sample.
        """
        model = self._fitted_model()
        scores = self._decision_matrix(model, X)
        # argmax returns the first maximal column, ties go to the lowest index
        return model.classes.take(np.argmax(scores, axis=1))

    def _get_state(self):
        model = self._fitted_model()
        return {
            "classes": model.classes,
            "n_features_in": model.n_features,
            "estimators": list(model.estimators),
        }

    def _set_state(self, state):
        check_state_keys(
            state,
            ["classes", "n_features_in", "estimators"],
            "OneVsRestClassifier",
        )
        classes = np.asarray(state["classes"])
        estimators = state["estimators"]
        n_features = state["n_features_in"]

        if classes.ndim != 1 or len(classes) < 2:
            raise IncompatibleStateError(
                f"Expected at least 2 classes, got {classes.tolist()}"
            )
        if not isinstance(estimators, list) or len(estimators) != len(
            classes
        ):
            n_estimators = (
                len(estimators) if isinstance(estimators, list) else None
            )
            raise IncompatibleStateError(
                f"Expected {len(classes)} sub-estimators, one per class, got "
                f"{n_estimators}"
            )
        for index, estimator in enumerate(estimators):
            if type(estimator) is not type(self.estimator):
                raise IncompatibleStateError(
                    f"Sub-estimator for class index {index} is a "
                    f"{type(estimator).__name__}, expected a "
                    f"{type(self.estimator).__name__}"
                )
            if getattr(estimator, "n_features_in_", n_features) != n_features:
                raise IncompatibleStateError(
                    f"Sub-estimator for class index {index} was fitted on "
                    f"{estimator.n_features_in_} features, expected "
                    f"{n_features}"
                )

        self._model = _FittedOvR(
            classes=classes,
            estimators=tuple(estimators),
            n_features=n_features,
        )
