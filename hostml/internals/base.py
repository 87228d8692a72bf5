#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import contextlib
import inspect

import hostml.internals.logger as logger
from hostml.common.exceptions import NotFittedError
from hostml.common.serialization import deserialize, serialize
from hostml.internals.mixins import TagsMixin


class Base(TagsMixin):
    """Base class for hostml estimators.

    Subclasses should:

    - Define ``_get_param_names`` to extend the base implementation with
      any additional parameter names, and store every constructor argument
      unchanged on ``self`` under the same name.

    - Call ``_set_n_features_in`` in ``fit``; it marks the estimator fitted.

    - Implement ``_get_state`` / ``_set_state`` and register the class with
      ``hostml.common.serialization.register_serializable`` to support
      ``dump`` / ``load``.

    Parameters
    ----------
    verbose : int or boolean, default=False
        Sets logging level. It must be one of `hostml.internals.logger.level_*`.
        See :mod:`hostml.internals.logger` for the mapping.

    Examples
    --------

    .. code-block:: python

        import numpy as np
        from hostml.internals import Base

        class MyAlgo(Base):
            def __init__(self, *, param=123, verbose=False):
                super().__init__(verbose=verbose)
                self.param = param

            @classmethod
            def _get_param_names(cls):
                return [*super()._get_param_names(), "param"]

            def fit(self, X, y):
                self._set_n_features_in(X)
                return self

            def predict(self, X):
                self._check_is_fitted()
                return np.ones(len(X), dtype="int32")
    """

    def __init__(self, *, verbose=False):
        self.verbose = verbose

    def __repr__(self):
        """
        Pretty prints the arguments of a class using Scikit-learn standard :)
        """
        spec = inspect.getfullargspec(self.__init__)
        signature = [a for a in spec.args + spec.kwonlyargs if a != "self"]
        state = self.__dict__
        string = self.__class__.__name__ + "("
        for key in signature:
            if key not in state:
                continue
            if type(state[key]) is str:
                string += "{}='{}', ".format(key, state[key])
            else:
                string += "{}={}, ".format(key, state[key])
        string = string.rstrip(", ")
        return string + ")"

    @property
    def _verbose_level(self):
        """The current `verbose` setting as a `logger.level_enum`"""
        return logger._verbose_to_level(self.verbose)

    def _logging_scope(self):
        """Context raising the library log level to ``verbose`` for the
        duration of a call. A falsy ``verbose`` leaves the level untouched."""
        if self.verbose:
            return logger.set_level(self._verbose_level)
        return contextlib.nullcontext()

    @classmethod
    def _get_param_names(cls):
        """
        Returns a list of hyperparameter names owned by this class. It is
        expected that every child class overrides this method and appends its
        extra set of parameters that it in-turn owns. This is to simplify the
        implementation of `get_params` and `set_params` methods.
        """
        return ["verbose"]

    def get_params(self, deep=True):
        """
        Returns a dict of all params owned by this class. If the child class
        has appropriately overridden the `_get_param_names` method and does not
        need anything other than what is there in this method, then it doesn't
        have to override this method
        """
        return {name: getattr(self, name) for name in self._get_param_names()}

    def set_params(self, **params):
        """
        Accepts a dict of params and updates the corresponding ones owned by
        this class. If the child class has appropriately overridden the
        `_get_param_names` method and does not need anything other than what is,
        there in this method, then it doesn't have to override this method
        """
        if not params:
            return self
        valid_params = self._get_param_names()
        for key, value in params.items():
            if key not in valid_params:
                raise ValueError(
                    f"Invalid parameter {key!r} for `{type(self).__name__}`"
                )
            setattr(self, key, value)
        return self

    def _set_n_features_in(self, X):
        if isinstance(X, int):
            self.n_features_in_ = X
        else:
            shape = X.shape
            if len(shape) == 1:
                self.n_features_in_ = 1
            else:
                self.n_features_in_ = shape[1]

    def __sklearn_is_fitted__(self):
        # Every estimator sets `n_features_in_` on fit.
        return getattr(self, "n_features_in_", None) is not None

    def _check_is_fitted(self):
        if not self.__sklearn_is_fitted__():
            raise NotFittedError(
                f"This {type(self).__name__} instance is not fitted yet. Call "
                "'fit' with appropriate arguments before using this "
                "estimator."
            )

    def _get_state(self):
        """Mapping of the fitted attributes, used by ``dump``."""
        raise NotImplementedError

    def _set_state(self, state):
        """Restore fitted attributes produced by ``_get_state``."""
        raise NotImplementedError

    def dump(self):
        """Serialize the estimator, its hyperparameters and (when fitted) its
        learned state into a JSON compatible blob.

        See :mod:`hostml.common.serialization` for the layout.
        """
        return serialize(self)

    @classmethod
    def load(cls, blob):
        """Rebuild an estimator from a blob produced by ``dump``.

        Raises `IncompatibleStateError` if the blob does not describe an
        instance of this class or is structurally inconsistent.
        """
        return deserialize(blob, expected_cls=cls)
