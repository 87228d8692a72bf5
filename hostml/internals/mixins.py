#
# SPDX-FileCopyrightText: Copyright (c) 2021-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

import inspect
from copy import deepcopy

from hostml.common.doc_utils import generate_docstring

###############################################################################
#                          Tag Functionality Mixin                            #
###############################################################################


# Default tags for estimators inheriting from Base.
# tag system based on experimental tag system from Scikit-learn >=0.21
# https://scikit-learn.org/stable/developers/develop.html#estimator-tags
_default_tags = {
    "allow_nan": False,
    "binary_only": False,
    "multilabel": False,
    "multioutput": False,
    "no_validation": False,
    "non_deterministic": False,
    "poor_score": False,
    "requires_fit": True,
    "requires_y": False,
    "stateless": False,
    "X_types": ["2darray"],
}


class TagsMixin:
    @classmethod
    def _get_static_tags(cls):
        """
        Collect the static tags of the class. Tags are defined by
        ``_more_static_tags`` static methods along the MRO; the MRO is
        traversed in reverse so that children classes overwrite their
        parents' tags.
        """
        tags = deepcopy(_default_tags)
        for cl in reversed(inspect.getmro(cls)):
            if "_more_static_tags" in vars(cl):
                tags.update(cl._more_static_tags())
        return tags

    def _get_tags(self):
        """
        Collect the static tags, then the dynamic ones defined by
        ``_more_tags`` methods, which depend on the instance, e.g.:

        def _more_tags(self):
            return {'non_deterministic': self.random_state is None}

        Dynamic tags override static tags.
        """
        tags = self._get_static_tags()
        for cl in reversed(inspect.getmro(type(self))):
            if "_more_tags" in vars(cl):
                tags.update(cl._more_tags(self))
        return tags


###############################################################################
#                          Estimator Type Mixins                              #
#                 Estimators should only use one of these.                    #
###############################################################################


class ClassifierMixin:
    """
    Mixin class for classifier estimators in hostml
    """

    _estimator_type = "classifier"

    @generate_docstring(
        return_values={
            "name": "score",
            "type": "float",
            "description": (
                "Accuracy of self.predict(X) wrt. y "
                "(fraction where y == pred_y)"
            ),
        }
    )
    def score(self, X, y, sample_weight=None):
        """
        Scoring function for classifier estimators based on mean accuracy.

        """
        from hostml.metrics import accuracy_score

        preds = self.predict(X)
        return accuracy_score(y, preds, sample_weight=sample_weight)

    @staticmethod
    def _more_static_tags():
        return {"requires_y": True}


class TransformerMixin:
    """
    Mixin class for transformer estimators in hostml
    """

    _estimator_type = "transformer"

    def fit_transform(self, X, y=None):
        """Fit to X, then transform it."""
        return self.fit(X, y).transform(X)


###############################################################################
#                              Other Mixins                                   #
###############################################################################


class BinaryOnlyTagMixin:
    """
    Mixin class for classifiers that only separate two classes.
    """

    @staticmethod
    def _more_static_tags():
        return {"binary_only": True}
