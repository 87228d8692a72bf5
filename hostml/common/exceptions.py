#
# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#


class NotFittedError(ValueError, AttributeError):
    """Exception class to raise if estimator is used before fitting.

    This class inherits from both ValueError and AttributeError to help with
    exception handling and backward compatibility.
    """


class InvalidLabelSet(ValueError):
    """Raised when the training labels cannot define the requested
    classification problem (too few distinct classes, a binary estimator given
    more than two classes, or continuous targets)."""


class DimensionMismatch(ValueError):
    """Raised when the number of samples or features of an input disagrees
    with another input or with the shape seen at fit time."""


class IncompatibleStateError(ValueError):
    """Raised when a serialized estimator state is structurally inconsistent
    with the estimator it is loaded into."""
