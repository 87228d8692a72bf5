#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

from hostml.common.exceptions import (
    DimensionMismatch,
    IncompatibleStateError,
    InvalidLabelSet,
    NotFittedError,
)
from hostml.common.serialization import (
    deserialize,
    dumps,
    loads,
    register_serializable,
    serialize,
)
from hostml.internals import logger
from hostml.internals.input_utils import input_to_host_array

__all__ = [
    "DimensionMismatch",
    "IncompatibleStateError",
    "InvalidLabelSet",
    "NotFittedError",
    "deserialize",
    "dumps",
    "input_to_host_array",
    "loads",
    "logger",
    "register_serializable",
    "serialize",
]
