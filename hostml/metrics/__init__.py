#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

from hostml.metrics._classification import accuracy_score

__all__ = ["accuracy_score"]
