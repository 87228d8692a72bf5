#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

from hostml.preprocessing.standard_scaler import StandardScaler

__all__ = ["StandardScaler"]
