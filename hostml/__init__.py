#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

from hostml.internals.base import Base
from hostml.internals.global_settings import GlobalSettings, using_n_jobs

from hostml.linear_model.logistic_regression import LogisticRegression
from hostml.multiclass.multiclass import OneVsRestClassifier
from hostml.preprocessing.standard_scaler import StandardScaler
from hostml.svm.linear_svc import LinearSVC

from hostml.metrics import accuracy_score

__version__ = "0.1.0"

global_settings = GlobalSettings()

__all__ = [
    "Base",
    "GlobalSettings",
    "LinearSVC",
    "LogisticRegression",
    "OneVsRestClassifier",
    "StandardScaler",
    "accuracy_score",
    "global_settings",
    "using_n_jobs",
]
