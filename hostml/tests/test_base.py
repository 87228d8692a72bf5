#
# SPDX-FileCopyrightText: Copyright (c) 2020-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#
import inspect
import threading

import numpy as np
import pytest
from sklearn.base import clone

import hostml
from hostml.common.exceptions import NotFittedError
from hostml.internals import global_settings
from hostml.internals.global_settings import GlobalSettings, using_n_jobs

all_base_children = {
    "LinearSVC": hostml.LinearSVC,
    "LogisticRegression": hostml.LogisticRegression,
    "OneVsRestClassifier": hostml.OneVsRestClassifier,
    "StandardScaler": hostml.StandardScaler,
}


def _instantiate(klass):
    if klass is hostml.OneVsRestClassifier:
        return klass(hostml.LinearSVC())
    return klass()


def test_base_class_usage():
    base = hostml.Base()
    assert base._get_param_names() == ["verbose"]
    assert base.get_params() == {"verbose": False}
    assert repr(base) == "Base(verbose=False)"
    assert not base.__sklearn_is_fitted__()
    with pytest.raises(NotFittedError):
        base._check_is_fitted()


def test_base_hasattr():
    base = hostml.Base()
    assert hasattr(base, "verbose")
    assert not hasattr(base, "somefakeattr")
    assert not hasattr(base, "n_features_in_")


@pytest.mark.parametrize("use_integer_n_features", [True, False])
def test_base_n_features_in(use_integer_n_features):
    X_train = np.zeros((5, 8))
    clf = hostml.Base()

    if use_integer_n_features:
        clf._set_n_features_in(8)
    else:
        clf._set_n_features_in(X_train)
    assert clf.n_features_in_ == 8
    assert clf.__sklearn_is_fitted__()

    clf._set_n_features_in(np.zeros(5))
    assert clf.n_features_in_ == 1


@pytest.mark.parametrize("child_class", list(all_base_children.keys()))
def test_base_children__get_param_names(child_class: str):
    """
    This test ensures that the arguments in `Base.__init__` are available in
    all derived classes `_get_param_names`
    """
    klass = all_base_children[child_class]
    sig = inspect.signature(klass.__init__)
    init_names = [name for name in sig.parameters if name != "self"]

    assert sorted(klass._get_param_names()) == sorted(init_names)

    model = _instantiate(klass)
    params = model.get_params()
    assert sorted(params) == sorted(init_names)

    copy = clone(model)
    assert type(copy) is klass
    assert copy.get_params().keys() == params.keys()


@pytest.mark.parametrize("child_class", list(all_base_children.keys()))
def test_base_children_repr(child_class: str):
    model = _instantiate(all_base_children[child_class])
    assert repr(model).startswith(child_class + "(")
    assert "verbose=False" in repr(model)


@pytest.mark.parametrize("child_class", list(all_base_children.keys()))
def test_base_children_unfitted(child_class: str):
    model = _instantiate(all_base_children[child_class])
    assert not model.__sklearn_is_fitted__()
    assert model.dump()["state"] is None


def test_estimator_types_and_tags():
    assert hostml.LinearSVC._estimator_type == "classifier"
    assert hostml.OneVsRestClassifier._estimator_type == "classifier"
    assert hostml.StandardScaler._estimator_type == "transformer"

    tags = hostml.OneVsRestClassifier._get_static_tags()
    assert tags["requires_y"]
    assert not tags["binary_only"]
    assert hostml.LinearSVC._get_static_tags()["binary_only"]
    assert not hostml.StandardScaler._get_static_tags()["requires_y"]


def test_global_settings_borg():
    a = GlobalSettings()
    b = GlobalSettings()
    prev = a.n_jobs
    try:
        a.n_jobs = 4
        assert b.n_jobs == 4
        assert hostml.global_settings.n_jobs == 4
    finally:
        a.n_jobs = prev


def test_using_n_jobs():
    prev = GlobalSettings().n_jobs
    with using_n_jobs(3) as old:
        assert old == prev
        assert GlobalSettings().n_jobs == 3
    assert GlobalSettings().n_jobs == prev

    with pytest.raises(RuntimeError):
        with using_n_jobs(2):
            raise RuntimeError
    assert GlobalSettings().n_jobs == prev


def test_global_settings_thread_local():
    seen = []

    def worker():
        seen.append(GlobalSettings().n_jobs)

    with using_n_jobs(5):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
    assert seen == [global_settings._n_jobs_from_env()]


@pytest.mark.parametrize(
    "value, expected", [(None, None), ("", None), ("2", 2), ("-1", -1)]
)
def test_n_jobs_from_env(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("HOSTML_N_JOBS", raising=False)
    else:
        monkeypatch.setenv("HOSTML_N_JOBS", value)
    assert global_settings._n_jobs_from_env() == expected
