#
# SPDX-FileCopyrightText: Copyright (c) 2021-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

import contextlib
import os
import threading


def _n_jobs_from_env():
    value = os.getenv("HOSTML_N_JOBS")
    if value is None or value.strip() == "":
        return None
    return int(value)


class _GlobalSettingsData(threading.local):  # pylint: disable=R0903
    """Thread-local storage class with per-thread initialization of default
    values for global settings"""

    def __init__(self):
        super().__init__()
        self.shared_state = {
            "_n_jobs": _n_jobs_from_env(),
        }


_global_settings_data = _GlobalSettingsData()


class GlobalSettings:
    """A thread-local borg class for tracking hostml global settings

    Estimators read library-wide defaults from here when the corresponding
    hyperparameter is left at ``None``. It is a thread-local borg, so updating
    an attribute on any instance of this class will update that attribute on
    *all* instances in the same thread.

    In general, hostml developers should simply access
    `hostml.global_settings` rather than re-instantiating separate instances
    of this class, but using a separate instance should not cause any logical
    errors.
    """

    def __init__(self):
        self.__dict__ = _global_settings_data.shared_state

    @property
    def n_jobs(self):
        """The default number of joblib workers for meta-estimators. ``None``
        trains sub-estimators sequentially. Seeded from ``HOSTML_N_JOBS``."""
        return self._n_jobs  # pylint: disable=no-member

    @n_jobs.setter
    def n_jobs(self, value):
        self._n_jobs = value


@contextlib.contextmanager
def using_n_jobs(n_jobs):
    """Context manager temporarily overriding the default ``n_jobs``.

    Examples
    --------
    >>> import hostml
    >>> with hostml.using_n_jobs(2):
    ...     print(hostml.global_settings.n_jobs)
    2
    """
    settings = GlobalSettings()
    prev = settings.n_jobs
    settings.n_jobs = n_jobs
    try:
        yield prev
    finally:
        settings.n_jobs = prev
