#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

from collections import namedtuple

import numpy as np

from hostml.common.exceptions import DimensionMismatch

host_array = namedtuple("host_array", "array n_rows n_cols dtype")


def determine_array_type(X):
    """Name of the container type of `X`, or None if unsupported."""
    if isinstance(X, np.ndarray):
        return "numpy"
    if isinstance(X, (list, tuple)):
        return "list"
    if hasattr(X, "__array__"):
        return "array"
    return None


def input_to_host_array(
    X,
    order="C",
    deepcopy=False,
    check_dtype=False,
    convert_to_dtype=False,
    check_cols=False,
    check_rows=False,
    ndim=2,
):
    """
    Convert input X to a NumPy array and validate its shape.

    Parameters
    ----------

    X : NumPy array, nested sequence or any object implementing
        ``__array__`` (e.g. a Pandas DataFrame).

    order: 'F', 'C' or 'K' (default: 'C')
        Memory layout of the returned array.

    deepcopy: boolean (default: False)
        Set to True to always return a copy of X.

    check_dtype: np.dtype or list of np.dtype (default: False)
        Set to a dtype (or list of dtypes) to throw a TypeError if X is not
        of one of them. Checked before any conversion.

    convert_to_dtype: np.dtype (default: False)
        Set to a dtype if you want X to be converted to that dtype if it is
        not that dtype already.

    check_cols: int (default: False)
        Set to an int `i` to check that input X has `i` columns. Set to False
        (default) to not check at all.

    check_rows: int (default: False)
        Set to an int `i` to check that input X has `i` rows. Set to False
        (default) to not check at all.

    ndim: 1 or 2 (default: 2)
        Expected dimensionality. A column vector is accepted where 1-D is
        expected and is raveled.

    Returns
    -------
    `host_array`: namedtuple('host_array', 'array n_rows n_cols dtype')

    """
    if determine_array_type(X) is None:
        raise TypeError(
            f"Unsupported input type {type(X).__name__}. Expected a NumPy "
            "array or array-like."
        )

    arr = np.array(X, copy=True) if deepcopy else np.asarray(X)

    if check_dtype:
        dtypes = check_dtype if isinstance(check_dtype, list) else [check_dtype]
        if arr.dtype not in [np.dtype(d) for d in dtypes]:
            raise TypeError(
                f"Expected input to be of type in {dtypes} but got "
                f"{arr.dtype}"
            )

    if ndim == 1:
        if arr.ndim == 2 and arr.shape[1] == 1:
            arr = arr.ravel()
        elif arr.ndim != 1:
            raise DimensionMismatch(
                f"Expected a 1d array, got an array of shape {arr.shape} "
                "instead."
            )
    elif arr.ndim != 2:
        raise DimensionMismatch(
            f"Expected a 2d array, got an array of shape {arr.shape} instead."
        )

    if convert_to_dtype:
        arr = arr.astype(convert_to_dtype, copy=False)

    if order != "K":
        arr = np.asarray(arr, order=order)

    n_rows = arr.shape[0]
    n_cols = arr.shape[1] if arr.ndim > 1 else 1

    if check_cols is not False and n_cols != check_cols:
        raise DimensionMismatch(
            f"Expected {check_cols} columns but got {n_cols} columns."
        )

    if check_rows is not False and n_rows != check_rows:
        raise DimensionMismatch(
            f"Expected {check_rows} rows but got {n_rows} rows."
        )

    return host_array(array=arr, n_rows=n_rows, n_cols=n_cols, dtype=arr.dtype)
