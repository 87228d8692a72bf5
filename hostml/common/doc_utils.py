#
# SPDX-FileCopyrightText: Copyright (c) 2019-2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

"""
Decorator to generate common docstrings in the codebase.

generate_docstring is meant to be used by fit/predict/et.al methods that have
the typical signatures (i.e. fit(X, y) or predict(X)). It detects the
parameters and default values and appends the appropriate ``Parameters`` and
``Returns`` sections, with some configurability for shapes and formats. The
docstrings are generated at import time.

More data types can be added as we need them.
"""

from inspect import signature

_parameters_docstrings = {
    "dense": "{name} : array-like shape = {shape}\n"
    "    Dense matrix of floats or doubles. Other numeric dtypes are\n"
    "    converted to float64.\n"
    "    Acceptable formats: NumPy ndarray, nested sequences and any object\n"
    "    implementing the ``__array__`` protocol.",
    "dense_anydtype": "{name} : array-like shape = {shape}\n"
    "    Dense vector of any dtype, numeric or string.\n"
    "    Acceptable formats: NumPy ndarray, nested sequences and any object\n"
    "    implementing the ``__array__`` protocol.",
    "sample_weight": "sample_weight : array-like shape = (n_samples,), default={default}\n"  # noqa
    "    The weights for each observation. If None, all observations\n"
    "    are assigned equal weight.",
    None: "{name} : None\n"
    "    Ignored. This parameter exists for compatibility only.",
}

_return_values_docstrings = {
    "dense": "{name} : numpy.ndarray, shape = {shape}\n" "    {description}",
    "custom_type": "{name} : {type}\n" "    {description}",
}

_simple_params = ["sample_weight"]


def generate_docstring(
    X="dense",
    X_shape="(n_samples, n_features)",
    y="dense_anydtype",
    y_shape="(n_samples,)",
    skip_parameters=[],
    return_values=False,
):
    """
    Decorator to generate docstrings of common functions in the codebase.
    It will auto detect what parameters and default values the function has.

    Currently auto detected variables include:
    - X
    - y
    - sample_weight

    Examples
    --------

    # for a function that passes all dense parameters, no need to specify
    # anything, and the decorator auto detects the parameters and defaults

    @generate_docstring()
    def fit(self, X, y):

    # to specify return values

    @generate_docstring(return_values={'name': 'preds',
                                       'type': 'dense',
                                       'description': 'Predicted values',
                                       'shape': '(n_samples,)'})

    Parameters
    -----------
    X : str (default = 'dense')
        Data type of variable X. Currently accepted types are: dense,
        dense_anydtype, None
    X_shape : str (default = '(n_samples, n_features)')
        Shape of variable X
    y : str (default = 'dense_anydtype')
        Data type of variable y. Currently accepted types are: dense,
        dense_anydtype, None
    y_shape : str (default = '(n_samples,)')
        Shape of variable y
    skip_parameters : list of str (default = [])
        Use if you want the decorator to skip generating a docstring entry
        for a specific parameter
    return_values : dict or list of dicts (default = False)
        Use to generate docstrings of return values. One dictionary per
        return value, this is the format:
            {'name': 'name_of_variable',
             'type': 'data type of returned value',
             'description': 'Description of variable',
             'shape': 'shape of returned variable'}

        If type is dense then the type is generated from the corresponding
        entry in _return_values_docstrings. Otherwise the type is used as
        specified.
    """

    def deco(func):
        params = signature(func).parameters
        if func.__doc__ is None:
            func.__doc__ = ""

        if "X" in params or "y" in params:
            func.__doc__ += "\nParameters\n----------\n"

        for par, value in params.items():
            if par == "self" or par in skip_parameters:
                continue
            elif par == "X":
                func.__doc__ += _parameters_docstrings[X].format(
                    name=par, shape=X_shape
                )
            elif par == "y":
                func.__doc__ += _parameters_docstrings[y].format(
                    name=par, shape=y_shape
                )
            elif par in _simple_params:
                func.__doc__ += _parameters_docstrings[par].format(
                    default=value.default
                )
            else:
                continue
            func.__doc__ += "\n\n"

        if return_values:
            func.__doc__ += "\nReturns\n-------\n"

            # a single return value may be passed as a plain dictionary
            rets = (
                [return_values]
                if not isinstance(return_values, list)
                else return_values
            )

            for ret in rets:
                ret = dict(ret)
                if ret["type"] in _return_values_docstrings:
                    key = ret.pop("type")
                else:
                    key = "custom_type"
                func.__doc__ += _return_values_docstrings[key].format(**ret)
                func.__doc__ += "\n\n"

        return func

    return deco
