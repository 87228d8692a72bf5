#
# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0
#

"""
Explicit, tagged serialization of estimators.

Every persistable estimator class is registered under a stable type tag. A
serialized estimator ("blob") is a nested structure made only of dicts,
lists, strings, numbers, booleans and None::

    {
        "type": "<tag>",
        "params": {<constructor keyword arguments>},
        "state": {<fitted attributes>} or None,
    }

NumPy arrays are stored as ``{"__ndarray__": <dtype str>, "shape": [...],
"data": [...]}`` and estimators nested in params or state as
``{"__estimator__": <blob>}``. Blobs are therefore JSON compatible, see
`dumps` / `loads`.

To make a new estimator persistable, decorate it with
``@register_serializable("<tag>")`` and implement ``_get_state`` (return a
mapping of fitted attributes) and ``_set_state`` (restore them, raising
`IncompatibleStateError` on malformed input).
"""

import json

import numpy as np

from hostml.common.exceptions import IncompatibleStateError

__all__ = [
    "register_serializable",
    "serialize",
    "deserialize",
    "dumps",
    "loads",
    "check_state_keys",
]

_BLOB_KEYS = ("type", "params", "state")

_registry = {}


def register_serializable(tag):
    """Class decorator registering an estimator class under `tag`."""

    def deco(cls):
        registered = _registry.get(tag)
        if registered is not None and registered is not cls:
            raise ValueError(
                f"Serialization tag {tag!r} is already used by "
                f"{registered.__qualname__}"
            )
        _registry[tag] = cls
        cls._serialization_tag = tag
        return cls

    return deco


def _is_registered(obj):
    tag = getattr(type(obj), "_serialization_tag", None)
    return tag is not None and _registry.get(tag) is type(obj)


def _encode(value):
    if isinstance(value, np.ndarray):
        return {
            "__ndarray__": value.dtype.str,
            "shape": list(value.shape),
            "data": value.tolist(),
        }
    if isinstance(value, np.generic):
        return value.item()
    if _is_registered(value):
        return {"__estimator__": serialize(value)}
    if isinstance(value, dict):
        return {str(k): _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    raise TypeError(
        f"Cannot serialize a value of type {type(value).__name__}. Only "
        "registered estimators, NumPy arrays and plain Python values are "
        "supported."
    )


def _decode(value):
    if isinstance(value, dict):
        if "__ndarray__" in value:
            try:
                dtype = np.dtype(value["__ndarray__"])
                return np.array(value["data"], dtype=dtype).reshape(
                    value["shape"]
                )
            except (KeyError, TypeError, ValueError) as err:
                raise IncompatibleStateError(
                    f"Malformed array entry: {err}"
                ) from err
        if "__estimator__" in value:
            return deserialize(value["__estimator__"])
        return {k: _decode(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_decode(v) for v in value]
    return value


def check_state_keys(state, required, owner):
    """Raise `IncompatibleStateError` unless `state` is a mapping holding
    every key in `required`."""
    if not isinstance(state, dict):
        raise IncompatibleStateError(
            f"State of {owner} must be a mapping, got {type(state).__name__}"
        )
    missing = [key for key in required if key not in state]
    if missing:
        raise IncompatibleStateError(
            f"State of {owner} is missing keys {missing}"
        )


def serialize(estimator):
    """Serialize an estimator, fitted or not, into a blob.

    Parameters
    ----------
    estimator : registered estimator

    Returns
    -------
    blob : dict
    """
    if not _is_registered(estimator):
        raise TypeError(
            f"{type(estimator).__name__} is not registered for "
            "serialization. Decorate it with @register_serializable."
        )
    params = estimator.get_params(deep=False)
    fitted = estimator.__sklearn_is_fitted__()
    return {
        "type": type(estimator)._serialization_tag,
        "params": _encode(params),
        "state": _encode(estimator._get_state()) if fitted else None,
    }


def deserialize(blob, expected_cls=None):
    """Rebuild an estimator from a blob produced by `serialize`.

    Parameters
    ----------
    blob : dict
    expected_cls : type, optional
        If given, the blob must describe an instance of this class (or of a
        subclass).

    Returns
    -------
    estimator
    """
    if not isinstance(blob, dict) or any(k not in blob for k in _BLOB_KEYS):
        raise IncompatibleStateError(
            f"Expected a mapping with keys {list(_BLOB_KEYS)}, got "
            f"{sorted(blob) if isinstance(blob, dict) else type(blob).__name__}"
        )

    cls = _registry.get(blob["type"])
    if cls is None:
        raise IncompatibleStateError(
            f"Unknown estimator type tag {blob['type']!r}"
        )
    if expected_cls is not None and not issubclass(cls, expected_cls):
        raise IncompatibleStateError(
            f"Blob describes a {cls.__name__}, expected a "
            f"{expected_cls.__name__}"
        )

    params = _decode(blob["params"])
    if not isinstance(params, dict):
        raise IncompatibleStateError(
            f"Parameters of {cls.__name__} must be a mapping"
        )
    try:
        estimator = cls(**params)
    except TypeError as err:
        raise IncompatibleStateError(
            f"Cannot construct {cls.__name__} from stored parameters: {err}"
        ) from err

    if blob["state"] is not None:
        estimator._set_state(_decode(blob["state"]))
    return estimator


def dumps(estimator):
    """Serialize an estimator to JSON encoded bytes."""
    return json.dumps(serialize(estimator)).encode("utf-8")


def loads(data, expected_cls=None):
    """Inverse of `dumps`."""
    try:
        blob = json.loads(data)
    except ValueError as err:
        raise IncompatibleStateError(
            f"Serialized estimator is not valid JSON: {err}"
        ) from err
    return deserialize(blob, expected_cls=expected_cls)
