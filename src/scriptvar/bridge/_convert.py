"""Conversion between host (Python) values and runtime objects.

``from_host`` is the single fallible entry point for values coming from
host code. ``to_host`` is its inverse over every object variant.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from scriptvar.model.limits import DEFAULT_LIMITS, ConversionLimits
from scriptvar.model.objects import (
    FALSE,
    INT64_MAX,
    INT64_MIN,
    TRUE,
    UNDEFINED,
    ArrayObject,
    BaseObject,
    BoolObject,
    BytesObject,
    CharObject,
    ErrorObject,
    FloatObject,
    IntObject,
    MapObject,
    OpaqueObject,
    StringObject,
    TimeObject,
    UndefinedObject,
)

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """A host value has no object representation.

    ``path`` locates the offending element inside nested containers,
    e.g. ``"[2]"`` or ``"['k'][0]"``; it is empty for top-level values.
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        if path:
            message = f"{message} at {path}"
        super().__init__(message)


class ScriptError(Exception):
    """Host-side view of an error object produced by a script.

    Returned, never raised, by ``Variable.error()`` and ``to_host()``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScriptError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((ScriptError, self.message))


def error_message(obj: ErrorObject) -> str:
    """The display message of an error object, e.g. ``"error: boom"``."""
    return str(obj)


# ---------------------------------------------------------------------------
# Host -> object
# ---------------------------------------------------------------------------

def from_host(value: Any, limits: ConversionLimits | None = None) -> BaseObject:
    """Convert a host value into a runtime object.

    - None -> undefined
    - an existing object -> a deep copy of it
    - bool, int, float, str, bytes-like, datetime -> matching scalar
    - exception instance -> error object carrying ``str(exc)``
    - list/tuple -> array, str-keyed mapping -> map (recursively)

    Raises ConversionError for anything else.
    """
    return _from_host(value, limits or DEFAULT_LIMITS, 0, "")


def _fail(value: Any, reason: str, path: str) -> ConversionError:
    err = ConversionError(reason, path)
    logger.debug("cannot convert %s: %s", type(value).__name__, err)
    return err


def _from_host(value: Any, limits: ConversionLimits, depth: int, path: str) -> BaseObject:
    if value is None:
        return UNDEFINED

    if isinstance(value, BaseObject):
        return value.model_copy(deep=True)

    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return TRUE if value else FALSE

    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise _fail(value, f"integer {value} out of int64 range", path)
        return IntObject(value=int(value))

    if isinstance(value, float):
        return FloatObject(value=value)

    if isinstance(value, str):
        if len(value) > limits.max_string_len:
            raise _fail(value, "string exceeds size limit", path)
        return StringObject(value=value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
        if len(data) > limits.max_bytes_len:
            raise _fail(value, "bytes exceed size limit", path)
        return BytesObject(value=data)

    if isinstance(value, datetime):
        return TimeObject(value=value)

    if isinstance(value, BaseException):
        return ErrorObject(value=StringObject(value=str(value)))

    if isinstance(value, (list, tuple)):
        if depth >= limits.max_depth:
            raise _fail(value, "nesting exceeds depth limit", path)
        return ArrayObject(value=[
            _from_host(e, limits, depth + 1, f"{path}[{i}]")
            for i, e in enumerate(value)
        ])

    if isinstance(value, Mapping):
        if depth >= limits.max_depth:
            raise _fail(value, "nesting exceeds depth limit", path)
        items: dict[str, BaseObject] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise _fail(
                    value, f"map key must be str, got {type(k).__name__}", path,
                )
            items[k] = _from_host(v, limits, depth + 1, f"{path}[{k!r}]")
        return MapObject(value=items)

    raise _fail(value, f"cannot convert {type(value).__name__} to object", path)


# ---------------------------------------------------------------------------
# Object -> host
# ---------------------------------------------------------------------------

def to_host(obj: BaseObject) -> Any:
    """Widen an object to its natural host representation.

    Containers are rebuilt, so the result shares no mutable state with
    ``obj``. Opaque objects are returned as-is.
    """
    if isinstance(obj, (IntObject, FloatObject, BoolObject, CharObject,
                        StringObject, BytesObject, TimeObject)):
        return obj.value
    if isinstance(obj, ArrayObject):
        return [to_host(e) for e in obj.value]
    if isinstance(obj, MapObject):
        return {k: to_host(v) for k, v in obj.value.items()}
    if isinstance(obj, ErrorObject):
        return ScriptError(error_message(obj))
    if isinstance(obj, UndefinedObject):
        return None
    if isinstance(obj, OpaqueObject):
        return obj
    raise TypeError(f"unknown object kind: {obj.kind!r}")
