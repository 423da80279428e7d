"""Named variable: one name/object pair shared between host and script.

The object is converted once, at construction, and never changes. Typed
accessors coerce it on every call and fall back to the zero value of the
requested type when coercion is impossible::

    v = Variable("count", "12")
    v.int()       # 12
    v.float()     # 12.0
    v.array()     # [] (not an array)

Callers that must tell "wrong type" apart from a genuine zero should
check ``value_type()`` or ``is_undefined()`` first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from scriptvar.model.limits import ConversionLimits
from scriptvar.model.objects import (
    ArrayObject,
    BaseObject,
    ErrorObject,
    MapObject,
    UndefinedObject,
)

from ._coerce import (
    to_bool,
    to_bytes,
    to_float64,
    to_int,
    to_int64,
    to_rune,
    to_string,
    to_time,
)
from ._convert import ScriptError, error_message, from_host, to_host

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class Variable:
    """A named, immutable runtime value.

    Parameters
    ----------
    name : str
        Identifier. Not validated.
    value
        Any host value accepted by ``from_host`` (including an existing
        object, which is copied).
    limits : ConversionLimits, optional
        Size limits for the conversion.

    Raises
    ------
    ConversionError
        If *value* has no object representation.
    """

    __slots__ = ("_name", "_value")

    def __init__(
        self,
        name: str,
        value: Any = None,
        *,
        limits: ConversionLimits | None = None,
    ) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", from_host(value, limits))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"type={self._value.type_name}, value={self._value})"
        )

    # -----------------------------------------------------------------------
    # Identity
    # -----------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Identifier given at construction."""
        return self._name

    def value_type(self) -> str:
        """Display name of the underlying object's type."""
        return self._value.type_name

    def object(self) -> BaseObject:
        """A copy of the underlying object. Changes to it are not seen here."""
        return self._value.model_copy(deep=True)

    def is_undefined(self) -> bool:
        """True only for the undefined object, never for zero values."""
        return isinstance(self._value, UndefinedObject)

    def value(self) -> Any:
        """The value widened to its natural host type (see ``to_host``)."""
        return to_host(self._value)

    # -----------------------------------------------------------------------
    # Scalar coercions
    # -----------------------------------------------------------------------

    def _coerce(
        self,
        fn: Callable[[BaseObject], tuple[_T, bool]],
        target: str,
    ) -> _T:
        result, ok = fn(self._value)
        if not ok:
            logger.debug(
                "variable %r: %s is not convertible to %s",
                self._name, self._value.type_name, target,
            )
        return result

    def int(self) -> int:
        """Integer value, or 0 if not convertible."""
        return self._coerce(to_int, "int")

    def int64(self) -> int:
        """Integer value within the int64 range, or 0 if not convertible."""
        return self._coerce(to_int64, "int64")

    def float(self) -> float:
        """Float value, or 0.0 if not convertible."""
        return self._coerce(to_float64, "float")

    def char(self) -> str:
        """Single character, or ``"\\x00"`` if not convertible."""
        return self._coerce(to_rune, "char")

    def bool(self) -> bool:
        """Truthiness of the value. Undefined and errors are False."""
        return self._coerce(to_bool, "bool")

    def string(self) -> str:
        """String value, or ``""`` for undefined."""
        return self._coerce(to_string, "string")

    def bytes(self) -> bytes:
        """Byte value, or ``b""`` if not convertible."""
        return self._coerce(to_bytes, "bytes")

    def time(self) -> datetime | None:
        """Time value, or None if not convertible."""
        return self._coerce(to_time, "time")

    # -----------------------------------------------------------------------
    # Composites
    # -----------------------------------------------------------------------

    def array(self) -> list[Any]:
        """Elements widened to host values, or ``[]`` if not an array."""
        if isinstance(self._value, ArrayObject):
            return [to_host(e) for e in self._value.value]
        return []

    def map(self) -> dict[str, Any]:
        """Entries with widened values, or ``{}`` if not a map."""
        if isinstance(self._value, MapObject):
            return {k: to_host(v) for k, v in self._value.value.items()}
        return {}

    def error(self) -> ScriptError | None:
        """The script error this variable holds, if any."""
        if isinstance(self._value, ErrorObject):
            return ScriptError(error_message(self._value))
        return None


def new_variable(
    name: str,
    value: Any = None,
    *,
    limits: ConversionLimits | None = None,
) -> Variable:
    """Create a Variable, raising ConversionError if *value* is unsupported."""
    return Variable(name, value, limits=limits)
