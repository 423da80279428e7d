"""Object model for values exchanged with the script runtime.

Every runtime value is one variant of the ``Object`` discriminated union.
The ``kind`` field is both the discriminator and the display type name
reported to host code (``"int"``, ``"array"``, ``"undefined"``, ...).

Variants are frozen; container payloads are owned by the object that
holds them and are never shared with host code (see
``scriptvar.bridge``).
"""

from __future__ import annotations

import json
import math
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class BaseObject(BaseModel):
    """Common behaviour of all runtime object variants."""

    model_config = ConfigDict(frozen=True)

    kind: str

    @property
    def type_name(self) -> str:
        return self.kind

    def is_falsy(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"<{self.type_name}>"

    def _nested_str(self) -> str:
        """Display form when the object appears inside a container."""
        return str(self)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    # Shortest round-tripping digits, never in exponent form
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class IntObject(BaseObject):
    """Signed 64-bit integer."""

    kind: Literal["int"] = "int"
    value: int = Field(ge=INT64_MIN, le=INT64_MAX)

    def is_falsy(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return str(self.value)


class FloatObject(BaseObject):
    """64-bit float. Only NaN is falsy."""

    kind: Literal["float"] = "float"
    value: float

    def is_falsy(self) -> bool:
        return math.isnan(self.value)

    def __str__(self) -> str:
        return _format_float(self.value)


class BoolObject(BaseObject):
    kind: Literal["bool"] = "bool"
    value: bool

    def is_falsy(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


class CharObject(BaseObject):
    """A single unicode codepoint."""

    kind: Literal["char"] = "char"
    value: str = Field(min_length=1, max_length=1)

    def is_falsy(self) -> bool:
        return self.value == "\x00"

    def __str__(self) -> str:
        return self.value


class StringObject(BaseObject):
    kind: Literal["string"] = "string"
    value: str

    def is_falsy(self) -> bool:
        return len(self.value) == 0

    def __str__(self) -> str:
        return self.value

    def _nested_str(self) -> str:
        return json.dumps(self.value, ensure_ascii=False)


class BytesObject(BaseObject):
    kind: Literal["bytes"] = "bytes"
    value: bytes

    def is_falsy(self) -> bool:
        return len(self.value) == 0

    def __str__(self) -> str:
        return self.value.decode("utf-8", errors="replace")


class TimeObject(BaseObject):
    kind: Literal["time"] = "time"
    value: datetime

    def __str__(self) -> str:
        return self.value.isoformat()


class UndefinedObject(BaseObject):
    """The "no value" sentinel. Distinct from every zero-valued scalar."""

    kind: Literal["undefined"] = "undefined"

    def is_falsy(self) -> bool:
        return True

    def __str__(self) -> str:
        return "<undefined>"


class OpaqueObject(BaseObject):
    """Runtime-specific value this layer does not interpret.

    Functions, iterators, user types and the like are carried through
    unchanged. ``type_name`` is reported instead of ``kind``. Deep copies
    of an opaque object, or of a container holding one, share the same
    instance.
    """

    kind: Literal["opaque"] = "opaque"
    name: str = Field(alias="type_name")
    payload: Any = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def type_name(self) -> str:
        return self.name

    def __deepcopy__(self, memo: dict | None = None) -> OpaqueObject:
        # payload is shared, never copied
        return self


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------

class ArrayObject(BaseObject):
    """Ordered sequence of objects."""

    kind: Literal["array"] = "array"
    value: list[Object] = Field(default_factory=list)

    def is_falsy(self) -> bool:
        return len(self.value) == 0

    def __str__(self) -> str:
        return "[" + ", ".join(e._nested_str() for e in self.value) + "]"


class ImmutableArrayObject(ArrayObject):
    kind: Literal["immutable-array"] = "immutable-array"


class MapObject(BaseObject):
    """String-keyed mapping of objects. Key order is not significant."""

    kind: Literal["map"] = "map"
    value: dict[str, Object] = Field(default_factory=dict)

    def is_falsy(self) -> bool:
        return len(self.value) == 0

    def __str__(self) -> str:
        pairs = (f"{k}: {self.value[k]._nested_str()}" for k in sorted(self.value))
        return "{" + ", ".join(pairs) + "}"


class ImmutableMapObject(MapObject):
    kind: Literal["immutable-map"] = "immutable-map"


class ErrorObject(BaseObject):
    """Error raised or returned by a script; ``value`` is its payload."""

    kind: Literal["error"] = "error"
    value: Object = Field(default_factory=UndefinedObject)

    def is_falsy(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"error: {self.value}"


Object = Annotated[
    Union[
        IntObject,
        FloatObject,
        BoolObject,
        CharObject,
        StringObject,
        BytesObject,
        ArrayObject,
        ImmutableArrayObject,
        MapObject,
        ImmutableMapObject,
        ErrorObject,
        TimeObject,
        UndefinedObject,
        OpaqueObject,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Rebuild models with recursive Object references
# ---------------------------------------------------------------------------

ArrayObject.model_rebuild()
ImmutableArrayObject.model_rebuild()
MapObject.model_rebuild()
ImmutableMapObject.model_rebuild()
ErrorObject.model_rebuild()


UNDEFINED = UndefinedObject()
TRUE = BoolObject(value=True)
FALSE = BoolObject(value=False)
