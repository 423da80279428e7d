"""Shared test helpers for the scriptvar test suite."""

from datetime import datetime, timezone

from scriptvar.model.objects import (
    UNDEFINED,
    ArrayObject,
    BoolObject,
    BytesObject,
    CharObject,
    ErrorObject,
    FloatObject,
    ImmutableArrayObject,
    ImmutableMapObject,
    IntObject,
    MapObject,
    OpaqueObject,
    StringObject,
    TimeObject,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def s(text):
    """Shorthand for StringObject(value=text)."""
    return StringObject(value=text)


def i(n):
    """Shorthand for IntObject(value=n)."""
    return IntObject(value=n)


def sample_objects():
    """One instance of every object variant, keyed by type name."""
    return {
        "int": i(7),
        "float": FloatObject(value=2.5),
        "bool": BoolObject(value=True),
        "char": CharObject(value="x"),
        "string": s("hello"),
        "bytes": BytesObject(value=b"\x01\x02"),
        "array": ArrayObject(value=[i(1), s("a")]),
        "immutable-array": ImmutableArrayObject(value=[i(1)]),
        "map": MapObject(value={"k": i(1)}),
        "immutable-map": ImmutableMapObject(value={"k": i(1)}),
        "error": ErrorObject(value=s("boom")),
        "time": TimeObject(value=EPOCH),
        "undefined": UNDEFINED,
        "user-function": OpaqueObject(type_name="user-function"),
    }
