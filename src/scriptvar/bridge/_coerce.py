"""Low-level object coercions.

Each ``to_*`` function returns ``(value, ok)``. When the object cannot be
coerced, ``ok`` is False and ``value`` is the zero value of the target
type. None of them raise.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone

from scriptvar.model.objects import (
    INT64_MAX,
    INT64_MIN,
    BaseObject,
    BoolObject,
    BytesObject,
    CharObject,
    FloatObject,
    IntObject,
    StringObject,
    TimeObject,
    UndefinedObject,
)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int | None:
    if _INT_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        # exceeds sys.get_int_max_str_digits()
        return None


def _parse_float(text: str) -> float | None:
    # float() tolerates surrounding whitespace and digit separators
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def to_int(obj: BaseObject) -> tuple[int, bool]:
    """Coerce to a Python int.

    - int -> value
    - float -> truncated toward zero (NaN and infinities fail)
    - char -> codepoint
    - bool -> 1 / 0
    - string -> base-10 integer literal
    """
    if isinstance(obj, IntObject):
        return obj.value, True
    if isinstance(obj, FloatObject):
        if math.isnan(obj.value) or math.isinf(obj.value):
            return 0, False
        return int(obj.value), True
    if isinstance(obj, CharObject):
        return ord(obj.value), True
    if isinstance(obj, BoolObject):
        return int(obj.value), True
    if isinstance(obj, StringObject):
        parsed = _parse_int(obj.value)
        if parsed is not None:
            return parsed, True
    return 0, False


def to_int64(obj: BaseObject) -> tuple[int, bool]:
    """Like ``to_int`` but fails when the result leaves the int64 range."""
    value, ok = to_int(obj)
    if not ok or not INT64_MIN <= value <= INT64_MAX:
        return 0, False
    return value, True


# ---------------------------------------------------------------------------
# Other scalars
# ---------------------------------------------------------------------------

def to_float64(obj: BaseObject) -> tuple[float, bool]:
    if isinstance(obj, IntObject):
        return float(obj.value), True
    if isinstance(obj, FloatObject):
        return obj.value, True
    if isinstance(obj, StringObject):
        parsed = _parse_float(obj.value)
        if parsed is not None:
            return parsed, True
    return 0.0, False


def to_rune(obj: BaseObject) -> tuple[str, bool]:
    """Coerce to a single-character string. The zero rune is ``"\\x00"``."""
    if isinstance(obj, CharObject):
        return obj.value, True
    if isinstance(obj, IntObject) and 0 <= obj.value <= 0x10FFFF:
        return chr(obj.value), True
    return "\x00", False


def to_bool(obj: BaseObject) -> tuple[bool, bool]:
    """Truthiness of the object. Always succeeds."""
    return not obj.is_falsy(), True


def to_string(obj: BaseObject) -> tuple[str, bool]:
    """Raw value for strings, display form for everything else.

    Undefined is the only object without a string form.
    """
    if isinstance(obj, UndefinedObject):
        return "", False
    if isinstance(obj, StringObject):
        return obj.value, True
    return str(obj), True


def to_bytes(obj: BaseObject) -> tuple[bytes, bool]:
    if isinstance(obj, BytesObject):
        return obj.value, True
    if isinstance(obj, StringObject):
        try:
            return obj.value.encode("utf-8"), True
        except UnicodeEncodeError:
            # lone surrogates have no UTF-8 form
            return b"", False
    return b"", False


def to_time(obj: BaseObject) -> tuple[datetime | None, bool]:
    """Times pass through; ints are read as Unix seconds in UTC."""
    if isinstance(obj, TimeObject):
        return obj.value, True
    if isinstance(obj, IntObject):
        try:
            return datetime.fromtimestamp(obj.value, tz=timezone.utc), True
        except (OverflowError, OSError, ValueError):
            return None, False
    return None, False
