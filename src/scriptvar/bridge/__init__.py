"""scriptvar bridge — named variables exchanged with a script runtime.

Entry point::

    from scriptvar.bridge import new_variable

    v = new_variable("limits", {"max": 10, "tags": ["a", "b"]})
    v.value_type()    # "map"
    v.map()           # {"max": 10, "tags": ["a", "b"]}
    v.int()           # 0 (a map is not an integer)
"""

from __future__ import annotations

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
from ._convert import ConversionError, ScriptError, from_host, to_host
from ._variable import Variable, new_variable

__all__ = [
    "Variable",
    "new_variable",
    "ConversionError",
    "ScriptError",
    "from_host",
    "to_host",
    "to_bool",
    "to_bytes",
    "to_float64",
    "to_int",
    "to_int64",
    "to_rune",
    "to_string",
    "to_time",
]
