"""Passing host values to a script and reading results back.

The script side is simulated here: results are plain objects, as a
runtime would hand them back after execution.
"""

import logging

from scriptvar.bridge import ConversionError, new_variable
from scriptvar.model.objects import ErrorObject, IntObject, MapObject, StringObject

logging.basicConfig(level=logging.DEBUG)

# -- Host -> script ----------------------------------------------------------
inputs = [
    new_variable("threshold", 0.75),
    new_variable("labels", ["low", "mid", "high"]),
    new_variable("options", {"retries": 3, "verbose": False}),
    new_variable("missing", None),
]
for v in inputs:
    print(f"{v.name:10} {v.value_type():10} {v.value()!r}")

try:
    new_variable("callback", [1, print])
except ConversionError as exc:
    print(f"rejected: {exc}")

# -- Script -> host ----------------------------------------------------------
result = new_variable("result", MapObject(value={
    "count": IntObject(value=12),
    "status": StringObject(value="ok"),
}))
print(result.map())
print(result.int())           # 0: a map is not an integer

failure = new_variable("err", ErrorObject(value=StringObject(value="division by zero")))
if failure.error() is not None:
    print(f"script failed: {failure.error()}")
