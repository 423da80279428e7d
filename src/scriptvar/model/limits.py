"""Size limits applied when host values are converted into objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class ConversionLimits(BaseModel):
    """Upper bounds enforced by ``from_host``.

    Strings and byte sequences longer than the configured maximum are
    rejected, as are containers nested deeper than ``max_depth`` (which
    also catches self-referencing lists and dicts).
    """

    model_config = ConfigDict(frozen=True)

    max_string_len: int = 2_147_483_647
    max_bytes_len: int = 2_147_483_647
    max_depth: int = 256

    @field_validator("max_string_len", "max_bytes_len", "max_depth")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"limit must be positive, got {v}")
        return v


DEFAULT_LIMITS = ConversionLimits()
