from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Scholarship(BaseModel):
    """A single scholarship record, keyed by ``name`` in the store.

    Serialized as ``{"Name": ..., "Amount": ...}``.  Decoding matches field
    names case-insensitively; when a field appears more than once the last
    occurrence wins.  Missing fields fall back to ``""`` / ``0``.
    """

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field("", alias="Name")
    amount: StrictInt = Field(0, alias="Amount", ge=INT64_MIN, le=INT64_MAX)

    @model_validator(mode="before")
    @classmethod
    def _fold_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {
            (field.alias or name).lower(): field.alias or name
            for name, field in cls.model_fields.items()
        }
        folded = {}
        for key, value in data.items():
            folded[aliases.get(key.lower(), key) if isinstance(key, str) else key] = value
        return folded

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
