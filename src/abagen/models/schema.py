"""Declarative fixed-width record schemas."""

from __future__ import annotations

from enum import StrEnum
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_snake


class FieldType(StrEnum):
    STRING = "string"
    INTEGER = "integer"
    MONEY = "money"
    BSB = "bsb"


class Padding(StrEnum):
    # Named after the text alignment: LEFT pads on the right, RIGHT pads on the left.
    LEFT = "left"
    RIGHT = "right"


class RecordType(StrEnum):
    HEADER = "header"
    TRANSACTION = "transaction"
    FOOTER = "footer"


class FieldSpec(BaseModel):
    """One named slice ``[start, end)`` of a fixed-width line."""

    name: str
    boundaries: tuple[int, int]
    type: FieldType = FieldType.STRING
    padding: Padding | None = None

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def _snake_case_name(cls, value: str) -> str:
        # Records are keyed in snake_case, whichever spelling the caller used.
        return to_snake(value)

    @model_validator(mode="after")
    def _check_boundaries(self) -> "FieldSpec":
        start, end = self.boundaries
        if start < 0 or end < start:
            raise ValueError(f"field {self.name!r} has invalid boundaries {self.boundaries}")
        return self

    @property
    def start(self) -> int:
        return self.boundaries[0]

    @property
    def end(self) -> int:
        return self.boundaries[1]

    @property
    def width(self) -> int:
        return self.boundaries[1] - self.boundaries[0]


class RecordSchema(BaseModel):
    """Ordered field layout for one record-type code."""

    record_type: RecordType = Field(alias="recordType")
    fields: tuple[FieldSpec, ...] = ()

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def width(self) -> int:
        """Total rendered width, assuming boundary-ordered fields."""
        return self.fields[-1].end if self.fields else 0
