"""Caller-facing input and output models.

Input models are frozen and accept both snake_case and camelCase keys.
Value fields are typed ``Any``: the field codec coerces whatever it is given,
so nothing here rejects a malformed amount, an oversized string or a None.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel, to_snake

from abagen.core.constants import CreditPolicy
from abagen.core.types import RecordData
from abagen.models.schema import RecordSchema

DateInput = datetime | date | str
TimeInput = datetime | time | str


class _InputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_none(cls, data: Any) -> Any:
        # None means absent, so the field default applies.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_record(self) -> RecordData:
        """Non-None values keyed in snake_case, extras included."""
        return {to_snake(k): v for k, v in self.model_dump(exclude_none=True).items()}


class Transaction(_InputModel):
    """A single detail record (type "1" by default)."""

    bsb: Any = ""
    account: Any = ""
    transaction_code: Any = None
    amount: Any = None
    account_title: Any = ""
    reference: Any = ""
    trace_bsb: Any = ""
    trace_account: Any = ""
    remitter: Any = ""
    tax: Any = None
    tax_amount: Any = None
    transaction_type: Any = None


class HeaderConfig(_InputModel):
    """Descriptive (type "0") record settings."""

    type: Any = "0"
    bsb: Any = ""
    account: Any = ""
    sequence_number: Any = 1
    bank: Any = ""
    user: Any = ""
    user_number: Any = ""
    description: Any = ""
    date: DateInput | None = None
    time: TimeInput | None = None

    @field_validator("date")
    @classmethod
    def _parse_date(cls, value: Any) -> Any:
        if isinstance(value, str) and not value:
            return None
        if isinstance(value, str) and len(value) != 6:
            return datetime.fromisoformat(value)
        return value

    @field_validator("time")
    @classmethod
    def _parse_time(cls, value: Any) -> Any:
        if isinstance(value, str) and value and len(value) != 4:
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                return time.fromisoformat(value)
        return value


class FooterConfig(_InputModel):
    """File total (type "7") record overrides; unset totals are computed."""

    type: Any = "7"
    bsb: Any = "999999"
    net_total: Any = None
    credit_total: Any = None
    debit_total: Any = None
    number_of_transactions: Any = None


class FooterTotals(BaseModel):
    """Totals derived from a transaction set, in major units."""

    # NaN marks a non-numeric amount somewhere in the bucket.
    credit_total: Decimal = Field(default=Decimal("0.00"), allow_inf_nan=True)
    debit_total: Decimal = Field(default=Decimal("0.00"), allow_inf_nan=True)
    net_total: Decimal = Field(default=Decimal("0.00"), allow_inf_nan=True)
    number_of_transactions: int = 0


class FormatterConfig(BaseModel):
    """Complete generator configuration."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    header: HeaderConfig = Field(default_factory=HeaderConfig)
    footer: FooterConfig = Field(default_factory=FooterConfig)
    schemas: dict[str, RecordSchema] = Field(default_factory=dict)
    credit_policy: CreditPolicy | None = None

    @field_validator("schemas", mode="before")
    @classmethod
    def _normalise_type_codes(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalised = {}
        for code, schema in value.items():
            code = str(code)
            if len(code) != 1:
                raise ValueError(f"record type code must be a single character, got {code!r}")
            normalised[code] = schema
        return normalised
