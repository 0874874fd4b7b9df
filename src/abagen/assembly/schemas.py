"""Built-in record schemas and the per-generator schema registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping

from abagen.core.exceptions import SchemaNotFoundError
from abagen.core.types import TypeCode
from abagen.models.schema import FieldSpec, FieldType, Padding, RecordSchema, RecordType


def _field(name: str, start: int, end: int, type: FieldType = FieldType.STRING,
           padding: Padding | None = None) -> FieldSpec:
    return FieldSpec(name=name, boundaries=(start, end), type=type, padding=padding)


HEADER_SCHEMA = RecordSchema(
    record_type=RecordType.HEADER,
    fields=(
        _field("type", 0, 1),
        _field("bsb", 1, 8, FieldType.BSB),
        _field("account", 8, 17),
        # 17: reserved
        _field("sequence_number", 18, 20, FieldType.INTEGER),
        _field("bank", 20, 23),
        # 23-30: reserved
        _field("user", 30, 56, padding=Padding.LEFT),
        _field("user_number", 56, 62, FieldType.INTEGER),
        _field("description", 62, 74, padding=Padding.LEFT),
        _field("date", 74, 80),
        _field("time", 80, 84),
        _field("filler", 84, 120),
    ),
)

TRANSACTION_SCHEMA = RecordSchema(
    record_type=RecordType.TRANSACTION,
    fields=(
        _field("transaction_type", 0, 1),
        _field("bsb", 1, 8, FieldType.BSB),
        _field("account", 8, 17),
        _field("tax", 17, 18),
        _field("transaction_code", 18, 20, FieldType.INTEGER),
        _field("amount", 20, 30, FieldType.MONEY),
        _field("account_title", 30, 62, padding=Padding.LEFT),
        _field("reference", 62, 80, padding=Padding.LEFT),
        _field("trace_bsb", 80, 87, FieldType.BSB),
        _field("trace_account", 87, 96),
        _field("remitter", 96, 112, padding=Padding.LEFT),
        _field("tax_amount", 112, 120, FieldType.MONEY),
    ),
)

FOOTER_SCHEMA = RecordSchema(
    record_type=RecordType.FOOTER,
    fields=(
        _field("type", 0, 1),
        _field("bsb", 1, 8, FieldType.BSB),
        # 8-20: reserved
        _field("net_total", 20, 30, FieldType.MONEY),
        _field("credit_total", 30, 40, FieldType.MONEY),
        _field("debit_total", 40, 50, FieldType.MONEY),
        # 50-74: reserved
        _field("number_of_transactions", 74, 80, FieldType.INTEGER),
        _field("filler", 80, 120),
    ),
)

DEFAULT_SCHEMAS: Mapping[str, RecordSchema] = MappingProxyType({
    "0": HEADER_SCHEMA,
    "1": TRANSACTION_SCHEMA,
    "7": FOOTER_SCHEMA,
})


class SchemaRegistry(Mapping[TypeCode, RecordSchema]):
    """Read-only view of the built-in schemas overlaid with caller schemas.

    Caller schemas replace built-ins code by code; codes not overridden keep
    the built-in layout. The shared default table is never modified.
    """

    def __init__(self, overrides: Mapping[Any, RecordSchema] | None = None) -> None:
        merged = dict(DEFAULT_SCHEMAS)
        for code, schema in (overrides or {}).items():
            merged[str(code)] = schema
        self._schemas: Mapping[TypeCode, RecordSchema] = MappingProxyType(merged)

    def __getitem__(self, type_code: TypeCode) -> RecordSchema:
        return self._schemas[type_code]

    def __iter__(self) -> Iterator[TypeCode]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def resolve(self, type_code: Any) -> RecordSchema:
        """Schema for a record-type code, or SchemaNotFoundError."""
        try:
            return self._schemas[str(type_code)]
        except KeyError:
            raise SchemaNotFoundError(str(type_code)) from None
