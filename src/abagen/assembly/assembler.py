"""Record assembler: layers defaults, caller data and overrides, then renders."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from abagen.assembly.schemas import SchemaRegistry
from abagen.core.types import RecordData
from abagen.formatting.renderer import render_line
from abagen.models.records import FooterTotals, Transaction

HEADER_TYPE = "0"
TRANSACTION_TYPE = "1"
FOOTER_TYPE = "7"

PAYMENT_DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "tax": "",
    "tax_amount": 0,
    "transaction_type": TRANSACTION_TYPE,
})


def merge_record(*layers: Mapping[str, Any] | None) -> RecordData:
    """Merge mappings into a new dict; later layers win."""
    merged: RecordData = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


class RecordAssembler:
    """Builds concrete records and renders them with the schema for their type code."""

    def __init__(self, schemas: SchemaRegistry) -> None:
        self._schemas = schemas

    def render(self, record: Mapping[str, Any], type_field: str, fallback_code: str) -> str:
        """Render ``record`` using the schema named by ``record[type_field]``."""
        type_code = record.get(type_field) or fallback_code
        return render_line(record, self._schemas.resolve(type_code))

    def transaction_record(self, transaction: Transaction | Mapping[str, Any],
                           overrides: Mapping[str, Any] | None = None) -> RecordData:
        if not isinstance(transaction, Transaction):
            transaction = Transaction.model_validate(transaction)
        return merge_record(PAYMENT_DEFAULTS, transaction.to_record(), overrides)

    def transaction_line(self, record: Mapping[str, Any]) -> str:
        """Render an assembled transaction record."""
        return self.render(record, "transaction_type", TRANSACTION_TYPE)

    def header_line(self, header: Mapping[str, Any]) -> str:
        return self.render(header, "type", HEADER_TYPE)

    def footer_record(self, totals: FooterTotals, overrides: Mapping[str, Any] | None = None) -> RecordData:
        """Computed totals, with any explicit footer value taking precedence."""
        return merge_record(totals.model_dump(), overrides)

    def footer_line(self, totals: FooterTotals, overrides: Mapping[str, Any] | None = None) -> str:
        return self.render(self.footer_record(totals, overrides), "type", FOOTER_TYPE)
