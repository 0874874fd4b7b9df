"""Australian Bankers' Association (ABA) direct entry file generator."""

from __future__ import annotations

from abagen.core.constants import CREDIT, DEBIT, PAY, CreditPolicy, TransactionCode
from abagen.core.exceptions import (
    AbaError,
    EmptyInputError,
    SchemaError,
    SchemaNotFoundError,
    SchemaOrderError,
)
from abagen.generator import ABAGenerator
from abagen.models.records import FooterConfig, FooterTotals, FormatterConfig, HeaderConfig, Transaction
from abagen.models.schema import FieldSpec, FieldType, Padding, RecordSchema, RecordType

__all__ = [
    "ABAGenerator",
    "AbaError",
    "CREDIT",
    "CreditPolicy",
    "DEBIT",
    "EmptyInputError",
    "FieldSpec",
    "FieldType",
    "FooterConfig",
    "FooterTotals",
    "FormatterConfig",
    "HeaderConfig",
    "PAY",
    "Padding",
    "RecordSchema",
    "RecordType",
    "SchemaError",
    "SchemaNotFoundError",
    "SchemaOrderError",
    "Transaction",
    "TransactionCode",
]
