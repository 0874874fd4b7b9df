"""Transaction codes and classification policies of the ABA direct entry format."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class TransactionCode(IntEnum):
    DEBIT = 13
    CREDIT = 50
    AUSTRALIAN_GOVERNMENT_SECURITY_INTEREST = 51
    FAMILY_ALLOWANCE = 52
    PAY = 53
    PENSION = 54
    ALLOTMENT = 55
    DIVIDEND = 56
    DEBENTURE_NOTE_INTEREST = 57


class CreditPolicy(StrEnum):
    RANGE = "range"  # codes 50..57 inclusive
    EXACT = "exact"  # code 50 only


CREDIT = int(TransactionCode.CREDIT)
DEBIT = int(TransactionCode.DEBIT)
PAY = int(TransactionCode.PAY)

CREDIT_RANGE = (TransactionCode.CREDIT, TransactionCode.DEBENTURE_NOTE_INTEREST)

LINE_TERMINATOR = "\r\n"
