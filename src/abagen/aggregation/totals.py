"""Footer totals: credit and debit sums, net magnitude, record count."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from abagen.core.constants import CREDIT_RANGE, CreditPolicy, TransactionCode
from abagen.core.protocols import ICreditClassifier
from abagen.formatting.codec import to_decimal
from abagen.models.records import FooterTotals

_TWO_PLACES = Decimal("0.01")


def _as_code(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class RangeCreditClassifier:
    """Credits are codes 50 through 57 inclusive."""

    def is_credit(self, transaction_code: Any) -> bool:
        code = _as_code(transaction_code)
        return code is not None and CREDIT_RANGE[0] <= code <= CREDIT_RANGE[1]


class ExactCreditClassifier:
    """Only code 50 is a credit."""

    def is_credit(self, transaction_code: Any) -> bool:
        return _as_code(transaction_code) == TransactionCode.CREDIT


def classifier_for(policy: CreditPolicy | str) -> ICreditClassifier:
    if CreditPolicy(policy) is CreditPolicy.EXACT:
        return ExactCreditClassifier()
    return RangeCreditClassifier()


def _round(amount: Decimal) -> Decimal:
    try:
        return amount.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return amount


def compute_footer_totals(
    transactions: Iterable[Mapping[str, Any]],
    classifier: ICreditClassifier | None = None,
) -> FooterTotals:
    """Sum credits and debits over ``transactions`` in one pass.

    ``net_total`` is the absolute difference of the two sums, so it is never
    negative. Every transaction is counted, including those whose code is
    neither a credit nor a debit.
    """
    classifier = classifier or RangeCreditClassifier()
    credit = Decimal(0)
    debit = Decimal(0)
    count = 0
    for transaction in transactions:
        count += 1
        code = transaction.get("transaction_code")
        if classifier.is_credit(code):
            credit += to_decimal(transaction.get("amount"))
        elif _as_code(code) == TransactionCode.DEBIT:
            debit += to_decimal(transaction.get("amount"))

    credit = _round(credit)
    debit = _round(debit)
    return FooterTotals(
        credit_total=credit,
        debit_total=debit,
        net_total=_round(abs(credit - debit)),
        number_of_transactions=count,
    )
