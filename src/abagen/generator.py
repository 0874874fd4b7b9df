"""ABA file generator: header, one detail line per transaction, footer."""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

from abagen.aggregation.totals import classifier_for, compute_footer_totals
from abagen.assembly.assembler import RecordAssembler
from abagen.assembly.schemas import SchemaRegistry
from abagen.core.config import AbaSettings
from abagen.core.constants import CREDIT, DEBIT, LINE_TERMINATOR, PAY
from abagen.core.exceptions import EmptyInputError
from abagen.core.logging import get_logger
from abagen.core.protocols import IClock
from abagen.formatting.dates import normalise_header_moment
from abagen.models.records import FooterTotals, FormatterConfig, Transaction

logger = get_logger(__name__)


class ABAGenerator:
    """Generates ABA direct entry files.

    Configuration is fixed at construction: header values (including the
    resolved date and time), footer overrides, schemas and the credit policy
    are read-only afterwards, so one instance can serve any number of
    ``generate`` calls, from any thread.

    Example::

        aba = ABAGenerator({"header": {"bank": "ANZ", "user": "Company",
                                       "user_number": 1337, "description": "Creditors"}})
        text = aba.generate([{"bsb": "013-999", "account": "123456",
                              "transaction_code": ABAGenerator.CREDIT, "amount": 1337.42, ...}])
    """

    CREDIT = CREDIT
    DEBIT = DEBIT
    PAY = PAY

    def __init__(
        self,
        config: FormatterConfig | Mapping[str, Any] | None = None,
        *,
        settings: AbaSettings | None = None,
        clock: IClock = datetime.now,
    ) -> None:
        if settings is None:
            settings = AbaSettings()
        if config is None:
            config = FormatterConfig()
        elif not isinstance(config, FormatterConfig):
            config = FormatterConfig.model_validate(config)

        self._credit_policy = config.credit_policy or settings.credit_policy
        self._classifier = classifier_for(self._credit_policy)
        self._schemas = SchemaRegistry(config.schemas)
        self._assembler = RecordAssembler(self._schemas)

        header = config.header.to_record()
        header["date"], header["time"] = normalise_header_moment(header.get("date"), header.get("time"), clock)
        self._header: Mapping[str, Any] = MappingProxyType(header)
        self._footer: Mapping[str, Any] = MappingProxyType(config.footer.to_record())

        logger.debug(
            "ABA generator ready: schemas=%s credit_policy=%s",
            sorted(self._schemas), self._credit_policy,
        )

    @property
    def header(self) -> Mapping[str, Any]:
        """Header record after defaults and date/time normalisation."""
        return self._header

    @property
    def schemas(self) -> SchemaRegistry:
        return self._schemas

    def generate(self, transactions: Iterable[Transaction | Mapping[str, Any]]) -> str:
        """Render the complete file as one string, lines joined by CRLF.

        Raises:
            EmptyInputError: ``transactions`` is empty.
            SchemaOrderError: a schema in use has out-of-order fields.
            SchemaNotFoundError: a record names an unregistered type code.
        """
        records = [self._assembler.transaction_record(t) for t in transactions]
        if not records:
            raise EmptyInputError()

        totals = compute_footer_totals(records, self._classifier)

        lines = [self._assembler.header_line(self._header)]
        lines.extend(self._assembler.transaction_line(r) for r in records)
        lines.append(self._assembler.footer_line(totals, self._footer))

        logger.debug(
            "Generated ABA file: %d detail lines, credit=%s debit=%s net=%s",
            totals.number_of_transactions, totals.credit_total, totals.debit_total, totals.net_total,
        )
        return LINE_TERMINATOR.join(lines)

    def totals(self, transactions: Sequence[Transaction | Mapping[str, Any]]) -> FooterTotals:
        """Footer totals for ``transactions`` under this generator's credit policy."""
        records = [self._assembler.transaction_record(t) for t in transactions]
        return compute_footer_totals(records, self._classifier)
