"""Tests for schema and record models."""

from __future__ import annotations

from datetime import datetime, time

import pytest
from pydantic import ValidationError

from abagen.core.constants import CreditPolicy
from abagen.models.records import FooterConfig, FormatterConfig, HeaderConfig, Transaction
from abagen.models.schema import FieldSpec, FieldType, Padding, RecordSchema, RecordType


class TestFieldSpec:
    def test_width_and_bounds(self):
        spec = FieldSpec(name="amount", boundaries=(20, 30), type=FieldType.MONEY)
        assert (spec.start, spec.end, spec.width) == (20, 30, 10)
        assert spec.padding is None

    def test_rejects_inverted_boundaries(self):
        with pytest.raises(ValidationError):
            FieldSpec(name="bad", boundaries=(10, 5))

    def test_camel_case_name_is_snake_cased(self):
        assert FieldSpec(name="transactionCode", boundaries=(18, 20)).name == "transaction_code"
        assert FieldSpec(name="account_title", boundaries=(30, 62)).name == "account_title"

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            FieldSpec(name="bad", boundaries=(0, 1), type="date")


def test_record_schema_from_camel_case_dict():
    schema = RecordSchema.model_validate({
        "recordType": "transaction",
        "fields": [{"name": "x", "boundaries": [0, 4], "type": "string", "padding": "left"}],
    })
    assert schema.record_type is RecordType.TRANSACTION
    assert schema.fields[0].padding is Padding.LEFT
    assert schema.width == 4


class TestTransaction:
    def test_accepts_camel_case_and_extras(self):
        tx = Transaction.model_validate({
            "transactionCode": 50,
            "accountTitle": "French Coffee",
            "customRight": "extra",
        })
        record = tx.to_record()
        assert record["transaction_code"] == 50
        assert record["account_title"] == "French Coffee"
        assert record["custom_right"] == "extra"

    def test_any_value_is_accepted(self):
        tx = Transaction(account=123456, reference=None, remitter=["x"], bsb={"a": 1})
        assert tx.account == 123456
        assert tx.remitter == ["x"]

    def test_none_values_fall_back_to_defaults(self):
        record = Transaction(reference=None, bsb=None, tax=None, account="1").to_record()
        assert record["reference"] == ""
        assert record["bsb"] == ""
        assert "tax" not in record
        assert record["account"] == "1"

    def test_extras_are_keyed_in_snake_case(self):
        record = Transaction.model_validate({"customRight": "r"}).to_record()
        assert record["custom_right"] == "r"

    def test_is_frozen(self):
        tx = Transaction(bsb="013-999")
        with pytest.raises(ValidationError):
            tx.bsb = "000-000"

    def test_malformed_amount_is_kept(self):
        assert Transaction(amount="twelve").amount == "twelve"

    def test_unset_fields_are_omitted_from_record(self):
        record = Transaction(bsb="061021").to_record()
        assert "tax" not in record
        assert "transaction_type" not in record


class TestHeaderConfig:
    def test_defaults(self):
        header = HeaderConfig()
        assert header.type == "0"
        assert header.sequence_number == 1
        assert header.date is None
        assert header.time is None

    def test_parses_iso_strings(self):
        header = HeaderConfig(date="2007-06-18", time="2014-07-05T00:08:00")
        assert header.date == datetime(2007, 6, 18)
        assert header.time == datetime(2014, 7, 5, 0, 8)

    def test_parses_time_of_day(self):
        assert HeaderConfig(time="08:30").time == time(8, 30)

    def test_keeps_preformatted_strings(self):
        header = HeaderConfig(date="180607", time="0830")
        assert (header.date, header.time) == ("180607", "0830")

    def test_rejects_garbage_date(self):
        with pytest.raises(ValidationError):
            HeaderConfig(date="next tuesday")


def test_footer_defaults():
    footer = FooterConfig()
    assert footer.to_record() == {"type": "7", "bsb": "999999"}


class TestFormatterConfig:
    def test_numeric_type_codes_become_strings(self):
        config = FormatterConfig.model_validate({
            "schemas": {2: {"recordType": "transaction", "fields": []}},
            "creditPolicy": "exact",
        })
        assert list(config.schemas) == ["2"]
        assert config.credit_policy is CreditPolicy.EXACT

    def test_rejects_multi_character_code(self):
        with pytest.raises(ValidationError):
            FormatterConfig.model_validate({"schemas": {"10": {"recordType": "footer"}}})
