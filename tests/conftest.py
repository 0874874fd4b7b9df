"""Shared fixtures for ABA generator tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from abagen import ABAGenerator

FIXED_NOW = datetime(2024, 3, 9, 14, 30)


@pytest.fixture
def payment():
    return {
        "bsb": "013-999",
        "account": "123456",
        "transaction_code": 50,
        "amount": 1337.42,
        "account_title": "French Coffee",
        "reference": "Order 132",
        "trace_bsb": "013-666",
        "trace_account": "567890",
        "remitter": "Vault",
    }


@pytest.fixture
def header():
    return {"bank": "ANZ", "user": "Company", "user_number": 1337, "description": "Creditors"}


@pytest.fixture
def aba(header):
    return ABAGenerator({"header": header}, clock=lambda: FIXED_NOW)
