"""Shared test fixtures for chargewatch tests."""

from datetime import UTC, datetime, timedelta

import pytest

from src.domains.fraud.models import Transaction

NOW = datetime(2026, 1, 15, 14, 0, 0, tzinfo=UTC)


def make_txn(
    txn_id: str = "txn-1",
    amount: str = "100.00",
    customer: str = "alex@example.com",
    seconds_ago: float = 0,
    location: str | None = None,
    **kwargs,
) -> Transaction:
    """Build a transaction ``seconds_ago`` seconds before NOW."""
    defaults = {
        "id": txn_id,
        "amount": amount,
        "currency": "USD",
        "status": "succeeded",
        "customer": customer,
        "timestamp": NOW - timedelta(seconds=seconds_ago),
        "method": "card",
        "location": location,
    }
    defaults.update(kwargs)
    return Transaction(**defaults)


def make_window(
    count: int, customer: str = "alex@example.com", start_seconds_ago: float = 50
) -> list[Transaction]:
    """``count`` prior transactions spaced 5s apart, oldest first."""
    return [
        make_txn(
            txn_id=f"prior-{i}",
            customer=customer,
            seconds_ago=start_seconds_ago - i * 5,
        )
        for i in range(count)
    ]


@pytest.fixture
def sample_transaction_payload() -> dict:
    return {
        "id": "ch_3PabcXYZ",
        "amount": "49.99",
        "currency": "usd",
        "status": "succeeded",
        "customer": "alex@example.com",
        "timestamp": "2026-01-15T14:00:00+00:00",
        "method": "card",
        "location": "Boston, US",
    }


@pytest.fixture
def sample_charge() -> dict:
    return {
        "id": "ch_3PabcXYZ",
        "object": "charge",
        "amount": 150000,
        "currency": "usd",
        "status": "succeeded",
        "created": 1768485600,
        "customer": {"id": "cus_123", "email": "alex@example.com"},
        "billing_details": {
            "email": "billing@example.com",
            "address": {"country": "US"},
        },
        "payment_method_details": {"type": "card"},
        "description": "Payment",
    }
