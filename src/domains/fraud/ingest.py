"""Map payment-gateway charge payloads onto Transactions."""

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from .exceptions import InvalidTransactionError
from .models import Transaction, coerce_transaction

# Zero-decimal currencies are charged in whole units, not cents
ZERO_DECIMAL_CURRENCIES = frozenset({"BIF", "CLP", "JPY", "KRW", "PYG", "VND", "XAF", "XOF"})


def _email(value: Any) -> str | None:
    if isinstance(value, Mapping):
        return value.get("email") or None
    return None


def transaction_from_charge(charge: Mapping[str, Any]) -> Transaction:
    """Convert a Stripe-style charge object to a Transaction.

    ``amount`` arrives in minor units and ``created`` in epoch seconds.
    The customer is the charge customer's email, falling back to the billing
    email and finally "Unknown".
    """
    try:
        currency = str(charge.get("currency") or "usd").upper()
        minor = Decimal(str(charge["amount"]))
        created = datetime.fromtimestamp(int(charge["created"]), tz=UTC)
    except KeyError as exc:
        raise InvalidTransactionError(
            f"Charge {charge.get('id', '<unknown>')} is missing {exc.args[0]}",
            fields=[str(exc.args[0])],
        ) from exc
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise InvalidTransactionError(
            f"Charge {charge.get('id', '<unknown>')} has malformed amount or created: {exc}",
            fields=["amount", "created"],
        ) from exc

    amount = minor if currency in ZERO_DECIMAL_CURRENCIES else minor / 100

    billing = charge.get("billing_details") or {}
    address = billing.get("address") or {}
    method_details = charge.get("payment_method_details") or {}

    return coerce_transaction(
        {
            "id": charge.get("id", ""),
            "amount": amount,
            "currency": currency,
            "status": charge.get("status", "pending"),
            "customer": _email(charge.get("customer")) or _email(billing) or "Unknown",
            "timestamp": created,
            "method": method_details.get("type") or "card",
            "location": address.get("country"),
        }
    )
