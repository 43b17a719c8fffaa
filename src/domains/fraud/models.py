"""Pydantic models for the fraud domain."""

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    computed_field,
    field_serializer,
    field_validator,
)

from .exceptions import InvalidTransactionError


class TransactionStatus(StrEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PENDING = "pending"


class AlertType(StrEnum):
    HIGH_AMOUNT = "high_amount"
    UNUSUAL_LOCATION = "unusual_location"
    RAPID_TRANSACTIONS = "rapid_transactions"
    SUSPICIOUS_PATTERN = "suspicious_pattern"


class AlertSeverity(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AlertStatus(StrEnum):
    INVESTIGATING = "investigating"
    RESOLVED = "resolved"
    FALSE_POSITIVE = "false_positive"


_SEVERITY_RANK = {
    AlertSeverity.LOW: 0,
    AlertSeverity.MEDIUM: 1,
    AlertSeverity.HIGH: 2,
}


class Transaction(BaseModel):
    """A single payment attempt as seen by the scoring engine."""

    id: str = Field(min_length=1)
    amount: Decimal = Field(ge=0)
    currency: str = Field(pattern=r"^[A-Za-z]{3}$")
    status: TransactionStatus
    customer: str = Field(min_length=1)
    timestamp: datetime
    method: str = Field(min_length=1)
    location: str | None = None

    model_config = {"frozen": True, "str_strip_whitespace": True}

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @field_validator("location")
    @classmethod
    def _blank_location_is_none(cls, v: str | None) -> str | None:
        return v or None


class FraudAlert(BaseModel):
    id: str
    type: AlertType
    severity: AlertSeverity
    description: str
    rule: str
    amount: Decimal
    customer: str
    timestamp: datetime
    status: AlertStatus = AlertStatus.INVESTIGATING

    model_config = {"frozen": True}

    @field_serializer("amount", when_used="json")
    def _amount_as_number(self, v: Decimal) -> float:
        return float(v)


class ScoringResult(BaseModel):
    transaction_id: str
    alerts: list[FraudAlert] = []
    evaluated_at: datetime

    @computed_field
    @property
    def alert_count(self) -> int:
        return len(self.alerts)

    @computed_field
    @property
    def highest_severity(self) -> AlertSeverity | None:
        if not self.alerts:
            return None
        return max((a.severity for a in self.alerts), key=_SEVERITY_RANK.__getitem__)


class EvaluationRequest(BaseModel):
    """Stateless evaluation input: the caller supplies all history."""

    transaction: Transaction
    customer_history: list[str] = []
    recent_transactions: list[Transaction] = []


def coerce_transaction(data: Transaction | Mapping[str, Any]) -> Transaction:
    """Return ``data`` as a validated Transaction.

    Raises InvalidTransactionError naming the rejected fields; nothing is
    coerced into range or silently dropped.
    """
    if isinstance(data, Transaction):
        return data
    if not isinstance(data, Mapping):
        raise InvalidTransactionError(
            f"Expected a transaction mapping, got {type(data).__name__}"
        )
    try:
        return Transaction.model_validate(dict(data))
    except ValidationError as exc:
        fields = []
        problems = []
        for err in exc.errors():
            name = ".".join(str(p) for p in err["loc"]) or "transaction"
            if name not in fields:
                fields.append(name)
            problems.append(f"{name}: {err['msg']}")
        txn_id = data.get("id", "<unknown>")
        raise InvalidTransactionError(
            f"Invalid transaction {txn_id}: {'; '.join(problems)}", fields=fields
        ) from exc
