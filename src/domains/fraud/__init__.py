"""Fraud detection domain."""

from .config import FraudConfig, default_config
from .exceptions import FraudDomainError, InvalidTransactionError
from .history import TransactionHistoryStore
from .ingest import transaction_from_charge
from .models import (
    AlertSeverity,
    AlertStatus,
    AlertType,
    EvaluationRequest,
    FraudAlert,
    ScoringResult,
    Transaction,
    TransactionStatus,
    coerce_transaction,
)
from .rules import ALL_RULES
from .rules_engine import RulesEngine
from .scorer import FraudScorer

__all__ = [
    "ALL_RULES",
    "AlertSeverity",
    "AlertStatus",
    "AlertType",
    "EvaluationRequest",
    "FraudAlert",
    "FraudConfig",
    "FraudDomainError",
    "FraudScorer",
    "InvalidTransactionError",
    "RulesEngine",
    "ScoringResult",
    "Transaction",
    "TransactionHistoryStore",
    "TransactionStatus",
    "coerce_transaction",
    "default_config",
    "transaction_from_charge",
]
