"""Fraud detection endpoints backed by the rules engine."""

import structlog
from fastapi import APIRouter

from src.config import settings
from src.domains.fraud.config import FraudConfig
from src.domains.fraud.history import TransactionHistoryStore
from src.domains.fraud.models import EvaluationRequest, FraudAlert, ScoringResult, Transaction
from src.domains.fraud.rules_engine import RulesEngine
from src.domains.fraud.scorer import FraudScorer

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/fraud", tags=["fraud"])

_config = FraudConfig.from_env()
_engine = RulesEngine(config=_config)
_scorer = FraudScorer(
    engine=_engine,
    store=TransactionHistoryStore(
        retention_seconds=max(
            settings.history_retention_seconds, _config.velocity.rapid_window_ms / 1000
        ),
        max_per_customer=settings.history_max_per_customer,
    ),
    config=_config,
)


def get_scorer() -> FraudScorer:
    return _scorer


@router.post("/evaluate")
async def evaluate_transaction(transaction: Transaction) -> ScoringResult:
    """Score a transaction against the service's in-memory customer history."""
    return _scorer.score_transaction(transaction)


@router.post("/evaluate/stateless")
async def evaluate_stateless(request: EvaluationRequest) -> list[FraudAlert]:
    """Score a transaction using only the history supplied in the request."""
    return _engine.evaluate(
        request.transaction,
        customer_history=request.customer_history,
        recent_transactions=request.recent_transactions,
    )


@router.get("/rules")
async def list_rules() -> dict:
    """Return the rule set in evaluation order with the active thresholds."""
    return {
        "rule_count": len(_engine.rules),
        "rules": [
            {
                "rule_id": rule.rule_id,
                "alert_type": rule.alert_type.value,
                "severity": rule.severity.value,
                "composite": rule.composite,
            }
            for rule in _engine.rules
        ],
        "thresholds": {
            "high_amount_min": _config.amount.high_amount_min,
            "rapid_txn_count": _config.velocity.rapid_txn_count,
            "rapid_window_ms": _config.velocity.rapid_window_ms,
            "min_known_locations": _config.geo.min_known_locations,
            "pattern_min_factors": _config.patterns.min_factors,
        },
    }
