"""Velocity-based fraud detection rules."""

from datetime import timedelta

from ..config import FraudConfig
from ..models import AlertSeverity, AlertType, FraudAlert, Transaction
from .base import FraudRule, RuleContext


def count_prior_in_window(
    transaction: Transaction,
    recent_transactions: tuple[Transaction, ...] | list[Transaction],
    window: timedelta,
) -> int:
    """Count same-customer transactions in ``[timestamp - window, timestamp]``.

    The lower bound is open: a transaction exactly ``window`` earlier is not
    counted. The current transaction (matched by id) and anything dated after
    it are never counted.
    """
    count = 0
    for prior in recent_transactions:
        if prior.customer != transaction.customer or prior.id == transaction.id:
            continue
        age = transaction.timestamp - prior.timestamp
        if timedelta(0) <= age < window:
            count += 1
    return count


class RapidTransactionsRule(FraudRule):
    """Triggers when a customer makes many transactions within a short window."""

    rule_id = "rapid_transactions"
    alert_type = AlertType.RAPID_TRANSACTIONS
    severity = AlertSeverity.MEDIUM
    id_suffix = "rapid"
    display_name = "Rapid Transactions"

    def evaluate(
        self,
        transaction: Transaction,
        context: RuleContext,
        config: FraudConfig,
    ) -> FraudAlert | None:
        threshold = config.velocity.rapid_txn_count
        window_ms = config.velocity.rapid_window_ms

        count = count_prior_in_window(
            transaction, context.recent_transactions, timedelta(milliseconds=window_ms)
        )
        if count < threshold:
            return None

        window_seconds = window_ms / 1000
        return self._alert(
            transaction,
            description=(
                f"Multiple rapid transactions detected: {count + 1} transactions "
                f"in {window_seconds:g} seconds"
            ),
            rule=f"At least {threshold} prior transactions within {window_seconds:g} seconds",
        )
