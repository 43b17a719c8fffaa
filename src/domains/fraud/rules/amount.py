"""Amount-based fraud detection rules."""

from decimal import Decimal

from ..config import FraudConfig
from ..models import AlertSeverity, AlertType, FraudAlert, Transaction
from .base import FraudRule, RuleContext


class HighAmountRule(FraudRule):
    """Triggers for single transactions strictly above the high-amount threshold.

    The threshold is applied in the transaction's own currency units; no
    conversion is attempted.
    """

    rule_id = "high_amount"
    alert_type = AlertType.HIGH_AMOUNT
    severity = AlertSeverity.HIGH
    id_suffix = "high_amount"
    display_name = "High Amount"

    def evaluate(
        self,
        transaction: Transaction,
        context: RuleContext,
        config: FraudConfig,
    ) -> FraudAlert | None:
        threshold = config.amount.high_amount_min
        if transaction.amount <= Decimal(str(threshold)):
            return None

        return self._alert(
            transaction,
            description=(
                f"Unusually high transaction amount detected: ${transaction.amount:,.2f}"
            ),
            rule=f"Amount exceeds threshold of ${threshold:,.0f}",
        )
