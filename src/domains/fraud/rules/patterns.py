"""Pattern-based fraud detection rules."""

from ..config import FraudConfig
from ..models import AlertSeverity, AlertType, FraudAlert, Transaction
from .base import FraudRule, RuleContext

# Factor display names, in evaluation order
FACTOR_NAMES: dict[AlertType, str] = {
    AlertType.HIGH_AMOUNT: "High Amount",
    AlertType.UNUSUAL_LOCATION: "Unusual Location",
    AlertType.RAPID_TRANSACTIONS: "Rapid Transactions",
}


class SuspiciousPatternRule(FraudRule):
    """Composite rule: several independent red flags on the same transaction.

    Never looks at the transaction's data directly; it only counts which of
    its factor rules fired earlier in the same pass.
    """

    rule_id = "suspicious_pattern"
    alert_type = AlertType.SUSPICIOUS_PATTERN
    severity = AlertSeverity.HIGH
    id_suffix = "pattern"
    display_name = "Suspicious Pattern"
    composite = True

    def __init__(self, factors: dict[AlertType, str] | None = None) -> None:
        self.factors = dict(factors or FACTOR_NAMES)

    def evaluate(
        self,
        transaction: Transaction,
        context: RuleContext,
        config: FraudConfig,
    ) -> FraudAlert | None:
        fired = [name for t, name in self.factors.items() if context.outcomes.get(t, False)]
        if len(fired) < config.patterns.min_factors:
            return None

        return self._alert(
            transaction,
            description=f"Multiple suspicious factors detected ({len(fired)} indicators)",
            rule=f"Combination of {len(fired)} suspicious factors: {', '.join(fired)}",
        )
