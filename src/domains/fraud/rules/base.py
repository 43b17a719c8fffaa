"""Abstract base class for fraud detection rules."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

from ..config import FraudConfig
from ..models import AlertSeverity, AlertType, FraudAlert, Transaction


@dataclass(frozen=True)
class RuleContext:
    """Read-only inputs shared by every rule in one evaluation pass.

    ``outcomes`` is filled by the engine as rules run, so a composite rule
    placed after its factors sees whether each of them fired.
    """

    customer_history: frozenset[str] = frozenset()
    recent_transactions: tuple[Transaction, ...] = ()
    outcomes: Mapping[AlertType, bool] = field(default_factory=dict)


class FraudRule(ABC):
    """Base class for all fraud rules.

    Rules are synchronous pure predicates: they receive the transaction, the
    evaluation context, and config, and return at most one alert.
    """

    rule_id: str
    alert_type: AlertType
    severity: AlertSeverity
    # Suffix of the deterministic alert id: alert_<transaction id>_<suffix>
    id_suffix: str
    display_name: str
    # Composite rules are derived from earlier outcomes in the same pass
    composite: bool = False

    @abstractmethod
    def evaluate(
        self,
        transaction: Transaction,
        context: RuleContext,
        config: FraudConfig,
    ) -> FraudAlert | None:
        """Evaluate this rule and return an alert, or None if it did not fire."""
        ...

    def alert_id(self, transaction: Transaction) -> str:
        return f"alert_{transaction.id}_{self.id_suffix}"

    def _alert(self, transaction: Transaction, description: str, rule: str) -> FraudAlert:
        """Convenience: build this rule's alert from the triggering transaction."""
        return FraudAlert(
            id=self.alert_id(transaction),
            type=self.alert_type,
            severity=self.severity,
            description=description,
            rule=rule,
            amount=transaction.amount,
            customer=transaction.customer,
            timestamp=transaction.timestamp,
        )
