"""Geography-based fraud detection rules."""

from ..config import FraudConfig
from ..models import AlertSeverity, AlertType, FraudAlert, Transaction
from .base import FraudRule, RuleContext


def normalize_location(location: str) -> str:
    """Canonical form used for location comparisons."""
    return " ".join(location.split()).casefold()


class UnusualLocationRule(FraudRule):
    """Triggers when a customer transacts from a location never seen before.

    Needs an established history to compare against: with no known locations
    every location would be "new", so the rule stays quiet until the caller
    has recorded at least ``geo.min_known_locations`` of them.
    """

    rule_id = "unusual_location"
    alert_type = AlertType.UNUSUAL_LOCATION
    severity = AlertSeverity.MEDIUM
    id_suffix = "location"
    display_name = "Unusual Location"

    def evaluate(
        self,
        transaction: Transaction,
        context: RuleContext,
        config: FraudConfig,
    ) -> FraudAlert | None:
        if not transaction.location:
            return None

        known = {normalize_location(loc) for loc in context.customer_history if loc}
        if len(known) < max(config.geo.min_known_locations, 1):
            return None

        if normalize_location(transaction.location) in known:
            return None

        return self._alert(
            transaction,
            description=(
                f"Transaction from new geographic location detected: {transaction.location}"
            ),
            rule="Payment location differs from customer's usual locations",
        )
