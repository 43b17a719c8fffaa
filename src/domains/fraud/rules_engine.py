"""Rule-based fraud detection engine."""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from .config import FraudConfig, default_config
from .models import AlertType, FraudAlert, Transaction, coerce_transaction
from .rules import ALL_RULES, FraudRule, RuleContext

logger = structlog.get_logger()


class RulesEngine:
    """Evaluates a transaction against the fraud detection rules.

    Rules run in list order and each one is independent: a rule that raises
    is logged and treated as not fired, the others still run. Composite rules
    receive the outcomes of the rules evaluated before them, so they must sit
    after their factors in the list.

    The engine keeps no state between calls. History is an input, owned and
    updated by the caller.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        rules: Iterable[FraudRule] | None = None,
    ) -> None:
        self._rules = list(ALL_RULES if rules is None else rules)
        self._config = config or default_config
        logger.info("rules_engine_initialized", rule_count=len(self._rules))

    @property
    def rules(self) -> list[FraudRule]:
        return list(self._rules)

    def evaluate(
        self,
        transaction: Transaction | Mapping[str, Any],
        customer_history: Iterable[str] | None = None,
        recent_transactions: Iterable[Transaction | Mapping[str, Any]] | None = None,
        config: FraudConfig | None = None,
    ) -> list[FraudAlert]:
        """Evaluate a transaction against all rules. Returns alerts in rule order.

        Raises InvalidTransactionError if the transaction or any entry of the
        recent-transaction window is malformed.
        """
        cfg = config or self._config
        txn = coerce_transaction(transaction)
        window = tuple(coerce_transaction(t) for t in (recent_transactions or ()))
        history = frozenset(loc for loc in (customer_history or ()) if loc)

        outcomes: dict[AlertType, bool] = {}
        alerts: list[FraudAlert] = []

        for rule in self._rules:
            context = RuleContext(
                customer_history=history,
                recent_transactions=window,
                outcomes=dict(outcomes) if rule.composite else {},
            )
            try:
                alert = rule.evaluate(txn, context, cfg)
            except Exception:
                logger.exception(
                    "rule_evaluation_error", rule_id=rule.rule_id, transaction_id=txn.id
                )
                alert = None

            outcomes[rule.alert_type] = alert is not None
            if alert is not None:
                alerts.append(alert)

        logger.info(
            "rules_evaluated",
            transaction_id=txn.id,
            customer=txn.customer,
            alert_count=len(alerts),
            alert_types=[a.type.value for a in alerts],
        )

        return alerts
