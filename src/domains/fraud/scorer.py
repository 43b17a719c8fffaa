"""Fraud scoring pipeline: history -> rules -> record -> alert sinks."""

from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

import structlog

from .config import FraudConfig, default_config
from .history import TransactionHistoryStore
from .models import AlertSeverity, FraudAlert, ScoringResult, Transaction, coerce_transaction
from .rules_engine import RulesEngine

logger = structlog.get_logger()

AlertSink = Callable[[FraudAlert], None]


class FraudScorer:
    """Drives the engine for a stream of transactions.

    Owns the history store and serializes work per customer: the window is
    read, the transaction evaluated, and the window updated while holding
    that customer's lock. Different customers never contend.
    """

    def __init__(
        self,
        engine: RulesEngine | None = None,
        store: TransactionHistoryStore | None = None,
        config: FraudConfig | None = None,
        alert_sinks: Iterable[AlertSink] = (),
    ) -> None:
        self._config = config or default_config
        self._engine = engine or RulesEngine(config=self._config)
        if store is None:
            window_seconds = self._config.velocity.rapid_window_ms / 1000
            store = TransactionHistoryStore(retention_seconds=window_seconds)
        if store.retention.total_seconds() * 1000 < self._config.velocity.rapid_window_ms:
            raise ValueError(
                "History retention is shorter than the rapid-transaction window"
            )
        if (
            store.max_per_customer is not None
            and store.max_per_customer < self._config.velocity.rapid_txn_count
        ):
            raise ValueError(
                "History max_per_customer is smaller than the rapid-transaction count"
            )
        self._store = store
        self._alert_sinks = list(alert_sinks)
        self._last_sweep: datetime | None = None

    @property
    def store(self) -> TransactionHistoryStore:
        return self._store

    def add_sink(self, sink: AlertSink) -> None:
        self._alert_sinks.append(sink)

    def score_transaction(self, transaction: Transaction | Mapping[str, Any]) -> ScoringResult:
        """Evaluate one transaction against its customer's history, then record it."""
        txn = coerce_transaction(transaction)

        with self._store.lock(txn.customer):
            alerts = self._engine.evaluate(
                txn,
                customer_history=self._store.known_locations(txn.customer),
                recent_transactions=self._store.recent(txn.customer),
                config=self._config,
            )
            self._store.record(txn)
        self._evict_idle(txn.timestamp)

        for alert in alerts:
            self._publish(alert)

        result = ScoringResult(
            transaction_id=txn.id,
            alerts=alerts,
            evaluated_at=datetime.now(UTC),
        )

        logger.info(
            "transaction_scored",
            transaction_id=txn.id,
            customer=txn.customer,
            alert_count=result.alert_count,
            highest_severity=result.highest_severity,
        )
        return result

    def score_batch(
        self, transactions: Iterable[Transaction | Mapping[str, Any]]
    ) -> list[ScoringResult]:
        """Score transactions in timestamp order.

        The whole batch is validated up front so a malformed entry is reported
        before any history is written.
        """
        txns = [coerce_transaction(t) for t in transactions]
        txns.sort(key=lambda t: t.timestamp)
        return [self.score_transaction(t) for t in txns]

    def _evict_idle(self, now: datetime) -> None:
        # One sweep per retention period of transaction time
        if self._last_sweep is not None and now - self._last_sweep < self._store.retention:
            return
        self._last_sweep = now
        self._store.evict_idle(now)

    def _publish(self, alert: FraudAlert) -> None:
        for sink in self._alert_sinks:
            try:
                sink(alert)
            except Exception:
                logger.exception("alert_sink_failed", alert_id=alert.id)
        if alert.severity == AlertSeverity.HIGH:
            logger.warning(
                "fraud_alert_created",
                alert_id=alert.id,
                alert_type=alert.type.value,
                customer=alert.customer,
            )
