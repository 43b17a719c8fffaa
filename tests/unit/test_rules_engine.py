"""Unit tests for the rules engine orchestration."""

import pytest

from src.domains.fraud.config import FraudConfig
from src.domains.fraud.exceptions import InvalidTransactionError
from src.domains.fraud.models import AlertSeverity, AlertType
from src.domains.fraud.rules import (
    ALL_RULES,
    FraudRule,
    HighAmountRule,
    RapidTransactionsRule,
    SuspiciousPatternRule,
    UnusualLocationRule,
)
from src.domains.fraud.rules_engine import RulesEngine
from tests.conftest import make_txn, make_window

CONFIG = FraudConfig()
HOME = ["Boston, US", "Miami, US"]


class _ExplodingRule(FraudRule):
    rule_id = "exploding"
    alert_type = AlertType.UNUSUAL_LOCATION
    severity = AlertSeverity.LOW
    id_suffix = "boom"
    display_name = "Exploding"

    def evaluate(self, transaction, context, config):
        raise RuntimeError("boom")


class TestRulesEngine:
    engine = RulesEngine(config=CONFIG)

    def test_default_rule_order(self):
        assert [r.alert_type for r in ALL_RULES] == [
            AlertType.HIGH_AMOUNT,
            AlertType.UNUSUAL_LOCATION,
            AlertType.RAPID_TRANSACTIONS,
            AlertType.SUSPICIOUS_PATTERN,
        ]

    def test_no_alerts_is_empty_list(self):
        alerts = self.engine.evaluate(make_txn(location="Boston, US"), HOME, [])
        assert alerts == []

    def test_high_amount_only(self):
        alerts = self.engine.evaluate(make_txn(amount="1200"), HOME, [])
        assert [a.type for a in alerts] == [AlertType.HIGH_AMOUNT]

    def test_high_amount_exactly_once(self):
        alerts = self.engine.evaluate(make_txn(amount="9999"), HOME, make_window(5))
        assert sum(1 for a in alerts if a.type == AlertType.HIGH_AMOUNT) == 1

    def test_boundary_amount(self):
        assert self.engine.evaluate(make_txn(amount="1000"), [], []) == []
        assert len(self.engine.evaluate(make_txn(amount="1000.01"), [], [])) == 1

    def test_high_amount_and_rapid_yields_pattern(self):
        txn = make_txn(amount="2000", location="Boston, US")
        alerts = self.engine.evaluate(txn, HOME, make_window(5))
        assert [a.type for a in alerts] == [
            AlertType.HIGH_AMOUNT,
            AlertType.RAPID_TRANSACTIONS,
            AlertType.SUSPICIOUS_PATTERN,
        ]
        pattern = alerts[-1]
        assert pattern.severity == AlertSeverity.HIGH
        assert "(2 indicators)" in pattern.description

    def test_all_three_factors_in_order(self):
        txn = make_txn(amount="2000", location="Lagos, NG")
        alerts = self.engine.evaluate(txn, HOME, make_window(6))
        assert [a.type for a in alerts] == [
            AlertType.HIGH_AMOUNT,
            AlertType.UNUSUAL_LOCATION,
            AlertType.RAPID_TRANSACTIONS,
            AlertType.SUSPICIOUS_PATTERN,
        ]

    def test_location_and_rapid_yields_pattern(self):
        txn = make_txn(location="Lagos, NG")
        alerts = self.engine.evaluate(txn, HOME, make_window(5))
        assert alerts[-1].type == AlertType.SUSPICIOUS_PATTERN

    def test_empty_history_returns_at_most_high_amount(self):
        for amount in ("5", "1000", "1500"):
            alerts = self.engine.evaluate(make_txn(amount=amount, location="Lagos, NG"))
            assert all(a.type == AlertType.HIGH_AMOUNT for a in alerts)
            assert len(alerts) <= 1

    def test_alert_ids_idempotent(self):
        txn = make_txn(txn_id="txn-42", amount="2000", location="Lagos, NG")
        first = self.engine.evaluate(txn, HOME, make_window(5))
        second = self.engine.evaluate(txn, HOME, make_window(5))
        assert [a.id for a in first] == [a.id for a in second]
        assert len({a.id for a in first}) == len(first)
        assert first == second

    def test_does_not_mutate_inputs(self):
        history = list(HOME)
        window = make_window(5)
        window_before = list(window)
        self.engine.evaluate(make_txn(amount="2000", location="Lagos, NG"), history, window)
        assert history == HOME
        assert window == window_before

    def test_accepts_raw_mappings(self, sample_transaction_payload):
        payload = dict(sample_transaction_payload, amount="1500.00")
        alerts = self.engine.evaluate(payload)
        assert [a.type for a in alerts] == [AlertType.HIGH_AMOUNT]
        assert alerts[0].id == "alert_ch_3PabcXYZ_high_amount"

    def test_invalid_transaction_rejected(self, sample_transaction_payload):
        payload = dict(sample_transaction_payload, amount="-5")
        with pytest.raises(InvalidTransactionError) as exc_info:
            self.engine.evaluate(payload)
        assert exc_info.value.fields == ["amount"]

    def test_invalid_window_entry_rejected(self, sample_transaction_payload):
        bad_prior = dict(sample_transaction_payload, id="prior", customer="")
        with pytest.raises(InvalidTransactionError) as exc_info:
            self.engine.evaluate(make_txn(), [], [bad_prior])
        assert "customer" in exc_info.value.fields

    def test_failing_rule_does_not_suppress_others(self):
        engine = RulesEngine(
            config=CONFIG,
            rules=[
                HighAmountRule(),
                _ExplodingRule(),
                RapidTransactionsRule(),
                SuspiciousPatternRule(),
            ],
        )
        alerts = engine.evaluate(make_txn(amount="2000"), [], make_window(5))
        assert [a.type for a in alerts] == [
            AlertType.HIGH_AMOUNT,
            AlertType.RAPID_TRANSACTIONS,
            AlertType.SUSPICIOUS_PATTERN,
        ]

    def test_custom_rule_list(self):
        engine = RulesEngine(config=CONFIG, rules=[UnusualLocationRule()])
        alerts = engine.evaluate(make_txn(amount="5000", location="Lagos, NG"), HOME)
        assert [a.type for a in alerts] == [AlertType.UNUSUAL_LOCATION]

    def test_alerts_serialize(self):
        alerts = self.engine.evaluate(make_txn(amount="1500"), [], [])
        data = alerts[0].model_dump(mode="json")
        assert data["type"] == "high_amount"
        assert data["severity"] == "high"
        assert data["status"] == "investigating"
        assert data["amount"] == 1500.0
