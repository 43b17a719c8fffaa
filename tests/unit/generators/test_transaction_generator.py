"""Tests for the synthetic transaction generator."""

from generators.transaction_generator import TransactionGenerator
from src.domains.fraud.models import AlertType, coerce_transaction
from src.domains.fraud.scorer import FraudScorer

QUIET_CONFIG = {
    "num_customers": 20,
    "time_span_hours": 24,
    "high_amount_rate": 0.0,
    "new_location_rate": 0.0,
    "rapid_burst_rate": 0.0,
}

FRAUD_CONFIG = {
    "num_customers": 10,
    "time_span_hours": 6,
    "high_amount_rate": 0.05,
    "new_location_rate": 0.05,
    "rapid_burst_rate": 0.05,
}


class TestTransactionGenerator:
    def test_deterministic_output(self):
        txns1 = TransactionGenerator(config=FRAUD_CONFIG, seed=42).generate(200)
        txns2 = TransactionGenerator(config=FRAUD_CONFIG, seed=42).generate(200)
        assert txns1 == txns2

    def test_different_seeds_differ(self):
        txns1 = TransactionGenerator(config=QUIET_CONFIG, seed=1).generate(50)
        txns2 = TransactionGenerator(config=QUIET_CONFIG, seed=2).generate(50)
        assert txns1 != txns2

    def test_records_match_transaction_schema(self):
        txns = TransactionGenerator(config=FRAUD_CONFIG, seed=7).generate(300)
        for record in txns:
            coerce_transaction(record)

    def test_exact_requested_count(self):
        txns = TransactionGenerator(config=FRAUD_CONFIG, seed=3).generate(100)
        assert len(txns) == 100

    def test_burst_truncated_to_requested_count(self):
        config = {**QUIET_CONFIG, "rapid_burst_rate": 1.0, "rapid_burst_size": [6, 8]}
        for count in (1, 5, 13):
            gen = TransactionGenerator(config=config, seed=11)
            txns = gen.generate(count)
            assert len(txns) == count
            assert set(gen.injections) == {t["id"] for t in txns}

    def test_sorted_by_timestamp(self):
        txns = TransactionGenerator(config=FRAUD_CONFIG, seed=5).generate(200)
        stamps = [coerce_transaction(t).timestamp for t in txns]
        assert stamps == sorted(stamps)

    def test_unique_ids(self):
        txns = TransactionGenerator(config=FRAUD_CONFIG, seed=9).generate(300)
        assert len({t["id"] for t in txns}) == len(txns)

    def test_quiet_config_has_no_high_amounts(self):
        gen = TransactionGenerator(config=QUIET_CONFIG, seed=11)
        txns = gen.generate(300)
        assert all(float(t["amount"]) <= 1000 for t in txns)
        assert gen.injections == {}

    def test_injected_high_amounts_alert(self):
        gen = TransactionGenerator(config={**QUIET_CONFIG, "high_amount_rate": 0.2}, seed=13)
        txns = gen.generate(100)
        high_ids = {tid for tid, kind in gen.injections.items() if kind == "high_amount"}
        assert high_ids

        scorer = FraudScorer()
        flagged = set()
        for txn in txns:
            result = scorer.score_transaction(txn)
            if any(a.type == AlertType.HIGH_AMOUNT for a in result.alerts):
                flagged.add(result.transaction_id)
        assert flagged == high_ids

    def test_rapid_bursts_alert(self):
        config = {**QUIET_CONFIG, "num_customers": 200, "rapid_burst_rate": 0.1}
        gen = TransactionGenerator(config=config, seed=17)
        txns = gen.generate(200)
        assert "rapid_burst" in gen.injections.values()

        scorer = FraudScorer()
        rapid = [
            r
            for r in (scorer.score_transaction(t) for t in txns)
            if any(a.type == AlertType.RAPID_TRANSACTIONS for a in r.alerts)
        ]
        assert rapid
        assert all(gen.injections.get(r.transaction_id) == "rapid_burst" for r in rapid)
