"""Synthetic payment transaction source with fraud-pattern injection."""

from datetime import UTC, datetime, timedelta
from typing import Any

from .base import BaseGenerator
from .utils.distributions import burst_offsets, log_normal_sample
from .utils.geography import random_foreign_location, random_home_location
from .utils.names import random_email

DEFAULT_CONFIG: dict[str, Any] = {
    "num_customers": 50,
    "time_span_hours": 24,
    "amount_distribution": {"log_normal_mean": 3.8, "log_normal_std": 0.9},
    "status_weights": {"succeeded": 0.9, "failed": 0.07, "pending": 0.03},
    "method_weights": {"card": 0.8, "us_bank_account": 0.15, "link": 0.05},
    "high_amount_rate": 0.0,
    "new_location_rate": 0.0,
    "rapid_burst_rate": 0.0,
    "rapid_burst_size": [6, 8],
    "rapid_window_seconds": 60,
}


class TransactionGenerator(BaseGenerator):
    """Generates transaction dicts shaped like the scoring engine's input.

    Injected patterns are recorded in ``injections`` (transaction id ->
    pattern name) rather than on the transactions themselves.
    """

    def __init__(self, config: dict[str, Any] | None = None, seed: int = 42):
        super().__init__({**DEFAULT_CONFIG, **(config or {})}, seed=seed)
        self.injections: dict[str, str] = {}

    def generate(self, num_transactions: int = 1000) -> list[dict[str, Any]]:
        config = self.config
        base_time = datetime(2026, 1, 1, tzinfo=UTC)
        end_time = base_time + timedelta(hours=config["time_span_hours"])
        amount_dist = config["amount_distribution"]

        customers = []
        for _ in range(config["num_customers"]):
            home = random_home_location(self._random)
            customers.append({"email": random_email(self._random), "home": home.label})

        transactions: list[dict[str, Any]] = []
        produced = 0
        while produced < num_transactions:
            customer = self._random.choice(customers)
            txn_time = self._random_datetime(base_time, end_time)
            amount = log_normal_sample(
                self._rng,
                amount_dist["log_normal_mean"],
                amount_dist["log_normal_std"],
                min_val=0.5,
                max_val=1000.0,
            )
            location = customer["home"]
            pattern = None

            roll = self._random.random()
            if roll < config["high_amount_rate"]:
                amount = self._random.uniform(1000.01, 5000.0)
                pattern = "high_amount"
            elif roll < config["high_amount_rate"] + config["new_location_rate"]:
                location = random_foreign_location(self._random, {customer["home"]}).label
                pattern = "new_location"
            elif self._random.random() < config["rapid_burst_rate"]:
                burst = self._make_burst(
                    customer, txn_time, amount_dist, limit=num_transactions - produced
                )
                transactions.extend(burst)
                produced += len(burst)
                continue

            txn = self._make_transaction(customer, amount, txn_time, location)
            if pattern:
                self.injections[txn["id"]] = pattern
            transactions.append(txn)
            produced += 1

        transactions.sort(key=lambda t: t["timestamp"])
        return transactions

    def _make_burst(
        self, customer: dict, start: datetime, amount_dist: dict, limit: int
    ) -> list[dict[str, Any]]:
        low, high = self.config["rapid_burst_size"]
        size = min(self._random.randint(low, high), limit)
        offsets = burst_offsets(self._rng, size, self.config["rapid_window_seconds"])

        burst = []
        for offset in offsets:
            amount = log_normal_sample(
                self._rng, amount_dist["log_normal_mean"] - 1.0, 0.5, max_val=200.0
            )
            txn = self._make_transaction(
                customer, amount, start + timedelta(seconds=offset), customer["home"]
            )
            self.injections[txn["id"]] = "rapid_burst"
            burst.append(txn)
        return burst

    def _make_transaction(
        self, customer: dict, amount: float, txn_time: datetime, location: str
    ) -> dict[str, Any]:
        return {
            "id": self._id("ch"),
            "amount": self._decimal_str(amount),
            "currency": "USD",
            "status": self._weighted_choice(self.config["status_weights"]),
            "customer": customer["email"],
            "timestamp": txn_time.isoformat(),
            "method": self._weighted_choice(self.config["method_weights"]),
            "location": location,
        }
