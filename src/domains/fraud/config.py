"""Fraud detection configuration with sensible defaults."""

import os
from dataclasses import dataclass, field


@dataclass
class AmountThresholds:
    # Strict: an amount equal to the threshold does not alert
    high_amount_min: float = 1_000.0


@dataclass
class VelocityThresholds:
    rapid_txn_count: int = 5
    rapid_window_ms: int = 60_000


@dataclass
class GeoThresholds:
    # Unusual-location needs at least this many known locations to compare against
    min_known_locations: int = 1


@dataclass
class PatternThresholds:
    min_factors: int = 2


@dataclass
class FraudConfig:
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    velocity: VelocityThresholds = field(default_factory=VelocityThresholds)
    geo: GeoThresholds = field(default_factory=GeoThresholds)
    patterns: PatternThresholds = field(default_factory=PatternThresholds)

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        if v := os.getenv("FRAUD_HIGH_AMOUNT_MIN"):
            config.amount.high_amount_min = float(v)

        if v := os.getenv("FRAUD_RAPID_TXN_COUNT"):
            config.velocity.rapid_txn_count = int(v)
        if v := os.getenv("FRAUD_RAPID_WINDOW_MS"):
            config.velocity.rapid_window_ms = int(v)

        if v := os.getenv("FRAUD_MIN_KNOWN_LOCATIONS"):
            config.geo.min_known_locations = int(v)

        if v := os.getenv("FRAUD_PATTERN_MIN_FACTORS"):
            config.patterns.min_factors = int(v)

        return config


# Module-level default instance
default_config = FraudConfig()
