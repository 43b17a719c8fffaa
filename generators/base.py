"""Base generator class with seeded RNG and small formatting helpers."""

import random
import uuid
from datetime import datetime, timedelta
from typing import Any

import numpy as np


class BaseGenerator:
    def __init__(self, config: dict[str, Any], seed: int = 42):
        self.config = config
        self.seed = seed
        self._random = random.Random(seed)
        self._rng = np.random.default_rng(seed)
        self._id_counter = 0

    def _id(self, prefix: str) -> str:
        """Deterministic id: seeded random bits plus a running counter."""
        self._id_counter += 1
        token = uuid.UUID(int=self._random.getrandbits(128), version=4).hex[:16]
        return f"{prefix}_{token}{self._id_counter:04d}"

    def _random_datetime(self, start: datetime, end: datetime) -> datetime:
        """Generate a random datetime between start and end."""
        delta = end - start
        random_seconds = self._random.randint(0, max(1, int(delta.total_seconds())))
        return start + timedelta(seconds=random_seconds)

    def _decimal_str(self, value: float) -> str:
        """Format a float as a decimal string with 2 decimal places."""
        return f"{value:.2f}"

    def _weighted_choice(self, options: dict[str, float]) -> str:
        """Choose from weighted options."""
        items = list(options.keys())
        weights = list(options.values())
        return self._random.choices(items, weights=weights, k=1)[0]
