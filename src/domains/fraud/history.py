"""Per-customer transaction history used by the history-dependent rules.

The store is owned by whoever drives the engine. The engine only ever reads
snapshots of it; writes go through ``record`` while the caller holds the
customer's lock.
"""

import threading
from collections import defaultdict, deque
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timedelta

import structlog

from .models import Transaction
from .rules.geo import normalize_location

logger = structlog.get_logger()


class TransactionHistoryStore:
    """Time-bounded recent-transaction windows and seen locations, per customer.

    ``retention_seconds`` bounds the window by time relative to the newest
    transaction recorded for that customer. ``max_per_customer`` optionally
    caps memory with a ring buffer. Location history is kept for the life of
    the store since it feeds first-seen checks, not rate checks.

    Windows of customers who stop transacting are only dropped by
    ``evict_idle``; the scorer sweeps as transaction time advances.
    """

    def __init__(
        self,
        retention_seconds: float = 60,
        max_per_customer: int | None = None,
    ) -> None:
        if retention_seconds <= 0:
            raise ValueError("retention_seconds must be positive")
        if max_per_customer is not None and max_per_customer < 1:
            raise ValueError("max_per_customer must be at least 1")

        self._retention = timedelta(seconds=retention_seconds)
        self._max_per_customer = max_per_customer
        self._windows: dict[str, deque[Transaction]] = {}
        self._locations: dict[str, set[str]] = defaultdict(set)
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    @property
    def retention(self) -> timedelta:
        return self._retention

    @property
    def max_per_customer(self) -> int | None:
        return self._max_per_customer

    def _lock_for(self, customer: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(customer)
            if lock is None:
                lock = self._locks[customer] = threading.Lock()
            return lock

    @contextmanager
    def lock(self, customer: str) -> Iterator[None]:
        """Hold the customer's lock across a read-evaluate-record sequence."""
        while True:
            lock = self._lock_for(customer)
            lock.acquire()
            # evict_idle may have retired this lock while we waited on it
            if self._locks.get(customer) is lock:
                break
            lock.release()
        try:
            yield
        finally:
            lock.release()

    def recent(self, customer: str) -> tuple[Transaction, ...]:
        """Snapshot of the customer's window, oldest first."""
        window = self._windows.get(customer)
        return tuple(window) if window else ()

    def known_locations(self, customer: str) -> frozenset[str]:
        return frozenset(self._locations.get(customer, ()))

    def record(self, transaction: Transaction) -> None:
        """Add a transaction to its customer's window and location history."""
        customer = transaction.customer
        window = self._windows.get(customer)
        if window is None:
            with self._registry_lock:
                window = self._windows.setdefault(
                    customer, deque(maxlen=self._max_per_customer)
                )

        # Keep the window time ordered even when events arrive slightly late
        if window and transaction.timestamp < window[-1].timestamp:
            ordered = sorted([*window, transaction], key=lambda t: t.timestamp)
            window.clear()
            window.extend(ordered)
        else:
            window.append(transaction)

        if transaction.location:
            self._locations[customer].add(normalize_location(transaction.location))

        self._prune(window)

    def _prune(self, window: deque[Transaction]) -> None:
        if not window:
            return
        cutoff = window[-1].timestamp - self._retention
        dropped = 0
        while window and window[0].timestamp < cutoff:
            window.popleft()
            dropped += 1
        if dropped:
            logger.debug("history_pruned", dropped=dropped, remaining=len(window))

    def evict_idle(self, now: datetime) -> int:
        """Drop windows whose newest entry is older than ``now - retention``.

        A customer whose lock is currently held is skipped and picked up by a
        later sweep. Seen locations are kept. Returns the number of customers
        evicted.
        """
        cutoff = now - self._retention
        evicted = 0
        with self._registry_lock:
            for customer in set(self._windows) | set(self._locks):
                window = self._windows.get(customer)
                if window and window[-1].timestamp >= cutoff:
                    continue
                lock = self._locks.get(customer)
                if lock is not None and not lock.acquire(blocking=False):
                    continue
                self._windows.pop(customer, None)
                if lock is not None:
                    del self._locks[customer]
                    lock.release()
                evicted += 1
        if evicted:
            logger.debug("history_evicted", customers=evicted, remaining=len(self._windows))
        return evicted

    def customers(self) -> list[str]:
        return sorted(set(self._windows) | set(self._locations))

    def clear(self) -> None:
        with self._registry_lock:
            self._windows.clear()
            self._locations.clear()
            self._locks.clear()

    def __len__(self) -> int:
        return sum(len(w) for w in self._windows.values())
