"""Subscriber registry: which addresses may be queried for transactions."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class SubscriberRegistry(ABC):
    """Capability to check, add and remove address membership.

    Implementations must be idempotent: subscribing a member or unsubscribing
    a non-member leaves the set unchanged and still reports success.
    """

    @abstractmethod
    def is_subscribed(self, address: str) -> bool:
        """Return True iff the address is currently a member."""

    @abstractmethod
    def subscribe(self, address: str) -> bool:
        """Add the address. Returns True when the mutation succeeded."""

    @abstractmethod
    def unsubscribe(self, address: str) -> bool:
        """Remove the address if present. Returns True when the mutation succeeded."""

    @abstractmethod
    def subscribers(self) -> frozenset[str]:
        """Snapshot of the current members."""

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and self.is_subscribed(address)

    def __len__(self) -> int:
        return len(self.subscribers())


class MemorySubscriberRegistry(SubscriberRegistry):
    """In-process set of addresses, lost when the owning engine goes away."""

    def __init__(self, addresses: list[str] | None = None):
        self._lock = threading.Lock()
        self._members: set[str] = set(addresses or [])

    def is_subscribed(self, address: str) -> bool:
        with self._lock:
            return address in self._members

    def subscribe(self, address: str) -> bool:
        with self._lock:
            self._members.add(address)
        return True

    def unsubscribe(self, address: str) -> bool:
        # Membership after removal is always False; nothing is remembered.
        with self._lock:
            self._members.discard(address)
        return True

    def subscribers(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._members)
