"""Subscriber storage backends."""

from blockwatch.storage.subscribers import MemorySubscriberRegistry, SubscriberRegistry

__all__ = ["SubscriberRegistry", "MemorySubscriberRegistry"]
