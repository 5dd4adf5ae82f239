"""Outbound lifecycle events.

Services publish after their transaction has committed. Delivery problems
belong to the publisher: they are never raised back into the service.
"""

from abc import ABC, abstractmethod

from gigs.domain.events import LifecycleEvent


class EventPublisher(ABC):
    @abstractmethod
    def publish(self, event: LifecycleEvent) -> None:
        ...


class NullPublisher(EventPublisher):
    """Drops events. For callers that have no subscribers."""

    def publish(self, event: LifecycleEvent) -> None:
        return None
