"""Delivery of lifecycle events to collaborators via Django signals.

Receivers connect to ``lifecycle_event`` and get ``event=<LifecycleEvent>``.
Delivery waits for the surrounding transaction to commit, and a failing
receiver is logged without affecting other receivers or the transition
that produced the event.
"""

import logging

from django.db import transaction
from django.dispatch import Signal

from gigs.domain.events import LifecycleEvent
from gigs.services.publisher import EventPublisher

logger = logging.getLogger(__name__)

lifecycle_event = Signal()


class DjangoSignalPublisher(EventPublisher):
    def publish(self, event: LifecycleEvent) -> None:
        transaction.on_commit(lambda: self._deliver(event))

    def _deliver(self, event: LifecycleEvent) -> None:
        responses = lifecycle_event.send_robust(sender=type(event), event=event)
        for receiver, response in responses:
            if isinstance(response, Exception):
                logger.error(
                    "Lifecycle event receiver failed",
                    exc_info=response,
                    extra={
                        "event": event.name,
                        "receiver": getattr(receiver, "__qualname__", repr(receiver)),
                    },
                )
