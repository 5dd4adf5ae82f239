"""Gig publication lifecycle.

    DRAFT → PUBLISHED | CANCELLED
    PUBLISHED → CANCELLED

Cancelled gigs are kept (soft delete) so their invites stay traceable.
"""

from dataclasses import replace
from datetime import datetime

from gigs.domain.errors import InvalidGigTransitionError
from gigs.domain.models import Gig, GigStatus

_TRANSITIONS: dict[GigStatus, frozenset[GigStatus]] = {
    GigStatus.DRAFT: frozenset({GigStatus.PUBLISHED, GigStatus.CANCELLED}),
    GigStatus.PUBLISHED: frozenset({GigStatus.CANCELLED}),
    GigStatus.CANCELLED: frozenset(),
}


def transition(gig: Gig, target: GigStatus) -> Gig:
    if target not in _TRANSITIONS[gig.status]:
        raise InvalidGigTransitionError(str(gig.id), gig.status.value, target.value)
    return replace(gig, status=target)


def is_open_for_invites(gig: Gig, now: datetime) -> bool:
    """Published and not started yet."""
    return gig.status is GigStatus.PUBLISHED and now < gig.starts_at
