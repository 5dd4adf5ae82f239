"""Invite state machine.

Invite lifecycle:
    PENDING → ACCEPTED | DECLINED | CANCELLED
    ACCEPTED → CONFIRMED | CANCELLED
    CONFIRMED → CANCELLED (only through confirmation cancellation)

DECLINED and CANCELLED are terminal. Invites are immutable: every
transition returns a new Invite. Persistence and events are handled by
the service layer.
"""

from dataclasses import replace
from datetime import datetime

from gigs.domain.errors import InvalidInviteTransitionError, InviteAlreadyRespondedError
from gigs.domain.models import DeclineReason, Invite, InviteDecision, InviteStatus

_TRANSITIONS: dict[InviteStatus, frozenset[InviteStatus]] = {
    InviteStatus.PENDING: frozenset(
        {InviteStatus.ACCEPTED, InviteStatus.DECLINED, InviteStatus.CANCELLED}
    ),
    InviteStatus.ACCEPTED: frozenset({InviteStatus.CONFIRMED, InviteStatus.CANCELLED}),
    InviteStatus.CONFIRMED: frozenset({InviteStatus.CANCELLED}),
    InviteStatus.DECLINED: frozenset(),
    InviteStatus.CANCELLED: frozenset(),
}

# Invites that still compete for their role.
OPEN_FOR_ROLE = frozenset({InviteStatus.PENDING, InviteStatus.ACCEPTED})

# Invites that block a second invite for the same musician and role.
ACTIVE = frozenset({InviteStatus.PENDING, InviteStatus.ACCEPTED, InviteStatus.CONFIRMED})


class InviteLifecycle:
    """Validates and applies invite transitions against ``_TRANSITIONS``."""

    @staticmethod
    def respond(
        invite: Invite,
        decision: InviteDecision,
        at: datetime,
        reason: DeclineReason | None = None,
    ) -> Invite:
        """Accept or decline a pending invite.

        ``reason`` is kept only on declines.

        Raises:
            InviteAlreadyRespondedError: If the invite is not pending.
        """
        if decision is InviteDecision.ACCEPT:
            target, reason = InviteStatus.ACCEPTED, None
        else:
            target = InviteStatus.DECLINED
        if target not in _TRANSITIONS[invite.status]:
            raise InviteAlreadyRespondedError(str(invite.id), invite.status.value)
        return replace(
            invite, status=target, responded_at=at, updated_at=at, decline_reason=reason
        )

    @staticmethod
    def withdraw(invite: Invite, at: datetime) -> Invite:
        """Organizer withdraws an invite that has not been confirmed."""
        return InviteLifecycle._move(invite, InviteStatus.CANCELLED, at, OPEN_FOR_ROLE)

    @staticmethod
    def confirm(invite: Invite, at: datetime) -> Invite:
        return InviteLifecycle._move(invite, InviteStatus.CONFIRMED, at)

    @staticmethod
    def cancel_confirmed(invite: Invite, at: datetime) -> Invite:
        return InviteLifecycle._move(
            invite, InviteStatus.CANCELLED, at, frozenset({InviteStatus.CONFIRMED})
        )

    @staticmethod
    def _move(
        invite: Invite,
        target: InviteStatus,
        at: datetime,
        sources: frozenset[InviteStatus] | None = None,
    ) -> Invite:
        # sources narrows the table for paths that share a target state
        if target not in _TRANSITIONS[invite.status] or (
            sources is not None and invite.status not in sources
        ):
            raise InvalidInviteTransitionError(
                str(invite.id), invite.status.value, target.value
            )
        return replace(invite, status=target, updated_at=at)
