"""Confirming one musician per role, and unwinding a confirmation."""

import logging

from gigs.domain import (
    CancellationOutcome,
    CancellationRecord,
    Confirmation,
    ConfirmationId,
    GigStatus,
    InviteId,
    Party,
    RoleId,
)
from gigs.domain.cancellation_policy import CancellationPolicy
from gigs.domain.confirmation import ConfirmationCoordinator
from gigs.domain.errors import (
    ConfirmationNotFoundError,
    GigNotOpenError,
    NotParticipantError,
)
from gigs.domain.events import ConfirmationCancelled, MusicianConfirmed
from gigs.domain.invite_lifecycle import InviteLifecycle
from gigs.services.base import BookingServiceBase, parse_actor, parse_id

logger = logging.getLogger(__name__)


class ConfirmationService(BookingServiceBase):
    def __init__(
        self, *args, cancellation_policy: CancellationPolicy | None = None, **kwargs
    ) -> None:
        super().__init__(*args, **kwargs)
        self._policy = cancellation_policy or CancellationPolicy()

    def confirm_musician(self, role_id: str, invite_id: str, actor_id: str) -> Confirmation:
        """Book the musician of an accepted invite for a role.

        All other pending or accepted invites for the role are cancelled in
        the same transaction.

        Raises:
            NotGigOrganizerError: If the actor does not own the gig.
            GigNotOpenError: If the gig is not published.
            InviteRoleMismatchError: If the invite belongs to another role.
            ConfirmationExistsError: If the role is already confirmed.
            InvalidInviteTransitionError: If the invite is not accepted.
        """
        actor = parse_actor(actor_id)
        rid = parse_id(RoleId, role_id, "role_id")
        iid = parse_id(InviteId, invite_id, "invite_id")
        now = self._clock()

        with self._store.lock_role(rid):
            role = self._get_role(rid)
            gig = self._get_gig(role.gig_id)
            self._require_organizer(gig, actor)
            if gig.status is not GigStatus.PUBLISHED:
                raise GigNotOpenError(str(gig.id))
            plan = ConfirmationCoordinator.plan(
                role,
                self._get_invite(iid),
                self._store.list_invites_for_role(rid),
                self._store.get_confirmation_for_role(rid),
                now,
            )
            self._store.add_confirmation(plan.confirmation)
            self._store.save_invite(plan.confirmed_invite)
            for sibling in plan.cancelled_invites:
                self._store.save_invite(sibling)

        confirmation = plan.confirmation
        logger.info(
            "Musician confirmed",
            extra={
                "role_id": str(rid),
                "invite_id": str(iid),
                "cancelled_siblings": len(plan.cancelled_invites),
            },
        )
        self._publisher.publish(
            MusicianConfirmed(
                occurred_at=now,
                confirmation_id=confirmation.id,
                invite_id=confirmation.invite_id,
                gig_id=gig.id,
                role_id=rid,
                musician_id=confirmation.musician_id,
                organizer_id=gig.organizer_id,
                cancelled_invite_ids=tuple(invite.id for invite in plan.cancelled_invites),
            )
        )
        return confirmation

    def cancel_confirmation(self, confirmation_id: str, actor_id: str) -> CancellationOutcome:
        """Withdraw a confirmed booking.

        The invite moves to ``cancelled`` and the role re-opens. When the
        musician is the one cancelling, the cancellation policy decides on a
        suspension.

        Raises:
            ConfirmationNotFoundError: If the confirmation does not exist.
            NotParticipantError: If the actor is neither the musician nor the organizer.
        """
        actor = parse_actor(actor_id)
        cid = parse_id(ConfirmationId, confirmation_id, "confirmation_id")
        confirmation = self._store.get_confirmation(cid)
        if confirmation is None:
            raise ConfirmationNotFoundError(str(cid))
        now = self._clock()

        with self._store.lock_role(confirmation.role_id):
            # re-read under the lock: a concurrent cancel may have won
            if self._store.get_confirmation(cid) is None:
                raise ConfirmationNotFoundError(str(cid))
            invite = self._get_invite(confirmation.invite_id)
            gig = self._get_gig(invite.gig_id)
            cancelled_by = invite.party_of(actor)
            if cancelled_by is None:
                raise NotParticipantError()

            cancelled = InviteLifecycle.cancel_confirmed(invite, now)
            self._store.delete_confirmation(cid)
            self._store.save_invite(cancelled)

            suspension = None
            if cancelled_by is Party.MUSICIAN:
                prior = self._store.count_cancellations(
                    invite.musician_id, Party.MUSICIAN, now - self._policy.frequent_window
                )
                suspension = self._policy.evaluate(gig.starts_at, now, invite.musician_id, prior)
                if suspension is not None:
                    self._store.add_suspension(suspension)
            self._store.add_cancellation(
                CancellationRecord(
                    invite_id=invite.id,
                    musician_id=invite.musician_id,
                    cancelled_by=cancelled_by,
                    gig_starts_at=gig.starts_at,
                    cancelled_at=now,
                    penalized=suspension is not None,
                )
            )

        logger.info(
            "Confirmation cancelled",
            extra={
                "confirmation_id": str(cid),
                "cancelled_by": cancelled_by.value,
                "suspended": suspension is not None,
            },
        )
        self._publisher.publish(
            ConfirmationCancelled(
                occurred_at=now,
                confirmation_id=cid,
                invite_id=invite.id,
                gig_id=gig.id,
                role_id=confirmation.role_id,
                musician_id=invite.musician_id,
                organizer_id=invite.organizer_id,
                cancelled_by=cancelled_by,
                suspension=suspension,
            )
        )
        return CancellationOutcome(invite=cancelled, suspension=suspension)
