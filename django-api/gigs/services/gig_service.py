"""Gig publication and cancellation."""

import logging
from contextlib import ExitStack

from gigs.domain import Gig, GigId, GigStatus
from gigs.domain.errors import GigHasConfirmationsError
from gigs.domain.events import InviteWithdrawn
from gigs.domain.gig_lifecycle import transition
from gigs.domain.invite_lifecycle import OPEN_FOR_ROLE, InviteLifecycle
from gigs.services.base import BookingServiceBase, parse_actor, parse_id

logger = logging.getLogger(__name__)


class GigService(BookingServiceBase):
    def publish_gig(self, gig_id: str, actor_id: str) -> Gig:
        """Move a draft gig to published so invites can go out."""
        actor = parse_actor(actor_id)
        gig = self._get_gig(parse_id(GigId, gig_id, "gig_id"))
        self._require_organizer(gig, actor)
        published = self._store.save_gig(transition(gig, GigStatus.PUBLISHED))
        logger.info("Gig published", extra={"gig_id": str(gig.id)})
        return published

    def cancel_gig(self, gig_id: str, actor_id: str) -> Gig:
        """Soft-cancel a gig and withdraw its open invites.

        Raises:
            InvalidGigTransitionError: If the gig is already cancelled.
            GigHasConfirmationsError: If any role is still booked; those
                confirmations must be cancelled first.
        """
        actor = parse_actor(actor_id)
        gig = self._get_gig(parse_id(GigId, gig_id, "gig_id"))
        self._require_organizer(gig, actor)
        now = self._clock()
        cancelled = transition(gig, GigStatus.CANCELLED)

        # every role of the gig stays locked until all writes are done
        roles = sorted(self._store.list_roles_for_gig(gig.id), key=lambda r: str(r.id))
        withdrawn = []
        with ExitStack() as locks:
            for role in roles:
                locks.enter_context(self._store.lock_role(role.id))
            if any(self._store.get_confirmation_for_role(r.id) is not None for r in roles):
                raise GigHasConfirmationsError(str(gig.id))
            for role in roles:
                for invite in self._store.list_invites_for_role(role.id):
                    if invite.status in OPEN_FOR_ROLE:
                        withdrawn.append(
                            self._store.save_invite(InviteLifecycle.withdraw(invite, now))
                        )
            cancelled = self._store.save_gig(cancelled)

        logger.info(
            "Gig cancelled",
            extra={"gig_id": str(gig.id), "withdrawn_invites": len(withdrawn)},
        )
        for invite in withdrawn:
            self._publisher.publish(
                InviteWithdrawn(
                    occurred_at=now,
                    invite_id=invite.id,
                    role_id=invite.role_id,
                    musician_id=invite.musician_id,
                )
            )
        return cancelled
