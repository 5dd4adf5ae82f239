"""Musician responses to invites, and organizer withdrawals."""

import logging
from datetime import datetime

from gigs.domain import DeclineReason, Invite, InviteDecision, InviteId, UserId
from gigs.domain.errors import ConflictError, InvalidDeclineReasonError, NotInviteeError
from gigs.domain.events import InviteAccepted, InviteDeclined, InviteWithdrawn
from gigs.domain.invite_lifecycle import InviteLifecycle
from gigs.services.base import BookingServiceBase, parse_actor, parse_id
from gigs.services.confirmation_service import ConfirmationService

logger = logging.getLogger(__name__)


def _reason(value: DeclineReason | str | None) -> DeclineReason | None:
    if value is None or isinstance(value, DeclineReason):
        return value
    try:
        return DeclineReason(value)
    except ValueError as exc:
        raise InvalidDeclineReasonError(str(value)) from exc


class InviteService(BookingServiceBase):
    """Invite state changes outside of confirmation.

    With ``auto_confirm_single_candidate`` set, accepting an invite for a
    role that needs one musician confirms it right away on behalf of the
    organizer. Without a ``confirmations`` service the flag has no effect.
    """

    def __init__(
        self,
        *args,
        confirmations: ConfirmationService | None = None,
        auto_confirm_single_candidate: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._confirmations = confirmations
        self._auto_confirm = auto_confirm_single_candidate

    def accept_invite(self, invite_id: str, actor_id: str) -> Invite:
        """Accept a pending invite.

        Accepting does not book the musician; the organizer still confirms.

        Raises:
            InviteNotFoundError: If the invite does not exist.
            NotInviteeError: If the actor is not the invited musician.
            InviteAlreadyRespondedError: If the invite is no longer pending.
        """
        invite = self._respond(invite_id, actor_id, InviteDecision.ACCEPT)
        if self._auto_confirm and self._confirmations is not None:
            return self._try_auto_confirm(invite)
        return invite

    def decline_invite(
        self, invite_id: str, actor_id: str, reason: DeclineReason | str | None = None
    ) -> Invite:
        """Decline a pending invite, optionally saying why. Declined invites are final.

        Raises:
            InvalidDeclineReasonError: If ``reason`` is not a known reason.
        """
        return self._respond(invite_id, actor_id, InviteDecision.DECLINE, _reason(reason))

    def withdraw_invite(self, invite_id: str, actor_id: str) -> Invite:
        """Organizer takes back a pending or accepted invite.

        Raises:
            NotGigOrganizerError: If the actor does not own the gig.
            InvalidInviteTransitionError: If the invite is confirmed or final.
        """
        actor = parse_actor(actor_id)
        iid = parse_id(InviteId, invite_id, "invite_id")
        invite = self._get_invite(iid)
        now = self._clock()

        with self._store.lock_role(invite.role_id):
            invite = self._get_invite(iid)
            self._require_organizer(self._get_gig(invite.gig_id), actor)
            withdrawn = self._store.save_invite(InviteLifecycle.withdraw(invite, now))

        logger.info("Invite withdrawn", extra={"invite_id": str(iid)})
        self._publisher.publish(
            InviteWithdrawn(
                occurred_at=now,
                invite_id=withdrawn.id,
                role_id=withdrawn.role_id,
                musician_id=withdrawn.musician_id,
            )
        )
        return withdrawn

    def _respond(
        self,
        invite_id: str,
        actor_id: str,
        decision: InviteDecision,
        reason: DeclineReason | None = None,
    ) -> Invite:
        actor = parse_actor(actor_id)
        iid = parse_id(InviteId, invite_id, "invite_id")
        invite = self._get_invite(iid)
        now = self._clock()

        with self._store.lock_role(invite.role_id):
            # the status check must see what concurrent responders committed
            invite = self._get_invite(iid)
            self._require_invitee(invite, actor)
            answered = InviteLifecycle.respond(invite, decision, now, reason)
            updated = self._store.save_invite(answered)

        logger.info(
            "Invite answered",
            extra={"invite_id": str(iid), "decision": decision.value},
        )
        self._publisher.publish(self._response_event(updated, decision, now))
        return updated

    def _try_auto_confirm(self, invite: Invite) -> Invite:
        role = self._get_role(invite.role_id)
        if role.quantity.value != 1:
            return invite
        try:
            self._confirmations.confirm_musician(
                str(invite.role_id), str(invite.id), str(invite.organizer_id)
            )
        except ConflictError as exc:
            logger.warning(
                "Auto-confirmation skipped",
                extra={"invite_id": str(invite.id), "reason": exc.code.value},
            )
            return invite
        return self._get_invite(invite.id)

    @staticmethod
    def _require_invitee(invite: Invite, actor: UserId) -> None:
        if invite.musician_id != actor:
            raise NotInviteeError()

    @staticmethod
    def _response_event(invite: Invite, decision: InviteDecision, now: datetime):
        fields = dict(
            occurred_at=now,
            invite_id=invite.id,
            role_id=invite.role_id,
            musician_id=invite.musician_id,
            organizer_id=invite.organizer_id,
        )
        if decision is InviteDecision.ACCEPT:
            return InviteAccepted(**fields)
        return InviteDeclined(reason=invite.decline_reason, **fields)
