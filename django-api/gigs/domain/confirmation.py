"""Promotion of one accepted invite to the booking for its role."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from gigs.domain.errors import (
    ConfirmationExistsError,
    InvalidInviteTransitionError,
    InviteRoleMismatchError,
)
from gigs.domain.invite_lifecycle import OPEN_FOR_ROLE, InviteLifecycle
from gigs.domain.models import Confirmation, GigRole, Invite, InviteStatus
from gigs.domain.value_objects import ConfirmationId


@dataclass(frozen=True)
class ConfirmationPlan:
    """Writes that must be applied together, in one transaction."""

    confirmation: Confirmation
    confirmed_invite: Invite
    cancelled_invites: tuple[Invite, ...]


class ConfirmationCoordinator:
    """Computes the outcome of confirming a musician for a role.

    Callers hold the per-role lock while planning and applying, so the
    ``existing`` confirmation and the role's invites are a consistent view.
    """

    @staticmethod
    def plan(
        role: GigRole,
        chosen: Invite,
        role_invites: Iterable[Invite],
        existing: Confirmation | None,
        at: datetime,
    ) -> ConfirmationPlan:
        """Plan a confirmation.

        Raises:
            InviteRoleMismatchError: If the invite belongs to another role.
            ConfirmationExistsError: If the role already has a confirmation.
            InvalidInviteTransitionError: If the invite is not accepted.
        """
        if chosen.role_id != role.id:
            raise InviteRoleMismatchError()
        if existing is not None:
            raise ConfirmationExistsError(str(role.id))
        if chosen.status is not InviteStatus.ACCEPTED:
            raise InvalidInviteTransitionError(
                str(chosen.id), chosen.status.value, InviteStatus.CONFIRMED.value
            )

        confirmed = InviteLifecycle.confirm(chosen, at)
        siblings = tuple(
            InviteLifecycle.withdraw(invite, at)
            for invite in role_invites
            if invite.id != chosen.id and invite.status in OPEN_FOR_ROLE
        )
        confirmation = Confirmation(
            id=ConfirmationId(uuid.uuid4()),
            role_id=role.id,
            invite_id=chosen.id,
            musician_id=chosen.musician_id,
            confirmed_at=at,
        )
        return ConfirmationPlan(
            confirmation=confirmation,
            confirmed_invite=confirmed,
            cancelled_invites=siblings,
        )
