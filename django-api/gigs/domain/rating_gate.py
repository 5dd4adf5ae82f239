"""Who may rate whom once an engagement is over."""

from dataclasses import dataclass
from datetime import datetime

from gigs.domain.errors import (
    DomainError,
    ErrorCode,
    NotParticipantError,
    RatingExistsError,
    RatingNotOpenError,
)
from gigs.domain.models import Gig, Invite, InviteStatus, Party, Rating
from gigs.domain.value_objects import UserId


def is_completed(gig: Gig, now: datetime) -> bool:
    """Whether the gig counts as having happened.

    Approximated by the start time having passed; there is no explicit
    completion status yet.
    """
    return now >= gig.starts_at


@dataclass(frozen=True)
class RatingEligibility:
    allowed: bool
    rater_role: Party | None = None
    rated_id: UserId | None = None
    refusal: ErrorCode | None = None


class RatingGate:
    @staticmethod
    def check(
        gig: Gig,
        invite: Invite,
        rater_id: UserId,
        existing: Rating | None,
        now: datetime,
    ) -> RatingEligibility:
        """Validate a rating attempt and return the implied rated party.

        ``existing`` is the rating already stored for this invite and the
        rater's side, if any.

        Raises:
            NotParticipantError: If the invite is not a confirmed booking or
                the rater is not one of its two participants.
            RatingNotOpenError: If the gig has not started yet.
            RatingExistsError: If this side already rated the engagement.
        """
        rater_role = invite.party_of(rater_id)
        if invite.status is not InviteStatus.CONFIRMED or rater_role is None:
            raise NotParticipantError()
        if not is_completed(gig, now):
            raise RatingNotOpenError()
        if existing is not None:
            raise RatingExistsError(str(invite.id), rater_role.value)

        rated_id = (
            invite.musician_id if rater_role is Party.ORGANIZER else invite.organizer_id
        )
        return RatingEligibility(allowed=True, rater_role=rater_role, rated_id=rated_id)

    @staticmethod
    def can_rate(
        gig: Gig,
        invite: Invite,
        rater_id: UserId,
        existing: Rating | None,
        now: datetime,
    ) -> RatingEligibility:
        """Same rules as ``check`` but reports refusals instead of raising."""
        try:
            return RatingGate.check(gig, invite, rater_id, existing, now)
        except DomainError as exc:
            return RatingEligibility(
                allowed=False, rater_role=invite.party_of(rater_id), refusal=exc.code
            )
