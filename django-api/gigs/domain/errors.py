"""Domain error codes for the gigs module.

Every error belongs to one category (NotFound, Conflict, Forbidden,
InvalidInput, PolicyViolation). Handlers map categories to HTTP statuses.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    GIG_NOT_FOUND = "GIG_NOT_FOUND"
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
    INVITE_NOT_FOUND = "INVITE_NOT_FOUND"
    CONFIRMATION_NOT_FOUND = "CONFIRMATION_NOT_FOUND"
    RATING_NOT_FOUND = "RATING_NOT_FOUND"
    MUSICIAN_NOT_FOUND = "MUSICIAN_NOT_FOUND"

    INVITE_ALREADY_RESPONDED = "INVITE_ALREADY_RESPONDED"
    INVALID_INVITE_TRANSITION = "INVALID_INVITE_TRANSITION"
    INVALID_GIG_TRANSITION = "INVALID_GIG_TRANSITION"
    CONFIRMATION_EXISTS = "CONFIRMATION_EXISTS"
    ROLE_ALREADY_FILLED = "ROLE_ALREADY_FILLED"
    GIG_NOT_OPEN = "GIG_NOT_OPEN"
    GIG_HAS_CONFIRMATIONS = "GIG_HAS_CONFIRMATIONS"
    RATING_EXISTS = "RATING_EXISTS"
    DUPLICATE_INVITE = "DUPLICATE_INVITE"

    NOT_GIG_ORGANIZER = "NOT_GIG_ORGANIZER"
    NOT_INVITEE = "NOT_INVITEE"
    NOT_PARTICIPANT = "NOT_PARTICIPANT"
    NOT_RATING_AUTHOR = "NOT_RATING_AUTHOR"
    RATING_NOT_OPEN = "RATING_NOT_OPEN"

    INVALID_ID = "INVALID_ID"
    INVALID_SCORE = "INVALID_SCORE"
    INVALID_RATING_TAG = "INVALID_RATING_TAG"
    INVALID_DECLINE_REASON = "INVALID_DECLINE_REASON"
    INVITE_ROLE_MISMATCH = "INVITE_ROLE_MISMATCH"
    MISSING_ACTOR = "MISSING_ACTOR"

    MUSICIAN_SUSPENDED = "MUSICIAN_SUSPENDED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def details(self) -> dict:
        """Extra user-safe fields for the error payload."""
        return {}


class NotFoundError(DomainError):
    """An identifier does not resolve to a stored entity."""


class ConflictError(DomainError):
    """The state was already transitioned or a unique slot is taken."""


class ForbiddenError(DomainError):
    """The actor is not allowed to act on this entity."""


class InvalidInputError(DomainError):
    """Malformed input."""


class PolicyViolationError(DomainError):
    """The action is refused by business policy (e.g. a suspension)."""


# NotFound


class GigNotFoundError(NotFoundError):
    def __init__(self, gig_id: str) -> None:
        super().__init__(code=ErrorCode.GIG_NOT_FOUND, message="Gig not found")
        self.gig_id = gig_id


class RoleNotFoundError(NotFoundError):
    def __init__(self, role_id: str) -> None:
        super().__init__(code=ErrorCode.ROLE_NOT_FOUND, message="Role not found")
        self.role_id = role_id


class InviteNotFoundError(NotFoundError):
    def __init__(self, invite_id: str) -> None:
        super().__init__(code=ErrorCode.INVITE_NOT_FOUND, message="Invite not found")
        self.invite_id = invite_id


class ConfirmationNotFoundError(NotFoundError):
    def __init__(self, confirmation_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONFIRMATION_NOT_FOUND,
            message="Confirmation not found",
        )
        self.confirmation_id = confirmation_id


class RatingNotFoundError(NotFoundError):
    def __init__(self, rating_id: str) -> None:
        super().__init__(code=ErrorCode.RATING_NOT_FOUND, message="Rating not found")
        self.rating_id = rating_id


class MusicianNotFoundError(NotFoundError):
    def __init__(self, musician_id: str) -> None:
        super().__init__(
            code=ErrorCode.MUSICIAN_NOT_FOUND,
            message="Musician profile not found",
        )
        self.musician_id = musician_id


# Conflict


class InviteAlreadyRespondedError(ConflictError):
    """Raised when accept/decline hits an invite that is no longer pending."""

    def __init__(self, invite_id: str, status: str) -> None:
        super().__init__(
            code=ErrorCode.INVITE_ALREADY_RESPONDED,
            message="Invite was already responded to",
        )
        self.invite_id = invite_id
        self.status = status


class InvalidInviteTransitionError(ConflictError):
    def __init__(self, invite_id: str, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INVITE_TRANSITION,
            message=f"Invite cannot move from {current} to {target}",
        )
        self.invite_id = invite_id


class InvalidGigTransitionError(ConflictError):
    def __init__(self, gig_id: str, current: str, target: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_GIG_TRANSITION,
            message=f"Gig cannot move from {current} to {target}",
        )
        self.gig_id = gig_id


class ConfirmationExistsError(ConflictError):
    """Raised when a role already has its confirmed musician."""

    def __init__(self, role_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONFIRMATION_EXISTS,
            message="A musician is already confirmed for this role",
        )
        self.role_id = role_id


class RoleAlreadyFilledError(ConflictError):
    def __init__(self, role_id: str) -> None:
        super().__init__(
            code=ErrorCode.ROLE_ALREADY_FILLED,
            message="Role already has a confirmed musician",
        )
        self.role_id = role_id


class GigNotOpenError(ConflictError):
    """Raised when invites are requested for a gig that is not bookable."""

    def __init__(self, gig_id: str) -> None:
        super().__init__(
            code=ErrorCode.GIG_NOT_OPEN,
            message="Gig is not open for invitations",
        )
        self.gig_id = gig_id


class GigHasConfirmationsError(ConflictError):
    def __init__(self, gig_id: str) -> None:
        super().__init__(
            code=ErrorCode.GIG_HAS_CONFIRMATIONS,
            message="Cancel the confirmed bookings before cancelling the gig",
        )
        self.gig_id = gig_id


class DuplicateInviteError(ConflictError):
    def __init__(self, role_id: str, musician_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_INVITE,
            message="Musician already has an active invite for this role",
        )
        self.role_id = role_id
        self.musician_id = musician_id


class RatingExistsError(ConflictError):
    def __init__(self, invite_id: str, rater_role: str) -> None:
        super().__init__(
            code=ErrorCode.RATING_EXISTS,
            message="A rating was already submitted for this engagement",
        )
        self.invite_id = invite_id
        self.rater_role = rater_role


# Forbidden


class NotGigOrganizerError(ForbiddenError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_GIG_ORGANIZER,
            message="Only the gig organizer can perform this action",
        )


class NotInviteeError(ForbiddenError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_INVITEE,
            message="Only the invited musician can respond to this invite",
        )


class NotParticipantError(ForbiddenError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_PARTICIPANT,
            message="Only participants of this engagement can perform this action",
        )


class NotRatingAuthorError(ForbiddenError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_RATING_AUTHOR,
            message="Only the author can revise a rating",
        )


class RatingNotOpenError(ForbiddenError):
    """Raised when rating is attempted before the gig has taken place."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.RATING_NOT_OPEN,
            message="Ratings open once the gig has started",
        )


# Invalid input


class InvalidIdError(InvalidInputError):
    def __init__(self, field: str = "id") -> None:
        super().__init__(code=ErrorCode.INVALID_ID, message=f"Invalid {field} format")
        self.field = field


class InvalidScoreError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SCORE,
            message="Score must be an integer between 1 and 5",
        )


class InvalidRatingTagError(InvalidInputError):
    def __init__(self, tag: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_RATING_TAG,
            message=f"Unknown predefined comment: {tag}",
        )


class InvalidDeclineReasonError(InvalidInputError):
    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DECLINE_REASON,
            message=f"Unknown decline reason: {reason}",
        )


class InviteRoleMismatchError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVITE_ROLE_MISMATCH,
            message="Invite does not belong to this role",
        )


class MissingActorError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ACTOR,
            message="Acting user is required",
        )


# Policy


class MusicianSuspendedError(PolicyViolationError):
    """Raised when an invite targets a musician serving a suspension."""

    def __init__(
        self, musician_id: str, suspended_until: datetime, remaining: timedelta
    ) -> None:
        super().__init__(
            code=ErrorCode.MUSICIAN_SUSPENDED,
            message="Musician is suspended from receiving new invites",
        )
        self.musician_id = musician_id
        self.suspended_until = suspended_until
        self.remaining = remaining

    @property
    def details(self) -> dict:
        return {
            "suspended_until": self.suspended_until.isoformat(),
            "remaining_seconds": int(self.remaining.total_seconds()),
        }
