from gigs.domain.models import (
    Candidate,
    CancellationOutcome,
    CancellationRecord,
    Confirmation,
    ConfirmedGig,
    DeclineReason,
    Gig,
    GigRole,
    GigStatus,
    Invite,
    InviteDecision,
    InviteStatus,
    Location,
    MusicianProfile,
    Party,
    PendingInvite,
    Rating,
    RatingTag,
    SuspensionReason,
    SuspensionRecord,
)
from gigs.domain.value_objects import (
    ConfirmationId,
    Coordinates,
    GigId,
    InviteId,
    Money,
    Quantity,
    RatingId,
    RoleId,
    Score,
    SearchRadius,
    UserId,
)

__all__ = [
    "Candidate",
    "CancellationOutcome",
    "CancellationRecord",
    "Confirmation",
    "ConfirmedGig",
    "DeclineReason",
    "Gig",
    "GigRole",
    "GigStatus",
    "Invite",
    "InviteDecision",
    "InviteStatus",
    "Location",
    "MusicianProfile",
    "Party",
    "PendingInvite",
    "Rating",
    "RatingTag",
    "SuspensionReason",
    "SuspensionRecord",
    "ConfirmationId",
    "Coordinates",
    "GigId",
    "InviteId",
    "Money",
    "Quantity",
    "RatingId",
    "RoleId",
    "Score",
    "SearchRadius",
    "UserId",
]
