"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in gigs/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

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


class GigStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"


class InviteStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class InviteDecision(str, Enum):
    """A musician's answer to a pending invite."""

    ACCEPT = "accept"
    DECLINE = "decline"


class DeclineReason(str, Enum):
    """Why a musician turned an invite down."""

    LOW_VALUE = "low_value"
    DISTANCE = "distance"
    UNAVAILABLE = "unavailable"
    SCHEDULE_CONFLICT = "schedule_conflict"
    NOT_INTERESTED = "not_interested"
    OTHER = "other"


class Party(str, Enum):
    """The two sides of an engagement."""

    ORGANIZER = "organizer"
    MUSICIAN = "musician"


class RatingTag(str, Enum):
    """Predefined rating comments. Praise first, criticism after."""

    SINGS_WELL = "canta_bem"
    PLAYS_WELL = "toca_bem"
    PUNCTUAL = "pontual"
    WELL_DRESSED = "roupas_adequadas"
    PROFESSIONAL = "profissional"
    COMMUNICATIVE = "comunicativo"
    FLEXIBLE = "flexivel"
    CREATIVE = "criativo"
    ENERGETIC = "energico"
    ORGANIZED = "organizado"
    LATE = "atrasado"
    DISORGANIZED = "desorganizado"
    UNCOMMUNICATIVE = "nao_comunicativo"
    POORLY_DRESSED = "roupas_inadequadas"
    UNPROFESSIONAL = "pouco_profissional"
    INFLEXIBLE = "inflexivel"
    LOW_ENERGY = "pouca_energia"
    NOT_PUNCTUAL = "nao_pontual"


class SuspensionReason(str, Enum):
    LATE_CANCELLATION = "late_cancellation"
    FREQUENT_CANCELLATIONS = "frequent_cancellations"


@dataclass(frozen=True)
class Location:
    """Where a gig takes place. Coordinates are optional."""

    address_text: str
    city: str
    state: str
    coordinates: Coordinates | None = None


@dataclass(frozen=True)
class Gig:
    """Domain representation of a Gig."""

    id: GigId
    organizer_id: UserId
    title: str
    description: str
    starts_at: datetime
    ends_at: datetime
    location: Location
    status: GigStatus
    created_at: datetime


@dataclass(frozen=True)
class GigRole:
    """One staffing need within a gig."""

    id: RoleId
    gig_id: GigId
    instrument: str
    quantity: Quantity
    offered_rate: Money | None = None
    genres: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    equipment: tuple[str, ...] = ()


@dataclass(frozen=True)
class MusicianProfile:
    """A musician's matching attributes."""

    musician_id: UserId
    display_name: str
    instruments: tuple[str, ...]
    search_radius: SearchRadius
    home: Coordinates | None = None
    avg_rating: float | None = None
    rating_count: int = 0


@dataclass(frozen=True)
class Invite:
    """Binding between one role and one candidate musician."""

    id: InviteId
    role_id: RoleId
    gig_id: GigId
    organizer_id: UserId
    musician_id: UserId
    status: InviteStatus
    created_at: datetime
    responded_at: datetime | None = None
    updated_at: datetime | None = None
    decline_reason: DeclineReason | None = None

    def party_of(self, user_id: UserId) -> Party | None:
        """Which side of the engagement this user is on, if any."""
        if user_id == self.organizer_id:
            return Party.ORGANIZER
        if user_id == self.musician_id:
            return Party.MUSICIAN
        return None


@dataclass(frozen=True)
class Confirmation:
    """The single booking that fills a role."""

    id: ConfirmationId
    role_id: RoleId
    invite_id: InviteId
    musician_id: UserId
    confirmed_at: datetime


@dataclass(frozen=True)
class Rating:
    """A score one participant left for the other."""

    id: RatingId
    invite_id: InviteId
    rater_role: Party
    rater_id: UserId
    rated_id: UserId
    score: Score
    predefined_comments: tuple[str, ...]
    comment: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CancellationRecord:
    """A confirmed booking that was withdrawn."""

    invite_id: InviteId
    musician_id: UserId
    cancelled_by: Party
    gig_starts_at: datetime
    cancelled_at: datetime
    penalized: bool


@dataclass(frozen=True)
class SuspensionRecord:
    """A time window in which a musician receives no new invites."""

    musician_id: UserId
    starts_at: datetime
    ends_at: datetime
    reason: SuspensionReason

    def is_active(self, at: datetime) -> bool:
        return self.starts_at <= at < self.ends_at

    def remaining(self, at: datetime) -> timedelta:
        return max(self.ends_at - at, timedelta(0))


@dataclass(frozen=True)
class Candidate:
    """A musician eligible for a role, with distance when known."""

    profile: MusicianProfile
    distance_km: float | None
    estimated_travel_minutes: int | None


@dataclass(frozen=True)
class CancellationOutcome:
    """Result of cancelling a confirmation."""

    invite: Invite
    suspension: SuspensionRecord | None = None


# Read models


@dataclass(frozen=True)
class PendingInvite:
    """Musician-facing view of an invite awaiting an answer."""

    invite: Invite
    gig_title: str
    instrument: str
    starts_at: datetime
    ends_at: datetime
    address_text: str
    city: str
    state: str
    offered_rate: Money | None
    gig_coordinates: Coordinates | None = None
    distance_km: float | None = None
    estimated_travel_minutes: int | None = None


@dataclass(frozen=True)
class ConfirmedGig:
    """A booked gig, as consumed by calendar export."""

    gig_id: GigId
    title: str
    description: str
    starts_at: datetime
    ends_at: datetime
    address_text: str
    city: str
    state: str
    instrument: str
    invite_id: InviteId
    confirmation_id: ConfirmationId
    organizer_id: UserId
