"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime

from gigs.domain import (
    CancellationRecord,
    Confirmation,
    ConfirmationId,
    ConfirmedGig,
    Gig,
    GigId,
    GigRole,
    Invite,
    InviteId,
    MusicianProfile,
    Party,
    PendingInvite,
    Rating,
    RatingId,
    RoleId,
    SuspensionRecord,
    UserId,
)


class GigStore(ABC):
    """Gigs, roles and musician profiles."""

    @abstractmethod
    def get_gig(self, gig_id: GigId) -> Gig | None:
        """Return a gig by ID, or None if not found."""
        ...

    @abstractmethod
    def save_gig(self, gig: Gig) -> Gig:
        """Persist changes to an existing gig."""
        ...

    @abstractmethod
    def get_role(self, role_id: RoleId) -> GigRole | None:
        """Return a role by ID, or None if not found."""
        ...

    @abstractmethod
    def list_roles_for_gig(self, gig_id: GigId) -> list[GigRole]:
        ...

    @abstractmethod
    def get_musician_profile(self, musician_id: UserId) -> MusicianProfile | None:
        ...

    @abstractmethod
    def list_musician_profiles(self) -> list[MusicianProfile]:
        """Return every musician profile, the snapshot candidates are matched from."""
        ...


class InviteStore(ABC):
    @abstractmethod
    def get_invite(self, invite_id: InviteId) -> Invite | None:
        ...

    @abstractmethod
    def find_active_invite(self, role_id: RoleId, musician_id: UserId) -> Invite | None:
        """Return the pending, accepted or confirmed invite for this pair, if any."""
        ...

    @abstractmethod
    def list_invites_for_role(self, role_id: RoleId) -> list[Invite]:
        ...

    @abstractmethod
    def add_invite(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Raises:
            ConflictError: If the musician already holds an active invite
                for the role.
        """
        ...

    @abstractmethod
    def save_invite(self, invite: Invite) -> Invite:
        """Persist the status and timestamps of an existing invite."""
        ...


class ConfirmationStore(ABC):
    @abstractmethod
    def get_confirmation(self, confirmation_id: ConfirmationId) -> Confirmation | None:
        ...

    @abstractmethod
    def get_confirmation_for_role(self, role_id: RoleId) -> Confirmation | None:
        ...

    @abstractmethod
    def add_confirmation(self, confirmation: Confirmation) -> Confirmation:
        """Insert a confirmation.

        Raises:
            ConfirmationExistsError: If the role already has one.
        """
        ...

    @abstractmethod
    def delete_confirmation(self, confirmation_id: ConfirmationId) -> None:
        ...

    @abstractmethod
    def lock_role(self, role_id: RoleId) -> AbstractContextManager[None]:
        """Run the block in one transaction, serialized with other writers of the role."""
        ...


class PenaltyStore(ABC):
    @abstractmethod
    def add_cancellation(self, record: CancellationRecord) -> None:
        ...

    @abstractmethod
    def count_cancellations(
        self, musician_id: UserId, cancelled_by: Party, since: datetime
    ) -> int:
        """Count cancellations by this party at or after ``since``."""
        ...

    @abstractmethod
    def add_suspension(self, suspension: SuspensionRecord) -> None:
        ...

    @abstractmethod
    def get_active_suspension(self, musician_id: UserId, at: datetime) -> SuspensionRecord | None:
        """Return the active suspension ending last, or None."""
        ...


class RatingStore(ABC):
    @abstractmethod
    def get_rating(self, rating_id: RatingId) -> Rating | None:
        ...

    @abstractmethod
    def find_rating(self, invite_id: InviteId, rater_role: Party) -> Rating | None:
        ...

    @abstractmethod
    def add_rating(self, rating: Rating) -> Rating:
        """Insert a rating.

        Raises:
            RatingExistsError: If this side already rated the invite.
        """
        ...

    @abstractmethod
    def save_rating(self, rating: Rating) -> Rating:
        ...


class ScheduleStore(ABC):
    """Read models: one query per view."""

    @abstractmethod
    def list_pending_invites(self, musician_id: UserId, after: datetime) -> list[PendingInvite]:
        """Pending invites of published gigs starting after ``after``, by start time."""
        ...

    @abstractmethod
    def list_confirmed_gigs(self, musician_id: UserId) -> list[ConfirmedGig]:
        """Confirmed bookings of the musician ordered by start time ascending."""
        ...


class BookingStore(
    GigStore, InviteStore, ConfirmationStore, PenaltyStore, RatingStore, ScheduleStore
):
    """Everything the booking services need from persistence."""
