"""In-memory doubles for service tests."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from gigs.domain import (
    CancellationRecord,
    Confirmation,
    ConfirmationId,
    ConfirmedGig,
    Gig,
    GigId,
    GigRole,
    GigStatus,
    Invite,
    InviteId,
    InviteStatus,
    MusicianProfile,
    Party,
    PendingInvite,
    Rating,
    RatingId,
    RoleId,
    SuspensionRecord,
    UserId,
)
from gigs.domain.errors import ConfirmationExistsError, DuplicateInviteError, RatingExistsError
from gigs.domain.events import LifecycleEvent
from gigs.domain.invite_lifecycle import ACTIVE
from gigs.services.publisher import EventPublisher
from gigs.stores.interfaces import BookingStore


class InMemoryBookingStore(BookingStore):
    """Dict-backed store. ``lock_role`` uses one re-entrant lock per role."""

    def __init__(self) -> None:
        self.gigs: dict[GigId, Gig] = {}
        self.roles: dict[RoleId, GigRole] = {}
        self.profiles: dict[UserId, MusicianProfile] = {}
        self.invites: dict[InviteId, Invite] = {}
        self.confirmations: dict[ConfirmationId, Confirmation] = {}
        self.cancellations: list[CancellationRecord] = []
        self.suspensions: list[SuspensionRecord] = []
        self.ratings: dict[RatingId, Rating] = {}
        self._locks: dict[RoleId, threading.RLock] = {}
        self._guard = threading.Lock()

    # seeding

    def add_gig(self, gig: Gig) -> Gig:
        self.gigs[gig.id] = gig
        return gig

    def add_role(self, role: GigRole) -> GigRole:
        self.roles[role.id] = role
        return role

    def add_profile(self, profile: MusicianProfile) -> MusicianProfile:
        self.profiles[profile.musician_id] = profile
        return profile

    # GigStore

    def get_gig(self, gig_id):
        return self.gigs.get(gig_id)

    def save_gig(self, gig):
        self.gigs[gig.id] = gig
        return gig

    def get_role(self, role_id):
        return self.roles.get(role_id)

    def list_roles_for_gig(self, gig_id):
        return [role for role in self.roles.values() if role.gig_id == gig_id]

    def get_musician_profile(self, musician_id):
        return self.profiles.get(musician_id)

    def list_musician_profiles(self):
        return list(self.profiles.values())

    # InviteStore

    def get_invite(self, invite_id):
        return self.invites.get(invite_id)

    def find_active_invite(self, role_id, musician_id):
        for invite in self.invites.values():
            if (
                invite.role_id == role_id
                and invite.musician_id == musician_id
                and invite.status in ACTIVE
            ):
                return invite
        return None

    def list_invites_for_role(self, role_id):
        return [invite for invite in self.invites.values() if invite.role_id == role_id]

    def add_invite(self, invite):
        if self.find_active_invite(invite.role_id, invite.musician_id) is not None:
            raise DuplicateInviteError(str(invite.role_id), str(invite.musician_id))
        self.invites[invite.id] = invite
        return invite

    def save_invite(self, invite):
        self.invites[invite.id] = invite
        return invite

    # ConfirmationStore

    def get_confirmation(self, confirmation_id):
        return self.confirmations.get(confirmation_id)

    def get_confirmation_for_role(self, role_id):
        for confirmation in self.confirmations.values():
            if confirmation.role_id == role_id:
                return confirmation
        return None

    def add_confirmation(self, confirmation):
        if self.get_confirmation_for_role(confirmation.role_id) is not None:
            raise ConfirmationExistsError(str(confirmation.role_id))
        self.confirmations[confirmation.id] = confirmation
        return confirmation

    def delete_confirmation(self, confirmation_id):
        self.confirmations.pop(confirmation_id, None)

    @contextmanager
    def lock_role(self, role_id: RoleId) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(role_id, threading.RLock())
        with lock:
            yield

    # PenaltyStore

    def add_cancellation(self, record):
        self.cancellations.append(record)

    def count_cancellations(self, musician_id, cancelled_by, since):
        return sum(
            1
            for record in self.cancellations
            if record.musician_id == musician_id
            and record.cancelled_by is cancelled_by
            and record.cancelled_at >= since
        )

    def add_suspension(self, suspension):
        self.suspensions.append(suspension)

    def get_active_suspension(self, musician_id, at):
        active = [
            s for s in self.suspensions if s.musician_id == musician_id and s.is_active(at)
        ]
        return max(active, key=lambda s: s.ends_at, default=None)

    # RatingStore

    def get_rating(self, rating_id):
        return self.ratings.get(rating_id)

    def find_rating(self, invite_id, rater_role: Party):
        for rating in self.ratings.values():
            if rating.invite_id == invite_id and rating.rater_role is rater_role:
                return rating
        return None

    def add_rating(self, rating):
        if self.find_rating(rating.invite_id, rating.rater_role) is not None:
            raise RatingExistsError(str(rating.invite_id), rating.rater_role.value)
        self.ratings[rating.id] = rating
        return rating

    def save_rating(self, rating):
        self.ratings[rating.id] = rating
        return rating

    # ScheduleStore

    def list_pending_invites(self, musician_id: UserId, after: datetime) -> list[PendingInvite]:
        items = []
        for invite in self.invites.values():
            gig = self.gigs[invite.gig_id]
            if (
                invite.musician_id != musician_id
                or invite.status is not InviteStatus.PENDING
                or gig.status is not GigStatus.PUBLISHED
                or gig.starts_at <= after
            ):
                continue
            role = self.roles[invite.role_id]
            items.append(
                PendingInvite(
                    invite=invite,
                    gig_title=gig.title,
                    instrument=role.instrument,
                    starts_at=gig.starts_at,
                    ends_at=gig.ends_at,
                    address_text=gig.location.address_text,
                    city=gig.location.city,
                    state=gig.location.state,
                    offered_rate=role.offered_rate,
                    gig_coordinates=gig.location.coordinates,
                )
            )
        return sorted(items, key=lambda item: (item.starts_at, item.invite.created_at))

    def list_confirmed_gigs(self, musician_id: UserId) -> list[ConfirmedGig]:
        items = []
        for confirmation in self.confirmations.values():
            if confirmation.musician_id != musician_id:
                continue
            role = self.roles[confirmation.role_id]
            gig = self.gigs[role.gig_id]
            items.append(
                ConfirmedGig(
                    gig_id=gig.id,
                    title=gig.title,
                    description=gig.description,
                    starts_at=gig.starts_at,
                    ends_at=gig.ends_at,
                    address_text=gig.location.address_text,
                    city=gig.location.city,
                    state=gig.location.state,
                    instrument=role.instrument,
                    invite_id=confirmation.invite_id,
                    confirmation_id=confirmation.id,
                    organizer_id=gig.organizer_id,
                )
            )
        return sorted(items, key=lambda item: item.starts_at)


class RecordingPublisher(EventPublisher):
    def __init__(self) -> None:
        self.events: list[LifecycleEvent] = []

    def publish(self, event: LifecycleEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]


class FakeClock:
    """Settable clock for services."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta) -> None:
        self.now = self.now + delta
