"""Lifecycle events emitted after a transition commits.

Consumers (notifications, chat, calendar sync) subscribe through
gigs.notifications.lifecycle_event. They only ever see committed state.
"""

from dataclasses import dataclass
from datetime import datetime

from gigs.domain.models import DeclineReason, Party, SuspensionRecord
from gigs.domain.value_objects import ConfirmationId, GigId, InviteId, RoleId, UserId


@dataclass(frozen=True)
class LifecycleEvent:
    occurred_at: datetime

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class InviteCreated(LifecycleEvent):
    invite_id: InviteId
    gig_id: GigId
    role_id: RoleId
    musician_id: UserId


@dataclass(frozen=True)
class InviteAccepted(LifecycleEvent):
    invite_id: InviteId
    role_id: RoleId
    musician_id: UserId
    organizer_id: UserId


@dataclass(frozen=True)
class InviteDeclined(LifecycleEvent):
    invite_id: InviteId
    role_id: RoleId
    musician_id: UserId
    organizer_id: UserId
    reason: DeclineReason | None = None


@dataclass(frozen=True)
class InviteWithdrawn(LifecycleEvent):
    invite_id: InviteId
    role_id: RoleId
    musician_id: UserId


@dataclass(frozen=True)
class MusicianConfirmed(LifecycleEvent):
    confirmation_id: ConfirmationId
    invite_id: InviteId
    gig_id: GigId
    role_id: RoleId
    musician_id: UserId
    organizer_id: UserId
    cancelled_invite_ids: tuple[InviteId, ...] = ()


@dataclass(frozen=True)
class ConfirmationCancelled(LifecycleEvent):
    confirmation_id: ConfirmationId
    invite_id: InviteId
    gig_id: GigId
    role_id: RoleId
    musician_id: UserId
    organizer_id: UserId
    cancelled_by: Party
    suspension: SuspensionRecord | None = None
