"""Shared plumbing for booking services.

Services:
- Depend only on interfaces (stores, publishers)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

from collections.abc import Callable
from datetime import datetime, timezone

from gigs.domain import Gig, GigId, GigRole, Invite, InviteId, RoleId, UserId
from gigs.domain.errors import (
    GigNotFoundError,
    InvalidIdError,
    InviteNotFoundError,
    MissingActorError,
    NotGigOrganizerError,
    RoleNotFoundError,
)
from gigs.services.publisher import EventPublisher, NullPublisher
from gigs.stores.interfaces import BookingStore

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_id(id_type: type, value: object, field: str = "id"):
    """Parse an identifier, mapping malformed input to InvalidIdError."""
    try:
        return id_type.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidIdError(field) from exc


def parse_actor(value: object) -> UserId:
    if value is None or value == "":
        raise MissingActorError()
    return parse_id(UserId, value, "actor_id")


class BookingServiceBase:
    def __init__(
        self,
        store: BookingStore,
        publisher: EventPublisher | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._publisher = publisher or NullPublisher()
        self._clock = clock

    def _get_gig(self, gig_id: GigId) -> Gig:
        gig = self._store.get_gig(gig_id)
        if gig is None:
            raise GigNotFoundError(str(gig_id))
        return gig

    def _get_role(self, role_id: RoleId) -> GigRole:
        role = self._store.get_role(role_id)
        if role is None:
            raise RoleNotFoundError(str(role_id))
        return role

    def _get_invite(self, invite_id: InviteId) -> Invite:
        invite = self._store.get_invite(invite_id)
        if invite is None:
            raise InviteNotFoundError(str(invite_id))
        return invite

    @staticmethod
    def _require_organizer(gig: Gig, actor_id: UserId) -> None:
        if gig.organizer_id != actor_id:
            raise NotGigOrganizerError()
