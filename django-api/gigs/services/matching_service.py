"""Candidate listing and invite dispatch."""

import logging
import uuid
from datetime import datetime

from gigs.domain import (
    Candidate,
    Gig,
    GigRole,
    Invite,
    InviteId,
    InviteStatus,
    RoleId,
    UserId,
)
from gigs.domain.errors import (
    GigNotOpenError,
    MusicianNotFoundError,
    MusicianSuspendedError,
    RoleAlreadyFilledError,
)
from gigs.domain.events import InviteCreated
from gigs.domain.gig_lifecycle import is_open_for_invites
from gigs.domain.matching import CandidateMatcher
from gigs.services.base import BookingServiceBase, parse_actor, parse_id

logger = logging.getLogger(__name__)


class MatchingService(BookingServiceBase):
    """Selects musicians for a role and creates their invites."""

    def __init__(self, *args, matcher: CandidateMatcher | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._matcher = matcher or CandidateMatcher()

    def list_candidate_musicians(self, role_id: str) -> list[Candidate]:
        """Return eligible musicians for a role, nearest first.

        Raises:
            InvalidIdError: If role_id is not a valid UUID.
            RoleNotFoundError: If the role does not exist.
        """
        role = self._get_role(parse_id(RoleId, role_id, "role_id"))
        gig = self._get_gig(role.gig_id)
        return self._candidates(gig, role)

    def dispatch_invites(self, role_id: str, actor_id: str) -> list[Invite]:
        """Invite every eligible candidate who was never invited to the role.

        Musicians with any earlier invite for the role are skipped, whatever
        its status, so a decline is not answered with a fresh invite.
        Suspended musicians are skipped too; bulk dispatch never fails
        because of one candidate.
        """
        actor = parse_actor(actor_id)
        role = self._get_role(parse_id(RoleId, role_id, "role_id"))
        gig = self._get_gig(role.gig_id)
        self._require_organizer(gig, actor)
        now = self._clock()
        self._require_open(gig, now)

        created: list[Invite] = []
        with self._store.lock_role(role.id):
            gig = self._require_still_open(role, now)
            invited = {
                invite.musician_id for invite in self._store.list_invites_for_role(role.id)
            }
            for candidate in self._candidates(gig, role):
                musician_id = candidate.profile.musician_id
                if musician_id in invited:
                    continue
                if self._store.get_active_suspension(musician_id, now) is not None:
                    logger.info(
                        "Skipping suspended musician",
                        extra={"role_id": str(role.id), "musician_id": str(musician_id)},
                    )
                    continue
                invite = self._new_invite(gig, role, musician_id, now)
                created.append(self._store.add_invite(invite))

        logger.info(
            "Dispatched invites",
            extra={"role_id": str(role.id), "count": len(created)},
        )
        for invite in created:
            self._announce(invite, now)
        return created

    def invite_musician(self, role_id: str, musician_id: str, actor_id: str) -> Invite:
        """Invite one musician to a role.

        Idempotent: an active invite for the same musician and role is
        returned unchanged.

        Raises:
            MusicianNotFoundError: If the musician has no profile.
            RoleAlreadyFilledError: If the role already has a confirmation.
            GigNotOpenError: If the gig is not published or already started.
            MusicianSuspendedError: If the musician is serving a suspension.
        """
        actor = parse_actor(actor_id)
        role = self._get_role(parse_id(RoleId, role_id, "role_id"))
        musician = parse_id(UserId, musician_id, "musician_id")
        gig = self._get_gig(role.gig_id)
        self._require_organizer(gig, actor)
        if self._store.get_musician_profile(musician) is None:
            raise MusicianNotFoundError(str(musician))
        now = self._clock()
        self._require_open(gig, now)

        with self._store.lock_role(role.id):
            gig = self._require_still_open(role, now)
            existing = self._store.find_active_invite(role.id, musician)
            if existing is not None:
                return existing
            suspension = self._store.get_active_suspension(musician, now)
            if suspension is not None:
                raise MusicianSuspendedError(
                    str(musician), suspension.ends_at, suspension.remaining(now)
                )
            invite = self._store.add_invite(self._new_invite(gig, role, musician, now))

        logger.info(
            "Invite created",
            extra={"invite_id": str(invite.id), "musician_id": str(musician)},
        )
        self._announce(invite, now)
        return invite

    def _candidates(self, gig: Gig, role: GigRole) -> list[Candidate]:
        return self._matcher.match(
            role,
            gig.location.coordinates,
            self._store.list_musician_profiles(),
            exclude=(gig.organizer_id,),
        )

    @staticmethod
    def _require_open(gig: Gig, now: datetime) -> None:
        if not is_open_for_invites(gig, now):
            raise GigNotOpenError(str(gig.id))

    def _require_still_open(self, role: GigRole, now: datetime) -> Gig:
        # caller holds the role lock; the gig may have been cancelled since
        gig = self._get_gig(role.gig_id)
        self._require_open(gig, now)
        if self._store.get_confirmation_for_role(role.id) is not None:
            raise RoleAlreadyFilledError(str(role.id))
        return gig

    @staticmethod
    def _new_invite(gig: Gig, role: GigRole, musician_id: UserId, now: datetime) -> Invite:
        return Invite(
            id=InviteId(uuid.uuid4()),
            role_id=role.id,
            gig_id=gig.id,
            organizer_id=gig.organizer_id,
            musician_id=musician_id,
            status=InviteStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def _announce(self, invite: Invite, now: datetime) -> None:
        self._publisher.publish(
            InviteCreated(
                occurred_at=now,
                invite_id=invite.id,
                gig_id=invite.gig_id,
                role_id=invite.role_id,
                musician_id=invite.musician_id,
            )
        )
