"""Django ORM implementation of the BookingStore.

Rows are converted to frozen domain models on the way out; domain models
are written back field by field. Unique constraints surface as domain
conflicts.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal

from django.db import IntegrityError, transaction

from gigs import models as orm
from gigs.domain import (
    CancellationRecord,
    Confirmation,
    ConfirmationId,
    ConfirmedGig,
    Coordinates,
    DeclineReason,
    Gig,
    GigId,
    GigRole,
    GigStatus,
    Invite,
    InviteId,
    InviteStatus,
    Location,
    Money,
    MusicianProfile,
    Party,
    PendingInvite,
    Quantity,
    Rating,
    RatingId,
    RoleId,
    Score,
    SearchRadius,
    SuspensionReason,
    SuspensionRecord,
    UserId,
)
from gigs.domain.errors import ConfirmationExistsError, DuplicateInviteError, RatingExistsError
from gigs.domain.invite_lifecycle import ACTIVE
from gigs.stores.interfaces import BookingStore


def _money(amount: Decimal | None) -> Money | None:
    return Money(amount) if amount is not None else None


def _gig(row: orm.Gig) -> Gig:
    return Gig(
        id=GigId(row.id),
        organizer_id=UserId(row.organizer_id),
        title=row.title,
        description=row.description,
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        location=Location(
            address_text=row.address_text,
            city=row.city,
            state=row.state,
            coordinates=Coordinates.from_optional(row.latitude, row.longitude),
        ),
        status=GigStatus(row.status),
        created_at=row.created_at,
    )


def _role(row: orm.GigRole) -> GigRole:
    return GigRole(
        id=RoleId(row.id),
        gig_id=GigId(row.gig_id),
        instrument=row.instrument,
        quantity=Quantity(row.quantity),
        offered_rate=_money(row.offered_rate),
        genres=tuple(row.genres or ()),
        skills=tuple(row.skills or ()),
        equipment=tuple(row.equipment or ()),
    )


def _profile(row: orm.MusicianProfile, default_radius_km: float) -> MusicianProfile:
    radius = row.search_radius_km if row.search_radius_km else default_radius_km
    return MusicianProfile(
        musician_id=UserId(row.musician_id),
        display_name=row.display_name,
        instruments=tuple(row.instruments or ()),
        search_radius=SearchRadius(radius),
        home=Coordinates.from_optional(row.latitude, row.longitude),
        avg_rating=row.avg_rating,
        rating_count=row.rating_count,
    )


def _invite(row: orm.Invite) -> Invite:
    return Invite(
        id=InviteId(row.id),
        role_id=RoleId(row.role_id),
        gig_id=GigId(row.gig_id),
        organizer_id=UserId(row.organizer_id),
        musician_id=UserId(row.musician_id),
        status=InviteStatus(row.status),
        created_at=row.created_at,
        responded_at=row.responded_at,
        updated_at=row.updated_at,
        decline_reason=DeclineReason(row.decline_reason) if row.decline_reason else None,
    )


def _confirmation(row: orm.Confirmation) -> Confirmation:
    return Confirmation(
        id=ConfirmationId(row.id),
        role_id=RoleId(row.role_id),
        invite_id=InviteId(row.invite_id),
        musician_id=UserId(row.musician_id),
        confirmed_at=row.confirmed_at,
    )


def _suspension(row: orm.Suspension) -> SuspensionRecord:
    return SuspensionRecord(
        musician_id=UserId(row.musician_id),
        starts_at=row.starts_at,
        ends_at=row.ends_at,
        reason=SuspensionReason(row.reason),
    )


def _rating(row: orm.Rating) -> Rating:
    return Rating(
        id=RatingId(row.id),
        invite_id=InviteId(row.invite_id),
        rater_role=Party(row.rater_role),
        rater_id=UserId(row.rater_id),
        rated_id=UserId(row.rated_id),
        score=Score(row.score),
        predefined_comments=tuple(row.predefined_comments or ()),
        comment=row.comment,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def __init__(self, default_search_radius_km: float = 50.0) -> None:
        self._default_radius_km = default_search_radius_km

    # Gigs, roles, profiles

    def get_gig(self, gig_id: GigId) -> Gig | None:
        row = orm.Gig.objects.filter(pk=gig_id.value).first()
        return _gig(row) if row else None

    def save_gig(self, gig: Gig) -> Gig:
        row = orm.Gig.objects.get(pk=gig.id.value)
        row.status = gig.status.value
        row.save(update_fields=["status", "updated_at"])
        return gig

    def get_role(self, role_id: RoleId) -> GigRole | None:
        row = orm.GigRole.objects.filter(pk=role_id.value).first()
        return _role(row) if row else None

    def list_roles_for_gig(self, gig_id: GigId) -> list[GigRole]:
        rows = orm.GigRole.objects.filter(gig_id=gig_id.value).order_by("created_at")
        return [_role(row) for row in rows]

    def get_musician_profile(self, musician_id: UserId) -> MusicianProfile | None:
        row = orm.MusicianProfile.objects.filter(pk=musician_id.value).first()
        return _profile(row, self._default_radius_km) if row else None

    def list_musician_profiles(self) -> list[MusicianProfile]:
        return [
            _profile(row, self._default_radius_km)
            for row in orm.MusicianProfile.objects.all()
        ]

    # Invites

    def get_invite(self, invite_id: InviteId) -> Invite | None:
        row = orm.Invite.objects.filter(pk=invite_id.value).first()
        return _invite(row) if row else None

    def find_active_invite(self, role_id: RoleId, musician_id: UserId) -> Invite | None:
        row = orm.Invite.objects.filter(
            role_id=role_id.value,
            musician_id=musician_id.value,
            status__in=[status.value for status in ACTIVE],
        ).first()
        return _invite(row) if row else None

    def list_invites_for_role(self, role_id: RoleId) -> list[Invite]:
        return [_invite(row) for row in orm.Invite.objects.filter(role_id=role_id.value)]

    def add_invite(self, invite: Invite) -> Invite:
        try:
            with transaction.atomic():
                orm.Invite.objects.create(
                    id=invite.id.value,
                    role_id=invite.role_id.value,
                    gig_id=invite.gig_id.value,
                    organizer_id=invite.organizer_id.value,
                    musician_id=invite.musician_id.value,
                    status=invite.status.value,
                    created_at=invite.created_at,
                    responded_at=invite.responded_at,
                    updated_at=invite.updated_at,
                )
        except IntegrityError as exc:
            raise DuplicateInviteError(str(invite.role_id), str(invite.musician_id)) from exc
        return invite

    def save_invite(self, invite: Invite) -> Invite:
        row = orm.Invite.objects.get(pk=invite.id.value)
        row.status = invite.status.value
        row.responded_at = invite.responded_at
        row.updated_at = invite.updated_at
        row.decline_reason = invite.decline_reason.value if invite.decline_reason else None
        row.save(update_fields=["status", "responded_at", "updated_at", "decline_reason"])
        return invite

    # Confirmations

    def get_confirmation(self, confirmation_id: ConfirmationId) -> Confirmation | None:
        row = orm.Confirmation.objects.filter(pk=confirmation_id.value).first()
        return _confirmation(row) if row else None

    def get_confirmation_for_role(self, role_id: RoleId) -> Confirmation | None:
        row = orm.Confirmation.objects.filter(role_id=role_id.value).first()
        return _confirmation(row) if row else None

    def add_confirmation(self, confirmation: Confirmation) -> Confirmation:
        try:
            with transaction.atomic():
                orm.Confirmation.objects.create(
                    id=confirmation.id.value,
                    role_id=confirmation.role_id.value,
                    invite_id=confirmation.invite_id.value,
                    musician_id=confirmation.musician_id.value,
                    confirmed_at=confirmation.confirmed_at,
                )
        except IntegrityError as exc:
            raise ConfirmationExistsError(str(confirmation.role_id)) from exc
        return confirmation

    def delete_confirmation(self, confirmation_id: ConfirmationId) -> None:
        orm.Confirmation.objects.filter(pk=confirmation_id.value).delete()

    @contextmanager
    def lock_role(self, role_id: RoleId) -> Iterator[None]:
        with transaction.atomic():
            # FOR UPDATE on the role row; a no-op on SQLite, which serializes writers anyway
            list(
                orm.GigRole.objects.select_for_update()
                .filter(pk=role_id.value)
                .values_list("pk", flat=True)
            )
            yield

    # Cancellations and suspensions

    def add_cancellation(self, record: CancellationRecord) -> None:
        orm.Cancellation.objects.create(
            invite_id=record.invite_id.value,
            musician_id=record.musician_id.value,
            cancelled_by=record.cancelled_by.value,
            gig_starts_at=record.gig_starts_at,
            cancelled_at=record.cancelled_at,
            penalized=record.penalized,
        )

    def count_cancellations(
        self, musician_id: UserId, cancelled_by: Party, since: datetime
    ) -> int:
        return orm.Cancellation.objects.filter(
            musician_id=musician_id.value,
            cancelled_by=cancelled_by.value,
            cancelled_at__gte=since,
        ).count()

    def add_suspension(self, suspension: SuspensionRecord) -> None:
        orm.Suspension.objects.create(
            musician_id=suspension.musician_id.value,
            starts_at=suspension.starts_at,
            ends_at=suspension.ends_at,
            reason=suspension.reason.value,
        )

    def get_active_suspension(self, musician_id: UserId, at: datetime) -> SuspensionRecord | None:
        row = (
            orm.Suspension.objects.filter(
                musician_id=musician_id.value, starts_at__lte=at, ends_at__gt=at
            )
            .order_by("-ends_at")
            .first()
        )
        return _suspension(row) if row else None

    # Ratings

    def get_rating(self, rating_id: RatingId) -> Rating | None:
        row = orm.Rating.objects.filter(pk=rating_id.value).first()
        return _rating(row) if row else None

    def find_rating(self, invite_id: InviteId, rater_role: Party) -> Rating | None:
        row = orm.Rating.objects.filter(
            invite_id=invite_id.value, rater_role=rater_role.value
        ).first()
        return _rating(row) if row else None

    def add_rating(self, rating: Rating) -> Rating:
        try:
            with transaction.atomic():
                orm.Rating.objects.create(
                    id=rating.id.value,
                    invite_id=rating.invite_id.value,
                    rater_role=rating.rater_role.value,
                    rater_id=rating.rater_id.value,
                    rated_id=rating.rated_id.value,
                    score=rating.score.value,
                    predefined_comments=list(rating.predefined_comments),
                    comment=rating.comment,
                    created_at=rating.created_at,
                    updated_at=rating.updated_at,
                )
        except IntegrityError as exc:
            raise RatingExistsError(str(rating.invite_id), rating.rater_role.value) from exc
        return rating

    def save_rating(self, rating: Rating) -> Rating:
        row = orm.Rating.objects.get(pk=rating.id.value)
        row.score = rating.score.value
        row.predefined_comments = list(rating.predefined_comments)
        row.comment = rating.comment
        row.updated_at = rating.updated_at
        row.save(update_fields=["score", "predefined_comments", "comment", "updated_at"])
        return rating

    # Read models

    def list_pending_invites(self, musician_id: UserId, after: datetime) -> list[PendingInvite]:
        rows = (
            orm.Invite.objects.filter(
                musician_id=musician_id.value,
                status=orm.Invite.Status.PENDING,
                gig__status=orm.Gig.Status.PUBLISHED,
                gig__starts_at__gt=after,
            )
            .select_related("gig", "role")
            .order_by("gig__starts_at", "created_at")
        )
        return [
            PendingInvite(
                invite=_invite(row),
                gig_title=row.gig.title,
                instrument=row.role.instrument,
                starts_at=row.gig.starts_at,
                ends_at=row.gig.ends_at,
                address_text=row.gig.address_text,
                city=row.gig.city,
                state=row.gig.state,
                offered_rate=_money(row.role.offered_rate),
                gig_coordinates=Coordinates.from_optional(row.gig.latitude, row.gig.longitude),
            )
            for row in rows
        ]

    def list_confirmed_gigs(self, musician_id: UserId) -> list[ConfirmedGig]:
        rows = (
            orm.Confirmation.objects.filter(musician_id=musician_id.value)
            .select_related("role__gig")
            .order_by("role__gig__starts_at")
        )
        return [
            ConfirmedGig(
                gig_id=GigId(row.role.gig.id),
                title=row.role.gig.title,
                description=row.role.gig.description,
                starts_at=row.role.gig.starts_at,
                ends_at=row.role.gig.ends_at,
                address_text=row.role.gig.address_text,
                city=row.role.gig.city,
                state=row.role.gig.state,
                instrument=row.role.instrument,
                invite_id=InviteId(row.invite_id),
                confirmation_id=ConfirmationId(row.id),
                organizer_id=UserId(row.role.gig.organizer_id),
            )
            for row in rows
        ]
