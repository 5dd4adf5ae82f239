"""Builders for domain objects and database rows used across tests."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from gigs import models as orm
from gigs.domain import (
    Coordinates,
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
    Quantity,
    RoleId,
    SearchRadius,
    UserId,
)

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)

# Lisbon and nearby points
LISBON = Coordinates(38.7223, -9.1393)
SINTRA = Coordinates(38.8029, -9.3817)
PORTO = Coordinates(41.1579, -8.6291)


def user_id() -> UserId:
    return UserId(uuid.uuid4())


def make_gig(
    organizer_id: UserId | None = None,
    starts_at: datetime | None = None,
    status: GigStatus = GigStatus.PUBLISHED,
    coordinates: Coordinates | None = LISBON,
    title: str = "Jazz night",
) -> Gig:
    starts_at = starts_at or NOW + timedelta(days=10)
    return Gig(
        id=GigId(uuid.uuid4()),
        organizer_id=organizer_id or user_id(),
        title=title,
        description="Two sets, standards",
        starts_at=starts_at,
        ends_at=starts_at + timedelta(hours=3),
        location=Location("Rua Augusta 1", "Lisbon", "Lisboa", coordinates),
        status=status,
        created_at=NOW - timedelta(days=1),
    )


def make_role(gig: Gig, instrument: str = "Saxophone", quantity: int = 1) -> GigRole:
    return GigRole(
        id=RoleId(uuid.uuid4()),
        gig_id=gig.id,
        instrument=instrument,
        quantity=Quantity(quantity),
        offered_rate=Money(Decimal("150.00")),
    )


def make_profile(
    instruments: tuple[str, ...] = ("saxophone",),
    home: Coordinates | None = LISBON,
    radius_km: float = 50.0,
    name: str = "Musician",
    musician_id: UserId | None = None,
) -> MusicianProfile:
    return MusicianProfile(
        musician_id=musician_id or user_id(),
        display_name=name,
        instruments=instruments,
        search_radius=SearchRadius(radius_km),
        home=home,
    )


def make_invite(
    gig: Gig,
    role: GigRole,
    musician_id: UserId | None = None,
    status: InviteStatus = InviteStatus.PENDING,
) -> Invite:
    return Invite(
        id=InviteId(uuid.uuid4()),
        role_id=role.id,
        gig_id=gig.id,
        organizer_id=gig.organizer_id,
        musician_id=musician_id or user_id(),
        status=status,
        created_at=NOW - timedelta(hours=1),
    )


# Database rows


def create_gig_row(
    organizer_id: uuid.UUID | None = None,
    starts_at: datetime | None = None,
    status: str = orm.Gig.Status.PUBLISHED,
    latitude: float | None = LISBON.latitude,
    longitude: float | None = LISBON.longitude,
    title: str = "Jazz night",
) -> orm.Gig:
    starts_at = starts_at or datetime.now(timezone.utc) + timedelta(days=10)
    return orm.Gig.objects.create(
        organizer_id=organizer_id or uuid.uuid4(),
        title=title,
        description="Two sets, standards",
        starts_at=starts_at,
        ends_at=starts_at + timedelta(hours=3),
        address_text="Rua Augusta 1",
        city="Lisbon",
        state="Lisboa",
        latitude=latitude,
        longitude=longitude,
        status=status,
    )


def create_role_row(gig: orm.Gig, instrument: str = "Saxophone", quantity: int = 1) -> orm.GigRole:
    return orm.GigRole.objects.create(
        gig=gig, instrument=instrument, quantity=quantity, offered_rate=Decimal("150.00")
    )


def create_profile_row(
    instruments: list[str] | None = None,
    latitude: float | None = LISBON.latitude,
    longitude: float | None = LISBON.longitude,
    radius_km: float | None = 50.0,
    name: str = "Musician",
) -> orm.MusicianProfile:
    return orm.MusicianProfile.objects.create(
        musician_id=uuid.uuid4(),
        display_name=name,
        instruments=instruments if instruments is not None else ["saxophone"],
        latitude=latitude,
        longitude=longitude,
        search_radius_km=radius_km,
    )


def create_invite_row(
    role: orm.GigRole,
    musician_id: uuid.UUID | None = None,
    status: str = orm.Invite.Status.PENDING,
) -> orm.Invite:
    return orm.Invite.objects.create(
        role=role,
        gig=role.gig,
        organizer_id=role.gig.organizer_id,
        musician_id=musician_id or uuid.uuid4(),
        status=status,
        created_at=datetime.now(timezone.utc),
    )
