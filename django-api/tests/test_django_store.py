"""Integration tests for DjangoBookingStore against the test database.

Run with: pytest tests/test_django_store.py -v
"""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from django.core.management import call_command
from django.db import IntegrityError, connection, transaction
from django.db.migrations.recorder import MigrationRecorder

from gigs import models as orm
from gigs.domain import (
    Confirmation,
    ConfirmationId,
    DeclineReason,
    GigId,
    GigStatus,
    InviteId,
    InviteStatus,
    Party,
    RoleId,
    SuspensionReason,
    SuspensionRecord,
    UserId,
)
from gigs.domain.errors import ConfirmationExistsError, DuplicateInviteError
from gigs.stores.django_store import DjangoBookingStore
from tests.builders import (
    create_gig_row,
    create_invite_row,
    create_profile_row,
    create_role_row,
    make_invite,
)


@pytest.fixture
def db_store() -> DjangoBookingStore:
    return DjangoBookingStore(default_search_radius_km=25.0)


@pytest.mark.django_db
class TestGigsAndProfiles:
    def test_gig_round_trip(self, db_store):
        """Gig rows come back as domain gigs with location."""
        row = create_gig_row()
        gig = db_store.get_gig(GigId(row.id))
        assert gig.title == "Jazz night"
        assert gig.location.coordinates.latitude == pytest.approx(row.latitude)
        assert gig.status.value == "published"

    def test_missing_gig(self, db_store):
        """Unknown ids give None."""
        assert db_store.get_gig(GigId(uuid.uuid4())) is None

    def test_profile_without_radius_uses_default(self, db_store):
        """A profile with no radius gets the configured default."""
        row = create_profile_row(radius_km=None, latitude=None)
        profile = db_store.get_musician_profile(UserId(row.musician_id))
        assert profile.search_radius.km == 25.0
        assert profile.home is None

    def test_save_gig_status(self, db_store):
        """save_gig persists the status."""
        row = create_gig_row(status=orm.Gig.Status.DRAFT)
        gig = db_store.get_gig(GigId(row.id))
        db_store.save_gig(replace(gig, status=GigStatus.PUBLISHED))
        row.refresh_from_db()
        assert row.status == "published"


@pytest.mark.django_db
class TestInvites:
    def test_one_active_invite_per_musician_and_role(self, db_store):
        """The partial unique constraint surfaces as a domain conflict."""
        role = create_role_row(create_gig_row())
        first = create_invite_row(role)
        gig = db_store.get_gig(GigId(role.gig_id))
        duplicate = make_invite(
            gig, db_store.get_role(RoleId(role.id)), UserId(first.musician_id)
        )
        with pytest.raises(DuplicateInviteError):
            db_store.add_invite(duplicate)

    def test_reinvite_after_cancellation(self, db_store):
        """A cancelled invite does not block a new one."""
        role = create_role_row(create_gig_row())
        first = create_invite_row(role, status=orm.Invite.Status.CANCELLED)
        gig = db_store.get_gig(GigId(role.gig_id))
        again = make_invite(gig, db_store.get_role(RoleId(role.id)), UserId(first.musician_id))
        assert db_store.add_invite(again) == again
        assert db_store.find_active_invite(RoleId(role.id), UserId(first.musician_id)) == again

    def test_save_invite(self, db_store):
        """Status and timestamps are written back."""
        row = create_invite_row(create_role_row(create_gig_row()))
        invite = db_store.get_invite(InviteId(row.id))
        at = datetime.now(timezone.utc)
        db_store.save_invite(
            replace(invite, status=InviteStatus.ACCEPTED, responded_at=at, updated_at=at)
        )
        row.refresh_from_db()
        assert row.status == "accepted"
        assert row.responded_at == at

    def test_decline_reason_round_trip(self, db_store):
        """The decline reason is stored and read back."""
        row = create_invite_row(create_role_row(create_gig_row()))
        invite = db_store.get_invite(InviteId(row.id))
        at = datetime.now(timezone.utc)
        db_store.save_invite(
            replace(
                invite,
                status=InviteStatus.DECLINED,
                responded_at=at,
                decline_reason=DeclineReason.LOW_VALUE,
            )
        )
        assert db_store.get_invite(InviteId(row.id)).decline_reason is DeclineReason.LOW_VALUE
        row.refresh_from_db()
        assert row.decline_reason == "low_value"


@pytest.mark.django_db
class TestConfirmations:
    def test_unique_per_role(self, db_store):
        """A second confirmation for a role is refused by the database."""
        role = create_role_row(create_gig_row())
        first = create_invite_row(role, status=orm.Invite.Status.ACCEPTED)
        second = create_invite_row(role, status=orm.Invite.Status.ACCEPTED)
        now = datetime.now(timezone.utc)

        def confirmation_for(row):
            return Confirmation(
                ConfirmationId(uuid.uuid4()), RoleId(role.id), InviteId(row.id),
                UserId(row.musician_id), now,
            )

        with db_store.lock_role(RoleId(role.id)):
            db_store.add_confirmation(confirmation_for(first))
        with pytest.raises(ConfirmationExistsError):
            db_store.add_confirmation(confirmation_for(second))
        assert orm.Confirmation.objects.filter(role=role).count() == 1

    def test_delete(self, db_store):
        """Deleting a confirmation reopens the role."""
        role = create_role_row(create_gig_row())
        invite = create_invite_row(role, status=orm.Invite.Status.CONFIRMED)
        row = orm.Confirmation.objects.create(
            role=role, invite=invite, musician_id=invite.musician_id,
            confirmed_at=datetime.now(timezone.utc),
        )
        db_store.delete_confirmation(ConfirmationId(row.id))
        assert db_store.get_confirmation_for_role(RoleId(role.id)) is None


@pytest.mark.django_db
class TestPenalties:
    def test_active_suspension_window(self, db_store):
        """Only suspensions covering the instant are active."""
        musician = UserId(uuid.uuid4())
        now = datetime.now(timezone.utc)
        db_store.add_suspension(
            SuspensionRecord(
                musician, now - timedelta(days=10), now - timedelta(days=3),
                SuspensionReason.LATE_CANCELLATION,
            )
        )
        assert db_store.get_active_suspension(musician, now) is None
        db_store.add_suspension(
            SuspensionRecord(
                musician, now - timedelta(hours=1), now + timedelta(days=6),
                SuspensionReason.FREQUENT_CANCELLATIONS,
            )
        )
        active = db_store.get_active_suspension(musician, now)
        assert active.reason is SuspensionReason.FREQUENT_CANCELLATIONS

    def test_count_cancellations_since(self, db_store):
        """Counting filters by party and time."""
        role = create_role_row(create_gig_row())
        invite = create_invite_row(role)
        now = datetime.now(timezone.utc)
        for by, days_ago in (("musician", 1), ("musician", 40), ("organizer", 2)):
            orm.Cancellation.objects.create(
                invite=invite, musician_id=invite.musician_id, cancelled_by=by,
                gig_starts_at=now, cancelled_at=now - timedelta(days=days_ago),
            )
        count = db_store.count_cancellations(
            UserId(invite.musician_id), Party.MUSICIAN, now - timedelta(days=30)
        )
        assert count == 1


@pytest.mark.django_db
class TestRatingConstraints:
    def test_score_check_constraint(self):
        """The database rejects scores outside 1 to 5."""
        invite = create_invite_row(create_role_row(create_gig_row()))
        now = datetime.now(timezone.utc)
        with pytest.raises(IntegrityError), transaction.atomic():
            orm.Rating.objects.create(
                invite=invite, rater_role="organizer", rater_id=invite.organizer_id,
                rated_id=invite.musician_id, score=9, created_at=now, updated_at=now,
            )


@pytest.mark.django_db
class TestReadModels:
    def test_pending_invites_ordered_and_filtered(self, db_store):
        """Only pending invites of open gigs, earliest gig first."""
        musician = uuid.uuid4()
        now = datetime.now(timezone.utc)
        late = create_role_row(create_gig_row(starts_at=now + timedelta(days=9), title="late"))
        soon = create_role_row(create_gig_row(starts_at=now + timedelta(days=1), title="soon"))
        past = create_role_row(create_gig_row(starts_at=now - timedelta(days=1)))
        draft = create_role_row(create_gig_row(status=orm.Gig.Status.DRAFT))
        for role in (late, soon, past, draft):
            create_invite_row(role, musician)
        create_invite_row(soon, uuid.uuid4())

        items = db_store.list_pending_invites(UserId(musician), now)

        assert [i.gig_title for i in items] == ["soon", "late"]
        assert str(items[0].offered_rate) == "150.00"
        assert items[0].gig_coordinates is not None

    def test_confirmed_gigs(self, db_store):
        """Confirmed bookings carry the calendar fields."""
        role = create_role_row(create_gig_row(), instrument="Drums")
        invite = create_invite_row(role, status=orm.Invite.Status.CONFIRMED)
        confirmation = orm.Confirmation.objects.create(
            role=role, invite=invite, musician_id=invite.musician_id,
            confirmed_at=datetime.now(timezone.utc),
        )
        [item] = db_store.list_confirmed_gigs(UserId(invite.musician_id))
        assert item.instrument == "Drums"
        assert item.confirmation_id == ConfirmationId(confirmation.id)
        assert item.organizer_id == UserId(role.gig.organizer_id)


@pytest.mark.django_db
class TestMigrations:
    def test_initial_migration_applied(self):
        """The schema comes from the committed migration."""
        applied = MigrationRecorder(connection).applied_migrations()
        assert ("gigs", "0001_initial") in applied

    def test_models_match_migrations(self):
        """No model change is missing a migration."""
        call_command("makemigrations", "gigs", "--check", "--dry-run", verbosity=0)

    def test_booking_constraints_exist_in_schema(self):
        """One confirmation per role and one rating per side live in the database."""
        with connection.cursor() as cursor:
            ratings = connection.introspection.get_constraints(
                cursor, orm.Rating._meta.db_table
            )
            confirmations = connection.introspection.get_constraints(
                cursor, orm.Confirmation._meta.db_table
            )
        assert "gigs_one_rating_per_invite_side" in ratings
        assert any(
            c["unique"] and c["columns"] == ["role_id"] for c in confirmations.values()
        )
