import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Gig",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("organizer_id", models.UUIDField(db_index=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("starts_at", models.DateTimeField()),
                ("ends_at", models.DateTimeField()),
                ("address_text", models.CharField(blank=True, default="", max_length=255)),
                ("city", models.CharField(blank=True, default="", max_length=100)),
                ("state", models.CharField(blank=True, default="", max_length=100)),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("published", "Published"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [
                    models.Index(
                        fields=["status", "starts_at"], name="gigs_gig_status_starts_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="MusicianProfile",
            fields=[
                ("musician_id", models.UUIDField(primary_key=True, serialize=False)),
                ("display_name", models.CharField(blank=True, default="", max_length=255)),
                ("instruments", models.JSONField(blank=True, default=list)),
                ("latitude", models.FloatField(blank=True, null=True)),
                ("longitude", models.FloatField(blank=True, null=True)),
                ("search_radius_km", models.FloatField(blank=True, null=True)),
                ("avg_rating", models.FloatField(blank=True, null=True)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["display_name"],
            },
        ),
        migrations.CreateModel(
            name="Suspension",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("musician_id", models.UUIDField()),
                ("starts_at", models.DateTimeField()),
                ("ends_at", models.DateTimeField()),
                (
                    "reason",
                    models.CharField(
                        choices=[
                            ("late_cancellation", "Late Cancellation"),
                            ("frequent_cancellations", "Frequent Cancellations"),
                        ],
                        max_length=40,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-ends_at"],
                "indexes": [
                    models.Index(
                        fields=["musician_id", "ends_at"], name="gigs_susp_musician_ends_idx"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="GigRole",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("instrument", models.CharField(max_length=100)),
                ("quantity", models.PositiveIntegerField(default=1)),
                (
                    "offered_rate",
                    models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True),
                ),
                ("genres", models.JSONField(blank=True, default=list)),
                ("skills", models.JSONField(blank=True, default=list)),
                ("equipment", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "gig",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="roles",
                        to="gigs.gig",
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["gig"], name="gigs_role_gig_idx")],
            },
        ),
        migrations.CreateModel(
            name="Invite",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("organizer_id", models.UUIDField()),
                ("musician_id", models.UUIDField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("accepted", "Accepted"),
                            ("declined", "Declined"),
                            ("confirmed", "Confirmed"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField()),
                ("responded_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(blank=True, null=True)),
                (
                    "decline_reason",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("low_value", "Low Value"),
                            ("distance", "Distance"),
                            ("unavailable", "Unavailable"),
                            ("schedule_conflict", "Schedule Conflict"),
                            ("not_interested", "Not Interested"),
                            ("other", "Other"),
                        ],
                        max_length=30,
                        null=True,
                    ),
                ),
                (
                    "gig",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invites",
                        to="gigs.gig",
                    ),
                ),
                (
                    "role",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invites",
                        to="gigs.gigrole",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["musician_id", "status"], name="gigs_invite_musician_stat_idx"
                    ),
                    models.Index(fields=["role", "status"], name="gigs_invite_role_status_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("status__in", ["pending", "accepted", "confirmed"])),
                        fields=("role", "musician_id"),
                        name="gigs_one_active_invite_per_role_musician",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Confirmation",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("musician_id", models.UUIDField(db_index=True)),
                ("confirmed_at", models.DateTimeField()),
                (
                    "invite",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="confirmation",
                        to="gigs.invite",
                    ),
                ),
                (
                    "role",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="confirmation",
                        to="gigs.gigrole",
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="Cancellation",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("musician_id", models.UUIDField()),
                (
                    "cancelled_by",
                    models.CharField(
                        choices=[("organizer", "Organizer"), ("musician", "Musician")],
                        max_length=20,
                    ),
                ),
                ("gig_starts_at", models.DateTimeField()),
                ("cancelled_at", models.DateTimeField()),
                ("penalized", models.BooleanField(default=False)),
                (
                    "invite",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cancellations",
                        to="gigs.invite",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(
                        fields=["musician_id", "cancelled_by", "cancelled_at"],
                        name="gigs_cancel_musician_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Rating",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "rater_role",
                    models.CharField(
                        choices=[("organizer", "Organizer"), ("musician", "Musician")],
                        max_length=20,
                    ),
                ),
                ("rater_id", models.UUIDField()),
                ("rated_id", models.UUIDField(db_index=True)),
                ("score", models.PositiveSmallIntegerField()),
                ("predefined_comments", models.JSONField(blank=True, default=list)),
                ("comment", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                (
                    "invite",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ratings",
                        to="gigs.invite",
                    ),
                ),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(
                        fields=("invite", "rater_role"), name="gigs_one_rating_per_invite_side"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("score__gte", 1), ("score__lte", 5)),
                        name="gigs_rating_score_range",
                    ),
                ],
            },
        ),
    ]
