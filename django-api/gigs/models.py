"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
People are referenced by UUID only; authentication lives outside this app.
"""

import uuid

from django.db import models
from django.db.models import Q


class Gig(models.Model):
    """Persistence model for gigs."""

    class Status(models.TextChoices):
        DRAFT = "draft"
        PUBLISHED = "published"
        CANCELLED = "cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organizer_id = models.UUIDField(db_index=True)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    address_text = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    state = models.CharField(max_length=100, blank=True, default="")
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["status", "starts_at"], name="gigs_gig_status_starts_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class GigRole(models.Model):
    """Persistence model for a staffing slot within a gig."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    gig = models.ForeignKey(Gig, on_delete=models.CASCADE, related_name="roles")
    instrument = models.CharField(max_length=100)
    quantity = models.PositiveIntegerField(default=1)
    offered_rate = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    genres = models.JSONField(default=list, blank=True)
    skills = models.JSONField(default=list, blank=True)
    equipment = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["gig"], name="gigs_role_gig_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.gig.title} - {self.instrument}"


class MusicianProfile(models.Model):
    """Persistence model for a musician's matching attributes."""

    musician_id = models.UUIDField(primary_key=True)
    display_name = models.CharField(max_length=255, blank=True, default="")
    instruments = models.JSONField(default=list, blank=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    # null falls back to the configured default radius
    search_radius_km = models.FloatField(null=True, blank=True)
    avg_rating = models.FloatField(null=True, blank=True)
    rating_count = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_name"]

    def __str__(self) -> str:
        return self.display_name or str(self.musician_id)


class Invite(models.Model):
    """Persistence model for invites."""

    class Status(models.TextChoices):
        PENDING = "pending"
        ACCEPTED = "accepted"
        DECLINED = "declined"
        CONFIRMED = "confirmed"
        CANCELLED = "cancelled"

    class DeclineReason(models.TextChoices):
        LOW_VALUE = "low_value"
        DISTANCE = "distance"
        UNAVAILABLE = "unavailable"
        SCHEDULE_CONFLICT = "schedule_conflict"
        NOT_INTERESTED = "not_interested"
        OTHER = "other"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    role = models.ForeignKey(GigRole, on_delete=models.CASCADE, related_name="invites")
    gig = models.ForeignKey(Gig, on_delete=models.CASCADE, related_name="invites")
    organizer_id = models.UUIDField()
    musician_id = models.UUIDField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField()
    responded_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)
    decline_reason = models.CharField(
        max_length=30, choices=DeclineReason.choices, null=True, blank=True
    )

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["musician_id", "status"], name="gigs_invite_musician_stat_idx"),
            models.Index(fields=["role", "status"], name="gigs_invite_role_status_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["role", "musician_id"],
                condition=Q(status__in=["pending", "accepted", "confirmed"]),
                name="gigs_one_active_invite_per_role_musician",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.musician_id} for {self.role_id} ({self.status})"


class Confirmation(models.Model):
    """Persistence model for the booking that fills a role."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    role = models.OneToOneField(GigRole, on_delete=models.CASCADE, related_name="confirmation")
    invite = models.OneToOneField(Invite, on_delete=models.CASCADE, related_name="confirmation")
    musician_id = models.UUIDField(db_index=True)
    confirmed_at = models.DateTimeField()

    def __str__(self) -> str:
        return f"{self.musician_id} confirmed for {self.role_id}"


class Cancellation(models.Model):
    """Persistence model for withdrawn confirmations."""

    class CancelledBy(models.TextChoices):
        ORGANIZER = "organizer"
        MUSICIAN = "musician"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    invite = models.ForeignKey(Invite, on_delete=models.CASCADE, related_name="cancellations")
    musician_id = models.UUIDField()
    cancelled_by = models.CharField(max_length=20, choices=CancelledBy.choices)
    gig_starts_at = models.DateTimeField()
    cancelled_at = models.DateTimeField()
    penalized = models.BooleanField(default=False)

    class Meta:
        indexes = [
            models.Index(
                fields=["musician_id", "cancelled_by", "cancelled_at"],
                name="gigs_cancel_musician_idx",
            ),
        ]


class Suspension(models.Model):
    """Persistence model for booking suspensions."""

    class Reason(models.TextChoices):
        LATE_CANCELLATION = "late_cancellation"
        FREQUENT_CANCELLATIONS = "frequent_cancellations"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    musician_id = models.UUIDField()
    starts_at = models.DateTimeField()
    ends_at = models.DateTimeField()
    reason = models.CharField(max_length=40, choices=Reason.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-ends_at"]
        indexes = [
            models.Index(fields=["musician_id", "ends_at"], name="gigs_susp_musician_ends_idx"),
        ]


class Rating(models.Model):
    """Persistence model for post-gig ratings."""

    class RaterRole(models.TextChoices):
        ORGANIZER = "organizer"
        MUSICIAN = "musician"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    invite = models.ForeignKey(Invite, on_delete=models.CASCADE, related_name="ratings")
    rater_role = models.CharField(max_length=20, choices=RaterRole.choices)
    rater_id = models.UUIDField()
    rated_id = models.UUIDField(db_index=True)
    score = models.PositiveSmallIntegerField()
    predefined_comments = models.JSONField(default=list, blank=True)
    comment = models.TextField(blank=True, default="")
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["invite", "rater_role"],
                name="gigs_one_rating_per_invite_side",
            ),
            models.CheckConstraint(
                condition=Q(score__gte=1) & Q(score__lte=5),
                name="gigs_rating_score_range",
            ),
        ]
