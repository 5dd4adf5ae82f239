"""Serializers for transforming domain models to API responses,
and for validating request bodies.

Identifiers are rendered through their ``__str__`` (UUID text) and
enums through their ``value``.
"""

from rest_framework import serializers

from gigs.domain import DeclineReason


class IdField(serializers.Field):
    """Read-only identifier rendered as its UUID string."""

    def __init__(self, **kwargs):
        kwargs["read_only"] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return str(value) if value is not None else None


class EnumField(serializers.Field):
    def __init__(self, **kwargs):
        kwargs["read_only"] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return value.value if value is not None else None


class MoneyField(serializers.Field):
    def __init__(self, **kwargs):
        kwargs["read_only"] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return str(value) if value is not None else None


class CoordinatesSerializer(serializers.Serializer):
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()


class MusicianProfileSerializer(serializers.Serializer):
    musician_id = IdField()
    display_name = serializers.CharField()
    instruments = serializers.ListField(child=serializers.CharField())
    search_radius_km = serializers.FloatField(source="search_radius.km")
    home = CoordinatesSerializer(allow_null=True)
    avg_rating = serializers.FloatField(allow_null=True)
    rating_count = serializers.IntegerField()


class CandidateSerializer(serializers.Serializer):
    """Serializer for a matched Candidate."""

    profile = MusicianProfileSerializer()
    distance_km = serializers.FloatField(allow_null=True)
    estimated_travel_minutes = serializers.IntegerField(allow_null=True)


class InviteSerializer(serializers.Serializer):
    """Serializer for Invite domain model."""

    id = IdField()
    role_id = IdField()
    gig_id = IdField()
    organizer_id = IdField()
    musician_id = IdField()
    status = EnumField()
    created_at = serializers.DateTimeField()
    responded_at = serializers.DateTimeField(allow_null=True)
    updated_at = serializers.DateTimeField(allow_null=True)
    decline_reason = EnumField()


class ConfirmationSerializer(serializers.Serializer):
    id = IdField()
    role_id = IdField()
    invite_id = IdField()
    musician_id = IdField()
    confirmed_at = serializers.DateTimeField()


class SuspensionSerializer(serializers.Serializer):
    musician_id = IdField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    reason = EnumField()


class CancellationOutcomeSerializer(serializers.Serializer):
    invite = InviteSerializer()
    suspension = SuspensionSerializer(allow_null=True)


class PendingInviteSerializer(serializers.Serializer):
    """Musician-facing pending invite with gig details."""

    invite = InviteSerializer()
    gig_title = serializers.CharField()
    instrument = serializers.CharField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    address_text = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    offered_rate = MoneyField()
    distance_km = serializers.FloatField(allow_null=True)
    estimated_travel_minutes = serializers.IntegerField(allow_null=True)


class ConfirmedGigSerializer(serializers.Serializer):
    """Booked gig; field names are stable for calendar export."""

    gig_id = IdField()
    title = serializers.CharField()
    description = serializers.CharField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    address_text = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    instrument = serializers.CharField()
    invite_id = IdField()
    confirmation_id = IdField()
    organizer_id = IdField()


class RatingSerializer(serializers.Serializer):
    id = IdField()
    invite_id = IdField()
    rater_role = EnumField()
    rater_id = IdField()
    rated_id = IdField()
    score = serializers.IntegerField(source="score.value")
    predefined_comments = serializers.ListField(child=serializers.CharField())
    comment = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class RatingEligibilitySerializer(serializers.Serializer):
    allowed = serializers.BooleanField()
    rater_role = EnumField()
    rated_id = IdField()
    refusal = EnumField()


class GigSerializer(serializers.Serializer):
    id = IdField()
    organizer_id = IdField()
    title = serializers.CharField()
    status = EnumField()
    starts_at = serializers.DateTimeField()
    ends_at = serializers.DateTimeField()
    city = serializers.CharField(source="location.city")
    state = serializers.CharField(source="location.state")


# Request bodies. Ids stay strings here; services own their validation.


class InviteRequestSerializer(serializers.Serializer):
    musician_id = serializers.CharField(required=False, allow_blank=False)


class DeclineRequestSerializer(serializers.Serializer):
    reason = serializers.ChoiceField(
        choices=[reason.value for reason in DeclineReason], required=False, allow_null=True
    )


class ConfirmRequestSerializer(serializers.Serializer):
    invite_id = serializers.CharField()


class RatingRequestSerializer(serializers.Serializer):
    score = serializers.IntegerField()
    predefined_comments = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, default=list
    )
    comment = serializers.CharField(required=False, allow_blank=True, default="")
