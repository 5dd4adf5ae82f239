from django.contrib import admin

from gigs.models import (
    Cancellation,
    Confirmation,
    Gig,
    GigRole,
    Invite,
    MusicianProfile,
    Rating,
    Suspension,
)


class GigRoleInline(admin.TabularInline):
    model = GigRole
    extra = 1


class InviteInline(admin.TabularInline):
    model = Invite
    extra = 0
    fields = ["musician_id", "status", "created_at", "responded_at"]
    readonly_fields = ["created_at", "responded_at"]


@admin.register(Gig)
class GigAdmin(admin.ModelAdmin):
    list_display = ["title", "city", "starts_at", "status", "organizer_id"]
    list_filter = ["status"]
    search_fields = ["title", "city", "address_text"]
    inlines = [GigRoleInline]


@admin.register(GigRole)
class GigRoleAdmin(admin.ModelAdmin):
    list_display = ["gig", "instrument", "quantity", "offered_rate"]
    list_filter = ["instrument"]
    inlines = [InviteInline]


@admin.register(MusicianProfile)
class MusicianProfileAdmin(admin.ModelAdmin):
    list_display = ["display_name", "musician_id", "search_radius_km", "avg_rating"]
    search_fields = ["display_name"]


@admin.register(Invite)
class InviteAdmin(admin.ModelAdmin):
    list_display = ["musician_id", "role", "status", "created_at"]
    list_filter = ["status", "decline_reason"]


@admin.register(Confirmation)
class ConfirmationAdmin(admin.ModelAdmin):
    list_display = ["role", "musician_id", "confirmed_at"]


@admin.register(Cancellation)
class CancellationAdmin(admin.ModelAdmin):
    list_display = ["musician_id", "cancelled_by", "cancelled_at", "penalized"]
    list_filter = ["cancelled_by", "penalized"]


@admin.register(Suspension)
class SuspensionAdmin(admin.ModelAdmin):
    list_display = ["musician_id", "reason", "starts_at", "ends_at"]
    list_filter = ["reason"]


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ["invite", "rater_role", "score", "created_at"]
    list_filter = ["rater_role", "score"]
