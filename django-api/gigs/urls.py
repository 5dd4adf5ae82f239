from django.urls import path

from gigs.handlers import (
    CandidateListView,
    ConfirmationCancelView,
    ConfirmedGigListView,
    GigCancelView,
    GigPublishView,
    InviteAcceptView,
    InviteDeclineView,
    InviteWithdrawView,
    PendingInviteListView,
    RatingDetailView,
    RatingEligibilityView,
    RatingSubmitView,
    RoleConfirmationView,
    RoleInviteView,
)

urlpatterns = [
    path(
        "roles/<str:role_id>/candidates",
        CandidateListView.as_view(),
        name="role-candidates",
    ),
    path("roles/<str:role_id>/invites", RoleInviteView.as_view(), name="role-invites"),
    path(
        "roles/<str:role_id>/confirmation",
        RoleConfirmationView.as_view(),
        name="role-confirmation",
    ),
    path("invites/<str:invite_id>/accept", InviteAcceptView.as_view(), name="invite-accept"),
    path("invites/<str:invite_id>/decline", InviteDeclineView.as_view(), name="invite-decline"),
    path(
        "invites/<str:invite_id>/withdraw",
        InviteWithdrawView.as_view(),
        name="invite-withdraw",
    ),
    path(
        "invites/<str:invite_id>/rating-eligibility",
        RatingEligibilityView.as_view(),
        name="invite-rating-eligibility",
    ),
    path("invites/<str:invite_id>/ratings", RatingSubmitView.as_view(), name="invite-ratings"),
    path("ratings/<str:rating_id>", RatingDetailView.as_view(), name="rating-detail"),
    path(
        "confirmations/<str:confirmation_id>/cancel",
        ConfirmationCancelView.as_view(),
        name="confirmation-cancel",
    ),
    path(
        "musicians/<str:musician_id>/pending-invites",
        PendingInviteListView.as_view(),
        name="musician-pending-invites",
    ),
    path(
        "musicians/<str:musician_id>/confirmed-gigs",
        ConfirmedGigListView.as_view(),
        name="musician-confirmed-gigs",
    ),
    path("gigs/<str:gig_id>/publish", GigPublishView.as_view(), name="gig-publish"),
    path("gigs/<str:gig_id>/cancel", GigCancelView.as_view(), name="gig-cancel"),
]
