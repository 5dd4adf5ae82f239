from gigs.handlers.views import (
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

__all__ = [
    "CandidateListView",
    "ConfirmationCancelView",
    "ConfirmedGigListView",
    "GigCancelView",
    "GigPublishView",
    "InviteAcceptView",
    "InviteDeclineView",
    "InviteWithdrawView",
    "PendingInviteListView",
    "RatingDetailView",
    "RatingEligibilityView",
    "RatingSubmitView",
    "RoleConfirmationView",
    "RoleInviteView",
]
