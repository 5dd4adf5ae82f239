"""Wiring of services for the HTTP layer."""

from dataclasses import dataclass

from gigs.conf import BookingPolicy, load_policy
from gigs.notifications import DjangoSignalPublisher
from gigs.services import (
    ConfirmationService,
    GigService,
    InviteService,
    MatchingService,
    RatingService,
    ScheduleService,
)
from gigs.stores.django_store import DjangoBookingStore


@dataclass(frozen=True)
class Services:
    matching: MatchingService
    invites: InviteService
    confirmations: ConfirmationService
    schedule: ScheduleService
    ratings: RatingService
    gigs: GigService
    policy: BookingPolicy


def build_services(policy: BookingPolicy | None = None) -> Services:
    """Build the service graph over the Django store.

    Settings are read on every call so overrides in tests take effect.
    """
    policy = policy or load_policy()
    store = DjangoBookingStore(default_search_radius_km=policy.default_search_radius_km)
    publisher = DjangoSignalPublisher()
    confirmations = ConfirmationService(
        store, publisher, cancellation_policy=policy.cancellation
    )
    return Services(
        matching=MatchingService(store, publisher),
        invites=InviteService(
            store,
            publisher,
            confirmations=confirmations,
            auto_confirm_single_candidate=policy.auto_confirm_single_candidate,
        ),
        confirmations=confirmations,
        schedule=ScheduleService(store, publisher),
        ratings=RatingService(store, publisher),
        gigs=GigService(store, publisher),
        policy=policy,
    )
