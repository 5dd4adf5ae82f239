"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from gigs.domain.cancellation_policy import CancellationPolicy
from gigs.services import (
    ConfirmationService,
    GigService,
    InviteService,
    MatchingService,
    RatingService,
    ScheduleService,
)
from tests.builders import NOW
from tests.fakes import FakeClock, InMemoryBookingStore, RecordingPublisher


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def confirmations(store, publisher, clock) -> ConfirmationService:
    return ConfirmationService(
        store, publisher, clock=clock, cancellation_policy=CancellationPolicy()
    )


@pytest.fixture
def invites(store, publisher, clock, confirmations) -> InviteService:
    return InviteService(store, publisher, clock=clock, confirmations=confirmations)


@pytest.fixture
def matching(store, publisher, clock) -> MatchingService:
    return MatchingService(store, publisher, clock=clock)


@pytest.fixture
def schedule(store, publisher, clock) -> ScheduleService:
    return ScheduleService(store, publisher, clock=clock)


@pytest.fixture
def ratings(store, publisher, clock) -> RatingService:
    return RatingService(store, publisher, clock=clock)


@pytest.fixture
def gig_service(store, publisher, clock) -> GigService:
    return GigService(store, publisher, clock=clock)
