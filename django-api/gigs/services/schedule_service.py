"""Musician-facing read models."""

from dataclasses import replace

from gigs.domain import ConfirmedGig, PendingInvite, UserId
from gigs.domain.geo import DEFAULT_TRAVEL_POLICY, TravelTimePolicy, distance_km
from gigs.services.base import BookingServiceBase, parse_id


class ScheduleService(BookingServiceBase):
    def __init__(
        self, *args, travel_policy: TravelTimePolicy = DEFAULT_TRAVEL_POLICY, **kwargs
    ) -> None:
        super().__init__(*args, **kwargs)
        self._travel_policy = travel_policy

    def list_pending_invites(self, musician_id: str) -> list[PendingInvite]:
        """Open invites for gigs that are published and have not started.

        Distance and travel time are filled in when both the musician and
        the gig have coordinates.
        """
        musician = parse_id(UserId, musician_id, "musician_id")
        pending = self._store.list_pending_invites(musician, self._clock())
        profile = self._store.get_musician_profile(musician)
        if profile is None or profile.home is None:
            return pending

        enriched = []
        for item in pending:
            if item.gig_coordinates is None:
                enriched.append(item)
                continue
            km = distance_km(profile.home, item.gig_coordinates)
            enriched.append(
                replace(
                    item,
                    distance_km=km,
                    estimated_travel_minutes=self._travel_policy.estimate_minutes(km),
                )
            )
        return enriched

    def list_confirmed_gigs(self, musician_id: str) -> list[ConfirmedGig]:
        """Booked gigs, earliest first."""
        return self._store.list_confirmed_gigs(parse_id(UserId, musician_id, "musician_id"))
