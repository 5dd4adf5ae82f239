"""Candidate selection for a gig role.

Pure selection over a snapshot of profiles: no store access, no side effects.
"""

from collections.abc import Iterable

from gigs.domain.geo import DEFAULT_TRAVEL_POLICY, TravelTimePolicy, distance_km
from gigs.domain.models import Candidate, GigRole, MusicianProfile
from gigs.domain.value_objects import Coordinates, UserId


def normalize_instrument(name: str) -> str:
    return name.strip().casefold()


def plays(profile: MusicianProfile, instrument: str) -> bool:
    wanted = normalize_instrument(instrument)
    return any(normalize_instrument(played) == wanted for played in profile.instruments)


class CandidateMatcher:
    """Filters and orders musicians for one role.

    A profile is excluded on distance only when both the gig and the
    musician have coordinates and the distance exceeds the musician's own
    search radius. Missing coordinates on either side keep the profile in
    the list (fail-open), sorted after every profile with a known distance.
    """

    def __init__(self, travel_policy: TravelTimePolicy = DEFAULT_TRAVEL_POLICY) -> None:
        self._travel_policy = travel_policy

    def match(
        self,
        role: GigRole,
        gig_location: Coordinates | None,
        profiles: Iterable[MusicianProfile],
        exclude: Iterable[UserId] = (),
    ) -> list[Candidate]:
        excluded = set(exclude)
        candidates: list[Candidate] = []

        for profile in profiles:
            if profile.musician_id in excluded:
                continue
            if not plays(profile, role.instrument):
                continue

            if gig_location is None or profile.home is None:
                candidates.append(Candidate(profile, None, None))
                continue

            km = distance_km(profile.home, gig_location)
            if km > profile.search_radius.km:
                continue
            candidates.append(
                Candidate(profile, km, self._travel_policy.estimate_minutes(km))
            )

        # sort is stable: profiles without distance keep their input order
        candidates.sort(key=lambda c: (c.distance_km is None, c.distance_km or 0.0))
        return candidates
