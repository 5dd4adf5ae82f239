"""Great-circle distance and travel-time estimates.

Everything here is pure: no geocoding, no routing service calls.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt

from gigs.domain.value_objects import Coordinates

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinates, b: Coordinates) -> float:
    """Haversine distance between two points, in kilometres."""
    lat1, lon1, lat2, lon2 = map(radians, (a.latitude, a.longitude, b.latitude, b.longitude))
    dlat, dlon = lat2 - lat1, lon2 - lon1
    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * asin(min(1.0, sqrt(h)))


class TravelTimePolicy(ABC):
    """Turns a straight-line distance into an estimated travel time."""

    @abstractmethod
    def estimate_minutes(self, distance_km: float) -> int:
        """Return whole minutes. Must be non-decreasing in distance."""
        ...


@dataclass(frozen=True)
class AverageSpeedTravelPolicy(TravelTimePolicy):
    """Approximates door-to-door driving time from a flat average speed.

    This is a rough estimate over the great-circle distance, not a route
    lookup. Short trips are floored at ``min_minutes`` (parking, walking)
    and long ones capped at ``max_minutes``.
    """

    speed_kmh: float = 30.0
    min_minutes: int = 10
    max_minutes: int = 180

    def __post_init__(self) -> None:
        if self.speed_kmh <= 0:
            raise ValueError("Average speed must be positive")
        if self.min_minutes > self.max_minutes:
            raise ValueError("min_minutes cannot exceed max_minutes")

    def estimate_minutes(self, distance_km: float) -> int:
        if distance_km < 0:
            raise ValueError("Distance cannot be negative")
        minutes = round(distance_km / self.speed_kmh * 60)
        return max(self.min_minutes, min(self.max_minutes, minutes))


DEFAULT_TRAVEL_POLICY: TravelTimePolicy = AverageSpeedTravelPolicy()


def estimate_travel_minutes(
    distance_km: float, policy: TravelTimePolicy = DEFAULT_TRAVEL_POLICY
) -> int:
    return policy.estimate_minutes(distance_km)
