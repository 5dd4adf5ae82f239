"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class _UUIDIdentifier:
    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class GigId(_UUIDIdentifier):
    """Unique identifier for a Gig."""


@dataclass(frozen=True)
class RoleId(_UUIDIdentifier):
    """Unique identifier for a GigRole."""


@dataclass(frozen=True)
class InviteId(_UUIDIdentifier):
    """Unique identifier for an Invite."""


@dataclass(frozen=True)
class ConfirmationId(_UUIDIdentifier):
    """Unique identifier for a Confirmation."""


@dataclass(frozen=True)
class RatingId(_UUIDIdentifier):
    """Unique identifier for a Rating."""


@dataclass(frozen=True)
class UserId(_UUIDIdentifier):
    """Identifier of an authenticated person (organizer or musician)."""


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Number of musicians a role needs. At least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("Longitude must be between -180 and 180")

    @classmethod
    def from_optional(cls, latitude: float | None, longitude: float | None) -> Self | None:
        """Build coordinates only when both parts are present."""
        if latitude is None or longitude is None:
            return None
        return cls(latitude=float(latitude), longitude=float(longitude))


@dataclass(frozen=True)
class SearchRadius:
    """How far (km) a musician is willing to travel."""

    km: float

    def __post_init__(self) -> None:
        if self.km <= 0:
            raise ValueError("Search radius must be positive")


@dataclass(frozen=True)
class Score:
    """Rating score on a 1 to 5 scale."""

    value: int

    MIN = 1
    MAX = 5

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Score must be an integer")
        if not self.MIN <= self.value <= self.MAX:
            raise ValueError(f"Score must be between {self.MIN} and {self.MAX}")
