"""Booking policy loaded from the ``GIG_BOOKING`` settings dict."""

from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings

from gigs.domain.cancellation_policy import CancellationPolicy

DEFAULTS = {
    "AUTO_CONFIRM_SINGLE_CANDIDATE": False,
    "LATE_CANCELLATION_HOURS": 24,
    "SUSPENSION_DAYS": 7,
    "FREQUENT_CANCELLATION_THRESHOLD": 3,
    "FREQUENT_CANCELLATION_WINDOW_DAYS": 30,
    "DEFAULT_SEARCH_RADIUS_KM": 50.0,
    "READ_CACHE_SECONDS": 60,
}


@dataclass(frozen=True)
class BookingPolicy:
    auto_confirm_single_candidate: bool
    cancellation: CancellationPolicy
    default_search_radius_km: float
    read_cache_seconds: int


def _threshold(raw: object) -> int | None:
    if raw is None or raw == "":
        return None
    return int(raw)


def load_policy() -> BookingPolicy:
    """Read ``settings.GIG_BOOKING`` over the defaults.

    Missing keys fall back to ``DEFAULTS``. An empty or ``None``
    ``FREQUENT_CANCELLATION_THRESHOLD`` turns the frequency rule off.
    """
    values = {**DEFAULTS, **getattr(settings, "GIG_BOOKING", {})}
    auto_confirm = values["AUTO_CONFIRM_SINGLE_CANDIDATE"]
    if isinstance(auto_confirm, str):
        auto_confirm = auto_confirm.lower() == "true"
    return BookingPolicy(
        auto_confirm_single_candidate=bool(auto_confirm),
        cancellation=CancellationPolicy(
            late_cutoff=timedelta(hours=float(values["LATE_CANCELLATION_HOURS"])),
            suspension_length=timedelta(days=float(values["SUSPENSION_DAYS"])),
            frequent_threshold=_threshold(values["FREQUENT_CANCELLATION_THRESHOLD"]),
            frequent_window=timedelta(days=float(values["FREQUENT_CANCELLATION_WINDOW_DAYS"])),
        ),
        default_search_radius_km=float(values["DEFAULT_SEARCH_RADIUS_KM"]),
        read_cache_seconds=int(values["READ_CACHE_SECONDS"]),
    )
