"""Suspension rules for musicians who back out of confirmed gigs.

Two rules lead to the same outcome, a booking suspension starting at the
moment of cancellation:

- late cancellation: less than ``late_cutoff`` before the gig starts
  (a gig that already started counts as late);
- frequent cancellations: ``frequent_threshold`` cancellations, this one
  included, within the rolling ``frequent_window``.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from gigs.domain.models import SuspensionReason, SuspensionRecord
from gigs.domain.value_objects import UserId


@dataclass(frozen=True)
class CancellationPolicy:
    late_cutoff: timedelta = timedelta(hours=24)
    suspension_length: timedelta = timedelta(days=7)
    frequent_threshold: int | None = 3
    frequent_window: timedelta = timedelta(days=30)

    def __post_init__(self) -> None:
        if self.late_cutoff < timedelta(0):
            raise ValueError("late_cutoff cannot be negative")
        if self.suspension_length <= timedelta(0):
            raise ValueError("suspension_length must be positive")
        if self.frequent_threshold is not None and self.frequent_threshold < 1:
            raise ValueError("frequent_threshold must be at least 1")
        if self.frequent_window <= timedelta(0):
            raise ValueError("frequent_window must be positive")

    def is_late(self, gig_starts_at: datetime, cancelled_at: datetime) -> bool:
        return gig_starts_at - cancelled_at < self.late_cutoff

    def evaluate(
        self,
        gig_starts_at: datetime,
        cancelled_at: datetime,
        musician_id: UserId,
        prior_cancellations: int = 0,
    ) -> SuspensionRecord | None:
        """Return the suspension this cancellation earns, if any.

        ``prior_cancellations`` counts the musician's earlier cancellations
        inside ``frequent_window``, not including this one.
        """
        if self.is_late(gig_starts_at, cancelled_at):
            reason = SuspensionReason.LATE_CANCELLATION
        elif (
            self.frequent_threshold is not None
            and prior_cancellations + 1 >= self.frequent_threshold
        ):
            reason = SuspensionReason.FREQUENT_CANCELLATIONS
        else:
            return None

        return SuspensionRecord(
            musician_id=musician_id,
            starts_at=cancelled_at,
            ends_at=cancelled_at + self.suspension_length,
            reason=reason,
        )
