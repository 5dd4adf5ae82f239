from gigs.services.base import parse_actor, parse_id, utc_now
from gigs.services.confirmation_service import ConfirmationService
from gigs.services.gig_service import GigService
from gigs.services.invite_service import InviteService
from gigs.services.matching_service import MatchingService
from gigs.services.publisher import EventPublisher, NullPublisher
from gigs.services.rating_service import RatingService
from gigs.services.schedule_service import ScheduleService

__all__ = [
    "ConfirmationService",
    "EventPublisher",
    "GigService",
    "InviteService",
    "MatchingService",
    "NullPublisher",
    "RatingService",
    "ScheduleService",
    "parse_actor",
    "parse_id",
    "utc_now",
]
