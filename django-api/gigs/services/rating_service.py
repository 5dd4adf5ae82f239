"""Post-gig ratings between organizer and musician."""

import logging
import uuid
from collections.abc import Iterable
from dataclasses import replace

from gigs.domain import InviteId, Rating, RatingId, RatingTag, Score
from gigs.domain.errors import (
    InvalidRatingTagError,
    InvalidScoreError,
    NotRatingAuthorError,
    RatingNotFoundError,
)
from gigs.domain.rating_gate import RatingEligibility, RatingGate
from gigs.services.base import BookingServiceBase, parse_actor, parse_id

logger = logging.getLogger(__name__)


def _score(value: object) -> Score:
    try:
        return Score(value)
    except ValueError as exc:
        raise InvalidScoreError() from exc


def _tags(predefined_comments: Iterable[str] | None) -> tuple[str, ...]:
    tags = []
    for raw in predefined_comments or ():
        tag = (raw or "").strip()
        if not tag:
            continue
        try:
            tags.append(RatingTag(tag).value)
        except ValueError as exc:
            raise InvalidRatingTagError(tag) from exc
    return tuple(dict.fromkeys(tags))


class RatingService(BookingServiceBase):
    def get_rating_eligibility(self, invite_id: str, rater_id: str) -> RatingEligibility:
        """Report whether ``rater_id`` may rate the other side of this invite."""
        rater = parse_actor(rater_id)
        invite = self._get_invite(parse_id(InviteId, invite_id, "invite_id"))
        gig = self._get_gig(invite.gig_id)
        side = invite.party_of(rater)
        existing = self._store.find_rating(invite.id, side) if side is not None else None
        return RatingGate.can_rate(gig, invite, rater, existing, self._clock())

    def submit_rating(
        self,
        invite_id: str,
        rater_id: str,
        score: int,
        predefined_comments: Iterable[str] | None = (),
        comment: str = "",
    ) -> Rating:
        """Rate the other participant of a completed, confirmed engagement.

        Raises:
            InvalidScoreError: If the score is not an integer from 1 to 5.
            InvalidRatingTagError: If a predefined comment is not a known tag.
            NotParticipantError: If the rater was not part of the booking.
            RatingNotOpenError: If the gig has not started yet.
            RatingExistsError: If the rater already rated this engagement.
        """
        rater = parse_actor(rater_id)
        value = _score(score)
        tags = _tags(predefined_comments)
        invite = self._get_invite(parse_id(InviteId, invite_id, "invite_id"))
        gig = self._get_gig(invite.gig_id)
        now = self._clock()

        side = invite.party_of(rater)
        existing = self._store.find_rating(invite.id, side) if side is not None else None
        eligibility = RatingGate.check(gig, invite, rater, existing, now)

        rating = self._store.add_rating(
            Rating(
                id=RatingId(uuid.uuid4()),
                invite_id=invite.id,
                rater_role=eligibility.rater_role,
                rater_id=rater,
                rated_id=eligibility.rated_id,
                score=value,
                predefined_comments=tags,
                comment=(comment or "").strip(),
                created_at=now,
                updated_at=now,
            )
        )
        logger.info(
            "Rating submitted",
            extra={
                "invite_id": str(invite.id),
                "rater_role": rating.rater_role.value,
                "score": value.value,
            },
        )
        return rating

    def revise_rating(
        self,
        rating_id: str,
        rater_id: str,
        score: int,
        predefined_comments: Iterable[str] | None = (),
        comment: str = "",
    ) -> Rating:
        """Let the author change score and comments of their own rating."""
        rater = parse_actor(rater_id)
        value = _score(score)
        tags = _tags(predefined_comments)
        rid = parse_id(RatingId, rating_id, "rating_id")
        rating = self._store.get_rating(rid)
        if rating is None:
            raise RatingNotFoundError(str(rid))
        if rating.rater_id != rater:
            raise NotRatingAuthorError()

        revised = self._store.save_rating(
            replace(
                rating,
                score=value,
                predefined_comments=tags,
                comment=(comment or "").strip(),
                updated_at=self._clock(),
            )
        )
        logger.info("Rating revised", extra={"rating_id": str(rid)})
        return revised
