"""Unit tests for rating eligibility."""

import uuid
from dataclasses import replace
from datetime import timedelta

import pytest

from gigs.domain import InviteStatus, Party, Rating, RatingId, Score, UserId
from gigs.domain.errors import (
    ErrorCode,
    NotParticipantError,
    RatingExistsError,
    RatingNotOpenError,
)
from gigs.domain.rating_gate import RatingGate, is_completed
from tests.builders import NOW, make_gig, make_invite, make_role


@pytest.fixture
def finished():
    gig = make_gig(starts_at=NOW - timedelta(days=1))
    invite = make_invite(gig, make_role(gig), status=InviteStatus.CONFIRMED)
    return gig, invite


def rating_for(invite, side: Party) -> Rating:
    return Rating(
        id=RatingId(uuid.uuid4()),
        invite_id=invite.id,
        rater_role=side,
        rater_id=invite.organizer_id,
        rated_id=invite.musician_id,
        score=Score(4),
        predefined_comments=(),
        comment="",
        created_at=NOW,
        updated_at=NOW,
    )


class TestCompletion:
    def test_completed_once_started(self):
        """A gig counts as happened from its start time."""
        gig = make_gig(starts_at=NOW)
        assert is_completed(gig, NOW)
        assert not is_completed(gig, NOW - timedelta(seconds=1))


class TestRatingGate:
    def test_organizer_rates_musician(self, finished):
        """The organizer's rating targets the musician."""
        gig, invite = finished
        result = RatingGate.check(gig, invite, invite.organizer_id, None, NOW)
        assert result.allowed
        assert result.rater_role is Party.ORGANIZER
        assert result.rated_id == invite.musician_id

    def test_musician_rates_organizer(self, finished):
        """The musician's rating targets the organizer."""
        gig, invite = finished
        result = RatingGate.check(gig, invite, invite.musician_id, None, NOW)
        assert result.rated_id == invite.organizer_id

    def test_stranger_refused(self, finished):
        """Only the two participants can rate."""
        gig, invite = finished
        with pytest.raises(NotParticipantError):
            RatingGate.check(gig, invite, UserId(uuid.uuid4()), None, NOW)

    @pytest.mark.parametrize(
        "status", [InviteStatus.ACCEPTED, InviteStatus.CANCELLED, InviteStatus.DECLINED]
    )
    def test_unconfirmed_invite_refused(self, finished, status):
        """No booking, no rating."""
        gig, invite = finished
        with pytest.raises(NotParticipantError):
            RatingGate.check(gig, replace(invite, status=status), invite.musician_id, None, NOW)

    def test_before_gig_refused(self):
        """Ratings open when the gig starts."""
        gig = make_gig(starts_at=NOW + timedelta(hours=1))
        invite = make_invite(gig, make_role(gig), status=InviteStatus.CONFIRMED)
        with pytest.raises(RatingNotOpenError):
            RatingGate.check(gig, invite, invite.organizer_id, None, NOW)

    def test_second_rating_refused(self, finished):
        """Each side rates once."""
        gig, invite = finished
        existing = rating_for(invite, Party.ORGANIZER)
        with pytest.raises(RatingExistsError):
            RatingGate.check(gig, invite, invite.organizer_id, existing, NOW)

    def test_can_rate_reports_refusal(self, finished):
        """can_rate returns the refusal code instead of raising."""
        gig, invite = finished
        existing = rating_for(invite, Party.ORGANIZER)
        result = RatingGate.can_rate(gig, invite, invite.organizer_id, existing, NOW)
        assert not result.allowed
        assert result.refusal is ErrorCode.RATING_EXISTS
        assert result.rater_role is Party.ORGANIZER
