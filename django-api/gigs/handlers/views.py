"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details

The acting user comes from the ``X-Actor-Id`` header.
"""

import logging

from django.core.cache import cache
from rest_framework import status
from rest_framework.exceptions import ParseError, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from gigs.domain import UserId
from gigs.domain.errors import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
    PolicyViolationError,
)
from gigs.handlers import serializers as s
from gigs.handlers.deps import Services, build_services
from gigs.services import parse_id
from gigs.signals import confirmed_gigs_key, pending_invites_key

logger = logging.getLogger(__name__)

ACTOR_HEADER = "X-Actor-Id"

_STATUS_BY_CATEGORY = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (PolicyViolationError, status.HTTP_403_FORBIDDEN),
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
)


def error_response(code: str, message: str, http_status: int, **details) -> Response:
    return Response({"error": {"code": code, "message": message, **details}}, status=http_status)


def domain_error_response(exc: DomainError) -> Response:
    for category, http_status in _STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return error_response(exc.code.value, exc.message, http_status, **exc.details)
    return error_response(exc.code.value, exc.message, status.HTTP_400_BAD_REQUEST)


class DomainAPIView(APIView):
    """Base view: service wiring, actor lookup and error mapping."""

    def get_services(self) -> Services:
        return build_services()

    def actor_id(self, request: Request) -> str | None:
        return request.headers.get(ACTOR_HEADER)

    def validated(self, serializer_class, request: Request) -> dict:
        serializer = serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            logger.info(
                "Request refused",
                extra={"code": exc.code.value, "path": self.request.path},
            )
            return domain_error_response(exc)
        if isinstance(exc, ValidationError):
            return error_response(
                "INVALID_REQUEST",
                "Request body is invalid",
                status.HTTP_400_BAD_REQUEST,
                fields=exc.detail,
            )
        if isinstance(exc, ParseError):
            return error_response(
                "INVALID_REQUEST", "Malformed request body", status.HTTP_400_BAD_REQUEST
            )
        return super().handle_exception(exc)


class CandidateListView(DomainAPIView):
    """Handler for GET /api/roles/{role_id}/candidates"""

    def get(self, request: Request, role_id: str) -> Response:
        candidates = self.get_services().matching.list_candidate_musicians(role_id)
        return Response(s.CandidateSerializer(candidates, many=True).data)


class RoleInviteView(DomainAPIView):
    """Handler for POST /api/roles/{role_id}/invites

    With ``musician_id`` in the body one musician is invited; without it
    every eligible candidate is.
    """

    def post(self, request: Request, role_id: str) -> Response:
        body = self.validated(s.InviteRequestSerializer, request)
        matching = self.get_services().matching
        actor = self.actor_id(request)
        if "musician_id" in body:
            invite = matching.invite_musician(role_id, body["musician_id"], actor)
            return Response(s.InviteSerializer(invite).data, status=status.HTTP_201_CREATED)
        invites = matching.dispatch_invites(role_id, actor)
        return Response(
            s.InviteSerializer(invites, many=True).data, status=status.HTTP_201_CREATED
        )


class InviteAcceptView(DomainAPIView):
    """Handler for POST /api/invites/{invite_id}/accept"""

    def post(self, request: Request, invite_id: str) -> Response:
        invite = self.get_services().invites.accept_invite(invite_id, self.actor_id(request))
        return Response(s.InviteSerializer(invite).data)


class InviteDeclineView(DomainAPIView):
    """Handler for POST /api/invites/{invite_id}/decline"""

    def post(self, request: Request, invite_id: str) -> Response:
        body = self.validated(s.DeclineRequestSerializer, request)
        invite = self.get_services().invites.decline_invite(
            invite_id, self.actor_id(request), body.get("reason")
        )
        return Response(s.InviteSerializer(invite).data)


class InviteWithdrawView(DomainAPIView):
    """Handler for POST /api/invites/{invite_id}/withdraw"""

    def post(self, request: Request, invite_id: str) -> Response:
        invite = self.get_services().invites.withdraw_invite(invite_id, self.actor_id(request))
        return Response(s.InviteSerializer(invite).data)


class RoleConfirmationView(DomainAPIView):
    """Handler for POST /api/roles/{role_id}/confirmation"""

    def post(self, request: Request, role_id: str) -> Response:
        body = self.validated(s.ConfirmRequestSerializer, request)
        confirmation = self.get_services().confirmations.confirm_musician(
            role_id, body["invite_id"], self.actor_id(request)
        )
        return Response(
            s.ConfirmationSerializer(confirmation).data, status=status.HTTP_201_CREATED
        )


class ConfirmationCancelView(DomainAPIView):
    """Handler for POST /api/confirmations/{confirmation_id}/cancel"""

    def post(self, request: Request, confirmation_id: str) -> Response:
        outcome = self.get_services().confirmations.cancel_confirmation(
            confirmation_id, self.actor_id(request)
        )
        return Response(s.CancellationOutcomeSerializer(outcome).data)


class CachedMusicianView(DomainAPIView):
    """Musician read view cached per musician.

    Entries are dropped by the model signals in gigs.signals.
    """

    cache_key = None
    serializer_class = None

    def load(self, services: Services, musician_id: str):
        raise NotImplementedError

    def get(self, request: Request, musician_id: str) -> Response:
        services = self.get_services()
        # canonical UUID text, the form the invalidation signals use
        musician = str(parse_id(UserId, musician_id, "musician_id"))
        key = self.cache_key(musician)
        data = cache.get(key)
        if data is None:
            data = self.serializer_class(self.load(services, musician), many=True).data
            cache.set(key, data, services.policy.read_cache_seconds)
        return Response(data)


class PendingInviteListView(CachedMusicianView):
    """Handler for GET /api/musicians/{musician_id}/pending-invites"""

    cache_key = staticmethod(pending_invites_key)
    serializer_class = s.PendingInviteSerializer

    def load(self, services: Services, musician_id: str):
        return services.schedule.list_pending_invites(musician_id)


class ConfirmedGigListView(CachedMusicianView):
    """Handler for GET /api/musicians/{musician_id}/confirmed-gigs"""

    cache_key = staticmethod(confirmed_gigs_key)
    serializer_class = s.ConfirmedGigSerializer

    def load(self, services: Services, musician_id: str):
        return services.schedule.list_confirmed_gigs(musician_id)


class RatingEligibilityView(DomainAPIView):
    """Handler for GET /api/invites/{invite_id}/rating-eligibility"""

    def get(self, request: Request, invite_id: str) -> Response:
        eligibility = self.get_services().ratings.get_rating_eligibility(
            invite_id, self.actor_id(request)
        )
        return Response(s.RatingEligibilitySerializer(eligibility).data)


class RatingSubmitView(DomainAPIView):
    """Handler for POST /api/invites/{invite_id}/ratings"""

    def post(self, request: Request, invite_id: str) -> Response:
        body = self.validated(s.RatingRequestSerializer, request)
        rating = self.get_services().ratings.submit_rating(
            invite_id,
            self.actor_id(request),
            body["score"],
            body["predefined_comments"],
            body["comment"],
        )
        return Response(s.RatingSerializer(rating).data, status=status.HTTP_201_CREATED)


class RatingDetailView(DomainAPIView):
    """Handler for PUT /api/ratings/{rating_id}"""

    def put(self, request: Request, rating_id: str) -> Response:
        body = self.validated(s.RatingRequestSerializer, request)
        rating = self.get_services().ratings.revise_rating(
            rating_id,
            self.actor_id(request),
            body["score"],
            body["predefined_comments"],
            body["comment"],
        )
        return Response(s.RatingSerializer(rating).data)


class GigPublishView(DomainAPIView):
    """Handler for POST /api/gigs/{gig_id}/publish"""

    def post(self, request: Request, gig_id: str) -> Response:
        gig = self.get_services().gigs.publish_gig(gig_id, self.actor_id(request))
        return Response(s.GigSerializer(gig).data)


class GigCancelView(DomainAPIView):
    """Handler for POST /api/gigs/{gig_id}/cancel"""

    def post(self, request: Request, gig_id: str) -> Response:
        gig = self.get_services().gigs.cancel_gig(gig_id, self.actor_id(request))
        return Response(s.GigSerializer(gig).data)
