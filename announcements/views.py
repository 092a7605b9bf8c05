"""
announcements/views.py

Endpoints (mounted under /api/announcements/):
- recent/        (GET)  recent announcements for the caller, newest first
- current/       (GET)  the single oldest unread announcement for the caller
- mark_as_read/  (POST) mark ?id / body id as read by the caller

Identity
- The views are AllowAny: a request without a resolvable user gets 422
  with a null body (not 401). The user is read from the request attribute
  named by ANNOUNCEMENTS["CURRENT_USER_ATTRIBUTE"] (default: request.user).

Wire format
- Announcements serialize to {id, title, body} only.
"""
import logging
from collections.abc import Mapping

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .exceptions import InvalidArgument, NotFound
from .filters import RecentAnnouncementFilter
from .models import Announcement
from .serializers import AnnouncementSerializer, MarkAsReadSerializer
from .services import AnnouncementService

# Swagger / OpenAPI
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

logger = logging.getLogger(__name__)


def _unprocessable(reason):
    logger.info("Announcement request rejected: %s", reason)
    return Response(None, status=status.HTTP_422_UNPROCESSABLE_ENTITY)


# ----------------------------------------------------------------------------- #
# Recent                                                                        #
# ----------------------------------------------------------------------------- #
@swagger_auto_schema(
    method="get",
    tags=["Announcements"],
    operation_description=(
        "Announcements delivered recently to the caller (read and unread), newest first.\n\n"
        "Query params:\n"
        "- `category`: exact category match (optional)\n"
        "- `since`: ISO datetime look-back (optional; default two weeks ago)\n\n"
        "Responses:\n"
        "- 200: array of {id, title, body}\n"
        "- 400: `since` is not a valid datetime\n"
        "- 422: no signed-in user (body is null)"
    ),
    manual_parameters=[
        openapi.Parameter("category", openapi.IN_QUERY, type=openapi.TYPE_STRING,
                          description="Only announcements in this category (exact match)"),
        openapi.Parameter("since", openapi.IN_QUERY, type=openapi.TYPE_STRING, format=openapi.FORMAT_DATETIME,
                          description="Only announcements delivered/created at or after this moment"),
    ],
    responses={200: AnnouncementSerializer(many=True), 400: "Bad Request", 422: "Unprocessable Entity"},
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def recent(request):
    service = AnnouncementService()
    user = service.resolve_user(request)
    if user is None:
        return _unprocessable("no current user for recent announcements")

    filterset = RecentAnnouncementFilter(request.query_params, queryset=Announcement.objects.all())
    if not filterset.is_valid():
        return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)

    result = service.recent_for(user, **filterset.recent_kwargs())
    return Response(AnnouncementSerializer(result, many=True).data, status=status.HTTP_200_OK)


# ----------------------------------------------------------------------------- #
# Current                                                                       #
# ----------------------------------------------------------------------------- #
@swagger_auto_schema(
    method="get",
    tags=["Announcements"],
    operation_description=(
        "The oldest deliverable announcement the caller has not read yet, or null.\n\n"
        "Responses:\n"
        "- 200: {id, title, body} or null\n"
        "- 422: no signed-in user (body is null)"
    ),
    responses={200: AnnouncementSerializer(), 422: "Unprocessable Entity"},
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def current(request):
    service = AnnouncementService()
    user = service.resolve_user(request)
    if user is None:
        return _unprocessable("no current user for current announcement")

    announcement = service.current(user)
    data = AnnouncementSerializer(announcement).data if announcement else None
    return Response(data, status=status.HTTP_200_OK)


# ----------------------------------------------------------------------------- #
# Mark as read                                                                  #
# ----------------------------------------------------------------------------- #
@swagger_auto_schema(
    method="post",
    tags=["Announcements"],
    operation_description=(
        "Mark an announcement as read by the caller. Repeating the call is harmless.\n\n"
        "Responses:\n"
        "- 200: \"ok\"\n"
        "- 422: no signed-in user, or unknown/invalid id (body is null)"
    ),
    request_body=MarkAsReadSerializer,
    responses={200: "ok", 422: "Unprocessable Entity"},
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def mark_as_read(request):
    service = AnnouncementService()
    user = service.resolve_user(request)
    if user is None:
        return _unprocessable("no current user to mark announcement as read")

    payload = request.data
    if not isinstance(payload, Mapping) or "id" not in payload:
        payload = request.query_params
    serializer = MarkAsReadSerializer(data=payload)
    if not serializer.is_valid():
        return _unprocessable(f"invalid announcement id: {serializer.errors}")

    try:
        service.mark_as_read(user, serializer.validated_data["id"])
    except (InvalidArgument, NotFound) as exc:
        return _unprocessable(str(exc))
    return Response("ok", status=status.HTTP_200_OK)
