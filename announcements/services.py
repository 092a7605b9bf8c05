"""
announcements/services.py

AnnouncementService: the three public operations behind the API.

- current(user)                         → oldest deliverable, unread, eligible announcement (or None)
- recent_for(user, as_of, category)     → every deliverable, eligible announcement newer than as_of,
                                          newest first, each annotated with ``read`` (0/1)
- mark_as_read(user, announcement_id)   → idempotent read receipt

All three require a user; a missing (or anonymous) user raises InvalidArgument
rather than returning an empty result.
"""
import logging
from typing import List, Optional

from django.utils import timezone

from . import tracking
from .conf import AnnouncementSettings, announcement_settings
from .eligibility import build_snapshot, filter_eligible
from .exceptions import InvalidArgument, NotFound
from .models import Announcement

logger = logging.getLogger(__name__)


class AnnouncementService:
    def __init__(self, config: Optional[AnnouncementSettings] = None, clock=timezone.now):
        self.config = config or announcement_settings()
        self.clock = clock

    # ------------------------------------------------------------------ #
    # Helpers                                                            #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _require_user(user, message):
        if user is None or not getattr(user, "is_authenticated", True):
            raise InvalidArgument(message)

    def resolve_user(self, request):
        """The signed-in user on ``request`` (per CURRENT_USER_ATTRIBUTE), or None."""
        user = getattr(request, self.config.current_user_attribute, None)
        if user is None or not getattr(user, "is_authenticated", False):
            return None
        return user

    def snapshot(self, user):
        return build_snapshot(user, self.config.user_fields, self.config.user_predicates)

    def _eligible(self, announcements, user):
        return filter_eligible(announcements, self.snapshot(user))

    # ------------------------------------------------------------------ #
    # Operations                                                         #
    # ------------------------------------------------------------------ #
    def current(self, user) -> Optional[Announcement]:
        self._require_user(user, "User is required to find current announcement")

        candidates = (
            Announcement.objects
            .ready_for_delivery(self.clock())
            .unread_by(user)
            .in_delivery_order()
        )
        return next(self._eligible(candidates.iterator(), user), None)

    def recent_for(self, user, as_of=None, category=None) -> List[Announcement]:
        self._require_user(user, "User is required to find recent announcements")

        now = self.clock()
        if as_of is None:
            as_of = now - self.config.recent_window

        candidates = (
            Announcement.objects
            .ready_for_delivery(now)
            .newer_than(as_of)
            .in_category(category)
            .with_read_by(user)
            .in_reverse_delivery_order()
        )
        return list(self._eligible(candidates, user))

    def unread_count(self, user) -> int:
        self._require_user(user, "User is required to count unread announcements")

        candidates = Announcement.objects.ready_for_delivery(self.clock()).unread_by(user)
        return sum(1 for _ in self._eligible(candidates, user))

    def mark_as_read(self, user, announcement_id):
        self._require_user(user, "User is required to mark an announcement as read")

        # whole-number ids only; True and 1.9 are not announcement 1
        if isinstance(announcement_id, bool):
            raise NotFound(f"Invalid announcement id: {announcement_id!r}")
        try:
            pk = int(str(announcement_id))
        except (TypeError, ValueError):
            raise NotFound(f"Invalid announcement id: {announcement_id!r}")

        view, _created = tracking.mark_as_read(user.pk, pk)
        return view
