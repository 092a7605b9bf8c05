"""
announcements/tracking.py

Read-state writes. The read-side scopes (unread_by / with_read_by) live on
AnnouncementQuerySet so they compose with the other selection filters.
"""
import logging

from .exceptions import NotFound
from .models import Announcement, AnnouncementView

logger = logging.getLogger(__name__)


def mark_as_read(user_id, announcement_id):
    """
    Record that ``user_id`` read ``announcement_id``; return (view, created).

    get_or_create retries the lookup when the insert hits the unique
    constraint, so racing requests for the same pair both end up with the one row.
    """
    if not Announcement.objects.filter(pk=announcement_id).exists():
        raise NotFound(f"Announcement {announcement_id} does not exist")

    view, created = AnnouncementView.objects.get_or_create(
        user_id=user_id, announcement_id=announcement_id,
    )
    if created:
        logger.info("User %s marked announcement %s as read", user_id, announcement_id)
    else:
        logger.debug("User %s already read announcement %s", user_id, announcement_id)
    return view, created


def read_count(user_id, announcement_id) -> int:
    return AnnouncementView.objects.filter(user_id=user_id, announcement_id=announcement_id).count()
