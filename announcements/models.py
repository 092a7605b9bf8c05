"""
announcements/models.py

Data model for:
- Announcement: a message delivered to users inside an optional time window,
  optionally restricted to users matching a list of conditions.
- AnnouncementView: "user U has read announcement A" (one row per pair).

Notes & design choices
----------------------
- The delivery window is half-open on neither side: an announcement is
  deliverable at T iff (start is null or start < T) and (stop is null or stop > T).
- limit_to_users is a JSONField list of {"field", "value"} objects; an empty
  list (or null) targets everyone. See announcements.eligibility.
- created_at defaults to now but stays writable so imports can backdate rows.
- The (user, announcement) unique constraint makes mark-as-read idempotent even
  under concurrent requests.

Selection scopes
----------------
AnnouncementQuerySet exposes chainable scopes so the service can compose them:

    Announcement.objects.ready_for_delivery().unread_by(user).in_delivery_order()
"""
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Count, F, Q
from django.utils import timezone


class AnnouncementQuerySet(models.QuerySet):
    def ready_for_delivery(self, now=None):
        now = now or timezone.now()
        return self.filter(
            Q(start_delivering_at__lt=now) | Q(start_delivering_at__isnull=True),
            Q(stop_delivering_at__gt=now) | Q(stop_delivering_at__isnull=True),
        )

    def unread_by(self, user):
        return self.exclude(views__user=user)

    def with_read_by(self, user):
        """Annotate each row with ``read``: how many times ``user`` viewed it (0 or 1)."""
        return self.annotate(read=Count("views", filter=Q(views__user=user)))

    def newer_than(self, cutoff):
        return self.filter(
            Q(start_delivering_at__gte=cutoff)
            | Q(start_delivering_at__isnull=True, created_at__gte=cutoff)
        )

    def in_category(self, category):
        if category is None:
            return self
        return self.filter(category=category)

    # Unscheduled (null start) announcements are "always open", so they come first.
    def in_delivery_order(self):
        return self.order_by(F("start_delivering_at").asc(nulls_first=True), "id")

    def in_reverse_delivery_order(self):
        return self.order_by(F("start_delivering_at").desc(nulls_last=True), "-id")


class Announcement(models.Model):
    title = models.CharField(max_length=255, blank=True, help_text="Short heading shown to users.")
    body = models.TextField(help_text="Announcement text. Required.")
    category = models.CharField(
        max_length=80, null=True, blank=True, db_index=True,
        help_text="Optional tag used by ?category= filters (exact match).",
    )
    start_delivering_at = models.DateTimeField(
        null=True, blank=True, db_index=True,
        help_text="Delivery starts after this moment. Empty = always open.",
    )
    stop_delivering_at = models.DateTimeField(
        null=True, blank=True, db_index=True,
        help_text="Delivery stops at this moment. Empty = never expires.",
    )
    limit_to_users = models.JSONField(
        default=list, blank=True, null=True,
        help_text='Conditions every targeted user must meet, e.g. [{"field": "subscription", "value": "weekly"}]',
    )
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    objects = AnnouncementQuerySet.as_manager()

    class Meta:
        ordering = ["id"]

    def clean(self):
        errors = {}
        if not (self.body or "").strip():
            errors["body"] = "This field cannot be blank."

        if (
            self.start_delivering_at
            and self.stop_delivering_at
            and self.stop_delivering_at <= self.start_delivering_at
        ):
            errors["stop_delivering_at"] = "Stop delivering must be after start delivering."

        conditions = self.limit_to_users
        if conditions:
            if not isinstance(conditions, list):
                errors["limit_to_users"] = "limit_to_users must be a list of conditions."
            else:
                for condition in conditions:
                    if (
                        not isinstance(condition, dict)
                        or not isinstance(condition.get("field"), str)
                        or "value" not in condition
                    ):
                        errors["limit_to_users"] = 'Each condition needs a string "field" and a "value".'
                        break

        if errors:
            raise ValidationError(errors)

    def is_deliverable(self, now=None) -> bool:
        now = now or timezone.now()
        return (
            (self.start_delivering_at is None or self.start_delivering_at < now)
            and (self.stop_delivering_at is None or self.stop_delivering_at > now)
        )

    def __str__(self) -> str:
        return self.title or (self.body or "")[:60]


class AnnouncementView(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="announcement_views",
    )
    announcement = models.ForeignKey(Announcement, on_delete=models.CASCADE, related_name="views")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "announcement"], name="uniq_announcement_view"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} read {self.announcement_id}"
