"""
announcements/apps.py

AppConfig for the Announcements app.

Why this app exists
-------------------
Delivers time-windowed, optionally targeted announcements and remembers which
users have read which announcement:

1) /api/announcements/recent/        — recent announcements (read + unread)
2) /api/announcements/current/       — the next unread announcement
3) /api/announcements/mark_as_read/  — read receipts

Authoring happens elsewhere (Django admin or the seed_announcements command);
this app only reads announcements and writes read receipts.
"""
from django.apps import AppConfig


class AnnouncementsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "announcements"
    verbose_name = "Announcements"
