"""
models.py — User model for the Noticeboard backend

Purpose
===============================================================================
The identity collaborator's user. Authentication stays stock Django; this model
only adds the attributes announcements are commonly targeted on.

Targeting
- Every concrete field (except the password hash) is visible to
  limit_to_users conditions, e.g. {"field": "subscription", "value": "weekly"}.
- Predicates listed in ANNOUNCEMENTS["USER_PREDICATES"] are visible too; the
  default allow-list exposes is_free.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    subscription = models.CharField(
        max_length=40, blank=True, default="",
        help_text="Subscription plan (e.g. weekly, monthly). Empty = free tier.",
    )

    @property
    def is_free(self) -> bool:
        return not self.subscription
