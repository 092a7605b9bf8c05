"""
announcements/conf.py

Typed view of ``settings.ANNOUNCEMENTS``.

Recognized keys
- USER_FIELDS:            user attributes copied into the eligibility snapshot
                          (None = every concrete field except the password hash)
- USER_PREDICATES:        extra zero-arg methods/properties conditions may use
- RECENT_WINDOW:          default look-back for recent listings (timedelta)
- CURRENT_USER_ATTRIBUTE: request attribute holding the resolved user
"""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Tuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class AnnouncementSettings:
    user_fields: Optional[Tuple[str, ...]] = None
    user_predicates: Tuple[str, ...] = field(default_factory=tuple)
    recent_window: timedelta = timedelta(weeks=2)
    current_user_attribute: str = "user"


_KEYS = {
    "USER_FIELDS": "user_fields",
    "USER_PREDICATES": "user_predicates",
    "RECENT_WINDOW": "recent_window",
    "CURRENT_USER_ATTRIBUTE": "current_user_attribute",
}


def announcement_settings() -> AnnouncementSettings:
    """Build AnnouncementSettings from the ANNOUNCEMENTS dict (read on every call)."""
    raw = getattr(settings, "ANNOUNCEMENTS", None) or {}

    unknown = set(raw) - set(_KEYS)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown ANNOUNCEMENTS setting(s): {', '.join(sorted(unknown))}"
        )

    options = {_KEYS[key]: value for key, value in raw.items()}

    if options.get("user_fields") is not None:
        options["user_fields"] = tuple(options["user_fields"])
    if "user_predicates" in options:
        options["user_predicates"] = tuple(options["user_predicates"] or ())
    if "recent_window" in options and not isinstance(options["recent_window"], timedelta):
        raise ImproperlyConfigured("ANNOUNCEMENTS['RECENT_WINDOW'] must be a timedelta")

    return AnnouncementSettings(**options)
