"""
announcements/context_processors.py

Exposes ``current_announcement`` to server-rendered templates (admin pages,
emails rendered with a request). Anonymous visitors get None.
"""
from .services import AnnouncementService


def current_announcement(request):
    service = AnnouncementService()
    user = service.resolve_user(request)
    if user is None:
        return {"current_announcement": None}
    return {"current_announcement": service.current(user)}
