"""
announcements/urls.py

Include this under the global /api/announcements/ prefix.
"""
from django.urls import path

from . import views


app_name = "announcements"

urlpatterns = [
    path("recent/", views.recent, name="recent"),
    path("current/", views.current, name="current"),
    path("mark_as_read/", views.mark_as_read, name="mark-as-read"),
]
