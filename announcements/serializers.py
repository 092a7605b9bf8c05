"""
announcements/serializers.py

DRF serializers that define the public JSON shapes returned to the frontend.
Only id/title/body go over the wire; delivery windows, targeting and read
counts stay server-side.
"""
from rest_framework import serializers
from .models import Announcement


class AnnouncementSerializer(serializers.ModelSerializer):
    class Meta:
        model = Announcement
        fields = ["id", "title", "body"]
        read_only_fields = fields


class MarkAsReadSerializer(serializers.Serializer):
    """Request body for POST mark_as_read/. ``id`` may also come from the query string."""
    id = serializers.IntegerField(help_text="Announcement ID to mark as read.")
