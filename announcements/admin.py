"""
announcements/admin.py

Admin for quick manual curation of announcements and inspection of read receipts.
"""
from django.contrib import admin
from django.db.models import Count

from .models import Announcement, AnnouncementView


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "start_delivering_at", "stop_delivering_at", "deliverable", "read_count", "created_at")
    list_filter = ("category", "start_delivering_at", "stop_delivering_at")
    search_fields = ("title", "body", "category")
    ordering = ("-created_at",)

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_read_count=Count("views"))

    @admin.display(boolean=True, description="Deliverable now")
    def deliverable(self, obj):
        return obj.is_deliverable()

    @admin.display(description="Reads", ordering="_read_count")
    def read_count(self, obj):
        return obj._read_count


@admin.register(AnnouncementView)
class AnnouncementViewAdmin(admin.ModelAdmin):
    list_display = ("announcement", "user", "created_at")
    list_filter = ("created_at",)
    search_fields = ("announcement__title", "user__username", "user__email")
    raw_id_fields = ("announcement", "user")
