"""
announcements/filters.py

Query-parameter validation for GET /recent/.

The FilterSet's form cleans ``category`` and ``since``; the cleaned values are
handed to AnnouncementService.recent_for, which applies them together with
the delivery-window and eligibility rules.
"""
from django_filters import rest_framework as dj_filters

from .models import Announcement


class RecentAnnouncementFilter(dj_filters.FilterSet):
    category = dj_filters.CharFilter(method="filter_category")
    since = dj_filters.IsoDateTimeFilter(method="filter_since")

    class Meta:
        model = Announcement
        fields = ["category", "since"]

    def filter_category(self, queryset, name, value):
        return queryset.in_category(value)

    def filter_since(self, queryset, name, value):
        return queryset.newer_than(value)

    def recent_kwargs(self):
        """Cleaned arguments for recent_for; call after is_valid()."""
        data = self.form.cleaned_data
        return {
            "category": data.get("category") or None,
            "as_of": data.get("since"),
        }
