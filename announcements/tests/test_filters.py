from datetime import timedelta

import pytest
from django.utils import timezone

from announcements.filters import RecentAnnouncementFilter
from announcements.models import Announcement


@pytest.mark.django_db
def test_filter_qs_applies_scopes():
    en = Announcement.objects.create(body="en", category="en")
    Announcement.objects.create(body="fr", category="fr")
    Announcement.objects.create(body="old en", category="en", created_at=timezone.now() - timedelta(weeks=3))

    since = (timezone.now() - timedelta(weeks=1)).isoformat()
    f = RecentAnnouncementFilter({"category": "en", "since": since}, queryset=Announcement.objects.all())

    assert f.is_valid()
    assert list(f.qs) == [en]


def test_recent_kwargs_blank_category_means_no_filter():
    f = RecentAnnouncementFilter({"category": ""}, queryset=Announcement.objects.none())

    assert f.is_valid()
    assert f.recent_kwargs() == {"category": None, "as_of": None}


def test_invalid_since_is_reported():
    f = RecentAnnouncementFilter({"since": "not-a-date"}, queryset=Announcement.objects.none())

    assert not f.is_valid()
    assert "since" in f.errors
