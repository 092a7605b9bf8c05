"""
Selection scopes on AnnouncementQuerySet and model validation.
"""
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.utils import timezone

from announcements.models import Announcement, AnnouncementView


pytestmark = pytest.mark.django_db

User = get_user_model()


def make(**fields):
    fields.setdefault("body", "Body")
    return Announcement.objects.create(**fields)


@pytest.fixture
def now():
    return timezone.now()


def test_ready_for_delivery(now):
    due = make(start_delivering_at=now - timedelta(minutes=1))
    make(start_delivering_at=now + timedelta(minutes=1))
    make(stop_delivering_at=now - timedelta(minutes=1))
    not_expired = make(stop_delivering_at=now + timedelta(minutes=1))
    unscheduled = make(start_delivering_at=None, stop_delivering_at=None)

    result = set(Announcement.objects.ready_for_delivery(now))

    assert result == {due, not_expired, unscheduled}


def test_ready_for_delivery_bounds_are_strict(now):
    make(start_delivering_at=now)
    make(stop_delivering_at=now)

    assert not Announcement.objects.ready_for_delivery(now).exists()


def test_is_deliverable_agrees_with_scope(now):
    rows = [
        make(start_delivering_at=now - timedelta(minutes=1)),
        make(start_delivering_at=now + timedelta(minutes=1)),
        make(stop_delivering_at=now - timedelta(minutes=1)),
        make(),
    ]
    ready = set(Announcement.objects.ready_for_delivery(now))

    for row in rows:
        assert row.is_deliverable(now) == (row in ready)


def test_in_delivery_order_puts_unscheduled_first_then_oldest(now):
    second = make(start_delivering_at=now - timedelta(minutes=1))
    first = make(start_delivering_at=now - timedelta(minutes=2))
    open_a = make()
    open_b = make()

    assert list(Announcement.objects.in_delivery_order()) == [open_a, open_b, first, second]


def test_in_reverse_delivery_order_is_exact_reverse(now):
    make(start_delivering_at=now - timedelta(minutes=1))
    make(start_delivering_at=now - timedelta(minutes=2))
    make()
    make()

    forward = list(Announcement.objects.in_delivery_order())
    backward = list(Announcement.objects.in_reverse_delivery_order())

    assert backward == forward[::-1]


def test_unread_by_ignores_other_users_views():
    me = User.objects.create_user(username="me", password="pass12345")
    other = User.objects.create_user(username="other", password="pass12345")
    a1 = make()
    a2 = make()
    AnnouncementView.objects.create(user=other, announcement=a1)
    AnnouncementView.objects.create(user=me, announcement=a2)

    assert list(Announcement.objects.unread_by(me)) == [a1]


def test_with_read_by_counts_only_that_user():
    me = User.objects.create_user(username="me", password="pass12345")
    other = User.objects.create_user(username="other", password="pass12345")
    a1 = make()
    a2 = make()
    AnnouncementView.objects.create(user=me, announcement=a2)
    AnnouncementView.objects.create(user=other, announcement=a2)
    AnnouncementView.objects.create(user=other, announcement=a1)

    reads = {a.pk: a.read for a in Announcement.objects.with_read_by(me)}

    assert reads == {a1.pk: 0, a2.pk: 1}


def test_newer_than(now):
    cutoff = now - timedelta(weeks=2)
    recent_start = make(start_delivering_at=now - timedelta(days=1))
    make(start_delivering_at=now - timedelta(days=20))
    recent_unscheduled = make()
    make(created_at=now - timedelta(weeks=3))
    # an old row with a recent start still counts
    rescheduled = make(created_at=now - timedelta(weeks=3), start_delivering_at=now - timedelta(days=1))

    result = set(Announcement.objects.newer_than(cutoff))

    assert result == {recent_start, recent_unscheduled, rescheduled}


def test_in_category_exact_match():
    en = make(category="en")
    make(category="fr")
    make(category=None)
    make(category="EN")

    assert list(Announcement.objects.in_category("en")) == [en]
    assert Announcement.objects.in_category(None).count() == 4


def test_view_pair_is_unique():
    from django.db import IntegrityError, transaction

    me = User.objects.create_user(username="me", password="pass12345")
    a1 = make()
    AnnouncementView.objects.create(user=me, announcement=a1)

    with pytest.raises(IntegrityError), transaction.atomic():
        AnnouncementView.objects.create(user=me, announcement=a1)


def test_clean_requires_body():
    with pytest.raises(ValidationError) as exc:
        Announcement(title="No body", body="   ").full_clean()
    assert "body" in exc.value.message_dict


def test_clean_validates_window_and_conditions(now):
    announcement = Announcement(
        body="Body",
        start_delivering_at=now,
        stop_delivering_at=now - timedelta(minutes=1),
        limit_to_users=[{"value": "weekly"}],
    )

    with pytest.raises(ValidationError) as exc:
        announcement.full_clean()

    assert set(exc.value.message_dict) >= {"stop_delivering_at", "limit_to_users"}


def test_clean_accepts_valid_conditions():
    Announcement(
        body="Body",
        limit_to_users=[{"field": "subscription", "value": "weekly"}, {"field": "is_free", "value": True}],
    ).full_clean()
