from types import SimpleNamespace

from django.contrib.auth import get_user_model

from announcements.eligibility import build_snapshot, filter_eligible, matches


User = get_user_model()

WEEKLY = [{"field": "subscription", "value": "weekly"}]


def test_empty_or_missing_conditions_match_everyone():
    assert matches({"subscription": "weekly"}, [])
    assert matches({"subscription": "weekly"}, None)
    assert matches({}, None)


def test_every_condition_must_hold():
    snapshot = {"subscription": "weekly", "is_free": False}
    assert matches(snapshot, WEEKLY)
    assert matches(snapshot, WEEKLY + [{"field": "is_free", "value": False}])
    assert not matches(snapshot, WEEKLY + [{"field": "is_free", "value": True}])
    assert not matches({"subscription": "monthly"}, WEEKLY)


def test_missing_field_never_matches():
    assert not matches({}, WEEKLY)
    # not even a null value
    assert not matches({}, [{"field": "subscription", "value": None}])


def test_snapshot_exposes_fields_but_not_password():
    user = User(username="u1", subscription="weekly")
    user.set_password("pass12345")

    snapshot = build_snapshot(user)

    assert snapshot["username"] == "u1"
    assert snapshot["subscription"] == "weekly"
    assert "password" not in snapshot
    assert "is_free" not in snapshot


def test_snapshot_resolves_allowed_predicates_only():
    free = User(username="free", subscription="")
    paid = User(username="paid", subscription="monthly")

    assert build_snapshot(free, predicates=["is_free"])["is_free"] is True
    assert build_snapshot(paid, predicates=["is_free"])["is_free"] is False
    assert "has_usable_password" not in build_snapshot(free, predicates=["is_free"])


def test_snapshot_calls_zero_arg_methods_and_skips_unknown_names():
    user = SimpleNamespace(plan="pro", is_beta=lambda: True)

    snapshot = build_snapshot(user, fields=["plan", "nickname"], predicates=["is_beta", "is_admin"])

    assert snapshot == {"plan": "pro", "is_beta": True}


def test_filter_eligible_keeps_order():
    a = SimpleNamespace(name="a", limit_to_users=[])
    b = SimpleNamespace(name="b", limit_to_users=WEEKLY)
    c = SimpleNamespace(name="c", limit_to_users=[{"field": "subscription", "value": "monthly"}])
    d = SimpleNamespace(name="d", limit_to_users=None)

    result = list(filter_eligible([a, b, c, d], {"subscription": "weekly"}))

    assert [x.name for x in result] == ["a", "b", "d"]
