"""
announcements/eligibility.py

Per-user targeting for announcements.

An announcement's ``limit_to_users`` is a list of conditions:

    [{"field": "subscription", "value": "weekly"}, {"field": "is_free", "value": true}]

A user sees the announcement only when *every* condition matches the user's
snapshot. The snapshot is a plain dict built from the user object: its
configured fields plus a configured allow-list of predicates (zero-arg methods
or properties). Nothing outside those names is ever read from the user.
"""
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence

UserSnapshot = Dict[str, Any]

_MISSING = object()

EXCLUDED_FIELDS = frozenset({"password"})


def build_snapshot(user, fields: Optional[Sequence[str]] = None, predicates: Iterable[str] = ()) -> UserSnapshot:
    """
    Project ``user`` into a name → value mapping.

    - fields=None: every concrete model field (by attname) except the password hash.
    - predicates: extra names resolved with getattr; callables are called with no
      arguments. Names the user does not have are left out, so conditions on them
      never match.
    """
    if fields is None:
        fields = [
            f.attname
            for f in user._meta.concrete_fields
            if f.name not in EXCLUDED_FIELDS
        ]

    snapshot: UserSnapshot = {}
    for name in list(fields) + list(predicates):
        value = getattr(user, name, _MISSING)
        if value is _MISSING:
            continue
        snapshot[name] = value() if callable(value) else value
    return snapshot


def matches(snapshot: UserSnapshot, conditions=None) -> bool:
    """True when every condition's value equals the snapshot's value for its field."""
    for condition in conditions or ():
        if snapshot.get(condition.get("field"), _MISSING) != condition.get("value"):
            return False
    return True


def filter_eligible(announcements: Iterable, snapshot: UserSnapshot) -> Iterator:
    """Yield the announcements whose conditions match, keeping input order."""
    for announcement in announcements:
        if matches(snapshot, announcement.limit_to_users):
            yield announcement
