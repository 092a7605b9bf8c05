import pytest
from django.contrib.auth import get_user_model


User = get_user_model()


def test_custom_user_model_is_active():
    assert User._meta.label == "users.User"


@pytest.mark.parametrize("subscription, expected", [("", True), ("weekly", False), ("monthly", False)])
def test_is_free(subscription, expected):
    assert User(username="u", subscription=subscription).is_free is expected


@pytest.mark.django_db
def test_subscription_defaults_to_free():
    user = User.objects.create_user(username="u1", password="pass12345")
    assert user.subscription == ""
    assert user.is_free
