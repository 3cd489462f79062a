import pytest

from common.models import UserCandidate
from user_service.validation import validate_user


def test_valid_user():
    assert validate_user(UserCandidate(name="Alice", email="alice@example.com")) is None


def test_missing_payload():
    assert validate_user(None) == "User payload is required."


@pytest.mark.parametrize(
    "name, email, expected",
    [
        (None, None, "name is required."),
        ("", "x@example.com", "name is required."),
        ("  ", "no-at", "name is required."),
        ("Charlie", None, "email is required."),
        ("Charlie", " ", "email is required."),
        ("Dave", "dave-no-at", "email must contain '@'."),
    ],
)
def test_first_failing_rule_wins(name, email, expected):
    assert validate_user(UserCandidate(name=name, email=email)) == expected
