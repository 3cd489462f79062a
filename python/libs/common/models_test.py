import pytest
from pydantic import ValidationError

from common.models import ErrorResponse, User, UserCandidate


def test_user_model():
    user = User(id="u-1", name="Alice", email="alice@example.com")
    assert user.name == "Alice"
    assert user.id == "u-1"


def test_user_is_immutable():
    user = User(id="1", name="Alice", email="alice@example.com")
    with pytest.raises(ValidationError):
        user.name = "Mallory"


def test_candidate_fields_are_optional():
    candidate = UserCandidate.model_validate_json('{"name": "Charlie"}')
    assert candidate.name == "Charlie"
    assert candidate.email is None
    assert candidate.id is None


def test_candidate_ignores_unknown_fields():
    candidate = UserCandidate.model_validate_json(
        '{"name": "Dave", "email": "dave@example.com", "age": 42}'
    )
    assert candidate.model_dump() == {"id": None, "name": "Dave", "email": "dave@example.com"}


def test_candidate_converts_numbers_to_strings():
    candidate = UserCandidate.model_validate_json('{"id": 7, "name": "A", "email": "a@b"}')
    assert candidate.id == "7"


def test_candidate_rejects_non_scalar_fields():
    with pytest.raises(ValidationError):
        UserCandidate.model_validate_json('{"name": {"first": "A"}}')
    with pytest.raises(ValidationError):
        UserCandidate.model_validate_json('{"email": ["a@b"]}')


def test_error_response():
    error = ErrorResponse(message="User not found", details="No user with id: 7")
    assert error.model_dump() == {"message": "User not found", "details": "No user with id: 7"}
