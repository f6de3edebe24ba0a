"""Tests for the comment form validation rules."""

import pytest

from comment_service.models import CommentSubmission
from comment_service.services.validation import CommentValidationError, validate_submission


def make_submission(**overrides):
    fields = {
        "slug": "hello-world",
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "reply_to": "",
        "comment": "Nice post.",
    }
    fields.update(overrides)
    return CommentSubmission(**fields)


def test_valid_submission_passes():
    validate_submission(make_submission())


@pytest.mark.parametrize("field_name", ["slug", "name", "email", "comment"])
@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_blank_required_field_is_rejected(field_name, blank):
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(**{field_name: blank}))

    assert exc_info.value.status_code == 422
    assert exc_info.value.message == f"Error: {field_name} cannot be empty."


def test_first_failure_wins():
    """Slug is checked before the other fields."""
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(slug="", name="", comment=""))

    assert exc_info.value.message == "Error: slug cannot be empty."


def test_empty_field_reported_before_length():
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(name="x" * 40, comment=" "))

    assert exc_info.value.message == "Error: comment cannot be empty."


def test_name_longer_than_limit_is_rejected():
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(name="x" * 26))

    assert exc_info.value.status_code == 422
    assert exc_info.value.message == "Error: name cannot be more than 25 characters."


def test_name_at_limit_is_accepted():
    validate_submission(make_submission(name="x" * 25))


def test_name_length_is_measured_after_trimming():
    validate_submission(make_submission(name="  " + "x" * 25 + "  "))


def test_name_checked_before_email_length():
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(name="x" * 30, email="e" * 70))

    assert exc_info.value.message == "Error: name cannot be more than 25 characters."


def test_email_longer_than_limit_is_rejected():
    email = "a" * 50 + "@example.com"
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(email=email))

    assert exc_info.value.message == "Error: email cannot be more than 60 characters."


def test_email_at_limit_is_accepted():
    validate_submission(make_submission(email="a" * 48 + "@example.com"))


def test_limits_are_configurable():
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(name="Ada Lovelace"), name_max_length=5)

    assert exc_info.value.message == "Error: name cannot be more than 5 characters."


def test_email_format_is_not_checked():
    validate_submission(make_submission(email="not-an-email"))


def test_name_length_counts_utf16_units():
    """Each emoji outside the BMP counts as two characters."""
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(name="\U0001F600" * 13))

    assert exc_info.value.message == "Error: name cannot be more than 25 characters."


def test_name_of_twelve_emoji_is_accepted():
    validate_submission(make_submission(name="\U0001F600" * 12))


def test_email_length_counts_utf16_units():
    with pytest.raises(CommentValidationError) as exc_info:
        validate_submission(make_submission(email="\U0001F600" * 30 + "@x"))

    assert exc_info.value.message == "Error: email cannot be more than 60 characters."
