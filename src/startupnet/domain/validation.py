"""Validation rules for user-supplied fields.

Every rule returns a list of `FieldError`s instead of raising, so callers can
collect all failures of a form in one pass and hand them back as a
`ValidationReport`. Uniqueness of emails needs storage and is checked by the
service layer, not here.

Reason strings follow a fixed vocabulary:

| rule           | reason                                      |
|----------------|---------------------------------------------|
| presence       | ``can't be blank``                          |
| minimum length | ``is too short (minimum is N characters)``  |
| maximum length | ``is too long (maximum is N characters)``   |
| format         | ``is invalid``                              |
| confirmation   | ``doesn't match Password``                  |
| uniqueness     | ``has already been taken``                  |
"""

from __future__ import annotations

import re

from .value_objects import FieldError, ValidationReport

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 99
PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 40
MICRO_POST_MAX_LENGTH = 140
STARTUP_NAME_MAX_LENGTH = 99
COMMENT_MAX_LENGTH = 2000

EMAIL_RE = re.compile(
    r"[\w+\-.]+@[a-z\d\-]+(\.[a-z\d\-]+)*\.[a-z]+", re.IGNORECASE | re.ASCII
)

BLANK = "can't be blank"
INVALID = "is invalid"
TAKEN = "has already been taken"
CONFIRMATION_MISMATCH = "doesn't match Password"


def too_short(minimum: int) -> str:
    """Reason text for a value below its minimum length."""
    return f"is too short (minimum is {minimum} characters)"


def too_long(maximum: int) -> str:
    """Reason text for a value above its maximum length."""
    return f"is too long (maximum is {maximum} characters)"


def is_blank(value: str | None) -> bool:
    """True for None, the empty string and whitespace-only strings."""
    return value is None or not value.strip()


def normalize_email(email: str) -> str:
    """Canonical stored form of an email address: stripped and lowercased."""
    return email.strip().lower()


def _length_errors(
    field: str, value: str, minimum: int | None, maximum: int | None
) -> list[FieldError]:
    if minimum is not None and len(value) < minimum:
        return [FieldError(field, too_short(minimum))]
    if maximum is not None and len(value) > maximum:
        return [FieldError(field, too_long(maximum))]
    return []


def validate_name(name: str | None) -> list[FieldError]:
    """Name must be present and 3..99 characters long."""
    if name is None or is_blank(name):
        return [FieldError("name", BLANK)]
    return _length_errors("name", name, NAME_MIN_LENGTH, NAME_MAX_LENGTH)


def validate_email(email: str | None) -> list[FieldError]:
    """Email must be present and look like ``local@domain.tld``."""
    if email is None or is_blank(email):
        return [FieldError("email", BLANK)]
    if not EMAIL_RE.fullmatch(email.strip()):
        return [FieldError("email", INVALID)]
    return []


def validate_password(
    password: str | None, confirmation: str | None = None
) -> list[FieldError]:
    """Password must be 4..40 characters and match its confirmation.

    The confirmation is only checked when one is supplied (not None).
    """
    if password is None or is_blank(password):
        return [FieldError("password", BLANK)]
    errors = _length_errors(
        "password", password, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH
    )
    if confirmation is not None and confirmation != password:
        errors.append(FieldError("password_confirmation", CONFIRMATION_MISMATCH))
    return errors


def validate_user(
    name: str | None,
    email: str | None,
    password: str | None,
    password_confirmation: str | None = None,
    *,
    require_password: bool = True,
) -> ValidationReport:
    """Validate the identity and credential fields of a user.

    Args:
        name: Display name.
        email: Email address, any case.
        password: Plaintext password. Ignored when None and
            ``require_password`` is False (updates that keep the password).
        password_confirmation: Optional confirmation of ``password``.
        require_password: Whether a missing password is an error.

    Returns:
        A report with the failures in field order (name, email, password).
    """
    errors = validate_name(name) + validate_email(email)
    if password is not None or require_password:
        errors += validate_password(password, password_confirmation)
    return ValidationReport.of(errors)


def validate_micro_post(content: str | None) -> ValidationReport:
    """Micro-post content must be present and at most 140 characters."""
    if content is None or is_blank(content):
        return ValidationReport.of([FieldError("content", BLANK)])
    return ValidationReport.of(
        _length_errors("content", content, None, MICRO_POST_MAX_LENGTH)
    )


def validate_startup_name(name: str | None) -> ValidationReport:
    """Startup name must be present and at most 99 characters."""
    if name is None or is_blank(name):
        return ValidationReport.of([FieldError("name", BLANK)])
    return ValidationReport.of(
        _length_errors("name", name, None, STARTUP_NAME_MAX_LENGTH)
    )


def validate_comment(content: str | None) -> ValidationReport:
    """Comment content must be present."""
    if content is None or is_blank(content):
        return ValidationReport.of([FieldError("content", BLANK)])
    return ValidationReport.of(
        _length_errors("content", content, None, COMMENT_MAX_LENGTH)
    )
