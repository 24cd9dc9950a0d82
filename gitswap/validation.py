"""Input validation for profile fields."""

import re

from .exceptions import ValidationError

MAX_USERNAME_LENGTH = 30
MAX_EMAIL_LENGTH = 100
MAX_ALIAS_LENGTH = 30

# Menu option for returning to the main menu; cannot be used as an alias
BACK_OPTION = "back"

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_username(username: str) -> str:
    """Validate a Git username.

    Args:
        username: Value for ``user.name``

    Returns:
        The username with surrounding whitespace removed

    Raises:
        ValidationError: If the username is empty or too long
    """
    username = username.strip()
    if not username:
        raise ValidationError("Username cannot be empty")
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(
            f"Username too long (max {MAX_USERNAME_LENGTH} characters)"
        )
    return username


def validate_email(email: str) -> str:
    """Validate a Git email address.

    Only the basic shape is checked: one ``@`` and a dotted domain, no
    whitespace.
    """
    email = email.strip()
    if not email:
        raise ValidationError("Email cannot be empty")
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(f"Email too long (max {MAX_EMAIL_LENGTH} characters)")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError(f"Invalid email format: {email}")
    return email


def validate_alias(alias: str) -> str:
    """Validate a profile alias.

    Aliases are lookup keys, so they are not stripped: surrounding
    whitespace is rejected.
    """
    if not alias.strip():
        raise ValidationError("Alias cannot be empty")
    if alias != alias.strip():
        raise ValidationError("Alias cannot start or end with whitespace")
    if len(alias) > MAX_ALIAS_LENGTH:
        raise ValidationError(f"Alias too long (max {MAX_ALIAS_LENGTH} characters)")
    if alias == BACK_OPTION:
        raise ValidationError(f"Alias cannot be '{BACK_OPTION}'")
    return alias
