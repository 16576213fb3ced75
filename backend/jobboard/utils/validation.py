"""
Presence checks for request input.
"""
from typing import Any

from .error_handlers import ValidationError, get_error_message


def require_credentials(username: Any, password: Any) -> tuple[str, str]:
    """
    Ensure both credentials are present and non-empty.

    Values are returned untouched: usernames are matched exactly, so no
    trimming or case folding happens here.
    """
    if not username or not password:
        raise ValidationError(get_error_message("missing_credentials"))
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError(get_error_message("validation_error"))
    return username, password
