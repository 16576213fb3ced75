"""
Centralized error handling and user-friendly error messages.
"""
import logging

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or empty."""
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ConflictError(AppError):
    """The username is already registered."""
    def __init__(self, message: str):
        super().__init__(message, status_code=409)


class AuthenticationError(AppError):
    """Unknown username or wrong password. The two cases are never told apart."""
    def __init__(self, message: str):
        super().__init__(message, status_code=401)


class InternalError(AppError):
    """Unexpected failure while hashing or comparing passwords."""
    def __init__(self, message: str):
        super().__init__(message, status_code=500)


# User-friendly error messages
ERROR_MESSAGES = {
    # Authentication
    "missing_credentials": "Username and password are required.",
    "username_taken": "Username already taken.",
    "invalid_credentials": "Invalid username or password.",
    "registration_failed": "Server error during registration.",
    "login_failed": "Server error during login.",

    # General
    "not_found": "The requested resource was not found.",
    "server_error": "Something went wrong on our end. Please try again later.",
    "validation_error": "Please check your input and try again.",
}


def get_error_message(error_key: str, default: str | None = None) -> str:
    """Get a user-friendly error message."""
    return ERROR_MESSAGES.get(error_key, default or ERROR_MESSAGES["server_error"])


def create_error_response(status_code: int, message: str) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
        },
    )
