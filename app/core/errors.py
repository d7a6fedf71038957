# File: app/core/errors.py

class AppError(Exception):
    """Expected failure with a message that is safe to show to the caller."""
    code = "error"
    default_message = "An error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    code = "validation_error"
    default_message = "Invalid input"


class Conflict(AppError):
    code = "conflict"
    default_message = "User already exists"


class InvalidCredentials(AppError):
    code = "invalid_credentials"
    default_message = "Invalid credentials"


class Unauthorized(AppError):
    code = "unauthorized"
    default_message = "Unauthorized - Admin access required"


class StoreFailure(AppError):
    code = "store_failure"
    default_message = "Database operation failed"


class LoginRequired(Exception):
    """Raised to send an anonymous caller to the login page."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(location)
