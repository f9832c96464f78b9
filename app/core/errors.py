"""Domain error taxonomy. Each error maps to one HTTP status at the request boundary."""


class AppError(Exception):
    """Base class for errors converted to a JSON error response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(AppError):
    """Malformed or missing fields; user-correctable."""

    status_code = 400
    default_message = "Invalid input"


class InvalidCredentials(AppError):
    """Login failure. The message never says which part was wrong."""

    status_code = 401
    default_message = "Invalid credentials"


class Unauthenticated(AppError):
    """No token, or a token that is malformed, forged or expired."""

    status_code = 401
    default_message = "Not authenticated"


class Forbidden(AppError):
    status_code = 403
    default_message = "Admin access required"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    """Uniqueness violation (duplicate username or email)."""

    status_code = 400
    default_message = "Already exists"


class Internal(AppError):
    status_code = 500
    default_message = "Internal server error"
