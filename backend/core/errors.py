"""Error kinds raised by the service layer.

Each kind carries the HTTP status it maps to; ``backend.main`` turns any
``AppError`` into ``{"error": message}`` with that status.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class ConflictError(AppError):
    # Clients expect 400 for duplicates, not 409.
    status_code = 400
    default_message = "User already exists"


class AuthError(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class InvalidOrExpiredToken(AuthError):
    default_message = "Invalid or expired token"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Admin access required"


class ServerError(AppError):
    status_code = 500
    default_message = "Server error"
