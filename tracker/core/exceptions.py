class AppException(Exception):
    """Base error rendered as a JSON ``{"message": ...}`` body."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppException):
    """Bad input shape or range"""

    status_code = 400
    default_message = "Invalid request"


class DuplicateEmailError(ValidationError):
    """Email is already registered to another user"""

    default_message = "Email already registered"


class InvalidPasswordError(ValidationError):
    """Supplied password does not match the stored hash"""

    default_message = "Current password is incorrect"


class NotAuthenticatedError(AppException):
    """No usable credential on the request"""

    status_code = 401
    default_message = "Not authenticated"


class InvalidCredentialError(NotAuthenticatedError):
    """Credential present but malformed"""

    default_message = "Invalid token"


class ForbiddenError(AppException):
    """Caller does not own the resource"""

    status_code = 403
    default_message = "Access denied"


class NotFoundError(AppException):
    """Referenced entity does not exist"""

    status_code = 404
    default_message = "Not found"


class UpstreamError(AppException):
    """Third-party provider call failed; never retried"""

    status_code = 400
    default_message = "Upstream provider error"
