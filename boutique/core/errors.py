# boutique/core/errors.py
"""
Domain error hierarchy.

Services raise these; `boutique.core.error_handlers` turns them into
JSON responses of the form {"message": ...} with the matching status code.
"""

from fastapi import status


class BoutiqueError(Exception):
    """Base exception for all expected, client-facing failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict[str, str]:
        return {"message": self.message}


# ----- 400 -----


class ValidationError(BoutiqueError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class InvalidIdentifierFormat(ValidationError):
    """A path or body id is not a well-formed record identifier."""

    default_message = "Invalid ID format"


# ----- 401 -----


class AuthenticationError(BoutiqueError):
    """Missing, malformed or invalid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication failed"


class MissingOrMalformedHeader(AuthenticationError):
    default_message = "Authorization required (Basic Authentication)"


class MalformedEncoding(AuthenticationError):
    default_message = "Invalid Basic Authorization format"


class InvalidCredentials(AuthenticationError):
    # Same message for unknown email and wrong password.
    default_message = "Invalid email or password"


# ----- 404 -----


class NotFoundError(BoutiqueError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class NotFoundOrUnauthorized(NotFoundError):
    """Record is missing or belongs to another account; callers can't tell which."""

    default_message = "Record not found or does not belong to user"


# ----- 409 -----


class ConflictError(BoutiqueError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class DuplicateEntry(ConflictError):
    default_message = "Duplicate entry"


# ----- 500 -----


class InternalError(BoutiqueError):
    """Store failure or unexpected state. Details stay in the server log."""
