"""
Authentication and storage errors.

Every AuthError is surfaced to clients as a 401 with ``public_message``;
``str(err)`` may carry more detail and is meant for logs only.
"""
from __future__ import annotations


class AuthError(Exception):
    code = "UNAUTHENTICATED"
    public_message = "Unauthenticated"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)


class MissingToken(AuthError):
    code = "MISSING_TOKEN"
    public_message = "Missing token"


class MalformedToken(AuthError):
    code = "MALFORMED_TOKEN"
    public_message = "Malformed token"


class InvalidToken(AuthError):
    code = "INVALID_TOKEN"
    public_message = "Invalid token"


class ExpiredToken(AuthError):
    code = "TOKEN_EXPIRED"
    public_message = "Token expired"


class UnknownSubject(AuthError):
    code = "UNKNOWN_SUBJECT"
    public_message = "No such user"


class InvalidCredentials(AuthError):
    """Login failure. Subclasses say which check failed, clients never see it."""
    code = "INVALID_CREDENTIALS"
    public_message = "Email or password invalid"


class UnknownUser(InvalidCredentials):
    pass


class PasswordMismatch(InvalidCredentials):
    pass


class EmailTaken(Exception):
    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class StoreUnavailable(Exception):
    """The credential store could not be reached."""
