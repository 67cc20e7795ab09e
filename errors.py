"""Errors raised by the auth core and the post routes.

Each error carries the HTTP status it maps to; ``main.py`` turns any
``BlogError`` into ``{"error": message}`` with that status.
"""
from fastapi import status


class BlogError(Exception):
    """Base class for request-terminating errors"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(BlogError):
    """A required field is missing"""
    default_message = "missing required fields"


class ValidationFailed(BlogError):
    """A field is present but breaks a constraint"""
    default_message = "validation failed"


class Conflict(BlogError):
    """A uniqueness constraint was violated"""
    default_message = "resource already exists"


class InvalidCredentials(BlogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "invalid username or password"


class InvalidToken(BlogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "invalid token"


class ExpiredToken(BlogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "token expired"


class Unauthorized(BlogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "token missing or invalid"


class NotFound(BlogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "not found"
