"""Error taxonomy shared by the services and the HTTP layer.

Every error carries the HTTP status and the user-facing message it is
rendered with, so routers only raise and the app-level handler formats.
"""
from typing import Any, List, Optional


class TrackingError(Exception):
    status_code = 500
    message = "Something went wrong!"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class DuplicateUsername(TrackingError):
    status_code = 400
    message = "Username already taken"


class DuplicateEmail(TrackingError):
    status_code = 400
    message = "Email already registered"


class InvalidCredentials(TrackingError):
    #same message for unknown user and wrong password
    status_code = 401
    message = "Invalid username or password"


class Unauthenticated(TrackingError):
    #missing, expired, forged and malformed tokens all look the same
    status_code = 401
    message = "Invalid or expired token"


class Forbidden(TrackingError):
    status_code = 403
    message = "Access denied"


class NotFound(TrackingError):
    status_code = 404
    message = "Not found"


class ValidationFailed(TrackingError):
    status_code = 400
    message = "Validation failed"

    def __init__(self, errors: Optional[List[Any]] = None, message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors or []


class StorageError(TrackingError):
    status_code = 500
    message = "Something went wrong!"
