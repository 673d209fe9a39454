"""
Domain errors raised by the link service.

Each error knows the HTTP status it maps to; the handlers registered in
`main.py` turn them into `{"error": ...}` JSON responses.
"""

from typing import Optional

from fastapi import status


class LinkError(Exception):
    """Base class for all link service errors"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(LinkError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class Conflict(LinkError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Code already exists"


class NotFound(LinkError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Internal(LinkError):
    pass


class ShortCodeExhausted(Internal):
    """The allocator could not find a free code within its attempt budget"""
    default_message = "Could not generate a unique short code"
