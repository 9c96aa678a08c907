"""
Messages API — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by repositories and routes; caught by global handlers.

Exception Hierarchy:
    MessagesError (base)
    ├── NotFoundError     → 404 Not Found
    └── StorageError      → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class MessagesError(Exception):
    """
    Base exception for all Messages API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler allows)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(MessagesError):
    """
    Raised when a requested resource does not exist.

    When:    GET /messages/{id} with an id absent from the store.
    HTTP:    404 Not Found

    The repository returns None for missing ids (not an exception); the route
    converts None into this error.
    """

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageError(MessagesError):
    """
    Raised when the message store cannot be read or written.

    When:    Permission denied, disk full, corrupt JSON, id space exhausted.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The file path and
    OS error go into context, which is logged server-side only.
    """

    def __init__(
        self,
        message: str = "The message store is unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
