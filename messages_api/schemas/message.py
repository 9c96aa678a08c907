"""
Messages API — Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract for the messages resource.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models before the route
       handler runs. A failing body never reaches the service layer.
When:  Validated on every request (input) and serialized on every response (output).
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictStr


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class CreateMessageRequest(BaseModel):
    """
    What:  Body of POST /messages.
    How:   StrictStr rejects numbers, booleans and null instead of coercing
           them to strings. Unknown extra fields are ignored.

    Example:
        {"content": "hello there"}
    """
    content: StrictStr = Field(description="Text of the message")


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """A single stored message."""
    id: int = Field(description="Random integer identifier")
    content: str = Field(description="Text of the message")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context (e.g., the list of failing fields)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "Request validation failed",
            "details": {"errors": ["body.content: Input should be a valid string"]},
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and message store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Message store status: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
