"""
Messages API — Messages Route Handlers
=======================================

What:  Handles GET /messages (list), POST /messages (create) and
       GET /messages/{id} (detail).
How:   FastAPI validates the path parameter and request body, the handler
       delegates to the injected MessagesService and shapes the response.

Validation:
    - POST body must match CreateMessageRequest (content is a string)
    - {message_id} must be an integer
    Failures never reach the handler; main.py turns them into HTTP 400.
"""

import logging
from typing import Dict

from fastapi import APIRouter, Depends, Path

from messages_api.dependencies import get_messages_service
from messages_api.exceptions import NotFoundError
from messages_api.schemas.message import (
    CreateMessageRequest,
    ErrorResponse,
    MessageResponse,
)
from messages_api.services.message_service import MessagesService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.get(
    "",
    response_model=Dict[str, MessageResponse],
    responses={
        500: {"description": "Message store unavailable", "model": ErrorResponse},
    },
    summary="List all messages",
    description="Returns every stored message keyed by its id.",
)
async def list_messages(
    service: MessagesService = Depends(get_messages_service),
) -> Dict[str, MessageResponse]:
    messages = await service.find_all()
    return {key: MessageResponse.model_validate(m) for key, m in messages.items()}


@router.post(
    "",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid request body", "model": ErrorResponse},
        500: {"description": "Message store unavailable", "model": ErrorResponse},
    },
    summary="Create a message",
    description="Stores a new message under a random integer id and returns it.",
)
async def create_message(
    body: CreateMessageRequest,
    service: MessagesService = Depends(get_messages_service),
) -> MessageResponse:
    message = await service.create(body.content)
    return MessageResponse.model_validate(message)


@router.get(
    "/{message_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Id is not an integer", "model": ErrorResponse},
        404: {"description": "Message not found", "model": ErrorResponse},
        500: {"description": "Message store unavailable", "model": ErrorResponse},
    },
    summary="Get a single message by id",
)
async def get_message(
    message_id: int = Path(description="Integer id of the message"),
    service: MessagesService = Depends(get_messages_service),
) -> MessageResponse:
    """
    Get one message.

    Raises:
        NotFoundError (→ 404) when no message has this id.
    """
    message = await service.find_one(message_id)
    if message is None:
        raise NotFoundError(
            message="message not found",
            resource="message",
            resource_id=str(message_id),
        )
    return MessageResponse.model_validate(message)
