"""
Messages API — Messages Service
================================

What:  Business logic layer for messages.
How:   Every method delegates to the injected MessagesRepository and returns
       its result unchanged; no rule lives here today.
Who:   Injected into route handlers by messages_api.dependencies.

Design Decision:
    The service receives its repository through the constructor instead of
    importing a module-level instance. Tests build it around a mock repository,
    and routes get it from FastAPI's Depends().
"""

import logging
from typing import Dict, Optional

from messages_api.models.message import Message
from messages_api.repositories.base import MessagesRepository

logger = logging.getLogger(__name__)


class MessagesService:
    """Pass-through service over a MessagesRepository."""

    def __init__(self, repository: MessagesRepository):
        self.repository = repository

    async def find_one(self, message_id: int) -> Optional[Message]:
        return await self.repository.find_one(message_id)

    async def find_all(self) -> Dict[str, Message]:
        return await self.repository.find_all()

    async def create(self, content: str) -> Message:
        return await self.repository.create(content)
