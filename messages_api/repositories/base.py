"""
Messages API — Abstract Messages Repository
============================================

What:  Interface every message store implements.
Why:   MessagesService and the dependency providers reference this type, so a
       different backend only needs a new subclass and a new provider.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from messages_api.models.message import Message


class MessagesRepository(ABC):
    """Abstract contract for reading and writing messages."""

    @abstractmethod
    async def find_one(self, message_id: int) -> Optional[Message]:
        """Return the message stored under `message_id`, or None when absent."""
        ...

    @abstractmethod
    async def find_all(self) -> Dict[str, Message]:
        """Return every stored message keyed by the string form of its id."""
        ...

    @abstractmethod
    async def create(self, content: str) -> Message:
        """Store a new message under a fresh random id and return it."""
        ...

    @abstractmethod
    async def check_available(self) -> bool:
        """Return True when the store can be read now and written by create()."""
        ...
