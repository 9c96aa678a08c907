"""
Messages API — JSON File Messages Repository
=============================================

What:  Stores all messages in a single JSON file keyed by random integer id.
How:   Every operation reads the whole file; create() rewrites it.
       File I/O goes through aiofiles so disk access doesn't block the event loop.
Who:   Built once per process by messages_api.dependencies; used by MessagesService.

Write Strategy:
    create() writes the new mapping to a sibling temp file, then renames it
    over the store. A crash mid-write leaves the previous file intact.

    The read-modify-write in create() runs under an asyncio.Lock, so concurrent
    requests in one process cannot drop each other's message. Nothing guards
    against a second process writing the same file.
"""

import asyncio
import contextlib
import json
import logging
import os
import random
from pathlib import Path
from typing import Dict, Optional, Union

import aiofiles
import aiofiles.os

from messages_api.exceptions import StorageError
from messages_api.models.message import Message
from messages_api.repositories.base import MessagesRepository

logger = logging.getLogger(__name__)

DEFAULT_ID_UPPER_BOUND = 999


class JsonFileMessagesRepository(MessagesRepository):
    """
    MessagesRepository backed by one JSON file.

    Args:
        path: Location of the store file. It need not exist yet; a missing
              file reads as an empty store and is created on first write.
        id_upper_bound: New ids are drawn from range(id_upper_bound).
        rng: Random source for ids (tests pass a seeded random.Random).
    """

    def __init__(
        self,
        path: Union[str, Path],
        id_upper_bound: int = DEFAULT_ID_UPPER_BOUND,
        rng: Optional[random.Random] = None,
    ):
        if id_upper_bound < 1:
            raise ValueError("id_upper_bound must be positive")
        self.path = Path(path)
        self.id_upper_bound = id_upper_bound
        self._rng = rng or random.Random()
        self._write_lock = asyncio.Lock()
        logger.info("JsonFileMessagesRepository initialized with path=%s", self.path)

    # ── Public API ────────────────────────────────────────────────────────

    async def find_one(self, message_id: int) -> Optional[Message]:
        messages = await self._read()
        return messages.get(str(message_id))

    async def find_all(self) -> Dict[str, Message]:
        return await self._read()

    async def create(self, content: str) -> Message:
        async with self._write_lock:
            messages = await self._read()
            message = Message(id=self._draw_id(messages), content=content)
            messages[message.key] = message
            await self._write(messages)

        logger.info("Message %d created (%d chars)", message.id, len(content))
        return message

    async def check_available(self) -> bool:
        """
        Report whether the store is readable and create() could write it.

        A missing file counts as available when the nearest existing ancestor
        directory is writable, since _write() creates the missing directories.
        """
        try:
            await self._read()
        except StorageError:
            return False

        if await aiofiles.os.path.exists(self.path):
            return True

        ancestor = self.path.parent
        while not await aiofiles.os.path.exists(ancestor):
            if ancestor.parent == ancestor:
                return False
            ancestor = ancestor.parent

        return await aiofiles.os.path.isdir(ancestor) and os.access(ancestor, os.W_OK)

    # ── Internals ─────────────────────────────────────────────────────────

    def _draw_id(self, messages: Dict[str, Message]) -> int:
        """
        Pick a random id not already present in `messages`.

        Raises:
            StorageError when every id in range(id_upper_bound) is taken.
        """
        taken = {m.id for m in messages.values() if 0 <= m.id < self.id_upper_bound}
        if len(taken) >= self.id_upper_bound:
            raise StorageError(
                message="No free message ids remain. Please try again later.",
                context={"id_upper_bound": self.id_upper_bound, "stored": len(messages)},
            )

        while True:
            candidate = self._rng.randrange(self.id_upper_bound)
            if str(candidate) not in messages:
                return candidate
            logger.debug("Message id %d already taken, redrawing", candidate)

    async def _read(self) -> Dict[str, Message]:
        """
        Load and decode the whole store.

        Missing or blank file → empty mapping.

        Raises:
            StorageError on I/O failure, invalid JSON, or malformed entries.
        """
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.error("Failed to read message store %s: %s", self.path, str(e))
            raise StorageError(context={"path": str(self.path), "os_error": str(e)})

        if not raw.strip():
            return {}

        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Message store %s is not valid JSON: %s", self.path, str(e))
            raise StorageError(context={"path": str(self.path), "decode_error": str(e)})

        if not isinstance(decoded, dict):
            logger.error("Message store %s does not hold a JSON object", self.path)
            raise StorageError(
                context={"path": str(self.path), "found_type": type(decoded).__name__}
            )

        try:
            messages = {key: Message.from_dict(entry) for key, entry in decoded.items()}
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed entry in message store %s: %s", self.path, str(e))
            raise StorageError(context={"path": str(self.path), "entry_error": str(e)})

        # create() writes under str(id); a mismatched key would be overwritten silently
        mismatched = [key for key, m in messages.items() if key != m.key]
        if mismatched:
            logger.error("Message store %s has keys not matching their ids: %s", self.path, mismatched)
            raise StorageError(context={"path": str(self.path), "mismatched_keys": mismatched})

        return messages

    async def _write(self, messages: Dict[str, Message]) -> None:
        """Serialize `messages` and atomically replace the store file."""
        payload = json.dumps({key: m.to_dict() for key, m in messages.items()})
        tmp_path = self.path.with_name(self.path.name + ".tmp")

        try:
            await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(payload)
            await aiofiles.os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                await aiofiles.os.remove(tmp_path)
            logger.error("Failed to write message store %s: %s", self.path, str(e))
            raise StorageError(context={"path": str(self.path), "os_error": str(e)})
