"""
Messages API — Message Domain Model
====================================

What:  The stored representation of a message.
How:   A plain dataclass; the JSON store serializes it with to_dict() and
       rebuilds it with from_dict().

Store Layout:
    The store file is one JSON object keyed by the string form of each id:

        {
            "12":  {"id": 12,  "content": "hi there"},
            "457": {"id": 457, "content": "second message"}
        }
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class Message:
    """A single message as held in the store."""

    id: int
    content: str

    @property
    def key(self) -> str:
        """Key of this message in the store mapping."""
        return str(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        """
        Build a Message from one decoded store entry.

        Raises:
            KeyError / TypeError / ValueError when the entry is malformed;
            the repository wraps these in StorageError.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")
        content = data["content"]
        if not isinstance(content, str):
            raise TypeError("Message content must be a string")
        message_id = data["id"]
        # bool is an int subclass; floats and numeric strings would be silently rewritten
        if not isinstance(message_id, int) or isinstance(message_id, bool):
            raise TypeError("Message id must be an integer")
        return cls(id=message_id, content=content)
