"""Message-level types for decoded transcript lines."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MessageType(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ClaudeMessage:
    uuid: str
    parent_uuid: Optional[str]
    session_id: str
    msg_type: MessageType
    content: str = ""
    model: Optional[str] = None
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    timestamp: str = ""

    @property
    def total_tokens(self) -> int:
        """Input plus output tokens, counting missing usage as zero."""
        return (self.input_tokens or 0) + (self.output_tokens or 0)

    def to_dict(self) -> dict:
        return {
            "uuid": self.uuid,
            "parent_uuid": self.parent_uuid,
            "session_id": self.session_id,
            "msg_type": self.msg_type.value,
            "content": self.content,
            "model": self.model,
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "timestamp": self.timestamp,
        }
