"""Chat message entity: one immutable entry of a conversation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """A single message in an LLM conversation.

    ``is_error`` flags synthetic error entries for display; it never goes on the wire.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal['system', 'user', 'assistant']
    content: str
    is_error: bool = False

    def wire_dict(self) -> dict[str, str]:
        return {'role': self.role, 'content': self.content}
