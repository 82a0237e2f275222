"""Transcript entity: ordered chat history owned by one session."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kube_chat.l1_entities.chat_message import ChatMessage


class Transcript(BaseModel):
    """Append-only list of chat messages. ``clear`` swaps in an empty list."""

    messages: list[ChatMessage] = Field(default_factory=list)

    def append(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages = []

    def snapshot(self) -> tuple[ChatMessage, ...]:
        """Immutable copy safe to hand to a worker thread."""
        return tuple(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
