"""Port: chat provider: one whole-response round trip per call."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from kube_chat.l1_entities.chat_message import ChatMessage


@dataclass(frozen=True)
class ChatResponse:
    """Normalized response from a chat provider."""

    content: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class ChatProvider(Protocol):
    """Abstract chat backend. Zero SDK types leak through."""

    @property
    def name(self) -> str:
        """Human-readable provider name shown in the UI."""
        ...

    def send(self, system: str, messages: Sequence[ChatMessage]) -> ChatResponse:
        """Send the conversation. Raises an AssistantError subclass on failure."""
        ...
