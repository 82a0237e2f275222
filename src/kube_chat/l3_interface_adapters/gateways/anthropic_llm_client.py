"""Gateway: Anthropic Messages API client, implements the ChatProvider port."""

from __future__ import annotations

from collections.abc import Sequence

import anthropic
import httpx2
from anthropic.types import Message
from pydantic import BaseModel, ValidationError

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.errors import DecodeError, ProtocolError, RequestError, TransportError
from kube_chat.l1_entities.provider import CLOUD_TIMEOUT, DEFAULT_CLAUDE_MODEL, DEFAULT_MAX_TOKENS
from kube_chat.l2_use_cases.ports.llm_client import ChatResponse


class _ErrorDetail(BaseModel):
    type: str
    message: str


class _ErrorEnvelope(BaseModel):
    type: str = 'error'
    error: _ErrorDetail


def _status_error(status_code: int, raw: str) -> ProtocolError:
    try:
        envelope = _ErrorEnvelope.model_validate_json(raw)
    except ValidationError:
        return ProtocolError(f'API error (status {status_code}): {raw}', status_code)
    return ProtocolError(f'API error: {envelope.error.type} - {envelope.error.message}', status_code)


class AnthropicChatProvider:
    """Wraps anthropic.Anthropic to implement the ChatProvider protocol.

    The system prompt travels in the dedicated ``system`` field and is never
    injected into ``messages``. The endpoint is always Anthropic's own.
    """

    def __init__(
        self,
        api_key: str = '',
        model: str = '',
        max_tokens: int = 0,
        http_client: httpx2.Client | None = None,
    ) -> None:
        self.model = model or DEFAULT_CLAUDE_MODEL
        self.max_tokens = max_tokens if max_tokens > 0 else DEFAULT_MAX_TOKENS
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=CLOUD_TIMEOUT,
            max_retries=0,
            http_client=http_client,
        )

    @property
    def name(self) -> str:
        return 'Claude'

    def send(self, system: str, messages: Sequence[ChatMessage]) -> ChatResponse:
        params: dict = {
            'model': self.model,
            'max_tokens': self.max_tokens,
            'messages': [m.wire_dict() for m in messages],
        }
        if system:
            params['system'] = system

        try:
            resp = self._client.messages.create(**params)
        except anthropic.APIStatusError as e:
            raise _status_error(e.status_code, e.response.text) from e
        except anthropic.APIConnectionError as e:
            raise TransportError(f'failed to send request: {e}') from e
        except anthropic.APIResponseValidationError as e:
            raise DecodeError(f'failed to parse response: {e}') from e
        except TypeError as e:
            # SDK argument/auth validation happens before anything is sent
            raise RequestError(f'failed to create request: {e}') from e
        except ValueError as e:
            raise DecodeError(f'failed to parse response: {e}') from e

        # non-JSON success bodies come back from the SDK as plain text
        if not isinstance(resp, Message):
            raise DecodeError(f'failed to parse response: unexpected body {str(resp)[:200]!r}')

        blocks = getattr(resp, 'content', None) or []
        content = next((block.text for block in blocks if block.type == 'text'), '')
        usage = getattr(resp, 'usage', None)
        return ChatResponse(
            content=content,
            model=getattr(resp, 'model', '') or '',
            input_tokens=getattr(usage, 'input_tokens', 0) or 0,
            output_tokens=getattr(usage, 'output_tokens', 0) or 0,
        )
