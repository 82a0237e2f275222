"""Gateway: OpenAI-compatible chat completions client, implements the ChatProvider port.

Works with any OpenAI-compatible API: OpenAI, Azure-style proxies, Groq, Together, vLLM, etc.
"""

from __future__ import annotations

from collections.abc import Sequence

import httpx2
import openai
from openai.types.chat import ChatCompletion
from pydantic import BaseModel, ValidationError

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.errors import DecodeError, ProtocolError, RequestError, TransportError
from kube_chat.l1_entities.provider import CLOUD_TIMEOUT, DEFAULT_MAX_TOKENS, DEFAULT_OPENAI_MODEL, DEFAULT_OPENAI_URL
from kube_chat.l2_use_cases.ports.llm_client import ChatResponse

_ENDPOINT_SUFFIX = '/chat/completions'


class _ErrorDetail(BaseModel):
    message: str
    type: str | None = None
    code: str | int | None = None


class _ErrorEnvelope(BaseModel):
    error: _ErrorDetail


def _status_error(status_code: int, raw: str) -> ProtocolError:
    try:
        detail = _ErrorEnvelope.model_validate_json(raw).error
    except ValidationError:
        return ProtocolError(f'API error (status {status_code}): {raw}', status_code)
    kind = detail.type or detail.code or 'error'
    return ProtocolError(f'API error: {kind} - {detail.message}', status_code)


def normalize_base_url(base_url: str) -> str:
    """Accept both the API base and the full ``/chat/completions`` endpoint form."""
    url = (base_url or DEFAULT_OPENAI_URL).rstrip('/')
    if url.endswith(_ENDPOINT_SUFFIX):
        url = url[: -len(_ENDPOINT_SUFFIX)]
    return url


class OpenAIChatProvider:
    """Wraps openai.OpenAI to implement the ChatProvider protocol."""

    def __init__(
        self,
        api_key: str = '',
        model: str = '',
        max_tokens: int = 0,
        base_url: str = '',
        http_client: httpx2.Client | None = None,
    ) -> None:
        self.model = model or DEFAULT_OPENAI_MODEL
        self.max_tokens = max_tokens if max_tokens > 0 else DEFAULT_MAX_TOKENS
        self.base_url = normalize_base_url(base_url)
        self._client = openai.OpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=CLOUD_TIMEOUT,
            max_retries=0,
            http_client=http_client,
        )

    @property
    def name(self) -> str:
        return 'OpenAI'

    def send(self, system: str, messages: Sequence[ChatMessage]) -> ChatResponse:
        wire_messages = [{'role': 'system', 'content': system}] if system else []
        wire_messages.extend(m.wire_dict() for m in messages)

        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=wire_messages,  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            raise _status_error(e.status_code, e.response.text) from e
        except openai.APIConnectionError as e:
            raise TransportError(f'failed to send request: {e}') from e
        except openai.APIResponseValidationError as e:
            raise DecodeError(f'failed to parse response: {e}') from e
        except TypeError as e:
            raise RequestError(f'failed to create request: {e}') from e
        except ValueError as e:
            raise DecodeError(f'failed to parse response: {e}') from e

        # non-JSON success bodies come back from the SDK as plain text
        if not isinstance(resp, ChatCompletion):
            raise DecodeError(f'failed to parse response: unexpected body {str(resp)[:200]!r}')

        choices = getattr(resp, 'choices', None) or []
        content = (choices[0].message.content or '') if choices else ''
        usage = getattr(resp, 'usage', None)
        return ChatResponse(
            content=content,
            model=getattr(resp, 'model', '') or '',
            input_tokens=getattr(usage, 'prompt_tokens', 0) or 0,
            output_tokens=getattr(usage, 'completion_tokens', 0) or 0,
        )
