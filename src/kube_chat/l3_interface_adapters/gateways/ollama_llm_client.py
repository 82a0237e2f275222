"""Gateway: Ollama LLM client, implements the ChatProvider port."""

from __future__ import annotations

from collections.abc import Sequence

import httpx
import ollama as ollama_sync

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.errors import DecodeError, ProtocolError, RequestError, TransportError
from kube_chat.l1_entities.provider import DEFAULT_OLLAMA_MODEL, DEFAULT_OLLAMA_URL, LOCAL_TIMEOUT
from kube_chat.l2_use_cases.ports.llm_client import ChatResponse


def _raw_error_body(e: ollama_sync.ResponseError) -> str:
    """The undecoded response text; the SDK only keeps the extracted ``error`` field."""
    cause = e.__context__
    if isinstance(cause, httpx.HTTPStatusError):
        return cause.response.text
    return e.error


class OllamaChatProvider:
    """Wraps ollama.Client to implement the ChatProvider protocol. No credentials."""

    def __init__(self, model: str = '', host: str = '', **client_kwargs) -> None:
        self.model = model or DEFAULT_OLLAMA_MODEL
        self.host = host or DEFAULT_OLLAMA_URL
        self._client = ollama_sync.Client(host=self.host, timeout=LOCAL_TIMEOUT, **client_kwargs)

    @property
    def name(self) -> str:
        return 'Ollama'

    def send(self, system: str, messages: Sequence[ChatMessage]) -> ChatResponse:
        wire_messages = [{'role': 'system', 'content': system}] if system else []
        wire_messages.extend(m.wire_dict() for m in messages)

        try:
            resp = self._client.chat(model=self.model, messages=wire_messages, stream=False)
        except ollama_sync.ResponseError as e:
            raise ProtocolError(f'API error (status {e.status_code}): {_raw_error_body(e)}', e.status_code) from e
        except (ConnectionError, httpx.HTTPError) as e:
            raise TransportError(f'failed to send request (is Ollama running?): {e}') from e
        except TypeError as e:
            raise RequestError(f'failed to create request: {e}') from e
        except ValueError as e:
            # invalid JSON or a body that does not match the chat response schema
            raise DecodeError(f'failed to parse response: {e}') from e

        return ChatResponse(
            content=resp.message.content or '',
            model=resp.model or self.model,
            input_tokens=resp.prompt_eval_count or 0,
            output_tokens=resp.eval_count or 0,
        )

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            self._client.list()
            return True, ''
        except Exception as e:
            return False, f'Cannot connect to Ollama: {e}'

    def check_models(self, models: list[str]) -> list[str]:
        """Return model names from the list that are not pulled locally."""
        try:
            missing = []
            for model in models:
                try:
                    self._client.show(model)
                except ollama_sync.ResponseError:
                    missing.append(model)
            return missing
        except Exception:
            return []
