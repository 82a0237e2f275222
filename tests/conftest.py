"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from pathlib import Path

import pytest

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l1_entities.config import AppConfig
from kube_chat.l1_entities.errors import AssistantError, PromptBuildError
from kube_chat.l1_entities.provider import ProviderDescriptor, ProviderType
from kube_chat.l2_use_cases.ports.llm_client import ChatResponse
from kube_chat.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeChatProvider:
    """Fake chat provider for L2/L3/L4 tests."""

    def __init__(self, response: str = 'Fake LLM response', name: str = 'Fake', model: str = 'fake-model'):
        self._response = response
        self._name = name
        self._model = model
        self._error: Exception | None = None
        self.send_calls: list[tuple[str, list[ChatMessage]]] = []
        self.release = threading.Event()
        self.release.set()

    @property
    def name(self) -> str:
        return self._name

    def send(self, system: str, messages: Sequence[ChatMessage]) -> ChatResponse:
        self.send_calls.append((system, list(messages)))
        self.release.wait(timeout=5)
        if self._error is not None:
            raise self._error
        return ChatResponse(content=self._response, model=self._model, input_tokens=3, output_tokens=5)

    def set_response(self, response: str) -> None:
        self._response = response

    def set_error(self, error: Exception | None) -> None:
        self._error = error


class FakePromptBuilder:
    """Fake prompt builder; records the contexts it was asked to render."""

    def __init__(self, prompt: str = 'You are a test assistant.', error: str = ''):
        self._prompt = prompt
        self._error = error
        self.build_calls: list[ClusterContext] = []

    def build(self, context: ClusterContext) -> str:
        self.build_calls.append(context)
        if self._error:
            raise PromptBuildError(self._error)
        return self._prompt


class FailingProvider(FakeChatProvider):
    """Provider whose send always raises the given AssistantError."""

    def __init__(self, error: AssistantError):
        super().__init__()
        self.set_error(error)


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_context() -> ClusterContext:
    return ClusterContext(
        cluster_name='prod-eu',
        context_name='prod-eu-admin',
        namespace='payments',
        resource_type='pods',
        selected_resource='payments/api-7c9f',
    )


@pytest.fixture
def claude_descriptor() -> ProviderDescriptor:
    return ProviderDescriptor(type=ProviderType.CLAUDE, api_key='sk-test', model='claude-test', max_tokens=1024)


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
ai:
  enabled: true
  provider: gpt
  apiKeyEnv: MY_OPENAI_KEY
  model: gpt-4o-mini
  maxTokens: 2048
  baseURL: https://llm.internal/v1
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_provider() -> FakeChatProvider:
    return FakeChatProvider()


@pytest.fixture
def fake_prompt_builder() -> FakePromptBuilder:
    return FakePromptBuilder()
