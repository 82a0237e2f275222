"""Tests for provider selection."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from kube_chat.l1_entities.config import AIConfig
from kube_chat.l1_entities.errors import ConfigurationError
from kube_chat.l1_entities.provider import ProviderDescriptor
from kube_chat.l2_use_cases.credentials import build_descriptor
from kube_chat.l3_interface_adapters.gateways.anthropic_llm_client import AnthropicChatProvider
from kube_chat.l3_interface_adapters.gateways.ollama_llm_client import OllamaChatProvider
from kube_chat.l3_interface_adapters.gateways.openai_llm_client import OpenAIChatProvider
from kube_chat.l3_interface_adapters.gateways.provider_factory import create_provider

_GW = 'kube_chat.l3_interface_adapters.gateways'


@pytest.fixture(autouse=True)
def _no_real_clients():
    with (
        patch(f'{_GW}.anthropic_llm_client.anthropic.Anthropic') as anthropic_cls,
        patch(f'{_GW}.openai_llm_client.openai.OpenAI'),
        patch(f'{_GW}.ollama_llm_client.ollama_sync.Client') as ollama_cls,
    ):
        yield ollama_cls, anthropic_cls


def _provider_for(**ai) -> object:
    return create_provider(build_descriptor(AIConfig(**ai), {}))


class TestCreateProvider:
    def test_empty_provider_is_claude(self):
        provider = _provider_for()
        assert isinstance(provider, AnthropicChatProvider)
        assert provider.name == 'Claude'
        assert provider.model == 'claude-sonnet-4-20250514'

    def test_gpt_is_openai(self):
        provider = _provider_for(provider='gpt')
        assert isinstance(provider, OpenAIChatProvider)
        assert provider.model == 'gpt-4o'

    def test_local_is_ollama(self, _no_real_clients):
        ollama_cls, _ = _no_real_clients
        provider = _provider_for(provider='local')
        assert isinstance(provider, OllamaChatProvider)
        assert provider.host == 'http://localhost:11434'
        assert ollama_cls.call_args.kwargs['host'] == 'http://localhost:11434'

    def test_descriptor_values_forwarded(self):
        provider = _provider_for(provider='openai', model='gpt-4.1', max_tokens=77, base_url='http://proxy/v1')
        assert provider.model == 'gpt-4.1'
        assert provider.max_tokens == 77
        assert provider.base_url == 'http://proxy/v1'

    def test_claude_ignores_base_url(self, _no_real_clients):
        _, anthropic_cls = _no_real_clients
        provider = _provider_for(base_url='http://proxy/v1')
        assert isinstance(provider, AnthropicChatProvider)
        assert 'base_url' not in anthropic_cls.call_args.kwargs

    def test_fresh_instance_each_call(self):
        d = build_descriptor(AIConfig(), {})
        assert create_provider(d) is not create_provider(d)

    def test_unknown_type_raises(self):
        with pytest.raises(ConfigurationError, match='unknown provider type'):
            create_provider(ProviderDescriptor.model_construct(type='bogus'))
