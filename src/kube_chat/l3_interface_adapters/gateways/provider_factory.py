"""Provider factory: one ChatProvider instance per session, chosen by provider type."""

from __future__ import annotations

from collections.abc import Callable

from kube_chat.l1_entities.errors import ConfigurationError
from kube_chat.l1_entities.provider import ProviderDescriptor, ProviderType
from kube_chat.l2_use_cases.ports.llm_client import ChatProvider
from kube_chat.l3_interface_adapters.gateways.anthropic_llm_client import AnthropicChatProvider
from kube_chat.l3_interface_adapters.gateways.ollama_llm_client import OllamaChatProvider
from kube_chat.l3_interface_adapters.gateways.openai_llm_client import OpenAIChatProvider


def _claude(d: ProviderDescriptor) -> ChatProvider:
    # baseURL only retargets the OpenAI-compatible and Ollama backends
    return AnthropicChatProvider(api_key=d.api_key, model=d.model, max_tokens=d.max_tokens)


def _openai(d: ProviderDescriptor) -> ChatProvider:
    return OpenAIChatProvider(api_key=d.api_key, model=d.model, max_tokens=d.max_tokens, base_url=d.base_url)


def _ollama(d: ProviderDescriptor) -> ChatProvider:
    return OllamaChatProvider(model=d.model, host=d.base_url)


_BUILDERS: dict[ProviderType, Callable[[ProviderDescriptor], ChatProvider]] = {
    ProviderType.CLAUDE: _claude,
    ProviderType.OPENAI: _openai,
    ProviderType.OLLAMA: _ollama,
}


def create_provider(descriptor: ProviderDescriptor) -> ChatProvider:
    """Build a fresh provider for *descriptor*. Never cached."""
    builder = _BUILDERS.get(descriptor.type)
    if builder is None:
        raise ConfigurationError(f'unknown provider type: {descriptor.type}')
    return builder(descriptor)
