"""Configuration Pydantic models: YAML schema and the provider defaulting cascade."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kube_chat.l1_entities.provider import DEFAULT_MAX_TOKENS, ProviderType

_PROVIDER_ALIASES = {
    'openai': ProviderType.OPENAI,
    'gpt': ProviderType.OPENAI,
    'chatgpt': ProviderType.OPENAI,
    'ollama': ProviderType.OLLAMA,
    'local': ProviderType.OLLAMA,
}


class AIConfig(BaseModel):
    """The ``ai:`` section of the config file. Keys use the camelCase YAML names."""

    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    provider: str = ''
    api_key: str = Field(default='', alias='apiKey')
    api_key_env: str = Field(default='', alias='apiKeyEnv')
    model: str = ''
    max_tokens: int = Field(default=0, alias='maxTokens')
    base_url: str = Field(default='', alias='baseURL')
    system_prompt: str = Field(default='', alias='systemPrompt')

    def provider_type(self) -> ProviderType:
        """Map the free-form provider name onto a backend. Unknown names mean Claude."""
        return _PROVIDER_ALIASES.get(self.provider.strip().lower(), ProviderType.CLAUDE)

    def resolved_model(self) -> str:
        return self.model or self.provider_type().default_model

    def resolved_max_tokens(self) -> int:
        return self.max_tokens if self.max_tokens > 0 else DEFAULT_MAX_TOKENS


class AppConfig(BaseModel):
    ai: AIConfig = Field(default_factory=AIConfig)
