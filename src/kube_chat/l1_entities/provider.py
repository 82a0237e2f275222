"""Provider entities: which chat backend a session talks to, and its defaults."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict

DEFAULT_MAX_TOKENS = 4096
CLOUD_TIMEOUT = 60.0
LOCAL_TIMEOUT = CLOUD_TIMEOUT * 2  # local inference is slower

DEFAULT_CLAUDE_MODEL = 'claude-sonnet-4-20250514'
DEFAULT_OPENAI_MODEL = 'gpt-4o'
DEFAULT_OPENAI_URL = 'https://api.openai.com/v1'
DEFAULT_OLLAMA_MODEL = 'llama3.2'
DEFAULT_OLLAMA_URL = 'http://localhost:11434'


class ProviderType(enum.Enum):
    CLAUDE = 'claude'
    OPENAI = 'openai'
    OLLAMA = 'ollama'

    @property
    def requires_credential(self) -> bool:
        return self is not ProviderType.OLLAMA

    @property
    def default_key_env(self) -> str:
        """Fallback environment variable for the API key ('' when none is needed)."""
        return _DEFAULT_KEY_ENV.get(self, '')

    @property
    def default_model(self) -> str:
        return _DEFAULT_MODEL[self]


_DEFAULT_KEY_ENV = {
    ProviderType.CLAUDE: 'ANTHROPIC_API_KEY',
    ProviderType.OPENAI: 'OPENAI_API_KEY',
}

_DEFAULT_MODEL = {
    ProviderType.CLAUDE: DEFAULT_CLAUDE_MODEL,
    ProviderType.OPENAI: DEFAULT_OPENAI_MODEL,
    ProviderType.OLLAMA: DEFAULT_OLLAMA_MODEL,
}


class ProviderDescriptor(BaseModel):
    """Resolved provider settings, fixed for the lifetime of a session.

    Empty ``model``/``base_url`` and zero ``max_tokens`` mean "use the provider default".
    """

    model_config = ConfigDict(frozen=True)

    type: ProviderType
    api_key: str = ''
    model: str = ''
    max_tokens: int = 0
    base_url: str = ''
