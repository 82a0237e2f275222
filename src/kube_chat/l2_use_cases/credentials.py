"""API key resolution and the one-shot provider descriptor build."""

from __future__ import annotations

import os
from collections.abc import Mapping

from kube_chat.l1_entities.config import AIConfig
from kube_chat.l1_entities.provider import ProviderDescriptor


def resolve_api_key(config: AIConfig, environ: Mapping[str, str] | None = None) -> str:
    """Return the API key, first non-empty wins.

    Order: explicit ``apiKey``, the variable named by ``apiKeyEnv``, the provider's
    default variable (cloud providers only). Returns '' when nothing is set.
    """
    env = os.environ if environ is None else environ
    if config.api_key:
        return config.api_key
    if config.api_key_env and env.get(config.api_key_env):
        return env[config.api_key_env]
    default_env = config.provider_type().default_key_env
    if default_env:
        return env.get(default_env, '')
    return ''


def credential_env_var(config: AIConfig) -> str:
    """Name of the environment variable a user should set to supply the key."""
    return config.api_key_env or config.provider_type().default_key_env


def build_descriptor(config: AIConfig, environ: Mapping[str, str] | None = None) -> ProviderDescriptor:
    """Resolve the whole config cascade once, at session start."""
    return ProviderDescriptor(
        type=config.provider_type(),
        api_key=resolve_api_key(config, environ),
        model=config.resolved_model(),
        max_tokens=config.resolved_max_tokens(),
        base_url=config.base_url,
    )
