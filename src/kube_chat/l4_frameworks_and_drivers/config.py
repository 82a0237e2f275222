"""Application config defaults, merged under user YAML before validation."""

from __future__ import annotations

import copy

from kube_chat.l1_entities.config import AppConfig
from kube_chat.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'ai': {
        'enabled': False,
        'provider': 'claude',
        'apiKey': '',
        'apiKeyEnv': '',
        'model': '',
        'maxTokens': 0,
        'baseURL': '',
        'systemPrompt': '',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
