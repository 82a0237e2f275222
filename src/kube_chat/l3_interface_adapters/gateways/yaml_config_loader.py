"""Gateway: YAML configuration loader, implements the ConfigLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from kube_chat.l1_entities.config import AppConfig
from kube_chat.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('kc.config')


class YamlConfigLoader:
    """Loads AppConfig from YAML files with merge and override support."""

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> AppConfig:
        data = _load_data(config_path, overrides)
        return AppConfig.model_validate(data)

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        return _load_data(config_path, overrides)


def _load_data(
    config_path: str | None = None,
    overrides: dict | None = None,
) -> dict:
    """Resolve, read, and merge YAML config into a plain dict."""
    data: dict = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    else:
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                log.debug('Using config file %s', default_path)
                data = yaml.safe_load(default_path.read_text(encoding='utf-8')) or {}
                break
    if overrides:
        deep_merge(data, overrides)
    return data


def deep_merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def resolve_config_path(config_path: str | None = None) -> Path:
    """The file to write to: the explicit path, the first existing default, or the primary default."""
    if config_path is not None:
        return Path(config_path)
    for default_path in DEFAULT_CONFIG_PATHS:
        if default_path.exists():
            return default_path
    return DEFAULT_CONFIG_PATHS[0]


def save_api_key(api_key: str, config_path: str | None = None) -> Path:
    """Store *api_key* under ``ai.apiKey`` and enable the assistant. Other keys are preserved."""
    path = resolve_config_path(config_path)
    data: dict = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    deep_merge(data, {'ai': {'apiKey': api_key, 'enabled': True}})

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding='utf-8')
    path.chmod(0o600)
    log.info('API key written to %s', path)
    return path
