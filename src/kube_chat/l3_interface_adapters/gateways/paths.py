"""Shared path constants for configuration, logs and kubeconfig."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('kube-chat')
LOG_DIR = user_log_path('kube-chat')

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]

DEFAULT_KUBECONFIG = Path.home() / '.kube' / 'config'
