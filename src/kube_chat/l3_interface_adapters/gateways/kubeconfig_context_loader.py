"""Gateway: read the active cluster context from a kubeconfig file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l3_interface_adapters.gateways.paths import DEFAULT_KUBECONFIG

log = logging.getLogger('kc.config')


def _named(entries: list | None, name: str) -> dict:
    for entry in entries or []:
        if isinstance(entry, dict) and entry.get('name') == name:
            return entry.get('context') or {}
    return {}


class KubeconfigContextLoader:
    """Builds a ClusterContext from ``current-context``. Missing or broken files yield an empty context."""

    def __init__(self, path: Path | None = None) -> None:
        if path is None:
            env = os.environ.get('KUBECONFIG', '')
            # KUBECONFIG may list several files; the first one holds current-context in practice
            first = env.split(os.pathsep)[0] if env else ''
            path = Path(first) if first else DEFAULT_KUBECONFIG
        self._path = path

    def load(self) -> ClusterContext:
        if not self._path.exists():
            return ClusterContext()
        try:
            data = yaml.safe_load(self._path.read_text(encoding='utf-8')) or {}
        except (OSError, yaml.YAMLError) as e:
            log.warning('Cannot read kubeconfig %s: %s', self._path, e)
            return ClusterContext()
        if not isinstance(data, dict):
            return ClusterContext()

        current = data.get('current-context') or ''
        ctx = _named(data.get('contexts'), current) if current else {}
        return ClusterContext(
            context_name=current,
            cluster_name=ctx.get('cluster') or '',
            namespace=ctx.get('namespace') or '',
        )
