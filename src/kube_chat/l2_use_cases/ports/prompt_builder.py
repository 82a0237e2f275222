"""Port: system prompt builder."""

from __future__ import annotations

from typing import Protocol

from kube_chat.l1_entities.cluster_context import ClusterContext


class PromptBuilder(Protocol):
    def build(self, context: ClusterContext) -> str:
        """Return the system prompt for *context*. Raises PromptBuildError."""
        ...
