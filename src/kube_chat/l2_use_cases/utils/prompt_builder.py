"""Pure functions for building LLM prompts from the cluster context."""

from __future__ import annotations

from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l1_entities.errors import PromptBuildError

DEFAULT_SYSTEM_PROMPT = """\
You are a Kubernetes assistant embedded in a terminal cluster browser.
Help the user understand, debug and operate the resources they are looking at.
Be concise. Prefer concrete kubectl commands and YAML snippets over prose.
Never invent resource names, events or log lines you have not been shown.
When a command is destructive (delete, drain, scale to zero), say so explicitly.

Current context:
{context_block}"""


def build_context_block(context: ClusterContext) -> str:
    """Plain-text context lines appended to the system prompt."""
    lines = [
        f'- Cluster: {context.cluster_name or "N/A"}',
        f'- Context: {context.context_name or "N/A"}',
        f'- Namespace: {context.namespace or "all"}',
    ]
    if context.resource_type:
        lines.append(f'- Current view: {context.resource_type}')
    if context.selected_resource:
        lines.append(f'- Selected resource: {context.selected_resource}')
    return '\n'.join(lines)


class SystemPromptBuilder:
    """Default PromptBuilder: fills a template with the cluster context.

    Custom templates may use ``{context_block}`` or any ClusterContext field name.
    """

    def __init__(self, template: str | None = None) -> None:
        self._template = template or DEFAULT_SYSTEM_PROMPT

    def build(self, context: ClusterContext) -> str:
        fields = context.model_dump()
        try:
            return self._template.format(context_block=build_context_block(context), **fields)
        except (KeyError, IndexError, ValueError) as e:
            raise PromptBuildError(f'invalid system prompt template: {type(e).__name__}: {e}') from e
