"""Context panel: the cluster, context and namespace the chat is scoped to."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Static

from kube_chat.l1_entities.cluster_context import ClusterContext


def format_context_summary(context: ClusterContext) -> str:
    """Rich-markup summary of *context*. Blank fields show as N/A (namespace: all)."""
    summary = (
        f'[yellow]Cluster:[/yellow] {escape(context.cluster_name or "N/A")}'
        f'  [yellow]Context:[/yellow] {escape(context.context_name or "N/A")}'
        f'  [yellow]Namespace:[/yellow] {escape(context.namespace or "all")}'
    )
    if context.resource_type:
        summary += f'  [yellow]View:[/yellow] {escape(context.resource_type)}'
    if context.selected_resource:
        summary += f'\n[yellow]Selected:[/yellow] {escape(context.selected_resource)}'
    return summary


class ContextPanel(Static):
    DEFAULT_CSS = """
    ContextPanel {
        height: auto;
        min-height: 3;
        border: solid $secondary;
        padding: 0 1;
    }
    """

    def __init__(self, context: ClusterContext, **kwargs) -> None:
        super().__init__(format_context_summary(context), **kwargs)
        self.border_title = 'Context'
