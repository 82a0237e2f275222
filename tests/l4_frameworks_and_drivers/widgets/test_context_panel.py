"""Tests for the context summary shown above the chat."""

from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l4_frameworks_and_drivers.widgets.context_panel import format_context_summary


class TestFormatContextSummary:
    def test_full_context(self, sample_context):
        summary = format_context_summary(sample_context)
        assert '[yellow]Cluster:[/yellow] prod-eu' in summary
        assert '[yellow]Namespace:[/yellow] payments' in summary
        assert '[yellow]View:[/yellow] pods' in summary
        assert summary.endswith('\n[yellow]Selected:[/yellow] payments/api-7c9f')

    def test_blank_context_placeholders(self):
        summary = format_context_summary(ClusterContext())
        assert '[yellow]Cluster:[/yellow] N/A' in summary
        assert '[yellow]Context:[/yellow] N/A' in summary
        assert '[yellow]Namespace:[/yellow] all' in summary
        assert 'View' not in summary
        assert 'Selected' not in summary

    def test_markup_escaped(self):
        summary = format_context_summary(ClusterContext(cluster_name='[bold]x'))
        assert r'\[bold]x' in summary
