"""Transcript panel: scrolling RichLog of the chat conversation."""

from __future__ import annotations

import pyperclip
from rich.markup import escape
from textual.binding import Binding
from textual.widgets import RichLog

from kube_chat.l1_entities.chat_message import ChatMessage


class TranscriptPanel(RichLog):
    """Auto-scrolling chat display. Redrawn in full from the transcript on every change."""

    DEFAULT_CSS = """
    TranscriptPanel {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    TranscriptPanel:focus {
        border: solid $accent;
    }
    """

    BINDINGS = [Binding('c', 'copy_content', 'Copy', show=False)]

    def __init__(self, title: str = 'Chat', **kwargs) -> None:
        super().__init__(highlight=False, markup=True, wrap=True, auto_scroll=True, **kwargs)
        self.border_title = title
        self._all_text: list[str] = []

    def show_transcript(self, messages: list[ChatMessage], assistant_label: str) -> None:
        """Replace the displayed conversation with *messages*."""
        self.clear()
        self._all_text = []
        for msg in messages:
            if msg.role == 'user':
                label, style = 'You', 'bold cyan'
            elif msg.role == 'assistant':
                label, style = assistant_label, 'bold green'
            else:
                continue
            self._all_text.append(f'{label}: {msg.content}')
            body = f'[red]{escape(msg.content)}[/red]' if msg.is_error else escape(msg.content)
            self.write(f'[{style}]{escape(label)}:[/{style}] {body}')
            self.write('')

    def show_thinking(self) -> None:
        self.write('[dim]Thinking...[/dim]')

    def action_copy_content(self) -> None:
        """Copy the full conversation to the system clipboard."""
        if not self._all_text:
            self.app.notify('No conversation to copy', severity='warning', timeout=2)
            return
        pyperclip.copy('\n\n'.join(self._all_text))
        self.app.notify('Conversation copied', timeout=2)
