"""ChatApp: Textual shell around one chat session."""

from __future__ import annotations

import logging
import time
from functools import partial
from pathlib import Path

from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from kube_chat.l3_interface_adapters.controllers.session_controller import PendingTurn, SessionController
from kube_chat.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from kube_chat.l4_frameworks_and_drivers.messages import TurnCompleted
from kube_chat.l4_frameworks_and_drivers.widgets.context_panel import ContextPanel
from kube_chat.l4_frameworks_and_drivers.widgets.status_bar import StatusBar
from kube_chat.l4_frameworks_and_drivers.widgets.transcript_panel import TranscriptPanel

log = logging.getLogger('kc.app')


class ChatApp(TextualApp):
    """Chat TUI. All transcript mutation and redraws happen on the app thread.

    Each turn runs ``SessionController.send`` in a thread worker, which hands its
    result back through ``post_message(TurnCompleted(...))``.
    """

    CSS = """
    #header {
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
    }
    #transcript-panel {
        height: 1fr;
    }
    #prompt-input {
        margin: 0 0 1 0;
    }
    """

    BINDINGS = [
        Binding('escape', 'quit_app', 'Quit', priority=True),
        Binding('ctrl+l', 'clear_chat', 'Clear', priority=True),
        Binding('tab', 'focus_next', 'Switch Panel', show=False),
    ]

    def __init__(
        self,
        controller: SessionController,
        question: str = '',
        log_dir: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._initial_question = question
        if log_dir is not None:
            setup_file_logging(log_dir)

    def _build_header_text(self) -> str:
        header_text = f'  kube-chat | AI Assistant ({self._controller.provider_name})'
        if self._controller.descriptor.model:
            header_text += f' — {self._controller.descriptor.model}'
        return header_text

    def compose(self) -> ComposeResult:
        yield Static(self._build_header_text(), id='header', markup=False)
        yield ContextPanel(self._controller.context, id='context-panel')
        yield TranscriptPanel(id='transcript-panel')
        yield Input(placeholder='Ask about your cluster…', id='prompt-input')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        bar.provider_label = self._controller.provider_name
        bar.keybinding_hints = r'\[Enter] send  \[Ctrl+L] clear  \[Tab] switch  \[Esc] quit'
        self.query_one('#prompt-input', Input).focus()
        self.set_interval(1.0, self._refresh_status_bar)
        if self._initial_question:
            self.submit_turn(self._initial_question)

    def _refresh_status_bar(self) -> None:
        try:
            bar = self.query_one('#status-bar', StatusBar)
            bar.refresh()
        except Exception:  # noqa: S110 -- TUI race guard; widget may not exist during shutdown  # pragma: no cover
            pass

    def _refresh_transcript(self) -> None:
        panel = self.query_one('#transcript-panel', TranscriptPanel)
        panel.show_transcript(self._controller.transcript.messages, self._controller.provider_name)
        bar = self.query_one('#status-bar', StatusBar)
        bar.turn_count = len(self._controller.transcript)

    # --- Turn handling ---

    def submit_turn(self, text: str) -> bool:
        """Append a user turn and dispatch its send. Returns False if nothing was sent."""
        if self._controller.awaiting and text.strip():
            self.notify(
                f'Waiting for {self._controller.provider_name}, please wait',
                severity='warning',
                timeout=3,
            )
            return False
        turn = self._controller.append_user_turn(text)
        if turn is None:
            return False
        self._refresh_transcript()
        self._dispatch_turn(turn)
        return True

    def _dispatch_turn(self, turn: PendingTurn) -> None:
        self.query_one('#status-bar', StatusBar).activity = 'Thinking...'
        self.query_one('#transcript-panel', TranscriptPanel).show_thinking()
        self.run_worker(partial(self._send_worker_thread, turn), thread=True, group='send')

    def _send_worker_thread(self, turn: PendingTurn) -> None:
        reply = self._controller.send(turn)
        self.post_message(TurnCompleted(turn=turn, reply=reply))

    # --- Message Handlers ---

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != 'prompt-input':
            return
        if self.submit_turn(event.value):
            event.input.value = ''

    def on_turn_completed(self, message: TurnCompleted) -> None:
        if not self._controller.apply_reply(message.turn, message.reply):
            return
        bar = self.query_one('#status-bar', StatusBar)
        bar.activity = ''
        bar.last_reply_time = time.monotonic()
        self._refresh_transcript()

    # --- Actions ---

    def action_clear_chat(self) -> None:
        self._controller.clear()
        self.query_one('#status-bar', StatusBar).activity = ''
        self._refresh_transcript()

    def action_quit_app(self) -> None:
        self.exit()
