"""Status bar: bottom bar showing provider, turn count, activity and keybinding hints."""

from __future__ import annotations

import time

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with provider state and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: auto;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    provider_label: reactive[str] = reactive('')
    turn_count: reactive[int] = reactive(0)
    activity: reactive[str] = reactive('')
    last_reply_time: reactive[float] = reactive(0.0)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        left_parts = []
        if self.provider_label:
            left_parts.append(self.provider_label)
        left_parts.append(f'{self.turn_count} msgs')
        if self.last_reply_time > 0:
            since = time.monotonic() - self.last_reply_time
            if since < 60:
                left_parts.append(f'last {int(since)}s ago')
            else:
                left_parts.append(f'last {int(since / 60)}m ago')
        if self.activity:
            left_parts.append(f'⟳ {self.activity}')
        left = ' │ '.join(left_parts)

        hints = self.keybinding_hints
        if hints:
            content_width = (self.size.width or 80) - 2
            hints_width = cell_len(hints.replace(r'\[', '['))
            gap = content_width - cell_len(left) - hints_width
            if gap >= 2:
                left = left + ' ' * gap + hints
        return left
