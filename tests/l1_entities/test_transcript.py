"""Tests for ChatMessage and Transcript entities."""

import pytest
from pydantic import ValidationError

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.transcript import Transcript


class TestChatMessage:
    def test_invalid_role_raises(self):
        with pytest.raises(ValidationError):
            ChatMessage(role='tool', content='x')  # type: ignore[arg-type]

    def test_immutable(self):
        msg = ChatMessage(role='user', content='hi')
        with pytest.raises(ValidationError):
            msg.content = 'changed'  # type: ignore[misc]

    def test_wire_dict_drops_error_flag(self):
        msg = ChatMessage(role='assistant', content='Error: x', is_error=True)
        assert msg.wire_dict() == {'role': 'assistant', 'content': 'Error: x'}


class TestTranscript:
    def test_append_preserves_order(self):
        t = Transcript()
        t.append(ChatMessage(role='user', content='1'))
        t.append(ChatMessage(role='assistant', content='2'))
        t.append(ChatMessage(role='user', content='3'))
        assert [m.content for m in t.messages] == ['1', '2', '3']
        assert len(t) == 3

    def test_snapshot_is_detached(self):
        t = Transcript()
        t.append(ChatMessage(role='user', content='1'))
        snap = t.snapshot()
        t.append(ChatMessage(role='assistant', content='2'))
        assert len(snap) == 1
        assert isinstance(snap, tuple)

    def test_clear(self):
        t = Transcript()
        t.append(ChatMessage(role='user', content='1'))
        snap = t.snapshot()
        t.clear()
        assert len(t) == 0
        assert len(snap) == 1
