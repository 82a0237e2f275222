"""Textual Message subclasses: contracts between send workers and the App."""

from __future__ import annotations

from textual.message import Message

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l3_interface_adapters.controllers.session_controller import PendingTurn


class TurnCompleted(Message):
    """Posted by a send worker thread when the reply (or error entry) for a turn is ready."""

    def __init__(self, turn: PendingTurn, reply: ChatMessage) -> None:
        super().__init__()
        self.turn = turn
        self.reply = reply
