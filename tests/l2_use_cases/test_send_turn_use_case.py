"""Tests for SendTurnUseCase."""

from __future__ import annotations

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l1_entities.errors import DecodeError, ProtocolError, TransportError
from kube_chat.l2_use_cases.send_turn_use_case import SendTurnUseCase, error_entry
from tests.conftest import FailingProvider, FakeChatProvider, FakePromptBuilder

HISTORY = (
    ChatMessage(role='user', content='why is my pod pending?'),
    ChatMessage(role='assistant', content='Check events.'),
    ChatMessage(role='user', content='how?'),
)


class TestSendTurnUseCase:
    def test_success_returns_assistant_message(self, sample_context):
        provider = FakeChatProvider(response='kubectl describe pod')
        builder = FakePromptBuilder(prompt='SYS')
        uc = SendTurnUseCase(provider, builder)

        reply = uc.execute(sample_context, HISTORY)

        assert reply == ChatMessage(role='assistant', content='kubectl describe pod')
        assert reply.is_error is False
        system, messages = provider.send_calls[0]
        assert system == 'SYS'
        assert messages == list(HISTORY)
        assert builder.build_calls == [sample_context]

    def test_prompt_build_failure_never_calls_provider(self):
        provider = FakeChatProvider()
        uc = SendTurnUseCase(provider, FakePromptBuilder(error='bad template'))

        reply = uc.execute(ClusterContext(), HISTORY)

        assert reply.is_error
        assert reply.role == 'assistant'
        assert reply.content == 'Error building prompt: bad template'
        assert provider.send_calls == []

    def test_provider_error_becomes_entry(self):
        uc = SendTurnUseCase(FailingProvider(TransportError('failed to send request: refused')), FakePromptBuilder())
        reply = uc.execute(ClusterContext(), HISTORY)
        assert reply.is_error
        assert reply.content == 'Error: failed to send request: refused'

    def test_protocol_error_message_forwarded(self):
        err = ProtocolError('API error: authentication_error - invalid x-api-key', 401)
        uc = SendTurnUseCase(FailingProvider(err), FakePromptBuilder())
        reply = uc.execute(ClusterContext(), HISTORY)
        assert reply.content == 'Error: API error: authentication_error - invalid x-api-key'

    def test_decode_error_becomes_entry(self):
        uc = SendTurnUseCase(FailingProvider(DecodeError('failed to parse response: x')), FakePromptBuilder())
        assert uc.execute(ClusterContext(), HISTORY).content == 'Error: failed to parse response: x'

    def test_unexpected_exception_contained(self):
        provider = FakeChatProvider()
        provider.set_error(RuntimeError('boom'))
        uc = SendTurnUseCase(provider, FakePromptBuilder())
        reply = uc.execute(ClusterContext(), HISTORY)
        assert reply.is_error
        assert reply.content == 'Error: RuntimeError: boom'

    def test_empty_content_is_not_an_error(self):
        uc = SendTurnUseCase(FakeChatProvider(response=''), FakePromptBuilder())
        reply = uc.execute(ClusterContext(), HISTORY)
        assert reply.content == ''
        assert reply.is_error is False


def test_error_entry_shape():
    entry = error_entry('Error: x')
    assert entry.role == 'assistant'
    assert entry.is_error
    assert entry.content == 'Error: x'
