"""Use case: send one chat turn through the provider."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l1_entities.errors import AssistantError, PromptBuildError
from kube_chat.l2_use_cases.ports.llm_client import ChatProvider
from kube_chat.l2_use_cases.ports.prompt_builder import PromptBuilder

log = logging.getLogger('kc.llm')


def error_entry(text: str) -> ChatMessage:
    """Synthetic assistant-role transcript entry carrying an error."""
    return ChatMessage(role='assistant', content=text, is_error=True)


class SendTurnUseCase:
    """Builds the system prompt, calls the provider, and folds every outcome into one message."""

    def __init__(self, provider: ChatProvider, prompt_builder: PromptBuilder) -> None:
        self._provider = provider
        self._prompt_builder = prompt_builder

    def execute(self, context: ClusterContext, messages: Sequence[ChatMessage]) -> ChatMessage:
        """Run one turn. Never raises: failures come back as error entries."""
        try:
            system = self._prompt_builder.build(context)
        except PromptBuildError as e:
            log.warning('System prompt build failed: %s', e)
            return error_entry(f'Error building prompt: {e}')

        log.info('%s request: %d messages, system prompt %d chars', self._provider.name, len(messages), len(system))

        try:
            resp = self._provider.send(system, messages)
        except AssistantError as e:
            log.warning('%s error: %s', self._provider.name, e)
            return error_entry(f'Error: {e}')
        except Exception as e:
            log.error('%s unexpected failure: %s', self._provider.name, e, exc_info=True)
            return error_entry(f'Error: {type(e).__name__}: {e}')

        log.info(
            '%s response: model=%s input_tokens=%d output_tokens=%d (%d chars)',
            self._provider.name,
            resp.model,
            resp.input_tokens,
            resp.output_tokens,
            len(resp.content),
        )
        log.debug('LLM raw response: %s', resp.content[:500])
        return ChatMessage(role='assistant', content=resp.content)
