"""SessionController: owns the transcript and turns every send outcome into one entry."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kube_chat.l1_entities.chat_message import ChatMessage
from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l1_entities.errors import CredentialError
from kube_chat.l1_entities.provider import ProviderDescriptor
from kube_chat.l1_entities.transcript import Transcript
from kube_chat.l2_use_cases.ports.llm_client import ChatProvider
from kube_chat.l2_use_cases.ports.prompt_builder import PromptBuilder
from kube_chat.l2_use_cases.send_turn_use_case import SendTurnUseCase, error_entry

log = logging.getLogger('kc.controller')

SET_KEY_COMMAND = 'kube-chat set-key <key>'
PROVIDER_INIT_ERROR = 'Error: Failed to initialize AI provider. Check your configuration.'


@dataclass(frozen=True)
class PendingTurn:
    """A dispatched turn: the transcript snapshot it sends and the generation it belongs to."""

    generation: int
    messages: tuple[ChatMessage, ...]


class SessionController:
    """Central orchestrator between the chat UI and the provider.

    Owns the transcript, the in-flight flag and the single provider handle. The
    transcript is only mutated through ``append_user_turn``, ``apply_reply`` and
    ``clear``, which the App calls from its own thread. ``send`` runs in a worker
    thread and only reads the snapshot it was handed.
    """

    def __init__(
        self,
        descriptor: ProviderDescriptor,
        provider: ChatProvider | None,
        prompt_builder: PromptBuilder,
        context: ClusterContext | None = None,
        *,
        credential_env: str = '',
    ) -> None:
        self.descriptor = descriptor
        self.context = context or ClusterContext()
        self._provider = provider
        self._credential_env = credential_env or descriptor.type.default_key_env
        self._send_uc = SendTurnUseCase(provider, prompt_builder) if provider is not None else None

        self.transcript = Transcript()
        self._awaiting = False
        self._generation = 0

    @property
    def provider_name(self) -> str:
        return self._provider.name if self._provider is not None else 'Error'

    @property
    def awaiting(self) -> bool:
        return self._awaiting

    def append_user_turn(self, text: str) -> PendingTurn | None:
        """Record a user message and return the turn to dispatch.

        Returns None, leaving the transcript untouched, for blank input or while
        another turn is still in flight.
        """
        if not text.strip():
            return None
        if self._awaiting:
            log.info('Turn rejected: previous turn still in flight')
            return None
        self.transcript.append(ChatMessage(role='user', content=text))
        self._awaiting = True
        return PendingTurn(generation=self._generation, messages=self.transcript.snapshot())

    def send(self, turn: PendingTurn) -> ChatMessage:
        """Produce the reply for *turn*. Safe to call off the UI thread; never raises."""
        if self._send_uc is None:
            return error_entry(PROVIDER_INIT_ERROR)
        try:
            self._check_credential()
        except CredentialError as e:
            log.warning('%s', e)
            return error_entry(f'Error: {e}')
        return self._send_uc.execute(self.context, turn.messages)

    def apply_reply(self, turn: PendingTurn, reply: ChatMessage) -> bool:
        """Append the reply for *turn*. Replies to a cleared transcript are dropped."""
        if turn.generation != self._generation:
            log.info('Dropping reply for cleared transcript (generation %d)', turn.generation)
            return False
        self.transcript.append(reply)
        self._awaiting = False
        return True

    def clear(self) -> None:
        self.transcript.clear()
        self._generation += 1
        self._awaiting = False

    def _check_credential(self) -> None:
        if self.descriptor.type.requires_credential and not self.descriptor.api_key:
            raise CredentialError(f"API key not configured. Use '{SET_KEY_COMMAND}' or set {self._credential_hint()}")

    def _credential_hint(self) -> str:
        default_env = self.descriptor.type.default_key_env
        if self._credential_env == default_env:
            return default_env
        # the provider default variable is still consulted after apiKeyEnv
        return f'{self._credential_env} (or {default_env})'
