"""Dependency container: composition root for wiring all layers together."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from kube_chat.l1_entities.cluster_context import ClusterContext
from kube_chat.l1_entities.config import AppConfig
from kube_chat.l1_entities.provider import ProviderDescriptor
from kube_chat.l2_use_cases.credentials import build_descriptor, credential_env_var
from kube_chat.l2_use_cases.ports.config_loader import ConfigLoader
from kube_chat.l2_use_cases.ports.llm_client import ChatProvider
from kube_chat.l2_use_cases.ports.prompt_builder import PromptBuilder
from kube_chat.l2_use_cases.utils.prompt_builder import SystemPromptBuilder
from kube_chat.l3_interface_adapters.controllers.session_controller import SessionController
from kube_chat.l3_interface_adapters.gateways.provider_factory import create_provider
from kube_chat.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader

log = logging.getLogger('kc.app')


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing.

    Provider resolution happens here, once per session; a ConfigurationError
    propagates to the caller and the session never opens.
    """

    def __init__(
        self,
        config: AppConfig,
        context: ClusterContext | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.config = config
        self.context = context or ClusterContext()

        env = os.environ if environ is None else environ
        self.descriptor: ProviderDescriptor = build_descriptor(config.ai, env)
        self.provider: ChatProvider = create_provider(self.descriptor)
        self.prompt_builder: PromptBuilder = SystemPromptBuilder(config.ai.system_prompt or None)
        log.info(
            'Session provider: %s model=%s max_tokens=%d key=%s',
            self.provider.name,
            self.descriptor.model,
            self.descriptor.max_tokens,
            'set' if self.descriptor.api_key else 'unset',
        )

        self.controller = SessionController(
            descriptor=self.descriptor,
            provider=self.provider,
            prompt_builder=self.prompt_builder,
            context=self.context,
            credential_env=credential_env_var(config.ai),
        )

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
