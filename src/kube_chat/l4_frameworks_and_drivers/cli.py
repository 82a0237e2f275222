"""CLI entry point for kube-chat."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from kube_chat import __version__

_PROVIDER_CHOICES = ['claude', 'anthropic', 'openai', 'gpt', 'chatgpt', 'ollama', 'local']


def _cli_overrides(provider: str | None, model: str | None) -> dict:
    ai: dict = {}
    if provider:
        ai['provider'] = provider
    if model:
        ai['model'] = model
    return {'ai': ai} if ai else {}


@click.group()
@click.version_option(version=__version__)
def cli():
    """kube-chat -- terminal AI assistant for your Kubernetes cluster."""


@cli.command()
@click.argument('question', required=False, default='')
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-p',
    '--provider',
    default=None,
    type=click.Choice(_PROVIDER_CHOICES, case_sensitive=False),
    help='Override ai.provider for this session.',
)
@click.option('-m', '--model', default=None, help='Override ai.model for this session.')
@click.option('--kubeconfig', default=None, type=click.Path(dir_okay=False), help='Kubeconfig to read the context from.')
@click.option('--cluster', default=None, help='Cluster name shown to the assistant.')
@click.option('--context', 'context_name', default=None, help='Kube context name shown to the assistant.')
@click.option('-n', '--namespace', default=None, help='Namespace shown to the assistant.')
@click.option('--view', 'resource_type', default=None, help="Resource view the question is about (e.g. 'pods').")
@click.option('--selected', 'selected_resource', default=None, help="Selected resource (e.g. 'default/nginx-7c9').")
def chat(
    question,
    config_path,
    provider,
    model,
    kubeconfig,
    cluster,
    context_name,
    namespace,
    resource_type,
    selected_resource,
):
    """Open a chat session, optionally starting with QUESTION."""
    from kube_chat.l1_entities.errors import ConfigurationError  # noqa: PLC0415 -- deferred: not needed for --help
    from kube_chat.l3_interface_adapters.gateways.kubeconfig_context_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        KubeconfigContextLoader,
    )
    from kube_chat.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred: not needed for --help
    from kube_chat.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from kube_chat.l4_frameworks_and_drivers.config import build_app_config  # noqa: PLC0415 -- deferred: not needed for --help

    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=_cli_overrides(provider, model) or None)
        config = build_app_config(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if not config.ai.enabled:
        click.echo(
            "Error: AI assistant is disabled. Set 'ai.enabled: true' in your config or run 'kube-chat set-key <key>'.",
            err=True,
        )
        sys.exit(1)

    loader = KubeconfigContextLoader(Path(kubeconfig) if kubeconfig else None)
    context = loader.load()
    flag_overrides = {
        'cluster_name': cluster,
        'context_name': context_name,
        'namespace': namespace,
        'resource_type': resource_type,
        'selected_resource': selected_resource,
    }
    context = context.model_copy(update={k: v for k, v in flag_overrides.items() if v is not None})

    from kube_chat.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        ChatApp,
    )
    from kube_chat.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: SDK clients not loaded for --help
        DependencyContainer,
    )

    try:
        container = DependencyContainer(config, context)
    except ConfigurationError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    _preflight_ollama(container.provider)

    app = ChatApp(controller=container.controller, question=question, log_dir=LOG_DIR)
    app.run()


@cli.command('set-key')
@click.argument('api_key')
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Config file to write (default: user config directory).',
)
def set_key(api_key, config_path):
    """Store API_KEY in the config file and enable the assistant."""
    from kube_chat.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        save_api_key,
    )

    if not api_key.strip():
        raise click.BadParameter('API key must not be empty', param_hint='API_KEY')
    path = save_api_key(api_key.strip(), config_path)
    click.echo(f'API key saved to {path}')


def _preflight_ollama(provider) -> None:
    """Warn before the TUI starts when the local server is down or the model is missing."""
    from kube_chat.l3_interface_adapters.gateways.ollama_llm_client import (  # noqa: PLC0415 -- deferred: preflight only runs when starting a session
        OllamaChatProvider,
    )

    if not isinstance(provider, OllamaChatProvider):
        return
    ok, err = provider.check_connectivity()
    if not ok:
        click.echo(f'Warning: Ollama not reachable ({err}). Chat requests will fail.', err=True)
        return
    if provider.check_models([provider.model]):
        click.echo(f'Warning: model {provider.model} not found. Run: ollama pull {provider.model}', err=True)
