"""CLI entry point for ponysay."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ponysay import __version__
from ponysay.l1_entities.constraint import ByName, ByPath
from ponysay.l1_entities.errors import PonysayError


@click.command()
@click.argument('text', nargs=-1)
@click.option('-l', '--list', 'list_ponies', is_flag=True, help='List pony names.')
@click.option('-q', '--quote', 'random_quote', is_flag=True, help='Let a pony say one of its own quotes.')
@click.option('-p', '--pony', 'pony_names', multiple=True, help='Pick among ponies with this name (repeatable).')
@click.option(
    '-f',
    '--file',
    'pony_files',
    multiple=True,
    type=click.Path(),
    help='Pick among these .pony files (repeatable).',
)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-w',
    '--wrap-width',
    'wrap_width',
    default=None,
    type=click.IntRange(min=1),
    help='Balloon wrap column (default 65).',
)
@click.option('--debug', is_flag=True, help='Write a debug log to the user log directory.')
@click.version_option(version=__version__)
def cli(text, list_ponies, random_quote, pony_names, pony_files, config_path, wrap_width, debug):
    """ponysay -- a pony with a speech balloon.

    The quote is TEXT, or standard input when it is piped.
    """
    from ponysay.l2_use_cases.ports.config_loader import ConfigLoader  # noqa: PLC0415 -- deferred
    from ponysay.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from ponysay.l4_frameworks_and_drivers.config import build_app_config  # noqa: PLC0415 -- deferred
    from ponysay.l4_frameworks_and_drivers.container import DependencyContainer  # noqa: PLC0415 -- deferred

    if list_ponies and random_quote:
        raise click.UsageError('--list and --quote cannot be used together.')

    if debug:
        from ponysay.l3_interface_adapters.gateways.paths import LOG_DIR  # noqa: PLC0415 -- deferred
        from ponysay.l4_frameworks_and_drivers.logging_setup import setup_file_logging  # noqa: PLC0415 -- deferred

        setup_file_logging(LOG_DIR)

    config_loader: ConfigLoader = YamlConfigLoader()
    try:
        overrides: dict = {}
        if wrap_width is not None:
            overrides['balloon'] = {'wrap_width': wrap_width}
        config = build_app_config(config_loader.load_raw(config_path, overrides=overrides if overrides else None))
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    container = DependencyContainer(config)
    controller = container.controller

    if list_ponies:
        _print_pony_list(controller.list_names(), config.library.pony_dirs)
        return

    constraints = [ByPath(path=Path(p)) for p in pony_files] + [ByName(name=n) for n in pony_names]

    try:
        if random_quote:
            output = controller.say_random_quote(constraints)
        else:
            quote = _read_quote(text)
            if quote is None:
                return
            output = controller.say(quote, constraints)
    except PonysayError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    click.echo(output)


def _read_quote(text: tuple[str, ...]) -> str | None:
    """Quote from the arguments, else from piped stdin; None when there is neither."""
    if text:
        return ' '.join(text)
    stdin = click.get_text_stream('stdin')
    if stdin.isatty():
        return None
    return stdin.read()


def _print_pony_list(names: list[str], directories: list[str]) -> None:
    from rich.columns import Columns  # noqa: PLC0415 -- deferred: only for --list
    from rich.console import Console  # noqa: PLC0415 -- deferred: only for --list
    from rich.text import Text  # noqa: PLC0415 -- deferred: only for --list

    console = Console()
    if not console.is_terminal:
        for name in names:
            click.echo(name)
        return
    console.print(Text(f'ponies located in {", ".join(directories)}'))
    console.print(Columns([Text(name) for name in names], padding=(0, 2), column_first=True))
