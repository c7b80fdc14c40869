"""Command line interface built on rich-click.

Purpose
-------
Offer operators a way to check a redaction configuration and preview what a
transaction message looks like after the listener has processed it.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` flags.
* ``info``, ``show-config`` and ``redact`` subcommands.
* :func:`main` - entry point delegating exit handling to ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import json
import os
from typing import IO, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __init__conf__
from . import config as config_module
from .adapters import MASK_POLICIES, EnvironmentConfiguration, MappingConfiguration, create_mask_policy
from .domain import ConfigurationError, FieldSelector, IsoMessage, MessageFormatError
from .lib_log_protect import redact_message, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_CONFIG_KEYS = ("protect", "wipe", "mask")


def _effective_configuration(**overrides: str | None) -> MappingConfiguration:
    """Merge CLI overrides over ``LOG_PROTECT_*`` environment values."""

    environment = EnvironmentConfiguration()
    values = {}
    for key in _CONFIG_KEYS:
        override = overrides.get(key)
        values[key] = override if override is not None else environment.get(key, "")
    return MappingConfiguration(values)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_PROTECT_* variables from the nearest .env (or set {config_module.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Preview and validate field redaction of transaction log events."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("show-config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--protect", default=None, help="Override LOG_PROTECT_PROTECT.")
@click.option("--wipe", default=None, help="Override LOG_PROTECT_WIPE.")
@click.option("--mask", default=None, help="Override LOG_PROTECT_MASK.")
def cli_show_config(protect: str | None, wipe: str | None, mask: str | None) -> None:
    """Parse the effective configuration and print the resulting field selection."""

    configuration = _effective_configuration(protect=protect, wipe=wipe, mask=mask)
    try:
        selector = FieldSelector.from_text(protect=configuration.get("protect"), wipe=configuration.get("wipe"))
        policy = create_mask_policy(configuration.get("mask"))
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    click.echo(f"protect = {' '.join(map(str, selector.protect)) or '-'}")
    click.echo(f"wipe    = {' '.join(map(str, selector.wipe)) or '-'}")
    click.echo(f"mask    = {policy!r}")


@cli.command("redact", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r"), default="-")
@click.option("--protect", default=None, help="Field numbers to mask, e.g. '2 35 45'.")
@click.option("--wipe", default=None, help="Field numbers to replace with [WIPED].")
@click.option("--mask", type=click.Choice(sorted(MASK_POLICIES)), default=None, help="Mask policy for protected fields.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output rendering.",
)
def cli_redact(source: IO[str], protect: str | None, wipe: str | None, mask: str | None, output_format: str) -> None:
    """Redact a message read as a JSON object of field number to value.

    SOURCE is a file path or '-' for stdin.
    """

    message = _load_message(source)
    configuration = _effective_configuration(protect=protect, wipe=wipe, mask=mask)
    try:
        result = redact_message(message, configuration)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc

    for error in result.errors:
        click.echo(f"warning: {error}", err=True)
    if result.message is None:
        raise click.ClickException("message could not be redacted and was withheld")

    if output_format == "json":
        click.echo(json.dumps(result.message.to_dict(), indent=2))
    else:
        _render_table(message, result.message)


def _load_message(source: IO[str]) -> IsoMessage:
    try:
        payload = json.load(source)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="SOURCE") from exc
    if not isinstance(payload, dict):
        raise click.BadParameter("expected a JSON object mapping field numbers to values", param_hint="SOURCE")
    try:
        return IsoMessage.from_dict(payload)
    except MessageFormatError as exc:
        raise click.BadParameter(str(exc), param_hint="SOURCE") from exc


def _render_table(original: IsoMessage, redacted: IsoMessage) -> None:
    table = Table(title="redacted message")
    table.add_column("field", justify="right")
    table.add_column("value")
    table.add_column("status")
    for number in redacted:
        value = redacted.get_field(number)
        status = "unchanged" if original.get_field(number) == value else "redacted"
        table.add_row(str(number), Text(value), status)
    Console().print(table)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI with ``lib_cli_exit_tools`` exit-code handling.

    Traceback preferences changed by ``--traceback`` are restored afterwards so
    embedding hosts keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
