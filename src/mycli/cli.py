"""Rich-click command line interface for ``mycli``.

Purpose
-------
Parse flags, compose the logging runtime for the invocation, run the greeting
use case, and translate its recoverable errors into exit codes.

Contents
--------
* :class:`CliState` - per-invocation objects stored on the click context.
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` toggles.
* :func:`cli_greet` / :func:`cli_info` - subcommands.
* :func:`main` - entry point delegating to :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. It is the only place where a
:class:`~mycli.domain.errors.GreetingError` becomes a non-zero exit code;
the use case below it never terminates the process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as dotenv_config
from .adapters import SystemRandomSource
from .application.ports import RandomSourcePort
from .application.use_cases import GreetRequest, create_greet, create_log_execution
from .domain import GreetingError
from .runtime import LoggingRuntime, build_runtime, build_runtime_settings

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class CliState:
    """Collaborators shared by the subcommands of one invocation.

    Tests pre-populate ``runtime`` and ``random_source`` through
    ``CliRunner.invoke(..., obj=CliState(...))``; otherwise they are built from
    the environment when first needed.
    """

    runtime: LoggingRuntime | None = None
    random_source: RandomSourcePort | None = None


def summary_info() -> str:
    """Return the metadata banner printed by ``mycli info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show the full Python traceback on unexpected errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from a nearby .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global options on the context."""
    ctx.ensure_object(CliState)
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if dotenv_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(dotenv_config.DOTENV_ENV_VAR)):
        dotenv_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""
    click.echo(summary_info(), nl=False)


@cli.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", default="", help="Name to greet (required).")
@click.option("--shout", is_flag=True, default=False, help="Shout the greeting (all caps).")
@click.argument("args", nargs=-1)
@click.pass_context
def cli_greet(ctx: click.Context, name: str, shout: bool, args: tuple[str, ...]) -> None:
    """Greet someone."""
    state = ctx.ensure_object(CliState)
    runtime = _resolve_runtime(ctx, state)
    runtime.announce()

    logger = runtime.get("greet")
    greet = create_greet(
        random_source=state.random_source if state.random_source is not None else SystemRandomSource(),
        log_execution=create_log_execution(logger),
        logger=logger,
    )
    try:
        result = greet(GreetRequest(name=name, shout=shout, arguments=args))
    except GreetingError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(result.message)


def _resolve_runtime(ctx: click.Context, state: CliState) -> LoggingRuntime:
    if state.runtime is None:
        state.runtime = build_runtime(build_runtime_settings())
        ctx.call_on_close(state.runtime.shutdown)
    return state.runtime


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so embedding callers keep their own settings.
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


__all__ = ["CliState", "cli", "main", "summary_info"]
