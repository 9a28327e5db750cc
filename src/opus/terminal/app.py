# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from opus.cleanup import flush_and_stop, register_cleanup
from opus.exceptions import OpusError
from opus.initialize import initialize
from opus.logic.manager import LogicManager
from opus.repository.configuration import CONFIGURATION_REPO
from opus.terminal.custom_typer import AliasedTyperGroup
from opus.view import state as view_state
from opus.view.task import tasks_view

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Opus - task management from one-line commands",
    invoke_without_command=True,
)

console = Console()

PROMPT = "[bold dark_orange]opus>[/bold dark_orange] "


class AppOptions:
    def __init__(self, data_path: Optional[str], verbose: bool, no_header: bool):
        self.data_path = data_path
        self.verbose = verbose
        self.no_header = no_header


def start_logic(options: AppOptions) -> LogicManager:
    try:
        logic = initialize(options.data_path, options.verbose)
    except OpusError as e:
        console.print(f"[red]Could not load tasks: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    if options.no_header:
        view_state.set_show_header(False)
    register_cleanup(logic)
    return logic


def run_command(logic: LogicManager, command_text: str) -> bool:
    """
    Execute one command line and print its outcome.

    Returns False once the user asked to exit.
    """
    try:
        result = logic.execute(command_text)
    except OpusError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return True

    console.print(escape(result["message"]))

    payload = result["payload"] or {}
    if payload.get("exit"):
        return False
    if not payload.get("help"):
        tasks_view(logic.get_filtered_tasks(), console=console)
    return True


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", "-dp", help="Directory holding tasks.yaml"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output"),
    ] = False,
) -> None:
    """
    Opus - task management from one-line commands

    Runs the interactive shell when no subcommand is given.
    """
    ctx.obj = AppOptions(data_path, verbose, no_header)
    if ctx.invoked_subcommand is None:
        shell(ctx)


@app.command("shell, sh")
def shell(ctx: typer.Context) -> None:
    """Read commands until "exit" or end of input."""
    logic = start_logic(ctx.obj)
    tasks_view(logic.get_filtered_tasks(), console=console)

    try:
        while True:
            try:
                command_text = console.input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            if not command_text.strip():
                continue
            if not run_command(logic, command_text):
                break
    finally:
        flush_and_stop(logic)


@app.command("exec, x", no_args_is_help=True)
def exec_command(
    ctx: typer.Context,
    command: Annotated[
        list[str], typer.Argument(help='Command line, e.g. "add Buy milk p/hi"')
    ],
) -> None:
    """Run a single command and exit."""
    logic = start_logic(ctx.obj)
    try:
        result = logic.execute(" ".join(command))
    except OpusError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    finally:
        flush_and_stop(logic)

    console.print(escape(result["message"]))
    payload = result["payload"] or {}
    if not payload.get("help") and not payload.get("exit"):
        tasks_view(logic.get_filtered_tasks(), console=console)


@app.command("config, c")
def config(
    data_path: Annotated[
        Optional[str], typer.Option("--set-data-path", help="Directory for task data")
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="Use the default data directory")
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    sync_enabled: Annotated[
        Optional[bool],
        typer.Option("--sync/--no-sync", help="Start sync when Opus launches"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Show or update the configuration."""
    if log_level is not None and log_level.upper() not in (
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
    ):
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    if (
        data_path is not None
        or remove_data_path
        or show_header is not None
        or sync_enabled is not None
        or log_level is not None
    ):
        CONFIGURATION_REPO.update_config(
            data_path=data_path,
            remove_data_path=remove_data_path,
            show_header=show_header,
            sync_enabled=sync_enabled,
            log_level=log_level.upper() if log_level is not None else None,
        )
        CONFIGURATION_REPO.flush()

    config_table = Table(show_header=False)
    for key, value in CONFIGURATION_REPO.get_config().items():
        config_table.add_row(key, str(value))
    console.print(config_table)


def run() -> None:
    app()
