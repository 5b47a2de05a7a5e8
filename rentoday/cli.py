"""CLI entrypoint."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from rentoday.args import DEFAULT_DELIMITER, CmdArgs, build_parameters
from rentoday.errors import AppResult, ParameterError
from rentoday.models.parameters import FileAction, Parameters
from rentoday.processors.rename_processor import RenameProcessor
from rentoday.usage import format_help


APP_NAME = "RENToday"
APP_VERSION = "0.1.0"

console = Console(soft_wrap=True)
error_console = Console(stderr=True, soft_wrap=True)


def _show_help(delimiter: str) -> None:
    console.print(format_help(delimiter), markup=False, highlight=False)


def _echo_parameters(parameters: Parameters) -> None:
    """Print the resolved configuration before touching any file."""
    source = escape(parameters.source)
    if parameters.file_action == FileAction.RENAME_FILE:
        console.print(f"Source file           : {source}")
    else:
        console.print(f"Source directory      : {source}")
    console.print(f"Overwrite             : {parameters.overwrite}")
    console.print(f"Recurse subdirectories: {parameters.recurse_subdirectories}")
    if parameters.has_prefix:
        console.print(f"Prefix                : {escape(parameters.prefix)}")
    else:
        console.print("Prefix                : <none>")
    console.print()


@click.command(
    context_settings=dict(ignore_unknown_options=True, help_option_names=[]),
)
@click.argument("switches", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--delimiter",
    type=str,
    default=DEFAULT_DELIMITER,
    envvar="RENTODAY_DELIMITER",
    show_default=True,
    help="Character that starts each switch.",
)
@click.option("--help", "show_help", is_flag=True, default=False, help="Show usage and exit.")
@click.version_option(version=APP_VERSION, prog_name=APP_NAME)
def cli(switches: tuple[str, ...], delimiter: str, show_help: bool) -> None:
    """Rename files to a timestamp of the current date and time."""
    console.print(f"[bold]{APP_NAME}[/bold] v{APP_VERSION}")
    console.print()

    if show_help:
        _show_help(delimiter)
        return

    cmd = CmdArgs.parse(switches, delimiter=delimiter)
    for token in cmd.unknown:
        console.print(f"[yellow]Ignoring unknown parameter: {escape(token)}[/yellow]")

    try:
        parameters = build_parameters(cmd)
    except ParameterError as e:
        console.print(f"  [bold red]!!![/bold red] {escape(e.message)}")
        _show_help(delimiter)
        raise SystemExit(e.exit_code) from e

    _echo_parameters(parameters)

    processor = RenameProcessor(parameters, console=console, error_console=error_console)
    file_count = 0

    if parameters.file_action == FileAction.RENAME_FILE:
        path = Path(parameters.source)
        if not path.is_file():
            error_console.print(f"[bold red]File {escape(str(path))} not found.[/bold red]")
            raise SystemExit(int(AppResult.FILE_DOES_NOT_EXIST))

        outcome = processor.rename_file(path)
        if outcome.succeeded:
            file_count = 1
        elif outcome.error is not None:
            error_console.print()
            error_console.print("[bold red]An error occurred during the renaming operation[/bold red]")
            error_console.print()
    else:
        file_count = processor.rename_directory(parameters.source)

    console.print()
    console.print(f"File(s) renamed: [bold green]{file_count}[/bold green]")
