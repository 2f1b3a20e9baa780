"""Command-line entry point: parses a subcommand into a Command and dispatches it."""

import importlib.metadata
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, Any

import click
import typer
from pydantic import ValidationError

from .commands import Cat, Command, Create, Echo, Grep, Mkdir, Rm, Rmdir, Stat
from .config import Config
from .handlers import dispatch, error_message
from .log import configure_logging
from .output import fatal, print_plain

PACKAGE_NAME = "zeus"

MISSING_COMMAND_HINT = "zeus: missing command operand!\nTry 'zeus --help' for more information."

app = typer.Typer(name="zeus", add_completion=False, pretty_exceptions_enable=False)


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback for the app."""

    def version_callback(value: bool) -> None:
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Increase logging verbosity.")] = 0,
    quiet: Annotated[int, typer.Option("--quiet", "-q", count=True, help="Decrease logging verbosity.")] = 0,
    config_path: Annotated[Path | None, typer.Option("--config", "-c", help="Path to a TOML config file.")] = None,
    _version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=create_version_callback(PACKAGE_NAME), is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    """Command-line utility mimicking some Unix file-management commands."""
    config = Config.load_or_exit(config_path) if config_path is not None else Config()
    if verbose or quiet:
        config = config.model_copy(update={"verbosity": verbose - quiet})
    configure_logging(config.verbosity)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        print_plain(MISSING_COMMAND_HINT)
        raise typer.Exit


def _run(ctx: typer.Context, kind: type[Command], **payload: Any) -> None:  # noqa: ANN401
    """Build the command, dispatch it and turn a failure into an exit status."""
    try:
        command = kind(**payload)
    except ValidationError as e:
        raise click.UsageError(str(e), ctx) from e
    config: Config = ctx.obj if isinstance(ctx.obj, Config) else Config()
    result = dispatch(command, config)
    if result.is_err():
        fatal(error_message(result))


@app.command("cat")
def cat_command(
    ctx: typer.Context,
    files: Annotated[list[Path], typer.Argument(help="FILE(s) to concatenate.")],
) -> None:
    """Concatenate FILE(s) to standard output."""
    _run(ctx, Cat, files=files)


@app.command("create")
def create_command(
    ctx: typer.Context,
    files: Annotated[list[Path], typer.Argument(help="FILE(s) to create.")],
) -> None:
    """Create the FILE(s), if they do not already exist."""
    _run(ctx, Create, files=files)


@app.command("echo")
def echo_command(
    ctx: typer.Context,
    strings: Annotated[list[str], typer.Argument(help="STRING(s) to echo.")],
    no_newline: Annotated[bool, typer.Option("-n", help="Do not output the trailing newline.")] = False,
) -> None:
    """Echo the STRING(s) to standard output."""
    _run(ctx, Echo, strings=strings, no_newline=no_newline)


@app.command("grep")
def grep_command(
    ctx: typer.Context,
    pattern: Annotated[str, typer.Argument(help="Literal string pattern.")],
    targets: Annotated[list[Path], typer.Argument(help="FILE(s) or DIRECTORY(ies) to search.")],
) -> None:
    """Search for PATTERN in each FILE.

    Directories are searched one level deep. Example: zeus grep 'hello world' src/main.py notes/
    """
    _run(ctx, Grep, pattern=pattern, targets=targets)


@app.command("mkdir")
def mkdir_command(
    ctx: typer.Context,
    dirs: Annotated[list[Path], typer.Argument(help="DIRECTORY(ies) to create.")],
) -> None:
    """Create the DIRECTORY(ies), if they do not already exist."""
    _run(ctx, Mkdir, dirs=dirs)


@app.command("rm")
def rm_command(
    ctx: typer.Context,
    files: Annotated[list[Path], typer.Argument(help="FILE(s) to remove.")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Remove DIRECTORIES and their contents recursively.")
    ] = False,
) -> None:
    """Remove (unlink) the FILE(s).

    By default, rm does not remove directories. Use the --recursive (-r) option
    to remove each listed directory, too, along with all of its contents.
    """
    _run(ctx, Rm, files=files, recursive=recursive)


@app.command("rmdir")
def rmdir_command(
    ctx: typer.Context,
    dirs: Annotated[list[Path], typer.Argument(help="DIRECTORY(ies) to remove.")],
) -> None:
    """Remove the DIRECTORY(ies), if they are empty."""
    _run(ctx, Rmdir, dirs=dirs)


@app.command("stat")
def stat_command(
    ctx: typer.Context,
    files: Annotated[list[Path], typer.Argument(help="FILE(s) to display status for.")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Display file or file system status."""
    _run(ctx, Stat, files=files, as_json=as_json)
