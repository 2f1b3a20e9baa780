"""Command handlers and the dispatcher.

Each handler performs one kind of filesystem side effect per argument, left to
right, and returns a ``Result``. The first failure stops the remaining
arguments and comes back as ``Result.err((code, error), context=...)`` with the
offending path and a human-readable message in the context.
"""

import logging
import shutil

from mm_result import Result

from .commands import Cat, Command, Create, Echo, Grep, Mkdir, Rm, Rmdir, Stat
from .config import Config
from .dual_mode_output import StatOutput
from .errors import IsDirectoryError, ZeusError, from_os_error
from .metadata import PathStat
from .output import print_plain
from .search import read_lines, search

logger = logging.getLogger(__name__)


def _fail(error: ZeusError) -> Result[None]:
    return Result.err((error.code, error), context={"path": str(error.path), "message": str(error)})


def error_message(result: Result[None]) -> str:
    """Return the user-facing message of a failed handler result."""
    if result.context and "message" in result.context:
        return str(result.context["message"])
    return str(result.error)


def cat(command: Cat, *, encoding: str = "utf-8") -> Result[None]:
    """Print each file line by line, one file after another."""
    for path in command.files:
        try:
            lines = read_lines(path, encoding=encoding)
        except ZeusError as e:
            return _fail(e)
        for line in lines:
            print_plain(line)
    return Result.ok(None)


def create(command: Create) -> Result[None]:
    """Create empty files, refusing to touch existing ones."""
    for path in command.files:
        try:
            path.touch(exist_ok=False)
        except OSError as e:
            return _fail(from_os_error(e, path, "create file"))
        logger.info("created file %s", path)
    return Result.ok(None)


def echo(command: Echo) -> Result[None]:
    """Print each trimmed string followed by a space, then a newline unless suppressed."""
    print_plain("".join(f"{s.strip()} " for s in command.strings), end="" if command.no_newline else "\n")
    return Result.ok(None)


def grep(command: Grep, *, encoding: str = "utf-8") -> Result[None]:
    """Print ``<line number>: <line>`` for every matching line."""
    try:
        for _source, record in search(command.pattern, command.targets, encoding=encoding):
            print_plain(record)
    except ZeusError as e:
        return _fail(e)
    return Result.ok(None)


def mkdir(command: Mkdir) -> Result[None]:
    """Create directories with missing parents; existing directories are fine."""
    for path in command.dirs:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return _fail(from_os_error(e, path, "create directory"))
        logger.info("created directory %s", path)
    return Result.ok(None)


def rm(command: Rm) -> Result[None]:
    """Delete files, or directory trees when ``recursive`` is set."""
    for path in command.files:
        try:
            if command.recursive and path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
                logger.info("removed directory tree %s", path)
                continue
            if path.is_dir() and not path.is_symlink():
                return _fail(IsDirectoryError(f"failed to remove file '{path}': Is a directory", path))
            path.unlink()
        except OSError as e:
            return _fail(from_os_error(e, path, "remove"))
        logger.info("removed file %s", path)
    return Result.ok(None)


def rmdir(command: Rmdir) -> Result[None]:
    """Delete empty directories."""
    for path in command.dirs:
        try:
            path.rmdir()
        except OSError as e:
            return _fail(from_os_error(e, path, "remove directory"))
        logger.info("removed directory %s", path)
    return Result.ok(None)


def stat(command: Stat) -> Result[None]:
    """Print metadata for each path."""
    out = StatOutput(json_mode=command.as_json)
    for path in command.files:
        try:
            info = PathStat.from_path(path)
        except OSError as e:
            return _fail(from_os_error(e, path, "get stats for"))
        out.stat(info)
    return Result.ok(None)


def dispatch(command: Command, config: Config) -> Result[None]:
    """Route a command to its handler."""
    logger.debug("dispatching %r", command)
    match command:
        case Cat():
            return cat(command, encoding=config.encoding)
        case Create():
            return create(command)
        case Echo():
            return echo(command)
        case Grep():
            return grep(command, encoding=config.encoding)
        case Mkdir():
            return mkdir(command)
        case Rm():
            return rm(command)
        case Rmdir():
            return rmdir(command)
        case Stat():
            return stat(command)
