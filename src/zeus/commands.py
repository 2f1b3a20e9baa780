"""Typed command values, one immutable model per subcommand."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# At least one element; enforced when the command is constructed
Paths = Annotated[tuple[Path, ...], Field(min_length=1)]


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Cat(_Command):
    """Print file contents line by line."""

    files: Paths


class Create(_Command):
    """Create new empty files."""

    files: Paths


class Echo(_Command):
    """Print space-joined strings."""

    strings: Annotated[tuple[str, ...], Field(min_length=1)]
    no_newline: bool = False


class Grep(_Command):
    """Print every line containing a literal pattern."""

    pattern: str
    targets: Paths


class Mkdir(_Command):
    """Create directories and their missing parents."""

    dirs: Paths


class Rm(_Command):
    """Delete files, or whole directory trees when recursive."""

    files: Paths
    recursive: bool = False


class Rmdir(_Command):
    """Delete empty directories."""

    dirs: Paths


class Stat(_Command):
    """Print metadata for each path."""

    files: Paths
    as_json: bool = False


Command = Cat | Create | Echo | Grep | Mkdir | Rm | Rmdir | Stat
