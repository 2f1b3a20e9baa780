"""Optional TOML configuration with Pydantic validation."""

import codecs
import tomllib
from pathlib import Path
from typing import Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .output import fatal


class Config(BaseModel):
    """Runtime settings shared by every subcommand.

    Defaults apply when no ``--config`` file is given.
    """

    model_config = ConfigDict(extra="forbid")

    encoding: str = "utf-8"
    verbosity: int = 0

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            info = codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        # bytes-to-bytes codecs such as base64 cannot decode to str
        if not getattr(info, "_is_text_encoding", True):
            raise ValueError(f"not a text encoding: {value}")
        return value

    @classmethod
    def load(cls, path: Path) -> Result[Self]:
        """Load and validate config from a TOML file."""
        try:
            with path.expanduser().open("rb") as f:
                data = tomllib.load(f)
            return Result.ok(cls(**data))
        except ValidationError as e:
            return Result.err(("validation_error", e), context={"errors": e.errors()})
        except (OSError, ValueError) as e:
            return Result.err(e)

    @classmethod
    def load_or_exit(cls, path: Path) -> Self:
        """Load and validate config. Print error and exit(1) on failure."""
        result = cls.load(path)
        if result.is_ok():
            return result.unwrap()
        if result.error == "validation_error" and result.context:
            lines = ["config validation errors"]
            for e in result.context["errors"]:
                loc = e["loc"]
                field = ".".join(str(part) for part in loc) if loc else ""
                lines.append(f"  {field}: {e['msg']}")
            fatal("\n".join(lines))
        fatal(f"can't load config: {result.error}")
