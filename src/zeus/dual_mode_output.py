"""Dual-mode (JSON / display) output for structured command results."""

# ruff: noqa: T201 -- output layer

import json

from rich.console import Console, RenderableType

from .metadata import PathStat
from .output import make_table


class DualModeOutput:
    """Base for output handlers supporting JSON and display modes.

    JSON mode prints one envelope per result (``{"ok": true, "data": ...}``).
    Display mode prints any Rich renderable.
    """

    def __init__(self, *, json_mode: bool) -> None:
        self.json_mode = json_mode

    def output(self, *, json_data: dict[str, object], display_data: RenderableType) -> None:
        """Output a result in JSON or display format."""
        if self.json_mode:
            print(json.dumps({"ok": True, "data": json_data}))
        else:
            Console().print(display_data)


class StatOutput(DualModeOutput):
    """Output for ``stat`` records."""

    def stat(self, info: PathStat) -> None:
        """Print one metadata record as JSON or as a field/value table."""
        self.output(
            json_data=info.model_dump(mode="json"),
            display_data=make_table(["Field", "Value"], info.rows(), title=info.path),
        )
