"""Literal pattern search over files and one level of directories."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import ZeusError, from_decode_error, from_os_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """One matching line with its 1-based line number."""

    line_number: int
    line: str

    def __str__(self) -> str:
        return f"{self.line_number}: {self.line}"


def split_lines(text: str) -> list[str]:
    """Split text on LF, dropping one trailing CR per line and the empty tail after a final newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def read_lines(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read a whole file as text and split it into lines.

    Raises:
        ZeusError: If the file cannot be opened or is not valid text.

    """
    try:
        # no newline translation; split_lines owns line boundaries
        text = path.read_bytes().decode(encoding)
    except UnicodeDecodeError as e:
        raise from_decode_error(e, path, encoding) from e
    except OSError as e:
        raise from_os_error(e, path, "read") from e
    return split_lines(text)


def scan_lines(pattern: str, lines: Iterable[str]) -> Iterator[MatchRecord]:
    """Yield every line containing ``pattern`` as a case-sensitive substring."""
    for number, line in enumerate(lines, start=1):
        if pattern in line:
            yield MatchRecord(number, line)


def _directory_files(directory: Path) -> list[Path]:
    """Return regular files directly inside ``directory``, sorted by name."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.warning("skipping directory %s: %s", directory, e.strerror or e)
        return []
    # is_file() reports False for broken links and unreadable metadata
    return [entry for entry in entries if entry.is_file()]


def search(pattern: str, targets: Iterable[Path], *, encoding: str = "utf-8") -> Iterator[tuple[Path, MatchRecord]]:
    """Lazily search ``targets`` for lines containing ``pattern``.

    Targets are visited in the given order. A file target is scanned directly;
    a directory target has its immediate regular files scanned, subdirectories
    ignored. Targets that are neither are skipped.

    A directly named file that cannot be read raises; a file found inside a
    directory that cannot be read is skipped so its siblings are still searched.

    Raises:
        ZeusError: If a directly named file cannot be read as text.

    """
    for target in targets:
        if target.is_file():
            for record in scan_lines(pattern, read_lines(target, encoding=encoding)):
                yield target, record
        elif target.is_dir():
            for entry in _directory_files(target):
                try:
                    lines = read_lines(entry, encoding=encoding)
                except ZeusError as e:
                    logger.warning("skipping %s", e)
                    continue
                for record in scan_lines(pattern, lines):
                    yield entry, record
        else:
            logger.warning("skipping %s: not a file or directory", target)
