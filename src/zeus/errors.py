"""Error taxonomy for file operations.

Every filesystem failure is mapped to a ``ZeusError`` subclass that names the
offending path and carries a short machine-readable ``code``.
"""

import errno
from pathlib import Path
from typing import ClassVar


class ZeusError(Exception):
    """Base class for failures of a single file operation."""

    code: ClassVar[str] = "error"

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotFoundError(ZeusError):
    """Target path does not exist."""

    code = "not_found"


class AlreadyExistsError(ZeusError):
    """Target path exists where it must not."""

    code = "already_exists"


class NotEmptyError(ZeusError):
    """Directory still holds entries."""

    code = "not_empty"


class PermissionDeniedError(ZeusError):
    """Operation denied by the operating system."""

    code = "permission_denied"


class IsDirectoryError(ZeusError):
    """File operation attempted on a directory."""

    code = "is_directory"


class NotDirectoryError(ZeusError):
    """Directory operation attempted on something else."""

    code = "not_directory"


class IoError(ZeusError):
    """Any other I/O failure, including undecodable text."""

    code = "io_error"


_ERRNO_ERRORS: dict[int, type[ZeusError]] = {
    errno.ENOENT: NotFoundError,
    errno.EEXIST: AlreadyExistsError,
    errno.ENOTEMPTY: NotEmptyError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.EISDIR: IsDirectoryError,
    errno.ENOTDIR: NotDirectoryError,
}


def from_os_error(exc: OSError, path: Path, action: str) -> ZeusError:
    """Translate an ``OSError`` raised while performing ``action`` on ``path``."""
    cls = _ERRNO_ERRORS.get(exc.errno, IoError) if exc.errno is not None else IoError
    reason = exc.strerror or str(exc)
    return cls(f"failed to {action} '{path}': {reason}", path)


def from_decode_error(exc: UnicodeDecodeError, path: Path, encoding: str) -> ZeusError:
    """Translate invalid text content into an ``IoError``."""
    return IoError(f"failed to read '{path}': stream did not contain valid {encoding} ({exc.reason})", path)
