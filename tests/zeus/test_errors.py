"""Tests for the error taxonomy."""

import errno
from pathlib import Path

import pytest

from zeus.errors import (
    AlreadyExistsError,
    IoError,
    IsDirectoryError,
    NotDirectoryError,
    NotEmptyError,
    NotFoundError,
    PermissionDeniedError,
    from_decode_error,
    from_os_error,
)


class TestFromOsError:
    """Tests for from_os_error."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (errno.ENOENT, NotFoundError),
            (errno.EEXIST, AlreadyExistsError),
            (errno.ENOTEMPTY, NotEmptyError),
            (errno.EACCES, PermissionDeniedError),
            (errno.EPERM, PermissionDeniedError),
            (errno.EISDIR, IsDirectoryError),
            (errno.ENOTDIR, NotDirectoryError),
            (errno.EIO, IoError),
        ],
    )
    def test_maps_errno(self, code: int, expected: type) -> None:
        """Each errno maps to its error class."""
        error = from_os_error(OSError(code, "reason"), Path("x"), "remove")
        assert type(error) is expected

    def test_message_names_path_and_reason(self) -> None:
        """Message carries the action, the path and the OS reason."""
        error = from_os_error(FileNotFoundError(errno.ENOENT, "No such file or directory"), Path("a/b"), "read")
        assert str(error) == "failed to read 'a/b': No such file or directory"
        assert error.path == Path("a/b")
        assert error.code == "not_found"

    def test_without_errno(self) -> None:
        """An OSError without errno becomes IoError."""
        error = from_os_error(OSError("boom"), Path("x"), "read")
        assert isinstance(error, IoError)
        assert "boom" in str(error)


class TestFromDecodeError:
    """Tests for from_decode_error."""

    def test_io_error(self) -> None:
        """Invalid text becomes IoError naming the encoding."""
        exc = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        error = from_decode_error(exc, Path("a.bin"), "utf-8")
        assert isinstance(error, IoError)
        assert "'a.bin'" in str(error)
        assert "utf-8" in str(error)
