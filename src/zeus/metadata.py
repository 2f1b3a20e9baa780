"""Filesystem metadata records for ``stat``."""

import stat
from datetime import UTC, datetime
from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel

Kind = Literal["file", "directory", "other"]


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=UTC)


def _kind(mode: int) -> Kind:
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISDIR(mode):
        return "directory"
    return "other"


class PathStat(BaseModel):
    """Metadata of one path, following symlinks."""

    path: str
    kind: Kind
    size: int
    mode: str
    permissions: str
    uid: int
    gid: int
    inode: int
    links: int
    accessed: datetime
    modified: datetime
    changed: datetime
    created: datetime | None

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """Query metadata for ``path``. Raises ``OSError`` if it cannot be read."""
        st = path.stat()
        # st_birthtime is missing on most Linux builds
        birthtime: float | None = getattr(st, "st_birthtime", None)
        return cls(
            path=str(path),
            kind=_kind(st.st_mode),
            size=st.st_size,
            mode=stat.filemode(st.st_mode),
            permissions=f"{stat.S_IMODE(st.st_mode):04o}",
            uid=st.st_uid,
            gid=st.st_gid,
            inode=st.st_ino,
            links=st.st_nlink,
            accessed=_timestamp(st.st_atime),
            modified=_timestamp(st.st_mtime),
            changed=_timestamp(st.st_ctime),
            created=_timestamp(birthtime) if birthtime is not None else None,
        )

    def rows(self) -> list[list[str]]:
        """Field/value pairs for display."""
        return [
            ["kind", self.kind],
            ["size", str(self.size)],
            ["mode", f"{self.mode} ({self.permissions})"],
            ["uid", str(self.uid)],
            ["gid", str(self.gid)],
            ["inode", str(self.inode)],
            ["links", str(self.links)],
            ["accessed", self.accessed.isoformat()],
            ["modified", self.modified.isoformat()],
            ["changed", self.changed.isoformat()],
            ["created", self.created.isoformat() if self.created else "-"],
        ]
