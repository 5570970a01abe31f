"""Entry record datatypes for one listed filesystem object."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from .ansi import display_width as text_display_width, sanitize_terminal_text


def _printable(raw: str) -> str:
    return sanitize_terminal_text(os.fsencode(raw).decode("utf-8", errors="replace"))


class EntryKind(IntEnum):
    """Filesystem object kind; values index the file-type color table."""

    FILE = 0
    DIRECTORY = 1
    SYMLINK = 2
    FIFO = 3
    SOCKET = 4
    BLOCK_DEVICE = 5
    CHAR_DEVICE = 6


class ModeFlag(IntEnum):
    """Permission/special bits that carry a color; values index the mode table."""

    EXEC = 0
    SETUID = 1
    SETGID = 2
    STICKY = 3


CLASSIFY_SUFFIX: dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "/",
    EntryKind.SYMLINK: "@",
    EntryKind.FIFO: "|",
    EntryKind.SOCKET: "=",
}
EXEC_SUFFIX = "*"


@dataclass(frozen=True)
class ModeBits:
    """Raw ``st_mode`` value observed on POSIX platforms (type bits included)."""

    mode: int

    @property
    def exec(self) -> bool:
        return bool(self.mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))

    @property
    def setuid(self) -> bool:
        return bool(self.mode & stat.S_ISUID)

    @property
    def setgid(self) -> bool:
        return bool(self.mode & stat.S_ISGID)

    @property
    def sticky(self) -> bool:
        return bool(self.mode & stat.S_ISVTX)


@dataclass(frozen=True)
class Entry:
    """Immutable snapshot of one filesystem object taken at listing time.

    ``name`` is the platform-native name as returned by ``os.scandir`` (it may
    contain surrogate escapes); use :attr:`display_name` for printing.
    ``mode_bits`` is ``None`` on platforms without POSIX permission semantics
    and ``link_target`` is only set for symlinks.
    """

    name: str
    kind: EntryKind
    size: int = 0
    modified_at: datetime = datetime.fromtimestamp(0)
    mode_bits: ModeBits | None = None
    link_target: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("entry name must not be empty")

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_exec(self) -> bool:
        """Regular file with any execute bit set.

        Without POSIX mode bits, a case-insensitive ``.exe`` suffix marks an
        executable instead.
        """
        if self.kind != EntryKind.FILE:
            return False
        if self.mode_bits is None:
            return self.display_name.lower().endswith(".exe")
        return self.mode_bits.exec

    @property
    def extension(self) -> str | None:
        """Text after the final ``.`` of the name, or ``None`` without a dot."""
        _stem, dot, ext = os.path.basename(self.display_name).rpartition(".")
        if not dot:
            return None
        return ext

    @property
    def display_name(self) -> str:
        """Name converted lossily to printable text."""
        return _printable(self.name)

    @property
    def display_link_target(self) -> str | None:
        if self.link_target is None:
            return None
        return _printable(self.link_target)

    def classify_suffix(self) -> str:
        """Return the one-character kind indicator, or ``""`` for plain files."""
        if self.is_exec:
            return EXEC_SUFFIX
        return CLASSIFY_SUFFIX.get(self.kind, "")

    def display_width(self, classify: bool = False) -> int:
        """Cells occupied by the printed name plus optional classify suffix."""
        width = text_display_width(self.display_name)
        if classify:
            width += len(self.classify_suffix())
        return width


def kind_from_mode(mode: int) -> EntryKind:
    """Map an ``st_mode`` value (from ``lstat``) to an :class:`EntryKind`."""
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISFIFO(mode):
        return EntryKind.FIFO
    if stat.S_ISSOCK(mode):
        return EntryKind.SOCKET
    if stat.S_ISBLK(mode):
        return EntryKind.BLOCK_DEVICE
    if stat.S_ISCHR(mode):
        return EntryKind.CHAR_DEVICE
    return EntryKind.FILE


__all__ = [
    "EntryKind",
    "ModeFlag",
    "ModeBits",
    "Entry",
    "kind_from_mode",
]
