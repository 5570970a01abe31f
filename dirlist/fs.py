"""Filesystem scanning that turns directory children into ``Entry`` records."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .entry import Entry, ModeBits, kind_from_mode

HAS_POSIX_MODES = sys.platform != "win32"
_FILE_ATTRIBUTE_HIDDEN = 0x2
_FILE_ATTRIBUTE_SYSTEM = 0x4


@dataclass(frozen=True)
class EntryError:
    """One child that could not be turned into an entry."""

    path: Path
    error: OSError


def safe_mtime(st: os.stat_result) -> datetime:
    """Return local modification time, or the epoch when it cannot be represented."""
    try:
        return datetime.fromtimestamp(st.st_mtime)
    except (OverflowError, OSError, ValueError):
        return datetime.fromtimestamp(0)


def entry_from_stat(name: str, path: Path, st: os.stat_result) -> Entry:
    """Build an entry from an ``lstat`` result; symlinks also read their target."""
    kind = kind_from_mode(st.st_mode)
    link_target: str | None = None
    if stat.S_ISLNK(st.st_mode):
        link_target = os.readlink(path)
    return Entry(
        name=name,
        kind=kind,
        size=0 if stat.S_ISDIR(st.st_mode) else int(st.st_size),
        modified_at=safe_mtime(st),
        mode_bits=ModeBits(st.st_mode) if HAS_POSIX_MODES else None,
        link_target=link_target,
    )


def entry_from_path(path: Path) -> Entry:
    """Build an entry for an explicit path argument; raises ``OSError``."""
    st = os.lstat(path)
    name = path.name or str(path)
    return entry_from_stat(name, path, st)


def is_hidden(name: str, st: os.stat_result | None = None) -> bool:
    """Dot-files are hidden everywhere; Windows hidden/system attributes too."""
    if name.startswith("."):
        return True
    if st is None:
        return False
    attributes = getattr(st, "st_file_attributes", 0)
    return bool(attributes & (_FILE_ATTRIBUTE_HIDDEN | _FILE_ATTRIBUTE_SYSTEM))


def scan_directory(directory: Path, show_all: bool) -> tuple[list[Entry], list[EntryError]]:
    """List the children of ``directory`` as entries in scan order.

    Returns ``(entries, errors)``; children that fail to stat are reported in
    ``errors`` and skipped. Failing to open ``directory`` itself raises
    ``OSError``.
    """
    entries: list[Entry] = []
    errors: list[EntryError] = []
    with os.scandir(directory) as children:
        for child in children:
            name = child.name
            if not show_all and name.startswith("."):
                continue
            child_path = Path(child.path)
            try:
                st = child.stat(follow_symlinks=False)
                if not show_all and is_hidden(name, st):
                    continue
                entries.append(entry_from_stat(name, child_path, st))
            except OSError as exc:
                errors.append(EntryError(path=child_path, error=exc))
    return entries, errors
