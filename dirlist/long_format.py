"""One-line-per-entry ("long") formatting.

Each row is ``time  perms  size  name`` with an optional classify suffix and
``-> target`` for symlinks. The permission column is left out on platforms
that report no POSIX mode bits.
"""

from __future__ import annotations

import stat
from datetime import datetime, timedelta

from .colors import colorize, resolve_color
from .entry import Entry
from .settings import Settings

RECENT_DAYS = 90
SIZE_UNITS = ("k", "M", "G", "T", "P", "E", "Z", "Y")
SIZE_MULTIPLIER = 1000.0
SIZE_THRESHOLD = 900
DIR_SIZE_LABEL = f"{'<DIR>':^8}"

_FILETYPE_CHARS = (
    (stat.S_IFSOCK, "s"),
    (stat.S_IFLNK, "l"),
    (stat.S_IFREG, "-"),
    (stat.S_IFBLK, "b"),
    (stat.S_IFDIR, "d"),
    (stat.S_IFCHR, "c"),
    (stat.S_IFIFO, "p"),
)


def format_time(dt: datetime, now: datetime | None = None) -> str:
    """Show time of day for recent timestamps and the year for old ones.

    A timestamp is recent when it falls in the current year or is at most
    ``RECENT_DAYS`` whole days in the past (partial days do not count).
    """
    if now is None:
        now = datetime.now()
    if dt.year == now.year or int((dt - now) / timedelta(days=1)) >= -RECENT_DAYS:
        return dt.strftime("%b %d %H:%M")
    return dt.strftime("%b %d  %Y")


def format_size(size: int) -> str:
    """Human-readable decimal size; small sizes print as plain byte counts."""
    if size < SIZE_THRESHOLD:
        return str(size)

    value = size / SIZE_MULTIPLIER
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS:
        if value < SIZE_THRESHOLD:
            break
        value /= SIZE_MULTIPLIER
    return f"{value:.1f} {unit}B"


def format_permissions(mode: int) -> str:
    """Render ``st_mode`` as a 10-character ``drwxr-xr-x`` style string.

    Special bits take over the matching execute slot: ``s`` for setuid and
    setgid, ``t`` for sticky.
    """
    file_type = stat.S_IFMT(mode)
    type_char = "?"
    for mask, char in _FILETYPE_CHARS:
        if file_type == mask:
            type_char = char
            break

    def triplet(read: int, write: int, execute: int, special: int, special_char: str) -> str:
        out = "r" if mode & read else "-"
        out += "w" if mode & write else "-"
        if mode & special:
            out += special_char
        else:
            out += "x" if mode & execute else "-"
        return out

    return (
        type_char
        + triplet(stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s")
        + triplet(stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s")
        + triplet(stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t")
    )


def format_long_entry(entry: Entry, settings: Settings, now: datetime | None = None) -> str:
    size_label = DIR_SIZE_LABEL if entry.is_dir else format_size(entry.size)
    name = colorize(entry.display_name, resolve_color(entry, settings))

    fields = [format_time(entry.modified_at, now)]
    if entry.mode_bits is not None:
        fields.append(format_permissions(entry.mode_bits.mode))
    fields.append(f"{size_label:>8}")
    fields.append(name)
    line = "  ".join(fields)

    if settings.classify:
        line += entry.classify_suffix()
    if entry.link_target is not None:
        line += f" -> {entry.display_link_target}"
    return line
