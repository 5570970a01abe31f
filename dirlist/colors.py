"""Color resolution for listing entries.

Maps an entry plus settings to an optional ``ColorStyle``. Resolution is a
pure lookup: directories check the sticky bit, regular files check special
bits, the execute bit, then their extension, and every kind finally falls
back to the file-type table. The first rule that matches decides the code,
and a code of ``0`` prints uncolored.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

from .entry import Entry, EntryKind, ModeFlag
from .settings import Settings

# SGR codes at or above this value are background colors.
BACKGROUND_BASE = 40

COLOR_BY_NAME: dict[str, int] = {
    "normal": 0,
    "reverse": 7,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "bg black": 40,
    "bg red": 41,
    "bg green": 42,
    "bg yellow": 43,
    "bg blue": 44,
    "bg magenta": 45,
    "bg cyan": 46,
    "bg white": 47,
}

FILETYPE_BY_NAME: dict[str, EntryKind] = {
    "file": EntryKind.FILE,
    "directory": EntryKind.DIRECTORY,
    "symlink": EntryKind.SYMLINK,
    "fifo": EntryKind.FIFO,
    "sock": EntryKind.SOCKET,
    "blockdev": EntryKind.BLOCK_DEVICE,
    "chardev": EntryKind.CHAR_DEVICE,
}

FILEMODE_BY_NAME: dict[str, ModeFlag] = {
    "exec": ModeFlag.EXEC,
    "suid": ModeFlag.SETUID,
    "sgid": ModeFlag.SETGID,
    "sticky": ModeFlag.STICKY,
}


@dataclass(frozen=True)
class ColorStyle:
    """SGR color code plus whether it is drawn with bold intensity."""

    code: int
    bold: bool = False

    def escape(self) -> str:
        sequence = f"\x1b[{self.code}m"
        if self.bold:
            sequence += codes["bold"]
        return sequence


def _mode_flag(entry: Entry) -> ModeFlag | None:
    """Return the first special bit that selects the entry's color slot."""
    bits = entry.mode_bits
    if entry.kind == EntryKind.DIRECTORY:
        return ModeFlag.STICKY if bits is not None and bits.sticky else None

    if bits is not None:
        if bits.setuid:
            return ModeFlag.SETUID
        if bits.setgid:
            return ModeFlag.SETGID
        if bits.sticky:
            return ModeFlag.STICKY
    if entry.is_exec:
        return ModeFlag.EXEC
    return None


def _resolve_code(entry: Entry, settings: Settings) -> int:
    if entry.kind in (EntryKind.DIRECTORY, EntryKind.FILE):
        flag = _mode_flag(entry)
        if flag is not None:
            return settings.mode_color(flag)
    if entry.kind == EntryKind.FILE:
        code = settings.extension_color(entry.extension)
        if code is not None:
            return code
    return settings.filetype_color(entry.kind)


def resolve_color(entry: Entry, settings: Settings) -> ColorStyle | None:
    """Return the style for ``entry``, or ``None`` when it prints uncolored."""
    if not settings.color_enabled:
        return None
    code = _resolve_code(entry, settings)
    if code == 0:
        return None
    return ColorStyle(code=code, bold=settings.bold and code < BACKGROUND_BASE)


def colorize(text: str, style: ColorStyle | None) -> str:
    if style is None:
        return text
    return f"{style.escape()}{text}{codes['reset']}"
