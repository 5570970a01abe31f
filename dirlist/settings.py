"""Resolved, read-only listing settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .entry import EntryKind, ModeFlag


class SortKey(Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"
    EXTENSION = "extension"


def _empty_filetype_table() -> tuple[int, ...]:
    return (0,) * len(EntryKind)


def _empty_mode_table() -> tuple[int, ...]:
    return (0,) * len(ModeFlag)


@dataclass(frozen=True)
class Settings:
    """Flags and color tables consumed by the formatting engine.

    Color tables are always fully populated; ``0`` means "no color". Build
    variants with ``dataclasses.replace`` instead of mutating.
    """

    color_enabled: bool = False
    bold: bool = False
    classify: bool = False
    show_all: bool = False
    single_column: bool = False
    long_format: bool = False
    sort_key: SortKey = SortKey.NAME
    sort_reverse: bool = False
    color_by_extension: dict[str, int] = field(default_factory=dict)
    color_by_filetype: tuple[int, ...] = field(default_factory=_empty_filetype_table)
    color_by_mode: tuple[int, ...] = field(default_factory=_empty_mode_table)

    def __post_init__(self) -> None:
        if len(self.color_by_filetype) != len(EntryKind):
            raise ValueError(f"color_by_filetype needs {len(EntryKind)} entries")
        if len(self.color_by_mode) != len(ModeFlag):
            raise ValueError(f"color_by_mode needs {len(ModeFlag)} entries")

    def filetype_color(self, kind: EntryKind) -> int:
        return self.color_by_filetype[kind]

    def mode_color(self, flag: ModeFlag) -> int:
        return self.color_by_mode[flag]

    def extension_color(self, ext: str | None) -> int | None:
        """Return the configured color for ``ext`` (case-insensitive), if any."""
        if ext is None:
            return None
        return self.color_by_extension.get(ext.lower())


def build_color_table(size: int, overrides: dict[int, int]) -> tuple[int, ...]:
    """Build a fixed-size color table with ``overrides`` applied over zeros."""
    table = [0] * size
    for index, code in overrides.items():
        table[int(index)] = code
    return tuple(table)


__all__ = ["SortKey", "Settings", "build_color_table"]
