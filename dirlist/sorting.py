"""Display ordering for listing entries.

Name and extension ordering put directories before everything else and
compare names case-insensitively. Size and time ordering compare only their
key and leave ties in their previous order. ``sort_reverse`` flips the whole
ordering, directories-first bias included.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from .entry import Entry
from .settings import Settings, SortKey


def name_sort_key(entry: Entry) -> tuple[bool, str]:
    return (not entry.is_dir, entry.display_name.lower())


def size_sort_key(entry: Entry) -> int:
    return entry.size


def time_sort_key(entry: Entry) -> datetime:
    return entry.modified_at


def extension_sort_key(entry: Entry) -> tuple[bool, tuple[int, str], str]:
    """Order by lowercased extension, names without one first, then by name.

    Dots in directory names are never treated as an extension.
    """
    if entry.is_dir:
        return (False, (0, ""), entry.display_name.lower())
    ext = entry.extension
    ext_key = (0, "") if ext is None else (1, ext.lower())
    return (True, ext_key, entry.display_name.lower())


SORT_KEYS: dict[SortKey, Callable[[Entry], Any]] = {
    SortKey.NAME: name_sort_key,
    SortKey.SIZE: size_sort_key,
    SortKey.TIME: time_sort_key,
    SortKey.EXTENSION: extension_sort_key,
}


def sort_entries(entries: list[Entry], settings: Settings) -> None:
    """Reorder ``entries`` in place; ``list.sort`` keeps equal keys stable."""
    entries.sort(key=SORT_KEYS[settings.sort_key], reverse=settings.sort_reverse)
