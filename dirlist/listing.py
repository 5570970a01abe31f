"""One listing pass: order entries, style them, and shape output lines.

Long format prints one detailed row per entry. Otherwise names are either
stacked one per line or arranged in a column-major grid sized to the
terminal.
"""

from __future__ import annotations

import shutil
from datetime import datetime

from .colors import colorize, resolve_color
from .entry import Entry
from .layout import DEFAULT_TERM_WIDTH, plan_columns, render_grid
from .long_format import format_long_entry
from .settings import Settings
from .sorting import sort_entries


def terminal_width(override: int | None = None) -> int:
    """Resolve the output width, falling back to 80 columns when unknown."""
    if override is not None:
        return override
    term = shutil.get_terminal_size((DEFAULT_TERM_WIDTH, 24))
    return term.columns if term.columns > 0 else DEFAULT_TERM_WIDTH


def format_name_cell(entry: Entry, settings: Settings) -> str:
    """Colorized display name plus classify suffix (the suffix stays uncolored)."""
    cell = colorize(entry.display_name, resolve_color(entry, settings))
    if settings.classify:
        cell += entry.classify_suffix()
    return cell


def render_wide(entries: list[Entry], settings: Settings, term_width: int) -> list[str]:
    widths = [entry.display_width(settings.classify) for entry in entries]
    cells = [format_name_cell(entry, settings) for entry in entries]
    plan = plan_columns(widths, term_width)
    return render_grid(cells, widths, plan)


def render_entries(
    entries: list[Entry],
    settings: Settings,
    term_width: int = DEFAULT_TERM_WIDTH,
    now: datetime | None = None,
) -> list[str]:
    """Sort ``entries`` in place and return the lines to print, without newlines."""
    sort_entries(entries, settings)
    if settings.long_format:
        return [format_long_entry(entry, settings, now) for entry in entries]
    if settings.single_column:
        return [format_name_cell(entry, settings) for entry in entries]
    return render_wide(entries, settings, term_width)
