"""ANSI-aware text measurement for listing cells.

Column layout needs the on-screen width of names that may carry color escape
sequences or East Asian wide characters; these helpers measure that width.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies.

    Escape sequences are ignored so colorized and plain text measure the same.
    """
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def sanitize_terminal_text(name: str) -> str:
    """Escape control bytes in a filename so printing it has no side effects."""
    if _CONTROL_RE.search(name) is None:
        return name

    out: list[str] = []
    for ch in name:
        code = ord(ch)
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)
