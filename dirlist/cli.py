"""Command-line front door for dirlist.

Parses options, loads the color config, and lists each path argument.
Explicit files are listed first as one group, then each directory.
"""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import ConfigError, load_settings
from .entry import Entry
from .fs import entry_from_path, scan_directory
from .listing import render_entries, terminal_width
from .settings import Settings, SortKey

PROG = "dirlist"
EXIT_FAILURE = 2


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Show directory listing.")
    parser.add_argument("paths", nargs="*", default=["."], help="Files or directories to list. Defaults to '.'.")
    parser.add_argument("-a", "--all", action="store_true", help="Include hidden entries.")
    parser.add_argument("-l", "--long", action="store_true", help="One entry per line with time, mode, and size.")
    parser.add_argument("-1", dest="single_column", action="store_true", help="One name per line.")
    parser.add_argument("-F", "--classify", action="store_true", default=None, help="Append a type indicator (/ * @ | =).")
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse the sort order.")
    sort_group = parser.add_mutually_exclusive_group()
    sort_group.add_argument("-S", dest="sort", action="store_const", const=SortKey.SIZE.value, help="Sort by size.")
    sort_group.add_argument("-t", dest="sort", action="store_const", const=SortKey.TIME.value, help="Sort by modification time.")
    sort_group.add_argument("-X", dest="sort", action="store_const", const=SortKey.EXTENSION.value, help="Sort by extension.")
    sort_group.add_argument("--sort", choices=[key.value for key in SortKey], help="Sort key (default: name).")
    parser.add_argument("--bold", action="store_true", default=None, help="Draw foreground colors in bold.")
    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument("--color", dest="color", action="store_true", default=None, help="Force color output.")
    color_group.add_argument("--no-color", dest="color", action="store_false", default=None, help="Disable color output even on TTY.")
    parser.add_argument("-w", "--width", type=_positive_int, default=None, help="Output width (default: terminal width).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_args(settings: Settings, args: argparse.Namespace, stdout: TextIO) -> Settings:
    """Overlay command-line flags on settings loaded from the config file."""
    color_enabled = args.color if args.color is not None else stdout.isatty()
    return dataclasses.replace(
        settings,
        color_enabled=color_enabled,
        bold=settings.bold if args.bold is None else args.bold,
        classify=settings.classify if args.classify is None else args.classify,
        show_all=args.all,
        single_column=args.single_column,
        long_format=args.long,
        sort_key=SortKey(args.sort) if args.sort else SortKey.NAME,
        sort_reverse=args.reverse,
    )


def _report(stderr: TextIO, target: object, exc: OSError) -> None:
    stderr.write(f"{PROG}: {target}: {exc.strerror or exc}\n")


def _write_lines(stdout: TextIO, lines: list[str]) -> None:
    for line in lines:
        stdout.write(line + "\n")


def run(
    paths: list[str],
    settings: Settings,
    width: int,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """List ``paths`` and return the process exit status."""
    errors = 0
    files: list[Entry] = []
    directories: list[str] = []
    for arg in paths:
        path = Path(arg)
        if path.is_dir():
            directories.append(arg)
            continue
        try:
            entry = entry_from_path(path)
        except OSError as exc:
            _report(stderr, arg, exc)
            errors += 1
            continue
        files.append(dataclasses.replace(entry, name=arg))

    printed = False
    if files:
        _write_lines(stdout, render_entries(files, settings, width))
        printed = True

    show_headers = len(paths) > 1
    for arg in directories:
        try:
            entries, entry_errors = scan_directory(Path(arg), settings.show_all)
        except OSError as exc:
            _report(stderr, arg, exc)
            errors += 1
            continue
        for failure in entry_errors:
            _report(stderr, failure.path, failure.error)

        if printed:
            stdout.write("\n")
        if show_headers:
            stdout.write(arg if arg.endswith(os.sep) else f"{arg}/")
            stdout.write("\n")
        _write_lines(stdout, render_entries(entries, settings, width))
        printed = True

    return EXIT_FAILURE if errors else 0


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and print listings; exits non-zero on any failure."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        for problem in exc.problems:
            sys.stderr.write(f"{PROG}: {problem}\n")
        raise SystemExit(EXIT_FAILURE) from exc

    settings = apply_args(settings, args, sys.stdout)
    status = run(args.paths, settings, terminal_width(args.width), sys.stdout, sys.stderr)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
