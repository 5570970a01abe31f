"""Entry record helpers: mode bits, extensions, and display widths."""

from __future__ import annotations

import stat
import unittest

from dirlist import ansi
from dirlist.entry import Entry, EntryKind, ModeBits, kind_from_mode


class ModeBitsTests(unittest.TestCase):
    def test_special_bits_are_decoded_from_st_mode(self) -> None:
        bits = ModeBits(stat.S_IFREG | 0o6755)

        self.assertTrue(bits.exec)
        self.assertTrue(bits.setuid)
        self.assertTrue(bits.setgid)
        self.assertFalse(bits.sticky)
        self.assertFalse(ModeBits(stat.S_IFREG | 0o644).exec)

    def test_kind_from_mode_maps_file_types(self) -> None:
        self.assertEqual(kind_from_mode(stat.S_IFDIR | 0o755), EntryKind.DIRECTORY)
        self.assertEqual(kind_from_mode(stat.S_IFLNK | 0o777), EntryKind.SYMLINK)
        self.assertEqual(kind_from_mode(stat.S_IFIFO | 0o644), EntryKind.FIFO)
        self.assertEqual(kind_from_mode(stat.S_IFSOCK | 0o755), EntryKind.SOCKET)
        self.assertEqual(kind_from_mode(stat.S_IFBLK | 0o660), EntryKind.BLOCK_DEVICE)
        self.assertEqual(kind_from_mode(stat.S_IFCHR | 0o620), EntryKind.CHAR_DEVICE)
        self.assertEqual(kind_from_mode(stat.S_IFREG | 0o644), EntryKind.FILE)


class EntryTests(unittest.TestCase):
    def test_empty_name_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Entry(name="", kind=EntryKind.FILE)

    def test_extension_is_text_after_final_dot(self) -> None:
        self.assertEqual(Entry(name="archive.tar.GZ", kind=EntryKind.FILE).extension, "GZ")
        self.assertEqual(Entry(name=".bashrc", kind=EntryKind.FILE).extension, "bashrc")
        self.assertIsNone(Entry(name="Makefile", kind=EntryKind.FILE).extension)
        self.assertIsNone(Entry(name="src.d/Makefile", kind=EntryKind.FILE).extension)

    def test_classify_suffix_per_kind(self) -> None:
        exec_file = Entry(name="run", kind=EntryKind.FILE, mode_bits=ModeBits(stat.S_IFREG | 0o755))
        plain = Entry(name="notes", kind=EntryKind.FILE, mode_bits=ModeBits(stat.S_IFREG | 0o644))
        exec_dir = Entry(name="bin", kind=EntryKind.DIRECTORY, mode_bits=ModeBits(stat.S_IFDIR | 0o755))

        self.assertEqual(exec_file.classify_suffix(), "*")
        self.assertEqual(plain.classify_suffix(), "")
        self.assertEqual(exec_dir.classify_suffix(), "/")
        self.assertEqual(Entry(name="l", kind=EntryKind.SYMLINK).classify_suffix(), "@")
        self.assertEqual(Entry(name="p", kind=EntryKind.FIFO).classify_suffix(), "|")
        self.assertEqual(Entry(name="s", kind=EntryKind.SOCKET).classify_suffix(), "=")
        self.assertEqual(Entry(name="sda", kind=EntryKind.BLOCK_DEVICE).classify_suffix(), "")

    def test_exe_suffix_marks_executable_without_mode_bits(self) -> None:
        self.assertTrue(Entry(name="setup.EXE", kind=EntryKind.FILE).is_exec)
        self.assertTrue(Entry(name="tool.exe", kind=EntryKind.FILE).is_exec)
        self.assertEqual(Entry(name="tool.exe", kind=EntryKind.FILE).classify_suffix(), "*")
        self.assertFalse(Entry(name="notes.txt", kind=EntryKind.FILE).is_exec)
        self.assertFalse(Entry(name="bin.exe", kind=EntryKind.DIRECTORY).is_exec)
        with_modes = Entry(name="tool.exe", kind=EntryKind.FILE, mode_bits=ModeBits(stat.S_IFREG | 0o644))
        self.assertFalse(with_modes.is_exec)

    def test_display_width_counts_classify_suffix(self) -> None:
        entry = Entry(name="docs", kind=EntryKind.DIRECTORY)

        self.assertEqual(entry.display_width(), 4)
        self.assertEqual(entry.display_width(classify=True), 5)

    def test_display_name_escapes_control_bytes(self) -> None:
        entry = Entry(name="bad\nname", kind=EntryKind.FILE)

        self.assertEqual(entry.display_name, "bad\\x0aname")
        self.assertEqual(entry.display_width(), len("bad\\x0aname"))


class AnsiWidthTests(unittest.TestCase):
    def test_escape_sequences_have_no_width(self) -> None:
        self.assertEqual(ansi.display_width("\x1b[34;1mdocs\x1b[0m"), 4)

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(ansi.display_width("日本"), 4)
        self.assertEqual(ansi.display_width("é"), 1)


if __name__ == "__main__":
    unittest.main()
