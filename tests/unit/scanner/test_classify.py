"""Tests for byte-sample text/binary classification."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from context_generator.errors import ScanIOError
from context_generator.scanner import CLASSIFY_SAMPLE_BYTES, ContentType, inspect, is_text_file


class InspectTests(unittest.TestCase):
    def test_empty_sample_is_text(self) -> None:
        self.assertEqual(inspect(b""), ContentType.UTF_8)

    def test_null_byte_is_binary(self) -> None:
        self.assertEqual(inspect(b"hello\x00world"), ContentType.BINARY)

    def test_plain_and_non_ascii_text(self) -> None:
        self.assertEqual(inspect(b"def main():\n\treturn 1\r\n"), ContentType.UTF_8)
        self.assertEqual(inspect("héllo wörld\n".encode("utf-8")), ContentType.UTF_8)

    def test_byte_order_marks_are_text(self) -> None:
        self.assertEqual(inspect(b"\xef\xbb\xbfhi"), ContentType.UTF_8_BOM)
        self.assertEqual(inspect(b"\xff\xfeh\x00i\x00"), ContentType.UTF_16LE)
        self.assertEqual(inspect(b"\xff\xfe\x00\x00h\x00\x00\x00"), ContentType.UTF_32LE)
        self.assertEqual(inspect(b"\xfe\xff\x00h"), ContentType.UTF_16BE)

    def test_pdf_header_is_binary(self) -> None:
        self.assertEqual(inspect(b"%PDF-1.7\n%text-looking"), ContentType.BINARY)

    def test_control_byte_heavy_sample_is_binary(self) -> None:
        self.assertEqual(inspect(b"\x01\x02\x03\x04abc"), ContentType.BINARY)
        self.assertEqual(inspect(b"\x1b[31mred\x1b[0m\n"), ContentType.UTF_8)


class IsTextFileTests(unittest.TestCase):
    def test_zero_byte_file_is_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty"
            path.write_bytes(b"")
            self.assertTrue(is_text_file(path))

    def test_only_leading_sample_is_inspected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            late_null = Path(tmp) / "late.txt"
            late_null.write_bytes(b"a" * CLASSIFY_SAMPLE_BYTES + b"\x00")
            early_null = Path(tmp) / "early.bin"
            early_null.write_bytes(b"a" * (CLASSIFY_SAMPLE_BYTES - 1) + b"\x00")

            self.assertTrue(is_text_file(late_null))
            self.assertFalse(is_text_file(early_null))

    def test_extension_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            disguised = Path(tmp) / "image.png"
            disguised.write_text("just text\n", encoding="utf-8")
            self.assertTrue(is_text_file(disguised))

    def test_missing_file_raises_scan_io_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ScanIOError) as exc_info:
                is_text_file(Path(tmp) / "missing")
            self.assertIsInstance(exc_info.exception.cause, FileNotFoundError)


if __name__ == "__main__":
    unittest.main()
