"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, UTF-8 characters, and control-key
token mapping. These tests protect input handling in raw terminal mode.
"""

import os
import time
import unittest

from tmenu import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        # Esc waits briefly for sequence bytes, but should not require another key press.
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B", 2), ["UP", "DOWN"])
        self.assertEqual(self._read_all(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_enter_backspace_and_controls(self) -> None:
        self.assertEqual(
            self._read_all(b"\r\n\x7f\x08\x03\x15\t", 7),
            ["ENTER", "ENTER", "BACKSPACE", "BACKSPACE", "CTRL_C", "CTRL_U", "TAB"],
        )

    def test_tilde_sequences_map_to_navigation_keys(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[5~\x1b[6~\x1b[1~\x1b[4~", 4),
            ["PAGE_UP", "PAGE_DOWN", "HOME", "END"],
        )

    def test_multibyte_utf8_character_is_one_key(self) -> None:
        self.assertEqual(self._read_all("é漢".encode("utf-8"), 2), ["é", "漢"])

    def test_sgr_mouse_report_is_consumed_as_single_token(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[<0;12;5Mq", 2), ["MOUSE", "q"])

    def test_unbound_sequences_are_consumed_as_unknown_not_escape(self) -> None:
        sequences = [b"\x1bOP", b"\x1b[15~", b"\x1b[2~", b"\x1b[Z", b"\x1b[1;5A"]
        for seq in sequences:
            with self.subTest(seq=seq):
                input_mod._PENDING_BYTES.clear()
                self.assertEqual(self._read_all(seq + b"q", 2), [input_mod.UNKNOWN_KEY, "q"])

    def test_delete_sequence(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[3~", 1), ["DELETE"])

    def test_timeout_without_input_returns_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=5), "")
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_end_of_file_returns_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            self.assertEqual(input_mod.read_key(read_fd), "")
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
