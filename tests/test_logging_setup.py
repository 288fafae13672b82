"""Tests for launcher log destination selection and handler wiring."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tmenu import logging_setup


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        env_patch = mock.patch.dict("tmenu.logging_setup.os.environ", {}, clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        self.addCleanup(logging_setup.configure_logging)

    def test_no_destination_installs_null_handler(self) -> None:
        self.assertIsNone(logging_setup.configure_logging())

        handlers = logging.getLogger("tmenu").handlers
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.NullHandler)

    def test_log_file_receives_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "tmenu.log"

            self.assertEqual(logging_setup.configure_logging(path), path)
            logging.getLogger("tmenu.catalog").debug("hello from catalog")
            logging_setup.configure_logging()

            text = path.read_text(encoding="utf-8")
        self.assertIn("tmenu.catalog - DEBUG - hello from catalog", text)

    def test_resolution_order(self) -> None:
        explicit = Path("/tmp/explicit.log")
        self.assertEqual(logging_setup.resolve_log_path(explicit, True), explicit)
        self.assertEqual(logging_setup.resolve_log_path(None, True), logging_setup.DEFAULT_LOG_PATH)
        self.assertIsNone(logging_setup.resolve_log_path(None, False))

        with mock.patch.dict("tmenu.logging_setup.os.environ", {"TMENU_LOG": "/tmp/env.log"}):
            self.assertEqual(logging_setup.resolve_log_path(None, False), Path("/tmp/env.log"))
            self.assertEqual(logging_setup.resolve_log_path(explicit, False), explicit)


if __name__ == "__main__":
    unittest.main()
