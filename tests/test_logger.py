from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from flowdot.common.logger import get_logger


class GetLoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.name = f"flowdot.tests.{self.id()}"
        self.addCleanup(self.drop_handlers)

    def drop_handlers(self) -> None:
        logger = logging.getLogger(self.name)
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

    def file_handlers(self, logger: logging.Logger) -> list:
        return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]

    def test_log_file_added_to_configured_logger(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "run.log"
            get_logger(self.name)
            logger = get_logger(self.name, log_file=str(path))
            logger.info("hello")
            self.assertEqual(len(self.file_handlers(logger)), 1)
            self.assertIn("hello", path.read_text(encoding="utf-8"))
            self.drop_handlers()

    def test_same_log_file_is_not_added_twice(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = str(Path(td) / "nested" / "run.log")
            get_logger(self.name, log_file=path)
            logger = get_logger(self.name, log_file=path, level=logging.DEBUG)
            self.assertEqual(len(logger.handlers), 2)
            self.assertEqual(len(self.file_handlers(logger)), 1)
            self.assertTrue(all(h.level == logging.DEBUG for h in logger.handlers))
            self.drop_handlers()

    def test_console_handler_is_created_once(self) -> None:
        get_logger(self.name)
        logger = get_logger(self.name)
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)


if __name__ == "__main__":
    unittest.main()
