"""
Settings tests: RESCOM_* environment variables and field validation.
"""
import logging
import os
import unittest

from pydantic import ValidationError

from rescom.cli import configure_logging
from rescom.config import LOG_LEVELS, Settings, settings


class TestLogLevel(unittest.TestCase):

    def test_default(self):
        self.assertEqual(Settings().LOG_LEVEL, "WARNING")

    def test_environment_value_is_normalised(self):
        os.environ["RESCOM_LOG_LEVEL"] = " debug "
        self.assertEqual(Settings().LOG_LEVEL, "DEBUG")

    def test_unknown_environment_value_is_rejected(self):
        os.environ["RESCOM_LOG_LEVEL"] = "LOUD"
        with self.assertRaises(ValidationError) as ctx:
            Settings()
        self.assertIn("unknown log level 'LOUD'", str(ctx.exception))

    def test_every_accepted_level_is_known_to_logging(self):
        for name in LOG_LEVELS:
            with self.subTest(name=name):
                self.assertIsInstance(logging.getLevelName(name), int)

    def test_assignment_is_validated(self):
        with self.assertRaises(ValidationError):
            settings.LOG_LEVEL = "LOUD"
        settings.LOG_LEVEL = "info"
        self.assertEqual(settings.LOG_LEVEL, "INFO")

    def test_configure_logging_accepts_validated_level(self):
        settings.LOG_LEVEL = "error"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = []
        try:
            configure_logging()
            self.assertEqual(root.level, logging.ERROR)
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)


class TestTabulationSize(unittest.TestCase):

    def test_environment_override(self):
        os.environ["RESCOM_TABULATION_SIZE"] = "2"
        self.assertEqual(Settings().TABULATION_SIZE, 2)

    def test_negative_is_rejected(self):
        with self.assertRaises(ValidationError):
            Settings(TABULATION_SIZE=-1)
