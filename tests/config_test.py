"""tests.config_test.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Configuration loading & logging setup testing
Author: Will Bickerstaff
Version: 0.1
"""

import unittest
from unittest.mock import patch
import logging
import os
import sys
import tempfile
import util

base_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.append(base_path)

from axislib.common import format_decimal, init_log
from axislib.config import ConfigLoader, ConfigNotLoaded
from gpsaxis.common import Axis

util.setup_test_logging()

VALID_CONFIG = """
[GENERAL]
log_level = DEBUG
log_file = "coords.log"

[PARSE]
default_axis = Longitude

[OUTPUT]
decimal_places = 4
show_decimal = no
"""


class TestConfigLoader(unittest.TestCase):
    """Test the configuration singleton."""

    def setUp(self):
        ConfigLoader.reset()
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        ConfigLoader.reset()
        self.tmp_dir.cleanup()

    def _write(self, content, mode="w"):
        path = os.path.join(self.tmp_dir.name, "config.ini")
        with open(path, mode) as f:
            f.write(content)
        return path

    def test_singleton_behavior(self):
        """Test that only one instance of ConfigLoader can exist."""
        path = os.path.join(self.tmp_dir.name, "missing.ini")
        self.assertIs(ConfigLoader(path), ConfigLoader())

    def test_missing_file_uses_fallback(self):
        """A missing file gives the fallback values."""
        config = ConfigLoader(os.path.join(self.tmp_dir.name, "none.ini"))
        self.assertFalse(config.valid_config)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.log_file, "gpsaxis.log")
        self.assertIs(config.default_axis, Axis.LATITUDE)
        self.assertEqual(config.decimal_places, 6)
        self.assertTrue(config.show_decimal)

    def test_valid_file(self):
        """Values from a valid file are typed."""
        config = ConfigLoader(self._write(VALID_CONFIG))
        self.assertTrue(config.valid_config)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.log_file, "coords.log")
        self.assertIs(config.default_axis, Axis.LONGITUDE)
        self.assertEqual(config.decimal_places, 4)
        self.assertFalse(config.show_decimal)

    def test_missing_section(self):
        """A file without a required section is replaced by fallbacks."""
        config = ConfigLoader(self._write("[GENERAL]\nlog_level = DEBUG\n"))
        self.assertFalse(config.valid_config)
        self.assertEqual(config.log_level, "INFO")

    def test_invalid_values(self):
        """Invalid values fall back to defaults."""
        content = VALID_CONFIG.replace("decimal_places = 4",
                                       "decimal_places = many")
        content = content.replace("default_axis = Longitude",
                                  "default_axis = altitude")
        config = ConfigLoader(self._write(content))
        self.assertEqual(config.decimal_places, 6)
        self.assertIs(config.default_axis, Axis.LATITUDE)

    def test_negative_places(self):
        """Negative decimal places are clamped to zero."""
        config = ConfigLoader(self._write(
            VALID_CONFIG.replace("decimal_places = 4",
                                 "decimal_places = -2")))
        self.assertEqual(config.decimal_places, 0)

    def test_unreadable_file(self):
        """A file that is not text cannot be loaded."""
        path = self._write(b"[GENERAL]\nlog_level = \xff\xfe\n", mode="wb")
        with self.assertRaises(ConfigNotLoaded):
            ConfigLoader(path)


class TestLogging(unittest.TestCase):
    """Test logging initialization."""

    def setUp(self):
        ConfigLoader.reset()
        ConfigLoader(os.path.join(tempfile.gettempdir(), "no_such.ini"))

    def tearDown(self):
        ConfigLoader.reset()

    @patch('axislib.common.logging.basicConfig')
    def test_existing_handlers_kept(self, mock_basic):
        """Logging already set up is left alone."""
        with patch.object(logging.getLogger(), 'hasHandlers',
                          return_value=True):
            init_log("DEBUG")
        mock_basic.assert_not_called()

    @patch('axislib.common.logging.basicConfig')
    def test_level_and_file(self, mock_basic):
        """The level is resolved and the configured file used."""
        init_log("debug", force=True)
        kwargs = mock_basic.call_args.kwargs
        self.assertEqual(kwargs["level"], logging.DEBUG)
        self.assertEqual(kwargs["filename"], "gpsaxis.log")
        self.assertTrue(kwargs["force"])

    @patch('axislib.common.logging.basicConfig')
    def test_invalid_level(self, mock_basic):
        """Unknown level names fall back to INFO."""
        init_log("LOUD", force=True)
        self.assertEqual(mock_basic.call_args.kwargs["level"], logging.INFO)
        init_log(None, force=True)
        self.assertEqual(mock_basic.call_args.kwargs["level"], logging.INFO)

    def test_format_decimal(self):
        """Decimal degrees use a fixed number of places."""
        self.assertEqual(format_decimal(-79.948862, 3), "-79.949")
        self.assertEqual(format_decimal(1.5, 0), "2")


if __name__ == '__main__':
    unittest.main(testRunner=util.LoggingTestRunner(verbosity=2))
