import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from logistics_dashboard.config import (
    Settings,
    get_settings,
    initialize_config,
    load_environment,
    setup_logging,
)


class TestConfig(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_default_settings(self):
        settings = get_settings()
        self.assertEqual(settings, Settings())
        self.assertEqual(settings.geocode_delay_seconds, 1.0)
        self.assertEqual(settings.nominatim_user_agent, "logistics_dashboard_app")

    @patch.dict(
        os.environ,
        {
            "NOMINATIM_USER_AGENT": "my_agent",
            "GEOCODE_DELAY_SECONDS": "0",
            "GEOCODE_TIMEOUT_SECONDS": "10",
            "LOG_LEVEL": "DEBUG",
        },
        clear=True,
    )
    def test_settings_from_environment(self):
        settings = get_settings()
        self.assertEqual(settings.nominatim_user_agent, "my_agent")
        self.assertEqual(settings.geocode_delay_seconds, 0.0)
        self.assertEqual(settings.geocode_timeout_seconds, 10.0)
        self.assertEqual(settings.log_level, "DEBUG")

    @patch.dict(os.environ, {"GEOCODE_DELAY_SECONDS": "soon"}, clear=True)
    def test_non_numeric_delay_is_rejected(self):
        with self.assertRaises(ValidationError):
            get_settings()

    @patch.dict(os.environ, {"GEOCODE_TIMEOUT_SECONDS": "later"}, clear=True)
    def test_non_numeric_timeout_is_rejected(self):
        with self.assertRaises(ValidationError):
            get_settings()

    @patch.dict(os.environ, {}, clear=True)
    def test_load_environment_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / ".env"
            env_file.write_text("NOMINATIM_USER_AGENT=from_file\n")

            self.assertTrue(load_environment(env_file))
            self.assertEqual(get_settings().nominatim_user_agent, "from_file")

    def test_load_environment_missing_file(self):
        self.assertFalse(load_environment(Path("/nonexistent/.env")))

    def test_setup_logging(self):
        setup_logging("warning")
        self.assertEqual(logging.getLogger().level, logging.WARNING)
        self.assertEqual(logging.getLogger("geopy").level, logging.WARNING)

    @patch("logistics_dashboard.config.load_environment", return_value=False)
    @patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}, clear=True)
    def test_initialize_config(self, _mock_load):
        settings = initialize_config()
        self.assertEqual(settings.log_level, "ERROR")
        self.assertEqual(logging.getLogger().level, logging.ERROR)

        initialize_config("DEBUG")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
