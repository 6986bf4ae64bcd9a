from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pykilo import config
from pykilo.config import EditorSettings


class ConfigBehaviorTests(unittest.TestCase):
    def _load_with(self, content: str | None) -> EditorSettings:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            if content is not None:
                config_path.write_text(content, encoding="utf-8")
            with mock.patch("pykilo.config.CONFIG_PATH", config_path):
                return config.load_settings()

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(self._load_with(None), EditorSettings())

    def test_malformed_json_gives_defaults(self) -> None:
        self.assertEqual(self._load_with("{not json"), EditorSettings())

    def test_non_object_json_gives_defaults(self) -> None:
        self.assertEqual(self._load_with("[1, 2]"), EditorSettings())

    def test_valid_values_are_used(self) -> None:
        settings = self._load_with(
            json.dumps(
                {
                    "tab_stop": 4,
                    "quit_times": 1,
                    "message_timeout": 2.5,
                    "theme": "ocean",
                    "log_level": "debug",
                }
            )
        )
        self.assertEqual(
            settings,
            EditorSettings(tab_stop=4, quit_times=1, message_timeout=2.5, theme="ocean", log_level="DEBUG"),
        )

    def test_out_of_range_and_wrong_types_fall_back_per_key(self) -> None:
        settings = self._load_with(
            json.dumps(
                {
                    "tab_stop": 0,
                    "quit_times": True,
                    "message_timeout": -1,
                    "theme": "   ",
                    "log_level": "LOUD",
                }
            )
        )
        self.assertEqual(settings, EditorSettings())

    def test_tab_stop_upper_bound(self) -> None:
        self.assertEqual(config.settings_from_config({"tab_stop": 32}).tab_stop, 32)
        self.assertEqual(config.settings_from_config({"tab_stop": 33}).tab_stop, 8)

    def test_zero_quit_times_is_allowed(self) -> None:
        self.assertEqual(config.settings_from_config({"quit_times": 0}).quit_times, 0)

    def test_integer_timeout_becomes_float(self) -> None:
        timeout = config.settings_from_config({"message_timeout": 3}).message_timeout
        self.assertIsInstance(timeout, float)
        self.assertEqual(timeout, 3.0)


if __name__ == "__main__":
    unittest.main()
