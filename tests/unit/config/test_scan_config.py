"""Tests for defensive JSON config loading."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from context_generator import config


class ConfigLoadTests(unittest.TestCase):
    def test_missing_or_malformed_config_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.json"
            broken = Path(tmp) / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            listing = Path(tmp) / "list.json"
            listing.write_text("[1, 2]", encoding="utf-8")

            for path in (missing, broken, listing):
                with self.subTest(path=path.name):
                    self.assertEqual(config.load_config(path), {})
                    self.assertEqual(config.load_scan_defaults(path), config.ScanDefaults())

    def test_scan_defaults_validate_value_types(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(
                json.dumps(
                    {
                        "exclude": ["*.md", 3, "", "tmp/*"],
                        "disable_categories": "vcs",
                        "no_defaults": "yes",
                        "catalog_path": "  ~/catalog.yaml ",
                    }
                ),
                encoding="utf-8",
            )
            defaults = config.load_scan_defaults(path)

        self.assertEqual(defaults.exclude, ("*.md", "tmp/*"))
        self.assertEqual(defaults.disable_categories, ())
        self.assertFalse(defaults.no_defaults)
        self.assertEqual(defaults.catalog_path, Path("~/catalog.yaml").expanduser())

    def test_default_path_is_module_config_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"no_defaults": True, "disable_categories": ["go"]}), encoding="utf-8")

            with mock.patch.object(config, "CONFIG_PATH", path):
                defaults = config.load_scan_defaults()

        self.assertTrue(defaults.no_defaults)
        self.assertEqual(defaults.disable_categories, ("go",))


if __name__ == "__main__":
    unittest.main()
