#!/usr/bin/env python3

from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

os.environ.setdefault("MAPEO_WATCH", "0")

from apps.api.mapeo_api.main import create_app
from apps.api.mapeo_api.settings import ApiSettings, settings_from_env
from packages.mapeo_core.config.fixtures import write_fixture
from packages.mapeo_core.config.formats import COMAPEO, LEGACY


class ConfigApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = Path(self._tmp.name) / "config"
        write_fixture(self.config_dir, COMAPEO)
        self.client = TestClient(create_app(ApiSettings(config_dir=self.config_dir, watch=False)))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_healthz(self) -> None:
        resp = self.client.get("/healthz")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json().get("status"), "ok")

    def test_full_config(self) -> None:
        resp = self.client.get("/api/config")
        self.assertEqual(resp.status_code, 200)
        payload = resp.json()
        self.assertEqual(payload["_format"], COMAPEO)
        self.assertEqual(len(payload["presets"]), 3)
        self.assertEqual(payload["metadata"]["name"], "comapeo-test-config")
        self.assertEqual(
            payload["presets"][0]["iconPath"],
            "http://testserver:80/icons/airstrip.svg",
        )

    def test_public_port_overrides_request_port(self) -> None:
        client = TestClient(
            create_app(ApiSettings(config_dir=self.config_dir, watch=False, public_port=5000))
        )
        presets = client.get("/api/presets").json()
        self.assertTrue(presets[0]["iconPath"].startswith("http://testserver:5000/icons/"))

    def test_individual_readers(self) -> None:
        fields = self.client.get("/api/fields").json()
        self.assertEqual(sorted(f["key"] for f in fields), ["name", "notes", "population"])

        messages = self.client.get("/api/messages").json()
        self.assertEqual(list(messages), ["en"])
        self.assertEqual(messages["en"]["presets.river.name"]["message"], "River")

        defaults = self.client.get("/api/defaults").json()
        self.assertEqual(defaults["line"], ["river"])

        metadata = self.client.get("/api/metadata").json()
        self.assertEqual(metadata["version"], "1.0.0")

    def test_stylesheet_is_css(self) -> None:
        resp = self.client.get("/api/stylesheet")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers["content-type"].startswith("text/css"))
        self.assertIn(".preset-airstrip", resp.text)

    def test_path(self) -> None:
        resp = self.client.get("/path")
        self.assertEqual(resp.json(), {"data": str(self.config_dir)})

    def test_icon_served_as_svg(self) -> None:
        resp = self.client.get("/icons/river.svg")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.headers["content-type"].startswith("image/svg+xml"))
        self.assertTrue(resp.text.startswith("<svg"))

    def test_icon_not_found(self) -> None:
        for name in ("river-100px.svg", "missing.svg"):
            resp = self.client.get(f"/icons/{name}")
            self.assertEqual(resp.status_code, 404)
            self.assertEqual(resp.json(), {"error": "Icon not found."})

    def test_non_svg_icon_not_found(self) -> None:
        (self.config_dir / "icons" / "river.png").write_bytes(b"\x89PNG")
        resp = self.client.get("/icons/river.png")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Icon not found."})

    def test_legacy_config(self) -> None:
        legacy_dir = Path(self._tmp.name) / "legacy"
        write_fixture(legacy_dir, LEGACY)
        client = TestClient(create_app(ApiSettings(config_dir=legacy_dir, watch=False)))

        payload = client.get("/api/config").json()
        self.assertEqual(payload["_format"], LEGACY)
        self.assertTrue(payload["presets"][0]["iconPath"].endswith("/icons/village-100px.svg"))
        self.assertEqual(client.get("/icons/village-100px.svg").status_code, 200)

    def test_missing_config_directory_is_server_error(self) -> None:
        client = TestClient(
            create_app(ApiSettings(config_dir=Path(self._tmp.name) / "missing", watch=False))
        )
        resp = client.get("/api/config")
        self.assertEqual(resp.status_code, 500)
        payload = resp.json()
        self.assertEqual(payload["code"], "config_dir_not_found")
        self.assertIn("Configuration directory not found", payload["error"])

        # Sub-resources of a missing directory still read as empty.
        self.assertEqual(client.get("/api/presets").json(), [])
        self.assertEqual(client.get("/api/messages").json(), {})

    def test_debug_setting_injects_verbose_logger(self) -> None:
        app = create_app(ApiSettings(config_dir=self.config_dir, watch=False, debug=True))
        client = TestClient(app)
        self.assertIsNotNone(app.state.core_logger)

        with self.assertLogs(app.state.core_logger, level="DEBUG") as captured:
            resp = client.get("/api/presets")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(any("[PRESETS]" in line for line in captured.output))

    def test_readers_get_no_logger_without_debug(self) -> None:
        app = create_app(ApiSettings(config_dir=self.config_dir, watch=False))
        self.assertIsNone(app.state.core_logger)

    def test_cors_allows_only_get(self) -> None:
        headers = {"Origin": "http://viewer.test"}
        ok = self.client.options(
            "/api/presets",
            headers={**headers, "Access-Control-Request-Method": "GET"},
        )
        self.assertEqual(ok.status_code, 200)
        self.assertIn("GET", ok.headers["access-control-allow-methods"])

        rejected = self.client.options(
            "/api/presets",
            headers={**headers, "Access-Control-Request-Method": "POST"},
        )
        self.assertEqual(rejected.status_code, 400)

    def test_broken_preset_does_not_break_config(self) -> None:
        (self.config_dir / "presets" / "broken.json").write_text("{", encoding="utf-8")
        (self.config_dir / "metadata.json").write_text(json.dumps({"name": ""}), encoding="utf-8")

        payload = self.client.get("/api/config").json()
        self.assertEqual(len(payload["presets"]), 3)
        self.assertEqual(payload["_format"], LEGACY)


class SettingsTests(unittest.TestCase):
    _env_keys = (
        "MAPEO_CONFIG_DIR",
        "MAPEO_DEBUG",
        "MAPEO_WATCH",
        "MAPEO_WATCH_DEBOUNCE_SECONDS",
        "MAPEO_CORS_ORIGINS",
        "MAPEO_PUBLIC_PORT",
    )

    def setUp(self) -> None:
        self._env_backup = {k: os.environ.get(k) for k in self._env_keys}
        for key in self._env_keys:
            os.environ.pop(key, None)

    def tearDown(self) -> None:
        for key, value in self._env_backup.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value

    def test_defaults(self) -> None:
        settings = settings_from_env()
        self.assertEqual(settings.config_dir, Path("."))
        self.assertFalse(settings.debug)
        self.assertTrue(settings.watch)
        self.assertEqual(settings.watch_debounce_seconds, 1.0)
        self.assertEqual(settings.cors_origins, ["*"])
        self.assertIsNone(settings.public_port)

    def test_env_overrides(self) -> None:
        os.environ["MAPEO_CONFIG_DIR"] = "/srv/config"
        os.environ["MAPEO_DEBUG"] = "yes"
        os.environ["MAPEO_WATCH"] = "off"
        os.environ["MAPEO_WATCH_DEBOUNCE_SECONDS"] = "0.25"
        os.environ["MAPEO_CORS_ORIGINS"] = "http://a.test, http://b.test"
        os.environ["MAPEO_PUBLIC_PORT"] = "5000"

        settings = settings_from_env()
        self.assertEqual(settings.config_dir, Path("/srv/config"))
        self.assertTrue(settings.debug)
        self.assertFalse(settings.watch)
        self.assertEqual(settings.watch_debounce_seconds, 0.25)
        self.assertEqual(settings.cors_origins, ["http://a.test", "http://b.test"])
        self.assertEqual(settings.public_port, 5000)
        self.assertEqual(settings.icons_dir, Path("/srv/config/icons"))

    def test_bad_debounce_falls_back(self) -> None:
        os.environ["MAPEO_WATCH_DEBOUNCE_SECONDS"] = "soon"
        self.assertEqual(settings_from_env().watch_debounce_seconds, 1.0)


if __name__ == "__main__":
    unittest.main()
