#!/usr/bin/env python3

from __future__ import annotations

import json
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]
GENERATE_SCRIPT = ROOT / "tools/config/generate_fixture.py"
DUMP_SCRIPT = ROOT / "tools/config/dump_config.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, *args],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=False,
    )


class ConfigToolsTests(unittest.TestCase):
    def test_generate_then_dump_comapeo(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "comapeo"
            result = _run(str(GENERATE_SCRIPT), "--format", "comapeo", "--out", str(out))
            self.assertEqual(result.returncode, 0, msg=result.stderr or result.stdout)
            self.assertTrue((out / "icons" / "river.svg").exists())

            dumped = _run(
                str(DUMP_SCRIPT),
                str(out),
                "--protocol",
                "http",
                "--hostname",
                "localhost",
                "--port",
                "5000",
            )
            self.assertEqual(dumped.returncode, 0, msg=dumped.stderr or dumped.stdout)
            payload = json.loads(dumped.stdout)
            self.assertEqual(payload["_format"], "comapeo")
            self.assertEqual(payload["presets"][0]["iconPath"], "http://localhost:5000/icons/airstrip.svg")

    def test_generate_legacy_summary(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "legacy"
            result = _run(str(GENERATE_SCRIPT), "--format", "legacy", "--out", str(out))
            self.assertEqual(result.returncode, 0, msg=result.stderr or result.stdout)
            self.assertTrue((out / "icons" / "river-100px.svg").exists())

            summary = _run(str(DUMP_SCRIPT), str(out), "--summary")
            self.assertEqual(summary.returncode, 0, msg=summary.stderr or summary.stdout)
            self.assertEqual(
                summary.stdout.strip(),
                "legacy: 3 preset(s), 3 field(s), 1 language(s)",
            )

    def test_generate_refuses_non_empty_directory(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            (Path(td) / "keep.txt").write_text("x", encoding="utf-8")
            result = _run(str(GENERATE_SCRIPT), "--out", td)
            self.assertEqual(result.returncode, 1)
            self.assertIn("non-empty directory", result.stdout)

    def test_dump_missing_directory_fails(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            result = _run(str(DUMP_SCRIPT), str(Path(td) / "missing"))
            self.assertEqual(result.returncode, 1)
            self.assertIn("Configuration directory not found", result.stdout)


if __name__ == "__main__":
    unittest.main()
