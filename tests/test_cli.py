from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from svgflat_core.cli import EXIT_INPUT, EXIT_MALFORMED, main


class CliTests(unittest.TestCase):
    def _run(self, argv: list[str]) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_dump_prints_primitives_as_json(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "icon.svg"
            path.write_text(
                '<svg width="20" height="20" viewBox="0 0 10 10">'
                '<rect width="2" height="3" fill="red"/><path d="M0 0" stroke="blue"/></svg>',
                encoding="utf-8",
            )
            code, out = self._run(["dump", str(path)])
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual([item["type"] for item in payload], ["rect", "path"])
        self.assertEqual(payload[0]["fill_color"], "red")
        self.assertNotIn("stroke_color", payload[0])
        self.assertEqual(payload[0]["matrix"][0], 2.0)
        self.assertEqual(payload[1]["d"], "M0 0")

    def test_stats_counts_kinds(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "icon.svg"
            path.write_text("<svg><rect/><circle/><circle/></svg>", encoding="utf-8")
            code, out = self._run(["stats", str(path)])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), {"circle": 2, "path": 0, "rect": 1, "total": 3})

    def test_config_file_is_applied(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            svg = Path(td) / "icon.svg"
            svg.write_text('<svg><rect opacity="0"/></svg>', encoding="utf-8")
            cfg = Path(td) / "svgflat.toml"
            cfg.write_text("[converter]\nzero_as_unset = true\n", encoding="utf-8")
            code, out = self._run(["dump", str(svg), "--config", str(cfg), "--indent", "0"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)[0]["opacity"], 1.0)

    def test_malformed_document_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "broken.svg"
            path.write_text("<svg><rect></svg>", encoding="utf-8")
            with self.assertLogs("svgflat_core.cli", level="WARNING"):
                code, out = self._run(["dump", str(path)])
        self.assertEqual(code, EXIT_MALFORMED)
        self.assertEqual(out, "")

    def test_log_level_follows_the_subcommand(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "icon.svg"
            path.write_text("<svg><rect/></svg>", encoding="utf-8")
            code, out = self._run(["stats", str(path), "--log-level", "DEBUG"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["total"], 1)

    def test_missing_svg_file_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertLogs("svgflat_core.cli", level="WARNING"):
                code, out = self._run(["dump", str(Path(td) / "missing.svg")])
        self.assertEqual(code, EXIT_INPUT)
        self.assertEqual(out, "")

    def test_invalid_config_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            svg = Path(td) / "icon.svg"
            svg.write_text("<svg><rect/></svg>", encoding="utf-8")
            cfg = Path(td) / "svgflat.toml"
            cfg.write_text("[converter]\ndefault_opacity = \"x\"\n", encoding="utf-8")
            with self.assertLogs("svgflat_core.cli", level="WARNING"):
                code, out = self._run(["dump", str(svg), "--config", str(cfg)])
            with self.assertLogs("svgflat_core.cli", level="WARNING"):
                missing, _ = self._run(["stats", str(svg), "--config", str(Path(td) / "none.toml")])
        self.assertEqual(code, EXIT_INPUT)
        self.assertEqual(missing, EXIT_INPUT)
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
