"""Tests for ``rbglue implementors`` commands."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from typer.testing import CliRunner

from rbglue.cli import app
from rbglue.implementors.fragment import FRAGMENT_HEADER, read_fragment

runner = CliRunner()

FIXTURE = Path(__file__).parent.parent / "fixtures" / "implementors" / "trait.FromStr.js"


class TestShow:
    def test_json(self):
        result = runner.invoke(app, ["implementors", "show", str(FIXTURE), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert sorted(data)[0] == "chrono"
        assert data["log"][0] == {
            "text": "impl FromStr for Level",
            "synthetic": False,
            "types": [],
        }

    def test_table(self):
        result = runner.invoke(app, ["implementors", "show", str(FIXTURE)])
        assert result.exit_code == 0, result.output
        assert "uuid" in result.output
        assert "clap" in result.output

    def test_empty_fragment(self, tmp_path):
        path = tmp_path / "trait.Empty.js"
        path.write_text(FRAGMENT_HEADER)
        result = runner.invoke(app, ["implementors", "show", str(path)])
        assert result.exit_code == 0
        assert "No items." in result.output

    def test_malformed_fragment(self, tmp_path):
        path = tmp_path / "trait.Bad.js"
        path.write_text("implementors[crate] = nonsense\n")
        result = runner.invoke(app, ["implementors", "show", str(path)])
        assert result.exit_code == 1
        assert "PARSE" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["implementors", "show", str(tmp_path / "absent.js")])
        assert result.exit_code != 0


class TestAdd:
    def test_creates_fragment(self, tmp_path):
        result = runner.invoke(
            app,
            [
                "implementors", "add", str(tmp_path), "core::str::FromStr", "spinoso_time",
                "impl FromStr for Offset",
            ],
        )
        assert result.exit_code == 0, result.output
        path = tmp_path / "implementors" / "core" / "str" / "trait.FromStr.js"
        assert path.is_file()
        assert "(1 crates)" in result.output
        table = read_fragment(path)
        assert [i.text for i in table["spinoso_time"]] == ["impl FromStr for Offset"]

    def test_replaces_existing_crate(self, tmp_path):
        path = tmp_path / "implementors" / "core" / "str" / "trait.FromStr.js"
        path.parent.mkdir(parents=True)
        shutil.copy(FIXTURE, path)

        result = runner.invoke(
            app,
            [
                "implementors", "add", str(tmp_path), "core::str::FromStr", "log",
                "impl FromStr for Level", "impl FromStr for Record<'_>", "--synthetic",
            ],
        )
        assert result.exit_code == 0, result.output
        table = read_fragment(path)
        assert [i.signature for i in table["log"]] == [
            "impl FromStr for Level",
            "impl FromStr for Record<'_>",
        ]
        assert all(i.synthetic for i in table["log"])
        assert table["log"][1].text == "impl FromStr for Record&lt;'_&gt;"
        assert len(table["chrono"]) == 8

    def test_empty_trait_path(self, tmp_path):
        result = runner.invoke(app, ["implementors", "add", str(tmp_path), "", "log", "impl X"])
        assert result.exit_code == 1


class TestPath:
    def test_prints_path(self, tmp_path):
        result = runner.invoke(app, ["implementors", "path", str(tmp_path), "core::str::FromStr"])
        assert result.exit_code == 0
        expected = tmp_path / "implementors" / "core" / "str" / "trait.FromStr.js"
        assert result.output.strip() == str(expected)

    def test_single_segment(self, tmp_path):
        result = runner.invoke(app, ["implementors", "path", str(tmp_path), "Display"])
        assert result.exit_code == 0
        assert result.output.strip() == str(tmp_path / "implementors" / "trait.Display.js")
