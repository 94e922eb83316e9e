"""Tests for the click CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from import_map.cli import cli

PROJECT = Path(__file__).parent / "fixtures" / "project"


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output


def test_analyze_writes_outputs(tmp_path):
    out = tmp_path / "out"
    result = CliRunner().invoke(cli, ["analyze", str(PROJECT), "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert "Runtime circular: 1" in result.output
    assert "Type-only circular: 1" in result.output
    assert (out / "import-map.json").exists()
    assert (out / "import-map-report.md").exists()
    assert (out / "import-map.html").exists()
    assert (out / "dist" / "index.html").exists()

    data = json.loads((out / "import-map.json").read_text())
    assert len(data["circular_dependencies"]) == 2


def test_analyze_no_html(tmp_path):
    result = CliRunner().invoke(cli, ["analyze", str(PROJECT), "-o", str(tmp_path), "--no-html"])
    assert result.exit_code == 0, result.output
    assert not (tmp_path / "import-map.html").exists()


def test_analyze_include_override(tmp_path):
    result = CliRunner().invoke(cli, [
        "analyze", str(PROJECT), "-o", str(tmp_path), "--include", "src/types/*.ts",
    ])
    assert result.exit_code == 0, result.output
    assert "Files: 2" in result.output


def test_analyze_missing_dir(tmp_path):
    result = CliRunner().invoke(cli, ["analyze", str(tmp_path / "missing"), "-o", str(tmp_path)])
    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_analyze_exit_code_on_file_errors(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "ok.ts").write_text("import './gone'\n", encoding="utf-8")
    (src / "dangling.ts").symlink_to(src / "nowhere.ts")

    result = CliRunner().invoke(cli, ["analyze", str(src), "-o", str(tmp_path / "out")])
    assert result.exit_code == 1
    assert (tmp_path / "out" / "import-map-errors.json").exists()


def test_imports_command():
    result = CliRunner().invoke(cli, ["imports", str(PROJECT / "src" / "main.ts")])
    assert result.exit_code == 0, result.output
    assert "./stores/user" in result.output
    assert "(unresolved)" in result.output  # ./polyfills


def test_imports_unsupported_file(tmp_path):
    f = tmp_path / "notes.txt"
    f.write_text("", encoding="utf-8")
    result = CliRunner().invoke(cli, ["imports", str(f)])
    assert result.exit_code == 1
