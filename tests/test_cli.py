import json
from pathlib import Path

from typer.testing import CliRunner

from jsscribe.cli import app

runner = CliRunner()

SOURCE = """class Greeter {
    hello(name) {
        return name;
    }
}
function add(a, b) { return a + b; }
"""


def write_source(tmp_path: Path, name: str = "greeter.js", text: str = SOURCE) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_app_has_scan_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "scan" in result.stdout


def test_app_has_kinds_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "kinds" in result.stdout


def test_scan_command_requires_file():
    result = runner.invoke(app, ["scan"])

    assert result.exit_code != 0


def test_scan_outputs_valid_json_with_flag(tmp_path):
    path = write_source(tmp_path)

    result = runner.invoke(app, ["scan", "--json", str(path)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [entry["kind"] for entry in data] == ["class", "method", "function"]
    assert data[1]["class"] == "Greeter"
    assert data[2]["line"] == 6


def test_scan_outputs_table_by_default(tmp_path):
    path = write_source(tmp_path)

    result = runner.invoke(app, ["scan", str(path)])

    assert result.exit_code == 0
    assert "Kind" in result.stdout
    assert "Line" in result.stdout
    assert "method" in result.stdout


def test_scan_missing_file(tmp_path):
    result = runner.invoke(app, ["scan", str(tmp_path / "missing.js")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_scan_unsupported_file(tmp_path):
    path = write_source(tmp_path, name="notes.txt")

    result = runner.invoke(app, ["scan", str(path)])

    assert result.exit_code == 1
    assert "Unsupported file type" in result.output


def test_scan_syntax_error(tmp_path):
    path = write_source(tmp_path, text="function broken( {\n")

    result = runner.invoke(app, ["scan", str(path)])

    assert result.exit_code == 1
    assert "syntax error" in result.output or "missing" in result.output


def test_kinds_reports_full_coverage(tmp_path):
    path = write_source(tmp_path)

    result = runner.invoke(app, ["kinds", str(path)])

    assert result.exit_code == 0
    assert "All node kinds are covered." in result.stdout


def test_verbose_flag_is_accepted(tmp_path):
    path = write_source(tmp_path)

    result = runner.invoke(app, ["--verbose", "scan", "--json", str(path)])

    assert result.exit_code == 0


def test_version_option():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "jsscribe version" in result.stdout
