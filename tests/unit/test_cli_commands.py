import json
from pathlib import Path
import textwrap

from click.testing import CliRunner

from cssbuilder.cli import cli


def write_multi_doc_yaml(tmp_path: Path) -> Path:
    y = textwrap.dedent(
        """
        name: main-container
        tags: [layout]
        selector:
          element: div
          id: main
          classes: [container, draggable]
        ---
        name: list-items
        selector:
          left: {element: ul}
          combinator: ">"
          right: {element: li, pseudo_classes: [first-child]}
        """
    )
    p = tmp_path / "demo.yaml"
    p.write_text(y, encoding="utf-8")
    return p


def test_cli_build_simple_selector():
    runner = CliRunner()
    result = runner.invoke(cli, ["build", "--element", "a", "--attr", 'href$=".png"', "--pseudo-class", "focus"])
    assert result.exit_code == 0
    assert result.output.strip() == 'a[href$=".png"]:focus'


def test_cli_build_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["build", "--id", "main", "--class", "container", "--class", "editable", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["text"] == "#main.container.editable"
    assert data["classes"] == ["container", "editable"]


def test_cli_build_without_fragments():
    result = CliRunner().invoke(cli, ["build"])
    assert result.exit_code == 2


def test_cli_render_text(tmp_path: Path):
    wf = write_multi_doc_yaml(tmp_path)
    result = CliRunner().invoke(cli, ["render", str(wf)])
    assert result.exit_code == 0
    assert "main-container: div#main.container.draggable" in result.output
    assert "list-items: ul > li:first-child" in result.output


def test_cli_render_json_out(tmp_path: Path):
    wf = write_multi_doc_yaml(tmp_path)
    out = tmp_path / "out" / "selectors.json"
    result = CliRunner().invoke(cli, ["render", "--dir", str(tmp_path), "--format", "json", "--json-out", str(out)])
    assert result.exit_code == 0
    written = json.loads(out.read_text(encoding="utf-8"))
    assert [s["text"] for s in written["selectors"]] == ["div#main.container.draggable", "ul > li:first-child"]
    assert written["errors"] == []


def test_cli_render_reports_build_errors(tmp_path: Path):
    bad = tmp_path / "bad.yaml"
    bad.write_text(
        "name: twice\nselector:\n  fragments: [{kind: id, value: a}, {kind: id, value: b}]\n",
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["render", str(bad)])
    assert result.exit_code == 1
    assert "DuplicateFragmentError" in result.output


def test_cli_validate_with_dir(tmp_path: Path):
    write_multi_doc_yaml(tmp_path)
    result = CliRunner().invoke(cli, ["validate", "--dir", str(tmp_path), "--no-recursive"])
    assert result.exit_code == 0
    # Two OK lines for two docs
    assert result.output.count("OK  ") == 2


def test_cli_list_with_tag(tmp_path: Path):
    write_multi_doc_yaml(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["list", "--dir", str(tmp_path)])
    assert result.exit_code == 0
    assert "Found 2 selector document(s)" in result.output

    result = runner.invoke(cli, ["list", "--dir", str(tmp_path), "--tag", "layout"])
    assert "Found 1 selector document(s)" in result.output
    assert "main-container" in result.output


def test_cli_config_prints_json():
    result = CliRunner().invoke(cli, ["config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["LOG_LEVEL"] in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
