"""Tests for the framesmith click commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from framesmith.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestConvert:
    def test_fixture_to_json(self, runner):
        result = runner.invoke(
            cli, ["convert", str(FIXTURES / "card.html"), "--css", str(FIXTURES / "card.css")]
        )
        assert result.exit_code == 0, result.output
        tree = json.loads(result.stdout)
        assert tree["name"] == "Generated UI"
        assert tree["children"][0]["name"] == "body"
        assert "UI Generated Successfully!" in result.stderr

    def test_output_file(self, runner, tmp_path):
        out = tmp_path / "tree.json"
        result = runner.invoke(cli, ["convert", str(FIXTURES / "card.html"), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["type"] == "container"

    def test_json_tree_input(self, runner):
        result = runner.invoke(cli, ["convert", str(FIXTURES / "card.json"), "--json-tree"])
        assert result.exit_code == 0, result.output
        tree = json.loads(result.stdout)
        assert [c["name"] for c in tree["children"]] == ["div", "span"]
        assert "malformed_node" not in result.stdout
        assert "Skipping invalid node: 42" in result.stderr

    def test_invalid_json_tree(self, runner, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        result = runner.invoke(cli, ["convert", str(bad), "--json-tree"])
        assert result.exit_code == 1
        assert "invalid JSON tree" in result.stderr

    def test_css_parse_error_exits_nonzero(self, runner, tmp_path):
        css = tmp_path / "broken.css"
        css.write_text("@media print")
        result = runner.invoke(cli, ["convert", str(FIXTURES / "card.html"), "--css", str(css)])
        assert result.exit_code == 1
        assert "could not parse css" in result.stderr

    def test_options_feed_config(self, runner, tmp_path):
        page = tmp_path / "page.html"
        page.write_text("hello")
        result = runner.invoke(cli, ["convert", str(page), "--font-family", "Roboto", "--padding", "4"])
        tree = json.loads(result.stdout)
        assert tree["padding"] == [4, 4, 4, 4]
        assert tree["children"][0]["font"] == {"family": "Roboto", "style": "Regular"}


class TestStyles:
    def test_lists_rules(self, runner):
        result = runner.invoke(cli, ["styles", str(FIXTURES / "card.css")])
        assert result.exit_code == 0, result.output
        assert "Selectors: 6" in result.output
        assert "    gap: 10px" in result.output

    def test_reports_diagnostics(self, runner, tmp_path):
        css = tmp_path / "x.css"
        css.write_text("ul li { color: red; }")
        result = runner.invoke(cli, ["styles", str(css)])
        assert "will never match" in result.output

    def test_parse_error(self, runner, tmp_path):
        css = tmp_path / "x.css"
        css.write_text("p { color: red; }\n@import")
        result = runner.invoke(cli, ["styles", str(css)])
        assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "framesmith" in result.output
