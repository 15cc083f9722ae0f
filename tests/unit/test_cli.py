"""Tests for CLI commands."""

import io

import pytest
from click.testing import CliRunner

from monogrid.cli import cli, load_records

CSV_INPUT = "name,qty\napple,3\nkiwi,12\n"


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self, runner: CliRunner) -> None:
        """Test CLI help message."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "monogrid fixed-width table rendering CLI" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        """Test render command help."""
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--border" in result.output
        assert "--pack" in result.output
        assert "--max-width" in result.output
        assert "--transpose" in result.output

    def test_borders(self, runner: CliRunner) -> None:
        """Test listing border presets."""
        result = runner.invoke(cli, ["borders"])
        assert result.exit_code == 0
        names = result.output.split()
        assert "classic" in names
        assert "markdown" in names
        assert names == sorted(names)


class TestRender:
    """Test the render command."""

    def test_csv_packed(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--max-width", "80"], input=CSV_INPUT)
        assert result.exit_code == 0
        assert result.output == (
            "+-------+-----+\n"
            "|  name | qty |\n"
            "+-------+-----+\n"
            "| apple | 3   |\n"
            "| kiwi  | 12  |\n"
            "+-------+-----+\n"
        )

    def test_csv_unpacked(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--no-pack", "--column-width", "6"], input=CSV_INPUT
        )
        assert result.exit_code == 0
        assert result.output.split("\n")[3] == "| apple  | 3      |"

    def test_json_markdown(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "--format", "json", "--border", "markdown", "--max-width", "80"],
            input='[{"a": 1, "b": true}]',
        )
        assert result.exit_code == 0
        assert result.output == "| a |   b  |\n|---|------|\n| 1 | True |\n"

    def test_json_missing_fields_render_blank(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "--format", "json", "--max-width", "80", "--header-frequency", "none"],
            input='[{"a": 1}, {"b": 2}]',
        )
        assert result.exit_code == 0
        assert result.output.split("\n")[:2] == ["| 1 |   |", "|   | 2 |"]

    def test_transpose(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--transpose", "--max-width", "80"], input=CSV_INPUT
        )
        assert result.exit_code == 0
        assert result.output == (
            "+------+-------+------+\n"
            "|      | apple | kiwi |\n"
            "+------+-------+------+\n"
            "| name | apple | kiwi |\n"
            "|  qty | 3     | 12   |\n"
            "+------+-------+------+\n"
        )

    def test_shrinks_to_max_width(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--max-width", "12", "--header-frequency", "none"], input=CSV_INPUT
        )
        assert result.exit_code == 0
        assert all(len(line) <= 12 for line in result.output.splitlines())

    def test_border_from_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "--max-width", "80"],
            input=CSV_INPUT,
            env={"MONOGRID_BORDER": "modern"},
        )
        assert result.exit_code == 0
        assert result.output.startswith("┌───────┬─────┐")

    def test_option_overrides_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "--max-width", "80", "--border", "markdown"],
            input=CSV_INPUT,
            env={"MONOGRID_BORDER": "modern"},
        )
        assert result.exit_code == 0
        assert result.output.startswith("|  name | qty |\n")

    def test_column_width_from_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--no-pack"], input=CSV_INPUT, env={"MONOGRID_COLUMN_WIDTH": "6"}
        )
        assert result.exit_code == 0
        assert result.output.split("\n")[3] == "| apple  | 3      |"

    def test_invalid_column_width_in_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render"], input=CSV_INPUT, env={"MONOGRID_COLUMN_WIDTH": "wide"}
        )
        assert result.exit_code == 1
        assert "✗ Invalid MONOGRID_COLUMN_WIDTH 'wide'" in result.output

    def test_invalid_header_frequency(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--header-frequency", "0"], input=CSV_INPUT)
        assert result.exit_code == 1
        assert "✗ Invalid header frequency 0" in result.output

    def test_unparseable_header_frequency(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--header-frequency", "often"], input=CSV_INPUT)
        assert result.exit_code == 2

    def test_invalid_truncation_indicator(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--truncation-indicator", "..."], input=CSV_INPUT
        )
        assert result.exit_code == 1
        assert "truncation indicator" in result.output

    def test_unknown_border(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--border", "double"], input=CSV_INPUT)
        assert result.exit_code == 2

    def test_json_must_be_array_of_objects(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--format", "json"], input='{"a": 1}')
        assert result.exit_code == 1
        assert "array of objects" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--format", "json"], input="[{")
        assert result.exit_code == 1
        assert "Invalid JSON input" in result.output

    def test_empty_input(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"], input="")
        assert result.exit_code == 0
        assert result.output == ""


class TestLoadRecords:
    """Test reading input records."""

    def test_csv(self) -> None:
        fields, records = load_records(io.StringIO(CSV_INPUT), "csv")
        assert fields == ["name", "qty"]
        assert records == [{"name": "apple", "qty": "3"}, {"name": "kiwi", "qty": "12"}]

    def test_json_field_order(self) -> None:
        fields, records = load_records(io.StringIO('[{"b": 1}, {"a": 2, "b": 3}]'), "json")
        assert fields == ["b", "a"]
        assert records == [{"b": 1, "a": ""}, {"b": 3, "a": 2}]
