"""CLI smoke tests."""

from click.testing import CliRunner
from mdmodel_codegen.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate", "check", "json-schema", "generate-config"):
        assert command in result.output
    assert "--verbose" in result.output


def test_generate_help_lists_builder_toggle() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "-h"])

    assert result.exit_code == 0
    assert "--builders / --no-builders" in result.output
    assert "--output-dir" in result.output
