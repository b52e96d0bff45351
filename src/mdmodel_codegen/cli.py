"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mdmodel_codegen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from mdmodel_codegen.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_generation_run,
    load_run_settings,
    load_schema_file,
)
from mdmodel_codegen.json_schema_export import render_json_schema


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mdmodel-codegen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Generate Python data model modules from markdown schemas."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML settings template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML settings file with the defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the markdown schema",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=True,
    type=click.Path(path_type=str),
    help="Directory the generated module is written to",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML settings file",
)
@click.option(
    "--builders/--no-builders",
    default=None,
    help="Override generation.builders from the settings file.",
)
def generate_module(
    schema_path: str, output_dir: str, config_path: str | None, builders: bool | None
) -> None:
    """Generate the Python module for a markdown schema."""
    try:
        outcome = execute_generation_run(
            GenerationRequest(
                schema_path=schema_path,
                output_dir=output_dir,
                config_path=config_path,
                builders=builders,
            )
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


@cli.command(name="check")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the markdown schema",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML settings file",
)
def check_schema(schema_path: str, config_path: str | None) -> None:
    """Validate a markdown schema without writing any output."""
    try:
        document = load_schema_file(schema_path, load_run_settings(config_path))
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(
        f"{schema_path}: ok, module '{document.module_name}', "
        f"{len(document.objects)} object(s), {len(document.enums)} enum(s)"
    )


@cli.command(name="json-schema")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the markdown schema",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML settings file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write the JSON Schema to; printed when omitted",
)
def json_schema(schema_path: str, config_path: str | None, output_path: str | None) -> None:
    """Export the JSON Schema describing a markdown schema's objects."""
    try:
        document = load_schema_file(schema_path, load_run_settings(config_path))
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    rendered = render_json_schema(document)
    if output_path is None:
        click.echo(rendered, nl=False)
        return
    destination = Path(output_path)
    try:
        destination.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="mdmodel-codegen", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
