import json
import logging
import sys
from pathlib import Path

import click

from .pipeline import AtomicWriter, GenerateSettings, JsonSchemaGenError, PipelineGenerator


def read_schema_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def load_settings(config: str | None) -> GenerateSettings:
    if config is None:
        return GenerateSettings()
    with open(config, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise click.ClickException(f"Config file {config} must contain a JSON object")
    return GenerateSettings.from_dict(data)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(resolve_path=True), help="JSON file with generation settings")
@click.option(
    "--deny-invalid-unknown-json-schema",
    is_flag=True,
    default=False,
    help="Fail with every invalid or unsupported schema construct instead of skipping them",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details to stderr")
@click.argument("path", default="-", type=str)
@click.argument("output", required=False, default=None, type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_to_rust(config, deny_invalid_unknown_json_schema, verbose, path, output):
    """Generate Rust structs from the JSON Schema at PATH (stdin when omitted or "-")."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(config)

        # CLI flag overrides config file if set
        if deny_invalid_unknown_json_schema:
            settings.deny_invalid_unknown_json_schema = True

        out = PipelineGenerator(read_schema_text(path), settings).generate()

        if output is None:
            click.echo(out, nl=False)
        else:
            AtomicWriter().write(Path(output), out)
    except (JsonSchemaGenError, OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    json_schema_to_rust()
