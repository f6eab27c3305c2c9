"""redpill-models CLI entry point."""
from __future__ import annotations

import json
import logging
import sys

import click

from redpill_models import __version__
from redpill_models.cache import discover_models
from redpill_models.catalog import (
    IMAGE,
    get_catalog_entry,
    list_catalog,
    to_model_definition,
)
from redpill_models.catalog.types import CatalogEntry
from redpill_models.config import RedpillConfig
from redpill_models.errors import ConfigurationError
from redpill_models.validation import load_catalog


def _format_entry(entry: CatalogEntry) -> str:
    flags = []
    if entry.reasoning:
        flags.append("reasoning")
    if entry.supports_vision:
        flags.append("vision")
    line = (
        f"{entry.id:<42} ctx={entry.context_window:<8} "
        f"max={entry.max_tokens:<7} {entry.name}"
    )
    if flags:
        line += f"  [{', '.join(flags)}]"
    return line


@click.group()
@click.version_option(version=__version__, prog_name="redpill-models")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Redpill AI GPU TEE model catalog."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@cli.command(name="list")
@click.option("--reasoning", is_flag=True, help="Only reasoning models")
@click.option("--vision", is_flag=True, help="Only models accepting images")
@click.option("--json", "as_json", is_flag=True, help="Emit model definitions as JSON")
def list_command(reasoning: bool, vision: bool, as_json: bool) -> None:
    """List catalog models."""
    entries = list_catalog(
        reasoning=True if reasoning else None,
        modality=IMAGE if vision else None,
    )
    if as_json:
        wanted = {e.id for e in entries}
        payload = [m.to_dict() for m in discover_models() if m.id in wanted]
        click.echo(json.dumps(payload, indent=2))
        return
    for entry in entries:
        click.echo(_format_entry(entry))


@cli.command()
@click.argument("model_id")
@click.option("--json", "as_json", is_flag=True, help="Emit the model definition as JSON")
def show(model_id: str, as_json: bool) -> None:
    """Show details for a single model."""
    entry = get_catalog_entry(model_id)
    if entry is None:
        click.echo(f"Unknown model: {model_id}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(to_model_definition(entry).to_dict(), indent=2))
        return

    click.echo(f"ID:             {entry.id}")
    click.echo(f"Name:           {entry.name}")
    click.echo(f"Context window: {entry.context_window}")
    click.echo(f"Max tokens:     {entry.max_tokens}")
    click.echo(f"Input:          {', '.join(entry.input)}")
    click.echo(f"Reasoning:      {'yes' if entry.reasoning else 'no'}")


@cli.command()
def default() -> None:
    """Print the default model reference."""
    try:
        config = RedpillConfig.from_env()
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    click.echo(config.default_model_ref)


@cli.command()
@click.argument("catalog_file", type=click.Path(exists=True))
def validate(catalog_file: str) -> None:
    """Validate a JSON catalog file."""
    try:
        entries = load_catalog(catalog_file)
    except ConfigurationError as exc:
        click.echo(f"Invalid catalog: {exc}", err=True)
        sys.exit(1)
    click.echo(f"OK: {len(entries)} entries")
