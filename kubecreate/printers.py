"""
Output of command results.

ClickPrinter writes through click.echo so the CLI and tests (CliRunner)
share one output path.
"""

import json
from typing import IO, Optional

import click
import yaml

from .modules.api.models import APIObject
from .modules.command.mapper import ResourceMapping

OUTPUT_FORMATS = ("json", "yaml", "name")


class ClickPrinter:
    """Prints objects and success messages to a click output stream."""

    def __init__(self, out: Optional[IO[str]] = None):
        self.out = out

    def print_object(self, obj: APIObject, mapping: ResourceMapping, output_format: str) -> None:
        if output_format == "json":
            text = json.dumps(obj.to_wire(), indent=2)
        elif output_format == "yaml":
            text = yaml.safe_dump(obj.to_wire(), default_flow_style=False, sort_keys=False).rstrip("\n")
        elif output_format == "name":
            text = f"{mapping.resource}/{obj.name}"
        else:
            raise click.UsageError(
                f"unknown output format {output_format!r}, expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        click.echo(text, file=self.out)

    def print_success(
        self,
        mapping: ResourceMapping,
        dry_run: bool,
        resource: str,
        name: str,
        verb: str,
    ) -> None:
        suffix = " (dry run)" if dry_run else ""
        click.echo(f'{resource} "{name}" {verb}{suffix}', file=self.out)
