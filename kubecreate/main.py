#!/usr/bin/env python3
"""
kubecreate - Main Entry Point

This is the thin command-line layer that:
1. Loads configuration (environment, .env file, global flags)
2. Wires the registry, mapper, REST client and printer together
3. Runs the create commands

All business logic is in the modules, following black box principles.
"""

import functools
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import click
import httpx
from dotenv import load_dotenv

from kubecreate import __version__
from kubecreate.config.provider import EnvConfigProvider, StaticConfigProvider
from kubecreate.errors import KubeCreateError, UsageError
from kubecreate.logging_config import configure_logging
from kubecreate.modules.client import ClientFactory
from kubecreate.modules.command import (
    CreateCommand,
    CreateOptions,
    create_namespace,
    create_secret_docker_registry,
    default_mapper,
)
from kubecreate.modules.generator import default_registry
from kubecreate.printers import OUTPUT_FORMATS, ClickPrinter

logger = logging.getLogger("kubecreate.main")

DEFAULT_DOCKER_SERVER = "https://index.docker.io/v1/"


@dataclass
class AppContext:
    """State shared by every subcommand of one CLI invocation."""

    config: StaticConfigProvider
    transport: Optional[httpx.BaseTransport] = None


def handle_errors(func):
    """Convert library errors into click errors with a non-zero exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UsageError as e:
            raise click.UsageError(str(e)) from e
        except KubeCreateError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def generate_options(func):
    """Options shared by every generator-backed create command."""
    func = click.option(
        "--output",
        "-o",
        type=click.Choice(OUTPUT_FORMATS),
        default=None,
        help="Print the resulting object in this format instead of a success message.",
    )(func)
    func = click.option(
        "--dry-run",
        is_flag=True,
        default=False,
        help="If true, only print the object that would be sent, without sending it.",
    )(func)
    func = click.option("--generator", default="", help="The name of the API generator to use.")(func)
    return func


def flag_values(params: Dict[str, Any]) -> Dict[str, Any]:
    """click parameter values keyed by their dashed flag names."""
    return {key.replace("_", "-"): value for key, value in params.items()}


def build_command(ctx: click.Context) -> CreateCommand:
    app: AppContext = ctx.obj
    rest = ClientFactory.build(app.config, transport=app.transport)
    ctx.call_on_close(rest.close)
    return CreateCommand(default_registry(), default_mapper(), rest, ClickPrinter())


def build_options(ctx: click.Context, args, generator: str, dry_run: bool, output: Optional[str]) -> CreateOptions:
    app: AppContext = ctx.obj
    return CreateOptions(
        args=list(args),
        flags=flag_values(ctx.params),
        generator=generator,
        dry_run=dry_run,
        namespace=app.config.get_cli_config().namespace,
        output=output or "",
    )


@click.group()
@click.version_option(__version__, prog_name="kubecreate")
@click.option("--server", default=None, help="Address of the API server.")
@click.option("--token", default=None, help="Bearer token for authentication to the API server.")
@click.option("--namespace", "-n", default=None, help="Namespace scope for this request.")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR).")
@click.pass_context
def cli(ctx: click.Context, server, token, namespace, log_level):
    """Generate API objects and submit them to the API server."""
    load_dotenv()

    transport = ctx.obj.get("transport") if isinstance(ctx.obj, dict) else None

    provider = EnvConfigProvider()
    try:
        client_config = provider.get_client_config()
        cli_config = provider.get_cli_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if server:
        client_config = replace(client_config, server=server)
    if token:
        client_config = replace(client_config, token=token)
    if namespace:
        cli_config = replace(cli_config, namespace=namespace)
    if log_level:
        cli_config = replace(cli_config, log_level=log_level.upper())

    configure_logging(cli_config.log_level)
    logger.debug(f"Using server {client_config.base_url}, namespace {cli_config.namespace}")

    ctx.obj = AppContext(config=StaticConfigProvider(client_config, cli_config), transport=transport)


@cli.group()
def create():
    """Create a resource from generator parameters."""


@create.command("namespace")
@click.argument("args", nargs=-1)
@generate_options
@click.pass_context
@handle_errors
def namespace_command(ctx: click.Context, args, generator, dry_run, output):
    """
    Create a namespace with the specified name.

    \b
    Example:
      # Create a new namespace named my-namespace
      $ kubecreate create namespace my-namespace
    """
    command = build_command(ctx)
    create_namespace(command, build_options(ctx, args, generator, dry_run, output))


create.add_command(namespace_command, name="ns")


@create.group()
def secret():
    """Create a secret using a specified subcommand."""


@secret.command("docker-registry")
@click.argument("args", nargs=-1)
@click.option("--docker-username", default=None, help="Username for Docker registry authentication.")
@click.option("--docker-password", default=None, help="Password for Docker registry authentication.")
@click.option("--docker-email", default=None, help="Email for Docker registry.")
@click.option(
    "--docker-server",
    default=DEFAULT_DOCKER_SERVER,
    show_default=True,
    help="Server location for Docker registry.",
)
@generate_options
@click.pass_context
@handle_errors
def docker_registry_command(
    ctx: click.Context,
    args,
    docker_username,
    docker_password,
    docker_email,
    docker_server,
    generator,
    dry_run,
    output,
):
    """
    Create a new secret for use with Docker registries.

    \b
    Example:
      # Create a new dockercfg secret named my-secret
      $ kubecreate create secret docker-registry my-secret \\
          --docker-server=DOCKER_REGISTRY_SERVER --docker-username=DOCKER_USER \\
          --docker-password=DOCKER_PASSWORD --docker-email=DOCKER_EMAIL
    """
    command = build_command(ctx)
    create_secret_docker_registry(command, build_options(ctx, args, generator, dry_run, output))


def main():
    cli()


if __name__ == "__main__":
    main()
