"""Command line entry point: ``fundraiser``."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import click

from fundraiser.domain.exceptions import DomainException
from fundraiser.infrastructure import bootstrap
from fundraiser.infrastructure.config import Settings, load_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="INI file with fundraiser settings.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Fundraiser shirt orders"""
    settings = load_settings(config_path)
    _configure_logging(settings.logging.level)
    ctx.obj = settings


@cli.command("serve")
@click.option("--host", default=None, help="Interface to bind (overrides config).")
@click.option("--port", default=None, type=int, help="Port to listen on (overrides config).")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the order form web server."""
    import uvicorn

    from fundraiser.infrastructure.web.app import create_app

    try:
        app = create_app(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    bind_host = host or settings.server.host
    bind_port = port or settings.server.port
    click.echo(f"Server running on port {bind_port}")
    uvicorn.run(app, host=bind_host, port=bind_port, log_level=settings.logging.level.lower())


@cli.command("init-ledger")
@click.pass_obj
def init_ledger(settings: Settings) -> None:
    """Create the order ledger with its header row if it is missing."""
    ledger = bootstrap.order_ledger(settings)

    try:
        ledger.ensure_initialized()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Ledger {ledger.export_path()} holds {ledger.count()} order(s).")


@cli.command("export")
@click.option(
    "--output",
    required=True,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Where to write the CSV copy.",
)
@click.pass_obj
def export(settings: Settings, output: Path) -> None:
    """Copy the order ledger to OUTPUT."""
    handler = bootstrap.export_ledger_handler(bootstrap.order_ledger(settings))

    try:
        source = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    output.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, output)
    click.echo(f"Exported {source} to {output}")
