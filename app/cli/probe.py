"""CLI command probing both upstream providers."""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from app.services.status import probe_status


@click.command("probe-upstreams")
@with_appcontext
def probe_upstreams() -> None:
    """Probe the country and currency providers and report their status codes."""

    health = probe_status(
        current_app.extensions["countries_client"],
        current_app.extensions["currency_client"],
        current_app.extensions["service_clock"],
        current_app.config.get("API_VERSION", "v1"),
    )
    click.echo(f"restcountriesapi: {health.restcountriesapi}")
    click.echo(f"currenciesapi: {health.currenciesapi}")
    if not health.healthy:
        raise click.ClickException("At least one upstream is unhealthy.")
