"""notary-ally location: find the county for a position."""

from __future__ import annotations

import click

from .common import app_context


@click.command()
@click.option("--lat", "latitude", type=float, default=None, help="Latitude. Defaults to location.latitude in config.")
@click.option("--lon", "longitude", type=float, default=None, help="Longitude. Defaults to location.longitude in config.")
@click.pass_context
def location(ctx: click.Context, latitude: float | None, longitude: float | None) -> None:
    """Find the county for the current position."""
    from notary_ally.location import FixedGeolocationProvider

    app = app_context(ctx)
    if latitude is None:
        latitude = app.config.get("location.latitude")
    if longitude is None:
        longitude = app.config.get("location.longitude")
    provider = FixedGeolocationProvider(
        float(latitude) if latitude is not None else None,
        float(longitude) if longitude is not None else None,
    )

    info = app.location_finder(provider).find()
    if info.error:
        click.echo(info.error, err=True)
        ctx.exit(1)
    click.echo(f"Latitude: {info.latitude:.4f}")
    click.echo(f"Longitude: {info.longitude:.4f}")
    click.echo(f"County: {info.county}")
