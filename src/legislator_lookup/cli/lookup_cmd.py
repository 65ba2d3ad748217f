"""CLI command for resolving an address to its state legislators."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Annotated

import typer

if TYPE_CHECKING:
    from legislator_lookup.lib.legislators import Legislator


def lookup(
    address: Annotated[str, typer.Argument(help="Freeform postal address")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the API response body as JSON")] = False,
    template: Annotated[
        str | None,
        typer.Option("--template", help="Outreach message containing a {{handles}} placeholder"),
    ] = None,
) -> None:
    """Look up the state legislators representing an address."""
    from legislator_lookup.services.legislator_lookup_service import LookupFailure

    try:
        legislators = asyncio.run(_lookup_impl(address))
    except LookupFailure as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e

    if as_json:
        from legislator_lookup.schemas.legislator import LegislatorLookupResponse, LegislatorResponse

        body = LegislatorLookupResponse(legislators=[LegislatorResponse.from_legislator(leg) for leg in legislators])
        typer.echo(body.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    else:
        _print_legislators(legislators)

    if template is not None:
        from legislator_lookup.lib.outreach import compose_message, twitter_intent_url

        message = compose_message(template, legislators)
        typer.echo(f"\nMessage: {message}")
        typer.echo(f"Share: {twitter_intent_url(message)}")


async def _lookup_impl(address: str) -> list[Legislator]:
    """Async implementation of the lookup command."""
    from legislator_lookup.core.config import get_settings
    from legislator_lookup.lib.geocoder import get_configured_geocoder
    from legislator_lookup.lib.officials import get_configured_provider
    from legislator_lookup.services.legislator_lookup_service import lookup_legislators

    settings = get_settings()
    geocoder = get_configured_geocoder(settings)
    if geocoder is None:
        typer.echo("OPENCAGE_API_KEY not configured", err=True)
        raise typer.Exit(code=1)
    provider = get_configured_provider(settings)
    if provider is None:
        typer.echo("OPEN_STATES_API_KEY not configured", err=True)
        raise typer.Exit(code=1)

    try:
        return await lookup_legislators(address, geocoder, provider)
    finally:
        await provider.close()
        await geocoder.close()


def _print_legislators(legislators: list[Legislator]) -> None:
    if not legislators:
        typer.echo("No state legislators found for this location.")
        return

    typer.echo(f"Found {len(legislators)} state legislator(s):")
    for leg in legislators:
        typer.echo(f"  {leg.name} ({leg.party or 'Unknown'}) - {leg.chamber_label} district {leg.district}")
        for entry in leg.social:
            typer.echo(f"      {entry.platform}: {entry.handle or entry.url}")
