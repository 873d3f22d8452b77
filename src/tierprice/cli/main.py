"""
CLI: quote a net amount for a tier, list the recognized tiers.
Extra tiers come from TIERPRICE_EXTRA_TIERS and repeated --extra-tier name:rate options.
"""
from typing import List, Optional

import typer

from tierprice.core.config import Settings, parse_tiers
from tierprice.domain.errors import TierPriceError
from tierprice.main import create_app
from tierprice.pricing import CalculateNetAmount, ListTiers

app = typer.Typer(help="tierprice CLI: tier-based discount quotes.")

_EXTRA_TIER_HELP = "Additional tier as name:rate (repeatable), e.g. diamond:0.4"


def _build_app(extra_tier: Optional[List[str]]):
    settings = Settings.from_env()
    if extra_tier:
        settings.extra_tiers = [*settings.extra_tiers, *parse_tiers(",".join(extra_tier))]
    return create_app(settings)


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


@app.command()
def quote(
    total: str = typer.Argument(..., help="Total amount (non-negative decimal)"),
    tier: str = typer.Argument(..., help="Tier name (case-insensitive)"),
    extra_tier: Optional[List[str]] = typer.Option(None, "--extra-tier", "-x", help=_EXTRA_TIER_HELP),
) -> None:
    """Print total, discount and net amount for TOTAL under TIER."""
    try:
        result = _build_app(extra_tier).execute(CalculateNetAmount(total_amount=total, tier=tier))
    except (TierPriceError, ValueError) as e:
        _fail(e)
        return
    typer.echo(f"tier:     {result.tier} (rate {result.rate})")
    typer.echo(f"total:    {result.total_amount}")
    typer.echo(f"discount: {result.discount_amount}")
    typer.echo(f"net:      {result.net_amount}")


@app.command()
def tiers(
    extra_tier: Optional[List[str]] = typer.Option(None, "--extra-tier", "-x", help=_EXTRA_TIER_HELP),
) -> None:
    """List recognized tiers and their rates."""
    try:
        rows = _build_app(extra_tier).execute(ListTiers())
    except (TierPriceError, ValueError) as e:
        _fail(e)
        return
    for row in rows:
        typer.echo(f"{row['name']}\t{row['rate']}")


def main() -> None:
    """Entry point for the tierprice console command."""
    app()


if __name__ == "__main__":
    main()
